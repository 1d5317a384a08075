from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoinChangeProblem(object):
    """
    One input record: count the changes of `amount` made of
    `min_len` to `max_len` coins.
    """
    amount: int
    min_len: int = 0
    max_len: int = 0

    def __str__(self):
        return f'${self.amount} with combination range ({self.min_len},{self.max_len})'
