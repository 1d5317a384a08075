from __future__ import annotations

from typing import Optional

from logzero import logger


# A length-count vector: `vector[l]` is the number of combinations made of
# exactly `l` coins.
LengthCounts = list[int]


def sum_shifted(a: LengthCounts, b: LengthCounts) -> LengthCounts:
    """
    Add `b` to `a` at an offset of one, i.e., every combination counted by
    `b` takes one more coin.

    :param a LengthCounts: the counts without the current coin
    :param b LengthCounts: the counts at the reduced amount, with the current coin
    :rtype LengthCounts: a new vector of size `len(a)`
    """
    if len(a) < len(b) + 1:
        raise ValueError(
            f'Cannot shift a vector of size {len(b)} into one of size {len(a)}'
        )
    res = list(a)
    for length, count in enumerate(b, start=1):
        res[length] += count
    return res


class LengthCountTable(object):
    """
    The dynamic programming table for counting coin combinations by length.

    The row axis is the number of coins considered, where row 0 has no coin
    at all. The column axis is the sub-amount in [0..target].
    Each cell is a length-count vector of size `col + 1`, e.g.,
    [0, 2, 1] is 0 combination of length 0, 2 of length 1 and 1 of length 2.
    """

    def __init__(self, coins: list[int], target: int):
        self.coins: list[int] = list(coins)
        self.target: int = target
        self.n_rows: int = len(self.coins) + 1
        self._cells: list[list[Optional[LengthCounts]]] = [
            [None] * (target + 1) for _ in range(self.n_rows)
        ]
        self._built: bool = False

    def cell(self, row: int, col: int) -> LengthCounts:
        vector = self._cells[row][col]
        if vector is None:
            raise LookupError(f'Cell ({row}, {col}) has not been computed')
        return vector

    def reuse_source(self, row: int, col: int) -> Optional[tuple[int, int]]:
        """
        The cell in the same row that (row, col) is derived from, or None if
        the coin of this row is larger than `col`.
        """
        rest = col - self.coins[row - 1]
        if rest < 0:
            return None
        return row, rest

    def _init_base_row(self):
        # no coin: only the empty combination of amount 0
        self._cells[0][0] = [1]
        for col in range(1, self.target + 1):
            self._cells[0][col] = [0] * (col + 1)

    def _compute_cell(self, row: int, col: int) -> LengthCounts:
        prev = self.cell(row - 1, col)
        source = self.reuse_source(row, col)
        if source is None:
            return list(prev)
        return sum_shifted(prev, self.cell(*source))

    def build(self) -> LengthCountTable:
        if self._built:
            return self
        logger.debug('Build length-count table: %s rows x %s columns',
                     self.n_rows, self.target + 1)
        self._init_base_row()
        for row in range(1, self.n_rows):
            # increasing columns, the reuse source is always on the left
            for col in range(self.target + 1):
                self._cells[row][col] = self._compute_cell(row, col)
        self._built = True
        return self

    def distribution(self) -> LengthCounts:
        return self.cell(self.n_rows - 1, self.target)

    def totals(self, col: int) -> list[int]:
        """
        The number of combinations (of any length) for the sub-amount `col`
        in each row.
        """
        return [sum(self.cell(row, col)) for row in range(self.n_rows)]
