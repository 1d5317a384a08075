from __future__ import annotations

import numpy as np

from logzero import logger


def prime_sieve(n: int) -> np.ndarray:
    """
    Sieve of Eratosthenes.

    :param n int: the largest number to test
    :rtype np.ndarray: boolean mask of size `n + 1`, True at the primes
    """
    flags = np.ones(max(n + 1, 2), dtype=bool)
    flags[:2] = False
    for p in range(2, int(np.sqrt(n)) + 1):
        if flags[p]:
            flags[p * p::p] = False
    return flags[:n + 1]


def primes_up_to(n: int) -> list[int]:
    return [int(p) for p in np.flatnonzero(prime_sieve(n))]


def generate_denominations(n: int) -> list[int]:
    """
    The coins available for the amount `n`: the universal coin 1, every
    prime up to `n` and the "gold coin" `n` itself, in ascending order.

    :param n int: the amount to be changed
    :rtype list[int]: distinct positive denominations
    """
    if n < 0:
        raise ValueError(f'Amount must be non-negative: {n}')
    coins = [1] + primes_up_to(n)
    # 0 is not a coin, the empty change of 0 only needs the universal coin
    if n > 0 and coins[-1] != n:
        coins.append(n)
    logger.debug('Denominations for %s: %s', n, coins)
    return coins
