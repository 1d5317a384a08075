from __future__ import annotations

from enum import Enum

import numpy as np

from logzero import logger

from prime_change.table import LengthCountTable, LengthCounts
from prime_change.utils import Rational, create_vars, expand, coeff_dict, truncate


class Algo(Enum):
    STANDARD = 'standard'
    COMPACT = 'compact'
    GENERATING = 'generating'

    def __str__(self):
        return self.value


def check_coins(coins: list[int]):
    for coin in coins:
        if coin <= 0:
            raise ValueError(f'Denominations must be positive: {coin}')
    if len(set(coins)) != len(coins):
        raise ValueError(f'Duplicate denominations: {coins}')


def standard_distribution(coins: list[int], target: int) -> LengthCounts:
    table = LengthCountTable(coins, target).build()
    return list(table.distribution())


def compact_distribution(coins: list[int], target: int) -> LengthCounts:
    """
    The same recurrence as `LengthCountTable` on a single
    (target + 1) x (target + 1) grid, overwritten coin by coin.

    Before the coin `d` is processed, grid[col] holds the counts of the
    previous row; grid[col - d] has already been updated for `d` when
    grid[col] reads it.
    """
    # object dtype keeps arbitrary precision integers
    grid = np.zeros((target + 1, target + 1), dtype=object)
    grid[0, 0] = 1
    for coin in coins:
        for col in range(coin, target + 1):
            rest = col - coin
            grid[col, 1:rest + 2] += grid[rest, :rest + 1]
    return [int(count) for count in grid[target]]


def generating_distribution(coins: list[int], target: int) -> LengthCounts:
    """
    Read the distribution off the generating function
    prod_d (1 + x^d y + x^{2d} y^2 + ...), where x marks the amount and y
    the number of coins.
    """
    x, y = create_vars('x y')
    poly = Rational(1, 1)
    for coin in coins:
        factor = sum((x ** coin * y) ** k for k in range(target // coin + 1))
        poly = truncate(expand(poly * factor), x, target)
    res = [0] * (target + 1)
    for (x_degree, y_degree), coeff in coeff_dict(expand(poly), [x, y]):
        if x_degree == target:
            res[y_degree] += coeff
    return res


def count_distribution(coins: list[int], target: int,
                       algo: Algo = Algo.STANDARD) -> LengthCounts:
    """
    Count the combinations (with repetition) of `coins` summing to `target`
    by their length.

    :param coins list[int]: distinct positive denominations
    :param target int: the amount
    :param algo Algo: the algorithm
    :rtype LengthCounts: vector of size `target + 1`
    """
    check_coins(coins)
    if target < 0:
        raise ValueError(f'Target must be non-negative: {target}')
    if algo == Algo.STANDARD:
        res = standard_distribution(coins, target)
    elif algo == Algo.COMPACT:
        res = compact_distribution(coins, target)
    elif algo == Algo.GENERATING:
        res = generating_distribution(coins, target)
    else:
        raise ValueError('Unknown algorithm: {}'.format(algo))
    logger.debug('Count distribution of %s: %s', target, res)
    return res


def solve(coins: list[int], target: int, min_len: int, max_len: int,
          algo: Algo = Algo.STANDARD) -> int:
    """
    The number of combinations of `coins` summing to `target` whose length is
    in [min_len, max_len].
    """
    if min_len < 0 or max_len > target:
        raise IndexError(
            f'Combination length range ({min_len}, {max_len}) '
            f'is out of [0, {target}]'
        )
    dist = count_distribution(coins, target, algo)
    return sum(dist[length] for length in range(min_len, max_len + 1))
