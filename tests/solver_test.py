import random
import pytest
import logging
import logzero

from pathlib import Path

from prime_change.denominations import generate_denominations
from prime_change.parser import parse_records
from prime_change.solver import Algo, count_distribution, solve

current_path = Path(__file__).parent.absolute()
input_files = (current_path.parent / 'inputs').glob('*.txt')
algos = [Algo.STANDARD, Algo.COMPACT, Algo.GENERATING]
logzero.loglevel(logging.ERROR)


def count_ways(coins, target):
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


@pytest.mark.parametrize(
    'input_file',
    [str(input_file) for input_file in input_files]
)
def test_algos_agree(input_file):
    for problem in parse_records(input_file):
        coins = generate_denominations(problem.amount)
        results = [
            solve(coins, problem.amount, problem.min_len, problem.max_len, algo)
            for algo in algos
        ]
        print(problem, results)
        assert all([r == results[0] for r in results])


@pytest.mark.parametrize('algo', algos)
@pytest.mark.parametrize('coins, target, min_len, max_len, expected', [
    ([1, 2, 3], 3, 0, 3, 3),
    ([1, 2, 3], 3, 1, 1, 1),
    ([1, 5], 5, 0, 5, 2),
    ([1, 2, 3], 3, 2, 3, 2),
    ([1, 2, 3], 3, 3, 1, 0),
    ([2, 3], 0, 0, 0, 1),
    ([], 0, 0, 0, 1),
])
def test_solve(algo, coins, target, min_len, max_len, expected):
    assert solve(coins, target, min_len, max_len, algo) == expected


@pytest.mark.parametrize('algo', algos)
def test_distribution(algo):
    # 5, 3+2, 3+1+1, 2+2+1, 2+1+1+1, 1+1+1+1+1
    assert count_distribution([1, 2, 3, 5], 5, algo) == [0, 1, 1, 2, 1, 1]
    assert count_distribution([1, 2, 3], 3, algo) == [0, 1, 1, 1]
    assert count_distribution([1, 2, 3, 4], 4, algo) == [0, 1, 2, 1, 1]


def test_unreachable_amount():
    assert count_distribution([2], 3) == [0, 0, 0, 0]
    assert solve([2, 4], 5, 0, 5) == 0


@pytest.mark.parametrize('algo', [Algo.STANDARD, Algo.COMPACT])
@pytest.mark.parametrize('target', [1, 7, 12, 40])
def test_total_is_number_of_combinations(algo, target):
    coins = generate_denominations(target)
    dist = count_distribution(coins, target, algo)
    assert len(dist) == target + 1
    assert sum(dist) == count_ways(coins, target)
    assert solve(coins, target, 0, target, algo) == count_ways(coins, target)


@pytest.mark.parametrize('algo', [Algo.STANDARD, Algo.COMPACT])
def test_order_independence(algo):
    coins = generate_denominations(23)
    shuffled = list(coins)
    random.Random(0).shuffle(shuffled)
    expected = count_distribution(coins, 23, algo)
    assert count_distribution(list(reversed(coins)), 23, algo) == expected
    assert count_distribution(shuffled, 23, algo) == expected


def test_idempotence():
    coins = generate_denominations(17)
    assert solve(coins, 17, 2, 9) == solve(coins, 17, 2, 9)
    assert count_distribution(coins, 17) == count_distribution(coins, 17)


def test_big_counts():
    coins = list(range(1, 151))
    dist = count_distribution(coins, 150, Algo.COMPACT)
    assert sum(dist) == count_ways(coins, 150)
    assert sum(dist) > 2 ** 32
    assert all(isinstance(count, int) for count in dist)
    assert dist == count_distribution(coins, 150, Algo.STANDARD)


@pytest.mark.parametrize('min_len, max_len', [(-1, 3), (0, 4), (2, 10)])
def test_length_range_out_of_bounds(min_len, max_len):
    with pytest.raises(IndexError):
        solve([1, 2, 3], 3, min_len, max_len)


@pytest.mark.parametrize('coins', [[1, 2, 2], [0, 1], [1, -3]])
def test_invalid_denominations(coins):
    with pytest.raises(ValueError):
        solve(coins, 4, 0, 4)


def test_negative_target():
    with pytest.raises(ValueError):
        count_distribution([1], -1)
