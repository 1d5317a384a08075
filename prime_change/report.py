from __future__ import annotations

from logzero import logger
from contexttimer import Timer
from tqdm import tqdm

from prime_change.denominations import generate_denominations
from prime_change.problems import CoinChangeProblem
from prime_change.solver import Algo, solve


def format_report(problem: CoinChangeProblem, result: int,
                  elapsed: float) -> str:
    return 'Solution for ${} with combination range ({},{}): {}\n' \
        'Run time: {:.6f} seconds.'.format(
            problem.amount, problem.min_len, problem.max_len,
            result, elapsed
        )


def solve_problem(problem: CoinChangeProblem,
                  algo: Algo = Algo.STANDARD) -> tuple[int, float]:
    """
    Solve one record with the prime denominations of its amount.

    :return: the number of combinations and the solving time in seconds
    """
    coins = generate_denominations(problem.amount)
    with Timer() as t:
        result = solve(coins, problem.amount,
                       problem.min_len, problem.max_len, algo)
    logger.info('Solve %s: %ss', problem, t.elapsed)
    return result, t.elapsed


def run(problems: list[CoinChangeProblem], algo: Algo = Algo.STANDARD,
        progress: bool = False) -> list[tuple[CoinChangeProblem, int, float]]:
    results = []
    for problem in tqdm(problems, disable=not progress):
        result, elapsed = solve_problem(problem, algo)
        results.append((problem, result, elapsed))
    return results
