from __future__ import annotations

import argparse
import logging
import logzero

from logzero import logger
from contexttimer import Timer

from prime_change.parser import parse_records
from prime_change.report import format_report, run
from prime_change.solver import Algo


def parse_args(argv: list[str] = None):
    parser = argparse.ArgumentParser(
        description='Count the changes of amounts with prime coins, '
                    'by the number of coins used',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('input', type=str,
                        help='records file, one "amount [min [max]]" per line')
    parser.add_argument('--algo', '-a', type=Algo,
                        choices=list(Algo), default=Algo.STANDARD)
    parser.add_argument('--log', type=str, default=None,
                        help='also write the log to this file')
    parser.add_argument('--progress', action='store_true', default=False,
                        help='show a progress bar over the records')
    parser.add_argument('--debug', action='store_true', default=False)
    args = parser.parse_args(argv)
    return args


def main(argv: list[str] = None):
    args = parse_args(argv)
    if args.debug:
        logzero.loglevel(logging.DEBUG)
    else:
        logzero.loglevel(logging.INFO)
    if args.log is not None:
        logzero.logfile(args.log, mode='w')

    with Timer() as t:
        problems = parse_records(args.input)
    logger.info('Parse input: %ss', t.elapsed)

    for problem, result, elapsed in run(problems, args.algo, args.progress):
        print(format_report(problem, result, elapsed))
        print()


if __name__ == '__main__':
    main()
