from prime_change.problems import CoinChangeProblem
from .records_parser import parse


def parse_records(input_file: str) -> list[CoinChangeProblem]:
    with open(input_file, 'r') as f:
        input_content = f.read()
    return parse(input_content)


__all__ = [
    'parse',
    'parse_records',
]
