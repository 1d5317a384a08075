from __future__ import annotations

from lark import Lark, Transformer

from prime_change.parser.records_grammar import records_grammar
from prime_change.problems import CoinChangeProblem


class RecordsTransformer(Transformer):
    """
    records: (_NEWLINE | record _NEWLINE)* record?
    record: amount [min_length [max_length]]
    """
    def records(self, args):
        return list(args)

    def amount(self, args):
        return int(args[0])

    def min_length(self, args):
        return int(args[0])

    def max_length(self, args):
        return int(args[0])

    def record(self, args) -> CoinChangeProblem:
        amount, min_len, max_len = args
        if min_len is None:
            min_len = 0
        # NOTE: an explicit 0 is read as "unspecified" as well
        if not max_len:
            max_len = amount
        return CoinChangeProblem(amount, min_len, max_len)


def parse(text: str) -> list[CoinChangeProblem]:
    """
    Parse the records, one "amount [min [max]]" per line
    """
    records_parser = Lark(records_grammar,
                          start='records',
                          parser='lalr',
                          maybe_placeholders=True)
    tree = records_parser.parse(text)
    return RecordsTransformer().transform(tree)


if __name__ == '__main__':
    problems = parse('10 2\n5\n\n# comment\n100 0 0\n')
    print(problems)
    # Expected output:
    # [CoinChangeProblem(amount=10, min_len=2, max_len=10),
    #  CoinChangeProblem(amount=5, min_len=0, max_len=5),
    #  CoinChangeProblem(amount=100, min_len=0, max_len=100)]
