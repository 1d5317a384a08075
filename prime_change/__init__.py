from .denominations import generate_denominations
from .problems import CoinChangeProblem
from .solver import Algo, count_distribution, solve
from .table import LengthCountTable, sum_shifted


__all__ = [
    "generate_denominations",
    "CoinChangeProblem",
    "Algo",
    "count_distribution",
    "solve",
    "LengthCountTable",
    "sum_shifted",
]
