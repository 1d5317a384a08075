from __future__ import annotations

from typing import Generator

from symengine import var, sympify, Expr, Symbol
from symengine import Rational as sym_Rational

Rational = sym_Rational
Poly = Expr


def create_vars(conf: str) -> list[Symbol]:
    return var(conf)


def expand(polynomial: Poly) -> Poly:
    return polynomial.expand()


def _terms(p: Poly):
    if p.is_Number:
        return ((Rational(1, 1), p), )
    # the constant term comes back keyed by a python int
    return tuple(
        (sympify(monomial), coeff)
        for monomial, coeff in p.as_coefficients_dict().items()
    )


def _get_degrees(monomial: Poly):
    if monomial.is_Number:
        return ((None, 0), )
    if monomial.is_Symbol:
        return ((monomial, 1), )
    if monomial.is_Pow:
        return ((monomial.args[0], int(monomial.args[1])), )
    if monomial.is_Mul:
        return sum(
            (_get_degrees(arg) for arg in monomial.args),
            start=()
        )


def coeff_dict(p: Poly, gens: list[Symbol]) -> Generator[tuple[tuple[int, ...], int], None, None]:
    """
    Iterate over the terms of an expanded polynomial with integer coefficients

    :param p Poly: the expanded polynomial
    :param gens list[Symbol]: the generators whose degrees are reported
    :rtype Generator: (degrees of `gens`, coefficient)
    """
    for monomial, coeff in _terms(p):
        degrees = dict(_get_degrees(monomial))
        yield tuple(degrees.get(sym, 0) for sym in gens), int(coeff)


def truncate(p: Poly, gen: Symbol, degree: int) -> Poly:
    """
    Drop every term of `p` whose degree in `gen` is larger than `degree`
    """
    res = Rational(0, 1)
    for monomial, coeff in _terms(p):
        if dict(_get_degrees(monomial)).get(gen, 0) <= degree:
            res = res + coeff * monomial
    return res
