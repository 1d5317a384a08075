from .polynomial import Rational, expand, create_vars, coeff_dict, truncate


__all__ = [
    'Rational',
    'expand',
    'create_vars',
    'coeff_dict',
    'truncate',
]
