from nbodyips.polys._base import NBodyFunction
from nbodyips.polys.nbody import (
    NBody,
    OneBody,
    combine_basis,
    match_dictionary,
    evaluate_many,
    evaluate_many_d,
    serialize,
    deserialize,
    save_basis,
    load_basis,
    info,
)
from nbodyips.polys.fast import StNBody, FastPolynomial, fast

__all__ = [
    'NBodyFunction',
    'NBody',
    'OneBody',
    'StNBody',
    'FastPolynomial',
    'fast',
    'combine_basis',
    'match_dictionary',
    'evaluate_many',
    'evaluate_many_d',
    'serialize',
    'deserialize',
    'save_basis',
    'load_basis',
    'info',
]
