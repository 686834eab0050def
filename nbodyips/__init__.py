from nbodyips.config import Config
from nbodyips.dictionary import Dictionary
from nbodyips.invariants import invariants, invariants_d, invariants_ed
from nbodyips.monomials import monomial, monomial_d
from nbodyips.polys import (
    NBody,
    OneBody,
    StNBody,
    combine_basis,
    serialize,
    deserialize,
    save_basis,
    load_basis,
    fast,
    info,
)
from nbodyips.generate import gen_tuples, poly_basis
from nbodyips.simplices import simplices, energy, forces
from nbodyips.potential import NBodyIP
from nbodyips.assembly import energy_matrix, force_matrix
from nbodyips import exceptions

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Dictionary",
    "invariants",
    "invariants_d",
    "invariants_ed",
    "monomial",
    "monomial_d",
    "NBody",
    "OneBody",
    "StNBody",
    "combine_basis",
    "serialize",
    "deserialize",
    "save_basis",
    "load_basis",
    "fast",
    "info",
    "gen_tuples",
    "poly_basis",
    "simplices",
    "energy",
    "forces",
    "NBodyIP",
    "energy_matrix",
    "force_matrix",
    "exceptions",
]
