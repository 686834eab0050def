import numpy as np
from typing import List, Sequence, Union
from nbodyips.log import logger
from nbodyips.polys import (
    NBodyFunction,
    OneBody,
    combine_basis,
    deserialize,
    fast,
)
from nbodyips.simplices import Configuration, evaluate_many, evaluate_many_d


Term = Union[NBodyFunction, OneBody]


class NBodyIP:
    """Interatomic potential as a sum of N-body terms"""

    def __init__(self, components: Sequence[Term]):
        """
        -----------------------------------------------------------------------
        Arguments:
            components: Terms, typically one per body order
        """
        self.components: List[Term] = list(components)

    @classmethod
    def from_basis(
        cls, basis: Sequence[Term], coefficients: Sequence[float]
    ) -> 'NBodyIP':
        """
        Potential from a basis and the coefficients of each basis
        function. Basis functions that can be combined, i.e. with the same
        type, body order and dictionary, are merged into a single term

        -----------------------------------------------------------------------
        Arguments:
            basis:

            coefficients: shape = (len(basis),)

        Returns:
            (nbodyips.potential.NBodyIP):
        """
        if len(basis) != len(coefficients):
            raise ValueError(
                f'Had {len(basis)} basis functions but '
                f'{len(coefficients)} coefficients'
            )

        groups = {}
        for i, b in enumerate(basis):
            groups.setdefault(b.basis_key, []).append(i)

        components = [
            combine_basis(
                [basis[i] for i in idxs], [coefficients[i] for i in idxs]
            )
            for idxs in groups.values()
        ]

        logger.info(
            f'Combined {len(basis)} basis functions into '
            f'{len(components)} components'
        )
        return cls(components)

    @property
    def body_orders(self) -> List[int]:
        return sorted(set(V.body_order for V in self.components))

    def energy(self, atoms: Configuration) -> float:
        """Total energy of a configuration"""
        return float(np.sum(evaluate_many(self.components, atoms)))

    def forces(self, atoms: Configuration) -> np.ndarray:
        """Forces on all atoms, shape = (n_atoms, 3)"""
        return np.sum(evaluate_many_d(self.components, atoms), axis=0)

    def fast(self) -> 'NBodyIP':
        """Potential with every component compiled for fast evaluation"""
        return NBodyIP([fast(V) for V in self.components])

    def to_dict(self) -> dict:
        return {'components': [V.to_dict() for V in self.components]}

    @classmethod
    def from_dict(cls, data: dict) -> 'NBodyIP':
        dictionaries = {}
        return cls(
            [deserialize(d, dictionaries) for d in data['components']]
        )

    def __len__(self):
        return len(self.components)

    def __repr__(self):
        return f'NBodyIP(body_orders={self.body_orders})'
