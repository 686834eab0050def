import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from nbodyips.exceptions import InvalidBodyOrder
from nbodyips.invariants import transform_for


class NBodyFunction(ABC):

    def __init__(self, dictionary: 'nbodyips.Dictionary', body_order: int):
        """
        Pure N-body function, i.e. containing only terms of a single body
        order, evaluated on the edge lengths of a simplex. The function of
        the invariants is multiplied by the cut-off of the dictionary

        -----------------------------------------------------------------------
        Arguments:
            dictionary: Transform and cut-off shared by all basis functions

            body_order: N >= 2

        Raises:
            (nbodyips.exceptions.InvalidBodyOrder):
        """
        if body_order < 2:
            raise InvalidBodyOrder(
                f'{self.__class__.__name__} must have body-order 2 or '
                f'larger, had {body_order}. Use OneBody for an on-site term'
            )

        self._transform = transform_for(body_order)
        self.dictionary = dictionary
        self.body_order = int(body_order)

    @abstractmethod
    def evaluate_I(self, II: Tuple[np.ndarray, np.ndarray]) -> float:
        """
        Value of the function of the invariants, without the cut-off

        -----------------------------------------------------------------------
        Arguments:
            II: Primary and secondary invariants

        Returns:
            (float):
        """

    @abstractmethod
    def evaluate_I_ed(
        self, II: Tuple[np.ndarray, ...]
    ) -> Tuple[float, np.ndarray]:
        """
        Value and gradient w.r.t. the edge lengths of the function of the
        invariants, without the cut-off

        -----------------------------------------------------------------------
        Arguments:
            II: I1, I2, dI1, dI2

        Returns:
            (tuple(float, np.ndarray)): E, ∇E with shape (M,)
        """

    @abstractmethod
    def __len__(self) -> int:
        """Number of basis functions this term is built from"""

    @property
    def cutoff(self) -> float:
        """Cut-off radius (Å)"""
        return self.dictionary.rcut

    @property
    def n_edges(self) -> int:
        return self._transform.n_edges

    @property
    def basis_key(self) -> Tuple:
        """
        Terms with the same key can be combined into a single term. A
        dictionary without names is identified by the object itself
        """
        D = self.dictionary
        names: Optional[tuple] = D.names if D.has_names else (id(D),)
        return self.__class__.__name__, self.body_order, names

    def evaluate(self, r) -> float:
        """
        Value of this N-body function for a single simplex

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, shape = (M,)

        Returns:
            (float):
        """
        r = np.asarray(r, dtype=float)
        II = self.dictionary.invariants(r)
        return self.evaluate_I(II) * self.dictionary.fcut(r)

    def evaluate_d(self, r) -> np.ndarray:
        """
        Gradient w.r.t. the edge lengths of this N-body function

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, shape = (M,)

        Returns:
            (np.ndarray): shape = (M,)
        """
        r = np.asarray(r, dtype=float)
        E, dE = self.evaluate_I_ed(self.dictionary.invariants_ed(r))
        fc, fc_d = self.dictionary.fcut_d(r)
        return dE * fc + E * fc_d

    def __repr__(self):
        return (
            f'{self.__class__.__name__}(body_order={self.body_order}, '
            f'length={len(self)}, dictionary={self.dictionary})'
        )
