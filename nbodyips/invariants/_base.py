import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple
from nbodyips.utils import bo2edges
from nbodyips.invariants.dual import DualArray


Degrees = Tuple[Tuple[int, ...], Tuple[int, ...]]


class InvariantTransform(ABC):
    """
    Map from the lengths of the edges of a simplex to invariants under
    permutations of identical particles. The first invariants are primary,
    the remaining are secondary, with the constant 1 as the first secondary
    """

    body_order: int
    degrees: Degrees

    @abstractmethod
    def invariants(self, r):
        """
        Primary and secondary invariants of a simplex. Implementations
        must only use arithmetic supported by DualArray so that the
        Jacobian can be obtained by forward-mode differentiation

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, in lexicographic order r12, r13, ..., shape = (M,)

        Returns:
            (tuple(np.ndarray, np.ndarray)): Shapes (P,) and (S,)
        """

    def invariants_d(self, r: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Jacobians of the primary and secondary invariants

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, shape = (M,)

        Returns:
            (tuple(np.ndarray, np.ndarray)): Shapes (P, M) and (S, M)
        """
        _, _, dI1, dI2 = self.invariants_ed(r)
        return dI1, dI2

    def invariants_ed(self, r: np.ndarray) -> Tuple[np.ndarray, ...]:
        """
        Invariants and their Jacobians in a single pass, by forward-mode
        differentiation

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, shape = (M,)

        Returns:
            (tuple(np.ndarray, ...)): I1, I2, dI1, dI2
        """
        I1, I2 = self.invariants(DualArray.variables(self._checked(r)))
        return I1.val, I2.val, I1.jac, I2.jac

    @property
    def n_edges(self) -> int:
        return bo2edges(self.body_order)

    @property
    def n_primary(self) -> int:
        return len(self.degrees[0])

    @property
    def n_secondary(self) -> int:
        return len(self.degrees[1])

    def _checked(self, r) -> np.ndarray:
        """Edge lengths as a float array of the correct length"""
        r = np.asarray(r, dtype=float)

        if r.shape != (self.n_edges,):
            raise ValueError(
                f'A {self.body_order}-body simplex has {self.n_edges} edges, '
                f'but had a distance vector with shape {r.shape}'
            )

        return r

    def __repr__(self):
        return f'{self.__class__.__name__}(body_order={self.body_order})'
