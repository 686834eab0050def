import numpy as np
from typing import Sequence, Union


class DualArray:
    """Values together with their Jacobian w.r.t. a set of variables"""

    # Let ndarray operands defer to the reflected methods defined here
    __array_ufunc__ = None

    def __init__(self, val, jac):
        """
        Forward-mode dual number, possibly array valued. The last axis of
        the Jacobian runs over the independent variables, so a value of
        shape (k,) carries a Jacobian of shape (k, n)

        -----------------------------------------------------------------------
        Arguments:
            val: Value(s)

            jac: Derivative of every value w.r.t. each of the n variables
        """
        self.val = np.asarray(val, dtype=float)
        self.jac = np.asarray(jac, dtype=float)

    @classmethod
    def variables(cls, x: Sequence[float]) -> 'DualArray':
        """Seed a vector of independent variables, with dx_i/dx_j = δ_ij"""
        x = np.asarray(x, dtype=float)
        return cls(x, np.eye(len(x)))

    @property
    def n_variables(self) -> int:
        return self.jac.shape[-1]

    def __len__(self):
        return len(self.val)

    def __getitem__(self, item) -> 'DualArray':
        return DualArray(self.val[item], self.jac[item])

    def __neg__(self):
        return DualArray(-self.val, -self.jac)

    def __add__(self, other):
        if isinstance(other, DualArray):
            return DualArray(self.val + other.val, self.jac + other.jac)

        other = np.asarray(other, dtype=float)
        return DualArray(
            self.val + other, self.jac + np.zeros_like(other)[..., None]
        )

    __radd__ = __add__

    def __sub__(self, other):
        return self + (-other)

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        if isinstance(other, DualArray):
            return DualArray(
                self.val * other.val,
                self.jac * other.val[..., None]
                + self.val[..., None] * other.jac,
            )

        other = np.asarray(other, dtype=float)
        return DualArray(self.val * other, self.jac * other[..., None])

    __rmul__ = __mul__

    def __pow__(self, power: int):
        if power == 0:
            return DualArray(np.ones_like(self.val), np.zeros_like(self.jac))

        return DualArray(
            self.val**power,
            (power * self.val ** (power - 1))[..., None] * self.jac,
        )

    def __rmatmul__(self, matrix):
        """Product with a constant matrix, A @ x"""
        matrix = np.asarray(matrix, dtype=float)
        return DualArray(matrix @ self.val, matrix @ self.jac)

    def sum(self) -> 'DualArray':
        return DualArray(self.val.sum(axis=0), self.jac.sum(axis=0))

    def __repr__(self):
        return f'DualArray(val={self.val}, jac={self.jac})'


def stack(items: Sequence[Union[DualArray, float, np.ndarray]]):
    """
    Stack scalars into a vector. Plain numbers are constants (zero
    derivative) when any item is a DualArray, otherwise the result is a
    plain ndarray

    ---------------------------------------------------------------------------
    Arguments:
        items: Scalar DualArrays and/or numbers

    Returns:
        (nbodyips.invariants.dual.DualArray | np.ndarray):
    """
    duals = [item for item in items if isinstance(item, DualArray)]

    if len(duals) == 0:
        return np.array(items, dtype=float)

    n = duals[0].n_variables
    val = [
        item.val if isinstance(item, DualArray) else float(item)
        for item in items
    ]
    jac = [
        item.jac if isinstance(item, DualArray) else np.zeros(n)
        for item in items
    ]

    return DualArray(np.array(val, dtype=float), np.stack(jac))
