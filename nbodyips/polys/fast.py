import numpy as np
from typing import Tuple, Union
from nbodyips.invariants import ninvariants
from nbodyips.polys._base import NBodyFunction
from nbodyips.polys.nbody import NBody, OneBody


class FastPolynomial:
    """Multivariate polynomial Σ_i c_i ∏_k x_k^E[k, i]"""

    def __init__(self, coefficients, exponents):
        """
        -----------------------------------------------------------------------
        Arguments:
            coefficients: shape = (n_monomials,)

            exponents: Non-negative integers, shape = (n_variables, n_monomials)
        """
        self.coefficients = np.array(coefficients, dtype=float)
        self.exponents = np.array(exponents, dtype=int)

        if self.exponents.shape[1] != len(self.coefficients):
            raise ValueError(
                f'Exponent matrix {self.exponents.shape} does not match '
                f'{len(self.coefficients)} coefficients'
            )

    @property
    def n_variables(self) -> int:
        return self.exponents.shape[0]

    def _powers(self, x) -> np.ndarray:
        return np.asarray(x, dtype=float)[:, None] ** self.exponents

    def evaluate(self, x) -> float:
        return float(self._powers(x).prod(axis=0) @ self.coefficients)

    def evaluate_and_gradient(self, x) -> Tuple[float, np.ndarray]:
        """
        Value and gradient. The product of all other factors of each
        monomial is built from prefix and suffix products, so no division
        by a variable is needed
        """
        x = np.asarray(x, dtype=float)
        E = self.exponents
        powers = self._powers(x)
        powers_d = np.where(
            E > 0, E * x[:, None] ** np.maximum(E - 1, 0), 0.0
        )

        ones = np.ones((1, E.shape[1]))
        prefix = np.vstack([ones, np.cumprod(powers, axis=0)[:-1]])
        suffix = np.vstack(
            [np.cumprod(powers[::-1], axis=0)[::-1][1:], ones]
        )

        value = powers.prod(axis=0) @ self.coefficients
        gradient = (powers_d * prefix * suffix) @ self.coefficients
        return float(value), gradient


class StNBody(NBodyFunction):
    """
    N-body polynomial compiled into a fixed exponent matrix over the
    concatenated primary and secondary invariants. Each column is one
    monomial, where the selected secondary invariant has exponent 1
    """

    def __init__(self, V: NBody):
        super().__init__(dictionary=V.dictionary, body_order=V.body_order)
        n1, n2 = ninvariants(V.body_order)

        exponents = np.zeros((n1 + n2, len(V)), dtype=int)
        for i, alpha in enumerate(V.tuples):
            exponents[:n1, i] = alpha[:-1]
            exponents[n1 + alpha[-1], i] = 1

        self.polynomial = FastPolynomial(V.coefficients, exponents)
        self.tuples = list(V.tuples)

    def __len__(self) -> int:
        return len(self.polynomial.coefficients)

    @property
    def coefficients(self) -> np.ndarray:
        return self.polynomial.coefficients

    def to_dict(self) -> dict:
        """Serialised as the equivalent NBody"""
        return NBody(
            self.tuples, self.coefficients, self.dictionary, self.body_order
        ).to_dict()

    def evaluate_I(self, II):
        return self.polynomial.evaluate(np.concatenate([II[0], II[1]]))

    def evaluate_I_ed(self, II):
        I1, I2, dI1, dI2 = II
        V, dV_dI = self.polynomial.evaluate_and_gradient(
            np.concatenate([I1, I2])
        )
        return V, np.vstack([dI1, dI2]).T @ dV_dI


def fast(V: Union[NBodyFunction, OneBody]):
    """Compile a term for fast evaluation, if it is not already"""

    if isinstance(V, NBody):
        return V.compile()

    return V
