import numpy as np
from typing import Sequence, Tuple


def monomial(alpha: Sequence[int], I: Sequence[float]) -> float:
    """
    Monomial ∏_j I[j]^α[j] over the primary invariants. Only the first
    len(I) entries of α are used, so the secondary selector at the end of a
    basis function tuple is ignored

    ---------------------------------------------------------------------------
    Arguments:
        alpha: Exponents, length >= len(I)

        I: Primary invariants

    Returns:
        (float):
    """
    m = 1.0

    for a, x in zip(alpha, I):
        if a == 0:
            continue

        elif a == 1:
            m *= x

        else:
            m *= x**a

    return m


def monomial_d(
    alpha: Sequence[int], I: Sequence[float]
) -> Tuple[float, np.ndarray]:
    """
    Monomial and its gradient w.r.t. the primary invariants. The cost
    scales with the number of non-zero exponents

    ---------------------------------------------------------------------------
    Arguments:
        alpha: Exponents, length >= len(I)

        I: Primary invariants

    Returns:
        (tuple(float, np.ndarray)): m, ∇m with shape (len(I),)
    """
    grad = np.zeros(len(I))
    nonzero = [j for j, a in zip(range(len(I)), alpha) if a != 0]

    # Powers and derivatives of the powers of the non-zero factors
    powers, powers_d = [], []
    for j in nonzero:
        a, x = alpha[j], I[j]

        if a == 1:
            powers.append(x)
            powers_d.append(1.0)
        else:
            x_am1 = x ** (a - 1)
            powers.append(x_am1 * x)
            powers_d.append(a * x_am1)

    m = 1.0
    for p in powers:
        m *= p

    for k, j in enumerate(nonzero):
        dm = powers_d[k]
        for l, p in enumerate(powers):
            if l != k:
                dm *= p

        grad[j] = dm

    return m, grad
