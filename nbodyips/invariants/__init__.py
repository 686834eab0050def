import numpy as np
from types import MappingProxyType
from typing import Sequence, Tuple
from nbodyips.exceptions import InvalidBodyOrder
from nbodyips.utils import edges2bo
from nbodyips.invariants._base import InvariantTransform
from nbodyips.invariants.low_order import (
    TwoBodyInvariants,
    ThreeBodyInvariants,
)
from nbodyips.invariants.four_body import FourBodyInvariants
from nbodyips.invariants.five_body import FiveBodyInvariants
from nbodyips.invariants.dual import DualArray


TRANSFORMS = MappingProxyType(
    {
        2: TwoBodyInvariants(),
        3: ThreeBodyInvariants(),
        4: FourBodyInvariants(),
        5: FiveBodyInvariants(),
    }
)


def transform_for(body_order: int) -> InvariantTransform:
    """
    Invariant transform for a body order

    ---------------------------------------------------------------------------
    Arguments:
        body_order: N

    Raises:
        (nbodyips.exceptions.InvalidBodyOrder): If N is not in 2..5
    """
    try:
        return TRANSFORMS[body_order]

    except KeyError:
        raise InvalidBodyOrder(
            f'No invariants are defined for body order {body_order}. '
            f'Supported: {list(TRANSFORMS)}'
        )


def degrees(body_order: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Polynomial degrees of the primary and secondary invariants"""
    return transform_for(body_order).degrees


def ninvariants(body_order: int) -> Tuple[int, int]:
    """Number of primary and secondary invariants"""
    transform = transform_for(body_order)
    return transform.n_primary, transform.n_secondary


def tdegree(alpha: Sequence[int]) -> int:
    """
    Total degree of the basis function defined by a tuple α of length M+1,
    i.e. the degree of the product of the primary invariants raised to
    α[:-1] and the secondary invariant selected by α[-1]. Degrees are
    w.r.t. the (transformed) edge lengths
    """
    degs1, degs2 = degrees(edges2bo(len(alpha) - 1))
    return sum(a * d for a, d in zip(alpha[:-1], degs1)) + degs2[alpha[-1]]


def invariants(r) -> Tuple[np.ndarray, np.ndarray]:
    """Primary and secondary invariants of a simplex with edge lengths r"""
    return transform_for(edges2bo(len(r))).invariants(r)


def invariants_d(r) -> Tuple[np.ndarray, np.ndarray]:
    """Jacobians of the invariants of a simplex with edge lengths r"""
    return transform_for(edges2bo(len(r))).invariants_d(r)


def invariants_ed(r) -> Tuple[np.ndarray, ...]:
    """Invariants and Jacobians of a simplex with edge lengths r"""
    return transform_for(edges2bo(len(r))).invariants_ed(r)


__all__ = [
    'InvariantTransform',
    'DualArray',
    'TRANSFORMS',
    'transform_for',
    'degrees',
    'ninvariants',
    'tdegree',
    'invariants',
    'invariants_d',
    'invariants_ed',
]
