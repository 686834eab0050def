import numpy as np
from math import sqrt
from itertools import combinations
from typing import List, Tuple
from nbodyips.exceptions import NumericCorruption


def bo2edges(body_order: int) -> int:
    """Number of edges in a simplex with a given body order"""
    return (body_order * (body_order - 1)) // 2


def edges2bo(n_edges: int) -> int:
    """
    Body order of a simplex with a given number of edges. A simplex without
    any edges is the 1-body (on-site) case

    ---------------------------------------------------------------------------
    Arguments:
        n_edges: M = N(N-1)/2

    Returns:
        (int): N
    """
    if n_edges <= 0:
        return 1

    return int(round(0.5 + sqrt(0.25 + 2 * n_edges)))


def simplex_edges(body_order: int) -> List[Tuple[int, int]]:
    """
    Pairs of vertex indices of a simplex in lexicographic order, e.g. for
    4-body: (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)
    """
    return list(combinations(range(body_order), 2))


def assert_finite(array: np.ndarray, name: str = 'array') -> np.ndarray:
    """
    Ensure an assembled array contains only finite values

    ---------------------------------------------------------------------------
    Arguments:
        array:

        name: Label used in the error message

    Raises:
        (nbodyips.exceptions.NumericCorruption):
    """
    finite = np.isfinite(array)

    if not np.all(finite):
        n_bad = int(np.size(finite) - np.count_nonzero(finite))
        raise NumericCorruption(
            f'{name} contained {n_bad} non-finite value(s). Cannot continue '
            f'with a corrupted result'
        )

    return array
