from typing import Callable, List, Optional, Sequence, Tuple
from nbodyips.log import logger
from nbodyips.config import Config
from nbodyips.dictionary import Dictionary
from nbodyips.invariants import ninvariants, tdegree
from nbodyips.polys import NBody
from nbodyips.utils import bo2edges


Tup = Tuple[int, ...]


def gen_tuples(
    body_order: int,
    deg: Optional[float] = None,
    tuplebound: Optional[Callable[[Tup], bool]] = None,
) -> List[Tup]:
    """
    Generate the tuples of all basis functions admitted by a bound. Each
    tuple has length K = M+1, M = N(N-1)/2. The default bound is
    0 < tdegree(α) <= deg.

    The bound must be monotone: if α <= β componentwise and tuplebound(β)
    then tuplebound(α). The tuples are then generated with an odometer
    that moves on to the next position as soon as a tuple is rejected,
    without visiting the full product space

    ---------------------------------------------------------------------------
    Arguments:
        body_order: N

        deg: Maximum total degree, required if tuplebound is None

        tuplebound: α -> bool

    Returns:
        (list(tuple(int))):
    """
    if tuplebound is None:
        if deg is None:
            raise ValueError('Need a maximum degree or a tuple bound')

        def tuplebound(alpha):
            return 0 < tdegree(alpha) <= deg

    _, n_secondary = ninvariants(body_order)
    K = bo2edges(body_order) + 1

    tuples = []
    alpha = [0] * K
    alpha[0] = 1
    lastinc = 0

    while True:
        if alpha[-1] <= n_secondary - 1 and tuplebound(tuple(alpha)):
            tuples.append(tuple(alpha))
            alpha[0] += 1
            lastinc = 0

        else:
            if lastinc == K - 1:
                return tuples

            alpha[: lastinc + 1] = [0] * (lastinc + 1)
            alpha[lastinc + 1] += 1
            lastinc += 1


def poly_basis(
    body_order: int,
    dictionary: Dictionary,
    deg: Optional[float] = None,
    tuplebound: Optional[Callable[[Tup], bool]] = None,
) -> List[NBody]:
    """
    Basis of N-body functions with a dictionary, one basis function per
    tuple generated by gen_tuples. e.g.
    ```
    D = Dictionary.from_symbols('poly(-1)', 'cos(4.0, 5.5)')
    basis = poly_basis(3, D, deg=6)
    ```

    ---------------------------------------------------------------------------
    Arguments:
        body_order: N

        dictionary:

        deg: Maximum total degree, from Config.basis_params if None and
             no tuplebound is given

        tuplebound: see gen_tuples

    Returns:
        (list(nbodyips.polys.NBody)):
    """
    if deg is None and tuplebound is None:
        deg = Config.max_degree(body_order)

    tuples = gen_tuples(body_order, deg=deg, tuplebound=tuplebound)
    logger.info(
        f'Generated {len(tuples)} {body_order}-body basis functions with '
        f'dictionary {dictionary.names}'
    )

    return basis_from_tuples(tuples, dictionary)


def basis_from_tuples(
    tuples: Sequence[Sequence[int]], dictionary: Dictionary
) -> List[NBody]:
    """Single-tuple basis functions with unit coefficients"""
    return [NBody([t], [1.0], dictionary) for t in tuples]
