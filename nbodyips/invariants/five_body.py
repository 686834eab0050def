import numpy as np
from nbodyips.invariants import _five_body_tables as tables
from nbodyips.invariants._base import InvariantTransform
from nbodyips.invariants.dual import DualArray, stack


class FiveBodyInvariants(InvariantTransform):
    """
    5-body invariants as sums over S5 orbits of monomials in the edge
    lengths. The primary invariants are power sums and orbit contractions of
    the edge lengths. The secondary invariants are provisional: orbit sums
    over small subgraphs of the complete graph on five vertices.

    The provisional set is incomplete. It has 1/2/3/1/0 secondaries of
    degree 0/3/4/5/6, where a complete set has 1/2/5/8/15, so a 5-body
    basis above degree 3 has fewer functions than the full polynomial space
    of that degree
    """

    body_order = 5
    degrees = (
        (1, 2, 2, 3, 3, 4, 4, 5, 5, 6),
        (0, 3, 3, 4, 4, 4, 5),
    )

    def invariants(self, r):
        if not isinstance(r, DualArray):
            r = self._checked(r)

        x1 = r
        x2 = x1 * x1
        x3 = x2 * x1
        x4 = x3 * x1
        x5 = x4 * x1
        x6 = x5 * x1

        primary = stack(
            [
                x1.sum(),
                _orbit_sum(x1, tables.ADJACENT_PAIRS),
                x2.sum(),
                _orbit_sum(x1, tables.STARS_3),
                x3.sum(),
                _orbit_sum(x1, tables.PRIMARY_4),
                x4.sum(),
                _orbit_sum(x1, tables.PRIMARY_5),
                x5.sum(),
                x6.sum(),
            ]
        )

        secondary = stack(
            [
                1.0,
                _orbit_sum(x1, tables.TRIANGLES),
                _orbit_sum(x1, tables.PATHS_3),
                _orbit_sum(x1, tables.CYCLES_4),
                _orbit_sum(x1, tables.PATHS_4),
                _orbit_sum(x1, tables.PAWS),
                _orbit_sum(x1, tables.CYCLES_5),
            ]
        )

        return primary, secondary


def _orbit_sum(x, table):
    """Gather, multiply elementwise and sum: sum_k prod_c x[table[c][k]]"""
    product = x[np.asarray(table[0])]

    for column in table[1:]:
        product = product * x[np.asarray(column)]

    return product.sum()
