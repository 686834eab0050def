"""
4-body invariants following

    Schmelzer, A., Murrell, J.N.: The general analytic expression for
    S4-symmetry-invariant potential functions of tetra-atomic homonuclear
    molecules. Int. J. Quantum Chem. 28, 287-295 (1985).
    doi:10.1002/qua.560280210
"""
import numpy as np
from nbodyips.invariants._base import InvariantTransform
from nbodyips.invariants.dual import DualArray, stack


_2 = 2.0**-0.5
_3 = 3.0**-0.5
_6 = 6.0**-0.5
_12 = 12.0**-0.5

# Edge order r12, r13, r14, r23, r24, r34 -> ordering of Schmelzer et al.
_R_TO_RHO = np.array(
    [
        [1, 0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 1],
        [0, 0, 0, 0, 1, 0],
        [0, 0, 0, 1, 0, 0],
    ],
    dtype=float,
)

# Symmetry adapted coordinates: A1 (Q1), T2 (Q2-Q4) and E (Q5, Q6)
_RHO_TO_Q = np.array(
    [
        [_6, _6, _6, _6, _6, _6],
        [_2, 0, 0, -_2, 0, 0],
        [0, _2, 0, 0, -_2, 0],
        [0, 0, _2, 0, 0, -_2],
        [0, 0.5, -0.5, 0, 0.5, -0.5],
        [_3, -_12, -_12, _3, -_12, -_12],
    ]
)

R_TO_Q = _RHO_TO_Q @ _R_TO_RHO


class FourBodyInvariants(InvariantTransform):
    body_order = 4
    degrees = ((1, 2, 3, 4, 2, 3), (0, 3, 4, 5, 6, 9))

    def invariants(self, r):
        if not isinstance(r, DualArray):
            r = self._checked(r)

        return _invariants_q6(R_TO_Q @ r)


def _invariants_q6(Q):
    """Invariants as polynomials of the symmetry adapted coordinates"""
    Q2 = Q * Q
    Q2_34, Q2_24, Q2_23 = Q2[2] * Q2[3], Q2[1] * Q2[3], Q2[1] * Q2[2]
    rt3 = 3.0**0.5
    Q_56 = Q[4] * Q[5]

    primary = stack(
        [
            Q[0],
            Q2[1] + Q2[2] + Q2[3],
            Q[1] * Q[2] * Q[3],
            Q2_34 + Q2_24 + Q2_23,
            Q2[4] + Q2[5],
            Q[5] * (Q2[5] - 3 * Q2[4]),
        ]
    )

    secondary = stack(
        [
            1.0,
            Q[5] * (2 * Q2[1] - Q2[2] - Q2[3])
            + rt3 * Q[4] * (Q2[2] - Q2[3]),
            (Q2[5] - Q2[4]) * (2 * Q2[1] - Q2[2] - Q2[3])
            - 2 * rt3 * Q_56 * (Q2[2] - Q2[3]),
            Q[5] * (2 * Q2_34 - Q2_24 - Q2_23) + rt3 * Q[4] * (Q2_24 - Q2_23),
            (Q2[5] - Q2[4]) * (2 * Q2_34 - Q2_24 - Q2_23)
            - 2 * rt3 * Q_56 * (Q2_24 - Q2_23),
            (Q2[2] - Q2[3])
            * (Q2[3] - Q2[1])
            * (Q2[1] - Q2[2])
            * Q[4]
            * (3 * Q2[5] - Q2[4]),
        ]
    )

    return primary, secondary
