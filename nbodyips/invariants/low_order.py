import numpy as np
from nbodyips.invariants._base import InvariantTransform


class TwoBodyInvariants(InvariantTransform):
    """The length of the single edge is the only invariant"""

    body_order = 2
    degrees = ((1,), (0,))

    def invariants(self, r):
        return self._checked(r).copy(), np.ones(1)

    def invariants_ed(self, r):
        r = self._checked(r)
        return r.copy(), np.ones(1), np.ones((1, 1)), np.zeros((1, 1))


class ThreeBodyInvariants(InvariantTransform):
    """
    Elementary symmetric polynomials of the three edge lengths
    r = [r12, r13, r23], the secondary invariant is the constant 1
    """

    body_order = 3
    degrees = ((1, 2, 3), (0,))

    def invariants(self, r):
        r = self._checked(r)
        primary = np.array(
            [
                r[0] + r[1] + r[2],
                r[0] * r[1] + r[0] * r[2] + r[1] * r[2],
                r[0] * r[1] * r[2],
            ]
        )
        return primary, np.ones(1)

    def invariants_ed(self, r):
        r = self._checked(r)
        I1, I2 = self.invariants(r)

        dI1 = np.array(
            [
                [1.0, 1.0, 1.0],
                [r[1] + r[2], r[0] + r[2], r[0] + r[1]],
                [r[1] * r[2], r[0] * r[2], r[0] * r[1]],
            ]
        )
        return I1, I2, dI1, np.zeros((1, 3))
