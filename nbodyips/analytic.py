import numpy as np
from functools import partial
from types import MappingProxyType
from typing import Callable, Tuple


class AnalyticFunction:
    """Univariate function together with its derivative"""

    def __init__(self, f: Callable, f_d: Callable):
        """
        Both functions must accept floats and numpy arrays (evaluated
        elementwise). Built from module-level functions, e.g. with
        functools.partial, an AnalyticFunction can be pickled

        -----------------------------------------------------------------------
        Arguments:
            f: r -> f(r)

            f_d: r -> f'(r)
        """
        self.f = f
        self.f_d = f_d

    def __call__(self, r):
        return self.f(r)

    def d(self, r):
        return self.f_d(r)


# --------------------------- distance transforms ----------------------------


def _poly(r, p):
    return np.asarray(r, dtype=float) ** p


def _poly_d(r, p):
    return p * np.asarray(r, dtype=float) ** (p - 1)


def _exp(r, p):
    return np.exp(-p * np.asarray(r, dtype=float))


def _exp_d(r, p):
    return -p * np.exp(-p * np.asarray(r, dtype=float))


def poly_transform(p) -> AnalyticFunction:
    """r -> r^p"""
    return AnalyticFunction(partial(_poly, p=p), partial(_poly_d, p=p))


def exp_transform(p) -> AnalyticFunction:
    """r -> exp(-p r)"""
    return AnalyticFunction(partial(_exp, p=p), partial(_exp_d, p=p))


def inv_transform() -> AnalyticFunction:
    """r -> 1/r"""
    return poly_transform(-1)


def invsqrt_transform() -> AnalyticFunction:
    """r -> 1/√r"""
    return poly_transform(-0.5)


def invsquare_transform() -> AnalyticFunction:
    """r -> 1/r^2"""
    return poly_transform(-2)


# ---------------------------- cut-off functions -----------------------------


def _piecewise(r, inside, func):
    """
    Evaluate func only where inside(r) is true and zero elsewhere, so values
    outside are never computed
    """
    r = np.asarray(r, dtype=float)
    out = np.zeros_like(r)
    mask = inside(r)
    out[mask] = func(r[mask])
    return out[()]


def coscut(r, rc1, rc2):
    """1 for r < rc1, a cosine switch to 0 between rc1 and rc2"""
    r = np.asarray(r, dtype=float)
    s = np.clip((r - rc1) / (rc2 - rc1), 0.0, 1.0)
    return (0.5 * (np.cos(np.pi * s) + 1.0))[()]


def coscut_d(r, rc1, rc2):
    return _piecewise(
        r,
        lambda x: (x > rc1) & (x < rc2),
        lambda x: -0.5
        * np.pi
        / (rc2 - rc1)
        * np.sin(np.pi * (x - rc1) / (rc2 - rc1)),
    )


def cutsw(r, rcut, L):
    """Stillinger-Weber type cut-off, exp(L / (r - rcut)) for r < rcut"""
    return _piecewise(r, lambda x: x < rcut, lambda x: np.exp(L / (x - rcut)))


def cutsw_d(r, rcut, L):
    return _piecewise(
        r,
        lambda x: x < rcut,
        lambda x: -L / (x - rcut) ** 2 * np.exp(L / (x - rcut)),
    )


def cutsp(r, rc1, rc2):
    """1 for r < rc1, a cubic spline switch to 0 between rc1 and rc2"""
    r = np.asarray(r, dtype=float)
    s = np.clip((r - rc1) / (rc2 - rc1), 0.0, 1.0)
    return (1.0 - s**2 * (3.0 - 2.0 * s))[()]


def cutsp_d(r, rc1, rc2):
    r = np.asarray(r, dtype=float)
    s = np.clip((r - rc1) / (rc2 - rc1), 0.0, 1.0)
    return ((6.0 * s**2 - 6.0 * s) / (rc2 - rc1))[()]


def cutsquare(r, rcut):
    """(r - rcut)^2 for r < rcut"""
    return _piecewise(r, lambda x: x < rcut, lambda x: (x - rcut) ** 2)


def cutsquare_d(r, rcut):
    return _piecewise(r, lambda x: x < rcut, lambda x: 2.0 * (x - rcut))


def _twosided_inside(r, rnn, rcut):
    return (0.8 * rnn < r) & (r < rcut)


def cuttwosided(r, rnn, rin, rcut, p):
    """
    ((rnn/r)^p - (rnn/rcut)^p)^2 ((rnn/r)^p - (rnn/rin)^p)^2 for
    0.8 rnn < r < rcut
    """

    def _f(x):
        u = (rnn / x) ** p
        return (u - (rnn / rcut) ** p) ** 2 * (u - (rnn / rin) ** p) ** 2

    return _piecewise(r, partial(_twosided_inside, rnn=rnn, rcut=rcut), _f)


def cuttwosided_d(r, rnn, rin, rcut, p):

    def _f_d(x):
        u = (rnn / x) ** p
        a, b = (rnn / rcut) ** p, (rnn / rin) ** p
        du = -p * u / x
        return 2.0 * (u - a) * (u - b) * ((u - b) + (u - a)) * du

    return _piecewise(r, partial(_twosided_inside, rnn=rnn, rcut=rcut), _f_d)


def cos_cutoff(rc1, rc2) -> Tuple[AnalyticFunction, float]:
    return (
        AnalyticFunction(
            partial(coscut, rc1=rc1, rc2=rc2),
            partial(coscut_d, rc1=rc1, rc2=rc2),
        ),
        float(rc2),
    )


def sw_cutoff(L, rcut) -> Tuple[AnalyticFunction, float]:
    return (
        AnalyticFunction(
            partial(cutsw, rcut=rcut, L=L), partial(cutsw_d, rcut=rcut, L=L)
        ),
        float(rcut),
    )


def spline_cutoff(rc1, rc2) -> Tuple[AnalyticFunction, float]:
    return (
        AnalyticFunction(
            partial(cutsp, rc1=rc1, rc2=rc2),
            partial(cutsp_d, rc1=rc1, rc2=rc2),
        ),
        float(rc2),
    )


def square_cutoff(rcut) -> Tuple[AnalyticFunction, float]:
    return (
        AnalyticFunction(
            partial(cutsquare, rcut=rcut), partial(cutsquare_d, rcut=rcut)
        ),
        float(rcut),
    )


def twosided_cutoff(rnn, rin, rcut, p) -> Tuple[AnalyticFunction, float]:
    kwargs = dict(rnn=rnn, rin=rin, rcut=rcut, p=p)
    return (
        AnalyticFunction(
            partial(cuttwosided, **kwargs), partial(cuttwosided_d, **kwargs)
        ),
        float(rcut),
    )


# Name -> constructor of an AnalyticFunction
TRANSFORMS = MappingProxyType(
    {
        'poly': poly_transform,
        'exp': exp_transform,
        'inv': inv_transform,
        'invsqrt': invsqrt_transform,
        'invsquare': invsquare_transform,
    }
)

# Name -> constructor of an (AnalyticFunction, cut-off radius) pair
CUTOFFS = MappingProxyType(
    {
        'cos': cos_cutoff,
        'sw': sw_cutoff,
        'spline': spline_cutoff,
        'square': square_cutoff,
        'twosided': twosided_cutoff,
    }
)
