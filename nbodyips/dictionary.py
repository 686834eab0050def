import re
import numpy as np
from typing import Mapping, Optional, Sequence, Tuple, Union
from nbodyips.analytic import AnalyticFunction, TRANSFORMS, CUTOFFS
from nbodyips.config import Config
from nbodyips.exceptions import UnknownSymbol, NonSerializableDictionary
from nbodyips.invariants import transform_for
from nbodyips.utils import edges2bo


Symbol = Union[str, Sequence]

_symbol_regex = re.compile(r'^\s*(\w+)\s*(?:\((.*)\))?\s*$')


class Dictionary:
    """
    Distance transform and cut-off envelope shared by all the basis
    functions of a term
    """

    def __init__(
        self,
        transform: AnalyticFunction,
        cutoff: AnalyticFunction,
        rcut: float,
        names: Tuple[str, str] = ('', ''),
    ):
        """
        Dictionary of basis functions. Invariants are computed in the
        transformed coordinates t(r) and every N-body function is multiplied
        by the product of the cut-off function over the edges of the simplex.
        Construct one from registered names with e.g.
        ```
        D = Dictionary.from_symbols('poly(-1)', 'cos(4.0, 5.5)')
        D = Dictionary.from_symbols(('exp', 3.0), ('sw', 1.0, 5.0))
        ```
        Only dictionaries constructed from symbols can be serialised

        -----------------------------------------------------------------------
        Arguments:
            transform: Distance transform r -> t(r) and its derivative

            cutoff: Cut-off function and its derivative

            rcut: Cut-off radius (Å)

            names: Symbolic names of the transform and cut-off
        """
        self.transform = transform
        self.cutoff = cutoff
        self.rcut = float(rcut)
        self.names = (str(names[0]), str(names[1]))

    @classmethod
    def from_symbols(
        cls,
        transform: Symbol,
        cutoff: Symbol,
        transforms: Mapping = TRANSFORMS,
        cutoffs: Mapping = CUTOFFS,
    ) -> 'Dictionary':
        """
        Construct a dictionary from the names of a transform and cut-off

        -----------------------------------------------------------------------
        Arguments:
            transform: e.g. 'poly(-2)', 'exp(3.0)', 'inv' or ('poly', -2)

            cutoff: e.g. 'cos(4.0, 5.5)', 'square(5.0)' or ('sw', 1.0, 5.0)

            transforms: Name -> transform constructor

            cutoffs: Name -> cut-off constructor

        Raises:
            (nbodyips.exceptions.UnknownSymbol):
        """
        t_name, t_params = _parse_symbol(transform)
        c_name, c_params = _parse_symbol(cutoff)

        if t_name not in transforms:
            raise UnknownSymbol(
                f'Unknown transform "{t_name}". Available: {list(transforms)}'
            )

        if c_name not in cutoffs:
            raise UnknownSymbol(
                f'Unknown cut-off "{c_name}". Available: {list(cutoffs)}'
            )

        try:
            f_transform = transforms[t_name](*t_params)
            f_cutoff, rcut = cutoffs[c_name](*c_params)

        except TypeError as err:
            raise ValueError(
                f'Incorrect parameters for {transform} or {cutoff}: {err}'
            )

        names = (
            _symbol_string(transform, t_name, t_params),
            _symbol_string(cutoff, c_name, c_params),
        )
        return cls(f_transform, f_cutoff, rcut, names=names)

    @classmethod
    def default(cls) -> 'Dictionary':
        """Dictionary with the default parameters in Config"""
        return cls.from_symbols(
            Config.dictionary_params['transform'],
            Config.dictionary_params['cutoff'],
        )

    @property
    def has_names(self) -> bool:
        return self.names[0] != '' and self.names[1] != ''

    def serialize(self) -> Tuple[str, str]:
        """
        Names of the transform and cut-off

        -----------------------------------------------------------------------
        Raises:
            (nbodyips.exceptions.NonSerializableDictionary):
        """
        if not self.has_names:
            raise NonSerializableDictionary(
                'This dictionary was not constructed from symbols and '
                'cannot be serialized'
            )

        return self.names

    @classmethod
    def deserialize(cls, names: Sequence[str]) -> 'Dictionary':
        transform, cutoff = names
        return cls.from_symbols(transform, cutoff)

    # ------------------------- invariants -----------------------------------

    def invariants(self, r) -> Tuple[np.ndarray, np.ndarray]:
        """Invariants in the transformed coordinates t(r)"""
        t = self.transform(np.asarray(r, dtype=float))
        return transform_for(edges2bo(len(t))).invariants(t)

    def invariants_d(self, r) -> Tuple[np.ndarray, np.ndarray]:
        """Jacobians w.r.t. r of the invariants in transformed coordinates"""
        _, _, dI1, dI2 = self.invariants_ed(r)
        return dI1, dI2

    def invariants_ed(self, r) -> Tuple[np.ndarray, ...]:
        """
        Invariants of t(r) and their Jacobians w.r.t. r, where each column
        of the Jacobian of the raw invariants is scaled by t'(r)

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, shape = (M,)

        Returns:
            (tuple(np.ndarray, ...)): I1, I2, dI1 (P, M), dI2 (S, M)
        """
        r = np.asarray(r, dtype=float)
        t = self.transform(r)
        I1, I2, dI1, dI2 = transform_for(edges2bo(len(t))).invariants_ed(t)

        t_d = self.transform.d(r)
        return I1, I2, dI1 * t_d[None, :], dI2 * t_d[None, :]

    # ------------------------- cut-off --------------------------------------

    def fcut(self, r):
        """
        Cut-off of a single distance, or the product of the cut-off
        function over all edges of a simplex
        """
        fc = self.cutoff(r)
        return fc if np.ndim(fc) == 0 else float(np.prod(fc))

    def fcut_d(self, r) -> Tuple[float, np.ndarray]:
        """
        Product of the cut-off over the edges of a simplex and its gradient

        -----------------------------------------------------------------------
        Arguments:
            r: Edge lengths, shape = (M,)

        Returns:
            (tuple(float, np.ndarray)): fc, ∇fc with shape (M,)
        """
        r = np.asarray(r, dtype=float)
        fc = np.atleast_1d(self.cutoff(r))
        fc_d = np.atleast_1d(self.cutoff.d(r))

        grad = np.empty_like(fc)
        for i in range(len(fc)):
            grad[i] = fc_d[i] * np.prod(np.delete(fc, i))

        return float(np.prod(fc)), grad

    def __eq__(self, other):
        """
        Dictionaries are equal when they share the same functions. Two
        dictionaries constructed separately from the same symbols are not
        equal, but match (see nbodyips.polys.combine_basis)
        """
        return (
            isinstance(other, Dictionary)
            and self.transform is other.transform
            and self.cutoff is other.cutoff
            and self.rcut == other.rcut
        )

    def __hash__(self):
        return hash((id(self.transform), id(self.cutoff), self.rcut))

    def __repr__(self):
        return f'Dictionary(names={self.names}, rcut={self.rcut})'


def _parse_symbol(symbol: Symbol) -> Tuple[str, tuple]:
    """
    Name and parameters of a symbol given as a string 'name(p1, p2)' or a
    sequence ('name', p1, p2)
    """
    if isinstance(symbol, str):
        match = _symbol_regex.match(symbol)

        if match is None:
            raise UnknownSymbol(f'Could not parse symbol "{symbol}"')

        name, params = match.group(1), match.group(2)

        if params is None or params.strip() == '':
            return name, ()

        return name, tuple(_parse_number(p) for p in params.split(','))

    if len(symbol) == 0:
        raise UnknownSymbol('Cannot parse an empty symbol')

    return str(symbol[0]), tuple(symbol[1:])


def _parse_number(string: str) -> Union[int, float]:
    string = string.strip()

    try:
        return int(string)

    except ValueError:
        try:
            return float(string)
        except ValueError:
            raise UnknownSymbol(f'Could not parse parameter "{string}"')


def _symbol_string(symbol: Symbol, name: str, params: tuple) -> str:
    """String for a symbol, unchanged if it was given as a string"""
    if isinstance(symbol, str):
        return symbol

    if len(params) == 0:
        return name

    return f'{name}({", ".join(str(p) for p in params)})'
