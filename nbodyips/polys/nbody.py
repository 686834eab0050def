import json
import numpy as np
from typing import Dict, List, Optional, Sequence, Tuple, Union
from nbodyips.log import logger
from nbodyips.dictionary import Dictionary
from nbodyips.exceptions import DegreeUndefinedOnMixedTerm
from nbodyips.invariants import tdegree
from nbodyips.monomials import monomial, monomial_d
from nbodyips.polys._base import NBodyFunction
from nbodyips.utils import edges2bo


Tup = Tuple[int, ...]


class NBody(NBodyFunction):
    """
    N-body polynomial of the invariants. A tuple α of length M+1 defines
    the basis function

        I2[α[M]] * ∏_{j<M} I1[j]^α[j]

    where I1, I2 are the primary and secondary invariants; α[M] = 0 selects
    the constant secondary invariant
    """

    def __init__(
        self,
        tuples: Sequence[Sequence[int]],
        coefficients: Sequence[float],
        dictionary: Dictionary,
        body_order: Optional[int] = None,
    ):
        """
        -----------------------------------------------------------------------
        Arguments:
            tuples: Exponent tuples, each of length M+1

            coefficients: One coefficient per tuple

            dictionary:

            body_order: Inferred from the tuple length if None

        Raises:
            (ValueError | nbodyips.exceptions.InvalidBodyOrder):
        """
        self.tuples: List[Tup] = [tuple(int(a) for a in t) for t in tuples]
        self.coefficients = np.array(coefficients, dtype=float).reshape(-1)

        if len(self.tuples) != len(self.coefficients):
            raise ValueError(
                f'Had {len(self.tuples)} tuples but '
                f'{len(self.coefficients)} coefficients'
            )

        if body_order is None:
            if len(self.tuples) == 0:
                raise ValueError(
                    'Cannot infer the body order of a term without tuples'
                )

            body_order = edges2bo(len(self.tuples[0]) - 1)

        super().__init__(dictionary=dictionary, body_order=body_order)

        for alpha in self.tuples:
            self._check_tuple(alpha)

    def _check_tuple(self, alpha: Tup) -> None:
        if len(alpha) != self.n_edges + 1:
            raise ValueError(
                f'A {self.body_order}-body tuple must have length '
                f'{self.n_edges + 1}, had {alpha}'
            )

        if any(a < 0 for a in alpha[:-1]):
            raise ValueError(f'Exponents must be non-negative, had {alpha}')

        if not 0 <= alpha[-1] < self._transform.n_secondary:
            raise ValueError(
                f'Secondary invariant index must be in '
                f'[0, {self._transform.n_secondary - 1}], had {alpha}'
            )

        return None

    def __len__(self) -> int:
        return len(self.tuples)

    def __eq__(self, other):
        return (
            isinstance(other, NBody)
            and self.body_order == other.body_order
            and self.tuples == other.tuples
            and np.array_equal(self.coefficients, other.coefficients)
            and self.dictionary == other.dictionary
        )

    @property
    def degree(self) -> int:
        """
        Total degree of a basis function

        -----------------------------------------------------------------------
        Raises:
            (nbodyips.exceptions.DegreeUndefinedOnMixedTerm): If this term is
                                                              not made from a
                                                              single tuple
        """
        if len(self) != 1:
            raise DegreeUndefinedOnMixedTerm(
                'Degree is only defined for a basis function with a single '
                f'tuple. This term had {len(self)}'
            )

        return tdegree(self.tuples[0])

    def evaluate_I(self, II):
        I1, I2 = II[0], II[1]
        E = 0.0

        for alpha, c in zip(self.tuples, self.coefficients):
            E += c * I2[alpha[-1]] * monomial(alpha, I1)

        return E

    def evaluate_I_ed(self, II):
        I1, I2, dI1, dI2 = II
        E = 0.0
        dM = np.zeros(len(I1))
        dE = np.zeros(dI1.shape[1])

        for alpha, c in zip(self.tuples, self.coefficients):
            m, m_d = monomial_d(alpha, I1)
            E += c * I2[alpha[-1]] * m  # value of the function itself
            dM += (c * I2[alpha[-1]]) * m_d  # I2 ∇m, before the chain rule
            dE += (c * m) * dI2[alpha[-1]]  # ∇I2 m

        # Chain rule through the primary invariants
        dE += dM @ dI1
        return E, dE

    def compile(self) -> 'nbodyips.polys.fast.StNBody':
        """Fast, fixed-form representation of this term"""
        from nbodyips.polys.fast import StNBody

        return StNBody(self)

    def to_dict(self) -> dict:
        return {
            'body_order': self.body_order,
            'tuples': [list(t) for t in self.tuples],
            'coefficients': [float(c) for c in self.coefficients],
            'dictionary': list(self.dictionary.serialize()),
        }

    @classmethod
    def from_dict(
        cls, data: dict, dictionaries: Optional[dict] = None
    ) -> 'NBody':
        """
        -----------------------------------------------------------------------
        Arguments:
            data: {'body_order', 'tuples', 'coefficients', 'dictionary'}

            dictionaries: Names -> Dictionary already constructed. Terms
                          deserialised with the same dict share a single
                          Dictionary per pair of names
        """
        names = tuple(data['dictionary'])

        if dictionaries is None:
            dictionary = Dictionary.deserialize(names)

        else:
            if names not in dictionaries:
                dictionaries[names] = Dictionary.deserialize(names)

            dictionary = dictionaries[names]

        return cls(
            tuples=data['tuples'],
            coefficients=data['coefficients'],
            dictionary=dictionary,
            body_order=int(data['body_order']),
        )


class OneBody:
    """On-site energy, a constant per atom"""

    body_order = 1
    dictionary = None

    def __init__(self, value: float):
        self.value = float(value)

    @property
    def tuples(self) -> List[Tup]:
        return [()]

    @property
    def coefficients(self) -> np.ndarray:
        return np.array([self.value])

    @property
    def basis_key(self) -> Tuple:
        return self.__class__.__name__, 1, None

    def __len__(self):
        return 1

    def __eq__(self, other):
        return isinstance(other, OneBody) and self.value == other.value

    def evaluate(self) -> float:
        return self.value

    def to_dict(self) -> dict:
        return {
            'body_order': 1,
            'tuples': [[]],
            'coefficients': [self.value],
            'dictionary': None,
        }

    def __repr__(self):
        return f'OneBody({self.value})'


Term = Union[NBodyFunction, OneBody]


def serialize(V: Term) -> dict:
    """Serialise a basis function/term to a dictionary"""
    return V.to_dict()


def deserialize(
    data: dict, dictionaries: Optional[dict] = None
) -> Union[NBody, OneBody]:
    """
    Term from a serialised dictionary. A 1-body term is the sum of its
    coefficients

    ---------------------------------------------------------------------------
    Arguments:
        data: {'body_order', 'tuples', 'coefficients', 'dictionary'}

        dictionaries: Names -> Dictionary memo shared between calls, so a
                      whole basis evaluates its invariants once per
                      dictionary

    Returns:
        (nbodyips.polys.NBody | nbodyips.polys.OneBody):
    """
    if int(data['body_order']) == 1:
        return OneBody(sum(data['coefficients']))

    return NBody.from_dict(data, dictionaries)


def save_basis(filename: str, basis: Sequence[Term]) -> None:
    """Save a list of terms as a .json file"""

    if not filename.endswith('.json'):
        logger.warning('Filename had no .json extension - adding')
        filename += '.json'

    with open(filename, 'w') as json_file:
        json.dump([serialize(V) for V in basis], json_file)

    return None


def load_basis(filename: str) -> List[Term]:
    """
    Load a list of terms from a .json file. Terms saved with the same
    dictionary names share one Dictionary
    """
    dictionaries = {}

    with open(filename, 'r') as json_file:
        return [
            deserialize(data, dictionaries) for data in json.load(json_file)
        ]


def _check_matching(D: Dictionary, D1: Dictionary) -> None:
    """Warn if two dictionaries are not the same"""

    if D == D1:
        return None

    if D.has_names and D.names == D1.names:
        logger.warning(
            f'Matching two different dictionaries with the same names '
            f'{D.names}. Using the first'
        )
    else:
        logger.warning(
            f'Matching two non-matching dictionaries! {D.names} and '
            f'{D1.names}. Using the first'
        )

    return None


def match_dictionary(V: NBody, V1: NBodyFunction) -> NBody:
    """Term V rebuilt with the dictionary of V1"""
    _check_matching(V1.dictionary, V.dictionary)
    return NBody(V.tuples, V.coefficients, V1.dictionary, V.body_order)


def combine_basis(
    basis: Sequence[Term], coefficients: Sequence[float]
) -> Term:
    """
    Combine many terms of the same type into one, e.g. a basis and the
    coefficients obtained by fitting. Equal tuples are merged by summing
    their coefficients, and tuples with a zero coefficient are dropped. The
    result has sorted, unique tuples

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms with the same body order and matching dictionaries

        coefficients: Multiplier of each term

    Returns:
        (nbodyips.polys.NBody | nbodyips.polys.OneBody):

    Raises:
        (ValueError):
    """
    if len(basis) == 0 or len(basis) != len(coefficients):
        raise ValueError(
            f'Cannot combine {len(basis)} terms with '
            f'{len(coefficients)} coefficients'
        )

    first = basis[0]
    if any(b.body_order != first.body_order for b in basis):
        raise ValueError('Can only combine terms with the same body order')

    if first.body_order == 1:
        return OneBody(sum(c * b.value for b, c in zip(basis, coefficients)))

    for b in basis[1:]:
        _check_matching(first.dictionary, b.dictionary)

    pairs = [
        (t, outer * c)
        for b, outer in zip(basis, coefficients)
        for t, c in zip(b.tuples, b.coefficients)
    ]
    pairs.sort(key=lambda pair: pair[0])

    tuples, coeffs = [], []
    for t, c in pairs:
        if len(tuples) > 0 and tuples[-1] == t:
            coeffs[-1] += c
        else:
            tuples.append(t)
            coeffs.append(c)

    nonzero = [i for i, c in enumerate(coeffs) if c != 0.0]

    return NBody(
        [tuples[i] for i in nonzero],
        [coeffs[i] for i in nonzero],
        first.dictionary,
        body_order=first.body_order,
    )


def evaluate_many(basis: Sequence[NBodyFunction], r) -> np.ndarray:
    """
    Values of many terms of the same body order on a single simplex. The
    invariants are evaluated once per distinct dictionary

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms

        r: Edge lengths, shape = (M,)

    Returns:
        (np.ndarray): shape = (len(basis),)
    """
    r = np.asarray(r, dtype=float)
    E = np.empty(len(basis))
    cache: Dict[Dictionary, tuple] = {}

    for ib, b in enumerate(basis):
        D = b.dictionary

        if D not in cache:
            cache[D] = (D.invariants(r), D.fcut(r))

        II, fc = cache[D]
        E[ib] = b.evaluate_I(II) * fc

    return E


def evaluate_many_d(basis: Sequence[NBodyFunction], r) -> np.ndarray:
    """
    Gradients w.r.t. the edge lengths of many terms on a single simplex

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms

        r: Edge lengths, shape = (M,)

    Returns:
        (np.ndarray): shape = (len(basis), M)
    """
    r = np.asarray(r, dtype=float)
    dE = np.empty((len(basis), len(r)))
    cache: Dict[Dictionary, tuple] = {}

    for ib, b in enumerate(basis):
        D = b.dictionary

        if D not in cache:
            cache[D] = (D.invariants_ed(r), D.fcut_d(r))

        II, (fc, fc_d) = cache[D]
        E, dE_b = b.evaluate_I_ed(II)
        dE[ib] = dE_b * fc + E * fc_d

    return dE


def info(basis: Sequence[Term]) -> None:
    """Log a short description of a basis"""

    if len(basis) == 0:
        logger.info('Empty basis')
        return None

    logger.info(f'body-order = {basis[0].body_order}')
    logger.info(f'    length = {len(basis)}')

    if basis[0].body_order > 1:
        transform, cutoff = basis[0].dictionary.names
        logger.info(f' transform = {transform}')
        logger.info(f'    cutoff = {cutoff}')

    return None
