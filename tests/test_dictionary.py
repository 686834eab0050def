import pytest
import numpy as np
from nbodyips import Config, Dictionary
from nbodyips.analytic import (
    AnalyticFunction,
    CUTOFFS,
    poly_transform,
)
from nbodyips.exceptions import NonSerializableDictionary, UnknownSymbol


def test_from_symbols_string():
    D = Dictionary.from_symbols('poly(-1)', 'cos(4.0, 5.5)')

    assert D.names == ('poly(-1)', 'cos(4.0, 5.5)')
    assert np.isclose(D.rcut, 5.5)
    assert np.isclose(D.transform(2.0), 0.5)
    assert np.isclose(D.transform.d(2.0), -0.25)


def test_from_symbols_tuple():
    D = Dictionary.from_symbols(('exp', 2.0), ('sw', 1.0, 5.0))

    assert D.names == ('exp(2.0)', 'sw(1.0, 5.0)')
    assert np.isclose(D.rcut, 5.0)
    assert np.isclose(D.transform(1.0), np.exp(-2.0))


def test_serialization_round_trip():
    D = Dictionary.from_symbols('invsquare', 'spline(3.0, 4.5)')
    D1 = Dictionary.deserialize(D.serialize())

    assert D1.names == D.names
    assert np.isclose(D1.rcut, D.rcut)

    r = np.array([1.1, 2.0, 3.5])
    assert np.allclose(D1.transform(r), D.transform(r))
    assert np.allclose(D1.cutoff(r), D.cutoff(r))


def test_separately_constructed_dictionaries_are_not_equal():
    D = Dictionary.from_symbols('poly(-1)', 'cos(4.0, 5.5)')

    assert D == D
    assert D != Dictionary.from_symbols('poly(-1)', 'cos(4.0, 5.5)')


def test_unknown_symbol():

    with pytest.raises(UnknownSymbol):
        Dictionary.from_symbols('not_a_transform', 'cos(4.0, 5.5)')

    with pytest.raises(UnknownSymbol):
        Dictionary.from_symbols('poly(-1)', 'not_a_cutoff(1.0)')


def test_wrong_number_of_parameters():

    with pytest.raises(ValueError):
        Dictionary.from_symbols('poly(-1, 2, 3)', 'cos(4.0, 5.5)')


def test_non_serializable():
    f, rcut = CUTOFFS['cos'](2.0, 3.0)
    D = Dictionary(poly_transform(-1), f, rcut)

    with pytest.raises(NonSerializableDictionary):
        D.serialize()


def test_custom_registry():
    transforms = {'double': lambda: AnalyticFunction(lambda r: 2 * r,
                                                     lambda r: 2.0)}
    D = Dictionary.from_symbols('double', 'square(3.0)',
                                transforms=transforms)

    assert np.isclose(D.transform(1.5), 3.0)


def test_default_dictionary():
    D = Dictionary.default()

    assert D.names == (
        Config.dictionary_params['transform'],
        Config.dictionary_params['cutoff'],
    )


@pytest.mark.parametrize(
    'cutoff',
    [
        'cos(2.0, 3.0)',
        'sw(1.0, 3.0)',
        'spline(2.0, 3.0)',
        'square(3.0)',
        'twosided(1.0, 1.2, 3.0, 2)',
    ],
)
def test_cutoffs_vanish_beyond_rcut(cutoff):
    D = Dictionary.from_symbols('poly(-1)', cutoff)
    r = np.array([3.0, 3.01, 4.0, 10.0])

    assert np.isclose(D.rcut, 3.0)
    assert np.allclose(D.cutoff(r), 0.0)
    assert np.allclose(D.cutoff.d(r), 0.0)
    assert D.fcut(np.array([1.5, 1.6, 3.5])) == 0.0


@pytest.mark.parametrize(
    'cutoff',
    [
        'cos(2.0, 3.0)',
        'sw(1.0, 3.0)',
        'spline(2.0, 3.0)',
        'square(3.0)',
        'twosided(1.0, 1.2, 3.0, 2)',
    ],
)
def test_cutoff_derivatives(cutoff):
    D = Dictionary.from_symbols('poly(-1)', cutoff)
    h = 1e-6

    for r in (1.05, 1.9, 2.3, 2.7, 2.95):
        fd = (D.cutoff(r + h) - D.cutoff(r - h)) / (2 * h)
        assert np.isclose(D.cutoff.d(r), fd, rtol=1e-5, atol=1e-7)


def test_fcut_product(dictionary):
    r = np.array([1.0, 2.8, 3.3])
    fc, fc_d = dictionary.fcut_d(r)

    assert np.isclose(fc, np.prod(dictionary.cutoff(r)))
    assert np.isclose(dictionary.fcut(r), fc)

    h = 1e-6
    for k in range(3):
        rp, rm = r.copy(), r.copy()
        rp[k] += h
        rm[k] -= h
        fd = (dictionary.fcut(rp) - dictionary.fcut(rm)) / (2 * h)
        assert np.isclose(fc_d[k], fd, rtol=1e-6, atol=1e-8)


@pytest.mark.parametrize('body_order', [2, 3, 4, 5])
def test_transformed_invariant_chain_rule(body_order, random_edges):
    D = Dictionary.from_symbols('exp(1.5)', 'cos(2.5, 4.0)')
    r = random_edges(body_order)
    h = 1e-6

    dI1, dI2 = D.invariants_d(r)

    for k in range(len(r)):
        rp, rm = r.copy(), r.copy()
        rp[k] += h
        rm[k] -= h
        (I1p, I2p), (I1m, I2m) = D.invariants(rp), D.invariants(rm)

        assert np.allclose(dI1[:, k], (I1p - I1m) / (2 * h),
                           rtol=1e-6, atol=1e-8)
        assert np.allclose(dI2[:, k], (I2p - I2m) / (2 * h),
                           rtol=1e-6, atol=1e-8)
