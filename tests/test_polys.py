import os
import pytest
import numpy as np
from nbodyips import (
    Dictionary,
    NBody,
    OneBody,
    StNBody,
    combine_basis,
    serialize,
    deserialize,
    save_basis,
    load_basis,
    fast,
    poly_basis,
)
from nbodyips.exceptions import DegreeUndefinedOnMixedTerm, InvalidBodyOrder
from nbodyips.polys import evaluate_many, evaluate_many_d, match_dictionary


def _finite_difference(V, r, h=1e-6):
    grad = np.zeros(len(r))

    for k in range(len(r)):
        rp, rm = r.copy(), r.copy()
        rp[k] += h
        rm[k] -= h
        grad[k] = (V.evaluate(rp) - V.evaluate(rm)) / (2 * h)

    return grad


def _random_combination(basis, seed=0):
    rng = np.random.default_rng(seed=seed)
    return combine_basis(basis, rng.normal(size=len(basis)))


def test_single_basis_function(dictionary):
    V = NBody([(1, 1, 0, 0)], [2.0], dictionary)
    r = np.array([1.0, 1.2, 0.8])

    t = 1.0 / r
    expected = 2.0 * np.sum(t) * (t[0] * t[1] + t[0] * t[2] + t[1] * t[2])
    expected *= np.prod(dictionary.cutoff(r))

    assert V.body_order == 3
    assert V.degree == 3
    assert np.isclose(V.evaluate(r), expected)


def test_invalid_terms(dictionary):

    with pytest.raises(ValueError):
        NBody([(1, 0, 0, 0)], [1.0, 2.0], dictionary)

    with pytest.raises(ValueError):
        NBody([(1, 0, 0, 0)], [1.0], dictionary, body_order=4)

    with pytest.raises(ValueError):
        NBody([(-1, 0, 0, 0)], [1.0], dictionary)

    with pytest.raises(ValueError):
        # 3-body terms only have the constant secondary invariant
        NBody([(1, 0, 0, 1)], [1.0], dictionary)

    with pytest.raises(InvalidBodyOrder):
        NBody([(1,)], [1.0], dictionary, body_order=1)


def test_combine_basis(dictionary):
    basis = poly_basis(3, dictionary, deg=4)
    coefficients = np.linspace(0.5, 2.0, num=len(basis))
    V = combine_basis(basis, coefficients)

    assert len(V) == len(basis)
    assert V.tuples == sorted(V.tuples)

    r = np.array([1.1, 1.4, 0.9])
    expected = sum(c * b.evaluate(r) for b, c in zip(basis, coefficients))
    assert np.isclose(V.evaluate(r), expected)

    with pytest.raises(DegreeUndefinedOnMixedTerm):
        _ = V.degree


def test_combine_merges_equal_tuples(dictionary):
    b1 = NBody([(2, 0, 0, 0)], [1.0], dictionary)
    b2 = NBody([(1, 1, 0, 0)], [1.0], dictionary)

    V = combine_basis([b1, b2, b1], [1.0, 3.0, 0.5])
    assert V.tuples == [(1, 1, 0, 0), (2, 0, 0, 0)]
    assert np.allclose(V.coefficients, [3.0, 1.5])

    # Combining a term with itself
    V2 = combine_basis([V], [1.0])
    assert V2 == V


def test_combine_drops_zero_coefficients(dictionary):
    b = NBody([(2, 0, 0, 0)], [1.0], dictionary)

    V = combine_basis([b, b], [1.0, -1.0])
    assert len(V) == 0
    assert V.evaluate(np.array([1.0, 1.0, 1.0])) == 0.0

    assert len(combine_basis([b], [0.0])) == 0


def test_combine_different_body_orders(dictionary):
    b2 = NBody([(1, 0)], [1.0], dictionary)
    b3 = NBody([(1, 0, 0, 0)], [1.0], dictionary)

    with pytest.raises(ValueError):
        combine_basis([b2, b3], [1.0, 1.0])


def test_combine_warns_on_mismatched_dictionaries(caplog):
    D1 = Dictionary.from_symbols('poly(-1)', 'cos(2.5, 4.0)')
    D2 = Dictionary.from_symbols('poly(-2)', 'cos(2.5, 4.0)')

    b1 = NBody([(1, 0)], [1.0], D1)
    b2 = NBody([(2, 0)], [1.0], D2)

    V = combine_basis([b1, b2], [1.0, 1.0])

    assert V.dictionary is D1
    assert 'non-matching' in caplog.text


def test_match_dictionary(dictionary, caplog):
    D = Dictionary.from_symbols('poly(-1)', 'cos(2.5, 4.0)')
    V = NBody([(1, 0)], [1.0], D)
    V1 = NBody([(2, 0)], [1.0], dictionary)

    V_matched = match_dictionary(V, V1)
    assert V_matched.dictionary is dictionary
    assert V_matched.tuples == V.tuples
    assert 'same names' in caplog.text


@pytest.mark.parametrize('body_order, deg', [(2, 6), (3, 5), (4, 5), (5, 4)])
def test_serialization_round_trip(body_order, deg, dictionary, random_edges):
    V = _random_combination(poly_basis(body_order, dictionary, deg=deg))
    V1 = deserialize(serialize(V))

    assert V1.tuples == V.tuples
    assert np.allclose(V1.coefficients, V.coefficients)
    assert V1.dictionary.names == V.dictionary.names

    for _ in range(10):
        r = random_edges(body_order, low=0.8, high=3.5)
        assert np.isclose(V1.evaluate(r), V.evaluate(r))


def test_non_serializable_term():
    from nbodyips.analytic import cos_cutoff, inv_transform
    from nbodyips.exceptions import NonSerializableDictionary

    f, rcut = cos_cutoff(2.0, 3.0)
    V = NBody([(1, 0)], [1.0], Dictionary(inv_transform(), f, rcut))

    with pytest.raises(NonSerializableDictionary):
        serialize(V)


@pytest.mark.parametrize('body_order, deg', [(2, 8), (3, 6), (4, 6), (5, 5)])
def test_compiled_equals_raw(body_order, deg, dictionary, random_edges):
    V = _random_combination(poly_basis(body_order, dictionary, deg=deg))
    V_fast = fast(V)

    assert isinstance(V_fast, StNBody)
    assert len(V_fast) == len(V)

    for _ in range(5):
        r = random_edges(body_order, low=0.8, high=3.5)
        assert np.isclose(V_fast.evaluate(r), V.evaluate(r), rtol=1e-10)
        assert np.allclose(V_fast.evaluate_d(r), V.evaluate_d(r), rtol=1e-10)


@pytest.mark.parametrize('body_order, deg', [(2, 6), (3, 5), (4, 5), (5, 4)])
def test_gradient_finite_difference(
    body_order, deg, dictionary, random_edges
):
    V = _random_combination(poly_basis(body_order, dictionary, deg=deg))
    r = random_edges(body_order, low=1.0, high=3.5)

    assert np.allclose(
        V.evaluate_d(r), _finite_difference(V, r), rtol=1e-6, atol=1e-6
    )
    assert np.allclose(
        fast(V).evaluate_d(r), _finite_difference(V, r), rtol=1e-6, atol=1e-6
    )


def test_evaluate_many(dictionary, random_edges):
    D = Dictionary.from_symbols('exp(1.0)', 'cos(2.5, 4.0)')
    basis = poly_basis(4, dictionary, deg=4) + poly_basis(4, D, deg=3)
    r = random_edges(4)

    E = evaluate_many(basis, r)
    dE = evaluate_many_d(basis, r)

    assert E.shape == (len(basis),)
    assert dE.shape == (len(basis), 6)
    assert np.allclose(E, [b.evaluate(r) for b in basis])
    assert np.allclose(dE, [b.evaluate_d(r) for b in basis])


def test_term_vanishes_beyond_cutoff(dictionary):
    V = _random_combination(poly_basis(3, dictionary, deg=4))
    r = np.array([1.0, 1.2, dictionary.rcut + 0.1])

    assert V.evaluate(r) == 0.0
    assert np.allclose(V.evaluate_d(r), 0.0)


def test_one_body():
    V = OneBody(-0.5)

    assert V.body_order == 1
    assert V.evaluate() == -0.5
    assert deserialize(serialize(V)) == V

    V2 = combine_basis([OneBody(1.0), OneBody(2.0)], [2.0, -0.5])
    assert np.isclose(V2.value, 1.0)


def test_save_and_load_basis(dictionary, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    basis = poly_basis(3, dictionary, deg=3) + [OneBody(0.1)]
    save_basis('basis', basis)
    assert os.path.exists('basis.json')

    loaded = load_basis('basis.json')
    assert len(loaded) == len(basis)
    assert [b.tuples for b in loaded] == [b.tuples for b in basis]

    r = np.array([1.0, 1.5, 2.0])
    for b, b1 in zip(basis[:-1], loaded[:-1]):
        assert np.isclose(b.evaluate(r), b1.evaluate(r))


def _count_four_body_transforms(monkeypatch):
    from nbodyips.invariants.four_body import FourBodyInvariants

    calls = []
    invariants = FourBodyInvariants.invariants

    def counted(self, r):
        calls.append(1)
        return invariants(self, r)

    monkeypatch.setattr(FourBodyInvariants, 'invariants', counted)
    return calls


def test_loaded_basis_shares_one_dictionary(
    dictionary, random_edges, tmp_path, monkeypatch, caplog
):
    monkeypatch.chdir(tmp_path)

    basis = poly_basis(4, dictionary, deg=4)
    save_basis('basis.json', basis)
    loaded = load_basis('basis.json')

    assert len(loaded) > 1
    assert all(b.dictionary is loaded[0].dictionary for b in loaded)
    assert loaded[0].dictionary is not dictionary

    calls = _count_four_body_transforms(monkeypatch)
    r = random_edges(4)
    E = evaluate_many(loaded, r)

    # One invariant evaluation for the whole basis
    assert len(calls) == 1
    assert np.allclose(E, evaluate_many(basis, r))

    combine_basis(loaded, np.ones(len(loaded)))
    assert 'same names' not in caplog.text

    # Terms deserialised one at a time do not share a dictionary
    b1, b2 = (deserialize(serialize(b)) for b in basis[:2])
    assert b1.dictionary is not b2.dictionary


def test_info(dictionary, caplog):
    from nbodyips import info

    info(poly_basis(3, dictionary, deg=3))
    assert 'body-order = 3' in caplog.text
    assert 'poly(-1)' in caplog.text
