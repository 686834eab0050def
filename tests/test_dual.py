import numpy as np
from nbodyips.invariants.dual import DualArray, stack


def test_variables_seed_identity():
    x = DualArray.variables([1.0, 2.0, 3.0])

    assert x.n_variables == 3
    assert len(x) == 3
    assert np.allclose(x.jac, np.eye(3))


def test_product_rule():
    x = DualArray.variables([2.0, 3.0])
    y = x[0] * x[1]

    assert np.isclose(y.val, 6.0)
    assert np.allclose(y.jac, [3.0, 2.0])


def test_arithmetic_with_constants():
    x = DualArray.variables([2.0, 3.0])
    y = 3 * x[0] - 1.0 + 2.0 * x[1] - x[0]

    assert np.isclose(y.val, 3 * 2.0 - 1.0 + 2.0 * 3.0 - 2.0)
    assert np.allclose(y.jac, [2.0, 2.0])

    z = 1.0 - x
    assert np.allclose(z.val, [-1.0, -2.0])
    assert np.allclose(z.jac, -np.eye(2))


def test_power():
    x = DualArray.variables([2.0])
    y = x**3

    assert np.allclose(y.val, [8.0])
    assert np.allclose(y.jac, [[12.0]])

    assert np.allclose((x**0).jac, [[0.0]])


def test_matrix_product():
    A = np.array([[1.0, 2.0], [0.0, -1.0], [3.0, 1.0]])
    x = DualArray.variables([0.5, 1.5])
    y = A @ x

    assert isinstance(y, DualArray)
    assert np.allclose(y.val, A @ np.array([0.5, 1.5]))
    assert np.allclose(y.jac, A)


def test_sum_and_gather():
    x = DualArray.variables([1.0, 2.0, 3.0])
    y = (x[np.array([0, 2])] * x[np.array([1, 1])]).sum()

    assert np.isclose(y.val, 1.0 * 2.0 + 3.0 * 2.0)
    assert np.allclose(y.jac, [2.0, 4.0, 2.0])


def test_stack():
    x = DualArray.variables([1.0, 2.0])
    y = stack([1.0, x[0] * x[1]])

    assert isinstance(y, DualArray)
    assert np.allclose(y.val, [1.0, 2.0])
    assert np.allclose(y.jac, [[0.0, 0.0], [2.0, 1.0]])

    z = stack([1.0, 2.0])
    assert isinstance(z, np.ndarray)
