import nbodyips as nbip
import pytest
import numpy as np
from ase import Atoms
from nbodyips.utils import bo2edges


@pytest.fixture
def rng():
    return np.random.default_rng(seed=0)


@pytest.fixture
def random_edges(rng):
    """Function returning random edge lengths of an N-body simplex"""

    def _edges(body_order, low=0.8, high=1.6):
        return rng.uniform(low, high, size=bo2edges(body_order))

    return _edges


@pytest.fixture
def dictionary():
    """Inverse distance transform with a cosine cut-off"""
    return nbip.Dictionary.from_symbols('poly(-1)', 'cos(2.5, 4.0)')


@pytest.fixture
def h4_cluster():
    """Slightly distorted H4 tetrahedron"""
    return Atoms(
        'H4',
        positions=[
            [0.0, 0.0, 0.0],
            [1.1, 0.05, 0.0],
            [0.5, 0.95, 0.1],
            [0.45, 0.35, 0.9],
        ],
    )


@pytest.fixture
def h6_cluster(rng):
    """Six atoms randomly displaced from an octahedron"""
    positions = 1.1 * np.array(
        [
            [1.0, 0.0, 0.0],
            [-1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, -1.0, 0.0],
            [0.0, 0.0, 1.0],
            [0.0, 0.0, -1.0],
        ]
    )
    positions += rng.uniform(-0.1, 0.1, size=positions.shape)
    return Atoms('H6', positions=positions)
