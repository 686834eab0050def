import ase
import numpy as np
from typing import Iterator, List, Sequence, Tuple, Union
from scipy.spatial import distance_matrix
from nbodyips.polys import NBodyFunction, OneBody
from nbodyips.polys import evaluate_many as _evaluate_many_simplex
from nbodyips.polys import evaluate_many_d as _evaluate_many_d_simplex
from nbodyips.utils import simplex_edges


Configuration = Union[ase.atoms.Atoms, np.ndarray]


def _distances_and_vectors(
    atoms: Configuration,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    All pairwise distances and difference vectors, with D[i, j] = x_j - x_i.
    Periodic ASE atoms use the minimum image convention
    """
    if isinstance(atoms, ase.atoms.Atoms):
        mic = bool(np.any(atoms.pbc))
        vectors = atoms.get_all_distances(mic=mic, vector=True)
        return np.linalg.norm(vectors, axis=2), vectors

    coordinates = np.asarray(atoms, dtype=float)
    if coordinates.ndim != 2 or coordinates.shape[1] != 3:
        raise ValueError(
            'Configuration must be ASE atoms or an array of coordinates '
            f'with shape (n, 3). Had shape {coordinates.shape}'
        )

    vectors = coordinates[None, :, :] - coordinates[:, None, :]
    return distance_matrix(coordinates, coordinates), vectors


def n_atoms(atoms: Configuration) -> int:
    return len(atoms)


def simplices(
    atoms: Configuration, body_order: int, rcut: float
) -> Iterator[Tuple[Tuple[int, ...], np.ndarray, np.ndarray]]:
    """
    Clusters of body_order atoms (i < j < k ...) with all pairwise distances
    below the cut-off

    ---------------------------------------------------------------------------
    Arguments:
        atoms: ASE atoms or coordinates with shape (n, 3)

        body_order: N

        rcut: Cut-off radius (Å)

    Yields:
        (tuple): Atom indices, edge lengths (M,) in lexicographic order and
                 difference vectors x_j - x_i of each edge (M, 3)
    """
    dists, vectors = _distances_and_vectors(atoms)
    n = len(dists)
    edges = simplex_edges(body_order)
    neighbours = dists < rcut

    def _extend(cluster: List[int]):
        if len(cluster) == body_order:
            yield tuple(cluster)
            return

        for k in range(cluster[-1] + 1, n):
            if all(neighbours[i, k] for i in cluster):
                yield from _extend(cluster + [k])

    for i in range(n):
        for cluster in _extend([i]):
            idxs = [(cluster[a], cluster[b]) for a, b in edges]
            r = np.array([dists[i_, j_] for i_, j_ in idxs])
            v = np.array([vectors[i_, j_] for i_, j_ in idxs])
            yield cluster, r, v


def _grouped(basis: Sequence) -> dict:
    """Indices of the terms in a basis grouped by body order and cut-off"""
    groups = {}

    for i, b in enumerate(basis):
        key = (b.body_order, None if b.body_order == 1 else b.cutoff)
        groups.setdefault(key, []).append(i)

    return groups


def evaluate_many(
    basis: Sequence[Union[NBodyFunction, OneBody]], atoms: Configuration
) -> np.ndarray:
    """
    Energy of every term summed over all simplices in a configuration

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms, possibly with different body orders

        atoms: ASE atoms or coordinates with shape (n, 3)

    Returns:
        (np.ndarray): shape = (len(basis),)
    """
    energies = np.zeros(len(basis))

    for (body_order, rcut), idxs in _grouped(basis).items():
        if body_order == 1:
            for i in idxs:
                energies[i] = basis[i].evaluate() * n_atoms(atoms)
            continue

        terms = [basis[i] for i in idxs]
        for _, r, _ in simplices(atoms, body_order, rcut):
            energies[idxs] += _evaluate_many_simplex(terms, r)

    return energies


def evaluate_many_d(
    basis: Sequence[Union[NBodyFunction, OneBody]], atoms: Configuration
) -> np.ndarray:
    """
    Forces of every term, F = -∇E, over all simplices in a configuration

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms, possibly with different body orders

        atoms: ASE atoms or coordinates with shape (n, 3)

    Returns:
        (np.ndarray): shape = (len(basis), n_atoms, 3)
    """
    F = np.zeros((len(basis), n_atoms(atoms), 3))

    for (body_order, rcut), idxs in _grouped(basis).items():
        if body_order == 1:
            continue

        terms = [basis[i] for i in idxs]
        edges = simplex_edges(body_order)
        idxs = np.array(idxs)

        for cluster, r, v in simplices(atoms, body_order, rcut):
            dE = _evaluate_many_d_simplex(terms, r)  # (n_terms, M)
            units = v / r[:, None]  # (x_j - x_i) / r_ij

            for e, (a, b) in enumerate(edges):
                i, j = cluster[a], cluster[b]
                # dr_ij/dx_i = -(x_j - x_i)/r_ij
                F[idxs, i] += dE[:, e, None] * units[e]
                F[idxs, j] -= dE[:, e, None] * units[e]

    return F


def energy(V: Union[NBodyFunction, OneBody], atoms: Configuration) -> float:
    """Total energy of a single term"""
    return float(evaluate_many([V], atoms)[0])


def forces(
    V: Union[NBodyFunction, OneBody], atoms: Configuration
) -> np.ndarray:
    """Forces of a single term, shape = (n_atoms, 3)"""
    return evaluate_many_d([V], atoms)[0]
