import os
import numpy as np
from time import time
from multiprocessing import Pool
from typing import Callable, List, Sequence
from nbodyips.config import Config
from nbodyips.log import logger
from nbodyips.simplices import Configuration, evaluate_many, evaluate_many_d
from nbodyips.utils import assert_finite


def _energy_row(basis, atoms) -> np.ndarray:
    return evaluate_many(basis, atoms)


def _force_rows(basis, atoms) -> np.ndarray:
    # (n_basis, n_atoms, 3) -> (3 n_atoms, n_basis)
    F = evaluate_many_d(basis, atoms)
    return F.reshape(len(basis), -1).T


def _run_parallel(
    function: Callable, basis: Sequence, configurations: Sequence
) -> List[np.ndarray]:
    """
    Apply a function to a basis and each configuration in parallel,
    returning the results in the order of the configurations
    """
    logger.info(
        f'Evaluating {len(basis)} basis functions over '
        f'{len(configurations)} configurations'
    )

    start_time = time()
    n_processes = min(len(configurations), Config.n_cores)

    if n_processes <= 1:
        results = [function(basis, atoms) for atoms in configurations]

    else:
        os.environ['OMP_NUM_THREADS'] = '1'
        os.environ['MKL_NUM_THREADS'] = '1'
        logger.info(f'Running {n_processes} processes')

        with Pool(processes=n_processes) as pool:
            async_results = [
                pool.apply_async(func=function, args=(basis, atoms))
                for atoms in configurations
            ]

            pool.close()
            results = [r.get(timeout=None) for r in async_results]
            pool.join()

    logger.info(f'Evaluations done in {(time() - start_time):.1f} s')
    return results


def energy_matrix(
    basis: Sequence, configurations: Sequence[Configuration]
) -> np.ndarray:
    """
    Energy of every basis function in every configuration, e.g. the design
    matrix of a linear least squares fit to energies

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms, possibly with different body orders

        configurations: ASE atoms or coordinate arrays

    Returns:
        (np.ndarray): shape = (len(configurations), len(basis))

    Raises:
        (nbodyips.exceptions.NumericCorruption): If any entry is not finite
    """
    if len(configurations) == 0:
        return np.zeros((0, len(basis)))

    rows = _run_parallel(_energy_row, basis, configurations)
    matrix = np.vstack(rows)

    assert_finite(matrix, name='Energy matrix')
    return matrix


def force_matrix(
    basis: Sequence, configurations: Sequence[Configuration]
) -> np.ndarray:
    """
    Force components of every basis function. Each configuration
    contributes 3 n_atoms rows, ordered atom by atom (x, y, z)

    ---------------------------------------------------------------------------
    Arguments:
        basis: Terms, possibly with different body orders

        configurations: ASE atoms or coordinate arrays

    Returns:
        (np.ndarray): shape = (Σ 3 n_atoms, len(basis))

    Raises:
        (nbodyips.exceptions.NumericCorruption): If any entry is not finite
    """
    if len(configurations) == 0:
        return np.zeros((0, len(basis)))

    blocks = _run_parallel(_force_rows, basis, configurations)
    matrix = np.vstack(blocks)

    assert_finite(matrix, name='Force matrix')
    return matrix
