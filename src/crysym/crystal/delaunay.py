"""
Delaunay (Selling) reduction of 3D lattices, and of the 2D lattice
perpendicular to a unique axis.
"""
import logging

import numpy as np

from .tolerance import MAX_REDUCTION_ITERATIONS, SYMMETRY_PRECISION, Tolerance

LOG = logging.getLogger(__name__)


def _reduce_extended_basis(extended, tol, shift_factor=1.0):
    """Perform a single Selling step on the extended basis in place,
    returning False if a step was made"""
    n = len(extended)
    for i in range(n):
        for j in range(i + 1, n):
            if tol.larger(np.dot(extended[i], extended[j]), 0.0):
                for k in range(n):
                    if k not in (i, j):
                        extended[k] += shift_factor * extended[i]
                extended[i] = -extended[i]
                return False
    return True


def delaunay_reduce(lattice, tolerance=SYMMETRY_PRECISION, max_iterations=MAX_REDUCTION_ITERATIONS):
    """
    Compute the Delaunay reduced cell of a lattice.

    The basis is extended with b4 = -(b1 + b2 + b3), and while any pair of
    the four vectors has a positive scalar product one of them is negated
    and added to the other two. The reduced cell is then made from the
    shortest non-coplanar vectors among {b1, b2, b3, b4, b1+b2, b2+b3, b3+b1}.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        tolerance (float, optional): tolerance for scalar products and volumes
        max_iterations (int, optional): maximum number of reduction steps

    Returns:
        Optional[np.ndarray]: (3, 3) right-handed reduced lattice, or None
        if the lattice is degenerate or the reduction did not converge.
    """
    lattice = np.asarray(lattice, dtype=np.float64)
    if lattice.shape != (3, 3):
        raise ValueError("Lattice must be a (3, 3) array, got {}".format(lattice.shape))
    tol = Tolerance(tolerance)
    extended = np.vstack((lattice, -np.sum(lattice, axis=0)))
    for iteration in range(max_iterations):
        if _reduce_extended_basis(extended, tol):
            break
    else:
        LOG.warning("Delaunay reduction did not converge in %d iterations", max_iterations)
        return None
    LOG.debug("Delaunay reduction converged after %d steps", iteration)

    b1, b2, b3, b4 = extended
    candidates = [b1, b2, b3, b4, b1 + b2, b2 + b3, b3 + b1]
    candidates.sort(key=lambda v: np.dot(v, v))
    for candidate in candidates[2:]:
        reduced = np.array((candidates[0], candidates[1], candidate))
        volume = np.linalg.det(reduced)
        if not tol.is_zero(volume):
            return reduced if volume > 0 else -reduced
    LOG.debug("No non-coplanar triple in Delaunay candidates")
    return None


def delaunay_reduce_2d(lattice, unique_axis=1, tolerance=SYMMETRY_PRECISION, max_iterations=MAX_REDUCTION_ITERATIONS):
    """
    Delaunay reduce the two lattice vectors perpendicular to a unique
    axis, leaving the unique axis itself unchanged (up to sign).

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        unique_axis (int, optional): index of the unique axis (default 1 i.e. b)
        tolerance (float, optional): tolerance for scalar products and volumes
        max_iterations (int, optional): maximum number of reduction steps

    Returns:
        Optional[np.ndarray]: (3, 3) right-handed lattice, or None if the
        result has (near) zero volume or the reduction did not converge.
    """
    lattice = np.asarray(lattice, dtype=np.float64)
    if unique_axis not in (0, 1, 2):
        raise ValueError("Unique axis must be one of 0, 1, 2")
    tol = Tolerance(tolerance)
    unique = lattice[unique_axis]
    others = [i for i in range(3) if i != unique_axis]
    v1, v2 = lattice[others[0]], lattice[others[1]]
    extended = np.array((v1, v2, -v1 - v2))
    for _ in range(max_iterations):
        if _reduce_extended_basis(extended, tol, shift_factor=2.0):
            break
    else:
        LOG.warning("2D Delaunay reduction did not converge in %d iterations", max_iterations)
        return None

    e1, e2, e3 = extended
    candidates = [e1, e2, e3, e1 + e2]
    candidates.sort(key=lambda v: np.dot(v, v))
    first, second = extended[0], extended[1]
    for candidate in candidates[1:]:
        if not tol.is_zero(np.linalg.det(np.array((candidates[0], unique, candidate)))):
            first, second = candidates[0], candidate
            break

    reduced = np.empty((3, 3))
    reduced[unique_axis] = unique
    reduced[others[0]] = first
    reduced[others[1]] = second
    volume = np.linalg.det(reduced)
    if tol.is_zero(volume):
        LOG.debug("2D Delaunay lattice has zero volume")
        return None
    if volume < 0:
        reduced[unique_axis] = -reduced[unique_axis]
    return reduced
