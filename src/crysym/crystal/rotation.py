"""
Utilities for integer rotation matrices acting on fractional coordinates:
classification by rotation type, rotation axes, and the enumeration of
the point symmetry of a lattice.

A rotation type is the order of the rotation, negated for improper
rotations, i.e. one of -6, -4, -3, -2, -1, 1, 2, 3, 4, 6.
"""
import itertools
import logging

import numpy as np

from .tolerance import SYMMETRY_PRECISION

LOG = logging.getLogger(__name__)

_PROPER_TYPE_FROM_TRACE = {-1: 2, 0: 3, 1: 4, 2: 6, 3: 1}
_IMPROPER_TYPE_FROM_TRACE = {-3: -1, -2: -6, -1: -4, 0: -3, 1: -2}

#: Candidate rotation axes with small integer components, ordered by preference
ROTATION_AXES = np.array(
    [
        [1, 0, 0],
        [0, 1, 0],
        [0, 0, 1],
        [0, 1, 1],
        [1, 0, 1],
        [1, 1, 0],
        [0, -1, 1],
        [-1, 0, 1],
        [-1, 1, 0],
        [1, 1, 1],
        [-1, 1, 1],
        [1, -1, 1],
        [-1, -1, 1],
        [0, 1, 2],
        [2, 0, 1],
        [1, 2, 0],
        [0, 2, 1],
        [1, 0, 2],
        [2, 1, 0],
        [0, -1, 2],
        [-2, 0, 1],
        [-1, 2, 0],
        [0, -2, 1],
        [-1, 0, 2],
        [-2, 1, 0],
        [2, 1, 1],
        [1, 2, 1],
        [1, 1, 2],
        [-2, 1, 1],
        [1, -2, 1],
        [-1, -1, 2],
        [-2, -1, 1],
        [-1, 2, 1],
        [1, -1, 2],
        [2, -1, 1],
        [-1, -2, 1],
        [-1, 1, 2],
        [3, 1, 2],
        [2, 3, 1],
        [1, 2, 3],
        [3, 2, 1],
        [1, 3, 2],
        [2, 1, 3],
        [3, -1, 2],
        [-2, -3, 1],
        [-1, 2, 3],
        [3, -2, 1],
        [-1, -3, 2],
        [-2, 1, 3],
        [-3, 1, 2],
        [2, -3, 1],
        [-1, -2, 3],
        [-3, 2, 1],
        [1, -3, 2],
        [-2, -1, 3],
        [-3, -1, 2],
        [-2, 3, 1],
        [1, -2, 3],
        [-3, -2, 1],
        [-1, 3, 2],
        [2, -1, 3],
        [1, 1, 3],
        [-1, 1, 3],
        [1, -1, 3],
        [-1, -1, 3],
        [1, 3, 1],
        [-1, 3, 1],
        [-1, -3, 1],
        [1, -3, 1],
        [3, 1, 1],
        [-3, -1, 1],
        [3, -1, 1],
        [-3, 1, 1],
    ],
    dtype=int,
)

#: The 26 shortest lattice directions, used to build candidate lattice symmetries
LATTICE_DIRECTIONS = np.array(
    [v for v in itertools.product((1, 0, -1), repeat=3) if any(v)], dtype=int
)


def rotation_type(rotation) -> int:
    """
    The rotation type of an integer rotation matrix, determined
    from its trace and determinant.

    Args:
        rotation (array_like): (3, 3) integer rotation matrix

    Returns:
        int: one of -6, -4, -3, -2, -1, 1, 2, 3, 4, 6
    """
    rotation = np.asarray(rotation)
    det = int(round(np.linalg.det(rotation)))
    trace = int(round(np.trace(rotation)))
    table = _PROPER_TYPE_FROM_TRACE if det == 1 else _IMPROPER_TYPE_FROM_TRACE
    if det not in (-1, 1) or trace not in table:
        raise ValueError("Not a crystallographic rotation:\n{}".format(rotation))
    return table[trace]


def rotation_order(rotation) -> int:
    "The order of the rotation i.e. the smallest n with R^n = I"
    n = rotation_type(rotation)
    if n > 0:
        return n
    if n % 2:
        return -2 * n
    return -n


def proper_rotation(rotation) -> np.ndarray:
    "The proper part of a rotation i.e. R multiplied by det(R)"
    rotation = np.asarray(rotation, dtype=int)
    return int(round(np.linalg.det(rotation))) * rotation


def rotation_axis(rotation) -> np.ndarray:
    """
    The first entry of `ROTATION_AXES` left invariant by the proper
    part of the rotation.

    Args:
        rotation (array_like): (3, 3) integer rotation matrix

    Returns:
        Optional[np.ndarray]: the integer rotation axis, or None
    """
    proper = proper_rotation(rotation)
    invariant = np.all(np.dot(ROTATION_AXES, proper.T) == ROTATION_AXES, axis=1)
    if not np.any(invariant):
        return None
    return ROTATION_AXES[np.argmax(invariant)]


def orthogonal_axes(rotation, order) -> np.ndarray:
    """
    The candidate axes (from `ROTATION_AXES`) perpendicular to the
    rotation axis. These are the axes annihilated by the sum of
    the powers I + R + ... + R^(order - 1) of the proper rotation.

    Args:
        rotation (array_like): (3, 3) integer rotation matrix
        order (int): the order of the proper rotation

    Returns:
        np.ndarray: (N, 3) array of perpendicular axes
    """
    proper = proper_rotation(rotation)
    power = np.eye(3, dtype=int)
    total = np.eye(3, dtype=int)
    for _ in range(order - 1):
        power = np.dot(power, proper)
        total += power
    mask = np.all(np.dot(ROTATION_AXES, total.T) == 0, axis=1)
    return ROTATION_AXES[mask]


def lattice_point_group(lattice, tolerance=SYMMETRY_PRECISION):
    """
    Find the point symmetry of a lattice, ignoring any atoms.

    All integer matrices whose columns are taken from the 26 shortest
    lattice directions and whose determinant is +/-1 are tested: a
    candidate W is kept if the lattice spanned by W has the same
    lengths and angles as the original lattice (within tolerance).
    The input should be reduced (e.g. Delaunay) for the result to be complete.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        tolerance (float, optional): length tolerance in Angstroms

    Returns:
        List[np.ndarray]: the (3, 3) integer rotation matrices acting
        on fractional coordinates
    """
    lattice = np.asarray(lattice, dtype=np.float64)
    metric = np.dot(lattice, lattice.T)
    idx = np.array(
        list(itertools.product(range(len(LATTICE_DIRECTIONS)), repeat=3))
    )
    # columns of each candidate are lattice directions
    candidates = np.transpose(LATTICE_DIRECTIONS[idx], (0, 2, 1))
    dets = np.rint(np.linalg.det(candidates)).astype(int)
    candidates = candidates[np.abs(dets) == 1]
    rotated = np.einsum("nji,jk,nkl->nil", candidates, metric, candidates)

    lengths = np.sqrt(np.diag(metric))
    rotated_lengths = np.sqrt(np.diagonal(rotated, axis1=1, axis2=2))
    mask = np.all(np.abs(rotated_lengths - lengths) <= tolerance, axis=1)
    for j, k in ((0, 1), (0, 2), (1, 2)):
        cos1 = metric[j, k] / (lengths[j] * lengths[k])
        cos2 = rotated[:, j, k] / (rotated_lengths[:, j] * rotated_lengths[:, k])
        x = cos1 * cos2 + np.sqrt(max(1.0 - cos1 * cos1, 0.0)) * np.sqrt(
            np.clip(1.0 - cos2 * cos2, 0.0, None)
        )
        sin_dtheta2 = 1.0 - x * x
        length_ave2 = (lengths[j] + rotated_lengths[:, j]) * (
            lengths[k] + rotated_lengths[:, k]
        )
        mask &= ~(
            (sin_dtheta2 > 1e-12) & (sin_dtheta2 * length_ave2 * 0.25 > tolerance**2)
        )
    result = [r for r in candidates[mask]]
    LOG.debug("Lattice point group has %d operations", len(result))
    return result
