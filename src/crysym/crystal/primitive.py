"""
Searches over the atoms of a crystal for pure translations (giving the
primitive cell) and for the symmetry operations compatible with a set
of lattice rotations.

Atoms are passed as an (N, 3) array of fractional positions along with
an N length array of type tags, which are only compared for equality.
All overlap tests are minimum image tests in fractional coordinates.
"""
import itertools
import logging

import numpy as np
from scipy.spatial import cKDTree as KDTree

from .symmetry_operation import SymmetryOperation, wrap_to_unit_cell
from .tolerance import SYMMETRY_PRECISION, Tolerance

LOG = logging.getLogger(__name__)

#: Smallest cell volume considered when searching for the primitive cell
MINIMUM_CELL_VOLUME = 1.0


def check_atoms(positions, types):
    positions = np.asarray(positions, dtype=np.float64)
    types = np.asarray(types)
    if positions.ndim != 2 or positions.shape[1] != 3:
        raise ValueError("Positions must be an (N, 3) array, got {}".format(positions.shape))
    if len(positions) == 0:
        raise ValueError("At least one atom is required")
    if len(types) != len(positions):
        raise ValueError(
            "Number of types ({}) does not match number of positions ({})".format(
                len(types), len(positions)
            )
        )
    return positions, types


def minority_type(types):
    """
    The least frequent type tag, ties being resolved by the
    first appearance in `types`.
    """
    counts = {}
    for t in types:
        counts[t] = counts.get(t, 0) + 1
    return min(counts, key=lambda t: counts[t])


class PeriodicSites:
    """
    Periodic nearest neighbour lookup for atoms of each type in
    fractional coordinates, used to check whether a transformed set
    of atoms coincides with the original set.

    Attributes:
        tolerance (float): the distance (in fractional units) below which
            two sites overlap
    """

    def __init__(self, positions, types, tolerance=SYMMETRY_PRECISION):
        positions, types = check_atoms(positions, types)
        self.positions = wrap_to_unit_cell(positions)
        self.types = types
        self.tolerance = tolerance
        self._trees = {}
        for t in dict.fromkeys(types.tolist()):
            self._trees[t] = KDTree(self.positions[types == t], boxsize=1.0)

    def overlaps(self, transformed):
        """
        Check that every transformed atom lies on top of an atom
        of the same type.

        Args:
            transformed (np.ndarray): (N, 3) transformed positions, in
                the same order as the stored atoms

        Returns:
            bool: True if every atom has a partner
        """
        transformed = wrap_to_unit_cell(transformed)
        for t, tree in self._trees.items():
            distances, _ = tree.query(transformed[self.types == t])
            if np.any(distances >= self.tolerance):
                return False
        return True

    def overlaps_operation(self, rotation, translation):
        "Check that the operation (rotation, translation) maps all atoms onto atoms"
        return self.overlaps(np.dot(self.positions, np.transpose(rotation)) + translation)


def overlaps_all_atoms(positions, types, translation, tolerance=SYMMETRY_PRECISION, rotation=None):
    """
    Check whether the operation x -> R x + t maps every atom onto
    an atom of the same type.

    Args:
        positions (array_like): (N, 3) fractional positions
        types (array_like): N type tags
        translation (array_like): (3,) fractional translation t
        tolerance (float, optional): overlap distance in fractional units
        rotation (array_like, optional): (3, 3) rotation R, default identity

    Returns:
        bool: True if the configuration is invariant under the operation
    """
    if rotation is None:
        rotation = np.eye(3, dtype=int)
    sites = PeriodicSites(positions, types, tolerance=tolerance)
    return sites.overlaps_operation(rotation, translation)


def trim_atoms(positions, types, from_lattice, to_lattice, tolerance=SYMMETRY_PRECISION):
    """
    Express atoms in another cell of the same lattice (e.g. a smaller
    primitive cell), wrapping them into [0, 1) and dropping periodic
    duplicates of the same type. The first of each set of duplicates is kept.

    Args:
        positions (array_like): (N, 3) fractional positions in `from_lattice`
        types (array_like): N type tags
        from_lattice (array_like): (3, 3) row major lattice of the input positions
        to_lattice (array_like): (3, 3) row major lattice of the output positions
        tolerance (float, optional): overlap distance in fractional units

    Returns:
        Tuple[np.ndarray, np.ndarray]: the trimmed positions and types
    """
    positions, types = check_atoms(positions, types)
    cob = np.dot(np.asarray(from_lattice), np.linalg.inv(to_lattice))
    trimmed = wrap_to_unit_cell(np.dot(positions, cob))
    tree = KDTree(trimmed, boxsize=1.0)
    keep = np.ones(len(trimmed), dtype=bool)
    for i, neighbours in enumerate(tree.query_ball_point(trimmed, tolerance)):
        if not keep[i]:
            continue
        for j in neighbours:
            if j > i and types[j] == types[i]:
                keep[j] = False
    LOG.debug("Trimmed %d atoms to %d", len(trimmed), np.sum(keep))
    return trimmed[keep], types[keep]


def find_primitive_cell(lattice, positions, types, tolerance=SYMMETRY_PRECISION):
    """
    Find a primitive cell of a crystal, i.e. the smallest cell with
    the same translational symmetry.

    Pure translations are found from the differences between atoms of
    the least frequent type; together with the cell edges they are
    searched for the triple spanning the smallest cell.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        positions (array_like): (N, 3) fractional positions
        types (array_like): N type tags
        tolerance (float, optional): overlap distance in fractional units

    Returns:
        np.ndarray: (3, 3) row major right-handed primitive lattice, the
        input lattice if it is already primitive
    """
    lattice = np.asarray(lattice, dtype=np.float64)
    positions, types = check_atoms(positions, types)
    sites = PeriodicSites(positions, types, tolerance=tolerance)
    minority = positions[types == minority_type(types)]
    translations = []
    for vec in minority[1:] - minority[0]:
        vec = wrap_to_unit_cell(vec)
        if sites.overlaps(positions + vec):
            translations.append(vec)
    if not translations:
        return lattice.copy()
    candidates = np.vstack((translations, np.eye(3)))
    size = len(candidates)
    LOG.debug("Found %d pure translations", size - 3)

    tol = Tolerance(tolerance)
    initial_volume = abs(np.linalg.det(lattice))
    minimum_volume = initial_volume
    smallest = lattice
    cartesian = np.dot(candidates, lattice)
    for i, j, k in itertools.combinations(range(size), 3):
        volume = abs(np.linalg.det(cartesian[[i, j, k]]))
        if tol.larger(volume, MINIMUM_CELL_VOLUME) and tol.smaller(volume, minimum_volume):
            minimum_volume = volume
            smallest = cartesian[[i, j, k]]
            if int(np.rint(initial_volume / volume)) == size - 2:
                relative = candidates[[i, j, k]]
                exact = np.linalg.inv(np.rint(np.linalg.inv(relative)))
                smallest = np.dot(exact, lattice)
                break
    if np.linalg.det(smallest) < 0:
        smallest = -smallest
    return smallest


def primitive_translations(positions, types, rotation, tolerance=SYMMETRY_PRECISION):
    """
    The translations t for which (R, t) maps the crystal onto itself,
    found from the images of the first atom of the least frequent type.

    Args:
        positions (array_like): (N, 3) fractional positions
        types (array_like): N type tags
        rotation (array_like): (3, 3) integer rotation matrix R
        tolerance (float, optional): overlap distance in fractional units

    Returns:
        List[np.ndarray]: the translations, wrapped into [0, 1)
    """
    positions, types = check_atoms(positions, types)
    sites = PeriodicSites(positions, types, tolerance=tolerance)
    return _primitive_translations(sites, rotation)


def _primitive_translations(sites, rotation):
    minority = sites.positions[sites.types == minority_type(sites.types)]
    origin = np.dot(rotation, minority[0])
    result = []
    for vec in minority - origin:
        vec = wrap_to_unit_cell(vec)
        if sites.overlaps_operation(rotation, vec):
            result.append(vec)
    return result


def find_symmetry_operations(positions, types, rotations, tolerance=SYMMETRY_PRECISION):
    """
    Find the symmetry operations of a crystal, given the
    rotations compatible with its lattice.

    Args:
        positions (array_like): (N, 3) fractional positions
        types (array_like): N type tags
        rotations (Iterable[np.ndarray]): (3, 3) integer rotation matrices
        tolerance (float, optional): overlap distance in fractional units

    Returns:
        List[SymmetryOperation]: the symmetry operations
    """
    positions, types = check_atoms(positions, types)
    sites = PeriodicSites(positions, types, tolerance=tolerance)
    operations = []
    for rotation in rotations:
        for translation in _primitive_translations(sites, rotation):
            operations.append(SymmetryOperation(rotation, translation))
    LOG.debug("Found %d symmetry operations", len(operations))
    return operations
