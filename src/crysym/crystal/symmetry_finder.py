"""
Space group determination for a crystal given as a lattice and a set of
typed atoms in fractional coordinates, following the approach of
R.W. Grosse-Kunstleve, Acta Cryst. A55, 383-395 (1999):

1. find the primitive cell and Delaunay reduce it
2. find the point symmetry of the lattice, then the symmetry operations
   of the crystal
3. identify the point group, and from its Laue class construct a
   conventional basis and centering
4. match the operations in the conventional basis against the
   standard setting of each space group, solving for the origin shift

>>> from crysym.crystal import UnitCell
>>> result = find_space_group(UnitCell.cubic(5.0).direct, [[0, 0, 0]], [1])
>>> result.international_tables_number
221
"""
from dataclasses import dataclass
import logging

import numpy as np

from .asymmetric_unit import AsymmetricUnit, asymmetric_atoms
from .delaunay import delaunay_reduce, delaunay_reduce_2d
from .niggli import niggli_reduce
from .point_group import PointGroup
from .primitive import (
    check_atoms,
    find_primitive_cell,
    find_symmetry_operations,
    trim_atoms,
)
from .rotation import lattice_point_group
from .space_group import SpaceGroup, default_hall_number, match_space_group
from .symmetry_operation import add_centering_operations, wrap_to_unit_cell
from .tolerance import SYMMETRY_PRECISION
from .unit_cell import CENTERING_TO_PRIMITIVE, UnitCell

LOG = logging.getLogger(__name__)


@dataclass
class SymmetryResult:
    """
    The space group of a crystal in its standard setting, along with the
    crystal expressed in that setting.

    Attributes:
        hall_number (int): Hall number of the matched setting
        international_tables_number (int): space group number (1-230)
        symbol (str): short Hermann-Mauguin symbol
        point_group (PointGroup): the point group of the crystal
        origin_shift (np.ndarray): origin shift of the setting, in its fractional coordinates
        unit_cell (UnitCell): the conventional cell in the standard orientation
        change_of_basis (np.ndarray): (3, 3) matrix with the conventional basis
            vectors as columns, in the basis of the input lattice
        positions (np.ndarray): (N, 3) fractional positions of all atoms in the conventional cell
        types (np.ndarray): N type tags of the atoms in the conventional cell
        asymmetric_index (np.ndarray): index of the asymmetric unit site of each atom
        asymmetric_unit (AsymmetricUnit): the symmetry unique atoms
    """

    hall_number: int
    international_tables_number: int
    symbol: str
    point_group: PointGroup
    origin_shift: np.ndarray
    unit_cell: UnitCell
    change_of_basis: np.ndarray
    positions: np.ndarray
    types: np.ndarray
    asymmetric_index: np.ndarray
    asymmetric_unit: AsymmetricUnit

    @property
    def space_group(self):
        "The `SpaceGroup` of the matched setting"
        return SpaceGroup(hall_number=self.hall_number)

    def __repr__(self):
        return "<SymmetryResult {}: {} ({} atoms)>".format(
            self.international_tables_number, self.symbol, len(self.positions)
        )


def _check_lattice(lattice):
    lattice = np.asarray(lattice, dtype=np.float64)
    if lattice.shape != (3, 3):
        raise ValueError("Lattice must be a (3, 3) array, got {}".format(lattice.shape))
    return lattice


def _conventional_basis(point_group, operations, delaunay, tolerance):
    "Integer matrix with the conventional basis vectors as columns, in the Delaunay basis"
    rotations = [op.rotation for op in operations]
    axes = point_group.construct_axes(rotations)
    if axes is None:
        LOG.debug("Could not construct axes for point group %s", point_group.symbol)
        return None
    if point_group.laue_group == "-1":
        reduced = niggli_reduce(delaunay, tolerance=tolerance)
        if reduced is None:
            return None
        return reduced[1]
    if point_group.laue_group == "2/m":
        reduced = delaunay_reduce_2d(
            np.dot(axes.T, delaunay), unique_axis=1, tolerance=tolerance
        )
        if reduced is None:
            return None
        return np.rint(np.dot(np.linalg.inv(delaunay.T), reduced.T)).astype(int)
    return axes


def find_space_group(lattice, positions, types, tolerance=SYMMETRY_PRECISION):
    """
    Determine the space group of a crystal.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        positions (array_like): (N, 3) fractional coordinates of the atoms
        types (array_like): N type tags of the atoms (e.g. atomic numbers)
        tolerance (float, optional): symmetry precision, used both for lattice
            comparisons and (in fractional units) for atomic overlaps

    Returns:
        Optional[SymmetryResult]: the space group and the standardized crystal,
        or None if no space group could be determined
    """
    lattice = _check_lattice(lattice)
    positions, types = check_atoms(positions, types)
    if tolerance <= 0:
        raise ValueError("Tolerance must be positive")

    primitive = find_primitive_cell(lattice, positions, types, tolerance=tolerance)
    delaunay = delaunay_reduce(primitive, tolerance=tolerance)
    if delaunay is None:
        LOG.debug("Delaunay reduction failed")
        return None
    rotations = lattice_point_group(delaunay, tolerance=tolerance)
    reduced_positions, reduced_types = trim_atoms(
        positions, types, lattice, delaunay, tolerance=tolerance
    )
    operations = find_symmetry_operations(
        reduced_positions, reduced_types, rotations, tolerance=tolerance
    )
    point_group = PointGroup.from_rotations([op.rotation for op in operations])
    if point_group is None:
        return None
    LOG.debug("Point group %s with %d operations", point_group.symbol, len(operations))

    basis = _conventional_basis(point_group, operations, delaunay, tolerance)
    if basis is None:
        return None
    centering = PointGroup.centering(basis)
    if centering is None:
        LOG.debug("Could not determine centering of basis\n%s", basis)
        return None
    correction, centering = point_group.basis_correction(basis, centering)
    basis = np.dot(basis, correction)
    conventional_operations = add_centering_operations(
        [op.changed_basis(basis) for op in operations], centering
    )

    for number in range(1, 231):
        hall_number = default_hall_number(number)
        match = match_space_group(
            hall_number, point_group.number, centering, conventional_operations
        )
        if match is not None:
            break
    else:
        LOG.debug("No space group matches point group %s", point_group.symbol)
        return None

    origin, setting_basis = match
    transform = np.dot(basis, setting_basis)
    setting_lattice = np.dot(transform.T, delaunay)
    space_group = SpaceGroup(hall_number=hall_number)

    setting_positions = wrap_to_unit_cell(
        np.dot(reduced_positions, np.linalg.inv(transform).T) + origin
    )
    expanded = np.vstack([setting_positions + t for t in space_group.lattice_translations])
    expanded_types = np.tile(reduced_types, len(space_group.lattice_translations))
    identity = np.eye(3)
    conventional_positions, conventional_types = trim_atoms(
        expanded, expanded_types, identity, identity, tolerance=tolerance
    )

    asymmetric_index, unique_positions, unique_types = asymmetric_atoms(
        space_group.symmetry_operations,
        conventional_positions,
        conventional_types,
        hall_number=hall_number,
        tolerance=tolerance,
    )
    unit_cell = UnitCell(setting_lattice).conventional(
        point_group.holohedry, choice=space_group.choice
    )
    LOG.debug("Found space group %d (%s)", space_group.international_tables_number, space_group.symbol)
    return SymmetryResult(
        hall_number=hall_number,
        international_tables_number=space_group.international_tables_number,
        symbol=space_group.symbol,
        point_group=point_group,
        origin_shift=origin,
        unit_cell=unit_cell,
        change_of_basis=np.dot(setting_lattice, np.linalg.inv(lattice)).T,
        positions=conventional_positions,
        types=conventional_types,
        asymmetric_index=asymmetric_index,
        asymmetric_unit=AsymmetricUnit(unique_types, unique_positions),
    )


def find_primitive(lattice, positions, types, tolerance=SYMMETRY_PRECISION):
    """
    Find the primitive cell of the standard setting of the space
    group of a crystal, along with its atoms.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        positions (array_like): (N, 3) fractional coordinates of the atoms
        types (array_like): N type tags of the atoms
        tolerance (float, optional): symmetry precision

    Returns:
        Optional[Tuple[UnitCell, np.ndarray, np.ndarray]]: the primitive cell,
        fractional positions and types of its atoms, or None if no space
        group could be determined
    """
    result = find_space_group(lattice, positions, types, tolerance=tolerance)
    if result is None:
        return None
    to_primitive = CENTERING_TO_PRIMITIVE[result.space_group.centering]
    conventional = result.unit_cell.direct
    primitive = np.dot(to_primitive.T, conventional)
    primitive_positions, primitive_types = trim_atoms(
        result.positions, result.types, conventional, primitive, tolerance=tolerance
    )
    return UnitCell(primitive), primitive_positions, primitive_types


def find_niggli(lattice, positions, types, tolerance=SYMMETRY_PRECISION):
    """
    Find the Niggli reduced primitive cell of a crystal, along
    with its atoms.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        positions (array_like): (N, 3) fractional coordinates of the atoms
        types (array_like): N type tags of the atoms
        tolerance (float, optional): symmetry precision

    Returns:
        Optional[Tuple[UnitCell, np.ndarray, np.ndarray]]: the reduced cell,
        fractional positions and types of its atoms, or None if a
        reduction failed
    """
    lattice = _check_lattice(lattice)
    positions, types = check_atoms(positions, types)
    primitive = find_primitive_cell(lattice, positions, types, tolerance=tolerance)
    delaunay = delaunay_reduce(primitive, tolerance=tolerance)
    if delaunay is None:
        return None
    reduced = niggli_reduce(delaunay, tolerance=tolerance)
    if reduced is None:
        return None
    niggli, _ = reduced
    reduced_positions, reduced_types = trim_atoms(
        positions, types, lattice, niggli, tolerance=tolerance
    )
    return UnitCell(niggli), reduced_positions, reduced_types
