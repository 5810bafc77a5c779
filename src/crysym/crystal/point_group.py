from dataclasses import dataclass
import logging
from typing import Tuple

import numpy as np

from .rotation import (
    ROTATION_AXES,
    orthogonal_axes,
    proper_rotation,
    rotation_axis,
    rotation_type,
)
from .tolerance import FRACTIONAL_PRECISION, Tolerance

LOG = logging.getLogger(__name__)

#: The order of rotation types in a rotation occurrence table
ROTATION_TYPES = (-6, -4, -3, -2, -1, 1, 2, 3, 4, 6)

# rotation type whose axes define the conventional basis for each Laue class,
# see R.W. Grosse-Kunstleve, Acta Cryst. A55, 383-395 (1999), Table 5
_BASIS_ROTATION_TYPE = {
    "-1": 0,
    "2/m": 2,
    "mmm": 2,
    "4/m": 4,
    "4/mmm": 4,
    "-3": 3,
    "-3m": 3,
    "6/m": 3,
    "6/mmm": 3,
    "m-3": 2,
    "m-3m": 4,
}


def _columns(*columns):
    return np.array(columns, dtype=int).T


def _is_obverse(basis) -> bool:
    "R centred basis has lattice points at k(2/3, 1/3, 1/3)"
    tol = Tolerance(FRACTIONAL_PRECISION)
    obverse = [np.array((0, 0, 0)), np.array((2, 1, 1)) / 3, np.array((1, 2, 2)) / 3]
    for column in np.linalg.inv(basis).T:
        if not any(tol.is_integer(column - x) for x in obverse):
            return False
    return True


@dataclass
class PointGroup:
    """
    One of the 32 crystallographic point groups, along with the
    table of how many rotations of each type it contains (in the
    order given by `ROTATION_TYPES`) by which it is identified.
    """

    number: int
    symbol: str
    schoenflies: str
    crystal_system: str
    laue_group: str
    centrosymmetric: bool
    enantiomorphic: bool
    rotation_table: Tuple[int, ...]

    def __repr__(self):
        return f"<PointGroup: {self.symbol}>"

    @property
    def holohedry(self):
        "The holohedry (i.e. lattice system) of this point group"
        return self.crystal_system

    @classmethod
    def from_number(cls, number):
        if number < 1 or number > 32:
            raise ValueError("Point group number must be between [1, 32]")
        return POINT_GROUP_DATA[number - 1]

    @classmethod
    def from_rotations(cls, rotations):
        """
        Identify the point group from a set of integer rotation matrices
        via the count of each rotation type.

        Args:
            rotations (Iterable[np.ndarray]): (3, 3) rotation matrices, duplicates are ignored

        Returns:
            Optional[PointGroup]: the matching point group, or None
        """
        unique = {tuple(np.asarray(r, dtype=int).flatten()) for r in rotations}
        counts = dict.fromkeys(ROTATION_TYPES, 0)
        for r in unique:
            counts[rotation_type(np.reshape(r, (3, 3)))] += 1
        table = tuple(counts[x] for x in ROTATION_TYPES)
        for pg in POINT_GROUP_DATA:
            if pg.rotation_table == table:
                return pg
        LOG.debug("No point group has rotation table %s", table)
        return None

    def _proper_rotations(self, rotations, kind):
        result = []
        for r in rotations:
            p = proper_rotation(r)
            if rotation_type(p) == kind:
                result.append(p)
        return result

    def construct_axes(self, rotations):
        """
        Construct a basis from the symmetry axes of the Laue class
        of this point group, see R.W. Grosse-Kunstleve,
        Acta Cryst. A55, 383-395 (1999).

        Args:
            rotations (Iterable[np.ndarray]): the (3, 3) rotation matrices of the point group

        Returns:
            Optional[np.ndarray]: (3, 3) integer matrix with the new
            basis vectors as columns, or None if no axes could be found.
        """
        kind = _BASIS_ROTATION_TYPE[self.laue_group]
        if kind == 0:
            return np.eye(3, dtype=int)

        candidates = self._proper_rotations(rotations, kind)
        if not candidates:
            return None

        if self.laue_group == "2/m":
            r = candidates[0]
            perpendicular = [tuple(x) for x in orthogonal_axes(r, 2)]
            if len(perpendicular) < 2:
                return None
            first = min(perpendicular, key=lambda v: np.dot(v, v))
            perpendicular.remove(first)
            second = min(perpendicular, key=lambda v: np.dot(v, v))
            axes = _columns(first, rotation_axis(r), second)
            if np.linalg.det(axes) < 0:
                axes[:, 2] = -axes[:, 2]
            return axes

        if self.laue_group in ("mmm", "m-3", "m-3m"):
            indices = set()
            for r in candidates:
                axis = rotation_axis(r)
                indices.add(int(np.argmax(np.all(ROTATION_AXES == axis, axis=1))))
            if len(indices) < 3:
                return None
            first, second, third = (ROTATION_AXES[i] for i in sorted(indices)[:3])
            axes = _columns(first, second, third)
            if np.linalg.det(axes) < 0:
                axes = _columns(first, third, second)
            return axes

        r = candidates[0]
        axis = rotation_axis(r)
        allowed = {tuple(x) for x in ROTATION_AXES}
        for perpendicular in orthogonal_axes(r, kind):
            image = np.dot(r, perpendicular)
            if tuple(image) not in allowed and tuple(-image) not in allowed:
                continue
            axes = _columns(perpendicular, image, axis)
            det = int(round(np.linalg.det(axes)))
            # det 4 would give an F centred cell
            if abs(det) < 4:
                if det < 0:
                    axes = _columns(image, perpendicular, axis)
                return axes
        return None

    @staticmethod
    def centering(basis):
        """
        The centering letter of the cell spanned by the columns of
        `basis` (expressed in a primitive basis), determined from its
        volume and shape.

        Args:
            basis (array_like): (3, 3) integer matrix

        Returns:
            Optional[str]: one of 'P', 'A', 'B', 'C', 'I', 'R', 'F' or None
        """
        basis = np.asarray(basis, dtype=int)
        det = abs(int(round(np.linalg.det(basis))))
        if det == 1:
            return "P"
        if det == 2:
            for letter, unit in (("A", 0), ("B", 1), ("C", 2)):
                for row in basis:
                    if abs(row[unit]) == 1 and np.count_nonzero(row) == 1:
                        return letter
            if np.sum(np.abs(basis[0])) == 2:
                return "I"
            return None
        if det == 3:
            return "R"
        if det == 4:
            return "F"
        return None

    def basis_correction(self, basis, centering):
        """
        The correction to apply to a conventional basis so that the
        standard centering is obtained: A, B and I (monoclinic) centred
        cells become C centred, and reverse rhombohedral settings are
        made obverse.

        Args:
            basis (array_like): (3, 3) integer matrix with the conventional
                basis vectors as columns
            centering (str): the centering of `basis`

        Returns:
            Tuple[np.ndarray, str]: the correction matrix and the new centering
        """
        basis = np.asarray(basis, dtype=int)
        det = abs(int(round(np.linalg.det(basis))))
        monoclinic = self.laue_group == "2/m"
        if det == 2:
            if centering == "A" and monoclinic:
                # swap a and c, keeping beta obtuse
                return _columns((0, 0, 1), (0, -1, 0), (1, 0, 0)), "C"
            if centering == "A":
                return _columns((0, 1, 0), (0, 0, 1), (1, 0, 0)), "C"
            if centering == "B":
                return _columns((0, 0, 1), (1, 0, 0), (0, 1, 0)), "C"
            if centering == "I" and monoclinic:
                return _columns((1, 0, 1), (0, 1, 0), (-1, 0, 0)), "C"
        elif det == 3 and not _is_obverse(basis):
            LOG.debug("Reverse rhombohedral setting, changing to obverse")
            return _columns((1, 1, 0), (-1, 0, 0), (0, 0, 1)), centering
        return np.eye(3, dtype=int), centering


POINT_GROUP_DATA = (
    PointGroup(1, "1", "C1", "triclinic", "-1", False, True, (0, 0, 0, 0, 0, 1, 0, 0, 0, 0)),
    PointGroup(2, "-1", "Ci", "triclinic", "-1", True, False, (0, 0, 0, 0, 1, 1, 0, 0, 0, 0)),
    PointGroup(3, "2", "C2", "monoclinic", "2/m", False, True, (0, 0, 0, 0, 0, 1, 1, 0, 0, 0)),
    PointGroup(4, "m", "Cs", "monoclinic", "2/m", False, False, (0, 0, 0, 1, 0, 1, 0, 0, 0, 0)),
    PointGroup(5, "2/m", "C2h", "monoclinic", "2/m", True, False, (0, 0, 0, 1, 1, 1, 1, 0, 0, 0)),
    PointGroup(6, "222", "D2", "orthorhombic", "mmm", False, True, (0, 0, 0, 0, 0, 1, 3, 0, 0, 0)),
    PointGroup(7, "mm2", "C2v", "orthorhombic", "mmm", False, False, (0, 0, 0, 2, 0, 1, 1, 0, 0, 0)),
    PointGroup(8, "mmm", "D2h", "orthorhombic", "mmm", True, False, (0, 0, 0, 3, 1, 1, 3, 0, 0, 0)),
    PointGroup(9, "4", "C4", "tetragonal", "4/m", False, True, (0, 0, 0, 0, 0, 1, 1, 0, 2, 0)),
    PointGroup(10, "-4", "S4", "tetragonal", "4/m", False, False, (0, 2, 0, 0, 0, 1, 1, 0, 0, 0)),
    PointGroup(11, "4/m", "C4h", "tetragonal", "4/m", True, False, (0, 2, 0, 1, 1, 1, 1, 0, 2, 0)),
    PointGroup(12, "422", "D4", "tetragonal", "4/mmm", False, True, (0, 0, 0, 0, 0, 1, 5, 0, 2, 0)),
    PointGroup(13, "4mm", "C4v", "tetragonal", "4/mmm", False, False, (0, 0, 0, 4, 0, 1, 1, 0, 2, 0)),
    PointGroup(14, "-42m", "D2d", "tetragonal", "4/mmm", False, False, (0, 2, 0, 2, 0, 1, 3, 0, 0, 0)),
    PointGroup(15, "4/mmm", "D4h", "tetragonal", "4/mmm", True, False, (0, 2, 0, 5, 1, 1, 5, 0, 2, 0)),
    PointGroup(16, "3", "C3", "trigonal", "-3", False, True, (0, 0, 0, 0, 0, 1, 0, 2, 0, 0)),
    PointGroup(17, "-3", "C3i", "trigonal", "-3", True, False, (0, 0, 2, 0, 1, 1, 0, 2, 0, 0)),
    PointGroup(18, "32", "D3", "trigonal", "-3m", False, True, (0, 0, 0, 0, 0, 1, 3, 2, 0, 0)),
    PointGroup(19, "3m", "C3v", "trigonal", "-3m", False, False, (0, 0, 0, 3, 0, 1, 0, 2, 0, 0)),
    PointGroup(20, "-3m", "D3d", "trigonal", "-3m", True, False, (0, 0, 2, 3, 1, 1, 3, 2, 0, 0)),
    PointGroup(21, "6", "C6", "hexagonal", "6/m", False, True, (0, 0, 0, 0, 0, 1, 1, 2, 0, 2)),
    PointGroup(22, "-6", "C3h", "hexagonal", "6/m", False, False, (2, 0, 0, 1, 0, 1, 0, 2, 0, 0)),
    PointGroup(23, "6/m", "C6h", "hexagonal", "6/m", True, False, (2, 0, 2, 1, 1, 1, 1, 2, 0, 2)),
    PointGroup(24, "622", "D6", "hexagonal", "6/mmm", False, True, (0, 0, 0, 0, 0, 1, 7, 2, 0, 2)),
    PointGroup(25, "6mm", "C6v", "hexagonal", "6/mmm", False, False, (0, 0, 0, 6, 0, 1, 1, 2, 0, 2)),
    PointGroup(26, "-6m2", "D3h", "hexagonal", "6/mmm", False, False, (2, 0, 0, 4, 0, 1, 3, 2, 0, 0)),
    PointGroup(27, "6/mmm", "D6h", "hexagonal", "6/mmm", True, False, (2, 0, 2, 7, 1, 1, 7, 2, 0, 2)),
    PointGroup(28, "23", "T", "cubic", "m-3", False, True, (0, 0, 0, 0, 0, 1, 3, 8, 0, 0)),
    PointGroup(29, "m-3", "Th", "cubic", "m-3", True, False, (0, 0, 8, 3, 1, 1, 3, 8, 0, 0)),
    PointGroup(30, "432", "O", "cubic", "m-3m", False, True, (0, 0, 0, 0, 0, 1, 9, 8, 6, 0)),
    PointGroup(31, "-43m", "Td", "cubic", "m-3m", False, False, (0, 6, 0, 6, 0, 1, 3, 8, 0, 0)),
    PointGroup(32, "m-3m", "Oh", "cubic", "m-3m", True, False, (0, 6, 8, 9, 1, 1, 9, 8, 6, 0)),
)
