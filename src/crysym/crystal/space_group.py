import numpy as np
from collections import namedtuple
import functools
import logging

import spglib

from .point_group import PointGroup
from .rotation import rotation_order
from .smith_normal_form import solve_mod_one
from .symmetry_operation import SymmetryOperation, wrap_to_unit_cell
from .tolerance import TRANSLATION_DENOMINATOR, Tolerance
from .unit_cell import CENTERING_TO_PRIMITIVE

LOG = logging.getLogger(__name__)

#: Number of Hall symbols i.e. distinct space group settings
NUMBER_OF_HALL_SETTINGS = 530

#: The Hall number of Pa-3, which requires an additional setting when matching
PA3_HALL_NUMBER = 501

SG_DEFAULT_SETTING_CHOICE = {
    48: "2",
    50: "2",
    59: "2",
    68: "2",
    70: "2",
    85: "2",
    86: "2",
    88: "2",
    125: "2",
    126: "2",
    129: "2",
    130: "2",
    133: "2",
    134: "2",
    137: "2",
    138: "2",
    141: "2",
    142: "2",
    201: "2",
    203: "2",
    222: "2",
    224: "2",
    227: "2",
    228: "2",
}

HallSetting = namedtuple(
    "HallSetting",
    "hall_number number hall_symbol international international_full "
    "schoenflies choice point_group_number centering "
    "generators lattice_translations operations",
)


def _columns(*columns):
    return np.array(columns, dtype=int).T


_IDENTITY = np.eye(3, dtype=int)

# settings tried, as transformations of the database basis, when matching
# a space group of a given crystal system
_MONOCLINIC_SETTINGS = (
    _IDENTITY,
    _columns((-1, 0, -1), (0, 1, 0), (1, 0, 0)),
    _columns((0, 0, 1), (0, 1, 0), (-1, 0, -1)),
    _columns((0, 0, 1), (0, -1, 0), (1, 0, 0)),
    _columns((-1, 0, -1), (0, -1, 0), (0, 0, 1)),
    _columns((1, 0, 0), (0, -1, 0), (-1, 0, -1)),
)

_ORTHORHOMBIC_SETTINGS = (
    _IDENTITY,
    _columns((0, 1, 0), (0, 0, 1), (1, 0, 0)),
    _columns((0, 0, 1), (1, 0, 0), (0, 1, 0)),
    _columns((0, 1, 0), (1, 0, 0), (0, 0, -1)),
    _columns((1, 0, 0), (0, 0, -1), (0, 1, 0)),
    _columns((0, 0, -1), (0, 1, 0), (1, 0, 0)),
)

_PA3_SETTING = _columns((0, 0, 1), (0, -1, 0), (1, 0, 0))


def _rotation_key(rotation):
    return tuple(int(x) for x in np.asarray(rotation).flatten())


def _rotation_closure(rotations):
    "The set of rotations (as flat tuples) generated by the given rotations"
    generators = [np.asarray(r, dtype=int) for r in rotations]
    group = {_rotation_key(_IDENTITY): _IDENTITY}
    frontier = list(group.values())
    while frontier:
        new = []
        for a in frontier:
            for g in generators:
                product = np.dot(a, g)
                key = _rotation_key(product)
                if key not in group:
                    group[key] = product
                    new.append(product)
        frontier = new
    return set(group.keys())


def _centering_from_hall_symbol(hall_symbol):
    return hall_symbol.lstrip("-")[0].upper()


@functools.lru_cache(maxsize=None)
def hall_setting(hall_number) -> HallSetting:
    """
    The symmetry data for one of the 530 Hall settings of the space
    groups, taken from the spglib database.

    The generators are a minimal set of operations (excluding lattice
    translations) from which the rotational part of the group can be
    generated, chosen in order of decreasing rotation order.

    Args:
        hall_number (int): Hall number between 1 and 530

    Returns:
        HallSetting: the symmetry data of this setting
    """
    if hall_number < 1 or hall_number > NUMBER_OF_HALL_SETTINGS:
        raise ValueError(
            "Hall number must be between [1, {}]".format(NUMBER_OF_HALL_SETTINGS)
        )
    sgtype = spglib.get_spacegroup_type(hall_number)
    data = spglib.get_symmetry_from_database(hall_number)
    rotations = np.asarray(data["rotations"], dtype=int)
    translations = np.round(
        np.asarray(data["translations"], dtype=np.float64) * 12
    ) / 12
    operations = [SymmetryOperation(r, t) for r, t in zip(rotations, translations)]

    lattice_translations = [np.zeros(3)]
    for op in operations:
        if np.all(op.rotation == _IDENTITY) and np.any(op.translation != 0):
            lattice_translations.append(op.translation)

    point_group = PointGroup.from_rotations(rotations)

    first_index = {}
    for i, op in enumerate(operations):
        first_index.setdefault(_rotation_key(op.rotation), i)
    ordered = sorted(
        first_index.values(),
        key=lambda i: (-rotation_order(operations[i].rotation), i),
    )
    generators = []
    closure = _rotation_closure([])
    for i in ordered:
        key = _rotation_key(operations[i].rotation)
        if key in closure:
            continue
        generators.append(operations[i])
        closure = _rotation_closure([g.rotation for g in generators])

    return HallSetting(
        hall_number=hall_number,
        number=sgtype.number,
        hall_symbol=sgtype.hall_symbol,
        international=sgtype.international_short,
        international_full=sgtype.international_full,
        schoenflies=sgtype.schoenflies,
        choice=sgtype.choice,
        point_group_number=point_group.number,
        centering=_centering_from_hall_symbol(sgtype.hall_symbol),
        generators=tuple(generators),
        lattice_translations=np.array(lattice_translations),
        operations=tuple(operations),
    )


@functools.lru_cache(maxsize=None)
def _hall_numbers_by_number():
    result = {i: [] for i in range(1, 231)}
    for hall in range(1, NUMBER_OF_HALL_SETTINGS + 1):
        result[spglib.get_spacegroup_type(hall).number].append(hall)
    return result


def hall_numbers(international_tables_number):
    "All Hall numbers of the settings of a space group"
    if international_tables_number < 1 or international_tables_number > 230:
        raise ValueError("Space group number must be between [1, 230]")
    return list(_hall_numbers_by_number()[international_tables_number])


@functools.lru_cache(maxsize=None)
def default_hall_number(international_tables_number):
    """
    The Hall number of the standard setting of a space group, i.e.
    the first setting except where origin choice 2 is preferred.

    Args:
        international_tables_number (int): space group number between 1 and 230

    Returns:
        int: the Hall number
    """
    halls = hall_numbers(international_tables_number)
    choice = SG_DEFAULT_SETTING_CHOICE.get(international_tables_number)
    if choice is not None:
        for hall in halls:
            if spglib.get_spacegroup_type(hall).choice == choice:
                return hall
    return halls[0]


@functools.lru_cache(maxsize=None)
def _hall_number_from_symops():
    result = {}
    for hall in range(1, NUMBER_OF_HALL_SETTINGS + 1):
        codes = tuple(sorted(set(s.integer_code for s in hall_setting(hall).operations)))
        result.setdefault(codes, hall)
    return result


def origin_shift(hall_number, centering, change_of_basis, operations):
    """
    Find the origin shift taking a set of symmetry operations onto the
    generators of a Hall setting (transformed by `change_of_basis`).

    For each generator (R, t_db) with a found operation (R, t) of the
    same rotation the shift s must satisfy (R - I) s = t - t_db modulo
    the (centered) lattice. The stacked system is solved in the
    primitive basis of the centering via its Smith normal form.

    Args:
        hall_number (int): the Hall number of the setting
        centering (str): the centering of the basis of `operations`
        change_of_basis (array_like): (3, 3) integer matrix P, the setting
            basis is the columns of P in the basis of `operations`
        operations (List[SymmetryOperation]): the symmetry operations found

    Returns:
        Optional[np.ndarray]: the origin shift in fractional coordinates of
        the setting, or None if the operations are not compatible.
    """
    setting = hall_setting(hall_number)
    p = np.asarray(change_of_basis, dtype=np.float64)
    p_inv = np.linalg.inv(p)
    tol = Tolerance()

    setting_centering = setting.centering
    if setting_centering in ("A", "B", "C"):
        t = np.dot(p, setting.lattice_translations[1])
        t = wrap_to_unit_cell(
            np.round(t * TRANSLATION_DENOMINATOR) / TRANSLATION_DENOMINATOR
        )
        zero = [i for i in range(3) if tol.is_zero(t[i])]
        if len(zero) == 1:
            setting_centering = "ABC"[zero[0]]
        elif len(zero) == 0:
            setting_centering = "I"
    if setting_centering != centering:
        return None

    by_rotation = {}
    for op in operations:
        by_rotation.setdefault(_rotation_key(op.rotation), op)

    to_primitive = CENTERING_TO_PRIMITIVE[centering]
    to_primitive_inv = np.linalg.inv(to_primitive)
    blocks, rhs = [], []
    for generator in setting.generators:
        rotation = np.rint(np.dot(p, np.dot(generator.rotation, p_inv))).astype(int)
        found = by_rotation.get(_rotation_key(rotation))
        if found is None:
            return None
        translation = np.dot(p, generator.translation)
        block = np.dot(to_primitive_inv, np.dot(rotation - _IDENTITY, to_primitive))
        blocks.append(np.rint(block).astype(int))
        rhs.append(np.dot(to_primitive_inv, found.translation - translation))

    if not blocks:
        return np.zeros(3)
    shift = solve_mod_one(np.vstack(blocks), np.hstack(rhs))
    if shift is None:
        return None
    shift = np.dot(to_primitive, shift)
    return wrap_to_unit_cell(tol.snap(np.dot(p_inv, shift)))


def match_space_group(hall_number, point_group_number, centering, operations):
    """
    Check whether a set of symmetry operations (in a conventional basis)
    belongs to the given Hall setting, trying the alternative axis
    settings appropriate to its crystal system.

    Args:
        hall_number (int): the Hall number of the setting
        point_group_number (int): number of the point group of the operations
        centering (str): centering of the basis of the operations
        operations (List[SymmetryOperation]): the symmetry operations

    Returns:
        Optional[Tuple[np.ndarray, np.ndarray]]: the origin shift and the
        change of basis P (columns are the setting basis vectors), or None
    """
    setting = hall_setting(hall_number)
    if setting.point_group_number != point_group_number:
        return None
    crystal_system = PointGroup.from_number(point_group_number).crystal_system
    if crystal_system == "monoclinic":
        candidates = _MONOCLINIC_SETTINGS
    elif crystal_system == "orthorhombic":
        candidates = _ORTHORHOMBIC_SETTINGS
    elif crystal_system == "cubic" and hall_number == PA3_HALL_NUMBER:
        candidates = (_IDENTITY, _PA3_SETTING)
    else:
        candidates = (_IDENTITY,)

    for change_of_basis in candidates:
        shift = origin_shift(hall_number, centering, change_of_basis, operations)
        if shift is not None:
            LOG.debug(
                "Matched Hall setting %d (%s)", hall_number, setting.hall_symbol
            )
            return shift, change_of_basis
    return None


class SpaceGroup:
    """
    Represent a crystallographic space group, including
    all necessary symmetry operations in fractional coordinates,
    the international tables number from 1-230, and the international
    tables symbol.

    Attributes:
        symbol (str): The international tables short space group symbol
        full_symbol (str): The full international tables space group symbol
        choice (str): The space group choice (if applicable)
        centering (str): The space group centering letter e.g. 'P', 'C'
        schoenflies (str): The Schoenflies space group symbol
        centrosymmetric (bool): Whether or not the space group is centrosymmetric
        hall_number (int): The Hall number of this setting
        symmetry_operations (List[SymmetryOperation]): List of symmetry operations making up this space group
    """

    def __init__(self, international_tables_number=None, choice="", hall_number=None):
        if hall_number is None:
            if international_tables_number is None:
                raise ValueError("Either a space group number or a Hall number is required")
            if international_tables_number < 1 or international_tables_number > 230:
                raise ValueError("Space group number must be between [1, 230]")
            if not choice:
                hall_number = default_hall_number(international_tables_number)
            else:
                for hall in hall_numbers(international_tables_number):
                    if hall_setting(hall).choice == choice:
                        hall_number = hall
                        break
                else:
                    raise ValueError("Could not find choice {}".format(choice))
        setting = hall_setting(hall_number)
        self.international_tables_number = setting.number
        self.hall_number = hall_number
        self.symbol = setting.international
        self.full_symbol = setting.international_full
        self.choice = setting.choice
        self.centering = setting.centering
        self._point_group = PointGroup.from_number(setting.point_group_number)
        self.schoenflies = setting.schoenflies
        self.centrosymmetric = self._point_group.centrosymmetric
        self.symmetry_operations = list(setting.operations)
        self._setting = setting

    @property
    def hall_symbol(self) -> str:
        "The Hall symbol of this setting"
        return self._setting.hall_symbol

    @property
    def generators(self):
        "A minimal list of symmetry operations generating this space group (modulo centering)"
        return list(self._setting.generators)

    @property
    def lattice_translations(self) -> np.ndarray:
        "The centering translations of this setting (zero translation first)"
        return self._setting.lattice_translations

    @property
    def crystal_system(self) -> str:
        "The crystal system of the space group e.g. triclinic, monoclinic etc."
        sg = self.international_tables_number
        if sg <= 2:
            return "triclinic"
        if sg <= 15:
            return "monoclinic"
        if sg <= 74:
            return "orthorhombic"
        if sg <= 142:
            return "tetragonal"
        if sg <= 167:
            return "trigonal"
        if sg <= 194:
            return "hexagonal"
        return "cubic"

    @property
    def point_group(self):
        "the point group of this space group"
        return self._point_group

    @property
    def laue_class(self) -> str:
        "the Laue class of the point group associated with this space group"
        return self._point_group.laue_group

    @property
    def lattice_type(self) -> str:
        "the lattice type of this space group e.g. rhombohedral, hexagonal etc."
        inum = self.international_tables_number
        if inum < 143 or inum > 194:
            return self.crystal_system
        if self.has_hexagonal_rhombohedral_choices() and self.choice == "R":
            return "rhombohedral"
        return "hexagonal"

    def __len__(self):
        return len(self.symmetry_operations)

    def ordered_symmetry_operations(self):
        "The symmetry operations of this space group in order (with identiy first)"
        # make sure we do the unit symop first
        unity = 0
        for i, s in enumerate(self.symmetry_operations):
            if s.is_identity():
                unity = i
                break
        else:
            raise ValueError(
                "Could not find identity symmetry_operation -- invalide space group"
            )
        other_symops = (
            self.symmetry_operations[:unity] + self.symmetry_operations[unity + 1 :]
        )
        return [self.symmetry_operations[unity]] + other_symops

    def apply_all_symops(self, coordinates: np.ndarray):
        """
        For a given set of coordinates, apply all symmetry
        operations in this space group, yielding a set subject
        to only translational symmetry (i.e. a unit cell).
        Assumes the input coordinates are fractional.

        Args:
            coordinates (np.ndarray): (N, 3) set of fractional coordinates

        Returns:
            Tuple[np.ndarray, np.ndarray]: a (MxN) array of generator symop integers
                and an (MxN, 3) array of coordinates where M is the number of symmetry
                operations in this space group.
        """
        nsites = len(coordinates)
        transformed = np.empty((nsites * len(self), 3))
        generator_symop = np.empty(nsites * len(self), dtype=np.int32)
        for i, s in enumerate(self.ordered_symmetry_operations()):
            transformed[i * nsites : (i + 1) * nsites] = s(coordinates)
            generator_symop[i * nsites : (i + 1) * nsites] = s.integer_code
        return generator_symop, transformed

    def __repr__(self):
        return "<{} {}: {}>".format(
            self.__class__.__name__, self.international_tables_number, self.symbol
        )

    def __eq__(self, other):
        return (
            self.international_tables_number == other.international_tables_number
        ) and (self.choice == other.choice)

    def __hash__(self):
        return hash((self.international_tables_number, self.choice))

    def has_hexagonal_rhombohedral_choices(self) -> bool:
        "returns true if this space group could be represented as hexagonal or rhombohedral"
        return self.international_tables_number in (146, 148, 155, 160, 161, 166, 167)

    @classmethod
    def from_symmetry_operations(cls, symops):
        """
        Find a matching spacegroup setting for a given (full) set of
        symmetry operations.

        Args:
            symops (List[SymmetryOperation]): the full list of symmetry operations

        Returns:
            SpaceGroup: the matching `SpaceGroup` for the provided symmetry operations
        """
        encoded = tuple(sorted(set(s.integer_code for s in symops)))
        hall = _hall_number_from_symops().get(encoded)
        if hall is None:
            raise ValueError(
                "Could not find matching spacegroup for "
                "the following symops:\n{}".format(
                    "\n".join(str(s) for s in sorted(symops))
                )
            )
        return SpaceGroup(hall_number=hall)
