import itertools
import logging
from collections import defaultdict
import numpy as np

from .asymmetric_unit_regions import ASYMMETRIC_UNIT_REGIONS
from .symmetry_operation import wrap_to_unit_cell
from .tolerance import ASYMMETRIC_UNIT_PRECISION, SYMMETRY_PRECISION

LOG = logging.getLogger(__name__)

_LATTICE_SHIFTS = tuple(itertools.product((-1, 0, 1), repeat=3))


class AsymmetricUnit:
    """
    Storage class for the coordinates and labels in a crystal
    asymmetric unit

    Attributes:
        elements (List): N length list of type tags associated with the sites in this asymmetric
            unit
        positions (array_like): (N, 3) array of site positions in fractional coordinates
        labels (array_like): N length array of string labels for each site
    """

    def __init__(self, elements, positions, labels=None):
        """
        Create an asymmetric unit object from a list of type tags and
        an array of fractional coordinates.


        Arguments:
            elements (List): N length list of type tags associated with the sites
            positions (array_like): (N, 3) array of site positions in fractional coordinates
            labels (array_like, optional): N length array of string labels for each site
        """
        self.elements = list(elements)
        self.positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        if len(self.elements) != len(self.positions):
            raise ValueError("Number of elements and positions must match")
        if labels is None:
            self.labels = []
            label_index = defaultdict(int)
            for el in self.elements:
                label_index[el] += 1
                self.labels.append("{}{}".format(el, label_index[el]))
        else:
            self.labels = labels
        self.labels = np.array(self.labels)

    @property
    def formula(self):
        """Formula for this asymmetric unit, i.e. the count of each type"""
        counts = defaultdict(int)
        for el in self.elements:
            counts[el] += 1
        return " ".join(
            "{}{}".format(k, v if v > 1 else "") for k, v in counts.items()
        )

    def __len__(self):
        return len(self.elements)

    def __repr__(self):
        return "<{}>".format(self.formula)


def is_inside_asymmetric_unit(hall_number, point, eps=ASYMMETRIC_UNIT_PRECISION) -> bool:
    """
    Check whether a point (or one of its lattice translates) lies inside
    the asymmetric unit of a Hall setting.

    Args:
        hall_number (int): Hall number between 1 and 530
        point (array_like): (3,) fractional coordinates
        eps (float, optional): slack on the region boundaries

    Returns:
        bool: True if the point lies inside the asymmetric unit
    """
    region = ASYMMETRIC_UNIT_REGIONS.get(hall_number)
    if region is None:
        raise ValueError("Hall number must be between [1, 530]")
    x, y, z = wrap_to_unit_cell(np.asarray(point, dtype=np.float64))
    for i, j, k in _LATTICE_SHIFTS:
        if region(x + i, y + j, z + k, eps):
            return True
    return False


def asymmetric_atoms(
    operations,
    positions,
    types,
    hall_number=None,
    lattice=None,
    tolerance=SYMMETRY_PRECISION,
):
    """
    Reduce a set of atoms to its asymmetric unit, i.e. one representative
    of each symmetry orbit.

    Each atom whose symmetry images include an already retained
    representative (of the same type) is marked as a copy of it, otherwise
    it starts a new orbit. The representative of a new orbit is its first
    image inside the asymmetric unit of `hall_number`, or the atom itself
    if there is none (or no Hall number was given).

    Args:
        operations (List[SymmetryOperation]): the symmetry operations
        positions (array_like): (N, 3) fractional positions
        types (array_like): N type tags
        hall_number (int, optional): the Hall setting of the operations
        lattice (array_like, optional): (3, 3) row major lattice, if given
            distances are compared in Cartesian space
        tolerance (float, optional): overlap distance

    Returns:
        Tuple[np.ndarray, np.ndarray, np.ndarray]: the index of the representative
        of each atom, and the representative positions and types.
    """
    positions = np.asarray(positions, dtype=np.float64)
    types = np.asarray(types)
    if len(positions) != len(types):
        raise ValueError("Number of types and positions must match")
    asymmetric_index = np.empty(len(positions), dtype=int)
    representatives = []
    representative_types = []
    for i, (position, kind) in enumerate(zip(positions, types)):
        images = wrap_to_unit_cell(
            np.array([op.apply(position[np.newaxis, :])[0] for op in operations])
        )
        for r, (other, other_kind) in enumerate(zip(representatives, representative_types)):
            if other_kind != kind:
                continue
            d = images - other
            d -= np.round(d)
            if lattice is not None:
                d = np.dot(d, lattice)
            if np.any(np.linalg.norm(d, axis=1) < tolerance):
                asymmetric_index[i] = r
                break
        else:
            representative = wrap_to_unit_cell(position)
            if hall_number is not None:
                for image in images:
                    if is_inside_asymmetric_unit(hall_number, image):
                        representative = image
                        break
            asymmetric_index[i] = len(representatives)
            representatives.append(representative)
            representative_types.append(kind)
    LOG.debug(
        "Reduced %d atoms to %d symmetry unique atoms", len(positions), len(representatives)
    )
    return (
        asymmetric_index,
        np.array(representatives).reshape(-1, 3),
        np.array(representative_types),
    )
