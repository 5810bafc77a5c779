"""
This module implements functionality associated with the symmetry of
3D periodic crystals, including Bravais lattices/unit cells (`UnitCell`),
lattice reduction (`niggli_reduce`, `delaunay_reduce`), space groups
(`SpaceGroup`), point groups (`PointGroup`), symmetry operations in
fractional coordinates (`SymmetryOperation`), asymmetric units
(`AsymmetricUnit`) and the determination of the space group of a
crystal (`find_space_group`).
"""

from .asymmetric_unit import AsymmetricUnit, asymmetric_atoms, is_inside_asymmetric_unit
from .delaunay import delaunay_reduce, delaunay_reduce_2d
from .niggli import is_niggli_reduced, niggli_reduce
from .point_group import PointGroup
from .primitive import find_primitive_cell, find_symmetry_operations, trim_atoms
from .smith_normal_form import smith_normal_form
from .space_group import SpaceGroup, match_space_group, origin_shift
from .symmetry_finder import SymmetryResult, find_niggli, find_primitive, find_space_group
from .symmetry_operation import SymmetryOperation
from .tolerance import Tolerance
from .unit_cell import UnitCell

__all__ = [
    "AsymmetricUnit",
    "PointGroup",
    "SpaceGroup",
    "SymmetryOperation",
    "SymmetryResult",
    "Tolerance",
    "UnitCell",
    "asymmetric_atoms",
    "delaunay_reduce",
    "delaunay_reduce_2d",
    "find_niggli",
    "find_primitive",
    "find_primitive_cell",
    "find_space_group",
    "find_symmetry_operations",
    "is_inside_asymmetric_unit",
    "is_niggli_reduced",
    "match_space_group",
    "niggli_reduce",
    "origin_shift",
    "smith_normal_form",
    "trim_atoms",
]
