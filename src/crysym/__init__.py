from .crystal import (
    AsymmetricUnit,
    PointGroup,
    SpaceGroup,
    SymmetryOperation,
    UnitCell,
    find_niggli,
    find_primitive,
    find_space_group,
)

__version__ = "0.1.0"

__all__ = [
    "AsymmetricUnit",
    "PointGroup",
    "SpaceGroup",
    "SymmetryOperation",
    "UnitCell",
    "find_niggli",
    "find_primitive",
    "find_space_group",
]
