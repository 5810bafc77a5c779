import logging
import unittest
import numpy as np
from crysym.crystal import UnitCell
from crysym.crystal.rotation import (
    LATTICE_DIRECTIONS,
    ROTATION_AXES,
    lattice_point_group,
    orthogonal_axes,
    proper_rotation,
    rotation_axis,
    rotation_order,
    rotation_type,
)

LOG = logging.getLogger(__name__)

FOURFOLD_Z = np.array(((0, -1, 0), (1, 0, 0), (0, 0, 1)))
THREEFOLD_111 = np.array(((0, 0, 1), (1, 0, 0), (0, 1, 0)))


class RotationTestCase(unittest.TestCase):
    def test_tables(self):
        self.assertEqual(len(ROTATION_AXES), 73)
        self.assertEqual(len(LATTICE_DIRECTIONS), 26)

    def test_rotation_type(self):
        self.assertEqual(rotation_type(np.eye(3, dtype=int)), 1)
        self.assertEqual(rotation_type(-np.eye(3, dtype=int)), -1)
        self.assertEqual(rotation_type(FOURFOLD_Z), 4)
        self.assertEqual(rotation_type(-FOURFOLD_Z), -4)
        self.assertEqual(rotation_type(THREEFOLD_111), 3)
        self.assertEqual(rotation_type(-THREEFOLD_111), -3)
        self.assertEqual(rotation_type(np.diag((-1, -1, 1))), 2)
        self.assertEqual(rotation_type(np.diag((1, 1, -1))), -2)
        with self.assertRaises(ValueError):
            rotation_type(np.diag((2, 1, 1)))

    def test_rotation_order(self):
        self.assertEqual(rotation_order(FOURFOLD_Z), 4)
        self.assertEqual(rotation_order(-FOURFOLD_Z), 4)
        self.assertEqual(rotation_order(-THREEFOLD_111), 6)
        self.assertEqual(rotation_order(-np.eye(3, dtype=int)), 2)
        self.assertEqual(rotation_order(np.diag((1, 1, -1))), 2)

    def test_axes(self):
        np.testing.assert_equal(rotation_axis(FOURFOLD_Z), (0, 0, 1))
        np.testing.assert_equal(rotation_axis(-FOURFOLD_Z), (0, 0, 1))
        np.testing.assert_equal(rotation_axis(THREEFOLD_111), (1, 1, 1))
        np.testing.assert_equal(proper_rotation(-FOURFOLD_Z), FOURFOLD_Z)
        perpendicular = [tuple(x) for x in orthogonal_axes(FOURFOLD_Z, 4)]
        self.assertIn((1, 0, 0), perpendicular)
        self.assertIn((0, 1, 0), perpendicular)
        self.assertIn((1, 1, 0), perpendicular)
        self.assertNotIn((0, 0, 1), perpendicular)
        self.assertNotIn((1, 0, 1), perpendicular)

    def test_lattice_point_group(self):
        for cell, order in (
            (UnitCell.cubic(5.0), 48),
            (UnitCell.tetragonal(3.0, 4.0), 16),
            (UnitCell.orthorhombic(3.0, 4.0, 5.0), 8),
            (UnitCell.hexagonal(3.0, 5.0), 24),
            (UnitCell.monoclinic(3.0, 4.0, 5.0, 100, unit="degrees"), 4),
            (UnitCell.triclinic(3.0, 4.0, 5.0, 80, 95, 103, unit="degrees"), 2),
        ):
            rotations = lattice_point_group(cell.direct)
            self.assertEqual(len(rotations), order, msg=cell.cell_type)
            metric = cell.metric_tensor
            for r in rotations:
                np.testing.assert_allclose(r.T @ metric @ r, metric, atol=1e-6)
