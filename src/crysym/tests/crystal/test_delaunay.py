import logging
import unittest
import numpy as np
from crysym.crystal import UnitCell, delaunay_reduce, delaunay_reduce_2d

LOG = logging.getLogger(__name__)


class DelaunayTestCase(unittest.TestCase):
    def test_cubic(self):
        lattice = UnitCell.cubic(5.0).direct
        reduced = delaunay_reduce(lattice)
        self.assertAlmostEqual(np.linalg.det(reduced), 125.0)
        np.testing.assert_allclose(np.linalg.norm(reduced, axis=1), 5.0)

    def test_skewed_cubic(self):
        cob = np.array(((1, 0, 0), (3, 1, 0), (-2, 4, 1)))
        lattice = np.dot(cob.T, UnitCell.cubic(5.0).direct)
        reduced = delaunay_reduce(lattice)
        self.assertAlmostEqual(np.linalg.det(reduced), 125.0)
        np.testing.assert_allclose(np.linalg.norm(reduced, axis=1), 5.0)

    def test_volume_invariance(self):
        rng = np.random.default_rng(7)
        for _ in range(10):
            lattice = rng.uniform(-4, 4, size=(3, 3))
            if abs(np.linalg.det(lattice)) < 5:
                continue
            reduced = delaunay_reduce(lattice)
            self.assertGreater(np.linalg.det(reduced), 0)
            self.assertAlmostEqual(
                np.linalg.det(reduced), abs(np.linalg.det(lattice)), places=6
            )
            # reduced vectors are lattice vectors of the input
            relative = np.dot(reduced, np.linalg.inv(lattice))
            np.testing.assert_allclose(relative, np.rint(relative), atol=1e-6)

    def test_coplanar(self):
        lattice = np.array(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 1.0, 1e-9)))
        self.assertIsNone(delaunay_reduce(lattice))
        with self.assertRaises(ValueError):
            delaunay_reduce(np.eye(2))

    def test_2d(self):
        monoclinic = UnitCell.monoclinic(4.0, 6.0, 5.0, 100, unit="degrees").direct
        cob = np.array(((1, 0, 0), (0, 1, 0), (3, 0, 1)))
        lattice = np.dot(cob.T, monoclinic)
        reduced = delaunay_reduce_2d(lattice, unique_axis=1)
        np.testing.assert_allclose(np.abs(reduced[1]), np.abs(lattice[1]), atol=1e-10)
        self.assertAlmostEqual(np.linalg.det(reduced), abs(np.linalg.det(lattice)))
        # a + 3c, c reduces back to a, c
        lengths = sorted(np.linalg.norm(reduced[[0, 2]], axis=1))
        np.testing.assert_allclose(lengths, (4.0, 5.0))
        self.assertLess(lengths[1], np.linalg.norm(lattice[0]))
        with self.assertRaises(ValueError):
            delaunay_reduce_2d(lattice, unique_axis=3)
