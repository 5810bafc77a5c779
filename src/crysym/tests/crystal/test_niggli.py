import logging
import unittest
import numpy as np
import spglib
from crysym.crystal import UnitCell, is_niggli_reduced, niggli_reduce
from crysym.crystal.niggli import niggli_parameters

LOG = logging.getLogger(__name__)


def _lattice_from_parameters(A, B, C, xi, eta, zeta):
    metric = np.array(
        ((A, zeta / 2, eta / 2), (zeta / 2, B, xi / 2), (eta / 2, xi / 2, C))
    )
    return np.linalg.cholesky(metric)


class NiggliTestCase(unittest.TestCase):
    rng = np.random.default_rng(42)

    def random_lattices(self, n=10):
        lattices = []
        while len(lattices) < n:
            lattice = self.rng.uniform(-5, 5, size=(3, 3))
            if abs(np.linalg.det(lattice)) > 10:
                lattices.append(lattice)
        return lattices

    def test_krivy_gruber_example(self):
        lattice = _lattice_from_parameters(9, 27, 4, -5, -4, -22)
        reduced, cob = niggli_reduce(lattice)
        np.testing.assert_allclose(
            niggli_parameters(reduced), (4, 9, 9, 9, 3, 4), atol=1e-8
        )
        np.testing.assert_allclose(reduced, np.dot(cob.T, lattice), atol=1e-10)
        self.assertTrue(is_niggli_reduced(reduced))

    def test_cubic(self):
        lattice = UnitCell.cubic(5.0).direct
        reduced, cob = niggli_reduce(lattice)
        np.testing.assert_allclose(niggli_parameters(reduced), (25, 25, 25, 0, 0, 0), atol=1e-8)
        self.assertEqual(abs(round(np.linalg.det(cob))), 1)

    def test_unimodular_and_volume(self):
        for lattice in self.random_lattices():
            reduced, cob = niggli_reduce(lattice)
            self.assertEqual(cob.dtype.kind, "i")
            self.assertEqual(abs(round(np.linalg.det(cob))), 1)
            self.assertAlmostEqual(
                abs(np.linalg.det(reduced)), abs(np.linalg.det(lattice)), places=8
            )
            self.assertTrue(is_niggli_reduced(reduced))

    def test_idempotent(self):
        for lattice in self.random_lattices(5):
            reduced, _ = niggli_reduce(lattice)
            twice, cob = niggli_reduce(reduced)
            np.testing.assert_allclose(
                niggli_parameters(twice), niggli_parameters(reduced), atol=1e-6
            )

    def test_agrees_with_spglib(self):
        for lattice in self.random_lattices():
            reduced, _ = niggli_reduce(lattice)
            expected = spglib.niggli_reduce(lattice, eps=1e-5)
            np.testing.assert_allclose(
                niggli_parameters(reduced), niggli_parameters(expected), atol=1e-6
            )

    def test_degenerate(self):
        lattice = np.array(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 1.0, 0.0)))
        self.assertIsNone(niggli_reduce(lattice))
        with self.assertRaises(ValueError):
            niggli_reduce(np.eye(2))

    def test_not_reduced(self):
        lattice = _lattice_from_parameters(9, 27, 4, -5, -4, -22)
        self.assertFalse(is_niggli_reduced(lattice))
