import logging
import unittest
import numpy as np
from crysym.crystal import smith_normal_form
from crysym.crystal.smith_normal_form import solve_mod_one

LOG = logging.getLogger(__name__)


class SmithNormalFormTestCase(unittest.TestCase):
    rng = np.random.default_rng(3)

    def check_decomposition(self, matrix):
        p, d, q = smith_normal_form(matrix)
        np.testing.assert_equal(p @ np.asarray(matrix) @ q, d)
        self.assertEqual(abs(round(np.linalg.det(p))), 1)
        self.assertEqual(abs(round(np.linalg.det(q))), 1)
        off_diagonal = d.copy()
        k = min(d.shape)
        off_diagonal[range(k), range(k)] = 0
        self.assertFalse(np.any(off_diagonal))
        diagonal = np.diag(d)
        self.assertTrue(np.all(diagonal >= 0))
        for a, b in zip(diagonal[:-1], diagonal[1:]):
            if a != 0:
                self.assertEqual(b % a, 0)
            else:
                self.assertEqual(b, 0)
        return d

    def test_known(self):
        d = self.check_decomposition([[2, 4], [6, 8]])
        np.testing.assert_equal(d, [[2, 0], [0, 4]])
        d = self.check_decomposition([[2, 4, 4], [-6, 6, 12], [10, -4, -16]])
        np.testing.assert_equal(np.diag(d), (2, 6, 12))

    def test_random(self):
        for _ in range(20):
            matrix = self.rng.integers(-4, 5, size=(3, 3))
            self.check_decomposition(matrix)

    def test_rectangular(self):
        # stacked (R - I) blocks for a 2-fold and a 4-fold rotation about z
        twofold = np.diag((-2, -2, 0))
        fourfold = np.array(((-1, -1, 0), (1, -1, 0), (0, 0, 0)))
        d = self.check_decomposition(np.vstack((twofold, fourfold)))
        self.assertEqual(d.shape, (6, 3))
        self.assertEqual(d[2, 2], 0)

    def test_zero(self):
        p, d, q = smith_normal_form(np.zeros((3, 3), dtype=int))
        np.testing.assert_equal(d, 0)
        with self.assertRaises(ValueError):
            smith_normal_form([1, 2, 3])

    def test_solve_mod_one(self):
        # inversion: -2 s = t (mod 1)
        matrix = -2 * np.eye(3, dtype=int)
        rhs = np.array((0.5, 0.25, 0.0))
        s = solve_mod_one(matrix, rhs)
        residual = matrix @ s - rhs
        np.testing.assert_allclose(residual, np.round(residual), atol=1e-10)

        # 2-fold about z has no freedom along z, so the z component must vanish
        matrix = np.diag((-2, -2, 0))
        self.assertIsNone(solve_mod_one(matrix, (0.25, 0.5, 0.5)))
        s = solve_mod_one(matrix, (0.25, 0.5, 1.0))
        residual = matrix @ s - (0.25, 0.5, 1.0)
        np.testing.assert_allclose(residual, np.round(residual), atol=1e-10)

        with self.assertRaises(ValueError):
            solve_mod_one(matrix, (0.0, 0.0))
