import logging
import unittest
import numpy as np
from crysym.crystal import Tolerance

LOG = logging.getLogger(__name__)


class ToleranceTestCase(unittest.TestCase):
    tol = Tolerance(1e-3)

    def test_construction(self):
        self.assertEqual(Tolerance().eps, 1e-5)
        self.assertEqual(repr(self.tol), "<Tolerance: 0.001>")
        for eps in (0.0, -1e-3):
            with self.assertRaises(ValueError):
                Tolerance(eps)

    def test_comparisons(self):
        tol = self.tol
        self.assertTrue(tol.smaller(1.0, 1.01))
        self.assertFalse(tol.smaller(1.0, 1.0005))
        self.assertTrue(tol.larger(1.01, 1.0))
        self.assertFalse(tol.larger(1.0005, 1.0))
        self.assertTrue(tol.smaller_equal(1.0005, 1.0))
        self.assertFalse(tol.smaller_equal(1.01, 1.0))
        self.assertTrue(tol.larger_equal(1.0, 1.0005))
        self.assertFalse(tol.larger_equal(1.0, 1.01))
        self.assertTrue(tol.equal(1.0, 1.0005))
        self.assertFalse(tol.equal(1.0, 1.01))

    def test_arrays(self):
        tol = self.tol
        self.assertTrue(tol.is_zero(np.array((0.0, 5e-4, -5e-4))))
        self.assertFalse(tol.is_zero(np.array((0.0, 5e-4, 0.1))))
        self.assertTrue(tol.is_integer(np.array((1.0, -2.0005, 2.9995))))
        self.assertFalse(tol.is_integer(np.array((1.0, 0.5))))
        self.assertTrue(tol.is_integer(3.0))

    def test_snap(self):
        snapped = self.tol.snap((0.9999, -0.0002, 0.5, 2.0004, 1 / 3))
        np.testing.assert_allclose(snapped, (1.0, 0.0, 0.5, 2.0, 1 / 3))
        self.assertEqual(snapped[0], 1.0)
        self.assertEqual(snapped[1], 0.0)
