import logging
import unittest
import numpy as np
from crysym.crystal import UnitCell, find_primitive_cell, find_symmetry_operations, trim_atoms
from crysym.crystal.primitive import (
    PeriodicSites,
    check_atoms,
    minority_type,
    overlaps_all_atoms,
    primitive_translations,
)
from crysym.crystal.rotation import lattice_point_group

LOG = logging.getLogger(__name__)

BCC = np.array(((0.0, 0.0, 0.0), (0.5, 0.5, 0.5)))
FCC = np.array(((0.0, 0.0, 0.0), (0.0, 0.5, 0.5), (0.5, 0.0, 0.5), (0.5, 0.5, 0.0)))


class PrimitiveTestCase(unittest.TestCase):
    lattice = UnitCell.cubic(5.0).direct

    def test_check_atoms(self):
        with self.assertRaises(ValueError):
            check_atoms(np.zeros((2, 2)), [1, 1])
        with self.assertRaises(ValueError):
            check_atoms(np.zeros((0, 3)), [])
        with self.assertRaises(ValueError):
            check_atoms(np.zeros((2, 3)), [1])

    def test_minority_type(self):
        self.assertEqual(minority_type([1, 1, 2, 2, 3]), 3)
        self.assertEqual(minority_type([2, 1, 1, 2]), 2)
        self.assertEqual(minority_type(["Na", "Cl"]), "Na")

    def test_overlaps(self):
        types = [1, 1]
        self.assertTrue(overlaps_all_atoms(BCC, types, (0.5, 0.5, 0.5)))
        self.assertTrue(overlaps_all_atoms(BCC, types, (1.0, 0.0, -1.0)))
        self.assertFalse(overlaps_all_atoms(BCC, types, (0.5, 0.0, 0.0)))
        self.assertFalse(overlaps_all_atoms(BCC, [1, 2], (0.5, 0.5, 0.5)))
        self.assertTrue(
            overlaps_all_atoms(BCC, types, (0, 0, 0), rotation=-np.eye(3, dtype=int))
        )
        sites = PeriodicSites(BCC + 1e-7, types)
        self.assertTrue(sites.overlaps(BCC))

    def test_primitive_cell(self):
        primitive = find_primitive_cell(self.lattice, BCC, [1, 1])
        self.assertAlmostEqual(np.linalg.det(primitive), 62.5)
        primitive = find_primitive_cell(self.lattice, FCC, [1, 1, 1, 1])
        self.assertAlmostEqual(np.linalg.det(primitive), 31.25)
        # primitive vectors are lattice vectors of the centred lattice
        relative = np.dot(primitive, np.linalg.inv(self.lattice)) * 2
        np.testing.assert_allclose(relative, np.rint(relative), atol=1e-8)

    def test_already_primitive(self):
        primitive = find_primitive_cell(self.lattice, BCC, [1, 2])
        np.testing.assert_allclose(primitive, self.lattice)
        primitive = find_primitive_cell(self.lattice, BCC[:1], [1])
        np.testing.assert_allclose(primitive, self.lattice)

    def test_supercell(self):
        lattice = np.diag((10.0, 5.0, 5.0))
        positions = ((0.0, 0.0, 0.0), (0.1, 0.5, 0.5), (0.5, 0.0, 0.0), (0.6, 0.5, 0.5))
        types = (1, 2, 1, 2)
        primitive = find_primitive_cell(lattice, positions, types)
        self.assertAlmostEqual(np.linalg.det(primitive), 125.0)
        trimmed, trimmed_types = trim_atoms(positions, types, lattice, primitive)
        self.assertEqual(len(trimmed), 2)
        self.assertEqual(sorted(trimmed_types.tolist()), [1, 2])

    def test_trim_atoms(self):
        primitive = find_primitive_cell(self.lattice, FCC, [1, 1, 1, 1])
        positions, types = trim_atoms(FCC, [1, 1, 1, 1], self.lattice, primitive)
        self.assertEqual(len(positions), 1)
        np.testing.assert_allclose(positions, np.zeros((1, 3)), atol=1e-8)
        self.assertTrue(np.all((positions >= 0) & (positions < 1)))

    def test_symmetry_operations(self):
        rotations = lattice_point_group(self.lattice)
        ops = find_symmetry_operations(BCC[:1], [1], rotations)
        self.assertEqual(len(ops), 48)
        for op in ops:
            np.testing.assert_allclose(op.translation, 0.0)

        # a generic pair of atoms only keeps the identity and inversion
        positions = ((0.1, 0.2, 0.35), (0.9, 0.8, 0.65))
        ops = find_symmetry_operations(positions, [1, 1], rotations)
        self.assertEqual(len(ops), 2)

        # y + z = 1/2 adds a mirror and a two-fold axis, each with a translation
        special = ((0.1, 0.2, 0.3), (0.9, 0.8, 0.7))
        ops = find_symmetry_operations(special, [1, 1], rotations)
        self.assertEqual(len(ops), 4)
        codes = {op.cif_form for op in ops}
        self.assertIn("+x,1/2-z,1/2-y", codes)
        self.assertIn("-x,1/2+z,1/2+y", codes)
        translations = primitive_translations(positions, [1, 1], -np.eye(3, dtype=int))
        self.assertEqual(len(translations), 1)
        t = translations[0]
        np.testing.assert_allclose(t - np.round(t), 0.0, atol=1e-8)
