import logging
import unittest
import numpy as np
from crysym.crystal import AsymmetricUnit, SpaceGroup, asymmetric_atoms, is_inside_asymmetric_unit
from crysym.crystal.asymmetric_unit_regions import ASYMMETRIC_UNIT_REGIONS

LOG = logging.getLogger(__name__)


class AsymmetricUnitTestCase(unittest.TestCase):
    def test_labels_and_formula(self):
        asym = AsymmetricUnit(["Na", "Cl", "Cl"], np.random.rand(3, 3))
        np.testing.assert_equal(asym.labels, ["Na1", "Cl1", "Cl2"])
        self.assertEqual(asym.formula, "Na Cl2")
        self.assertEqual(repr(asym), "<Na Cl2>")
        self.assertEqual(len(asym), 3)
        with self.assertRaises(ValueError):
            AsymmetricUnit(["Na"], np.zeros((2, 3)))

    def test_explicit_labels(self):
        asym = AsymmetricUnit(["O", "H"], ((0.1, 0.2, 0.3), (0.2, 0.2, 0.3)), labels=["O1", "H7"])
        np.testing.assert_equal(asym.labels, ["O1", "H7"])
        np.testing.assert_allclose(asym.positions[1], (0.2, 0.2, 0.3))

    def test_regions(self):
        self.assertEqual(len(ASYMMETRIC_UNIT_REGIONS), 530)
        self.assertTrue(is_inside_asymmetric_unit(1, (0.7, 0.8, 0.9)))
        self.assertTrue(is_inside_asymmetric_unit(1, (1.7, -0.2, 0.9)))
        self.assertTrue(is_inside_asymmetric_unit(2, (0.25, 0.8, 0.9)))
        self.assertFalse(is_inside_asymmetric_unit(2, (0.75, 0.8, 0.9)))
        with self.assertRaises(ValueError):
            is_inside_asymmetric_unit(531, (0.0, 0.0, 0.0))

    def test_every_orbit_meets_the_asymmetric_unit(self):
        points = np.random.default_rng(11).random((4, 3))
        for hall in range(1, 531):
            sg = SpaceGroup(hall_number=hall)
            for point in points:
                _, images = sg.apply_all_symops(point[np.newaxis, :])
                self.assertTrue(
                    any(is_inside_asymmetric_unit(hall, x) for x in images),
                    msg="Hall number {} ({})".format(hall, sg.hall_symbol),
                )

    def test_asymmetric_atoms(self):
        sg = SpaceGroup(14)
        _, positions = sg.apply_all_symops(np.array([[0.1, 0.2, 0.3], [0.4, 0.1, 0.15]]))
        types = np.array([1, 2] * 4)
        index, unique_positions, unique_types = asymmetric_atoms(
            sg.symmetry_operations, positions, types, hall_number=sg.hall_number
        )
        self.assertEqual(len(unique_positions), 2)
        np.testing.assert_equal(index, [0, 1] * 4)
        np.testing.assert_equal(unique_types, [1, 2])
        for x in unique_positions:
            self.assertTrue(is_inside_asymmetric_unit(sg.hall_number, x))

        # without symmetry every atom is unique
        index, unique_positions, _ = asymmetric_atoms(
            SpaceGroup(1).symmetry_operations, positions, types
        )
        self.assertEqual(len(unique_positions), 8)
        np.testing.assert_equal(index, np.arange(8))

    def test_hexagonal_representatives(self):
        for number in (188, 194):
            sg = SpaceGroup(number)
            _, positions = sg.apply_all_symops(np.array([[0.3, 0.1, 0.4]]))
            _, unique_positions, _ = asymmetric_atoms(
                sg.symmetry_operations, positions, np.ones(len(positions)), hall_number=sg.hall_number
            )
            self.assertEqual(len(unique_positions), 1)
            self.assertTrue(is_inside_asymmetric_unit(sg.hall_number, unique_positions[0]))

    def test_cartesian_tolerance(self):
        sg = SpaceGroup(2)
        positions = np.array(((0.1, 0.2, 0.3), (0.9, 0.8, 0.71)))
        lattice = np.eye(3) * 10
        index, _, _ = asymmetric_atoms(
            sg.symmetry_operations, positions, [1, 1], lattice=lattice, tolerance=0.05
        )
        np.testing.assert_equal(index, [0, 1])
        index, _, _ = asymmetric_atoms(
            sg.symmetry_operations, positions, [1, 1], lattice=lattice, tolerance=0.5
        )
        np.testing.assert_equal(index, [0, 0])
