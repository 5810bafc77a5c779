import logging
import unittest
import numpy as np
from crysym.crystal import UnitCell
from crysym.crystal.unit_cell import CENTERING_TO_PRIMITIVE, PRIMITIVE_TO_CENTERING

LOG = logging.getLogger(__name__)


class UnitCellTestCase(unittest.TestCase):
    def test_unit_cell_lattice(self):
        c = UnitCell.cubic(2.0)
        np.testing.assert_allclose(c.lattice, 2.0 * np.eye(3), atol=1e-8)
        np.testing.assert_allclose(c.reciprocal_lattice, 0.5 * np.eye(3), atol=1e-8)
        np.testing.assert_allclose(c.metric_tensor, 4.0 * np.eye(3), atol=1e-8)

    def test_coordinate_transforms(self):
        c = UnitCell.cubic(2.0)
        np.testing.assert_allclose(
            c.to_fractional(np.eye(3)), 0.5 * np.eye(3), atol=1e-8
        )
        np.testing.assert_allclose(c.to_cartesian(np.eye(3)), 2 * np.eye(3), atol=1e-8)

    def test_handle_bad_angles(self):
        # should warn
        c = UnitCell.from_lengths_and_angles([2.0] * 3, [90] * 3)

    def test_invalid_cells(self):
        with self.assertRaises(ValueError):
            UnitCell(np.eye(2))
        with self.assertRaises(ValueError):
            UnitCell.from_lengths_and_angles([1.0] * 3, [10, 10, 170], unit="degrees")

    def test_repr(self):
        c = UnitCell.cubic(2.0)
        self.assertTrue(str(c) == "<UnitCell: cubic (2.000)>")

    def test_cell_types(self):
        cubic = UnitCell.cubic(2.0)
        orthorhombic = UnitCell.orthorhombic(3.0, 4.0, 5.0)
        tetragonal = UnitCell.tetragonal(3.0, 4.0, unit="degrees")
        tetragonal = UnitCell.from_unique_parameters((3.0, 4.0), cell_type="tetragonal")
        monoclinic = UnitCell.monoclinic(3.0, 4.0, 5.0, 75, unit="degrees")
        monoclinic = UnitCell.monoclinic(3.0, 4.0, 5.0, 1.5)
        triclinic = UnitCell.triclinic(3.0, 4.0, 5.0, 45, 75, 90, unit="degrees")
        rhombohedral = UnitCell.rhombohedral(3.0, 97, unit="degrees")
        rhombohedral = UnitCell.rhombohedral(3.0, 1.35)
        hexagonal = UnitCell.hexagonal(3.0, 4.0)
        hexagonal = UnitCell.from_lengths_and_angles(
            [3.0, 3.0, 5.0], [90, 90, 120], unit="degrees"
        )
        self.assertTrue(cubic.cell_type == "cubic")
        self.assertTrue(orthorhombic.cell_type == "orthorhombic")
        self.assertTrue(tetragonal.cell_type == "tetragonal")
        self.assertTrue(monoclinic.cell_type == "monoclinic")
        self.assertTrue(triclinic.cell_type == "triclinic")
        self.assertTrue(rhombohedral.cell_type == "rhombohedral")
        self.assertTrue(hexagonal.cell_type == "hexagonal")

    def test_angles(self):
        c = UnitCell.cubic(2.0)
        self.assertFalse(c.angles_different)
        self.assertTrue(c.is_cubic)
        self.assertFalse(c.is_triclinic)
        self.assertFalse(c.is_monoclinic)
        self.assertFalse(c.is_tetragonal)
        self.assertFalse(c.is_rhombohedral)
        self.assertFalse(c.is_hexagonal)
        self.assertFalse(c.is_orthorhombic)

        np.testing.assert_allclose([c.alpha_deg, c.beta_deg, c.gamma_deg], 90.0)
        np.testing.assert_allclose(c.parameters, [2, 2, 2, 90, 90, 90])

    def test_parameter_round_trip(self):
        lengths = (4.1, 5.3, 6.2)
        angles = (81.0, 97.5, 105.0)
        c = UnitCell.from_lengths_and_angles(lengths, angles, unit="degrees")
        rebuilt = UnitCell(c.direct)
        np.testing.assert_allclose(rebuilt.lengths, lengths, atol=1e-10)
        np.testing.assert_allclose(np.degrees(rebuilt.angles), angles, atol=1e-10)
        from_metric = UnitCell.from_metric_tensor(c.metric_tensor)
        np.testing.assert_allclose(from_metric.metric_tensor, c.metric_tensor, atol=1e-10)
        self.assertAlmostEqual(c.volume(), abs(np.linalg.det(c.direct)))

    def test_transformed(self):
        c = UnitCell.orthorhombic(3.0, 4.0, 5.0)
        doubled = c.transformed(np.diag((2, 1, 1)))
        np.testing.assert_allclose(doubled.lengths, (6.0, 4.0, 5.0))
        self.assertAlmostEqual(doubled.volume(), 2 * c.volume())

    def test_conventional(self):
        c = UnitCell.from_lengths_and_angles(
            (4.0, 4.0, 7.0), (90, 90, 120), unit="degrees"
        )
        hexagonal = c.conventional("hexagonal")
        self.assertEqual(hexagonal.cell_type, "hexagonal")
        self.assertAlmostEqual(hexagonal.volume(), c.volume())

        m = UnitCell.monoclinic(3.0, 4.0, 5.0, 100, unit="degrees")
        conventional = m.conventional("monoclinic")
        np.testing.assert_allclose(conventional.parameters, m.parameters, atol=1e-8)
        self.assertAlmostEqual(conventional.direct[1, 1], 4.0)

        with self.assertRaises(ValueError):
            m.conventional("unknown")

    def test_centering_transforms(self):
        for centering, lattice_points in (
            ("P", 1), ("A", 2), ("B", 2), ("C", 2), ("I", 2), ("R", 3), ("H", 3), ("F", 4)
        ):
            t = CENTERING_TO_PRIMITIVE[centering]
            self.assertAlmostEqual(abs(np.linalg.det(t)), 1.0 / lattice_points)
            np.testing.assert_allclose(
                np.dot(t, PRIMITIVE_TO_CENTERING[centering]), np.eye(3), atol=1e-10
            )

    def test_mesh(self):
        mesh = UnitCell.cubic(2.0).to_mesh()
        self.assertAlmostEqual(abs(mesh.volume), 8.0)
