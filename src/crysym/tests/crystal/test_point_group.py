import logging
import unittest
import numpy as np
from crysym.crystal import PointGroup, SpaceGroup, UnitCell
from crysym.crystal.rotation import lattice_point_group
from crysym.crystal.unit_cell import PRIMITIVE_TO_CENTERING

LOG = logging.getLogger(__name__)


def centring_vectors(basis):
    "Primitive lattice vectors in the fractional coordinates of the cell spanned by `basis`"
    vectors = np.linalg.inv(basis).T
    return vectors - np.floor(vectors + 1e-8)


class PointGroupTestCase(unittest.TestCase):
    def test_from_number(self):
        pg = PointGroup.from_number(32)
        self.assertEqual(pg.symbol, "m-3m")
        self.assertEqual(pg.schoenflies, "Oh")
        self.assertTrue(pg.centrosymmetric)
        self.assertEqual(pg.holohedry, "cubic")
        self.assertEqual(repr(pg), "<PointGroup: m-3m>")
        for invalid in (0, 33, -1):
            with self.assertRaises(ValueError):
                PointGroup.from_number(invalid)

    def test_rotation_tables(self):
        for number in range(1, 33):
            pg = PointGroup.from_number(number)
            self.assertEqual(pg.number, number)
            # the order of each point group divides 48
            self.assertEqual(48 % sum(pg.rotation_table), 0)

    def test_from_rotations(self):
        for sg, expected in (
            (1, "1"),
            (2, "-1"),
            (14, "2/m"),
            (33, "mm2"),
            (62, "mmm"),
            (76, "4"),
            (136, "4/mmm"),
            (148, "-3"),
            (166, "-3m"),
            (194, "6/mmm"),
            (205, "m-3"),
            (225, "m-3m"),
        ):
            rotations = [op.rotation for op in SpaceGroup(sg).symmetry_operations]
            pg = PointGroup.from_rotations(rotations)
            self.assertEqual(pg.symbol, expected, msg="space group {}".format(sg))
            self.assertEqual(pg, SpaceGroup(sg).point_group)

        self.assertIsNone(PointGroup.from_rotations([np.diag((-1, 1, 1))] * 2))

    def test_construct_axes(self):
        rotations = lattice_point_group(UnitCell.cubic(5.0).direct)
        pg = PointGroup.from_rotations(rotations)
        axes = pg.construct_axes(rotations)
        np.testing.assert_equal(axes, np.eye(3))

        rotations = lattice_point_group(UnitCell.hexagonal(3.0, 5.0).direct)
        pg = PointGroup.from_rotations(rotations)
        self.assertEqual(pg.symbol, "6/mmm")
        axes = pg.construct_axes(rotations)
        self.assertEqual(round(np.linalg.det(axes)), 1)
        np.testing.assert_equal(np.abs(axes[:, 2]), (0, 0, 1))

        triclinic = PointGroup.from_number(2)
        np.testing.assert_equal(triclinic.construct_axes([np.eye(3, dtype=int)]), np.eye(3))

    def test_centering(self):
        for letter in ("P", "A", "B", "C", "I", "R", "F"):
            basis = PRIMITIVE_TO_CENTERING[letter]
            self.assertEqual(PointGroup.centering(basis), letter)
        self.assertEqual(PointGroup.centering(PRIMITIVE_TO_CENTERING["H"]), "R")
        self.assertIsNone(PointGroup.centering(np.diag((5, 1, 1))))

    def test_basis_correction(self):
        monoclinic = PointGroup.from_number(5)
        basis = PRIMITIVE_TO_CENTERING["A"]
        correction, centering = monoclinic.basis_correction(basis, "A")
        self.assertEqual(centering, "C")
        self.assertEqual(round(np.linalg.det(correction)), 1)
        self.assertEqual(PointGroup.centering(basis @ correction), "C")

        orthorhombic = PointGroup.from_number(8)
        for letter in ("A", "B"):
            basis = PRIMITIVE_TO_CENTERING[letter]
            correction, centering = orthorhombic.basis_correction(basis, letter)
            self.assertEqual(centering, "C")
            self.assertEqual(PointGroup.centering(basis @ correction), "C")

        basis = PRIMITIVE_TO_CENTERING["C"]
        correction, centering = orthorhombic.basis_correction(basis, "C")
        np.testing.assert_equal(correction, np.eye(3))
        self.assertEqual(centering, "C")

    def assert_centring(self, basis, allowed):
        for v in centring_vectors(basis):
            self.assertTrue(
                any(np.allclose(v, x, atol=1e-8) for x in allowed),
                msg="unexpected lattice point {}".format(v),
            )

    def test_monoclinic_body_centred(self):
        monoclinic = PointGroup.from_number(5)
        basis = PRIMITIVE_TO_CENTERING["I"]
        correction, centering = monoclinic.basis_correction(basis, "I")
        self.assertEqual(centering, "C")
        self.assertEqual(round(np.linalg.det(correction)), 1)
        # the unique b axis is kept
        np.testing.assert_equal(correction[:, 1], (0, 1, 0))
        self.assert_centring(basis @ correction, ((0, 0, 0), (0.5, 0.5, 0)))

    def test_reverse_rhombohedral(self):
        trigonal = PointGroup.from_number(20)
        obverse = PRIMITIVE_TO_CENTERING["R"]
        allowed = ((0, 0, 0), (2 / 3, 1 / 3, 1 / 3), (1 / 3, 2 / 3, 2 / 3))
        self.assert_centring(obverse, allowed)
        correction, centering = trigonal.basis_correction(obverse, "R")
        np.testing.assert_equal(correction, np.eye(3))
        self.assertEqual(centering, "R")

        # rotating by 180 degrees about c gives the reverse setting
        reverse = obverse @ np.diag((-1, -1, 1))
        correction, centering = trigonal.basis_correction(reverse, "R")
        self.assertEqual(centering, "R")
        self.assertFalse(np.array_equal(correction, np.eye(3)))
        self.assertEqual(round(np.linalg.det(correction)), 1)
        self.assert_centring(reverse @ correction, allowed)
