import logging
import unittest
import numpy as np
from crysym.crystal import (
    SpaceGroup,
    UnitCell,
    find_niggli,
    find_primitive,
    find_space_group,
    is_niggli_reduced,
    trim_atoms,
)

LOG = logging.getLogger(__name__)

NACL = (
    np.array(((0.0, 0.0, 0.0), (0.5, 0.5, 0.5))),
    np.array((11, 17)),
)


def expand(number, sites, types, **kwargs):
    "All atoms in the unit cell generated from the given sites"
    sg = SpaceGroup(number, **kwargs)
    sites = np.asarray(sites)
    _, positions = sg.apply_all_symops(sites)
    all_types = np.tile(types, len(sg))
    identity = np.eye(3)
    return trim_atoms(positions, all_types, identity, identity)


class FindSpaceGroupTestCase(unittest.TestCase):
    cubic = UnitCell.cubic(5.64).direct

    def check(self, lattice, positions, types, expected, n_unique=None):
        result = find_space_group(lattice, positions, types)
        self.assertIsNotNone(result, msg="expected space group {}".format(expected))
        self.assertEqual(result.international_tables_number, expected)
        if n_unique is not None:
            self.assertEqual(len(result.asymmetric_unit), n_unique)
        # the number of atoms per unit volume is unchanged
        density = len(positions) / abs(np.linalg.det(lattice))
        self.assertAlmostEqual(
            len(result.positions) / result.unit_cell.volume(), density, places=6
        )
        self.assertEqual(len(np.unique(result.asymmetric_index)), len(result.asymmetric_unit))
        return result

    def test_simple_cubic(self):
        result = self.check(UnitCell.cubic(5.0).direct, [[0, 0, 0]], [1], 221, 1)
        self.assertEqual(result.symbol, "Pm-3m")
        self.assertEqual(result.point_group.symbol, "m-3m")
        self.assertEqual(result.space_group.hall_number, result.hall_number)
        np.testing.assert_allclose(result.unit_cell.lengths, 5.0)
        self.assertEqual(repr(result), "<SymmetryResult 221: Pm-3m (1 atoms)>")

    def test_centred_cubic(self):
        bcc = np.array(((0.0, 0.0, 0.0), (0.5, 0.5, 0.5)))
        self.check(self.cubic, bcc, [1, 1], 229, 1)
        fcc = np.array(((0.0, 0.0, 0.0), (0.0, 0.5, 0.5), (0.5, 0.0, 0.5), (0.5, 0.5, 0.0)))
        result = self.check(self.cubic, fcc, [1, 1, 1, 1], 225, 1)
        self.assertEqual(len(result.positions), 4)

    def test_rocksalt(self):
        positions, types = expand(225, *NACL)
        self.assertEqual(len(positions), 8)
        result = self.check(self.cubic, positions, types, 225, 2)
        self.assertEqual(sorted(result.asymmetric_unit.elements), [11, 17])

    def test_shifted_and_transformed(self):
        positions, types = expand(225, *NACL)
        shifted = positions + (0.123, 0.2, 0.31)
        self.check(self.cubic, shifted, types, 225, 2)

        # the same crystal described by a skewed cell of the same lattice
        cob = np.array(((1, 0, 0), (1, 1, 0), (-1, 2, 1)))
        lattice = np.dot(cob.T, self.cubic)
        skewed, skewed_types = trim_atoms(positions, types, self.cubic, lattice)
        self.check(lattice, skewed, skewed_types, 225, 2)

    def test_rhombohedral(self):
        lattice = UnitCell.hexagonal(3.0, 10.0).direct
        obverse = ((0, 0, 0), (2 / 3, 1 / 3, 1 / 3), (1 / 3, 2 / 3, 2 / 3))
        reverse = ((0, 0, 0), (1 / 3, 2 / 3, 1 / 3), (2 / 3, 1 / 3, 2 / 3))
        for positions in (obverse, reverse):
            result = self.check(lattice, np.array(positions), [1, 1, 1], 166, 1)
            self.assertEqual(result.space_group.centering, "R")
            self.assertEqual(result.space_group.choice, "H")
            self.assertEqual(len(result.positions), 3)
            self.assertTrue(np.all(result.origin_shift < 1.0 - 1e-6))

    def test_triclinic(self):
        lattice = UnitCell.triclinic(4.1, 5.3, 6.2, 81.0, 97.5, 105.0, unit="degrees").direct
        self.check(lattice, [[0, 0, 0], [0.3, 0.1, 0.2]], [1, 2], 1, 2)
        self.check(lattice, [[0.1, 0.2, 0.3], [0.9, 0.8, 0.7]], [1, 1], 2, 1)

    def test_generic_sites(self):
        site = [[0.1234, 0.2345, 0.3456]]
        for number, lattice in (
            (14, UnitCell.monoclinic(5.1, 6.2, 7.3, 104.0, unit="degrees")),
            (15, UnitCell.monoclinic(9.1, 6.2, 7.3, 111.0, unit="degrees")),
            (62, UnitCell.orthorhombic(5.1, 6.2, 7.3)),
            (136, UnitCell.tetragonal(4.6, 3.0)),
            (166, UnitCell.hexagonal(4.5, 11.0)),
            (194, UnitCell.hexagonal(3.2, 5.2)),
            (205, UnitCell.cubic(5.64)),
        ):
            positions, types = expand(number, site, [1])
            self.check(lattice.direct, positions, types, number, 1)

    def test_origin_choice(self):
        # Fd-3m in origin choice 1, reported in the standard origin choice 2
        positions, types = expand(227, [[0.1234, 0.2345, 0.3456]], [1], choice="1")
        result = self.check(self.cubic, positions, types, 227, 1)
        self.assertEqual(result.space_group.choice, "2")

    def test_invalid_input(self):
        with self.assertRaises(ValueError):
            find_space_group(np.eye(2), [[0, 0, 0]], [1])
        with self.assertRaises(ValueError):
            find_space_group(self.cubic, [[0, 0, 0]], [1, 2])
        with self.assertRaises(ValueError):
            find_space_group(self.cubic, [[0, 0, 0]], [1], tolerance=0.0)


class FindPrimitiveTestCase(unittest.TestCase):
    cubic = UnitCell.cubic(5.64).direct

    def test_rocksalt_primitive(self):
        positions, types = expand(225, *NACL)
        cell, primitive_positions, primitive_types = find_primitive(
            self.cubic, positions, types
        )
        self.assertAlmostEqual(cell.volume(), 5.64 ** 3 / 4)
        self.assertEqual(len(primitive_positions), 2)
        self.assertEqual(sorted(primitive_types.tolist()), [11, 17])

    def test_rhombohedral_primitive(self):
        positions, types = expand(166, [[0.1234, 0.2345, 0.3456]], [1])
        lattice = UnitCell.hexagonal(4.5, 11.0).direct
        cell, primitive_positions, _ = find_primitive(lattice, positions, types)
        self.assertAlmostEqual(cell.volume(), abs(np.linalg.det(lattice)) / 3)
        self.assertEqual(len(primitive_positions), len(positions) // 3)

    def test_niggli(self):
        bcc = np.array(((0.0, 0.0, 0.0), (0.5, 0.5, 0.5)))
        cell, positions, types = find_niggli(self.cubic, bcc, [1, 1])
        self.assertAlmostEqual(cell.volume(), 5.64 ** 3 / 2)
        self.assertEqual(len(positions), 1)
        self.assertTrue(is_niggli_reduced(cell.direct))

        positions, types = expand(225, *NACL)
        cob = np.array(((1, 0, 0), (1, 1, 0), (-1, 2, 1)))
        lattice = np.dot(cob.T, self.cubic)
        skewed, skewed_types = trim_atoms(positions, types, self.cubic, lattice)
        cell, reduced_positions, reduced_types = find_niggli(lattice, skewed, skewed_types)
        self.assertAlmostEqual(cell.volume(), 5.64 ** 3 / 4)
        self.assertEqual(len(reduced_positions), 2)
        np.testing.assert_allclose(cell.lengths, 5.64 / np.sqrt(2))
