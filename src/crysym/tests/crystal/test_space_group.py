import logging
import unittest
import numpy as np
from crysym.crystal import SymmetryOperation, SpaceGroup
from crysym.crystal.space_group import (
    default_hall_number,
    hall_numbers,
    hall_setting,
    match_space_group,
    origin_shift,
)

LOG = logging.getLogger(__name__)


class SpaceGroupTestCase(unittest.TestCase):
    sg_1 = SpaceGroup(1)
    sg_14 = SpaceGroup(14)
    sg_33 = SpaceGroup(33)
    sg_76 = SpaceGroup(76)
    sg_148 = SpaceGroup(148)
    sg_169 = SpaceGroup(169)
    sg_225 = SpaceGroup(225)

    def test_construction(self):
        for invalid_num in (-1, 0, 231, 1000):
            with self.assertRaises(ValueError):
                sg = SpaceGroup(invalid_num)

        for invalid_choice in ("a", 1, "b"):
            with self.assertRaises(ValueError):
                sg = SpaceGroup(148, choice=invalid_choice)

        with self.assertRaises(ValueError):
            SpaceGroup()
        with self.assertRaises(ValueError):
            SpaceGroup(hall_number=531)

        sg_148_h = SpaceGroup(148, choice="H")
        sg_148_r = SpaceGroup(148, choice="R")
        self.assertEqual(sg_148_h.centering, "R")
        self.assertEqual(sg_148_r.centering, "P")
        self.assertEqual(len(sg_148_h), 18)
        self.assertEqual(len(sg_148_r), 6)

    def test_crystal_system(self):
        sgs = (
            self.sg_1,
            self.sg_14,
            self.sg_33,
            self.sg_76,
            self.sg_148,
            self.sg_169,
            self.sg_225,
        )
        systems = (
            "triclinic",
            "monoclinic",
            "orthorhombic",
            "tetragonal",
            "trigonal",
            "hexagonal",
            "cubic",
        )
        for s, sys in zip(sgs, systems):
            self.assertEqual(s.crystal_system, sys)

    def test_lattice_type(self):
        sgs = (
            SpaceGroup(15),
            SpaceGroup(169),
            SpaceGroup(148),
            SpaceGroup(148, choice="R"),
        )
        latt = ("monoclinic", "hexagonal", "hexagonal", "rhombohedral")
        for s, sys in zip(sgs, latt):
            self.assertEqual(s.lattice_type, sys)

    def test_ordered_symmetry_operations(self):
        ordered = self.sg_225.ordered_symmetry_operations()
        self.assertEqual(ordered[0], SymmetryOperation.identity())
        self.assertEqual(len(ordered), 192)
        self.assertEqual(set(ordered), set(self.sg_225.symmetry_operations))

        # Test corrupted space group
        sg = SpaceGroup(2)
        sg.symmetry_operations = [SymmetryOperation.from_string_code("-x,+y,+z")]
        with self.assertRaises(ValueError):
            sg.ordered_symmetry_operations()

    def test_repr(self):
        self.assertEqual(repr(self.sg_1), "<SpaceGroup 1: P1>")
        self.assertEqual(repr(self.sg_14), "<SpaceGroup 14: P2_1/c>")

    def test_hash(self):
        self.assertEqual(
            set(
                (
                    SpaceGroup(148, choice="R"),
                    SpaceGroup(148),
                    SpaceGroup(148),
                    SpaceGroup(1),
                )
            ),
            set((SpaceGroup(148, choice="R"), SpaceGroup(148), SpaceGroup(1))),
        )

    def test_from_symmetry_operations(self):
        for i in range(1, 231):
            sg = SpaceGroup(i)
            self.assertEqual(
                SpaceGroup.from_symmetry_operations(sg.symmetry_operations), sg
            )
        with self.assertRaises(ValueError):
            SpaceGroup.from_symmetry_operations(
                [SymmetryOperation.from_string_code("-x,+y,+z")]
            )

    def test_apply_all_symops(self):
        codes, coords = self.sg_14.apply_all_symops(np.array([[0.1, 0.2, 0.3]]))
        self.assertEqual(coords.shape, (4, 3))
        self.assertEqual(codes[0], 16484)
        np.testing.assert_allclose(coords[0], (0.1, 0.2, 0.3))


class HallSettingTestCase(unittest.TestCase):
    def test_catalog(self):
        self.assertEqual(hall_numbers(1), [1])
        self.assertEqual(len(hall_numbers(14)), 9)
        self.assertEqual(sum(len(hall_numbers(i)) for i in range(1, 231)), 530)
        with self.assertRaises(ValueError):
            hall_numbers(231)
        with self.assertRaises(ValueError):
            hall_setting(0)

    def test_default_settings(self):
        self.assertEqual(default_hall_number(1), 1)
        self.assertEqual(default_hall_number(14), 81)
        self.assertEqual(default_hall_number(225), 523)
        # origin choice 2 for centrosymmetric groups with two origins
        for number in (48, 227, 228):
            hall = default_hall_number(number)
            self.assertEqual(hall_setting(hall).choice, "2")
            self.assertEqual(hall_setting(hall).number, number)

    def test_generators(self):
        for hall in (1, 2, 81, 400, 485, 501, 523):
            setting = hall_setting(hall)
            rotations = {tuple(op.rotation.flatten()) for op in setting.operations}
            generated = {tuple(np.eye(3, dtype=int).flatten())}
            frontier = list(generated)
            while frontier:
                new = []
                for r in frontier:
                    for g in setting.generators:
                        product = tuple(
                            np.dot(np.reshape(r, (3, 3)), g.rotation).flatten()
                        )
                        if product not in generated:
                            generated.add(product)
                            new.append(product)
                frontier = new
            self.assertEqual(generated, rotations, msg="Hall number {}".format(hall))

    def test_lattice_translations(self):
        self.assertEqual(len(hall_setting(523).lattice_translations), 4)
        self.assertEqual(hall_setting(523).centering, "F")
        np.testing.assert_allclose(hall_setting(1).lattice_translations, np.zeros((1, 3)))


class MatchSpaceGroupTestCase(unittest.TestCase):
    def check_match(self, number, shift):
        hall = default_hall_number(number)
        sg = SpaceGroup(hall_number=hall)
        shift = np.asarray(shift)
        # the operations of the group with its origin moved to -shift
        shifted = [
            SymmetryOperation(op.rotation, op.translation + np.dot(op.rotation, shift) - shift)
            for op in sg.symmetry_operations
        ]
        match = match_space_group(hall, sg.point_group.number, sg.centering, shifted)
        self.assertIsNotNone(match, msg="space group {}".format(number))
        found_shift, cob = match
        # applying the found origin shift recovers the database operations
        recovered = {
            SymmetryOperation(
                op.rotation, op.translation - np.dot(op.rotation, found_shift) + found_shift
            )
            for op in shifted
        }
        self.assertEqual(recovered, set(sg.symmetry_operations))
        return found_shift

    def test_origin_shift(self):
        for number in (2, 14, 62, 136, 166, 194, 205, 225, 227):
            self.check_match(number, (0.0, 0.0, 0.0))
            self.check_match(number, (0.25, 0.0, 0.5))

    def test_origin_shift_is_wrapped(self):
        # a shift just below zero comes back as zero, not as one
        for number in (160, 166, 221):
            found_shift = self.check_match(number, (-1e-9, -1e-9, 0.0))
            self.assertTrue(np.all(found_shift >= 0.0))
            self.assertTrue(np.all(found_shift < 1.0 - 1e-6), msg="shift {}".format(found_shift))

    def test_no_match(self):
        sg = SpaceGroup(14)
        ops = SpaceGroup(13).symmetry_operations
        self.assertIsNone(
            origin_shift(sg.hall_number, "P", np.eye(3, dtype=int), ops)
        )
        self.assertIsNone(match_space_group(sg.hall_number, 8, "P", ops))
