import logging
import unittest
import numpy as np
from crysym.crystal import SymmetryOperation
from crysym.crystal.symmetry_operation import (
    add_centering_operations,
    centering_translations,
    decode_symm_str,
    encode_symm_int,
    wrap_to_unit_cell,
)

LOG = logging.getLogger(__name__)


class SymmetryOperationTestCase(unittest.TestCase):
    identity = SymmetryOperation.from_integer_code(16484)

    def test_seitz(self):
        s = self.identity.seitz_matrix
        expected = np.eye(4)
        np.testing.assert_allclose(s, expected)

    def test_cif_form(self):
        self.assertEqual(self.identity.cif_form, "+x,+y,+z")
        inv = self.identity.inverted()
        self.assertEqual(inv.cif_form, "-x,-y,-z")
        inv += (0.5, 0.0, 0.0)
        self.assertEqual(inv.cif_form, "1/2-x,-y,-z")
        inv -= (0.5, 0.0, 0.0)
        self.assertEqual(inv.cif_form, "-x,-y,-z")

    def test_apply(self):
        pts_seitz = np.random.rand(100, 4)
        pts_seitz[:, 3] = 1
        np.testing.assert_allclose(pts_seitz, self.identity.apply(pts_seitz))
        screw = SymmetryOperation.from_string_code("-x,1/2+y,1/2-z")
        pts = np.random.rand(10, 3)
        expected = np.c_[-pts[:, 0], pts[:, 1] + 0.5, 0.5 - pts[:, 2]]
        np.testing.assert_allclose(screw(pts), expected)

    def test_ordering(self):
        inv = self.identity.inverted()
        self.assertTrue(inv < self.identity)
        self.assertTrue(self.identity > inv)

    def test_repr(self):
        self.assertEqual(repr(self.identity), "<SymmetryOperation: +x,+y,+z>")

    def test_translation_wrapped(self):
        op = SymmetryOperation(np.eye(3), (-0.25, 1.5, 2.0))
        np.testing.assert_allclose(op.translation, (0.75, 0.5, 0.0))
        self.assertEqual(op.rotation.dtype.kind, "i")
        np.testing.assert_allclose(wrap_to_unit_cell([-1e-3, 1.0, 3.25]), (0.999, 0.0, 0.25))

    def test_composition_and_inverse(self):
        screw = SymmetryOperation.from_string_code("-x,1/2+y,1/2-z")
        self.assertTrue((screw * screw).is_identity())
        fourfold = SymmetryOperation.from_string_code("-y,x,1/4+z")
        product = fourfold * fourfold
        self.assertEqual(product.cif_form, "-x,-y,1/2+z")
        self.assertTrue((fourfold * fourfold.inverse()).is_identity())
        self.assertTrue((fourfold.inverse() * fourfold).is_identity())
        self.assertEqual(SymmetryOperation.identity(), self.identity)
        self.assertEqual(len({fourfold, fourfold.inverse().inverse(), screw}), 2)

    def test_changed_basis(self):
        op = SymmetryOperation.from_string_code("-x,1/2+y,-z")
        doubled = np.diag((1, 2, 1))
        changed = op.changed_basis(doubled)
        self.assertEqual(changed.cif_form, "-x,1/4+y,-z")
        back = changed.changed_basis(np.linalg.inv(doubled))
        self.assertEqual(back, op)

    def test_string_codes(self):
        rotation, translation = decode_symm_str("1/2 - x, y - 0.25, z+1")
        np.testing.assert_equal(rotation, np.diag((-1, 1, 1)))
        np.testing.assert_allclose(translation, (0.5, 0.75, 0.0))
        with self.assertRaises(ValueError):
            decode_symm_str("x,y")
        op = SymmetryOperation.from_string_code("1/2-x,1/2+y,-z")
        self.assertEqual(
            SymmetryOperation.from_integer_code(op.integer_code).cif_form,
            "1/2-x,1/2+y,-z",
        )
        self.assertEqual(encode_symm_int(np.eye(3), (1.0, 0.0, 0.0)), 16484)

    def test_centering(self):
        self.assertEqual(len(centering_translations("P")), 1)
        np.testing.assert_allclose(
            centering_translations("I"), ((0, 0, 0), (0.5, 0.5, 0.5))
        )
        np.testing.assert_allclose(
            centering_translations("R")[1], (2 / 3, 1 / 3, 1 / 3)
        )
        self.assertEqual(len(centering_translations("F")), 4)
        with self.assertRaises(ValueError):
            centering_translations("Q")

        ops = [self.identity, self.identity.inverted()]
        expanded = add_centering_operations(ops, "C")
        self.assertEqual(len(expanded), 4)
        self.assertIn(SymmetryOperation.from_string_code("1/2+x,1/2+y,z"), expanded)
        self.assertIn(SymmetryOperation.from_string_code("1/2-x,1/2-y,-z"), expanded)
