"""
Unit tests for the numeric primitives: type promotion, tolerance
predicates and canonical forms of directions.
"""
import unittest
from fractions import Fraction

import numpy as np
import torch

from dualdesc.polyhedron.numeric import (
    EPSILON,
    isapprox,
    isapproxzero,
    polytype,
    promote,
    promote_arrays,
    sign,
    simplify_line,
    simplify_ray,
)


class TestPromotion(unittest.TestCase):
    def test_polytype(self):
        self.assertEqual(polytype(np.int64), np.dtype(object))
        self.assertEqual(polytype(np.bool_), np.dtype(object))
        self.assertEqual(polytype(np.float32), np.dtype(np.float64))
        self.assertEqual(polytype(np.float16), np.dtype(np.float64))
        self.assertEqual(polytype(np.float64), np.dtype(np.float64))
        self.assertEqual(polytype(np.complex128), np.dtype(np.complex128))

    def test_integers_become_fractions(self):
        x = promote(np.array([[1, 2], [3, 4]]))
        self.assertEqual(x.dtype, object)
        self.assertTrue(all(isinstance(v, Fraction) for v in x.flat))
        self.assertEqual(x[1, 0], Fraction(3))

    def test_strings_become_fractions(self):
        x = promote(np.array(['1/3', '2']))
        self.assertEqual(list(x), [Fraction(1, 3), Fraction(2)])

    def test_float32_widened(self):
        x = promote(np.array([0.5, 0.25], dtype=np.float32))
        self.assertEqual(x.dtype, np.float64)

    def test_common_field(self):
        A, b = promote_arrays(np.array([[1, 0]]), np.array([0.5]))
        self.assertEqual(A.dtype, np.float64)
        self.assertEqual(b.dtype, np.float64)
        A, b = promote_arrays(np.array([[1, 0]]), np.array([2]))
        self.assertEqual(A.dtype, object)
        self.assertEqual(b[0], Fraction(2))

    def test_none_passed_through(self):
        A, b = promote_arrays(None, np.array([1]))
        self.assertIsNone(A)
        self.assertEqual(b[0], Fraction(1))

    def test_torch_tensors(self):
        A, = promote_arrays(torch.tensor([[1.0, 2.0]], dtype=torch.float32))
        self.assertIsInstance(A, np.ndarray)
        self.assertEqual(A.dtype, np.float64)
        B = promote(torch.tensor([3, 4]))
        self.assertEqual(list(B), [Fraction(3), Fraction(4)])


class TestPredicates(unittest.TestCase):
    def test_exact_values_compare_exactly(self):
        self.assertTrue(isapproxzero(Fraction(0)))
        self.assertFalse(isapproxzero(Fraction(1, 10 ** 12)))

    def test_floats_use_tolerance(self):
        self.assertTrue(isapproxzero(EPSILON / 2))
        self.assertFalse(isapproxzero(10 * EPSILON))
        self.assertTrue(isapprox(1.0, 1.0 + EPSILON / 10))
        self.assertTrue(isapproxzero(0.1, tol=0.5))

    def test_sign(self):
        self.assertEqual(sign(Fraction(-1, 3)), -1)
        self.assertEqual(sign(0.0), 0)
        self.assertEqual(sign(2.0), 1)
        self.assertEqual(sign(EPSILON / 2), 0)


class TestCanonicalForms(unittest.TestCase):
    def test_exact_ray_is_primitive(self):
        r = np.array([Fraction(1, 2), Fraction(-3, 4), Fraction(0)], dtype=object)
        self.assertEqual(list(simplify_ray(r)), [2, -3, 0])

    def test_exact_ray_keeps_direction(self):
        r = np.array([Fraction(-6), Fraction(-4)], dtype=object)
        self.assertEqual(list(simplify_ray(r)), [-3, -2])

    def test_float_ray_scaled_by_max_entry(self):
        r = simplify_ray(np.array([2.0, -4.0]))
        np.testing.assert_allclose(r, [0.5, -1.0])

    def test_zero_ray_unchanged(self):
        r = np.array([Fraction(0), Fraction(0)], dtype=object)
        self.assertEqual(list(simplify_ray(r)), [0, 0])

    def test_line_sign_fixed(self):
        line = np.array([Fraction(0), Fraction(-2), Fraction(4)], dtype=object)
        self.assertEqual(list(simplify_line(line)), [0, 1, -2])
        np.testing.assert_allclose(simplify_line(np.array([-1.0, 1.0])), [1.0, -1.0])


if __name__ == '__main__':
    unittest.main()
