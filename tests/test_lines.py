"""
Unit tests for the handling of free lines: projection along a line and
absorption of a line by a constraint.
"""
import unittest
from fractions import Fraction

import numpy as np

from dualdesc.polyhedron.extension import initial_state
from dualdesc.polyhedron.lines import absorb_line, fold_lines, line_project
from dualdesc.polyhedron.representation import Constraint, HRepresentation
from dualdesc.polyhedron.state import POINT, RAY, bit


def _vec(*values):
    return np.array([Fraction(v) for v in values], dtype=object)


class TestLineProject(unittest.TestCase):
    def setUp(self):
        # x + y <= 2
        self.h = Constraint(_vec(1, 1), Fraction(2))

    def test_point_lands_on_boundary(self):
        p = line_project(_vec(0, 0), POINT, _vec(1, 0), self.h, 0.)
        self.assertEqual(list(p), [2, 0])
        self.assertEqual(self.h.a @ p, self.h.beta)

    def test_ray_becomes_parallel(self):
        r = line_project(_vec(0, 3), RAY, _vec(1, 0), self.h, 0.)
        self.assertEqual(list(r), [-1, 1])
        self.assertEqual(self.h.a @ r, 0)

    def test_line_is_canonical(self):
        line = line_project(_vec(0, 1), None, _vec(1, 0), self.h, 0.)
        self.assertEqual(list(line), [1, -1])


class TestFoldLines(unittest.TestCase):
    def test_parallel_lines_kept(self):
        hrep = HRepresentation.from_arrays(A=[[0, 1]], b=[1])
        state = initial_state(hrep, 0.)
        absorbed = fold_lines(state, 0)
        self.assertIsNotNone(absorbed)
        self.assertEqual(list(absorbed), [0, -1])
        self.assertEqual(len(state.lines), 1)
        self.assertEqual(list(state.lines[0]), [1, 0])
        self.assertEqual(state.nlines[0], 1)
        self.assertIs(state.cutline[0], absorbed)

    def test_other_lines_projected(self):
        hrep = HRepresentation.from_arrays(A=[[1, 1]], b=[2])
        state = initial_state(hrep, 0.)
        absorbed = fold_lines(state, 0)
        self.assertEqual(list(absorbed), [-1, 0])
        self.assertEqual(len(state.lines), 1)
        self.assertEqual(list(state.lines[0]), [1, -1])

    def test_no_line_left(self):
        hrep = HRepresentation.from_arrays(A=[[-1, 0], [1, 0]], b=[0, 1])
        state = initial_state(hrep, 0.)
        state.lines = [_vec(0, 1)]
        self.assertIsNone(fold_lines(state, 0))
        self.assertIsNone(state.cutline[0])
        self.assertEqual(state.nlines[0], 1)


class TestAbsorbLine(unittest.TestCase):
    def test_halfspace_adds_ray(self):
        hrep = HRepresentation.from_arrays(A=[[-1, 0]], b=[0])
        state = initial_state(hrep, 0.)
        line = fold_lines(state, 0)
        absorb_line(state, 0, line)
        self.assertEqual(len(state.points), 1)
        self.assertEqual(list(state.points[0].coord), [0, 0])
        self.assertEqual(state.points[0].zero, bit(0))
        self.assertEqual(len(state.rays), 1)
        self.assertEqual(list(state.rays[0].coord), [1, 0])
        self.assertEqual(state.rays[0].zero, 0)
        self.assertIs(state.lineray[0], state.rays[0])

    def test_hyperplane_adds_no_ray(self):
        hrep = HRepresentation.from_arrays(A_eq=[[1, 1]], b_eq=[1])
        state = initial_state(hrep, 0.)
        line = fold_lines(state, 0)
        absorb_line(state, 0, line)
        self.assertEqual(state.rays, [])
        self.assertIsNone(state.lineray[0])
        self.assertEqual(list(state.points[0].coord), [1, 0])
        self.assertIn(state.points[0], state.pin[0])


if __name__ == '__main__':
    unittest.main()
