"""
Unit tests for the incremental state: zero-set bitsets, element
bookkeeping, cutoff buckets and state dumps.
"""
import unittest
from fractions import Fraction

import numpy as np

from dualdesc.polyhedron.representation import HRepresentation
from dualdesc.polyhedron.state import (
    ACTIVE,
    POINT,
    RAY,
    CutoffRef,
    DoubleDescriptionState,
    below,
    bit,
    count,
    positions,
)


def _vec(*values):
    return np.array([Fraction(v) for v in values], dtype=object)


def _square_state():
    hrep = HRepresentation.from_arrays(
        A=[[-1, 0], [0, -1], [1, 0], [0, 1]],
        b=[0, 0, 1, 1],
    )
    return DoubleDescriptionState(2, hrep.constraints(), 0.)


class TestZeroSets(unittest.TestCase):
    def test_bits(self):
        self.assertEqual(bit(3), 8)
        self.assertEqual(below(0), 0)
        self.assertEqual(below(3), 0b111)

    def test_positions_and_count(self):
        zero = bit(0) | bit(2) | bit(5)
        self.assertEqual(positions(zero), [0, 2, 5])
        self.assertEqual(count(zero), 3)
        self.assertEqual(positions(0), [])
        self.assertEqual(count(0), 0)


class TestState(unittest.TestCase):
    def test_initial_buckets(self):
        state = _square_state()
        self.assertEqual(state.n_constraints, 4)
        self.assertEqual(len(state.cutpoints), 4)
        self.assertEqual(state.nlines, [0, 0, 0, 0])
        self.assertTrue(all(state.cut_nothing(k) for k in range(4)))
        self.assertEqual(state.elements(), [])

    def test_add_element_registers_in_lists(self):
        state = _square_state()
        p = state.add_element(POINT, _vec(0, 0), bit(0) | bit(1))
        r = state.add_element(RAY, _vec(1, 0), bit(1))
        self.assertEqual(p.zero, 0b11)
        self.assertEqual(p.cutoff, ACTIVE)
        self.assertIn(p, state.pin[0])
        self.assertIn(p, state.pin[1])
        self.assertIn(r, state.rin[1])
        self.assertEqual(state.rin[0], [])
        self.assertEqual(state.elements(), [p, r])

    def test_archive_and_refs(self):
        state = _square_state()
        p0 = state.add_element(POINT, _vec(0, 0))
        p1 = state.add_element(POINT, _vec(2, 0))
        self.assertEqual(state.ref(p1), CutoffRef(POINT, ACTIVE, 1))

        state.archive(2, p1)
        state.points = [el for el in state.points if el.cutoff == ACTIVE]
        ref = state.ref(p1)
        self.assertEqual(ref, CutoffRef(POINT, 2, 0))
        self.assertIs(state.bucket(POINT, 2)[ref.index], p1)
        self.assertIs(state.bucket(POINT, ACTIVE)[0], p0)
        self.assertFalse(state.cut_nothing(2))
        self.assertEqual(repr(ref), 'p[2, 0]')
        self.assertEqual(repr(CutoffRef(RAY, ACTIVE, 3)), 'r[active, 3]')

    def test_release(self):
        state = _square_state()
        p = state.add_element(POINT, _vec(2, 0), bit(1))
        state.archive(2, p)
        state.release(2)
        state.release(1)
        self.assertTrue(state.cut_nothing(2))
        self.assertEqual(state.pin[1], [])
        self.assertTrue(state.released[1] and state.released[2])
        self.assertFalse(state.released[0])

    def test_dumps(self):
        state = _square_state()
        p = state.add_element(POINT, _vec(0, 0), bit(0))
        state.add_element(RAY, _vec(0, 1), bit(0))
        state.archive(3, p)
        self.assertEqual(state.summary(), '1 points, 1 rays and 0 lines')
        text = state.describe()
        self.assertIn('DoubleDescriptionState in 2 dimension', text)
        self.assertIn('Halfspace 3', text)
        self.assertIn('Cut point 0', text)
        self.assertIn('Rays in: [r[active, 0]]', text)


if __name__ == '__main__':
    unittest.main()
