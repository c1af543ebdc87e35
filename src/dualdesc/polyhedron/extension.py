"""Incremental extension: fold the constraints one by one into the state.

After the fold of the constraint at position `k`, the active points, rays
and lines of the state are the V-representation of the intersection of the
constraints `0..k`. Hyperplanes come first (see
`HRepresentation.constraints`).
"""
import logging
from typing import Dict, FrozenSet, List
from .adjacency import combine, is_adjacent
from .lines import absorb_line, fold_lines
from .numeric import EPSILON, sign, stack, unit, zeros
from .redundancy import release_constraint, remove_empty
from .representation import HRepresentation, VRepresentation
from .state import ACTIVE, DoubleDescriptionState, Element, POINT, positions


def slack(state: DoubleDescriptionState, k: int, el: Element):
    """`a x - beta` for a point, `a r` for a ray."""
    h = state.constraints[k]
    value = h.a @ el.coord
    return value - h.beta if el.kind is POINT else value


def initial_state(hrep: HRepresentation, tol: float = EPSILON) -> DoubleDescriptionState:
    """State describing the whole space: the origin and one line per coordinate."""
    d = hrep.n_features
    exact = hrep.exact
    state = DoubleDescriptionState(d, hrep.constraints(), tol)
    state.add_element(POINT, zeros(d, exact))
    state.lines = [unit(d, i, exact) for i in range(d)]
    return state


def fold(state: DoubleDescriptionState, k: int):
    """Intersect the current polyhedron with the constraint at position `k`."""
    line = fold_lines(state, k)
    if line is not None:
        absorb_line(state, k, line)
    else:
        _cut(state, k)
    release_constraint(state, k)


def _cut(state: DoubleDescriptionState, k: int):
    """Archive the elements excluded by `k` and combine the adjacent pairs across it."""
    h = state.constraints[k]
    elements = state.elements()
    negative, positive = [], []
    for el in elements:
        s = sign(slack(state, k, el), state.tol)
        if s == 0:
            state.add_in(k, el)
        elif s < 0:
            negative.append(el)
        else:
            positive.append(el)

    # adjacency is decided on the polyhedron before the fold
    pairs = [
        (el1, el2)
        for el1 in negative for el2 in positive
        if is_adjacent(state, k, el1, el2, elements)
    ]
    for el in positive:
        state.archive(k, el)
    if h.equality:
        for el in negative:
            state.archive(k, el)
    for el1, el2 in pairs:
        combine(state, k, el1, el2)

    state.points = [el for el in state.points if el.cutoff == ACTIVE]
    state.rays = [el for el in state.rays if el.cutoff == ACTIVE]


class DoubleDescription:
    """Double description conversion of an H-representation.

    After `run`, `point_zero_sets` and `ray_zero_sets` hold, for every
    returned point and ray, the positions of the constraints it lies on
    (redundant positions excluded) and `redundant` the positions of the
    constraints that excluded nothing.
    """
    def __init__(self, hrep: HRepresentation, tol: float = EPSILON):
        self.hrep = hrep.promote()
        self.tol = tol
        self.state = None
        self.point_zero_sets: List[FrozenSet[int]] = []
        self.ray_zero_sets: List[FrozenSet[int]] = []
        self.redundant: List[int] = []

    def run(self) -> VRepresentation:
        hrep = self.hrep
        state = initial_state(hrep, self.tol)
        self.state = state
        n = state.n_constraints
        for k in range(n):
            h = state.constraints[k]
            if h.equality:
                logging.debug(f'Intersecting hyperplane {k + 1}/{hrep.n_hyperplanes}')
            else:
                logging.debug(f'Intersecting halfspace {k + 1 - hrep.n_hyperplanes}/{hrep.n_halfspaces}')
            fold(state, k)
            logging.debug(f'After intersection: {state.summary()}')
        remove_empty(state)

        self.redundant = sorted(state.redundant)
        self.point_zero_sets = [frozenset(positions(el.zero)) for el in state.points]
        self.ray_zero_sets = [frozenset(positions(el.zero)) for el in state.rays]
        d, exact = state.fulldim, hrep.exact
        vrep = VRepresentation(
            points=stack([el.coord for el in state.points], d, exact),
            rays=stack([el.coord for el in state.rays], d, exact),
            lines=stack(state.lines, d, exact),
        )
        logging.info(f'Double description: {vrep.summary()}')
        return vrep

    def incidence(self) -> Dict[str, List[FrozenSet[int]]]:
        return {'points': self.point_zero_sets, 'rays': self.ray_zero_sets}
