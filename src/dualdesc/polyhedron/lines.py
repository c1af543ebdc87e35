"""Free directions (lines) of the polyhedron during the fold.

A line that is not parallel to the boundary of the constraint at position
`k` is absorbed there: at most one line per constraint. Every other
non-parallel line is first projected along the absorbed one so that it
becomes parallel to the boundary, and survives.
"""
import logging
import numpy as np
from typing import Optional
from .numeric import isapproxzero, simplify_line, simplify_ray
from .representation import Constraint
from .state import DoubleDescriptionState, ElementKind, POINT, RAY, below


def _lambda_proj(x: np.ndarray, kind: Optional[ElementKind], line: np.ndarray, h: Constraint):
    # Point `x`: (x + l * line) . a == beta
    # Ray or line `x`: (x + l * line) . a == 0
    offset = h.beta if kind is POINT else 0
    return (offset - h.a @ x) / (h.a @ line)


def line_project(x: np.ndarray, kind: Optional[ElementKind], line: np.ndarray,
                 h: Constraint, tol: float) -> np.ndarray:
    """Shift `x` along `line` onto the boundary of `h`.

    `kind` is `POINT`, `RAY` or `None` for a line. Directions are
    canonicalized after the shift.
    """
    shifted = x + _lambda_proj(x, kind, line, h) * line
    if kind is POINT:
        return shifted
    if kind is RAY:
        return simplify_ray(shifted, tol)
    return simplify_line(shifted, tol)


def fold_lines(state: DoubleDescriptionState, k: int) -> Optional[np.ndarray]:
    """Update the free lines for the constraint at position `k`.

    Returns the absorbed line, oriented towards the feasible side of a
    halfspace, or `None` if every line is parallel to the boundary.
    """
    h = state.constraints[k]
    absorbed = None
    kept = []
    for line in state.lines:
        value = h.a @ line
        if isapproxzero(value, state.tol):
            kept.append(line)
        elif absorbed is None:
            absorbed = -line if value > 0 else line
        else:
            kept.append(line_project(line, None, absorbed, h, state.tol))
    state.lines = kept
    state.cutline[k] = absorbed
    state.nlines[k] = len(kept)
    return absorbed


def absorb_line(state: DoubleDescriptionState, k: int, line: np.ndarray):
    """Restrict the current polyhedron by `k` using the absorbed `line`.

    The polyhedron is the sum of its projection onto the boundary of `k`
    along `line` and the span of `line`; the halfspace keeps the half of the
    span pointing inside.
    """
    h = state.constraints[k]
    for el in state.elements():
        el.coord = line_project(el.coord, el.kind, line, h, state.tol)
        state.add_in(k, el)
    if not h.equality:
        # parallel to every earlier boundary since it was a free line there
        state.lineray[k] = state.add_element(RAY, simplify_ray(line, state.tol), below(k))
    logging.debug(f'Absorbed line {list(line)} at {h.name} {k}')
