"""Adjacency test and combination of elements.

Two elements on opposite sides of a constraint produce a new boundary
element only if they span an edge of the current polyhedron. The test is
combinatorial: it only looks at zero-sets, never at ranks.
"""
import logging
from .numeric import sign, simplify_ray
from .state import DoubleDescriptionState, Element, POINT, RAY, below, bit, count


class InvariantViolationError(Exception):
    pass


def is_adjacent(state: DoubleDescriptionState, k: int, el1: Element, el2: Element,
                elements) -> bool:
    """Check whether `el1` and `el2` span an edge of the polyhedron folded up to `k`.

    `elements` is the V-representation of that polyhedron. The cardinality
    test `z + l + 1 >= d` (`z + l + 2 >= d` for two rays) is a necessary
    condition; an edge is confirmed when no other element lies on every
    boundary shared by the pair.
    """
    common = el1.zero & el2.zero & below(k)
    both_rays = el1.kind is RAY and el2.kind is RAY
    needed = state.fulldim - (2 if both_rays else 1)
    if count(common) + state.nlines[k] < needed:
        return False
    for el in elements:
        if el is el1 or el is el2:
            continue
        # points are never on the face at infinity spanned by two rays
        if both_rays and el.kind is POINT:
            continue
        if el.zero & common == common:
            return False
    return True


def _combine_points(beta, p1, value1, p2, value2):
    lam = (value2 - beta) / (value2 - value1)
    return lam * p1 + (1 - lam) * p2


def _combine_point_ray(beta, p, pvalue, r, rvalue):
    lam = (beta - pvalue) / rvalue
    return p + lam * r


def _combine_rays(r1, value1, r2, value2, tol):
    # dividing keeps coefficients from growing over many folds
    return simplify_ray((value2 * r1 - value1 * r2) / (value2 - value1), tol)


def combine(state: DoubleDescriptionState, k: int, el1: Element, el2: Element) -> Element:
    """Intersect the edge spanned by `el1` and `el2` with the boundary of `k`.

    The new element is added to the active elements; its zero-set is the
    one shared by its parents plus `k`.
    """
    h = state.constraints[k]
    value1 = h.a @ el1.coord
    value2 = h.a @ el2.coord
    slack1 = value1 - h.beta if el1.kind is POINT else value1
    slack2 = value2 - h.beta if el2.kind is POINT else value2
    if sign(slack1, state.tol) * sign(slack2, state.tol) != -1:
        logging.error(state.describe())
        raise InvariantViolationError(
            f'Cannot combine {state.ref(el1)} and {state.ref(el2)} on {h.name} {k}: '
            f'slacks {slack1} and {slack2} are not of opposite signs'
        )

    kinds = (el1.kind, el2.kind)
    if kinds == (POINT, POINT):
        kind, coord = POINT, _combine_points(h.beta, el1.coord, value1, el2.coord, value2)
    elif kinds == (POINT, RAY):
        kind, coord = POINT, _combine_point_ray(h.beta, el1.coord, value1, el2.coord, value2)
    elif kinds == (RAY, POINT):
        kind, coord = POINT, _combine_point_ray(h.beta, el2.coord, value2, el1.coord, value1)
    else:
        kind, coord = RAY, _combine_rays(el1.coord, value1, el2.coord, value2, state.tol)

    zero = (el1.zero & el2.zero & below(k)) | bit(k)
    return state.add_element(kind, coord, zero)
