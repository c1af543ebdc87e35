import logging
import numpy as np
from fractions import Fraction
from typing import Tuple, Union
from .extension import DoubleDescription
from .numeric import EPSILON, isapproxzero, stack, zeros
from .representation import (
    HRepresentation,
    LinearConstraints,
    LinearEqualityConstraints,
    VRepresentation,
)


def doubledescription(rep: Union[HRepresentation, VRepresentation],
                      tol: float = EPSILON) -> Union[VRepresentation, HRepresentation]:
    """Computes the dual description of `rep` with the Double Description method.

    An H-representation gives its V-representation and a V-representation
    gives an H-representation.

    [1] Motzkin, T. S., Raiffa, H., Thompson, G. L. and Thrall, R. M.
    The double description method.
    Contribution to the Theory of Games, Princeton University Press, 1953.

    [2] Fukuda, K. and Prodon, A.
    Double description method revisited.
    Combinatorics and computer science, Springer, 1996, 91-111.
    """
    if isinstance(rep, HRepresentation):
        return DoubleDescription(rep, tol=tol).run()
    if isinstance(rep, VRepresentation):
        return _vrep_to_hrep(rep, tol=tol)
    raise TypeError(f'Expected an H- or V-representation, got {type(rep).__name__}')


convert = doubledescription


def _lift(vrep: VRepresentation) -> Tuple[np.ndarray, np.ndarray]:
    """Homogeneous rows `[1 | p]`, `[0 | r]` and `[0 | l]`."""
    exact = vrep.exact
    one = np.array([Fraction(1)], dtype=object) if exact else np.ones(1)
    zero = zeros(1, exact)
    R = [np.concatenate((one, p)) for p in vrep.points]
    R += [np.concatenate((zero, r)) for r in vrep.rays]
    L = [np.concatenate((zero, l)) for l in vrep.lines]
    d = vrep.n_features + 1
    return stack(R, d, exact), stack(L, d, exact)


def _vrep_to_hrep(vrep: VRepresentation, tol: float = EPSILON) -> HRepresentation:
    """The valid inequalities `y0 + y x >= 0` form the cone
    `{(y0, y) : [1 | p] (y0, y) >= 0, [0 | r] (y0, y) >= 0, [0 | l] (y0, y) = 0}`;
    its rays give the halfspaces and its lines the hyperplanes.
    """
    vrep.check_consistency()
    vrep = vrep.promote()
    d = vrep.n_features
    exact = vrep.exact
    R, L = _lift(vrep)
    dual = HRepresentation(
        halfspaces=LinearConstraints(-R, zeros(R.shape[0], exact)),
        hyperplanes=LinearEqualityConstraints(-L, zeros(L.shape[0], exact)),
    )
    cone = DoubleDescription(dual, tol=tol).run()

    A, b = [], []
    for y in cone.rays:
        # `y0 >= 0` holds everywhere
        if all(isapproxzero(v, tol) for v in y[1:]):
            continue
        A.append(-y[1:])
        b.append(y[0])
    A_eq = [-y[1:] for y in cone.lines]
    b_eq = [y[0] for y in cone.lines]
    logging.info(f'Double description: {len(A_eq)} hyperplanes and {len(A)} halfspaces')
    return HRepresentation(
        halfspaces=LinearConstraints(stack(A, d, exact), _vector(b, exact)),
        hyperplanes=LinearEqualityConstraints(stack(A_eq, d, exact), _vector(b_eq, exact)),
    )


def _vector(values, exact: bool) -> np.ndarray:
    return np.array(list(values), dtype=object if exact else np.float64)


def h_to_v_representation(A, b, A_eq=None, b_eq=None,
                           tol: float = EPSILON) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Converts Halfspace representation to Vertex representation.

    The polyhedron is `{x : A x <= b, A_eq x = b_eq}`.

    Returns:
        Tuple (points, rays, lines).

    """
    hrep = HRepresentation.from_arrays(A, b, A_eq, b_eq)
    vrep = doubledescription(hrep, tol=tol)
    return vrep.points, vrep.rays, vrep.lines


def v_to_h_representation(vertices, rays=None, lines=None,
                          tol: float = EPSILON) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Converts Vertex representation to Halfspace representation.

    Returns:
        Tuple (A, b, A_eq, b_eq) with the polyhedron `{x : A x <= b, A_eq x = b_eq}`.

    """
    vrep = VRepresentation.from_arrays(vertices, rays, lines)
    hrep = doubledescription(vrep, tol=tol)
    return hrep.halfspaces.A, hrep.halfspaces.b, hrep.hyperplanes.A, hrep.hyperplanes.b
