"""H- and V-representations of polyhedra.
"""
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional
from .numeric import (
    EPSILON,
    as_array,
    empty_matrix,
    is_exact,
    isapproxzero,
    promote_arrays,
    simplify_ray,
)


class InconsistentVRepresentationError(ValueError):
    pass


def _as_matrix(A, n_features: Optional[int] = None) -> np.ndarray:
    A = as_array(A)
    if A.size == 0 and n_features is not None:
        return A.reshape(0, n_features)
    if A.ndim != 2:
        raise ValueError(f'Expected a 2D array, got shape {A.shape}')
    return A


@dataclass
class LinearEqualityConstraints:
    """A x = b.
    """
    A: np.ndarray
    b: np.ndarray

    def __post_init__(self):
        assert self.A.ndim == 2
        assert self.b.ndim == 1
        assert self.A.shape[0] == self.b.shape[0], \
               'Number of rows in A and b should match'

    @property
    def n_features(self) -> int:
        return self.A.shape[1]

    @property
    def n_constraints(self) -> int:
        return self.A.shape[0]

    def copy(self) -> 'LinearEqualityConstraints':
        return LinearEqualityConstraints(self.A.copy(), self.b.copy())

    def append(self, other: 'LinearEqualityConstraints') -> 'LinearEqualityConstraints':
        assert self.n_features == other.n_features, \
               'Constraints dimensions (n_features) should match'
        return LinearEqualityConstraints(
            np.concatenate((self.A, other.A), axis=0),
            np.concatenate((self.b, other.b), axis=0),
        )

    def is_inside(self, xs: np.ndarray, eps: float = EPSILON) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        if xs.ndim == 1:
            xs = xs[np.newaxis]
        A = self.A.astype(np.float64)
        b = self.b.astype(np.float64)[:, np.newaxis]
        return np.all(np.abs(A @ xs.T - b) <= eps, axis=0)


@dataclass
class LinearConstraints:
    """A x <= b.
    """
    A: np.ndarray
    b: np.ndarray

    def __post_init__(self):
        assert self.A.ndim == 2
        assert self.b.ndim == 1
        assert self.A.shape[0] == self.b.shape[0], \
               'Number of rows in A and b should match'

    @property
    def n_features(self) -> int:
        return self.A.shape[1]

    @property
    def n_constraints(self) -> int:
        return self.A.shape[0]

    def copy(self) -> 'LinearConstraints':
        return LinearConstraints(self.A.copy(), self.b.copy())

    def append(self, other: 'LinearConstraints') -> 'LinearConstraints':
        assert self.n_features == other.n_features, \
               'Constraints dimensions (n_features) should match'
        return LinearConstraints(
            np.concatenate((self.A, other.A), axis=0),
            np.concatenate((self.b, other.b), axis=0),
        )

    def is_inside(self, xs: np.ndarray, eps: float = EPSILON) -> np.ndarray:
        xs = np.asarray(xs, dtype=np.float64)
        if xs.ndim == 1:
            xs = xs[np.newaxis]
        A = self.A.astype(np.float64)
        b = self.b.astype(np.float64)[:, np.newaxis]
        return np.all(A @ xs.T - b <= eps, axis=0)


@dataclass
class Constraint:
    """Halfspace `a x <= beta` or, with `equality`, hyperplane `a x = beta`."""
    a: np.ndarray
    beta: object
    equality: bool = False

    @property
    def name(self) -> str:
        return 'hyperplane' if self.equality else 'halfspace'

    def __repr__(self):
        op = '=' if self.equality else '<='
        return f'{list(self.a)} x {op} {self.beta}'


@dataclass
class HRepresentation:
    """Intersection of the hyperplanes `A_eq x = b_eq` and the halfspaces `A x <= b`.

    Constraint positions (used by zero-sets) enumerate the hyperplanes
    first and the halfspaces after them.
    """
    halfspaces: LinearConstraints
    hyperplanes: Optional[LinearEqualityConstraints] = None

    def __post_init__(self):
        if self.hyperplanes is not None and \
           self.hyperplanes.n_features != self.halfspaces.n_features:
            raise ValueError(
                'Hyperplanes and halfspaces should have the same dimension: '
                f'{self.hyperplanes.n_features} != {self.halfspaces.n_features}'
            )

    @classmethod
    def from_arrays(cls, A=None, b=None, A_eq=None, b_eq=None,
                    n_features: Optional[int] = None) -> 'HRepresentation':
        """Build a representation from raw arrays, promoting them to one field."""
        if n_features is None:
            for M in (A, A_eq):
                if M is not None and as_array(M).ndim == 2:
                    n_features = as_array(M).shape[1]
                    break
        if n_features is None:
            raise ValueError('Cannot infer the dimension of an empty H-representation')
        if A is None:
            A, b = np.empty((0, n_features), dtype=np.int64), np.empty(0, dtype=np.int64)
        if A_eq is None:
            A_eq, b_eq = np.empty((0, n_features), dtype=np.int64), np.empty(0, dtype=np.int64)
        A, b, A_eq, b_eq = promote_arrays(
            _as_matrix(A, n_features), as_array(b).reshape(-1),
            _as_matrix(A_eq, n_features), as_array(b_eq).reshape(-1),
        )
        if A.shape[1] != n_features or A_eq.shape[1] != n_features:
            raise ValueError(f'All constraints should have dimension {n_features}')
        return cls(
            halfspaces=LinearConstraints(A, b),
            hyperplanes=LinearEqualityConstraints(A_eq, b_eq),
        )

    @property
    def n_features(self) -> int:
        return self.halfspaces.n_features

    @property
    def n_hyperplanes(self) -> int:
        return 0 if self.hyperplanes is None else self.hyperplanes.n_constraints

    @property
    def n_halfspaces(self) -> int:
        return self.halfspaces.n_constraints

    @property
    def n_constraints(self) -> int:
        return self.n_hyperplanes + self.n_halfspaces

    @property
    def exact(self) -> bool:
        return is_exact(self.halfspaces.A)

    def constraints(self) -> List[Constraint]:
        result = []
        if self.hyperplanes is not None:
            for a, beta in zip(self.hyperplanes.A, self.hyperplanes.b):
                result.append(Constraint(a, beta, equality=True))
        for a, beta in zip(self.halfspaces.A, self.halfspaces.b):
            result.append(Constraint(a, beta))
        return result

    def promote(self) -> 'HRepresentation':
        """Copy with every array in the field used for exact affine combinations."""
        hyperplanes = self.hyperplanes
        return HRepresentation.from_arrays(
            self.halfspaces.A, self.halfspaces.b,
            None if hyperplanes is None else hyperplanes.A,
            None if hyperplanes is None else hyperplanes.b,
            n_features=self.n_features,
        )

    def copy(self) -> 'HRepresentation':
        return HRepresentation(
            self.halfspaces.copy(),
            None if self.hyperplanes is None else self.hyperplanes.copy(),
        )

    def append(self, other: 'HRepresentation') -> 'HRepresentation':
        if self.hyperplanes is None:
            hyperplanes = other.hyperplanes
        elif other.hyperplanes is None:
            hyperplanes = self.hyperplanes
        else:
            hyperplanes = self.hyperplanes.append(other.hyperplanes)
        return HRepresentation(self.halfspaces.append(other.halfspaces), hyperplanes)

    def is_inside(self, xs: np.ndarray, eps: float = EPSILON) -> np.ndarray:
        mask = self.halfspaces.is_inside(xs, eps)
        if self.hyperplanes is not None:
            mask = mask & self.hyperplanes.is_inside(xs, eps)
        return mask

    def remove_duplicates(self, tol: float = EPSILON) -> 'HRepresentation':
        """Drop rows that are positive multiples of an earlier row."""
        def _unique(A, b, equality):
            seen = []
            keep = []
            for i, (a, beta) in enumerate(zip(A, b)):
                row = simplify_ray(np.append(a, beta), tol)
                candidates = [row, -row] if equality else [row]
                if any(np.all([isapproxzero(x - y, tol) for x, y in zip(c, s)])
                       for c in candidates for s in seen):
                    continue
                seen.append(row)
                keep.append(i)
            return A[keep], b[keep]

        A, b = _unique(self.halfspaces.A, self.halfspaces.b, False)
        hyperplanes = None
        if self.hyperplanes is not None:
            A_eq, b_eq = _unique(self.hyperplanes.A, self.hyperplanes.b, True)
            hyperplanes = LinearEqualityConstraints(A_eq, b_eq)
        return HRepresentation(LinearConstraints(A, b), hyperplanes)

    def __repr__(self):
        return (f'HRepresentation({self.n_hyperplanes} hyperplanes, '
                f'{self.n_halfspaces} halfspaces in dimension {self.n_features})')


@dataclass
class VRepresentation:
    """Convex hull of `points` plus the cone of `rays` plus the span of `lines`.

    Each array has shape (n_elements, n_features).
    """
    points: np.ndarray
    rays: np.ndarray
    lines: np.ndarray = field(default=None)

    def __post_init__(self):
        if self.lines is None:
            self.lines = empty_matrix(self.points.shape[1], is_exact(self.points))
        assert self.points.ndim == 2 and self.rays.ndim == 2 and self.lines.ndim == 2
        if not (self.points.shape[1] == self.rays.shape[1] == self.lines.shape[1]):
            raise ValueError(
                'Points, rays and lines should have the same dimension: '
                f'{self.points.shape[1]}, {self.rays.shape[1]}, {self.lines.shape[1]}'
            )

    @classmethod
    def from_arrays(cls, points=None, rays=None, lines=None,
                    n_features: Optional[int] = None) -> 'VRepresentation':
        if n_features is None:
            for M in (points, rays, lines):
                if M is not None and as_array(M).ndim == 2:
                    n_features = as_array(M).shape[1]
                    break
        if n_features is None:
            raise ValueError('Cannot infer the dimension of an empty V-representation')
        arrays = [
            np.empty((0, n_features), dtype=np.int64) if M is None else _as_matrix(M, n_features)
            for M in (points, rays, lines)
        ]
        points, rays, lines = promote_arrays(*arrays)
        return cls(points, rays, lines)

    @property
    def n_features(self) -> int:
        return self.points.shape[1]

    @property
    def npoints(self) -> int:
        return self.points.shape[0]

    @property
    def nrays(self) -> int:
        return self.rays.shape[0]

    @property
    def nlines(self) -> int:
        return self.lines.shape[0]

    @property
    def exact(self) -> bool:
        return is_exact(self.points)

    def promote(self) -> 'VRepresentation':
        return VRepresentation.from_arrays(self.points, self.rays, self.lines,
                                           n_features=self.n_features)

    def is_empty(self) -> bool:
        return self.npoints == 0

    def summary(self) -> str:
        return f'{self.npoints} points, {self.nrays} rays and {self.nlines} lines'

    def check_consistency(self):
        """A nonempty polyhedron needs at least one point to anchor its rays and lines."""
        if self.npoints == 0:
            raise InconsistentVRepresentationError(
                f'Inconsistent V-representation: it has no points ({self.summary()})'
            )

    def __repr__(self):
        return f'VRepresentation({self.summary()} in dimension {self.n_features})'
