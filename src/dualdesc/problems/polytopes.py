import numpy as np
from typing import Literal, Optional
from .base import AbstractConstraintsGenerator, CannotGenerateProblemError
from ..polyhedron.check import check_h_nonempty
from ..polyhedron.representation import HRepresentation
from ..utils import get_rng


class PolytopeGenerator(AbstractConstraintsGenerator):
    """H-representations of test polyhedra `A x <= b`.

    `box` and `simplex` are exact (integer data), the random methods
    produce floating point systems.
    """
    def generate(self, n_features: int, n_inequalities: int = 0, n_attempts: int = 1000,
                 method: Literal['box', 'simplex', 'iterative_bounded', 'bruteforce'] = 'iterative_bounded',
                 zero_center: bool = False,
                 bounding_box: Optional[float] = None) -> HRepresentation:
        if method == 'box':
            eye = np.eye(n_features, dtype=np.int64)
            A = np.concatenate((eye, -eye), axis=0)
            b = np.ones(2 * n_features, dtype=np.int64)
            return HRepresentation.from_arrays(A, b)
        elif method == 'simplex':
            A = np.concatenate((-np.eye(n_features, dtype=np.int64),
                                np.ones((1, n_features), dtype=np.int64)), axis=0)
            b = np.concatenate((np.zeros(n_features, dtype=np.int64), [1]))
            return HRepresentation.from_arrays(A, b)

        rng = get_rng(self)
        shape = (n_inequalities, n_features)
        if method == 'bruteforce':
            for i in range(n_attempts):
                A = rng.uniform(size=shape)
                b = rng.uniform(size=n_inequalities)
                hrep = HRepresentation.from_arrays(A, b)
                if check_h_nonempty(hrep):
                    return hrep
            raise CannotGenerateProblemError(f"Cannot generate at least one good system of shape {shape}")
        elif method == 'iterative_bounded':
            center = rng.normal(size=(n_features,))
            if zero_center:
                center *= 0.0
            directions = rng.normal(size=shape)
            lengths = np.linalg.norm(directions, axis=1)
            A = directions / lengths[:, np.newaxis]
            # halfspaces tangent to the unit sphere around `center`
            points = center[np.newaxis] + A
            b = np.einsum('if,if->i', A, points)
            if bounding_box is not None:
                eye = np.eye(n_features)
                A = np.concatenate((A, eye, -eye), axis=0)
                b = np.concatenate((b, center + bounding_box, -center + bounding_box))
            hrep = HRepresentation.from_arrays(A, b)
            assert check_h_nonempty(hrep)
            return hrep
        raise ValueError(f'Unknown generation method: {method!r}')
