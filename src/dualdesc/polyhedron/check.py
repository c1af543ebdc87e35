import numpy as np
from scipy.optimize import nnls
from .representation import HRepresentation


def check_h_nonempty(hrep: HRepresentation, tol: float = 1.e-7) -> bool:
    """Check that polyhedron in H-representation is not empty.

    Polyhedron is defined as a set of points x satisfying (A x <= b, A_eq x = b_eq).
    With x = u - v and a slack s, the system is solved by nonnegative
    least squares over (u, v, s).
    """
    A = hrep.halfspaces.A.astype(np.float64)
    b = hrep.halfspaces.b.astype(np.float64)
    n_ineq, n_features = A.shape
    M = np.concatenate([A, -A, np.eye(n_ineq)], axis=1)
    rhs = b
    if hrep.hyperplanes is not None and hrep.hyperplanes.n_constraints > 0:
        A_eq = hrep.hyperplanes.A.astype(np.float64)
        b_eq = hrep.hyperplanes.b.astype(np.float64)
        M_eq = np.concatenate([A_eq, -A_eq, np.zeros((A_eq.shape[0], n_ineq))], axis=1)
        M = np.concatenate([M, M_eq], axis=0)
        rhs = np.concatenate([b, b_eq])
    if M.shape[0] == 0:
        return True
    return nnls(M, rhs)[1] < tol
