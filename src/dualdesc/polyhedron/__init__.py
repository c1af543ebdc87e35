from .representation import (
    Constraint,
    HRepresentation,
    InconsistentVRepresentationError,
    LinearConstraints,
    LinearEqualityConstraints,
    VRepresentation,
)
from .adjacency import InvariantViolationError
from .extension import DoubleDescription
from .convert import (
    convert,
    doubledescription,
    h_to_v_representation,
    v_to_h_representation,
)
from .check import check_h_nonempty
from .numeric import EPSILON
