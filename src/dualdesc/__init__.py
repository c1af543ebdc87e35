from .polyhedron import (
    HRepresentation,
    VRepresentation,
    LinearConstraints,
    LinearEqualityConstraints,
    DoubleDescription,
    InconsistentVRepresentationError,
    InvariantViolationError,
    convert,
    doubledescription,
    h_to_v_representation,
    v_to_h_representation,
)


__all__ = [
    'HRepresentation',
    'VRepresentation',
    'LinearConstraints',
    'LinearEqualityConstraints',
    'DoubleDescription',
    'InconsistentVRepresentationError',
    'InvariantViolationError',
    'convert',
    'doubledescription',
    'h_to_v_representation',
    'v_to_h_representation',
]
