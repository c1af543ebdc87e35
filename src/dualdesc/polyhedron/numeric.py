"""Numeric primitives shared by the double description engine.

Vectors are numpy arrays. Exact arithmetic uses object arrays holding
`fractions.Fraction`, floating point arithmetic uses `float64` arrays.
"""
import math
import numbers
import numpy as np
import torch
from fractions import Fraction
from functools import reduce
from typing import Sequence, Tuple


EPSILON = 1.e-9


def polytype(dtype: np.dtype) -> np.dtype:
    """Numeric type able to represent affine combinations of `dtype` values.

    Integers are promoted to exact rationals (object arrays of `Fraction`),
    narrow floats to `float64`; anything else is kept.
    """
    dtype = np.dtype(dtype)
    # strings such as '1/3' are parsed as rationals
    if dtype.kind in 'biuUSO':
        return np.dtype(object)
    if np.issubdtype(dtype, np.floating) and dtype.itemsize < 8:
        return np.dtype(np.float64)
    return dtype


def as_array(x) -> np.ndarray:
    if isinstance(x, torch.Tensor):
        x = x.detach().cpu().numpy()
    return np.asarray(x)


def _to_fraction(value):
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    if isinstance(value, str):
        return Fraction(value)
    if isinstance(value, Fraction):
        return value
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    return value


def _is_floating(x: np.ndarray) -> bool:
    if np.issubdtype(x.dtype, np.floating):
        return True
    if x.dtype == object:
        return any(isinstance(v, (float, np.floating)) for v in x.flat)
    return False


def promote(x) -> np.ndarray:
    """Convert one array to its `polytype`."""
    x = as_array(x)
    target = polytype(x.dtype)
    if target == object:
        out = np.empty(x.shape, dtype=object)
        for idx, v in np.ndenumerate(x):
            out[idx] = _to_fraction(v.item() if isinstance(v, np.generic) else v)
        return out
    return x.astype(target)


def promote_arrays(*arrays) -> Tuple[np.ndarray, ...]:
    """Promote several arrays to one common field.

    If any of them holds floating point values, all of them become
    `float64`; otherwise they all become exact `Fraction` object arrays.
    `None` entries are passed through.
    """
    converted = [None if a is None else as_array(a) for a in arrays]
    present = [a for a in converted if a is not None]
    if any(_is_floating(a) for a in present):
        return tuple(None if a is None else a.astype(np.float64) for a in converted)
    return tuple(None if a is None else promote(a) for a in converted)


def is_exact(x: np.ndarray) -> bool:
    return x.dtype == object


def zeros(dim: int, exact: bool) -> np.ndarray:
    if exact:
        return np.array([Fraction(0)] * dim, dtype=object)
    return np.zeros(dim)


def unit(dim: int, i: int, exact: bool) -> np.ndarray:
    e = zeros(dim, exact)
    e[i] = Fraction(1) if exact else 1.0
    return e


def empty_matrix(dim: int, exact: bool) -> np.ndarray:
    return np.empty((0, dim), dtype=object if exact else np.float64)


def stack(vectors: Sequence[np.ndarray], dim: int, exact: bool) -> np.ndarray:
    if len(vectors) == 0:
        return empty_matrix(dim, exact)
    return np.array(list(vectors), dtype=object if exact else np.float64).reshape(len(vectors), dim)


def isapproxzero(x, tol: float = EPSILON) -> bool:
    if isinstance(x, numbers.Rational):
        return x == 0
    return abs(x) <= tol


def isapprox(x, y, tol: float = EPSILON) -> bool:
    return isapproxzero(x - y, tol)


def sign(x, tol: float = EPSILON) -> int:
    if isapproxzero(x, tol):
        return 0
    return 1 if x > 0 else -1


def simplify_ray(r: np.ndarray, tol: float = EPSILON) -> np.ndarray:
    """Canonical positive rescaling of a direction.

    Exact directions become primitive integer vectors (as `Fraction`),
    floating point directions are divided by their largest absolute entry.
    Zero vectors are returned unchanged.
    """
    if is_exact(r):
        entries = [Fraction(v) for v in r]
        den = reduce(math.lcm, (v.denominator for v in entries), 1)
        nums = [int(v * den) for v in entries]
        g = reduce(math.gcd, (abs(n) for n in nums), 0)
        if g == 0:
            return r
        return np.array([Fraction(n // g) for n in nums], dtype=object)
    scale = np.max(np.abs(r)) if r.size > 0 else 0.0
    if scale <= tol:
        return r
    return r / scale


def simplify_line(line: np.ndarray, tol: float = EPSILON) -> np.ndarray:
    """Same as `simplify_ray` with the first nonzero entry made positive."""
    line = simplify_ray(line, tol)
    for v in line:
        if not isapproxzero(v, tol):
            return -line if v < 0 else line
    return line
