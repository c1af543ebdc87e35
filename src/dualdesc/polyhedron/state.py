"""Incremental state of the double description method.

Every point and ray produced during the pass is an `Element`. Active
elements form the current V-representation; elements excluded by the
constraint at position `k` are archived in bucket `k` until the end of
that fold, when the bucket is released.

Zero-sets are stored as python integers used as bitsets: bit `i` is set iff
the element lies on the boundary of the constraint at position `i`.
"""
import numpy as np
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional
from .representation import Constraint


ACTIVE = -1


class ElementKind(Enum):
    POINT = 'p'
    RAY = 'r'


POINT = ElementKind.POINT
RAY = ElementKind.RAY


def bit(i: int) -> int:
    return 1 << i


def below(k: int) -> int:
    """Bitmask of every position strictly lower than `k`."""
    return (1 << k) - 1


def positions(zero: int) -> List[int]:
    result = []
    i = 0
    while zero:
        if zero & 1:
            result.append(i)
        zero >>= 1
        i += 1
    return result


def count(zero: int) -> int:
    return bin(zero).count('1')


@dataclass(eq=False)
class Element:
    kind: ElementKind
    coord: np.ndarray
    zero: int = 0
    cutoff: int = ACTIVE

    @property
    def is_point(self) -> bool:
        return self.kind is POINT

    def __repr__(self):
        return f'{self.kind.value}{list(self.coord)} zero at: {positions(self.zero)}'


class CutoffRef(NamedTuple):
    """Element reference: (kind, bucket, position in the bucket).

    The `ACTIVE` bucket holds the elements not excluded by any constraint.
    """
    kind: ElementKind
    cutoff: int
    index: int

    def __repr__(self):
        bucket = 'active' if self.cutoff == ACTIVE else self.cutoff
        return f'{self.kind.value}[{bucket}, {self.index}]'


@dataclass
class DoubleDescriptionState:
    fulldim: int
    constraints: List[Constraint]
    tol: float
    points: List[Element] = field(default_factory=list)
    rays: List[Element] = field(default_factory=list)
    lines: List[np.ndarray] = field(default_factory=list)

    def __post_init__(self):
        n = len(self.constraints)
        self.cutpoints: List[List[Element]] = [[] for _ in range(n)]
        self.cutrays: List[List[Element]] = [[] for _ in range(n)]
        self.pin: List[List[Element]] = [[] for _ in range(n)]
        self.rin: List[List[Element]] = [[] for _ in range(n)]
        self.cutline: List[Optional[np.ndarray]] = [None] * n
        self.lineray: List[Optional[Element]] = [None] * n
        self.nlines: List[int] = [0] * n
        self.released: List[bool] = [False] * n
        self.redundant: List[int] = []

    @property
    def n_constraints(self) -> int:
        return len(self.constraints)

    def elements(self) -> List[Element]:
        return self.points + self.rays

    def add_element(self, kind: ElementKind, coord: np.ndarray, zero: int = 0) -> Element:
        """Add an active element lying on the boundaries listed in `zero`."""
        el = Element(kind, coord)
        if kind is POINT:
            self.points.append(el)
        else:
            self.rays.append(el)
        for i in positions(zero):
            self.add_in(i, el)
        return el

    def archive(self, k: int, el: Element):
        el.cutoff = k
        if el.is_point:
            self.cutpoints[k].append(el)
        else:
            self.cutrays[k].append(el)

    def add_in(self, k: int, el: Element):
        el.zero |= bit(k)
        if el.is_point:
            self.pin[k].append(el)
        else:
            self.rin[k].append(el)

    def bucket(self, kind: ElementKind, cutoff: int) -> List[Element]:
        if cutoff == ACTIVE:
            return self.points if kind is POINT else self.rays
        return self.cutpoints[cutoff] if kind is POINT else self.cutrays[cutoff]

    def ref(self, el: Element) -> CutoffRef:
        bucket = self.bucket(el.kind, el.cutoff)
        index = next((i for i, other in enumerate(bucket) if other is el), -1)
        return CutoffRef(el.kind, el.cutoff, index)

    def cut_nothing(self, k: int) -> bool:
        return len(self.cutpoints[k]) == 0 and len(self.cutrays[k]) == 0

    def release(self, k: int):
        self.cutpoints[k] = []
        self.cutrays[k] = []
        self.pin[k] = []
        self.rin[k] = []
        self.released[k] = True

    def summary(self) -> str:
        return f'{len(self.points)} points, {len(self.rays)} rays and {len(self.lines)} lines'

    def describe(self) -> str:
        out = [f'DoubleDescriptionState in {self.fulldim} dimension:']
        out.append(f' Points: {self.points}')
        out.append(f' Rays: {self.rays}')
        out.append(f' Lines: {[list(line) for line in self.lines]}')
        for k in reversed(range(self.n_constraints)):
            constraint = self.constraints[k]
            out.append(f' {constraint.name.capitalize()} {k}: {constraint}:')
            if self.released[k]:
                out.append('  (released)')
            for j, el in enumerate(self.cutpoints[k]):
                out.append(f'  Cut point {j}: {el}')
            if self.pin[k]:
                out.append(f'  Points in: {[self.ref(el) for el in self.pin[k]]}')
            for j, el in enumerate(self.cutrays[k]):
                out.append(f'  Cut ray {j}: {el}')
            if self.rin[k]:
                out.append(f'  Rays in: {[self.ref(el) for el in self.rin[k]]}')
            if self.cutline[k] is not None:
                out.append(f'  Cut line: {list(self.cutline[k])}')
                if self.lineray[k] is not None:
                    out.append(f'  Line ray: {self.ref(self.lineray[k])}')
            if self.nlines[k] != 0:
                out.append(f'  {self.nlines[k]} uncut lines left')
        return '\n'.join(out)
