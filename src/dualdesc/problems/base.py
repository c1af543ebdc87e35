from abc import ABC, abstractmethod
from typing import Optional
from ..polyhedron.representation import HRepresentation


class CannotGenerateProblemError(Exception):
    pass


class AbstractConstraintsGenerator(ABC):
    def __init__(self, random_state: Optional[int] = None):
        self.random_state = random_state

    @abstractmethod
    def generate(self, n_features: int, n_inequalities: int) -> HRepresentation:
        ...
