from .base import AbstractConstraintsGenerator, CannotGenerateProblemError
from .polytopes import PolytopeGenerator


def make_constraints_generator(kind: str, random_state):
    kind = kind + 'Generator'
    constraints_gen_cls = globals().get(kind, None)
    if constraints_gen_cls is None:
        raise ValueError(f'No constraints_gen class found: {kind!r}.')
    return constraints_gen_cls(random_state=random_state)
