"""Clean-up of the incremental state."""
import logging
from .state import DoubleDescriptionState, bit


def release_constraint(state: DoubleDescriptionState, k: int):
    """Settle the constraint at position `k` once its fold is done.

    A constraint that neither excluded an element nor absorbed a line is
    implied by the constraints folded before it; its position is purged from
    the zero-sets, otherwise later adjacency tests would overcount the
    boundaries shared by two elements. The bucket is released either way.
    """
    if state.cut_nothing(k) and state.cutline[k] is None:
        mask = ~bit(k)
        for el in state.pin[k] + state.rin[k]:
            el.zero &= mask
        state.redundant.append(k)
        logging.debug(f'{state.constraints[k].name.capitalize()} {k} is redundant')
    state.release(k)


def remove_empty(state: DoubleDescriptionState):
    """Drop the directions left over by an empty polyhedron."""
    if len(state.points) == 0:
        # e.g. `0 x1 + x2 = -1` with `0 x1 + x2 = 1` keeps the line (1, 0)
        # and `0 x1 + 0 x2 = 1` keeps both lines; the polyhedron is empty.
        state.rays = []
        state.lines = []
