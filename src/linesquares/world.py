from esper import World

from linesquares.components.animation_clock import AnimationClock
from linesquares.components.row_chain import RowChain
from linesquares.constants import MAX_CATCH_UP_FRAMES, ROW_COUNT, TICK_DELAY


def create_world(
    *,
    row_count: int = ROW_COUNT,
    tick_delay: float = TICK_DELAY,
    max_catch_up: int = MAX_CATCH_UP_FRAMES,
) -> World:
    """Build the world holding the single scene entity (row chain + clock)."""
    world = World()
    world.create_entity(
        RowChain(row_count=row_count),
        AnimationClock(delay=tick_delay, max_catch_up=max_catch_up),
    )
    return world
