from __future__ import annotations

from esper import World

from linesquares.components.animation_clock import AnimationClock
from linesquares.components.row_chain import RowChain


def get_row_chain(world: World) -> RowChain | None:
    for _, chain in world.get_component(RowChain):
        return chain
    return None


def get_clock(world: World) -> AnimationClock | None:
    for _, clock in world.get_component(AnimationClock):
        return clock
    return None
