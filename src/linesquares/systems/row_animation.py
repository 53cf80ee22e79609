from __future__ import annotations

import logging
from typing import Any

from esper import World

from linesquares.components.row_progress import RowFinished
from linesquares.events.bus import (
    EVENT_FRAME,
    EVENT_ROW_FINISHED,
    EVENT_ROW_STARTED,
    EVENT_TAP,
    EVENT_TRAVERSAL_REVERSED,
    EventBus,
)
from linesquares.systems.clock import ClockSystem
from linesquares.utils.scene import get_clock, get_row_chain

logger = logging.getLogger(__name__)


class RowAnimationSystem:
    """Advances exactly one row per clock frame and walks the chain on completion."""

    def __init__(self, world: World, event_bus: EventBus, clock_system: ClockSystem):
        self.world = world
        self.event_bus = event_bus
        self.clock_system = clock_system
        event_bus.subscribe(EVENT_TAP, self.on_tap)
        event_bus.subscribe(EVENT_FRAME, self.on_frame)

    def on_tap(self, sender: Any, **kwargs: Any) -> None:
        chain = get_row_chain(self.world)
        if chain is None:
            return
        if not chain.begin_if_idle():
            # Current row is still animating; extra taps are ignored.
            return
        index = chain.current_index
        direction = chain.current.direction
        logger.debug("row %d started (direction=%+.0f)", index, direction)
        self.event_bus.emit(EVENT_ROW_STARTED, index=index, direction=direction)
        self.clock_system.start()

    def on_frame(self, sender: Any, **kwargs: Any) -> None:
        clock = get_clock(self.world)
        chain = get_row_chain(self.world)
        if clock is None or chain is None or not clock.running:
            return
        index = chain.current_index
        traversal = chain.traversal_direction
        result = chain.advance_current()
        if not isinstance(result, RowFinished):
            return
        # Stop first so a failing listener cannot leave the clock running.
        self.clock_system.stop()
        logger.debug("row %d finished at scale %.1f", index, result.final_scale)
        self.event_bus.emit(
            EVENT_ROW_FINISHED,
            index=index,
            scale=result.final_scale,
            next_index=chain.current_index,
        )
        if chain.traversal_direction != traversal:
            self.event_bus.emit(
                EVENT_TRAVERSAL_REVERSED,
                index=chain.current_index,
                direction=chain.traversal_direction,
            )
