from __future__ import annotations

import logging
import math
from typing import Any

from esper import World

from linesquares.components.animation_clock import AnimationClock
from linesquares.events.bus import (
    EVENT_CLOCK_STARTED,
    EVENT_CLOCK_STOPPED,
    EVENT_FRAME,
    EVENT_TICK,
    EventBus,
)
from linesquares.utils.scene import get_clock

logger = logging.getLogger(__name__)


class ClockSystem:
    """Turns variable host ticks into fixed-delay animation frames.

    Frames are only emitted while the scene clock runs. The running flag is
    re-checked before every frame so a stop issued by a frame handler drops the
    rest of the batch.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.missed_frames = 0
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def clock(self) -> AnimationClock | None:
        return get_clock(self.world)

    def start(self) -> bool:
        clock = self.clock
        if clock is None or not clock.start():
            return False
        logger.debug("animation clock started (delay=%.3fs)", clock.delay)
        self.event_bus.emit(EVENT_CLOCK_STARTED)
        return True

    def stop(self) -> bool:
        clock = self.clock
        if clock is None or not clock.stop():
            return False
        logger.debug("animation clock stopped after %d frames", clock.frames)
        self.event_bus.emit(EVENT_CLOCK_STOPPED)
        return True

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        clock = self.clock
        if clock is None or not clock.running:
            return
        try:
            dt = float(kwargs.get("dt", clock.delay))
        except (TypeError, ValueError):
            dt = clock.delay
        if not math.isfinite(dt):
            dt = clock.delay
        due = clock.accumulate(dt)
        for _ in range(due):
            if not clock.running:
                break
            clock.frames += 1
            try:
                self.event_bus.emit(EVENT_FRAME, frame=clock.frames)
            except Exception:
                # A failing frame is a missed frame; the clock keeps going.
                self.missed_frames += 1
                logger.warning("frame %d failed, skipping", clock.frames, exc_info=True)
