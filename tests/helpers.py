from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from esper import World

from linesquares.events.bus import EVENT_TAP, EVENT_TICK, EventBus
from linesquares.systems.clock import ClockSystem
from linesquares.systems.row_animation import RowAnimationSystem
from linesquares.world import create_world


class DummyWindow:
    def __init__(self, width=480, height=600):
        self.width = width
        self.height = height


@dataclass
class Scene:
    bus: EventBus
    world: World
    clock_system: ClockSystem
    animation: RowAnimationSystem


def build_scene(**world_kwargs: Any) -> Scene:
    bus = EventBus()
    world = create_world(**world_kwargs)
    clock_system = ClockSystem(world, bus)
    animation = RowAnimationSystem(world, bus, clock_system)
    return Scene(bus=bus, world=world, clock_system=clock_system, animation=animation)


def drive_ticks(bus: EventBus, count: int = 1, dt: float = 0.02) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def tap(bus: EventBus) -> None:
    bus.emit(EVENT_TAP, x=10.0, y=10.0)


def run_until_stopped(scene: Scene, limit: int = 500, dt: float = 0.02) -> int:
    """Tick until the clock stops; return the number of ticks taken."""
    clock = scene.clock_system.clock
    for count in range(1, limit + 1):
        drive_ticks(scene.bus, 1, dt)
        if not clock.running:
            return count
    raise AssertionError(f"clock still running after {limit} ticks")


@dataclass(eq=False)
class Recorder:
    """Collects payloads of one event kind from the bus."""
    events: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, sender, **kwargs):
        self.events.append(kwargs)


def record(bus: EventBus, name: str) -> Recorder:
    recorder = Recorder()
    bus.subscribe(name, recorder)
    return recorder
