"""Entry point for the vertical-line-to-square widget.

Sets up the event bus, ECS world, systems, and the Arcade view that hosts them.
"""
import logging

from arcade import View, Window, run

from linesquares.constants import BACK_COLOR, TICK_DELAY, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from linesquares.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TICK
from linesquares.systems.clock import ClockSystem
from linesquares.systems.input import InputSystem
from linesquares.systems.render import RenderSystem
from linesquares.systems.row_animation import RowAnimationSystem
from linesquares.world import create_world


class LineToSquareView(View):
    def __init__(self, window: Window):
        super().__init__(window)
        self.event_bus = EventBus()
        self.world = create_world()
        self.clock_system = ClockSystem(self.world, self.event_bus)
        self.row_animation_system = RowAnimationSystem(self.world, self.event_bus, self.clock_system)
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, window)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)

    def on_draw(self):
        self.clear(color=BACK_COLOR)
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def create(window: Window) -> LineToSquareView:
    """Mount a new widget on ``window`` and return it."""
    view = LineToSquareView(window)
    window.show_view(view)
    return view


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = Window(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
    # Redraw at least as often as the animation clock ticks.
    window.set_update_rate(min(1/60, TICK_DELAY))
    create(window)
    run()


if __name__ == "__main__":
    main()
