from typing import Any

from linesquares.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TAP


class InputSystem:
    """Maps pointer-down presses anywhere on the surface to taps."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender: Any, **kwargs: Any) -> None:
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        try:
            xf = float(x)
            yf = float(y)
        except (TypeError, ValueError):
            return
        self.event_bus.emit(EVENT_TAP, x=xf, y=yf)
