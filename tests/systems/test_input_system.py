from linesquares.events.bus import EVENT_MOUSE_PRESS, EVENT_TAP, EventBus
from linesquares.systems.input import InputSystem
from tests.helpers import record


def test_mouse_press_becomes_tap():
    bus = EventBus()
    InputSystem(bus)
    taps = record(bus, EVENT_TAP)
    bus.emit(EVENT_MOUSE_PRESS, x=12, y=30, button=1)
    assert taps.events == [{"x": 12.0, "y": 30.0}]


def test_any_button_taps():
    bus = EventBus()
    InputSystem(bus)
    taps = record(bus, EVENT_TAP)
    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=4)
    assert len(taps.events) == 1


def test_malformed_press_ignored():
    bus = EventBus()
    InputSystem(bus)
    taps = record(bus, EVENT_TAP)
    bus.emit(EVENT_MOUSE_PRESS, x=None, y=5, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x="left", y=5, button=1)
    assert taps.events == []
