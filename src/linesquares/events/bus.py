from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods alive for systems nobody holds a reference to.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# HOST & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_FRAME = "frame"                      # payload: frame=int
EVENT_CLOCK_STARTED = "clock_started"      # payload: None
EVENT_CLOCK_STOPPED = "clock_stopped"      # payload: None


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_TAP = "tap"                          # payload: x, y


# ============================================================================
# ROW ANIMATION
# ============================================================================
EVENT_ROW_STARTED = "row_started"                  # payload: index=int, direction=float
EVENT_ROW_FINISHED = "row_finished"                # payload: index=int, scale=float, next_index=int
EVENT_TRAVERSAL_REVERSED = "traversal_reversed"    # payload: index=int, direction=int
