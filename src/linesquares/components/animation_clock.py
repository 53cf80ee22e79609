from __future__ import annotations

from dataclasses import dataclass

from linesquares.constants import MAX_CATCH_UP_FRAMES, TICK_DELAY


@dataclass(slots=True)
class AnimationClock:
    """Fixed-delay frame source; ``running`` doubles as the stop token."""

    delay: float = TICK_DELAY
    max_catch_up: int = MAX_CATCH_UP_FRAMES
    running: bool = False
    elapsed: float = 0.0
    frames: int = 0

    def __post_init__(self) -> None:
        if self.delay <= 0:
            raise ValueError(f"delay must be positive, got {self.delay}")
        if self.max_catch_up < 1:
            raise ValueError(f"max_catch_up must be at least 1, got {self.max_catch_up}")

    def start(self) -> bool:
        if self.running:
            return False
        self.running = True
        self.elapsed = 0.0
        return True

    def stop(self) -> bool:
        if not self.running:
            return False
        self.running = False
        self.elapsed = 0.0
        return True

    def accumulate(self, dt: float) -> int:
        """Add host time and return how many frames are due (capped)."""
        if not self.running:
            return 0
        self.elapsed += max(0.0, dt)
        due = int(self.elapsed // self.delay)
        if due > self.max_catch_up:
            self.elapsed = 0.0
            return self.max_catch_up
        self.elapsed -= due * self.delay
        return due
