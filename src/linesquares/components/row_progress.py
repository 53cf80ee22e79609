from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from linesquares.constants import LINE_COUNT, SQUARES_PER_LINE
from linesquares.utils.scale_math import update_value


@dataclass(frozen=True, slots=True)
class Continuing:
    """The row moved but its step is not finished yet."""


@dataclass(frozen=True, slots=True)
class RowFinished:
    """The row crossed the step threshold and snapped to ``final_scale``."""
    final_scale: float


StepResult = Union[Continuing, RowFinished]

CONTINUING = Continuing()


@dataclass(slots=True)
class RowProgress:
    """Animation progress of a single row.

    ``direction`` is 0 while the row rests and +1/-1 while it animates towards
    1 or back towards 0. ``committed_scale`` is the value the last finished step
    snapped to.
    """

    scale: float = 0.0
    direction: float = 0.0
    committed_scale: float = 0.0

    @property
    def idle(self) -> bool:
        return self.direction == 0

    def advance(self) -> StepResult:
        if self.idle:
            return CONTINUING
        self.scale += update_value(self.scale, self.direction, LINE_COUNT, LINE_COUNT * SQUARES_PER_LINE)
        if abs(self.scale - self.committed_scale) > 1:
            self.scale = self.committed_scale + self.direction
            self.direction = 0.0
            self.committed_scale = self.scale
            return RowFinished(final_scale=self.scale)
        return CONTINUING

    def begin_if_idle(self) -> bool:
        """Seed the direction from the committed scale; no-op while animating."""
        if not self.idle:
            return False
        self.direction = 1.0 - 2 * self.committed_scale
        return True
