from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from linesquares.components.row_progress import RowFinished, RowProgress, StepResult
from linesquares.constants import ROW_COUNT


@dataclass(slots=True)
class RowChain:
    """Fixed sequence of rows walked one at a time, bouncing at both ends."""

    row_count: int = ROW_COUNT
    rows: List[RowProgress] = field(default_factory=list)
    current_index: int = 0
    traversal_direction: int = 1

    def __post_init__(self) -> None:
        if self.row_count < 1:
            raise ValueError(f"row_count must be positive, got {self.row_count}")
        if not self.rows:
            self.rows = [RowProgress() for _ in range(self.row_count)]
        elif len(self.rows) != self.row_count:
            raise ValueError(f"expected {self.row_count} rows, got {len(self.rows)}")
        if not 0 <= self.current_index < self.row_count:
            raise ValueError(f"current_index {self.current_index} outside 0..{self.row_count - 1}")
        if self.traversal_direction not in (1, -1):
            raise ValueError(f"traversal_direction must be 1 or -1, got {self.traversal_direction}")

    @property
    def current(self) -> RowProgress:
        return self.rows[self.current_index]

    def scales(self) -> Tuple[float, ...]:
        return tuple(row.scale for row in self.rows)

    def begin_if_idle(self) -> bool:
        return self.current.begin_if_idle()

    def advance_current(self) -> StepResult:
        result = self.current.advance()
        if isinstance(result, RowFinished):
            self.step_pointer()
        return result

    def step_pointer(self) -> bool:
        """Move to the neighbour in the traversal direction.

        Returns True when there was no neighbour and the direction flipped instead.
        """
        nxt = self.current_index + self.traversal_direction
        if 0 <= nxt < self.row_count:
            self.current_index = nxt
            return False
        self.traversal_direction *= -1
        return True
