from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from kochflake.snowflake.directions import Direction

Point = tuple[float, float]
Segment = tuple[Point, Point]


class TickResult(Enum):
    IDLE = "idle"
    SEGMENT_APPENDED = "segment_appended"
    ITERATION_RESTARTED = "iteration_restarted"


@dataclass
class SnowflakeState:
    """Mutable animation state owned by a single :class:`SnowflakeStepper`.

    ``pending_directions`` is only non-empty while an iteration is being
    drawn. ``path`` is cleared at each iteration boundary and otherwise only
    grows.
    """

    restart_timer_ms: int
    iteration: int = 0
    base_length: float = 0.0
    heading: float = 0.0
    pending_directions: deque[Direction] = field(default_factory=deque)
    path: list[Point] = field(default_factory=list)
    awaiting_first_frame: bool = True

    @property
    def last_point(self) -> Point:
        assert self.path, "path has no starting point"
        return self.path[-1]

    def last_segment(self) -> Segment | None:
        if len(self.path) < 2:
            return None
        return self.path[-2], self.path[-1]
