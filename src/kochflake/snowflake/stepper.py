from __future__ import annotations

import math
from collections import deque
from typing import Callable

from kochflake.snowflake.directions import (build_direction_sequence,
                                            normalize_heading, turn_angle)
from kochflake.snowflake.state import (Point, Segment, SnowflakeState,
                                       TickResult)
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)

SurfaceSize = Callable[[], tuple[int, int]]

DEFAULT_TICK_INTERVAL_MS = 34
DEFAULT_RESTART_PAUSE_MS = 2000
DEFAULT_INITIAL_DELAY_MS = 1000
DEFAULT_MAX_DEPTH = 7

BASE_LENGTH_RATIO = 0.85
TRIANGLE_HEIGHT_RATIO = 0.86602540
SNOWFLAKE_HEIGHT_RATIO = 1.15470054
# Tuned for a 450px base triangle, scaled with the base length.
SNOWFLAKE_VERTICAL_OFFSET = 129.903811
OFFSET_REFERENCE_LENGTH = 450.0


class SnowflakeStepper:
    """Turtle-graphics stepper drawing the Koch snowflake one segment per tick.

    Each call to :meth:`on_tick` either idles, appends one point to the path,
    or restarts the animation at the next depth. Depths cycle through
    ``1..max_depth``.
    """

    def __init__(
        self,
        surface_size: SurfaceSize,
        *,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        restart_pause_ms: int = DEFAULT_RESTART_PAUSE_MS,
        initial_delay_ms: int = DEFAULT_INITIAL_DELAY_MS,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._surface_size = surface_size
        self.tick_interval_ms = tick_interval_ms
        self.restart_pause_ms = restart_pause_ms
        self.max_depth = max_depth
        self.state = SnowflakeState(restart_timer_ms=initial_delay_ms)

    @property
    def iteration(self) -> int:
        return self.state.iteration

    @property
    def path(self) -> list[Point]:
        return self.state.path

    def mark_ready(self) -> None:
        self.state.awaiting_first_frame = False

    def last_segment(self) -> Segment | None:
        return self.state.last_segment()

    def segment_length(self) -> float:
        return self.state.base_length * 3.0 ** -(self.state.iteration - 1)

    def on_tick(self) -> TickResult:
        state = self.state
        if state.awaiting_first_frame:
            return TickResult.IDLE

        if not state.path:
            state.path.append(self._start_point())

        if not state.pending_directions:
            return self._count_down()

        return self._advance()

    def _start_point(self) -> Point:
        state = self.state
        width, height = self._surface_size()
        state.base_length = height * BASE_LENGTH_RATIO
        ratio = (
            TRIANGLE_HEIGHT_RATIO if state.iteration <= 1 else SNOWFLAKE_HEIGHT_RATIO
        )
        shape_height = state.base_length * ratio
        x = (width - state.base_length) / 2
        y = height - (height - shape_height) / 2
        if state.iteration > 1:
            y -= SNOWFLAKE_VERTICAL_OFFSET * (
                state.base_length / OFFSET_REFERENCE_LENGTH
            )
        logger.debug(
            "Placing depth %d start point at (%.2f, %.2f) on %dx%d surface",
            state.iteration,
            x,
            y,
            width,
            height,
        )
        return x, y

    def _count_down(self) -> TickResult:
        state = self.state
        state.restart_timer_ms -= self.tick_interval_ms
        if state.restart_timer_ms > 0:
            return TickResult.IDLE

        state.iteration = (state.iteration % self.max_depth) + 1
        state.restart_timer_ms = self.restart_pause_ms
        state.heading = 0.0
        state.path.clear()
        state.pending_directions = deque(build_direction_sequence(state.iteration))
        logger.info(
            "Starting depth %d with %d segments",
            state.iteration,
            len(state.pending_directions),
        )
        return TickResult.ITERATION_RESTARTED

    def _advance(self) -> TickResult:
        state = self.state
        assert state.pending_directions, "no pending directions to draw"
        direction = state.pending_directions.popleft()

        length = self.segment_length()
        theta = math.radians(state.heading)
        x, y = state.last_point
        state.path.append((x + length * math.cos(theta), y + length * math.sin(theta)))

        state.heading = normalize_heading(state.heading + turn_angle(direction))
        return TickResult.SEGMENT_APPENDED
