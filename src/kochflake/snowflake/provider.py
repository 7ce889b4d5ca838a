from __future__ import annotations

import reactivex
from pygame.time import Clock
from reactivex import operators as ops

from kochflake.runtime.providers import ObservableProvider
from kochflake.runtime.streams import FrameStreams
from kochflake.snowflake.frame import SnowflakeFrame
from kochflake.snowflake.state import Segment, TickResult
from kochflake.snowflake.stepper import SnowflakeStepper
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_CATCH_UP_TICKS = 4


class SnowflakeStateProvider(ObservableProvider[SnowflakeFrame]):
    """Drive a :class:`SnowflakeStepper` at a fixed interval from frame clocks.

    Frame durations are accumulated and the stepper is ticked once for every
    whole ``stepper.tick_interval_ms`` that has elapsed, so the animation
    speed does not depend on the display frame rate.
    """

    def __init__(
        self,
        streams: FrameStreams,
        stepper: SnowflakeStepper | None = None,
        max_catch_up_ticks: int = DEFAULT_MAX_CATCH_UP_TICKS,
    ) -> None:
        if max_catch_up_ticks < 1:
            raise ValueError("max_catch_up_ticks must be at least 1")
        self._streams = streams
        self.stepper = stepper or SnowflakeStepper(streams.window_size)
        self._max_catch_up_ticks = max_catch_up_ticks

    def initial_frame(self) -> SnowflakeFrame:
        state = self.stepper.state
        return SnowflakeFrame(
            iteration=state.iteration,
            ready=not state.awaiting_first_frame,
        )

    def advance(self, frame: SnowflakeFrame, *, dt_ms: float) -> SnowflakeFrame:
        interval_ms = self.stepper.tick_interval_ms
        accumulated = frame.elapsed_ms + max(dt_ms, 0.0)
        segments: list[Segment] = []
        restarted = False
        ticks = 0

        while accumulated >= interval_ms and ticks < self._max_catch_up_ticks:
            accumulated -= interval_ms
            ticks += 1
            result = self.stepper.on_tick()
            if result is TickResult.SEGMENT_APPENDED:
                segment = self.stepper.last_segment()
                assert segment is not None
                segments.append(segment)
            elif result is TickResult.ITERATION_RESTARTED:
                # Anything drawn earlier this frame belongs to the old canvas.
                segments.clear()
                restarted = True

        if accumulated >= interval_ms:
            logger.debug(
                "Dropping %.1fms of tick backlog after %d ticks", accumulated, ticks
            )
            accumulated %= interval_ms

        state = self.stepper.state
        return SnowflakeFrame(
            iteration=state.iteration,
            segments=tuple(segments),
            restarted=restarted,
            ready=not state.awaiting_first_frame,
            elapsed_ms=accumulated,
        )

    def observable(self) -> reactivex.Observable[SnowflakeFrame]:
        clocks = self._streams.clock.pipe(
            ops.filter(lambda clock: clock is not None),
            ops.share(),
        )

        initial_frame = self.initial_frame()

        def advance(frame: SnowflakeFrame, clock: Clock) -> SnowflakeFrame:
            return self.advance(frame, dt_ms=float(clock.get_time()))

        return self._streams.game_tick.pipe(
            ops.filter(lambda tick: tick is not None),
            ops.with_latest_from(clocks),
            ops.map(lambda latest: latest[1]),
            ops.scan(advance, seed=initial_frame),
            ops.start_with(initial_frame),
            ops.share(),
        )
