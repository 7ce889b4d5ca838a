"""Tests for the tick-driven snowflake stepper."""

from __future__ import annotations

import math

import pytest

from kochflake.snowflake.directions import Direction
from kochflake.snowflake.state import TickResult
from kochflake.snowflake.stepper import SnowflakeStepper

WIDTH = 1850
HEIGHT = 1000
BASE_LENGTH = HEIGHT * 0.85


def _stepper(**kwargs) -> SnowflakeStepper:
    return SnowflakeStepper(lambda: (WIDTH, HEIGHT), **kwargs)


def _tick_until_restart(stepper: SnowflakeStepper, limit: int = 1000) -> int:
    for ticks in range(1, limit + 1):
        if stepper.on_tick() is TickResult.ITERATION_RESTARTED:
            return ticks
    raise AssertionError("stepper never restarted")


def _draw_iteration(stepper: SnowflakeStepper) -> list[TickResult]:
    results = []
    while stepper.state.pending_directions:
        results.append(stepper.on_tick())
    return results


class TestReadiness:
    def test_idles_until_marked_ready(self) -> None:
        """Nothing is drawn before the renderer has shown its splash."""
        stepper = _stepper()

        for _ in range(100):
            assert stepper.on_tick() is TickResult.IDLE

        assert stepper.path == []
        assert stepper.iteration == 0
        assert stepper.state.restart_timer_ms == 1000

    def test_mark_ready_is_idempotent(self) -> None:
        stepper = _stepper()
        stepper.mark_ready()
        stepper.mark_ready()
        assert stepper.state.awaiting_first_frame is False


class TestEndToEnd:
    """Walk through the first depth exactly as the animation does."""

    def test_first_triangle(self) -> None:
        stepper = _stepper()
        assert stepper.on_tick() is TickResult.IDLE
        assert stepper.path == []

        stepper.mark_ready()
        assert stepper.on_tick() is TickResult.IDLE
        triangle_height = BASE_LENGTH * 0.86602540
        expected_start = (
            (WIDTH - BASE_LENGTH) / 2,
            HEIGHT - (HEIGHT - triangle_height) / 2,
        )
        assert stepper.path == [pytest.approx(expected_start)]
        assert stepper.state.restart_timer_ms == 1000 - 34

        # 966ms of initial delay remain, counted down 34ms per tick.
        assert _tick_until_restart(stepper) == 29
        assert stepper.iteration == 1
        assert stepper.path == []
        assert list(stepper.state.pending_directions) == [Direction.LEFT] * 3
        assert stepper.state.restart_timer_ms == 2000

        results = _draw_iteration(stepper)

        assert results == [TickResult.SEGMENT_APPENDED] * 3
        assert len(stepper.path) == 4
        assert stepper.path[0] == pytest.approx(expected_start)
        assert stepper.path[1] == pytest.approx(
            (expected_start[0] + BASE_LENGTH, expected_start[1])
        )
        assert stepper.path[2] == pytest.approx(
            (expected_start[0] + BASE_LENGTH / 2, expected_start[1] - triangle_height),
            abs=1e-3,
        )
        assert stepper.path[-1] == pytest.approx(expected_start)
        assert stepper.state.heading == pytest.approx(0.0)

        assert stepper.on_tick() is TickResult.IDLE
        assert stepper.state.restart_timer_ms == 2000 - 34

    def test_last_segment_tracks_path_tail(self) -> None:
        stepper = _stepper(initial_delay_ms=0)
        stepper.mark_ready()
        assert stepper.last_segment() is None

        _tick_until_restart(stepper)
        stepper.on_tick()

        assert stepper.last_segment() == (stepper.path[-2], stepper.path[-1])


class TestHeading:
    def test_left_turn_from_zero(self) -> None:
        stepper = _stepper(initial_delay_ms=0)
        stepper.mark_ready()
        _tick_until_restart(stepper)

        stepper.on_tick()

        assert stepper.state.heading == 240.0

    def test_right_turn_from_zero(self) -> None:
        stepper = _stepper(initial_delay_ms=0, max_depth=2)
        stepper.mark_ready()
        _tick_until_restart(stepper)
        _draw_iteration(stepper)
        stepper.state.restart_timer_ms = 0
        _tick_until_restart(stepper)
        assert stepper.state.pending_directions[0] is Direction.RIGHT

        stepper.on_tick()

        assert stepper.state.heading == 60.0


class TestGeometry:
    def test_segment_length_scales_by_a_third(self) -> None:
        stepper = _stepper()
        stepper.state.base_length = 900
        stepper.state.iteration = 3
        assert stepper.segment_length() == pytest.approx(100)

    def test_deeper_start_point_is_shifted_up(self) -> None:
        stepper = _stepper(initial_delay_ms=0, restart_pause_ms=0)
        stepper.mark_ready()
        _tick_until_restart(stepper)
        _draw_iteration(stepper)
        _tick_until_restart(stepper)
        assert stepper.iteration == 2

        stepper.on_tick()

        snowflake_height = BASE_LENGTH * 1.15470054
        expected_y = (
            HEIGHT
            - (HEIGHT - snowflake_height) / 2
            - 129.903811 * (BASE_LENGTH / 450)
        )
        assert stepper.path[0] == pytest.approx(((WIDTH - BASE_LENGTH) / 2, expected_y))

    @pytest.mark.parametrize("depth", [2, 3, 4])
    def test_curve_closes_at_every_depth(self, depth: int) -> None:
        """The last point of a finished depth lands back on its start point."""
        stepper = _stepper(initial_delay_ms=0, restart_pause_ms=0, max_depth=depth)
        stepper.mark_ready()
        while stepper.iteration != depth:
            _tick_until_restart(stepper)
            _draw_iteration(stepper)

        assert len(stepper.path) == 3 * 4 ** (depth - 1) + 1
        assert stepper.path[-1] == pytest.approx(stepper.path[0], abs=1e-6)

    def test_segments_have_constant_length(self) -> None:
        stepper = _stepper(initial_delay_ms=0, restart_pause_ms=0, max_depth=2)
        stepper.mark_ready()
        _tick_until_restart(stepper)
        _draw_iteration(stepper)
        _tick_until_restart(stepper)
        _draw_iteration(stepper)

        expected = BASE_LENGTH / 3
        for start, end in zip(stepper.path, stepper.path[1:]):
            assert math.dist(start, end) == pytest.approx(expected)

    def test_surface_size_is_read_at_iteration_start(self) -> None:
        sizes = [(400, 200)]
        stepper = SnowflakeStepper(
            lambda: sizes[-1], initial_delay_ms=0, restart_pause_ms=0
        )
        stepper.mark_ready()
        _tick_until_restart(stepper)
        stepper.on_tick()
        assert stepper.state.base_length == pytest.approx(200 * 0.85)

        sizes.append((800, 400))
        _draw_iteration(stepper)
        assert stepper.state.base_length == pytest.approx(200 * 0.85)

        _tick_until_restart(stepper)
        stepper.on_tick()
        assert stepper.state.base_length == pytest.approx(400 * 0.85)


class TestIterationCycle:
    def test_depths_cycle_back_to_one(self) -> None:
        stepper = _stepper(initial_delay_ms=0, restart_pause_ms=0, max_depth=3)
        stepper.mark_ready()
        seen = []
        for _ in range(4):
            _tick_until_restart(stepper)
            seen.append(stepper.iteration)
            _draw_iteration(stepper)

        assert seen == [1, 2, 3, 1]

    def test_default_cycle_is_seven_deep(self) -> None:
        stepper = _stepper()
        stepper.state.iteration = 7
        stepper.state.restart_timer_ms = 0
        stepper.mark_ready()

        assert stepper.on_tick() is TickResult.ITERATION_RESTARTED
        assert stepper.iteration == 1

    def test_pause_between_depths(self) -> None:
        stepper = _stepper(initial_delay_ms=0, restart_pause_ms=340)
        stepper.mark_ready()
        _tick_until_restart(stepper)
        _draw_iteration(stepper)

        assert _tick_until_restart(stepper) == 10

    def test_rejects_zero_max_depth(self) -> None:
        with pytest.raises(ValueError):
            _stepper(max_depth=0)

    def test_advancing_without_directions_is_an_invariant_violation(self) -> None:
        stepper = _stepper()
        stepper.state.path.append((0.0, 0.0))
        with pytest.raises(AssertionError):
            stepper._advance()
