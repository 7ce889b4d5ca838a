from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

TURN_LEFT_DEGREES = -120.0
TURN_RIGHT_DEGREES = 60.0
SIDES = 3


class Direction(Enum):
    """Turn taken after drawing one straight segment."""

    LEFT = "left"
    RIGHT = "right"


# A left corner grows an outward bump that ends turning left again; a right
# corner grows the same bump but ends turning right, keeping the curve closed.
_EXPANSIONS: dict[Direction, tuple[Direction, ...]] = {
    Direction.LEFT: (Direction.RIGHT, Direction.LEFT, Direction.RIGHT, Direction.LEFT),
    Direction.RIGHT: (
        Direction.RIGHT,
        Direction.LEFT,
        Direction.RIGHT,
        Direction.RIGHT,
    ),
}


def next_iteration(sequence: Iterable[Direction]) -> list[Direction]:
    """Return the direction sequence of the next Koch iteration.

    Every direction expands to four, so the result is four times as long as
    ``sequence``. An empty input gives an empty output.
    """

    expanded: list[Direction] = []
    for direction in sequence:
        expanded.extend(_EXPANSIONS[direction])
    return expanded


def build_direction_sequence(iteration: int) -> list[Direction]:
    """Return the turns tracing all three sides of the snowflake at ``iteration``."""

    if iteration < 1:
        raise ValueError(f"iteration must be at least 1, got {iteration}")

    side = [Direction.LEFT]
    for _ in range(iteration - 1):
        side = next_iteration(side)
    return side * SIDES


def turn_angle(direction: Direction) -> float:
    match direction:
        case Direction.LEFT:
            return TURN_LEFT_DEGREES
        case Direction.RIGHT:
            return TURN_RIGHT_DEGREES


def normalize_heading(degrees: float) -> float:
    """Map ``degrees`` into ``[0, 360)``."""

    heading = degrees % 360.0
    # -1e-17 % 360 rounds up to exactly 360.0
    if heading >= 360.0:
        heading -= 360.0
    return heading
