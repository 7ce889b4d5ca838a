from __future__ import annotations

from dataclasses import dataclass

from kochflake.snowflake.state import Segment


@dataclass(frozen=True)
class SnowflakeFrame:
    """What changed in the snowflake since the previous rendered frame."""

    iteration: int = 0
    segments: tuple[Segment, ...] = ()
    restarted: bool = False
    ready: bool = False
    elapsed_ms: float = 0.0
