from __future__ import annotations

from dataclasses import dataclass

from kochflake.utilities.env import Configuration, DisplayMode


@dataclass(frozen=True)
class RuntimeSettings:
    tick_interval_ms: int
    restart_pause_ms: int
    initial_delay_ms: int
    max_depth: int
    max_catch_up_ticks: int
    display_mode: DisplayMode
    window_size: tuple[int, int]
    max_fps: int
    legend: str
    font_size: int
    frame_limit: int | None = None

    @classmethod
    def from_environment(cls) -> "RuntimeSettings":
        return cls(
            tick_interval_ms=Configuration.tick_interval_ms(),
            restart_pause_ms=Configuration.restart_pause_ms(),
            initial_delay_ms=Configuration.initial_delay_ms(),
            max_depth=Configuration.max_depth(),
            max_catch_up_ticks=Configuration.max_catch_up_ticks(),
            display_mode=Configuration.display_mode(),
            window_size=Configuration.window_size(),
            max_fps=Configuration.max_fps(),
            legend=Configuration.legend(),
            font_size=Configuration.font_size(),
            frame_limit=Configuration.frame_limit(),
        )
