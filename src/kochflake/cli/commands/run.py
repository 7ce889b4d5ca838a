from dataclasses import replace
from typing import Annotated, Optional

import typer

from kochflake.runtime.container import build_game_loop
from kochflake.runtime.settings import RuntimeSettings
from kochflake.utilities.env import DisplayMode
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    tick_ms: Annotated[
        Optional[int],
        typer.Option("--tick-ms", min=1, help="Milliseconds between drawn segments"),
    ] = None,
    max_depth: Annotated[
        Optional[int],
        typer.Option("--max-depth", min=1, help="Deepest iteration before cycling"),
    ] = None,
    fullscreen: Annotated[
        Optional[bool],
        typer.Option("--fullscreen/--windowed", help="Borderless fullscreen window"),
    ] = None,
    width: Annotated[Optional[int], typer.Option("--width", min=1)] = None,
    height: Annotated[Optional[int], typer.Option("--height", min=1)] = None,
    max_fps: Annotated[Optional[int], typer.Option("--max-fps", min=1)] = None,
    frames: Annotated[
        Optional[int],
        typer.Option("--frames", min=1, help="Stop after this many frames"),
    ] = None,
) -> None:
    try:
        settings = RuntimeSettings.from_environment()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    settings = apply_overrides(
        settings,
        tick_ms=tick_ms,
        max_depth=max_depth,
        fullscreen=fullscreen,
        width=width,
        height=height,
        max_fps=max_fps,
        frames=frames,
    )
    build_game_loop(settings).start()


def apply_overrides(
    settings: RuntimeSettings,
    *,
    tick_ms: int | None = None,
    max_depth: int | None = None,
    fullscreen: bool | None = None,
    width: int | None = None,
    height: int | None = None,
    max_fps: int | None = None,
    frames: int | None = None,
) -> RuntimeSettings:
    changes: dict[str, object] = {}
    if tick_ms is not None:
        changes["tick_interval_ms"] = tick_ms
    if max_depth is not None:
        changes["max_depth"] = max_depth
    if fullscreen is not None:
        changes["display_mode"] = (
            DisplayMode.FULLSCREEN if fullscreen else DisplayMode.WINDOWED
        )
    if width is not None or height is not None:
        current_width, current_height = settings.window_size
        changes["window_size"] = (width or current_width, height or current_height)
    if max_fps is not None:
        changes["max_fps"] = max_fps
    if frames is not None:
        changes["frame_limit"] = frames
    return replace(settings, **changes)
