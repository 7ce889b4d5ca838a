from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from kochflake.runtime.display_context import DisplayContext
from kochflake.runtime.event_handler import PygameEventHandler
from kochflake.runtime.game_loop import GameLoop
from kochflake.runtime.settings import RuntimeSettings
from kochflake.runtime.streams import FrameStreams
from kochflake.snowflake.provider import SnowflakeStateProvider
from kochflake.snowflake.renderer import SnowflakeRenderer
from kochflake.snowflake.stepper import SnowflakeStepper
from kochflake.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


def build_runtime_container(
    settings: RuntimeSettings,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for runtime configuration.")
    _bind(container, overrides, RuntimeSettings, settings)
    _bind(container, overrides, FrameStreams, Singleton(FrameStreams))
    _bind(container, overrides, PygameEventHandler, Singleton(PygameEventHandler))
    _bind(
        container,
        overrides,
        DisplayContext,
        Singleton(
            lambda resolver: DisplayContext(
                display_mode=resolver[RuntimeSettings].display_mode,
                window_size=resolver[RuntimeSettings].window_size,
            )
        ),
    )
    _bind(
        container,
        overrides,
        SnowflakeStepper,
        Singleton(
            lambda resolver: SnowflakeStepper(
                resolver[FrameStreams].window_size,
                tick_interval_ms=resolver[RuntimeSettings].tick_interval_ms,
                restart_pause_ms=resolver[RuntimeSettings].restart_pause_ms,
                initial_delay_ms=resolver[RuntimeSettings].initial_delay_ms,
                max_depth=resolver[RuntimeSettings].max_depth,
            )
        ),
    )
    _bind(
        container,
        overrides,
        SnowflakeStateProvider,
        Singleton(
            lambda resolver: SnowflakeStateProvider(
                resolver[FrameStreams],
                stepper=resolver[SnowflakeStepper],
                max_catch_up_ticks=resolver[RuntimeSettings].max_catch_up_ticks,
            )
        ),
    )
    _bind(
        container,
        overrides,
        SnowflakeRenderer,
        Singleton(
            lambda resolver: SnowflakeRenderer(
                resolver[SnowflakeStateProvider],
                legend=resolver[RuntimeSettings].legend,
                font_size=resolver[RuntimeSettings].font_size,
            )
        ),
    )
    _bind(
        container,
        overrides,
        GameLoop,
        Singleton(
            lambda resolver: GameLoop(
                display=resolver[DisplayContext],
                streams=resolver[FrameStreams],
                event_handler=resolver[PygameEventHandler],
                max_fps=resolver[RuntimeSettings].max_fps,
                frame_limit=resolver[RuntimeSettings].frame_limit,
            )
        ),
    )
    return container


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)


def build_game_loop(settings: RuntimeSettings) -> GameLoop:
    resolver = build_runtime_container(settings)
    loop = resolver[GameLoop]
    loop.add_renderer(resolver[SnowflakeRenderer])
    return loop
