from __future__ import annotations

from typing import Any

import pygame

from kochflake.renderers import StatefulBaseRenderer
from kochflake.runtime.display_context import DisplayContext
from kochflake.runtime.event_handler import PygameEventHandler
from kochflake.runtime.streams import FrameStreams
from kochflake.utilities.env.display import DEFAULT_MAX_FPS
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)


class GameLoop:
    def __init__(
        self,
        display: DisplayContext,
        streams: FrameStreams,
        event_handler: PygameEventHandler | None = None,
        max_fps: int = DEFAULT_MAX_FPS,
        frame_limit: int | None = None,
    ) -> None:
        self.display = display
        self.streams = streams
        self.event_handler = event_handler or PygameEventHandler()
        self.max_fps = max_fps
        self.frame_limit = frame_limit
        self.renderers: list[StatefulBaseRenderer[Any]] = []
        self.initialized = False
        self.running = False
        self.frame_count = 0

    def add_renderer(self, renderer: StatefulBaseRenderer[Any]) -> None:
        self.renderers.append(renderer)

    @property
    def screen(self) -> pygame.Surface | None:
        return self.display.screen

    @property
    def clock(self) -> pygame.time.Clock | None:
        return self.display.clock

    def start(self) -> None:
        logger.info("Starting GameLoop")
        if not self.renderers:
            raise RuntimeError("Unable to start as no renderers were added.")

        try:
            self._ensure_initialized()
            self.running = True
            logger.info("Entering main loop.")
            self._run_main_loop()
        finally:
            for renderer in self.renderers:
                renderer.reset()
            pygame.quit()
            logger.info("GameLoop stopped after %d frames", self.frame_count)

    def _ensure_initialized(self) -> None:
        if self.initialized:
            return
        self._initialize_screen()
        self._initialize_renderers()
        self.initialized = True

    def _initialize_screen(self) -> None:
        self.display.initialize()
        self.display.ensure_initialized()
        self.streams.window.on_next(self.display.screen)
        self.streams.clock.on_next(self.display.clock)

    def _initialize_renderers(self) -> None:
        assert self.display.screen is not None
        assert self.display.clock is not None
        for renderer in self.renderers:
            renderer.initialize(self.display.screen, self.display.clock, self.streams)

    def _one_loop(self) -> None:
        if self.display.screen is None or self.display.clock is None:
            raise RuntimeError("GameLoop screen is not initialized")
        self.streams.game_tick.on_next(self.frame_count)
        for renderer in self.renderers:
            renderer.process(self.display.screen, self.display.clock)
        pygame.display.flip()

    def _run_main_loop(self) -> None:
        self.display.ensure_initialized()
        clock = self.display.clock
        assert clock is not None
        while self.running:
            self.running = self.event_handler.handle_events()
            if not self.running:
                break
            self._one_loop()
            clock.tick(self.max_fps)
            self.frame_count += 1
            if self.frame_limit is not None and self.frame_count >= self.frame_limit:
                self.running = False
