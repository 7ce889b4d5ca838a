from __future__ import annotations

from dataclasses import dataclass

import pygame

from kochflake.utilities.env import DisplayMode
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "FRACTALS"


@dataclass
class DisplayContext:
    """Track and initialize pygame display resources."""

    display_mode: DisplayMode = DisplayMode.FULLSCREEN
    window_size: tuple[int, int] = (1280, 720)
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        pygame.init()
        pygame.display.set_caption(WINDOW_CAPTION)
        logger.info("Opening %s display", self.display_mode.value)
        self.screen = pygame.display.set_mode(
            self._display_size(), self.display_mode.to_pygame_flags()
        )
        self.clock = pygame.time.Clock()

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")

    def _display_size(self) -> tuple[int, int]:
        if self.display_mode is DisplayMode.FULLSCREEN:
            # (0, 0) asks pygame for the desktop resolution
            return (0, 0)
        return self.window_size
