from __future__ import annotations

import pygame

from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed, stopping")
                running = False
        return running
