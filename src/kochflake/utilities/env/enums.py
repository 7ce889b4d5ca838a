from enum import StrEnum

import pygame


class DisplayMode(StrEnum):
    FULLSCREEN = "fullscreen"
    WINDOWED = "windowed"

    def to_pygame_flags(self) -> int:
        if self is DisplayMode.FULLSCREEN:
            return pygame.FULLSCREEN | pygame.NOFRAME
        return 0
