from __future__ import annotations

import pygame

from kochflake.renderers import StatefulBaseRenderer
from kochflake.snowflake.frame import SnowflakeFrame
from kochflake.snowflake.provider import SnowflakeStateProvider
from kochflake.snowflake.state import Point
from kochflake.utilities.env.display import DEFAULT_FONT_SIZE, DEFAULT_LEGEND
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)

BACKGROUND = (0, 0, 0)
FOREGROUND = (255, 255, 255)
LEGEND_POSITION = (100, 100)


def _to_pixel(point: Point) -> tuple[int, int]:
    return int(point[0]), int(point[1])


class SnowflakeRenderer(StatefulBaseRenderer[SnowflakeFrame]):
    """Draw the snowflake incrementally onto a persistent canvas.

    Only the segments reported by the latest frame are drawn; the canvas is
    wiped and the legend redrawn whenever a new depth starts.
    """

    def __init__(
        self,
        provider: SnowflakeStateProvider,
        legend: str = DEFAULT_LEGEND,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        super().__init__(builder=provider)
        self._provider = provider
        self.legend = legend
        self.font_size = font_size
        self._font: pygame.font.Font | None = None
        self._canvas: pygame.Surface | None = None
        self._drawn_frame: SnowflakeFrame | None = None

    @property
    def canvas(self) -> pygame.Surface | None:
        return self._canvas

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        frame = self.state
        if frame is not self._drawn_frame:
            if self._canvas is None or frame.restarted:
                self._splash(window.get_size())
            self._draw_segments(frame)
            self._drawn_frame = frame

        assert self._canvas is not None
        window.blit(self._canvas, (0, 0))

    def _splash(self, size: tuple[int, int]) -> None:
        if self._canvas is None or self._canvas.get_size() != size:
            logger.info("Creating %dx%d canvas", size[0], size[1])
            self._canvas = pygame.Surface(size)

        self._canvas.fill(BACKGROUND)
        if self.legend:
            if self._font is None:
                self._font = pygame.font.Font(None, self.font_size)
            text_surface = self._font.render(self.legend, True, FOREGROUND)
            self._canvas.blit(text_surface, LEGEND_POSITION)
        self._provider.stepper.mark_ready()

    def _draw_segments(self, frame: SnowflakeFrame) -> None:
        assert self._canvas is not None
        for start, end in frame.segments:
            pygame.draw.line(self._canvas, FOREGROUND, _to_pixel(start), _to_pixel(end))

    def reset(self) -> None:
        super().reset()
        self._canvas = None
        self._drawn_frame = None
