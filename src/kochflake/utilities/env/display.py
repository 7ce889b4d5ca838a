import os

from kochflake.utilities.env.enums import DisplayMode
from kochflake.utilities.env.parsing import (_env_flag, _env_int,
                                           _env_optional_int, _env_size)

DEFAULT_WINDOW_SIZE = (1280, 720)
DEFAULT_MAX_FPS = 60
DEFAULT_FONT_SIZE = 18
DEFAULT_LEGEND = (
    "Koch Snowflake by Timothy Moore, Donald Moore, Nicolas Brown, and Matt Todd"
)


class DisplayConfiguration:
    @classmethod
    def display_mode(cls) -> DisplayMode:
        mode = os.environ.get("KOCHFLAKE_DISPLAY_MODE")
        if mode is None:
            if _env_flag("KOCHFLAKE_FULLSCREEN", default=True):
                return DisplayMode.FULLSCREEN
            return DisplayMode.WINDOWED
        try:
            return DisplayMode(mode.strip().lower())
        except ValueError as exc:
            raise ValueError(
                "KOCHFLAKE_DISPLAY_MODE must be 'fullscreen' or 'windowed'"
            ) from exc

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return _env_size("KOCHFLAKE_WINDOW_SIZE", default=DEFAULT_WINDOW_SIZE)

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("KOCHFLAKE_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def frame_limit(cls) -> int | None:
        return _env_optional_int("KOCHFLAKE_FRAME_LIMIT", minimum=1)

    @classmethod
    def legend(cls) -> str:
        return os.environ.get("KOCHFLAKE_LEGEND", DEFAULT_LEGEND)

    @classmethod
    def font_size(cls) -> int:
        return _env_int("KOCHFLAKE_FONT_SIZE", default=DEFAULT_FONT_SIZE, minimum=1)
