from collections import deque

import pygame
import pytest
from hypothesis import HealthCheck, settings

from kochflake.runtime.streams import FrameStreams

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class _StubClock:
    def __init__(
        self,
        *times: int,
        default: int = 0,
        repeat_last: bool = True,
    ) -> None:
        self._times: deque[int] = deque(times)
        self._last: int | None = None
        self._default = default
        self._repeat_last = repeat_last

    def get_time(self) -> int:
        if self._times:
            self._last = self._times.popleft()
            return self._last

        if self._repeat_last and self._last is not None:
            return self._last

        return self._default


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()


@pytest.fixture()
def stub_clock_factory():
    return _StubClock


@pytest.fixture()
def streams() -> FrameStreams:
    return FrameStreams()
