from functools import cached_property
from typing import Any

import reactivex
from reactivex.subject.behaviorsubject import BehaviorSubject


class FrameStreams:
    """Per-frame runtime streams shared between the game loop and providers.

    Each subject starts out holding ``None`` until the loop publishes its
    first value.
    """

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def window(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def clock(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    def window_size(self) -> tuple[int, int]:
        window = self.window.value
        if window is None:
            raise RuntimeError("No window has been published yet")
        return window.get_size()
