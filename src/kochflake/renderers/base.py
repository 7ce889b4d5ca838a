from __future__ import annotations

import time
from typing import Generic, TypeVar

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from kochflake.runtime.providers import ObservableProvider, StaticStateProvider
from kochflake.runtime.streams import FrameStreams
from kochflake.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class StatefulBaseRenderer(Generic[StateT]):
    """Renderer that draws the latest snapshot emitted by its provider."""

    def __init__(
        self,
        builder: ObservableProvider[StateT] | None = None,
        state: StateT | None = None,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("StatefulBaseRenderer accepts a builder or state, not both")
        if builder is None and state is not None:
            builder = StaticStateProvider(state)
        if builder is None:
            raise ValueError("StatefulBaseRenderer requires a builder or state")

        self.builder = builder
        self.initialized = False
        self._state: StateT | None = None
        self._subscription: Disposable | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    def is_initialized(self) -> bool:
        return self.initialized

    def state_observable(self, streams: FrameStreams) -> Observable[StateT]:
        return self.builder.observable()

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: FrameStreams,
    ) -> None:
        logger.info("Subscribing %s to its state provider", self.name)
        observable = self.state_observable(streams)
        self._subscription = observable.subscribe(on_next=self.set_state)
        self.initialized = True

    def process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        if not self.is_initialized():
            raise ValueError("Needs to be initialized")

        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        raise NotImplementedError("Please implement")

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.initialized = False
