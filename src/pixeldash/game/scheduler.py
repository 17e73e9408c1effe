"""Frame gate between the host's frame callbacks and simulation ticks.

The host (a browser-style ``requestAnimationFrame`` loop, or the pygame
simulator window) calls back at whatever cadence it likes. The scheduler
accepts at most one tick per frame duration and otherwise simply asks for
the next callback: slow hosts get fewer ticks, never catch-up ticks.
"""

import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameHost:
    """Host-side frame callback registry.

    Mirrors ``requestAnimationFrame``: a registered callback runs once, on
    the next call to ``run_pending``. Callbacks registered while pending
    callbacks are running wait for the following frame.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[int, FrameCallback] = {}
        self._next_handle = 1

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._callbacks.pop(handle, None)

    def run_pending(self, now_ms: float) -> int:
        """Invoke every callback registered before this frame.

        Returns:
            Number of callbacks invoked
        """
        callbacks, self._callbacks = self._callbacks, {}
        for callback in callbacks.values():
            callback(now_ms)
        return len(callbacks)


class FrameScheduler:
    """Fixed-rate tick gate with generation-based cancellation."""

    def __init__(
        self,
        host: FrameHost,
        tick: Callable[[float], None],
        frame_duration_ms: float = 1000.0 / 60,
    ) -> None:
        self.host = host
        self.frame_duration_ms = frame_duration_ms
        self._tick = tick
        self._running = False
        self._generation = 0
        self._handle: int | None = None
        self.last_tick_ms = 0.0
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def generation(self) -> int:
        return self._generation

    def start(self) -> None:
        """(Re)start ticking with a fresh frame timer.

        Bumps the generation so callbacks registered by an earlier run can
        never tick again, even if the host still holds them.
        """
        self.stop()
        self._generation += 1
        self._running = True
        self.last_tick_ms = 0.0
        self._request(self._generation)
        logger.debug(f"Scheduler started (generation {self._generation})")

    def stop(self) -> None:
        """Prevent any further tick or re-registration."""
        if self._handle is not None:
            self.host.cancel_frame(self._handle)
            self._handle = None
        if self._running:
            logger.debug(f"Scheduler stopped (generation {self._generation})")
        self._running = False

    def _request(self, generation: int) -> None:
        self._handle = self.host.request_frame(
            lambda now_ms: self._on_frame(now_ms, generation)
        )

    def _on_frame(self, now_ms: float, generation: int) -> None:
        if not self._running or generation != self._generation:
            return
        self._handle = None

        if now_ms - self.last_tick_ms < self.frame_duration_ms:
            self._request(generation)
            return

        self.last_tick_ms = now_ms
        self.ticks += 1
        self._tick(now_ms)

        # The tick may have stopped (game over) or restarted us
        if self._running and generation == self._generation and self._handle is None:
            self._request(generation)
