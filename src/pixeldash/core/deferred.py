"""Cancellable deferred callbacks on the asyncio loop."""

import asyncio
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class DeferredTask:
    """A single-slot delayed callback.

    Scheduling again supersedes the pending call: the old timer handle is
    cancelled and its completion token is retired, so a callback that was
    already dequeued by the loop still refuses to run.
    """

    def __init__(self, delay_s: float, callback: Callable[..., Any]) -> None:
        self.delay_s = delay_s
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._token = 0
        self._pending_token: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self._pending_token is not None

    def schedule(self, *args: Any) -> int:
        """Schedule the callback, cancelling any pending one.

        Must be called from within a running event loop.

        Returns:
            Completion token of the new pending call
        """
        self.cancel()
        loop = asyncio.get_running_loop()
        self._token += 1
        token = self._token
        self._pending_token = token
        self._handle = loop.call_later(self.delay_s, self._complete, token, args)
        return token

    def cancel(self) -> bool:
        """Cancel the pending call. Returns True if one was pending."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        was_pending = self._pending_token is not None
        self._pending_token = None
        return was_pending

    def _complete(self, token: int, args: tuple) -> None:
        if token != self._pending_token:
            logger.debug(f"Dropping stale deferred completion {token}")
            return
        self._pending_token = None
        self._handle = None
        self._callback(*args)
