"""
Event bus system for PIXELDASH.

Provides pub/sub messaging between the game and its collaborators
(announcer, simulator window).
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Game flow
    GAME_STARTED = auto()
    GAME_OVER = auto()
    SCORE_MILESTONE = auto()

    # Host events
    THEME_CHANGED = auto()
    RESIZED = auto()

    # System events
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Handlers run synchronously, in subscription order; a failing handler
    is logged and does not stop the others.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event to its subscribers immediately."""
        self._add_to_history(event)
        self._dispatch(event)

    def _dispatch(self, event: Event) -> None:
        """Dispatch event to type handlers, then global handlers."""
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")


    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


# Convenience functions for creating common events
def game_started_event(source: str = "game") -> Event:
    """Create a game-started event."""
    return Event(EventType.GAME_STARTED, source=source)


def game_over_event(score: int, source: str = "game") -> Event:
    """Create a game-over event carrying the final score."""
    return Event(EventType.GAME_OVER, data={"score": score}, source=source)


def milestone_event(score: int, source: str = "game") -> Event:
    """Create a score milestone event."""
    return Event(EventType.SCORE_MILESTONE, data={"score": score}, source=source)


def theme_changed_event(name: str, complaint: str = "", source: str = "theme") -> Event:
    """Create a theme change event."""
    return Event(
        EventType.THEME_CHANGED,
        data={"name": name, "complaint": complaint},
        source=source,
    )
