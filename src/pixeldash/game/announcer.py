"""Accessibility announcements.

Turns game events into short plain-text messages and hands them to a sink
(a screen-reader live region on the web, an on-screen line in the
simulator). Fire-and-forget.
"""

import logging
from collections import deque
from typing import Callable, Deque, Optional

from pixeldash.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)

AnnouncerSink = Callable[[str], None]


def format_announcement(event: Event) -> Optional[str]:
    data = event.data
    if event.type == EventType.GAME_STARTED:
        return "Game started! Press space or tap to jump over obstacles."
    if event.type == EventType.SCORE_MILESTONE:
        return f"Score: {data['score']}"
    if event.type == EventType.GAME_OVER:
        return (
            f"Game over! Final score: {data['score']}. "
            "Press the retry button or space to play again."
        )
    if event.type == EventType.THEME_CHANGED:
        name = str(data.get("name", ""))
        text = f"Theme changed to {name[:1].upper()}{name[1:]}."
        complaint = data.get("complaint")
        return f"{text} {complaint}" if complaint else text
    return None


class Announcer:
    """Subscribes to the event bus and forwards messages to a sink."""

    EVENT_TYPES = (
        EventType.GAME_STARTED,
        EventType.SCORE_MILESTONE,
        EventType.GAME_OVER,
        EventType.THEME_CHANGED,
    )

    def __init__(self, event_bus: EventBus, sink: Optional[AnnouncerSink] = None):
        self._sink = sink
        self.messages: Deque[str] = deque(maxlen=50)
        self._unsubscribers = [
            event_bus.subscribe(event_type, self._on_event)
            for event_type in self.EVENT_TYPES
        ]

    @property
    def last_message(self) -> str:
        return self.messages[-1] if self.messages else ""

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _on_event(self, event: Event) -> None:
        text = format_announcement(event)
        if text is None:
            return
        self.messages.append(text)
        logger.info(f"Announce: {text}")
        if self._sink is not None:
            self._sink(text)
