"""Core framework components for PIXELDASH."""

from .state import GameState, GameStateMachine
from .events import EventBus, Event, EventType
from .deferred import DeferredTask

__all__ = [
    "GameState",
    "GameStateMachine",
    "EventBus",
    "Event",
    "EventType",
    "DeferredTask",
]
