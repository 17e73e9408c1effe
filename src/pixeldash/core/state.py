"""
State machine for the runner's game flow.

States:
    IDLE: Nothing played yet, start control visible
    RUNNING: Simulation ticking, jump input honoured
    GAME_OVER: Session frozen after a collision, retry control visible
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states."""
    IDLE = auto()
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass
class StateContext:
    """Context data carried across transitions."""
    final_score: int | None = None
    games_played: int = 0


StateListener = Callable[[GameState, GameState, StateContext], None]


class GameStateMachine:
    """
    Manages game state and transitions.

    Only the transitions listed in VALID_TRANSITIONS are accepted; anything
    else is rejected with a warning and leaves the state untouched.
    """

    VALID_TRANSITIONS: list[tuple[GameState, GameState]] = [
        (GameState.IDLE, GameState.RUNNING),       # Start
        (GameState.RUNNING, GameState.GAME_OVER),  # Collision
        (GameState.GAME_OVER, GameState.RUNNING),  # Retry
    ]

    def __init__(self, initial_state: GameState = GameState.IDLE) -> None:
        self._state = initial_state
        self._context = StateContext()
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"GameStateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameState:
        """Get current state."""
        return self._state

    @property
    def context(self) -> StateContext:
        """Get current context."""
        return self._context

    @property
    def is_running(self) -> bool:
        return self._state == GameState.RUNNING

    def can_transition(self, to_state: GameState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameState, **context_updates) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state
            **context_updates: Updates to apply to context

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        for key, value in context_updates.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

        if to_state == GameState.RUNNING:
            self._context.games_played += 1
            self._context.final_score = None

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            try:
                listener(old_state, to_state, self._context)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
