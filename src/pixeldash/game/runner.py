"""Runner game: wires the simulation, scheduler, state machine and renderer.

Public entry points mirror what the host page calls: ``start``/``reset``,
``stop`` (normally triggered by a collision), ``resize`` and
``update_palette``. Inputs arrive as commands through ``submit``; the
state machine decides whether they have any effect.
"""

import logging
import random
from typing import Optional, Tuple

from pixeldash.config.settings import GameSettings
from pixeldash.core.events import (
    Event,
    EventBus,
    EventType,
    game_over_event,
    game_started_event,
    milestone_event,
)
from pixeldash.core.state import GameState, GameStateMachine
from pixeldash.game.collision import CollisionDetector
from pixeldash.game.commands import Command, CommandQueue
from pixeldash.game.difficulty import DifficultyCurve
from pixeldash.game.physics import Player
from pixeldash.game.scheduler import FrameHost, FrameScheduler
from pixeldash.game.session import GameSession, Playfield, TickResult, step
from pixeldash.game.spawner import ObstacleSpawner
from pixeldash.graphics.palette import Palette
from pixeldash.graphics.renderer import draw
from pixeldash.graphics.surface import RenderSurface

logger = logging.getLogger(__name__)

START_LABEL = "START"
RETRY_LABEL = "RETRY"


class RunnerGame:
    """One embedded runner instance."""

    def __init__(
        self,
        settings: GameSettings,
        host: FrameHost,
        surface: RenderSurface,
        event_bus: EventBus,
        rng: Optional[random.Random] = None,
        palette: Optional[Palette] = None,
    ) -> None:
        self.settings = settings
        self.surface = surface
        self.event_bus = event_bus
        self.palette = palette or Palette()

        self.state_machine = GameStateMachine()
        self.curve = DifficultyCurve.from_settings(settings.difficulty)
        self.spawner = ObstacleSpawner.from_settings(
            settings.spawner, rng or random.Random(settings.seed)
        )
        self.detector = CollisionDetector(settings.collision_tolerance)
        self.scheduler = FrameScheduler(host, self._tick, settings.frame_duration_ms)
        self.commands = CommandQueue()

        self.session: Optional[GameSession] = None
        self.last_result: Optional[TickResult] = None
        self._pending_bounds: Optional[Tuple[int, int]] = None

        # Overlay with the start/retry control
        self.overlay_visible = True
        self.overlay_text = ""
        self.control_label = START_LABEL

        logger.info("RunnerGame created")

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def is_running(self) -> bool:
        return self.state_machine.is_running

    @property
    def score(self) -> int:
        return self.session.score if self.session else 0

    # Commands

    def submit(self, command: Command) -> bool:
        """Route an input command. Returns True if it had an effect."""
        if command is Command.START:
            return self.start()
        if command is Command.JUMP:
            return self.jump()
        return False

    def jump(self) -> bool:
        """Queue a jump for the next tick; ignored outside RUNNING."""
        if not self.is_running:
            logger.debug(f"Jump ignored in {self.state.name}")
            return False
        self.commands.push(Command.JUMP)
        return True

    def start(self) -> bool:
        """Start a new run from IDLE or retry from GAME_OVER."""
        if self.is_running:
            logger.debug("Start ignored, already running")
            return False

        if self._pending_bounds is not None:
            self.surface.resize(*self._pending_bounds)
            self._pending_bounds = None
        playfield = Playfield(self.surface.width, self.surface.height)
        if self.session is None:
            physics = self.settings.physics
            player = Player(
                x=physics.player_x,
                width=physics.player_width,
                height=physics.player_height,
                jump_impulse=physics.jump_impulse,
                gravity=physics.gravity,
            )
            self.session = GameSession(
                player, playfield, self.curve, self.settings.milestone_every
            )
        self.session.reset(playfield)
        self.commands.clear()
        self.last_result = None

        if not self.state_machine.transition(GameState.RUNNING):
            return False

        self.overlay_visible = False
        self.scheduler.start()
        self.event_bus.emit(game_started_event())
        return True

    reset = start

    def stop(self) -> bool:
        """End the run: freeze the session and show the retry control."""
        if not self.is_running:
            return False

        self.scheduler.stop()
        self._apply_pending_bounds()
        self.commands.clear()
        score = self.score
        if self.session is not None:
            self.session.running = False

        self.state_machine.transition(GameState.GAME_OVER, final_score=score)
        self.overlay_visible = True
        self.overlay_text = f"SCORE: {score}"
        self.control_label = RETRY_LABEL
        self.event_bus.emit(game_over_event(score))
        return True

    # Host collaborators

    def resize(self, width: int, height: int) -> None:
        """New surface bounds. Applied at the next tick boundary while running."""
        if self.is_running:
            self._pending_bounds = (width, height)
        else:
            self.surface.resize(width, height)
            self.surface.clear()
        self.event_bus.emit(Event(
            EventType.RESIZED, data={"width": width, "height": height}, source="host"
        ))

    def update_palette(self, palette: Palette) -> None:
        """Swap colours without touching session state."""
        self.palette = palette
        if not self.is_running:
            self.surface.clear()

    # Tick

    def _apply_pending_bounds(self) -> None:
        if self._pending_bounds is None:
            return
        width, height = self._pending_bounds
        self._pending_bounds = None
        self.surface.resize(width, height)
        self.session.playfield = Playfield(self.surface.width, self.surface.height)

    def _tick(self, now_ms: float) -> None:
        if not self.is_running or self.session is None:
            return

        self._apply_pending_bounds()
        result = step(self.session, self.spawner, self.detector, self.commands.drain())
        self.last_result = result

        for score in result.milestones:
            self.event_bus.emit(milestone_event(score))

        draw(self.session, self.surface, self.palette)

        if result.collided:
            self.stop()
