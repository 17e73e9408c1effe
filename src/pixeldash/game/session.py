"""Game session state and the per-tick simulation step.

``step`` only mutates the session it is handed and never touches a render
surface; drawing is a separate pass over the same session.
"""

import logging
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional

from pixeldash.game.collision import CollisionDetector
from pixeldash.game.commands import Command
from pixeldash.game.difficulty import DifficultyCurve, DifficultySample
from pixeldash.game.physics import Player, integrate, jump
from pixeldash.game.scoring import ScoreTracker
from pixeldash.game.spawner import Obstacle, ObstacleSpawner, new_sequence

logger = logging.getLogger(__name__)


@dataclass
class Playfield:
    """Surface bounds in pixels; the ground is the bottom edge."""

    width: int = 0
    height: int = 0

    @property
    def ground_y(self) -> float:
        return float(self.height)


@dataclass
class TickResult:
    """What happened during one step."""

    collided: bool = False
    hit: Optional[Obstacle] = None
    jumped: bool = False
    spawned: Optional[Obstacle] = None
    exited: int = 0
    milestones: List[int] = field(default_factory=list)


class GameSession:
    """Everything one run of the game owns."""

    def __init__(
        self,
        player: Player,
        playfield: Playfield,
        curve: DifficultyCurve,
        milestone_every: int = 10,
    ):
        self.player = player
        self.playfield = playfield
        self.curve = curve
        self.obstacles: Deque[Obstacle] = new_sequence()
        self.tracker = ScoreTracker(milestone_every)
        self.running = False
        self._sample: DifficultySample = curve.at(0)

    @property
    def score(self) -> int:
        return self.tracker.score

    @property
    def last_announced(self) -> int:
        return self.tracker.last_announced

    @property
    def difficulty(self) -> float:
        return self._sample.difficulty

    @property
    def speed(self) -> float:
        """Scroll speed used by the most recent tick (derived from score)."""
        return self._sample.speed

    @property
    def min_gap(self) -> float:
        return self._sample.min_gap

    def reset(self, playfield: Optional[Playfield] = None) -> None:
        """Fresh run: no obstacles, zero score, player standing on the ground."""
        if playfield is not None:
            self.playfield = playfield
        self.obstacles.clear()
        self.tracker.reset()
        self._sample = self.curve.at(0)
        self.player.place_on_ground(self.playfield.ground_y)
        self.running = True


def step(
    session: GameSession,
    spawner: ObstacleSpawner,
    detector: CollisionDetector,
    commands: Iterable[Command] = (),
) -> TickResult:
    """Advance the session by one fixed tick."""
    result = TickResult()
    if not session.running:
        return result

    player = session.player
    ground_y = session.playfield.ground_y

    for command in commands:
        if command is Command.JUMP and jump(player):
            result.jumped = True

    integrate(player, ground_y)

    sample = session.curve.at(session.score)
    session._sample = sample

    result.spawned = spawner.maybe_spawn(
        session.obstacles, session.playfield.width, sample.min_gap
    )

    for obstacle in session.obstacles:
        obstacle.x -= sample.speed
        if result.hit is None and detector.overlaps(player, obstacle, ground_y):
            result.hit = obstacle

    if result.hit is not None:
        # Score freezes at its value before the fatal tick
        result.collided = True
        session.running = False
        return result

    while session.obstacles and session.obstacles[0].right < 0:
        session.obstacles.popleft()
        result.exited += 1
        milestone = session.tracker.record_exit()
        if milestone is not None:
            result.milestones.append(milestone)

    return result
