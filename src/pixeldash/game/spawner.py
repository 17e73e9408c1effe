"""Procedural obstacle generation."""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from ..config.settings import SpawnerSettings

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """Ground-standing block. ``x`` is its left edge."""

    x: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width


class ObstacleSpawner:
    """Appends obstacles at the right edge using a jittered gap rule.

    Every call draws a fresh jitter in ``[0, jitter_range)``; a new obstacle
    appears once the last one has travelled further than ``min_gap + jitter``
    from the right edge. Gaps are therefore random but never below
    ``min_gap``.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        jitter_range: float = 150.0,
        min_width: float = 15.0,
        width_range: float = 10.0,
        min_height: float = 20.0,
        height_range: float = 20.0,
        empty_distance: float = 9999.0,
    ):
        self.rng = rng or random.Random()
        self.jitter_range = jitter_range
        self.min_width = min_width
        self.width_range = width_range
        self.min_height = min_height
        self.height_range = height_range
        self.empty_distance = empty_distance

    @classmethod
    def from_settings(cls, settings: SpawnerSettings, rng: Optional[random.Random] = None) -> "ObstacleSpawner":
        return cls(
            rng=rng,
            jitter_range=settings.jitter_range,
            min_width=settings.min_width,
            width_range=settings.width_range,
            min_height=settings.min_height,
            height_range=settings.height_range,
            empty_distance=settings.empty_distance,
        )

    def distance(self, obstacles: Deque[Obstacle], surface_width: float) -> float:
        """Distance the newest obstacle has travelled from the right edge."""
        if not obstacles:
            return self.empty_distance
        return surface_width - obstacles[-1].x

    def maybe_spawn(
        self,
        obstacles: Deque[Obstacle],
        surface_width: float,
        min_gap: float,
    ) -> Optional[Obstacle]:
        """Append at most one obstacle. Returns it, or None."""
        dist = self.distance(obstacles, surface_width)
        jitter = self.rng.random() * self.jitter_range
        if dist <= min_gap + jitter:
            return None

        obstacle = Obstacle(
            x=float(surface_width),
            width=self.min_width + self.rng.random() * self.width_range,
            height=self.min_height + self.rng.random() * self.height_range,
        )
        obstacles.append(obstacle)
        logger.debug(
            f"Spawned obstacle {obstacle.width:.1f}x{obstacle.height:.1f} "
            f"(dist={dist:.1f}, min_gap={min_gap:.1f})"
        )
        return obstacle


def new_sequence() -> Deque[Obstacle]:
    return deque()
