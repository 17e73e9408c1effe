"""Player vs obstacle overlap test."""

from typing import Iterable, Optional

from pixeldash.game.physics import Player
from pixeldash.game.spawner import Obstacle


class CollisionDetector:
    """Axis-aligned box test with a vertical forgiveness margin.

    The obstacle's top is treated as ``tolerance`` pixels lower than drawn,
    so a jump that barely clips the corner still clears it.
    """

    def __init__(self, tolerance: float = 5.0):
        self.tolerance = tolerance

    def overlaps(self, player: Player, obstacle: Obstacle, ground_y: float) -> bool:
        return (
            player.x < obstacle.x + obstacle.width
            and player.x + player.width > obstacle.x
            and player.y + player.height > ground_y - obstacle.height + self.tolerance
        )

    def first_hit(
        self,
        player: Player,
        obstacles: Iterable[Obstacle],
        ground_y: float,
    ) -> Optional[Obstacle]:
        for obstacle in obstacles:
            if self.overlaps(player, obstacle, ground_y):
                return obstacle
        return None
