"""Player vertical kinematics."""

from dataclasses import dataclass


@dataclass
class Player:
    """The runner's box. ``x`` never changes during a session."""

    x: float = 50.0
    y: float = 0.0
    width: float = 20.0
    height: float = 20.0
    vy: float = 0.0
    jump_impulse: float = -9.0
    gravity: float = 0.5
    grounded: bool = False

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    def place_on_ground(self, ground_y: float) -> None:
        self.y = ground_y - self.height
        self.vy = 0.0
        self.grounded = True


def integrate(player: Player, ground_y: float) -> None:
    """Advance one tick: gravity, position, ground clamp."""
    player.vy += player.gravity
    player.y += player.vy

    if player.y + player.height >= ground_y:
        player.y = ground_y - player.height
        player.vy = 0.0
        player.grounded = True
    else:
        player.grounded = False


def jump(player: Player) -> bool:
    """Apply the jump impulse if standing on the ground.

    Airborne requests are dropped, there is no double jump and nothing is
    buffered for landing.

    Returns:
        True if the jump was applied
    """
    if not player.grounded:
        return False
    player.vy = player.jump_impulse
    player.grounded = False
    return True
