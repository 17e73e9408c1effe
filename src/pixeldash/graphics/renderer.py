"""Draws a game session onto a render surface."""

from pixeldash.game.session import GameSession
from pixeldash.graphics.palette import Palette
from pixeldash.graphics.surface import RenderSurface

SCORE_OFFSET_X = 100
SCORE_Y = 30


def draw(session: GameSession, surface: RenderSurface, palette: Palette) -> None:
    """Render player, obstacles and the score readout.

    Reads the session only; the simulation never depends on this.
    """
    surface.clear()
    if surface.is_empty:
        return

    ground_y = session.playfield.ground_y
    player = session.player
    surface.fill_rect(player.x, player.y, player.width, player.height,
                      palette.to_rgb("player"))

    obstacle_color = palette.to_rgb("obstacle")
    for obstacle in session.obstacles:
        surface.fill_rect(obstacle.x, ground_y - obstacle.height,
                          obstacle.width, obstacle.height, obstacle_color)

    surface.draw_text(f"SCORE: {session.score}",
                      surface.width - SCORE_OFFSET_X, SCORE_Y,
                      palette.to_rgb("accent"))
