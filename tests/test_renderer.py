import numpy as np

from pixeldash.game.difficulty import DifficultyCurve
from pixeldash.game.physics import Player
from pixeldash.game.session import GameSession, Playfield
from pixeldash.game.spawner import Obstacle
from pixeldash.graphics.palette import Palette
from pixeldash.graphics.renderer import draw
from pixeldash.graphics.surface import RenderSurface

PALETTE = Palette(player="#0000FF", obstacle="#FF0000", accent="#00FF00")


def make_session(width=400, height=150):
    session = GameSession(Player(), Playfield(width, height), DifficultyCurve())
    session.reset()
    return session


def test_draws_player_obstacle_and_score():
    surface = RenderSurface(400, 150)
    session = make_session()
    session.obstacles.append(Obstacle(200.0, 15, 30))

    draw(session, surface, PALETTE)

    buf = surface.buffer
    assert tuple(buf[140, 55]) == (0, 0, 255)    # player
    assert tuple(buf[140, 205]) == (255, 0, 0)   # obstacle
    assert tuple(buf[100, 205]) == (0, 0, 0)     # above obstacle
    score_region = buf[30:40, 300:400]
    assert np.any(np.all(score_region == (0, 255, 0), axis=2))


def test_draw_clears_previous_frame():
    surface = RenderSurface(400, 150)
    session = make_session()
    session.obstacles.append(Obstacle(200.0, 15, 30))
    draw(session, surface, PALETTE)

    session.obstacles[0].x = 100.0
    draw(session, surface, PALETTE)
    assert tuple(surface.buffer[140, 205]) == (0, 0, 0)


def test_zero_size_surface_is_noop():
    surface = RenderSurface(0, 0)
    draw(make_session(0, 0), surface, PALETTE)
    assert surface.is_empty
    surface.fill_rect(0, 0, 10, 10, (1, 2, 3))
    surface.draw_text("SCORE: 1", 0, 0, (1, 2, 3))


def test_offscreen_obstacle_is_clipped():
    surface = RenderSurface(100, 50)
    session = make_session(100, 50)
    session.obstacles.append(Obstacle(-10.0, 15, 20))
    draw(session, surface, PALETTE)
    assert tuple(surface.buffer[45, 2]) == (255, 0, 0)


def test_resize_replaces_buffer():
    surface = RenderSurface(10, 10, background=(5, 5, 5))
    surface.resize(20, 8)
    assert surface.buffer.shape == (8, 20, 3)
    assert tuple(surface.buffer[0, 0]) == (5, 5, 5)
