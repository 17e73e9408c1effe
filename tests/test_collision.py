import pytest

from pixeldash.game.collision import CollisionDetector
from pixeldash.game.physics import Player
from pixeldash.game.spawner import Obstacle

GROUND = 200.0


@pytest.fixture
def detector():
    return CollisionDetector(tolerance=5.0)


def player_with_bottom(bottom: float) -> Player:
    player = Player(x=50.0, width=20.0, height=20.0)
    player.y = bottom - player.height
    return player


def test_grounded_player_hits_overlapping_obstacle(detector):
    player = player_with_bottom(GROUND)
    assert detector.overlaps(player, Obstacle(x=60.0, width=15, height=30), GROUND)


def test_tolerance_line(detector):
    obstacle = Obstacle(x=55.0, width=15, height=30)
    line = GROUND - obstacle.height + 5.0  # 175

    assert not detector.overlaps(player_with_bottom(line - 1), obstacle, GROUND)
    assert not detector.overlaps(player_with_bottom(line), obstacle, GROUND)
    assert detector.overlaps(player_with_bottom(line + 0.5), obstacle, GROUND)


def test_horizontal_separation(detector):
    player = player_with_bottom(GROUND)
    # Touching edges do not count
    assert not detector.overlaps(player, Obstacle(x=70.0, width=15, height=30), GROUND)
    assert not detector.overlaps(player, Obstacle(x=35.0, width=15, height=30), GROUND)
    assert detector.overlaps(player, Obstacle(x=35.5, width=15, height=30), GROUND)


def test_zero_tolerance_is_plain_aabb():
    detector = CollisionDetector(tolerance=0.0)
    obstacle = Obstacle(x=55.0, width=15, height=30)
    assert detector.overlaps(player_with_bottom(GROUND - 29), obstacle, GROUND)


def test_first_hit_returns_first_overlap(detector):
    player = player_with_bottom(GROUND)
    far = Obstacle(x=300.0, width=15, height=30)
    hit_a = Obstacle(x=50.0, width=15, height=30)
    hit_b = Obstacle(x=60.0, width=15, height=30)
    assert detector.first_hit(player, [far, hit_a, hit_b], GROUND) is hit_a
    assert detector.first_hit(player, [far], GROUND) is None
