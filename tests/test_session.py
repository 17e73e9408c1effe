import pytest

from pixeldash.game.collision import CollisionDetector
from pixeldash.game.commands import Command
from pixeldash.game.difficulty import DifficultyCurve
from pixeldash.game.physics import Player
from pixeldash.game.session import GameSession, Playfield, step
from pixeldash.game.spawner import Obstacle, ObstacleSpawner
from tests.conftest import FixedRandom


@pytest.fixture
def session():
    session = GameSession(Player(), Playfield(400, 150), DifficultyCurve())
    session.reset()
    return session


@pytest.fixture
def quiet_spawner():
    # Jitter of 1.0 * huge range never lets a spawn through
    return ObstacleSpawner(rng=FixedRandom(0.999), jitter_range=1e9, empty_distance=0.0)


@pytest.fixture
def detector():
    return CollisionDetector()


def test_reset_places_player_on_ground(session):
    assert session.player.y == 150 - session.player.height
    assert session.player.vy == 0.0
    assert session.score == 0
    assert session.speed == 3.0
    assert session.running is True


def test_obstacles_move_left_by_speed(session, quiet_spawner, detector):
    session.obstacles.extend([Obstacle(200.0, 15, 20), Obstacle(350.0, 15, 20)])
    step(session, quiet_spawner, detector)
    assert [o.x for o in session.obstacles] == [197.0, 347.0]


def test_obstacle_past_left_edge_scores_once(session, quiet_spawner, detector):
    # Right edge at -1 before the tick
    session.obstacles.append(Obstacle(-16.0, 15, 20))
    result = step(session, quiet_spawner, detector)

    assert result.exited == 1
    assert session.score == 1
    assert not session.obstacles


def test_obstacle_crossing_during_tick_scores(session, quiet_spawner, detector):
    # Right edge at 2, speed 3 carries it to -1
    session.obstacles.append(Obstacle(-13.0, 15, 20))
    step(session, quiet_spawner, detector)
    assert session.score == 1


def test_partially_visible_obstacle_is_kept(session, quiet_spawner, detector):
    session.obstacles.append(Obstacle(-1.0, 15, 20))
    step(session, quiet_spawner, detector)
    assert session.score == 0
    assert len(session.obstacles) == 1


def test_spawning_does_not_score(session, zero_rng, detector):
    spawner = ObstacleSpawner(rng=zero_rng)
    result = step(session, spawner, detector)
    assert result.spawned is not None
    assert session.score == 0


def test_milestone_reported_from_step(session, quiet_spawner, detector):
    session.tracker.score = 9
    session.obstacles.append(Obstacle(-30.0, 15, 20))
    result = step(session, quiet_spawner, detector)
    assert result.milestones == [10]


def test_collision_stops_session_and_freezes_score(session, quiet_spawner, detector):
    session.obstacles.extend([Obstacle(-30.0, 15, 20), Obstacle(55.0, 15, 30)])
    result = step(session, quiet_spawner, detector)

    assert result.collided is True
    assert result.hit is session.obstacles[1]
    assert session.running is False
    assert session.score == 0
    # Every obstacle still advanced this tick
    assert [o.x for o in session.obstacles] == [-33.0, 52.0]


def test_jump_command_applied_before_integration(session, quiet_spawner, detector):
    result = step(session, quiet_spawner, detector, [Command.JUMP, Command.JUMP])
    assert result.jumped is True
    assert session.player.vy == -8.5
    assert session.player.grounded is False


def test_step_is_noop_when_not_running(session, quiet_spawner, detector):
    session.running = False
    session.obstacles.append(Obstacle(200.0, 15, 20))
    step(session, quiet_spawner, detector)
    assert session.obstacles[0].x == 200.0


def test_speed_follows_score(session, quiet_spawner, detector):
    session.tracker.score = 100
    step(session, quiet_spawner, detector)
    assert session.speed == 8.0
    assert session.min_gap == 176.0
