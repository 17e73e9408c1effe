import pytest

from pixeldash.core.state import GameState
from pixeldash.game.commands import Command
from pixeldash.game.input import InputMapper
from pixeldash.game.runner import RunnerGame


@pytest.fixture
def game(settings, host, surface, event_bus, zero_rng):
    return RunnerGame(settings, host, surface, event_bus, rng=zero_rng)


@pytest.fixture
def mapper(game):
    return InputMapper(game)


def test_space_starts_from_overlay(mapper, game):
    assert mapper.space_key() is Command.START
    assert game.state == GameState.RUNNING


def test_space_jumps_while_running(mapper, game):
    game.start()
    assert mapper.space_key() is Command.JUMP
    assert len(game.commands) == 1


def test_space_with_focused_control_does_not_start(mapper, game):
    assert mapper.space_key(control_focused=True) is Command.JUMP
    assert game.state == GameState.IDLE


def test_pointer_on_control_starts(mapper, game):
    assert mapper.pointer_down(on_control=True) is Command.START
    assert game.state == GameState.RUNNING


def test_pointer_elsewhere_jumps(mapper, game):
    assert mapper.pointer_down() is Command.JUMP
    assert game.state == GameState.IDLE

    game.start()
    mapper.pointer_down()
    assert len(game.commands) == 1


def test_touch_on_control_is_left_to_click(mapper, game):
    assert mapper.touch_start(on_control=True) is None
    assert game.state == GameState.IDLE


def test_touch_jumps_while_running(mapper, game):
    game.start()
    assert mapper.touch_start() is Command.JUMP
    assert len(game.commands) == 1
