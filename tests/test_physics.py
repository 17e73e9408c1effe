from pixeldash.game.physics import Player, integrate, jump

GROUND = 150.0


def grounded_player() -> Player:
    player = Player()
    player.place_on_ground(GROUND)
    return player


def test_jump_from_ground_applies_impulse():
    player = grounded_player()
    assert jump(player) is True
    assert player.vy == -9.0
    assert player.grounded is False


def test_jump_while_airborne_is_ignored():
    player = grounded_player()
    jump(player)
    integrate(player, GROUND)
    vy = player.vy

    assert jump(player) is False
    assert player.vy == vy


def test_resting_player_stays_clamped():
    player = grounded_player()
    for _ in range(5):
        integrate(player, GROUND)
    assert player.y == GROUND - player.height
    assert player.vy == 0.0
    assert player.grounded is True


def test_first_airborne_tick():
    player = grounded_player()
    jump(player)
    integrate(player, GROUND)
    assert player.vy == -8.5
    assert player.y == GROUND - player.height - 8.5
    assert player.grounded is False


def test_jump_arc_lands_and_never_sinks_below_ground():
    player = grounded_player()
    jump(player)
    for _ in range(60):
        integrate(player, GROUND)
        assert player.y + player.height <= GROUND
    assert player.grounded is True
    assert player.y == GROUND - player.height


def test_falling_player_is_clamped_to_ground():
    player = Player(y=120.0, vy=40.0)
    integrate(player, GROUND)
    assert player.y == 130.0
    assert player.vy == 0.0
    assert player.grounded is True
