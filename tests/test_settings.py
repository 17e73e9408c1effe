import pytest

from pixeldash.config.settings import GameSettings, Settings


def test_defaults():
    settings = GameSettings()
    assert settings.fps == 60
    assert settings.frame_duration_ms == pytest.approx(1000 / 60)
    assert settings.collision_tolerance == 5.0
    assert settings.physics.gravity == 0.5
    assert settings.physics.jump_impulse == -9.0
    assert settings.spawner.jitter_range == 150.0
    assert settings.difficulty.gap_speed_factor == 22.0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PIXELDASH_DEBUG", "true")
    monkeypatch.setenv("PIXELDASH_GAME__SEED", "7")
    monkeypatch.setenv("PIXELDASH_GAME__COLLISION_TOLERANCE", "3")

    settings = Settings()

    assert settings.debug is True
    assert settings.game.seed == 7
    assert settings.game.collision_tolerance == 3.0


def test_validation():
    with pytest.raises(ValueError):
        GameSettings(fps=0)


def test_palettes_file_is_bundled():
    assert Settings().palettes_path.is_file()
