"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups can be overridden with a double underscore, e.g.
``PIXELDASH_GAME__PHYSICS__GRAVITY=0.6``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhysicsSettings(BaseSettings):
    """Player kinematics (per-tick units)."""

    gravity: float = Field(default=0.5, gt=0.0)
    jump_impulse: float = Field(default=-9.0, lt=0.0)

    # Player box, x is fixed for the whole session
    player_x: float = 50.0
    player_width: float = Field(default=20.0, gt=0.0)
    player_height: float = Field(default=20.0, gt=0.0)


class DifficultySettings(BaseSettings):
    """Score -> speed / spawn gap curve."""

    score_span: int = Field(default=100, gt=0)  # score at which difficulty saturates
    base_speed: float = 3.0
    speed_range: float = 5.0
    gap_speed_factor: float = 22.0
    base_gap: float = 100.0


class SpawnerSettings(BaseSettings):
    """Obstacle generation."""

    jitter_range: float = Field(default=150.0, ge=0.0)
    min_width: float = 15.0
    width_range: float = 10.0
    min_height: float = 20.0
    height_range: float = 20.0

    # Distance reported when no obstacle is on screen
    empty_distance: float = 9999.0


class GameSettings(BaseSettings):
    """Simulation settings."""

    fps: int = Field(default=60, gt=0)
    collision_tolerance: float = Field(default=5.0, ge=0.0)
    milestone_every: int = Field(default=10, gt=0)
    seed: Optional[int] = None

    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    difficulty: DifficultySettings = Field(default_factory=DifficultySettings)
    spawner: SpawnerSettings = Field(default_factory=SpawnerSettings)

    @property
    def frame_duration_ms(self) -> float:
        """Minimum wall-clock time between two accepted ticks."""
        return 1000.0 / self.fps


class WindowSettings(BaseSettings):
    """Simulator window settings."""

    width: int = 800
    height: int = 240
    title: str = "PIXELDASH"
    # Host callback cadence; deliberately faster than the game tick rate
    host_fps: int = Field(default=120, gt=0)
    prefers_dark: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PIXELDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    config_path: Path = Field(default_factory=lambda: Path(__file__).parent)

    game: GameSettings = Field(default_factory=GameSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)

    @property
    def palettes_path(self) -> Path:
        """Path to the named palette definitions."""
        return self.config_path / "palettes.yaml"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
