"""Configuration for PIXELDASH."""

from pixeldash.config.settings import (
    Settings,
    GameSettings,
    PhysicsSettings,
    DifficultySettings,
    SpawnerSettings,
    WindowSettings,
    get_settings,
)

__all__ = [
    "Settings",
    "GameSettings",
    "PhysicsSettings",
    "DifficultySettings",
    "SpawnerSettings",
    "WindowSettings",
    "get_settings",
]
