"""Shared fixtures for PIXELDASH tests."""

import random

import pytest

from pixeldash.config.settings import GameSettings
from pixeldash.core.events import EventBus
from pixeldash.game.scheduler import FrameHost
from pixeldash.graphics.surface import RenderSurface

FRAME_MS = 17.0


class FixedRandom(random.Random):
    """Random source that always returns the same value."""

    def __init__(self, value: float = 0.0):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def run_frames(host: FrameHost, count: int, start_ms: float = 0.0,
               step_ms: float = FRAME_MS) -> float:
    """Fire ``count`` host frames ``step_ms`` apart. Returns the last time."""
    now = start_ms
    for _ in range(count):
        now += step_ms
        host.run_pending(now)
    return now


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings()


@pytest.fixture
def host() -> FrameHost:
    return FrameHost()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def surface() -> RenderSurface:
    return RenderSurface(400, 150)


@pytest.fixture
def zero_rng() -> FixedRandom:
    return FixedRandom(0.0)
