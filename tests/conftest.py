from __future__ import annotations

import random

import pytest

from space_shooter.config import GameSettings
from space_shooter.world import ShooterWorld


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def settings() -> GameSettings:
    return GameSettings()


@pytest.fixture()
def world(clock: FakeClock, settings: GameSettings) -> ShooterWorld:
    return ShooterWorld(clock.now, settings=settings, rng=random.Random(1234))
