"""Shared fixtures and helpers for the pacmaze test suite."""

import pytest

from pacmaze.config.settings import GameSettings
from pacmaze.model.level_map import LevelMap
from pacmaze.service.map_parser import MapParser


def parse(*lines: str) -> LevelMap:
    return MapParser.parse("\n".join(lines))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings(random_player_spawn=False, countdown_seconds=0.0)


@pytest.fixture
def open_room() -> LevelMap:
    return parse(
        "monsters: 0",
        "OOOOOOO",
        "O-----O",
        "O-----O",
        "O-----O",
        "OOOOOOO",
    )


@pytest.fixture
def corridor() -> LevelMap:
    return parse(
        "monsters: 0",
        "OOOOOOO",
        "O-----O",
        "OOOOOOO",
    )
