"""Property checks on randomly carved maps with seeded RNGs."""

import random

import pytest

from pacmaze.config.settings import GameSettings
from pacmaze.controller.game import Game
from pacmaze.model.cell import Cell
from pacmaze.model.level_map import LevelMap
from pacmaze.service.map_parser import MapParser
from pacmaze.service.map_validator import MapValidator
from pacmaze.service.pathing import PathingService

from conftest import FakeClock

_CHARS = {Cell.WALL: "O", Cell.DOT: "-", Cell.EMPTY: " "}


def carve_map(rng: random.Random, width: int = 11, height: int = 9, steps: int = 120) -> LevelMap:
    cells = [[Cell.WALL] * width for _ in range(height)]
    for x in (1, 2, 3):
        cells[1][x] = Cell.DOT
    x, y = 1, 1
    for _ in range(steps):
        dx, dy = rng.choice(((1, 0), (-1, 0), (0, 1), (0, -1)))
        if 1 <= x + dx <= width - 2 and 1 <= y + dy <= height - 2:
            x, y = x + dx, y + dy
            cells[y][x] = Cell.DOT
    return LevelMap.from_rows(cells, monster_count=2)


def to_text(level_map: LevelMap) -> str:
    return "\n".join("".join(_CHARS[cell] for cell in row) for row in level_map.cells)


@pytest.mark.parametrize("seed", range(20))
def test_carved_maps_are_valid_and_dots_connected(seed):
    level_map = carve_map(random.Random(seed))
    MapValidator.validate(level_map)

    dots = level_map.dot_positions()
    reachable = PathingService.reachable_set(level_map, dots[0])
    assert set(dots) <= reachable


@pytest.mark.parametrize("seed", range(10))
def test_text_round_trip_keeps_dimensions(seed):
    level_map = carve_map(random.Random(seed))
    parsed = MapParser.parse("monsters: 2\n" + to_text(level_map))

    assert (parsed.width, parsed.height) == (level_map.width, level_map.height)
    assert parsed.cells == level_map.cells


@pytest.mark.parametrize("seed", range(15))
def test_random_play_keeps_invariants(seed):
    rng = random.Random(seed)
    clock = FakeClock()
    game = Game(
        [carve_map(rng)],
        settings=GameSettings(lives=5),
        rng=random.Random(seed),
        clock=clock,
    )
    level_map = game.current()
    last_score = game.score
    last_dots = level_map.count_dots()

    for _ in range(300):
        if rng.random() < 0.3:
            game.handle_input(rng.choice("wasd"))
        game.update()
        clock.advance(0.3)

        x, y = game.player.position
        assert level_map.in_bounds(x, y)
        assert not level_map.is_wall(x, y)
        positions = [monster.position for monster in game.monsters]
        assert len(positions) == len(set(positions))
        assert all(not level_map.is_wall(*pos) for pos in positions)
        assert game.score >= last_score
        assert level_map.count_dots() <= last_dots
        assert 0 <= game.lives <= 5

        last_score = game.score
        last_dots = level_map.count_dots()
        if game.game_over or game.level_completed:
            break
