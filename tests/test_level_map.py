"""Tests for LevelMap queries and mutation."""

from pacmaze.model.cell import Cell
from pacmaze.model.level_map import LevelMap

from conftest import parse


def test_out_of_bounds_counts_as_wall():
    level_map = parse("O-O")
    assert level_map.is_wall(-1, 0)
    assert level_map.is_wall(3, 0)
    assert level_map.is_wall(1, 1)
    assert level_map.cell_at(5, 5) == Cell.WALL
    assert not level_map.is_wall(1, 0)


def test_eat_dot_is_idempotent():
    level_map = parse("O--O")
    assert level_map.count_dots() == 2

    level_map.eat_dot(1, 0)
    level_map.eat_dot(1, 0)
    level_map.eat_dot(0, 0)
    level_map.eat_dot(-4, 7)

    assert level_map.count_dots() == 1
    assert level_map.cell_at(1, 0) == Cell.EMPTY
    assert level_map.cell_at(0, 0) == Cell.WALL


def test_dot_positions_and_walkable_cells_are_row_major():
    level_map = parse("O-.", ".-O")
    assert level_map.dot_positions() == [(1, 0), (1, 1)]
    assert level_map.walkable_cells() == [(1, 0), (2, 0), (0, 1), (1, 1)]
    assert level_map.find_first_walkable() == (1, 0)


def test_find_first_walkable_without_open_cells():
    assert parse("OO", "OO").find_first_walkable() is None


def test_copy_is_independent():
    original = parse("name: a", "monsterStarts: 1,0", "O--O")
    clone = original.copy()
    clone.eat_dot(1, 0)
    clone.monster_starts.append((2, 0))

    assert original.count_dots() == 2
    assert original.monster_starts == [(1, 0)]
    assert clone.name == "a"


def test_rows_snapshot_is_read_only_copy():
    level_map = parse("O-O")
    rows = level_map.rows()
    level_map.eat_dot(1, 0)

    assert rows == ((Cell.WALL, Cell.DOT, Cell.WALL),)


def test_from_rows_pads_to_longest_row():
    level_map = LevelMap.from_rows([[Cell.WALL], [Cell.DOT, Cell.DOT, Cell.WALL]], name="x")
    assert (level_map.width, level_map.height) == (3, 2)
    assert level_map.cells[0] == [Cell.WALL, Cell.EMPTY, Cell.EMPTY]
    assert level_map.name == "x"
