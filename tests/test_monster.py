"""Tests for monster chase behaviour."""

from pacmaze.model.cell import Direction
from pacmaze.model.monster import Monster, is_occupied_by_monster

from conftest import parse


def test_keeps_heading_while_path_is_open(corridor):
    monster = Monster(3, 1, Direction.RIGHT)
    monster.move(corridor, (1, 1), [monster])
    assert monster.position == (4, 1)
    assert monster.direction == Direction.RIGHT


def test_turns_towards_player_when_blocked(corridor):
    monster = Monster(5, 1, Direction.UP)
    monster.move(corridor, (1, 1), [monster])
    assert monster.direction == Direction.LEFT
    assert monster.position == (4, 1)


def test_picks_closest_neighbour(open_room):
    monster = Monster(2, 1, Direction.UP)
    assert monster.choose_direction(open_room, (1, 1), [monster]) == Direction.LEFT


def test_ties_resolved_in_scan_order(open_room):
    # UP and RIGHT are both one step from the player
    monster = Monster(2, 3, Direction.DOWN)
    assert monster.choose_direction(open_room, (3, 2), [monster]) == Direction.UP


def test_other_monsters_block_path(corridor):
    blocker = Monster(3, 1, Direction.UP)
    monster = Monster(4, 1, Direction.LEFT)
    monsters = [blocker, monster]

    monster.move(corridor, (1, 1), monsters)

    # Player unreachable around the blocker, first open direction wins
    assert monster.direction == Direction.RIGHT
    assert monster.position == (5, 1)


def test_boxed_in_monster_stays_put():
    level_map = parse("OOO", "O-O", "OOO")
    monster = Monster(1, 1, Direction.UP)
    monster.move(level_map, (1, 1), [monster])

    assert monster.position == (1, 1)
    assert monster.direction == Direction.UP


def test_never_moves_onto_another_monster(corridor):
    first = Monster(2, 1, Direction.RIGHT)
    second = Monster(3, 1, Direction.LEFT)
    monsters = [first, second]

    for _ in range(10):
        for monster in monsters:
            monster.move(corridor, (1, 1), monsters)
        assert first.position != second.position


def test_is_occupied_by_monster_excludes_self():
    monster = Monster(1, 1)
    other = Monster(2, 1)
    assert is_occupied_by_monster((2, 1), [monster, other])
    assert not is_occupied_by_monster((1, 1), [monster, other], exclude=monster)
    assert not is_occupied_by_monster((3, 1), [monster, other])
