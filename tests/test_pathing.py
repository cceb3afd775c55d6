"""Tests for BFS reachability and distance maps."""

from pacmaze.service.pathing import UNREACHABLE, PathingService

from conftest import parse

LOOP = (
    "OOOOOOO",
    "O-----O",
    "O-OOO-O",
    "O-----O",
    "OOOOOOO",
)


def test_reachable_set_covers_connected_floor():
    level_map = parse(*LOOP)
    reachable = PathingService.reachable_set(level_map, (1, 1))

    assert reachable == set(level_map.walkable_cells())
    assert (2, 2) not in reachable


def test_reachable_set_from_wall_is_empty():
    level_map = parse(*LOOP)
    assert PathingService.reachable_set(level_map, (0, 0)) == set()


def test_reachable_set_stops_at_walls():
    level_map = parse("O--O--O")
    assert PathingService.reachable_set(level_map, (1, 0)) == {(1, 0), (2, 0)}


def test_distance_map_values():
    level_map = parse(*LOOP)
    dist = PathingService.distance_map(level_map, (1, 1))

    assert dist[1][1] == 0
    assert dist[1][5] == 4
    assert dist[3][3] == 4
    assert dist[3][5] == 6
    assert dist[0][0] == UNREACHABLE
    assert dist[2][3] == UNREACHABLE


def test_distance_map_respects_blocked_cells():
    level_map = parse(*LOOP)
    dist = PathingService.distance_map(level_map, (1, 1), blocked=[(1, 2)])

    assert dist[2][1] == UNREACHABLE
    assert dist[3][3] == 8
    assert dist[3][1] == 10


def test_distance_map_from_wall_target_is_all_unreachable():
    level_map = parse(*LOOP)
    dist = PathingService.distance_map(level_map, (0, 0))
    assert all(value == UNREACHABLE for row in dist for value in row)
