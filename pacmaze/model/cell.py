"""
Hücre ve yön tanımları.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class Cell(Enum):
    EMPTY = 0
    WALL = 1
    DOT = 2


class Direction(Enum):
    """4 yönlü hareket. Sıralama (UP, DOWN, LEFT, RIGHT) tie-break için önemli."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    def step(self, x: int, y: int) -> Tuple[int, int]:
        """(x, y) noktasından bu yönde bir hücre ilerisi."""
        dx, dy = _DELTAS[self]
        return x + dx, y + dy


_DELTAS: dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Harita karakterleri
WALL_CHARS = frozenset("Oo0")
DOT_CHAR = "-"


def cell_from_char(ch: str) -> Cell:
    if ch in WALL_CHARS:
        return Cell.WALL
    if ch == DOT_CHAR:
        return Cell.DOT
    return Cell.EMPTY
