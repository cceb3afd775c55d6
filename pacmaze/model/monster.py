"""
Canavar: miyop takip (myopic chase) davranışı.

Canavar mevcut yönünde ilerler. Önü duvar ya da başka bir canavarla kapanınca
oyuncudan başlatılan BFS mesafe haritasına bakarak en iyi komşu hücreyi seçer.
Tick'ler arasında pozisyon ve yön dışında hafıza tutulmaz.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from pacmaze.model.cell import Direction
from pacmaze.model.level_map import LevelMap
from pacmaze.service.pathing import UNREACHABLE, PathingService

# Tie-break sırası
SCAN_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Monster:
    def __init__(self, x: int, y: int, direction: Direction = Direction.UP) -> None:
        self.x = x
        self.y = y
        self.direction = direction

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def __repr__(self) -> str:
        return f"Monster(x={self.x}, y={self.y}, direction={self.direction.name})"

    def move(
        self,
        level_map: LevelMap,
        player_pos: Tuple[int, int],
        monsters: Sequence["Monster"],
    ) -> None:
        """Bir adım ilerle; önü kapalıysa yeni yön seç ve tekrar dene."""
        target = self.direction.step(self.x, self.y)
        if self._is_blocked(level_map, target, monsters):
            self.direction = self.choose_direction(level_map, player_pos, monsters)
            target = self.direction.step(self.x, self.y)

        if not self._is_blocked(level_map, target, monsters):
            self.x, self.y = target

    def choose_direction(
        self,
        level_map: LevelMap,
        player_pos: Tuple[int, int],
        monsters: Sequence["Monster"],
    ) -> Direction:
        """
        Oyuncuya en yakın açık komşuya giden yönü seçer.
        Mesafe verisi yoksa ilk açık yön, tamamen kapalıysa mevcut yön.
        """
        blocked = [m.position for m in monsters if m is not self]
        dist = PathingService.distance_map(level_map, player_pos, blocked)

        best_direction = self.direction
        best_distance = UNREACHABLE
        first_open: Direction | None = None
        for direction in SCAN_ORDER:
            nx, ny = direction.step(self.x, self.y)
            if self._is_blocked(level_map, (nx, ny), monsters):
                continue
            if first_open is None:
                first_open = direction
            distance = dist[ny][nx]
            if distance != UNREACHABLE and (best_distance == UNREACHABLE or distance < best_distance):
                best_distance = distance
                best_direction = direction

        if best_distance == UNREACHABLE and first_open is not None:
            return first_open
        return best_direction

    def _is_blocked(
        self,
        level_map: LevelMap,
        pos: Tuple[int, int],
        monsters: Sequence["Monster"],
    ) -> bool:
        if level_map.is_wall(*pos):
            return True
        return is_occupied_by_monster(pos, monsters, self)


def is_occupied_by_monster(
    pos: Tuple[int, int],
    monsters: Sequence[Monster],
    exclude: Monster | None = None,
) -> bool:
    return any(m is not exclude and m.position == pos for m in monsters)
