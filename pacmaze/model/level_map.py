from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from pacmaze.model.cell import Cell

Position = Tuple[int, int]

DEFAULT_MONSTER_COUNT = 1
DEFAULT_SPEED_MODIFIER = 1.0
MIN_SPEED_MODIFIER = 0.5
MAX_SPEED_MODIFIER = 2.0


@dataclass
class LevelMap:
    """
    Tek bir level haritası: hücre ızgarası ve metadata.
    Hücreler yerinde değişir (DOT -> EMPTY), boyut hiçbir zaman değişmez.
    """
    width: int
    height: int
    cells: list[list[Cell]]
    name: str = ""
    material: str = ""
    monster_count: int = DEFAULT_MONSTER_COUNT
    speed_modifier: float = DEFAULT_SPEED_MODIFIER
    player_start: Optional[Position] = None
    monster_starts: list[Position] = field(default_factory=list)

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Cell]], **metadata) -> "LevelMap":
        """Satırlardan harita oluşturur; kısa satırlar EMPTY ile doldurulur."""
        height = len(rows)
        width = max((len(row) for row in rows), default=0)
        cells = [list(row) + [Cell.EMPTY] * (width - len(row)) for row in rows]
        return LevelMap(width=width, height=height, cells=cells, **metadata)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Sınır dışı koordinatlar duvar kabul edilir."""
        if not self.in_bounds(x, y):
            return Cell.WALL
        return self.cells[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.cells[y][x] == Cell.WALL

    def has_dot(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.cells[y][x] == Cell.DOT

    def eat_dot(self, x: int, y: int) -> None:
        """Noktayı yer. Nokta yoksa veya sınır dışıysa hiçbir şey yapmaz."""
        if self.has_dot(x, y):
            self.cells[y][x] = Cell.EMPTY

    def count_dots(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell == Cell.DOT)

    def dot_positions(self) -> list[Position]:
        return [
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell == Cell.DOT
        ]

    def walkable_cells(self) -> list[Position]:
        """Duvar olmayan tüm hücreler (satır satır sıralı)."""
        return [
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell != Cell.WALL
        ]

    def find_first_walkable(self) -> Optional[Position]:
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell != Cell.WALL:
                    return (x, y)
        return None

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Renderer'lar için salt okunur kopya."""
        return tuple(tuple(row) for row in self.cells)

    def copy(self) -> "LevelMap":
        return LevelMap(
            width=self.width,
            height=self.height,
            cells=[list(row) for row in self.cells],
            name=self.name,
            material=self.material,
            monster_count=self.monster_count,
            speed_modifier=self.speed_modifier,
            player_start=self.player_start,
            monster_starts=list(self.monster_starts),
        )
