"""
Spawn Service: oyuncu ve canavarların başlangıç pozisyonlarını seçer.
Rastgelelik dışarıdan verilen random.Random örneği ile yapılır (testlerde seed'lenir).

Canavar yerleştirme sırası:
1. Haritadaki açık monsterStart girişleri (yürünebilir ve kullanılmamışsa)
2. Oyuncudan en az min_distance BFS mesafesindeki rastgele boş hücre
3. Herhangi bir rastgele boş hücre
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from pacmaze.model.cell import Direction
from pacmaze.model.level_map import LevelMap, Position
from pacmaze.model.monster import Monster
from pacmaze.service.pathing import PathingService

logger = logging.getLogger(__name__)

FALLBACK_PLAYER_POSITION: Position = (1, 1)


class SpawnService:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def player_position(self, level_map: LevelMap, randomize: bool = True) -> Position:
        """Açık playerStart, yoksa rastgele (veya ilk) yürünebilir hücre, yoksa (1,1)."""
        if level_map.player_start is not None:
            return level_map.player_start

        if randomize:
            pos = self.random_walkable(level_map)
        else:
            pos = level_map.find_first_walkable()
        return pos if pos is not None else FALLBACK_PLAYER_POSITION

    def monsters(
        self,
        level_map: LevelMap,
        player_pos: Position,
        min_distance: int,
    ) -> list[Monster]:
        used: set[Position] = {player_pos}
        dist = PathingService.distance_map(level_map, player_pos)
        explicit = iter(level_map.monster_starts)
        monsters: list[Monster] = []

        for index in range(level_map.monster_count):
            pos = next(explicit, None)
            if pos is not None and (level_map.is_wall(*pos) or pos in used):
                pos = None

            if pos is None:
                pos = self.random_walkable(level_map, used, dist, min_distance)
            if pos is None:
                pos = self.random_walkable(level_map, used)
            if pos is None:
                # Yer yoksa bu canavar atlanır
                logger.debug(f"No free cell for monster #{index + 1}, skipping")
                continue

            used.add(pos)
            monsters.append(Monster(pos[0], pos[1], Direction(index % len(Direction))))
        return monsters

    def random_walkable(
        self,
        level_map: LevelMap,
        exclude: Optional[set[Position]] = None,
        dist: Optional[list[list[int]]] = None,
        min_distance: int = 0,
    ) -> Optional[Position]:
        """
        Rastgele yürünebilir hücre seçer.
        dist verilirse mesafesi min_distance'tan küçük (veya ulaşılamaz) hücreler elenir.
        """
        candidates = []
        for x, y in level_map.walkable_cells():
            if exclude and (x, y) in exclude:
                continue
            if dist is not None and dist[y][x] < min_distance:
                continue
            candidates.append((x, y))

        if not candidates:
            return None
        return self._rng.choice(candidates)
