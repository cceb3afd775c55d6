"""
Map Validator: Haritanın oynanabilir olduğunu doğrular.
SOLID - Single Responsibility: Sadece harita validasyonundan sorumlu.

Kontroller:
1. Başlangıç noktası (playerStart veya ilk yürünebilir hücre)
2. Açık başlangıç koordinatları (sınır, duvar, tekrar)
3. Canavar varsa kaçış alanı
4. Tüm noktalar başlangıçtan erişilebilir (dolayısıyla tek bölge)
"""
from __future__ import annotations

from pacmaze.model.errors import MapError
from pacmaze.model.level_map import LevelMap, Position
from pacmaze.service.pathing import PathingService

# Canavar en az bu BFS mesafesinde doğabilmeli (oyuncunun kendisi ve yanı olmaz)
MIN_ESCAPE_DISTANCE = 2


class MapValidator:
    """Harita doğrulama kuralları."""

    @staticmethod
    def validate(level_map: LevelMap) -> None:
        """
        Haritayı doğrular.

        Raises:
            MapError: Harita oynanamaz durumdaysa
        """
        start = MapValidator._resolve_start(level_map)
        MapValidator._check_monster_starts(level_map)

        if level_map.monster_count > 0:
            MapValidator._check_escape(level_map, start)

        dots = level_map.dot_positions()
        if not dots:
            return

        # Başlangıçtan erişilebilen noktalar zaten tek bölge oluşturur
        reachable = PathingService.reachable_set(level_map, start)
        for x, y in dots:
            if (x, y) not in reachable:
                raise MapError(f"Haritada ulaşılamayan nokta var ({x},{y})")

    @staticmethod
    def _resolve_start(level_map: LevelMap) -> Position:
        if level_map.player_start is not None:
            x, y = level_map.player_start
            if not level_map.in_bounds(x, y):
                raise MapError(f"playerStart harita dışında ({x},{y})")
            if level_map.is_wall(x, y):
                raise MapError(f"playerStart duvar üzerinde ({x},{y})")
            return x, y

        first = level_map.find_first_walkable()
        if first is None:
            raise MapError("Haritada yürünebilir hücre yok")
        return first

    @staticmethod
    def _check_monster_starts(level_map: LevelMap) -> None:
        used: set[Position] = set()
        if level_map.player_start is not None:
            used.add(level_map.player_start)
        for x, y in level_map.monster_starts:
            if not level_map.in_bounds(x, y):
                raise MapError(f"monsterStart harita dışında ({x},{y})")
            if level_map.is_wall(x, y):
                raise MapError(f"monsterStart duvar üzerinde ({x},{y})")
            if (x, y) in used:
                raise MapError(f"Tekrarlanan başlangıç pozisyonu ({x},{y})")
            used.add((x, y))

    @staticmethod
    def _check_escape(level_map: LevelMap, start: Position) -> None:
        dist = PathingService.distance_map(level_map, start)
        for x, y in level_map.walkable_cells():
            if dist[y][x] >= MIN_ESCAPE_DISTANCE:
                return
        raise MapError(
            f"Canavarlı haritada kaçış alanı yok: başlangıçtan en az "
            f"{MIN_ESCAPE_DISTANCE} hücre uzakta yürünebilir hücre bulunmalı"
        )
