"""
Pathing Service: BFS tabanlı erişilebilirlik ve mesafe haritaları.
Hem harita doğrulaması hem de canavar takibi tarafından kullanılır.

Komşu sırası sabit: doğu, batı, güney, kuzey.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable

from pacmaze.model.level_map import LevelMap, Position

UNREACHABLE = -1

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class PathingService:
    """BFS yardımcıları - sadece 4 yönlü hareket"""

    @staticmethod
    def reachable_set(level_map: LevelMap, start: Position) -> set[Position]:
        """
        Başlangıç noktasından duvarlardan geçmeden ulaşılabilen tüm hücreler.
        Başlangıç duvar veya sınır dışıysa boş küme döner.
        """
        start_x, start_y = start
        if level_map.is_wall(start_x, start_y):
            return set()

        visited: set[Position] = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for dx, dy in _NEIGHBOURS:
                pos = (x + dx, y + dy)
                if pos in visited or level_map.is_wall(*pos):
                    continue
                visited.add(pos)
                queue.append(pos)
        return visited

    @staticmethod
    def distance_map(
        level_map: LevelMap,
        target: Position,
        blocked: Iterable[Position] = (),
    ) -> list[list[int]]:
        """
        Hedeften her hücreye BFS mesafesi (-1 = ulaşılamaz).
        Duvarlar ve ``blocked`` hücreleri geçilemez kabul edilir.
        """
        dist = [[UNREACHABLE] * level_map.width for _ in range(level_map.height)]
        target_x, target_y = target
        if level_map.is_wall(target_x, target_y):
            return dist

        blocked_cells = set(blocked)
        dist[target_y][target_x] = 0
        queue = deque([target])
        while queue:
            x, y = queue.popleft()
            for dx, dy in _NEIGHBOURS:
                nx, ny = x + dx, y + dy
                if level_map.is_wall(nx, ny):
                    continue
                if dist[ny][nx] != UNREACHABLE:
                    continue
                if (nx, ny) in blocked_cells:
                    continue
                dist[ny][nx] = dist[y][x] + 1
                queue.append((nx, ny))
        return dist
