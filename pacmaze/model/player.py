"""
Oyuncu: yön tamponlu (turn-buffer) hareket modeli.

Girdi (UI/stdin thread'i) set_direction() çağırır, tick döngüsü move() çağırır.
direction, desired ve queue alanları aynı lock ile korunur.
"""
from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Tuple

from pacmaze.model.cell import Direction
from pacmaze.model.level_map import LevelMap

DEFAULT_QUEUE_CAPACITY = 2


@dataclass(frozen=True)
class PlayerSnapshot:
    position: Tuple[int, int]
    direction: Direction
    desired: Direction
    queue: tuple[Direction, ...]


class Player:
    def __init__(
        self,
        x: int,
        y: int,
        queue_capacity: int = DEFAULT_QUEUE_CAPACITY,
    ) -> None:
        self.x = x
        self.y = y
        self.direction = Direction.RIGHT
        self.desired = Direction.RIGHT
        self._queue: deque[Direction] = deque(maxlen=max(1, queue_capacity))
        self._lock = threading.Lock()

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def queue(self) -> tuple[Direction, ...]:
        with self._lock:
            return tuple(self._queue)

    def snapshot(self) -> PlayerSnapshot:
        with self._lock:
            return PlayerSnapshot(
                position=(self.x, self.y),
                direction=self.direction,
                desired=self.desired,
                queue=tuple(self._queue),
            )

    def set_direction(self, direction: Direction) -> None:
        """
        Son basılan yön her zaman önceliklidir; hızlı dönüşler için kısa bir
        kuyruk tutulur. Kuyruk doluysa en eski giriş düşer.
        """
        with self._lock:
            if direction == self.desired:
                return
            self.desired = direction
            if not self._queue or self._queue[-1] != direction:
                self._queue.append(direction)

    def move(self, level_map: LevelMap) -> None:
        """Bir tick: önce dönüşü dene, sonra mevcut yönde bir hücre ilerle."""
        with self._lock:
            if self.desired != self.direction and not self._blocked(level_map, self.desired):
                self.direction = self.desired
                self._drop_queued(self.direction)
            else:
                self._apply_queued_turn(level_map)

            next_x, next_y = self.direction.step(self.x, self.y)
            if not level_map.is_wall(next_x, next_y):
                self.x, self.y = next_x, next_y

    def _blocked(self, level_map: LevelMap, direction: Direction) -> bool:
        return level_map.is_wall(*direction.step(self.x, self.y))

    def _apply_queued_turn(self, level_map: LevelMap) -> None:
        # İlk uygun yön seçilir, o ve öncesindekiler kuyruktan atılır
        for index, direction in enumerate(self._queue):
            if not self._blocked(level_map, direction):
                self.desired = direction
                self.direction = direction
                for _ in range(index + 1):
                    self._queue.popleft()
                return

    def _drop_queued(self, direction: Direction) -> None:
        remaining = [queued for queued in self._queue if queued != direction]
        self._queue.clear()
        self._queue.extend(remaining)
