"""
Map / harita çizimi.
Duvar görünümü harita materyaline göre seçilir; bilinmeyen materyal klasik duvar olur.
"""
from __future__ import annotations

from typing import Callable, Sequence

import pygame

from pacmaze.model.cell import Cell, Direction

Color = tuple[int, int, int]
WallStrategy = Callable[[pygame.Surface, pygame.Rect], None]

FLOOR_COLOR: Color = (5, 6, 15)
DOT_COLOR: Color = (255, 220, 180)
PLAYER_COLOR: Color = (255, 220, 0)
MONSTER_COLOR: Color = (230, 40, 40)


def _draw_classic_wall(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, (30, 40, 200), rect)
    pygame.draw.rect(surface, (90, 110, 255), rect, 1)


def _draw_brick_wall(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, (150, 60, 40), rect)
    mortar = (90, 40, 30)
    mid_y = rect.top + rect.height // 2
    pygame.draw.line(surface, mortar, (rect.left, mid_y), (rect.right - 1, mid_y))
    pygame.draw.line(surface, mortar, (rect.centerx, rect.top), (rect.centerx, mid_y))
    quarter = rect.left + rect.width // 4
    pygame.draw.line(surface, mortar, (quarter, mid_y), (quarter, rect.bottom - 1))


def _draw_stone_wall(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, (110, 110, 120), rect)
    pygame.draw.rect(surface, (70, 70, 80), rect.inflate(-rect.width // 3, -rect.height // 3))
    pygame.draw.rect(surface, (150, 150, 160), rect, 1)


def _draw_hedge_wall(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, (20, 90, 30), rect)
    radius = max(2, rect.width // 4)
    for cx, cy in (
        (rect.left + radius, rect.top + radius),
        (rect.right - radius, rect.top + radius),
        (rect.centerx, rect.bottom - radius),
    ):
        pygame.draw.circle(surface, (40, 140, 50), (cx, cy), radius)


WALL_STRATEGIES: dict[str, WallStrategy] = {
    "brick": _draw_brick_wall,
    "stone": _draw_stone_wall,
    "hedge": _draw_hedge_wall,
}


def wall_strategy(material: str) -> WallStrategy:
    return WALL_STRATEGIES.get(material.strip().lower(), _draw_classic_wall)


# Ağız açıklığının baktığı yön (pygame ekseninde y aşağı doğru)
_MOUTH_VECTORS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class MapRenderer:
    def __init__(self, block_size: int = 20) -> None:
        self.block_size = block_size

    def cell_rect(self, x: int, y: int, offset: tuple[int, int] = (0, 0)) -> pygame.Rect:
        return pygame.Rect(
            offset[0] + x * self.block_size,
            offset[1] + y * self.block_size,
            self.block_size,
            self.block_size,
        )

    def draw(
        self,
        surface: pygame.Surface,
        cells: Sequence[Sequence[Cell]],
        material: str = "",
        offset: tuple[int, int] = (0, 0),
    ) -> None:
        draw_wall = wall_strategy(material)
        dot_radius = max(1, self.block_size // 8)
        for y, row in enumerate(cells):
            for x, cell in enumerate(row):
                rect = self.cell_rect(x, y, offset)
                if cell == Cell.WALL:
                    draw_wall(surface, rect)
                    continue
                pygame.draw.rect(surface, FLOOR_COLOR, rect)
                if cell == Cell.DOT:
                    pygame.draw.circle(surface, DOT_COLOR, rect.center, dot_radius)

    def draw_player(
        self,
        surface: pygame.Surface,
        position: tuple[int, int],
        direction: Direction,
        offset: tuple[int, int] = (0, 0),
    ) -> None:
        rect = self.cell_rect(*position, offset)
        radius = self.block_size // 2 - 1
        pygame.draw.circle(surface, PLAYER_COLOR, rect.center, radius)
        dx, dy = _MOUTH_VECTORS[direction]
        cx, cy = rect.center
        tip = (cx + dx * radius, cy + dy * radius)
        spread = radius // 2
        mouth = [
            (cx, cy),
            (tip[0] + dy * spread, tip[1] + dx * spread),
            (tip[0] - dy * spread, tip[1] - dx * spread),
        ]
        pygame.draw.polygon(surface, FLOOR_COLOR, mouth)

    def draw_monster(
        self,
        surface: pygame.Surface,
        position: tuple[int, int],
        offset: tuple[int, int] = (0, 0),
    ) -> None:
        rect = self.cell_rect(*position, offset).inflate(-2, -2)
        head_radius = rect.width // 2
        pygame.draw.circle(surface, MONSTER_COLOR, (rect.centerx, rect.top + head_radius), head_radius)
        body = pygame.Rect(rect.left, rect.top + head_radius, rect.width, rect.height - head_radius)
        pygame.draw.rect(surface, MONSTER_COLOR, body)
        eye_radius = max(1, rect.width // 8)
        for eye_x in (rect.left + rect.width // 3, rect.right - rect.width // 3):
            pygame.draw.circle(surface, (255, 255, 255), (eye_x, rect.top + head_radius), eye_radius)
