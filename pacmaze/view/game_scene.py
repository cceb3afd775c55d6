"""
Oyun sahnesi: tuşları controller intent'lerine çevirir, sabit aralıkla tick atar
ve view_state() üzerinden haritayı, karakterleri ve HUD'u çizer.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

import pygame

from pacmaze.controller.game_controller import GameController, GameState
from pacmaze.view.hud import draw_banner, draw_text, get_hud_font
from pacmaze.view.map_renderer import MapRenderer
from pacmaze.view.scene import Scene

logger = logging.getLogger(__name__)

MIN_BLOCK_SIZE = 10
MAX_BLOCK_SIZE = 50
ZOOM_STEP = 2
HUD_HEIGHT = 28

_KEY_TOKENS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_w: "up",
    pygame.K_s: "down",
    pygame.K_a: "left",
    pygame.K_d: "right",
    pygame.K_q: "quit",
}
_ZOOM_IN_KEYS = frozenset({pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS})
_ZOOM_OUT_KEYS = frozenset({pygame.K_MINUS, pygame.K_KP_MINUS})


def token_for_key(key: int) -> Optional[str]:
    """Pygame tuş kodunu controller token'ına çevirir; bilinmeyen tuş için None."""
    return _KEY_TOKENS.get(key)


def clamp_block_size(size: int) -> int:
    return max(MIN_BLOCK_SIZE, min(MAX_BLOCK_SIZE, size))


class GameScene(Scene):

    def __init__(
        self,
        controller: GameController,
        block_size: int = 20,
        tick_interval: Optional[float] = None,
    ) -> None:
        self._controller = controller
        self._renderer = MapRenderer(clamp_block_size(block_size))
        self._tick_interval = tick_interval or controller.settings.tick_interval
        self._accumulator = 0.0
        self._closed = False
        self._state = self._controller.view_state()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def block_size(self) -> int:
        return self._renderer.block_size

    def preferred_size(self) -> tuple[int, int]:
        size = self._renderer.block_size
        return self._state.width * size, self._state.height * size + HUD_HEIGHT

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                self._controller.handle_input("quit")
                self._closed = True
            elif event.key == pygame.K_F2:
                self._controller.restart()
                self._accumulator = 0.0
            elif event.key in _ZOOM_IN_KEYS:
                self.zoom(ZOOM_STEP)
            elif event.key in _ZOOM_OUT_KEYS:
                self.zoom(-ZOOM_STEP)
            else:
                token = token_for_key(event.key)
                if token is None:
                    continue
                self._controller.handle_input(token)
                if token == "quit":
                    self._closed = True
        self._state = self._controller.view_state()

    def zoom(self, step: int) -> None:
        new_size = clamp_block_size(self._renderer.block_size + step)
        if new_size != self._renderer.block_size:
            self._renderer.block_size = new_size
            logger.debug(f"Block size: {new_size}")

    def update(self, delta: float) -> None:
        # Frame hızından bağımsız sabit tick
        self._accumulator += delta
        while self._accumulator >= self._tick_interval:
            self._accumulator -= self._tick_interval
            self._controller.tick()
        self._state = self._controller.view_state()

    def draw(self, surface: pygame.Surface) -> None:
        state = self._state
        offset = (0, HUD_HEIGHT)
        self._renderer.draw(surface, state.cells, state.material, offset)
        for monster in state.monsters:
            self._renderer.draw_monster(surface, monster.position, offset)
        self._renderer.draw_player(surface, state.player.position, state.player.direction, offset)
        self._draw_hud(surface)

        if state.state == GameState.LEVEL_START and state.countdown > 0:
            font = get_hud_font(max(24, self._renderer.block_size * 2))
            center = (surface.get_width() // 2, HUD_HEIGHT + (surface.get_height() - HUD_HEIGHT) // 2)
            draw_text(surface, str(state.countdown), font, (255, 255, 255), center, align="center")
        elif state.state == GameState.LEVEL_COMPLETE:
            draw_banner(surface, "LEVEL COMPLETE", (255, 220, 100))
        elif state.state == GameState.GAME_OVER:
            draw_banner(surface, "GAME OVER", (255, 90, 90))
        elif state.state == GameState.WON:
            draw_banner(surface, "YOU WON!", (120, 255, 140))

    def _draw_hud(self, surface: pygame.Surface) -> None:
        state = self._state
        pygame.draw.rect(surface, (15, 15, 25), pygame.Rect(0, 0, surface.get_width(), HUD_HEIGHT))
        font = get_hud_font(16)
        title = state.name or "Level"
        left = f"{title} {state.level_index + 1}/{state.level_count}"
        right = f"Score: {state.score}  Lives: {state.lives}  Dots: {state.dots_left}"
        draw_text(surface, left, font, (255, 235, 160), (6, 6))
        draw_text(surface, right, font, (220, 220, 220), (surface.get_width() - 6, 6), align="right")
