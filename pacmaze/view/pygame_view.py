"""
Pygame tabanlı View katmanı: pencere ve görüntüleme döngüsü.
Oyun kuralları bilmez; sadece sahneye olayları iletir ve çizdirir.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from pacmaze.view.scene import Scene

logger = logging.getLogger(__name__)

ConfigColor = Tuple[int, int, int]


@dataclass(frozen=True)
class ViewConfig:
    """Pygame penceresi için temel yapılandırma."""

    width: int = 640
    height: int = 480
    fps: int = 60
    background_color: ConfigColor = (0, 0, 0)
    caption: str = "pacmaze"


class PygameView:
    """Pencereyi açar, sahneyi frame frame çalıştırır."""

    def __init__(self, config: ViewConfig) -> None:
        self._config = config
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None

    def initialize(self) -> None:
        """Pygame'i başlatır ve ekranı hazırlar."""
        pygame.init()
        self._screen = pygame.display.set_mode((self._config.width, self._config.height))
        pygame.display.set_caption(self._config.caption)
        self._clock = pygame.time.Clock()
        logger.info(f"Window opened ({self._config.width}x{self._config.height})")

    def shutdown(self) -> None:
        """Pygame kaynaklarını temizler."""
        pygame.quit()

    def _resize_if_needed(self, size: tuple[int, int]) -> None:
        if self._screen is not None and self._screen.get_size() != size:
            self._screen = pygame.display.set_mode(size)
            logger.debug(f"Window resized to {size[0]}x{size[1]}")

    def render(self, scene: Scene, run_seconds: Optional[float] = None) -> None:
        """
        View döngüsünü çalıştırır.

        :param scene: Çizilecek sahne.
        :param run_seconds: İsteğe bağlı max süre (test/kontrol amacıyla).
        """
        if self._screen is None or self._clock is None:
            raise RuntimeError("View initialize() çağrılmadan render edilemez.")

        running = True
        elapsed = 0.0
        while running:
            delta = self._clock.tick(self._config.fps) / 1000.0
            elapsed += delta

            events = list(pygame.event.get())
            if any(event.type == pygame.QUIT for event in events):
                running = False

            scene.handle_events(events)
            scene.update(delta)
            if scene.closed:
                running = False

            self._resize_if_needed(scene.preferred_size())
            self._screen.fill(self._config.background_color)
            scene.draw(self._screen)
            pygame.display.flip()

            if run_seconds and elapsed >= run_seconds:
                running = False
