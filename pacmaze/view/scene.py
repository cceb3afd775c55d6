"""
View katmanındaki sahnelerin uyması gereken protokol.
"""
from __future__ import annotations

from typing import Iterable, Protocol

import pygame


class Scene(Protocol):
    """PygameView döngüsüne katılan sahne: olay, güncelleme, çizim."""

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        ...

    def update(self, delta: float) -> None:
        ...

    def draw(self, surface: pygame.Surface) -> None:
        ...

    def preferred_size(self) -> tuple[int, int]:
        """Sahnenin istediği pencere boyutu (zoom değişince değişir)."""
        ...

    @property
    def closed(self) -> bool:
        ...
