"""
Game Event Observers: Concrete observer implementasyonları.
"""
from __future__ import annotations

import logging

from pacmaze.service.game_event_service import GameEvent, GameEventType, GameObserver

logger = logging.getLogger(__name__)


class SessionStatsObserver(GameObserver):
    """Oturum istatistiklerini tutan observer."""

    def __init__(self) -> None:
        self.dots_eaten: int = 0
        self.lives_lost: int = 0
        self.levels_completed: int = 0

    def on_event(self, event: GameEvent) -> None:
        if event.event_type == GameEventType.DOT_EATEN:
            self.dots_eaten += 1

        elif event.event_type == GameEventType.LIFE_LOST:
            self.lives_lost += 1
            logger.info(f"Life lost! Lives left: {event.data.get('lives', '?')}")

        elif event.event_type == GameEventType.LEVEL_COMPLETED:
            self.levels_completed += 1
            logger.info(
                f"Level completed! Total: {self.levels_completed}, Score: {event.data.get('score', 0)}"
            )

        elif event.event_type == GameEventType.GAME_RESTARTED:
            self.reset()

    def summary(self) -> str:
        return (
            f"dots eaten: {self.dots_eaten}, lives lost: {self.lives_lost}, "
            f"levels completed: {self.levels_completed}"
        )

    def reset(self) -> None:
        """İstatistikleri sıfırla (yeni oyun için)."""
        self.dots_eaten = 0
        self.lives_lost = 0
        self.levels_completed = 0


class LoggerObserver(GameObserver):
    """Debug için tüm eventleri logla."""

    def on_event(self, event: GameEvent) -> None:
        logger.debug(f"Game Event: {event.event_type.value}, Data: {event.data}")
