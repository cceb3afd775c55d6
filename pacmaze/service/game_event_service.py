"""
Game Event Service: observer altyapısı.
Game ve GameController oturum olaylarını (nokta, can, level, oyun sonu) buradan yayınlar;
istatistik ve log observer'ları bunları dinler.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

EventCallback = Callable[["GameEvent"], None]


class GameEventType(Enum):
    LEVEL_STARTED = "level_started"
    DOT_EATEN = "dot_eaten"
    LIFE_LOST = "life_lost"
    LEVEL_COMPLETED = "level_completed"
    GAME_OVER = "game_over"
    GAME_WON = "game_won"
    GAME_RESTARTED = "game_restarted"


@dataclass
class GameEvent:
    event_type: GameEventType
    data: dict[str, Any] = field(default_factory=dict)


class GameObserver(ABC):
    """Tüm olay tiplerini alan dinleyici."""

    @abstractmethod
    def on_event(self, event: GameEvent) -> None:
        ...


class GameEventService:
    """
    Olay yayıncısı.
    Observer'lar her olayı alır; add_listener ile verilen callback'ler sadece kendi tipini.
    Bildirim sırası: önce observer'lar (ekleme sırasıyla), sonra callback'ler.
    """

    def __init__(self) -> None:
        self._observers: list[GameObserver] = []
        self._listeners: dict[GameEventType, list[EventCallback]] = {}

    def attach(self, observer: GameObserver) -> None:
        """Aynı observer ikinci kez eklenmez."""
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: GameObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def add_listener(self, event_type: GameEventType, callback: EventCallback) -> None:
        self._listeners.setdefault(event_type, []).append(callback)

    def notify(self, event: GameEvent) -> None:
        for observer in list(self._observers):
            observer.on_event(event)
        for callback in list(self._listeners.get(event.event_type, ())):
            callback(event)

    def emit(self, event_type: GameEventType, **data: Any) -> None:
        """GameEvent oluşturup yayınlar."""
        self.notify(GameEvent(event_type=event_type, data=data))
