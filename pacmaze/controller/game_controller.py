"""
Game controller: oyun akışının tamamını yönetir (geri sayım, oyun, level geçişi, bitiş).
View sadece intent iletir ve state okur.

Durum makinesi:
    LEVEL_START -> PLAYING -> LEVEL_COMPLETE -> LEVEL_START (sonraki level)
                           -> GAME_OVER
                           -> WON
"""
from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Sequence

from pacmaze.config.settings import GameSettings
from pacmaze.controller.game import Game, is_quit_token
from pacmaze.model.cell import Cell, Direction
from pacmaze.model.level_map import LevelMap
from pacmaze.service.game_event_service import GameEventService, GameEventType
from pacmaze.service.game_observers import LoggerObserver, SessionStatsObserver

logger = logging.getLogger(__name__)


class GameState(Enum):
    LEVEL_START = auto()
    PLAYING = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()
    WON = auto()


# Geri sayım ve level arası beklemede yön tuşları kuyruğa alınabilir
_INPUT_STATES = frozenset({GameState.LEVEL_START, GameState.PLAYING, GameState.LEVEL_COMPLETE})


class GameController:
    def __init__(
        self,
        levels: Sequence[LevelMap],
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        event_service: Optional[GameEventService] = None,
    ) -> None:
        if not levels:
            raise ValueError("En az bir level gerekli")
        self.settings = settings or GameSettings()
        self._pristine_levels = [level.copy() for level in levels]
        self._rng = rng or random.Random()
        self._clock = clock or time.monotonic
        self._event_service = event_service or GameEventService()

        # Observerları ekle
        self.stats = SessionStatsObserver()
        self._event_service.attach(self.stats)
        self._event_service.attach(LoggerObserver())

        self.game: Game = self._new_game()
        self.state = GameState.LEVEL_START
        self._countdown_start = self._clock()
        self._pause_ticks = 0

    @dataclass(frozen=True)
    class PlayerView:
        position: tuple[int, int]
        direction: Direction

    @dataclass(frozen=True)
    class MonsterView:
        position: tuple[int, int]
        direction: Direction

    @dataclass(frozen=True)
    class GameViewState:
        width: int
        height: int
        name: str
        material: str
        cells: tuple[tuple[Cell, ...], ...]
        player: "GameController.PlayerView"
        monsters: tuple["GameController.MonsterView", ...]
        score: int
        lives: int
        level_index: int
        level_count: int
        dots_left: int
        state: GameState
        countdown: int
        dot_eaten: bool
        life_lost: bool
        level_completed: bool
        paused: bool

    def _new_game(self) -> Game:
        return Game(
            [level.copy() for level in self._pristine_levels],
            settings=self.settings,
            rng=self._rng,
            clock=self._clock,
            event_service=self._event_service,
        )

    @property
    def event_service(self) -> GameEventService:
        return self._event_service

    def tick(self) -> None:
        """Sabit aralıklı tick; front-end tarafından çağrılır."""
        if self._sync_terminal_state():
            return

        if self.state == GameState.LEVEL_START:
            if self._clock() - self._countdown_start < self.settings.countdown_seconds:
                return
            self.state = GameState.PLAYING
            return

        if self.state == GameState.LEVEL_COMPLETE:
            if self._pause_ticks > 0:
                self._pause_ticks -= 1
                return
            self.game.load_level(self.game.current_level + 1)
            if self._sync_terminal_state():
                return
            self._start_countdown()
            return

        self.game.update()

        if self.game.level_completed:
            if self.game.current_level + 1 >= self.game.level_count:
                self.game.mark_won()
            else:
                self.state = GameState.LEVEL_COMPLETE
                self._pause_ticks = self.settings.level_complete_pause_ticks
                return

        self._sync_terminal_state()

    def _sync_terminal_state(self) -> bool:
        """Game bitti mi? Bittiyse durumu güncelle ve True döndür."""
        if self.state in (GameState.GAME_OVER, GameState.WON):
            return True
        if self.game.game_over:
            self.state = GameState.GAME_OVER
            logger.info(f"Session over. Score: {self.game.score} ({self.stats.summary()})")
            return True
        if self.game.won:
            self.state = GameState.WON
            logger.info(f"All levels cleared! Score: {self.game.score} ({self.stats.summary()})")
            self._event_service.emit(GameEventType.GAME_WON, score=self.game.score)
            return True
        return False

    def _start_countdown(self) -> None:
        self.state = GameState.LEVEL_START
        self._countdown_start = self._clock()
        self._pause_ticks = 0

    def handle_input(self, token: str) -> None:
        if is_quit_token(token):
            self.game.quit()
            self._sync_terminal_state()
            return
        if self.state in _INPUT_STATES:
            self.game.handle_input(token)

    def restart(self) -> None:
        """Oyunu baştan başlatır (haritalar orijinal hallerine döner)."""
        self._event_service.emit(GameEventType.GAME_RESTARTED)
        self.game = self._new_game()
        self._start_countdown()
        logger.info("Game restarted")

    def is_finished(self) -> bool:
        return self.state in (GameState.GAME_OVER, GameState.WON)

    def countdown_remaining(self) -> int:
        """LEVEL_START durumunda kalan saniye (yukarı yuvarlanmış), diğer durumlarda 0."""
        if self.state != GameState.LEVEL_START:
            return 0
        remaining = self.settings.countdown_seconds - (self._clock() - self._countdown_start)
        if remaining <= 0:
            return 0
        return math.ceil(remaining)

    def view_state(self) -> "GameController.GameViewState":
        game = self.game
        level_map = game.current()
        player = game.player.snapshot()
        return self.GameViewState(
            width=level_map.width,
            height=level_map.height,
            name=level_map.name,
            material=level_map.material,
            cells=level_map.rows(),
            player=self.PlayerView(position=player.position, direction=player.direction),
            monsters=tuple(
                self.MonsterView(position=monster.position, direction=monster.direction)
                for monster in game.monsters
            ),
            score=game.score,
            lives=game.lives,
            level_index=game.current_level,
            level_count=game.level_count,
            dots_left=level_map.count_dots(),
            state=self.state,
            countdown=self.countdown_remaining(),
            dot_eaten=game.dot_eaten,
            life_lost=game.life_lost,
            level_completed=game.level_completed,
            paused=game.paused,
        )
