"""
Game: tek bir oyun oturumunun çekirdeği (level yükleme, tick, skor, can, çarpışma).
View sadece intent iletir (handle_input) ve state okur.

update() sabit aralıklı tick döngüsünden çağrılır. Level'lar arası geçiş burada
yapılmaz; GameController durum makinesi level_completed bayrağına bakarak karar verir.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional, Sequence

from pacmaze.config.settings import GameSettings
from pacmaze.model.cell import Direction
from pacmaze.model.level_map import LevelMap
from pacmaze.model.monster import Monster, is_occupied_by_monster
from pacmaze.model.player import Player
from pacmaze.service.collision_service import CollisionKind, CollisionService
from pacmaze.service.game_event_service import GameEventService, GameEventType
from pacmaze.service.spawn_service import SpawnService

logger = logging.getLogger(__name__)

BASE_DOT_SCORE = 10

_DIRECTION_TOKENS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
_QUIT_TOKENS = frozenset({"q", "quit", "esc", "escape"})


def is_quit_token(token: str) -> bool:
    normalized = token.strip().lower()
    return bool(normalized) and (normalized in _QUIT_TOKENS or normalized[0] == "q")


def dot_score(speed_modifier: float) -> int:
    return int(BASE_DOT_SCORE * speed_modifier)


class Game:
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
        self._spawn_service = SpawnService(rng or random.Random())
        self._clock = clock or time.monotonic
        self._event_service = event_service or GameEventService()

        self.maps: list[LevelMap] = list(levels)
        self.current_map: Optional[LevelMap] = None
        self.current_level: int = 0
        self.current_speed_modifier: float = 1.0
        self.player: Optional[Player] = None
        self.monsters: list[Monster] = []
        self.score: int = 0
        self.lives: int = self.settings.lives

        self.game_over: bool = False
        self.won: bool = False
        self.life_lost: bool = False
        self.dot_eaten: bool = False
        self.level_completed: bool = False
        self.paused: bool = False

        self._pending_respawn: bool = False
        self._respawn_deadline: float = 0.0

        self.load_level(0)

    @property
    def level_count(self) -> int:
        return len(self.maps)

    def current(self) -> LevelMap:
        if self.current_map is None:
            raise RuntimeError("Level yüklenmedi.")
        return self.current_map

    def load_level(self, level: int) -> None:
        if level >= len(self.maps):
            self.won = True
            return

        self.current_level = level
        self.current_map = self.maps[level]
        self.current_speed_modifier = self.current_map.speed_modifier
        self._clear_tick_flags()
        self.level_completed = False
        self._pending_respawn = False

        self._place_player()
        # Doğma noktası hiçbir zaman bir noktaya mal olmaz
        self.current_map.eat_dot(*self.player.position)
        self._place_monsters()

        logger.info(
            f"Level {level + 1}/{len(self.maps)} loaded: {self.current_map.name or 'unnamed'} "
            f"({self.current_map.count_dots()} dots, {len(self.monsters)} monsters)"
        )
        self._event_service.emit(
            GameEventType.LEVEL_STARTED,
            level=level,
            name=self.current_map.name,
        )

    def _place_player(self) -> None:
        x, y = self._spawn_service.player_position(
            self.current(), randomize=self.settings.random_player_spawn
        )
        self.player = Player(x, y, queue_capacity=self.settings.queue_capacity)

    def _place_monsters(self) -> None:
        if self.settings.disable_monsters:
            self.monsters = []
            return
        self.monsters = self._spawn_service.monsters(
            self.current(), self.player.position, self.settings.min_monster_distance
        )

    def _clear_tick_flags(self) -> None:
        self.life_lost = False
        self.paused = False
        self.dot_eaten = False

    def update(self) -> None:
        """Bir simülasyon tick'i."""
        if self.game_over or self.won:
            return

        self._clear_tick_flags()
        self.level_completed = False

        # Can kaybından sonra kısa bekleme; çarpışma görünür kalsın
        if self._pending_respawn:
            if self._clock() < self._respawn_deadline:
                self.paused = True
                return
            self._pending_respawn = False
            self._place_player()
            self._place_monsters()

        level_map = self.current()
        player = self.player
        player_before = player.position
        monsters_before = [monster.position for monster in self.monsters]

        player.move(level_map)

        if level_map.has_dot(*player.position):
            level_map.eat_dot(*player.position)
            self.score += dot_score(self.current_speed_modifier)
            self.dot_eaten = True
            self._event_service.emit(
                GameEventType.DOT_EATEN, position=player.position, score=self.score
            )

        # Sıra önemli: her canavar öncekilerin yeni pozisyonlarını engel olarak görür
        for monster in self.monsters:
            monster.move(level_map, player.position, self.monsters)

        collision = CollisionService.detect(
            player_before,
            player.position,
            monsters_before,
            [monster.position for monster in self.monsters],
        )
        if collision is not None:
            monster = self.monsters[collision.monster_index]
            if collision.kind == CollisionKind.SWAP and not is_occupied_by_monster(
                player.position, self.monsters, monster
            ):
                # Yakalanma görünsün diye canavar oyuncunun hücresine alınır
                monster.x, monster.y = player.position
            self._lose_life()
            return

        if level_map.count_dots() == 0:
            self.level_completed = True
            self._event_service.emit(
                GameEventType.LEVEL_COMPLETED, level=self.current_level, score=self.score
            )

    def _lose_life(self) -> None:
        self.lives -= 1
        if self.lives <= 0:
            self.lives = 0
            self.game_over = True
            logger.info(f"Game over! Final score: {self.score}")
            self._event_service.emit(GameEventType.GAME_OVER, score=self.score, quit=False)
            return

        self.life_lost = True
        self.paused = True
        self._pending_respawn = True
        self._respawn_deadline = self._clock() + self.settings.respawn_pause
        self._event_service.emit(
            GameEventType.LIFE_LOST, lives=self.lives, position=self.player.position
        )

    def handle_input(self, token: str) -> None:
        """Yön token'ı (up/w, down/s, ...) veya çıkış (q/quit)."""
        normalized = token.strip().lower()
        if not normalized:
            return
        if is_quit_token(normalized):
            self.quit()
            return

        direction = _DIRECTION_TOKENS.get(normalized) or _DIRECTION_TOKENS.get(normalized[0])
        if direction is not None and self.player is not None:
            self.player.set_direction(direction)

    def quit(self) -> None:
        if self.game_over:
            return
        self.game_over = True
        logger.info("Game aborted by player")
        self._event_service.emit(GameEventType.GAME_OVER, score=self.score, quit=True)

    def mark_won(self) -> None:
        self.won = True
