"""
Oyun Ayarları: tick hızı, can sayısı, bekleme süreleri.
Ortam değişkenleri ile override edilebilir (CLI parametreleri en son uygulanır).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

# Varsayılan harita dosyası (çalışma dizinine göre)
MAPS_DIR = Path("maps")
DEFAULT_MAP_FILE = MAPS_DIR / "maps.txt"


@dataclass(frozen=True)
class GameSettings:
    tick_interval: float = 0.22  # saniye
    lives: int = 3
    respawn_pause: float = 1.0  # Can kaybından sonra bekleme (saniye)
    countdown_seconds: float = 3.0  # Level başı geri sayım
    level_complete_pause_ticks: int = 2
    min_monster_distance: int = 4  # Canavar doğma mesafesi (BFS)
    queue_capacity: int = 2  # Oyuncu yön kuyruğu
    random_player_spawn: bool = True
    disable_monsters: bool = False
    block_size: int = 20  # pygame hücre boyutu (piksel)

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "GameSettings":
        """PACMAZE_* ortam değişkenlerinden ayarları okur."""
        env = os.environ if environ is None else environ
        defaults = GameSettings()

        tick_ms = env.get("PACMAZE_TICK_MS")
        return GameSettings(
            tick_interval=int(tick_ms) / 1000.0 if tick_ms else defaults.tick_interval,
            lives=int(env.get("PACMAZE_LIVES", defaults.lives)),
            respawn_pause=float(env.get("PACMAZE_RESPAWN_PAUSE", defaults.respawn_pause)),
            countdown_seconds=float(env.get("PACMAZE_COUNTDOWN", defaults.countdown_seconds)),
            min_monster_distance=int(
                env.get("PACMAZE_MIN_MONSTER_DISTANCE", defaults.min_monster_distance)
            ),
        )

    def with_overrides(self, **overrides) -> "GameSettings":
        """None olmayan değerlerle yeni bir kopya döndürür."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
