"""
Collision Service: oyuncu-canavar çarpışma algılaması.
Pure logic; side-effect'siz. Canavarı oyuncunun hücresine taşıma işini Game yapar.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from pacmaze.model.level_map import Position


class CollisionKind(Enum):
    DIRECT = "direct"  # Aynı hücre
    SWAP = "swap"  # Birbirinin içinden geçtiler


@dataclass(frozen=True)
class Collision:
    monster_index: int
    kind: CollisionKind


class CollisionService:
    """Tick öncesi ve sonrası pozisyonlardan çarpışma hesaplar."""

    @staticmethod
    def detect(
        player_before: Position,
        player_after: Position,
        monsters_before: Sequence[Position],
        monsters_after: Sequence[Position],
    ) -> Optional[Collision]:
        """
        Listedeki ilk çarpışan canavarı döndürür.

        Args:
            player_before: Oyuncunun hareket öncesi pozisyonu
            player_after: Oyuncunun hareket sonrası pozisyonu
            monsters_before: Canavarların hareket öncesi pozisyonları
            monsters_after: Canavarların hareket sonrası pozisyonları (aynı sırada)

        Returns:
            Collision veya None
        """
        for index, (before, after) in enumerate(zip(monsters_before, monsters_after)):
            if after == player_after:
                return Collision(index, CollisionKind.DIRECT)
            if player_after == before and after == player_before:
                return Collision(index, CollisionKind.SWAP)
        return None
