"""
Map Parser: metin bloğundan LevelMap oluşturur.
SOLID - Single Responsibility: Sadece parse işleminden sorumlu, doğrulama map_validator'da.

Blok içeriği:
- Metadata satırları: ``key: value`` veya ``key=value`` (key büyük/küçük harf duyarsız)
- Grid satırları: diğer tüm boş olmayan satırlar (baştaki ve sondaki boşluklar atılır)
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from pacmaze.model.cell import cell_from_char
from pacmaze.model.errors import MapError
from pacmaze.model.level_map import (
    DEFAULT_MONSTER_COUNT,
    DEFAULT_SPEED_MODIFIER,
    MAX_SPEED_MODIFIER,
    MIN_SPEED_MODIFIER,
    LevelMap,
    Position,
)

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset(
    {
        "name",
        "material",
        "monsters",
        "speedmodifier",
        "playerstart",
        "monsterstart",
        "monsterstarts",
    }
)


class MapParser:
    """Metin bloğunu (tek level) LevelMap'e dönüştürür."""

    @staticmethod
    def parse_meta_line(line: str) -> tuple[str, str]:
        """
        Metadata satırını (key, value) olarak ayırır.
        Önce ':' sonra '=' denenir. Ayırıcı yoksa ("", "") döner.
        """
        trimmed = line.strip()
        for separator in (":", "="):
            idx = trimmed.find(separator)
            if idx != -1:
                return trimmed[:idx].strip(), trimmed[idx + 1:].strip()
        return "", ""

    @staticmethod
    def parse_start_pair(value: str) -> Position:
        """``x,y`` formatındaki koordinatı parse eder."""
        parts = value.split(",")
        if len(parts) != 2:
            raise ValueError("x,y bekleniyordu")
        return int(parts[0].strip()), int(parts[1].strip())

    @staticmethod
    def parse_start_list(value: str) -> list[Position]:
        """``x,y; x,y; ...`` listesini parse eder, boş parçalar atlanır."""
        positions: list[Position] = []
        for part in value.strip().split(";"):
            part = part.strip()
            if not part:
                continue
            positions.append(MapParser.parse_start_pair(part))
        return positions

    @staticmethod
    def parse(block: str | Iterable[str]) -> LevelMap:
        """
        Tek bir level bloğunu parse eder.

        Args:
            block: Blok metni veya satır listesi

        Returns:
            LevelMap: Doğrulanmamış harita

        Raises:
            MapError: Geçersiz metadata veya grid verisi yoksa
        """
        lines = block.splitlines() if isinstance(block, str) else list(block)

        name = ""
        material = ""
        monster_count = DEFAULT_MONSTER_COUNT
        speed_modifier = DEFAULT_SPEED_MODIFIER
        player_start: Optional[Position] = None
        monster_starts: list[Position] = []
        grid_lines: list[str] = []

        for raw in lines:
            trimmed = raw.strip()
            if not trimmed:
                continue

            # Metadata gibi görünüyor mu?
            if ":" in trimmed or "=" in trimmed:
                key, value = MapParser.parse_meta_line(trimmed)
                key = key.lower()
                if key in KNOWN_KEYS:
                    if key == "name":
                        name = value
                    elif key == "material":
                        material = value
                    elif key == "monsters":
                        monster_count = MapParser._parse_monster_count(value)
                    elif key == "speedmodifier":
                        speed_modifier = MapParser._parse_speed_modifier(value)
                    elif key == "playerstart":
                        try:
                            player_start = MapParser.parse_start_pair(value)
                        except ValueError:
                            raise MapError(f"Geçersiz playerStart: {value!r}") from None
                    else:
                        try:
                            monster_starts.extend(MapParser.parse_start_list(value))
                        except ValueError:
                            raise MapError(f"Geçersiz monsterStarts: {value!r}") from None
                    continue

            # Buraya geldiysek grid verisi
            grid_lines.append(trimmed)

        if not grid_lines:
            raise MapError("Haritada grid verisi yok")

        rows = [[cell_from_char(ch) for ch in grid_line] for grid_line in grid_lines]
        level_map = LevelMap.from_rows(
            rows,
            name=name,
            material=material,
            monster_count=monster_count,
            speed_modifier=speed_modifier,
            player_start=player_start,
            monster_starts=monster_starts,
        )
        logger.debug(
            "Parsed map %r (%dx%d, monsters=%d, speed=%.2f)",
            name, level_map.width, level_map.height, monster_count, speed_modifier,
        )
        return level_map

    @staticmethod
    def _parse_monster_count(value: str) -> int:
        try:
            count = int(value)
        except ValueError:
            raise MapError(f"Geçersiz monsters sayısı: {value!r}") from None
        if count < 0:
            raise MapError(f"Geçersiz monsters sayısı: {value!r}")
        return count

    @staticmethod
    def _parse_speed_modifier(value: str) -> float:
        try:
            modifier = float(value)
        except ValueError:
            modifier = None
        # NaN karşılaştırmaları da burada yakalanır
        if modifier is None or not (MIN_SPEED_MODIFIER <= modifier <= MAX_SPEED_MODIFIER):
            raise MapError(
                f"Geçersiz speedModifier: {value!r} "
                f"({MIN_SPEED_MODIFIER} ile {MAX_SPEED_MODIFIER} arasında olmalı)"
            )
        return modifier
