"""
Level Repository: Level verilerini metin dosyasından yükleyen repository.
SOLID - Repository Pattern: Veri erişim katmanını soyutlar.

Dosya formatı: ``---`` satırı ile ayrılmış level blokları.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pacmaze.model.errors import MapError
from pacmaze.model.level_map import LevelMap
from pacmaze.service.map_parser import MapParser
from pacmaze.service.map_validator import MapValidator

logger = logging.getLogger(__name__)

LEVEL_SEPARATOR = "---"


class LevelRepositoryText:
    """
    Level Repository: metin dosyasındaki level'ları yönetir.
    Repository Pattern - Veri erişim mantığını iş mantığından ayırır.
    """

    def __init__(self, path: str | Path) -> None:
        """
        Args:
            path: Harita dosyasının yolu
        """
        self._path = Path(path)
        self._cache: list[LevelMap] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def find_all(self) -> list[LevelMap]:
        """
        Tüm level'ları sırasıyla getirir (parse + doğrulama, cache'lenmiş).
        Her çağrı bağımsız kopyalar döndürür; oyun hücreleri değiştirir.
        """
        if self._cache is None:
            self._cache = self._load_all()
        return [level.copy() for level in self._cache]

    def _load_all(self) -> list[LevelMap]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MapError(f"Harita dosyası okunamadı: {self._path}: {e}") from e

        levels = self.parse_levels(text.splitlines())
        logger.info(f"Loaded {len(levels)} level(s) from {self._path}")
        return levels

    @staticmethod
    def split_blocks(lines: Iterable[str]) -> list[list[str]]:
        """Satırları ``---`` ayırıcısına göre bloklara böler; boş bloklar atlanır."""
        blocks: list[list[str]] = []
        current: list[str] = []
        for raw in lines:
            line = raw.rstrip("\r\n")
            if line == LEVEL_SEPARATOR:
                if current:
                    blocks.append(current)
                    current = []
                continue
            if line.strip():
                current.append(line)
        if current:
            blocks.append(current)
        return blocks

    @staticmethod
    def parse_levels(lines: Iterable[str]) -> list[LevelMap]:
        """
        Tüm blokları parse eder, doğrular ve boyut eşliğini kontrol eder.

        Raises:
            MapError: Herhangi bir level geçersizse (kısmi yükleme yok)
        """
        levels: list[LevelMap] = []
        for number, block in enumerate(LevelRepositoryText.split_blocks(lines), start=1):
            try:
                level_map = MapParser.parse(block)
                MapValidator.validate(level_map)
            except MapError as e:
                raise MapError(f"Level {number}: {e}") from e
            levels.append(level_map)

        if not levels:
            raise MapError("Dosyada harita bulunamadı")

        # Tüm haritalar aynı boyutta olmalı
        first = levels[0]
        for number, level_map in enumerate(levels[1:], start=2):
            if (level_map.width, level_map.height) != (first.width, first.height):
                raise MapError(
                    f"Level {number} boyutu ({level_map.width}x{level_map.height}) "
                    f"ilk haritadan ({first.width}x{first.height}) farklı. "
                    f"Bir dosyadaki tüm haritalar aynı boyutta olmalı"
                )
        return levels
