"""
Level Service: Harita dosyasını bulma ve level yükleme.
Repository katmanını kullanarak level verilerini sağlar.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pacmaze.config.settings import DEFAULT_MAP_FILE, MAPS_DIR
from pacmaze.model.level_map import LevelMap
from pacmaze.repository.level_repository_text import LevelRepositoryText

logger = logging.getLogger(__name__)


class LevelService:
    """Level yönetimi (dosya çözümleme, yükleme, listeleme)."""

    def __init__(self, maps_dir: Path = MAPS_DIR) -> None:
        self._maps_dir = Path(maps_dir)
        self._repository: Optional[LevelRepositoryText] = None

    def resolve_map_path(self, map_file: str | Path | None) -> Path:
        """
        Harita dosyasının yolunu belirler.
        Dosya yoksa ve sadece isim verildiyse maps/ klasörüne bakılır.
        """
        if map_file is None:
            return self._maps_dir / DEFAULT_MAP_FILE.name

        path = Path(map_file)
        if path.exists() or path.is_absolute() or path.parent != Path("."):
            return path

        candidate = self._maps_dir / path
        if candidate.exists():
            logger.debug(f"Using map file from maps directory: {candidate}")
            return candidate
        return path

    def load_levels(self, map_file: str | Path | None = None) -> list[LevelMap]:
        """
        Harita dosyasındaki tüm level'ları yükler.

        Raises:
            MapError: Dosya okunamadıysa veya herhangi bir level geçersizse
        """
        path = self.resolve_map_path(map_file)
        if self._repository is None or self._repository.path != path:
            self._repository = LevelRepositoryText(path)
        return self._repository.find_all()
