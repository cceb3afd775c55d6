"""
Harita yükleme hataları.
"""
from __future__ import annotations


class MapError(ValueError):
    """Harita dosyası okunamadı, parse edilemedi veya doğrulamadan geçemedi."""
