"""
HUD yardımcıları: monospace font seçimi ve kutulu metin çizimi.
"""
from __future__ import annotations

import pygame

_MONOSPACE_FONTS = ("consolas", "dejavusansmono", "courier new")

_font_cache: dict[int, pygame.font.Font] = {}


def get_hud_font(size: int) -> pygame.font.Font:
    """
    Monospace font döndürür (önbellekli).
    Sistemde hiçbiri yoksa pygame'in varsayılan fontu kullanılır.
    """
    if size in _font_cache:
        return _font_cache[size]

    font = None
    for name in _MONOSPACE_FONTS:
        try:
            candidate = pygame.font.SysFont(name, size)
        except (pygame.error, OSError):
            continue
        if candidate.render("0", True, (255, 255, 255)).get_width() > 0:
            font = candidate
            break
    if font is None:
        font = pygame.font.Font(None, size)
    _font_cache[size] = font
    return font


def draw_text(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: tuple[int, int, int],
    pos: tuple[int, int],
    align: str = "left",
) -> pygame.Rect:
    """
    Metin çizer.

    Args:
        surface: Pygame surface
        text: Çizilecek metin
        font: Font
        color: Renk (RGB)
        pos: Pozisyon (x, y)
        align: "left", "center", "right"

    Returns:
        Text rect
    """
    text_surf = font.render(text, True, color)
    text_rect = text_surf.get_rect()

    if align == "center":
        text_rect.center = pos
    elif align == "right":
        text_rect.right = pos[0]
        text_rect.top = pos[1]
    else:
        text_rect.left = pos[0]
        text_rect.top = pos[1]

    surface.blit(text_surf, text_rect)
    return text_rect


def draw_banner(
    surface: pygame.Surface,
    text: str,
    color: tuple[int, int, int],
    size: int = 32,
) -> None:
    """Ekranı karartıp ortaya kutulu bir başlık yazar (GAME OVER vb.)."""
    overlay = pygame.Surface(surface.get_size(), flags=pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    surface.blit(overlay, (0, 0))

    font = get_hud_font(size)
    center = (surface.get_width() // 2, surface.get_height() // 2)
    rect = draw_text(surface, text, font, color, center, align="center")
    box = rect.inflate(24, 16)
    pygame.draw.rect(surface, color, box, width=2, border_radius=6)
