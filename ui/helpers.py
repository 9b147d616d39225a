"""ui.helpers — Shared drawing utilities for panels and HUD widgets."""

from __future__ import annotations
import pygame


def blit_alpha_rect(surface: pygame.Surface, color: tuple,
                    rect: pygame.Rect | tuple, radius: int = 0) -> None:
    """Fill *rect* with an RGBA colour, blending onto *surface*."""
    rect = pygame.Rect(rect)
    if len(color) == 3 or color[3] == 255:
        pygame.draw.rect(surface, color[:3], rect, border_radius=radius)
        return
    tmp = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(tmp, color, tmp.get_rect(), border_radius=radius)
    surface.blit(tmp, rect.topleft)


def wrap_text(text: str, max_width: int, measure) -> list[str]:
    """Greedy word wrap.  *measure(s)* returns the pixel width of *s*
    (normally ``font.size(s)[0]``).  A single word wider than
    *max_width* gets a line to itself."""
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if line and measure(candidate) > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


def draw_panel(surface: pygame.Surface, rect: pygame.Rect,
               alpha: int = 200, radius: int = 8) -> None:
    """Dark semi-transparent rounded panel."""
    blit_alpha_rect(surface, (0, 0, 0, alpha), rect, radius)


def draw_button(
    surface: pygame.Surface, app,
    rect: pygame.Rect, label: str,
    *,
    enabled: bool = True,
) -> pygame.Rect:
    """Draw a rounded push-button.  Returns its ``Rect`` for hit-testing."""
    fill = (90, 200, 120) if enabled else (140, 140, 140)
    pygame.draw.rect(surface, fill, rect, border_radius=6)
    app.draw_text_centered(surface, label, rect.centerx, rect.centery,
                           (0, 0, 0), font=app.font_sm)
    return rect


def draw_bar(surface: pygame.Surface, x: int, y: int, w: int, h: int,
             ratio: float) -> None:
    """Stat bar coloured green → yellow → red as *ratio* falls."""
    ratio = max(0.0, min(1.0, ratio))
    if ratio > 0.5:
        color = (50, 200, 50)
    elif ratio > 0.25:
        color = (220, 200, 50)
    else:
        color = (220, 50, 50)
    pygame.draw.rect(surface, (40, 40, 40), (x, y, w, h))
    if ratio > 0:
        pygame.draw.rect(surface, color, (x, y, max(1, int(w * ratio)), h))
    pygame.draw.rect(surface, (80, 80, 80), (x, y, w, h), 1)


def blit_alpha_outline(surface: pygame.Surface, color: tuple,
                       rect: pygame.Rect | tuple, width: int = 1) -> None:
    """1 px (or *width*) RGBA outline around *rect*."""
    rect = pygame.Rect(rect)
    tmp = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(tmp, color, tmp.get_rect(), width)
    surface.blit(tmp, rect.topleft)
