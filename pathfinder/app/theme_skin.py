# pathfinder/app/theme_skin.py
"""
Visual skin for the viewer (drawing only; no logic)
- Backdrop: dark vertical gradient, cached per window size
- Grid: flat cell colours by CellType, thin borders, hover highlight
- Path cells: a 3x3 inner layout whose centre and arms link to the
  neighbouring Path/Start/End cells, so the route reads as one line
- Right panel: frosted glass underlay (viewer draws text/buttons on top)
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple

import pygame

from pathfinder.core.grid import Grid
from pathfinder.core.types import CellType, Coord, DIRECTIONS

# ---- palette ----
CELL_COLORS: Dict[CellType, Tuple[int, int, int]] = {
    CellType.WALL:    (115, 115, 115),
    CellType.START:   ( 34, 197,  94),
    CellType.END:     (239,  68,  68),
    CellType.PATH:    ( 59, 130, 246),
    CellType.VISITED: (234, 179,   8),
    CellType.EMPTY:   (255, 255, 255),
}
BORDER        = (212, 212, 212)
LINK          = ( 23,  23,  23)
HOVER_A       = (115, 115, 115, 90)
TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210,   0)
PANEL_FILL    = ( 18,  20,  28, 190)
PANEL_SHADOW  = (  0,   0,   0, 140)
CARD_BG       = ( 24,  28,  36, 220)
CARD_HI       = (255, 255, 255,  18)

_LINKED = (CellType.PATH, CellType.START, CellType.END)

# caches
_backdrop_by_size: dict[Tuple[int, int], pygame.Surface] = {}


# ---------- helpers ----------
def _rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)


def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    _rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(card, card.get_rect(), fill_rgba, radius=20)
    screen.blit(card, rect.topleft)


def card(screen: pygame.Surface, rect: pygame.Rect):
    """Metrics/result card with a faint top sheen."""
    surf = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(surf, surf.get_rect(), CARD_BG, radius=14)
    hi = pygame.Surface((rect.width, 24), pygame.SRCALPHA)
    _rounded_rect(hi, hi.get_rect(), CARD_HI, radius=14)
    surf.blit(hi, (0, 0))
    screen.blit(surf, rect.topleft)


def draw_backdrop(screen: pygame.Surface):
    size = screen.get_size()
    if size not in _backdrop_by_size:
        w, h = size
        surf = pygame.Surface(size)
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h - 1)
            c = tuple(int(top[i] + (bot[i] - top[i]) * t) for i in range(3))
            pygame.draw.line(surf, c, (0, y), (w, y))
        _backdrop_by_size.clear()
        _backdrop_by_size[size] = surf
    screen.blit(_backdrop_by_size[size], (0, 0))


# ---------- grid ----------
def _draw_path_links(screen: pygame.Surface, rect: pygame.Rect, grid: Grid, c: Coord):
    third = rect.width // 3
    ox, oy = rect.x + third, rect.y + third
    pygame.draw.rect(screen, LINK, (ox, oy, third, third))
    r, col = c
    for dr, dc in DIRECTIONS:
        n = (r + dr, col + dc)
        if grid.in_bounds(n) and grid.get(n) in _LINKED:
            pygame.draw.rect(screen, LINK, (ox + dc * third, oy + dr * third, third, third))


def draw_grid(screen: pygame.Surface, grid: Grid, origin: Tuple[int, int], cs: int,
              hover: Optional[Coord] = None):
    ox, oy = origin
    for row in range(grid.rows):
        for col in range(grid.cols):
            cell = grid.cells[row][col]
            rect = pygame.Rect(ox + col * cs, oy + row * cs, cs, cs)
            pygame.draw.rect(screen, CELL_COLORS[cell], rect)
            if cell == CellType.PATH:
                _draw_path_links(screen, rect, grid, (row, col))
            pygame.draw.rect(screen, BORDER, rect, 1)

    if hover is not None:
        row, col = hover
        s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(HOVER_A)
        screen.blit(s, (ox + col * cs, oy + row * cs))
