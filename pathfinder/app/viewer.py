#!/usr/bin/env python3
"""
Grid Pathfinder Viewer -- paint a grid, watch the frontier grow

- Mouse:
    left drag     -> paint with the current mode (walls drag, start/end place)
    right drag    -> erase
- Keyboard:
    [W]/[S]/[E]   -> drawing mode: Wall / Start / End
    [SPACE]       -> start algorithm
    [R]           -> reset calculated cells
    [C]           -> clear the grid
    [1]/[2]/[3]   -> open map preset
    [P]           -> save the painted layout to maps/custom.json
    [+]/[-]       -> rounds/sec
    [Q]/[ESC]     -> quit

Settings: see pathfinder/app/settings.py (PATHFINDER_* env, --key=value).
"""

# --- bootstrap import path so `from pathfinder...` works when run as a script ---
import sys, time, logging
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from typing import List, Optional, Tuple
import pygame

from pathfinder.app import theme_skin as THEME
from pathfinder.app.editing import DrawingMode, cell_at, paint, erase, clear_grid, reset_calculated
from pathfinder.app.maps import CUSTOM_MAP, MAP_FILES, MAP_LABELS, load_preset, save_map
from pathfinder.app.settings import ViewerSettings, resolve_settings, configure_logging
from pathfinder.core.grid import Grid
from pathfinder.core.search import SearchRun, iter_search, locate_endpoints
from pathfinder.core.types import Coord, PathfinderError, Snapshot

LOGGER = logging.getLogger(__name__)

FONT_NAME = None  # default pygame font
MIN_CELL = 8


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False
        self.enabled = True

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if not self.enabled:
            bg = (36, 40, 48, 110)
        elif self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        fg = (235, 238, 242) if self.enabled else (120, 124, 130)
        text = font.render(self.label, True, fg)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """True when the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                if self.enabled:
                    self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: ViewerSettings, map_key: Optional[str] = None):
        pygame.init()

        self.settings = settings
        self.grid = grid                      # the painted grid; replaced by each run's result
        self.shown: Grid = grid               # what is on screen (latest snapshot while running)
        self.run_: Optional[SearchRun] = None
        self.mode = DrawingMode.WALL
        self.drawing: Optional[int] = None    # mouse button held over the grid
        self.hover: Optional[Coord] = None
        self.result_text: Optional[str] = None
        self.steps_per_sec = settings.steps_per_sec
        self.selected_map_key = map_key or "custom"
        self._last: Optional[Snapshot] = None
        self._last_step_t = 0.0

        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 26)

        cs = settings.cell_size
        win_w = settings.grid_margin * 2 + grid.cols * cs + settings.panel_w
        win_h = max(settings.grid_margin * 2 + grid.rows * cs, 640)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Grid Pathfinder")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)
        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        m = self.settings.grid_margin
        panel_w = self.settings.panel_w
        avail_w = max(1, win_w - panel_w - 2 * m)
        avail_h = max(1, win_h - 2 * m)
        self.cell_size = max(MIN_CELL, min(avail_w // self.grid.cols, avail_h // self.grid.rows))

        plate_w = self.grid.cols * self.cell_size + 2 * m
        plate_h = self.grid.rows * self.cell_size + 2 * m
        left_x = max(0, (win_w - (plate_w + panel_w)) // 2)
        top_y = max(0, (win_h - plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, plate_w, plate_h)
        self._grid_origin = (left_x + m, top_y + m)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(panel_w, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    @property
    def running(self) -> bool:
        return self.run_ is not None

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    # ---------- search ----------
    def _start_search(self):
        if self.running:
            LOGGER.warning("Algorithm is already running.")
            return
        self.grid = reset_calculated(self.grid)
        self.shown = self.grid
        self.result_text = None
        try:
            start, end = locate_endpoints(self.grid)
            self.run_ = iter_search(self.grid, start, end)
        except PathfinderError as ex:
            LOGGER.error("%s", ex)
            self.result_text = str(ex)
            return
        self._last = None
        self._last_step_t = 0.0
        self._refresh_active_states()

    def _tick_algorithm(self):
        now = time.time()
        interval = 1.0 / max(1, self.steps_per_sec)
        if self._last is not None and self._last.kind == "commit":
            interval /= 2
        if now - self._last_step_t >= interval:
            self._last_step_t = now
            self._do_step()

    def _do_step(self):
        try:
            snap = next(self.run_)
        except StopIteration:
            snap = None
        if snap is not None:
            self._last = snap
            self.shown = snap.grid
        if snap is None or snap.terminal:
            self._finish_search()

    def _finish_search(self):
        run, self.run_ = self.run_, None
        run.close()
        result = run.result
        self.grid = result.grid
        self.shown = self.grid
        if result.found:
            self.result_text = f"Path found with {result.steps} steps."
        elif result.status == "cancelled":
            self.result_text = "Search cancelled."
        else:
            self.result_text = "No path found."
        self._refresh_active_states()

    def _abort_search(self):
        if self.running:
            self.run_.cancel()
            self._finish_search()

    # ---------- editing ----------
    def _paint_at(self, pos: Tuple[int, int], button: int):
        if self.running:
            return
        c = cell_at(pos, self._grid_origin, self.cell_size, self.grid)
        if c is None:
            return
        if button == 3:
            erase(self.grid, c)
        else:
            paint(self.grid, c, self.mode)
        self.shown = self.grid

    def _set_mode(self, mode: DrawingMode):
        self.mode = mode
        self._refresh_active_states()

    def _clear_grid(self):
        self._abort_search()
        self.grid = clear_grid(self.grid)
        self.shown = self.grid
        self.result_text = None

    def _reset_calculated(self):
        self._abort_search()
        self.grid = reset_calculated(self.grid)
        self.shown = self.grid
        self.result_text = None

    def _switch_map(self, key: str):
        if key not in MAP_FILES:
            return
        self._abort_search()
        try:
            self.grid = load_preset(key)
        except (OSError, ValueError, KeyError) as ex:
            LOGGER.error("Failed to load map %s: %s", key, ex)
            return
        self.shown = self.grid
        self.selected_map_key = key
        self.result_text = None
        pygame.display.set_caption(f"Grid Pathfinder - {MAP_LABELS[key]}")
        self._layout(*self.screen.get_size())

    def _save_layout(self):
        try:
            path = save_map(self.grid, CUSTOM_MAP)
        except OSError as ex:
            LOGGER.error("Failed to save map: %s", ex)
            self.result_text = "Could not save the layout."
            return
        LOGGER.info("Layout saved to %s", path)
        self.result_text = f"Saved to {path.name}"

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                clicked = any([b.handle_mouse(e) for b in self._buttons])
                if e.type == pygame.MOUSEMOTION:
                    self.hover = cell_at(e.pos, self._grid_origin, self.cell_size, self.grid)
                    if self.drawing is not None and (self.mode == DrawingMode.WALL or self.drawing == 3):
                        self._paint_at(e.pos, self.drawing)
                elif not clicked and e.button in (1, 3) and self.canvas_rect.collidepoint(e.pos):
                    self.drawing = e.button
                    self._paint_at(e.pos, e.button)
            elif e.type == pygame.MOUSEBUTTONUP:
                self.drawing = None
            elif e.type == pygame.WINDOWLEAVE:
                self.drawing = None
                self.hover = None

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit()
        elif key == pygame.K_w:
            self._set_mode(DrawingMode.WALL)
        elif key == pygame.K_s:
            self._set_mode(DrawingMode.START)
        elif key == pygame.K_e:
            self._set_mode(DrawingMode.END)
        elif key == pygame.K_SPACE:
            self._start_search()
        elif key == pygame.K_r:
            self._reset_calculated()
        elif key == pygame.K_c:
            self._clear_grid()
        elif key == pygame.K_p:
            self._save_layout()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._bump_speed(+1)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self._bump_speed(-1)
        elif key in (pygame.K_1, pygame.K_2, pygame.K_3):
            keys = list(MAP_FILES)
            self._switch_map(keys[key - pygame.K_1])

    def _quit(self):
        self._abort_search()
        pygame.quit()
        sys.exit(0)

    # ---------- buttons ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for the result card above
        w = max(160, rb.width - 32)
        h = 36
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        # drawing modes share one row
        third = (w - 2 * gap) // 3
        for i, mode in enumerate(DrawingMode):
            btn = UIButton(mode.value.title(), pygame.Rect(x + i * (third + gap), y, third, h),
                           lambda m=mode: self._set_mode(m), togglable=True)
            btn.mode = mode
            self._buttons.append(btn)
        y += h + gap * 2

        add("Start Algorithm", self._start_search, store_as="btn_start"); y += h + gap
        add("Reset Calculated Cells", self._reset_calculated); y += h + gap
        add("Clear the Grid", self._clear_grid); y += h + gap * 2

        half = (w - gap) // 2
        self._buttons.append(UIButton("Speed -", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + gap, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap * 2

        for key in MAP_FILES:
            add(MAP_LABELS[key], lambda k=key: self._switch_map(k), togglable=True); y += h + gap
            self._buttons[-1].map_key = key

        self._refresh_active_states()

    def _refresh_active_states(self):
        for b in self._buttons:
            if hasattr(b, "mode"):
                b.active = b.mode == self.mode
            elif hasattr(b, "map_key"):
                b.active = b.map_key == self.selected_map_key
        if hasattr(self, "btn_start"):
            self.btn_start.enabled = not self.running

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        THEME.draw_grid(self.screen, self.shown, self._grid_origin, self.cell_size,
                        hover=None if self.running else self.hover)
        THEME.glass_panel(self.screen, self._right_band)
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        THEME.card(self.screen, pygame.Rect(rb.x + 10, rb.y + 10, rb.width - 20, 230))

        x0 = rb.x + 24
        y0 = rb.y + 20

        def line(text, big=False, color=THEME.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Grid Pathfinder", big=True, color=THEME.ACCENT_GOLD)
        m = self._last.metrics if self._last is not None else {}
        state = self._last.status if self.running and self._last is not None else ("Running" if self.running else "Idle")
        line(f"State: {state}")
        line(f"Iteration: {m.get('iteration', 0)}")
        line(f"Frontier: {m.get('frontier_size', 0)}   Visited: {m.get('visited_count', 0)}")
        line(f"Speed: {self.steps_per_sec} rounds/s")
        line(f"Mode: {self.mode.value.title()}")
        if self.result_text:
            line(self.result_text, color=THEME.ACCENT_GOLD)

        for b in self._buttons:
            b.draw(self.screen, self.font_small)


# ---------- main ----------
def main(settings: Optional[ViewerSettings] = None):
    settings = settings or resolve_settings()
    configure_logging(settings.log_level)
    if settings.map_key:
        try:
            grid = load_preset(settings.map_key)
        except (OSError, ValueError, KeyError) as ex:
            LOGGER.error("Failed to load map %s: %s", settings.map_key, ex)
            sys.exit(1)
    else:
        grid = Grid.empty(settings.rows, settings.cols)
    Viewer(grid, settings, map_key=settings.map_key).run()


if __name__ == "__main__":
    main()
