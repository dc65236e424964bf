# pathsandbox/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Sandbox Viewer — paint walls, drag markers, watch A* re-route.

- Mouse:
    [LMB]          -> toggle / paint walls (drag keeps painting)
    [LMB on S/G]   -> drag the start / goal marker
    [SHIFT + LMB]  -> move start here
    [RMB]          -> move goal here
- Keyboard:
    [R]            -> reset (clear walls)
    [H]            -> cycle heuristic
    [E]            -> show/hide explored cells
    [Q]/[ESC]      -> quit

Settings: see pathsandbox.core.config (env PATHSANDBOX_* or --key=value).
"""

import logging
import sys
from typing import List, Optional, Tuple

import pygame

from pathsandbox.app.geometry import cell_center, cell_rect, screen_to_cell, window_size
from pathsandbox.core.config import resolve_config
from pathsandbox.core.errors import GridError
from pathsandbox.core.sandbox import Sandbox
from pathsandbox.core.types import CellType, Coord

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 280            # right band: info + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
EMPTY_GRAY  = (200,200,200)
WALL_DARK   = ( 40, 44, 52)
BG_TOP      = ( 24, 26, 32)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

TILE_COLORS = {
    CellType.EMPTY: EMPTY_GRAY,
    CellType.WALL:  WALL_DARK,
    CellType.START: EMPTY_GRAY,
    CellType.END:   EMPTY_GRAY,
}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        bg = (46, 50, 60) if self.hover else (36, 40, 48)
        pygame.draw.rect(screen, bg, self.rect, border_radius=10)
        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """Return True when the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, sandbox: Sandbox, cell_size: int = 28):
        pygame.init()

        self.sandbox = sandbox
        self.cell_size = cell_size
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        win_w, win_h = window_size(sandbox.grid.shape, cell_size, GRID_MARGIN, PANEL_W)
        self.screen = pygame.display.set_mode((win_w, max(win_h, 420)))
        pygame.display.set_caption("Pathfinding Sandbox")

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._panel_x = win_w - PANEL_W

        self.show_explored = False
        self._drag: Optional[str] = None    # "start" | "end" | "paint"
        self._paint_wall = True
        self._last_cell: Optional[Coord] = None

        self.clock = pygame.time.Clock()
        self._buttons: List[UIButton] = []
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            self.sandbox.refresh()
            self._draw()
            self.clock.tick(60)

    # ---------- input ----------
    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Coord]:
        return screen_to_cell(pos, self._grid_origin, self.cell_size, self.sandbox.grid.shape)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_r:
                    self.sandbox.reset()
                elif e.key == pygame.K_h:
                    self.sandbox.cycle_heuristic()
                elif e.key == pygame.K_e:
                    self.show_explored = not self.show_explored
            elif e.type == pygame.MOUSEBUTTONDOWN:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                self._on_press(e)
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if self._drag:
                    self._on_drag(e.pos)
            elif e.type == pygame.MOUSEBUTTONUP:
                self._drag = None
                self._last_cell = None

    def _on_press(self, e: pygame.event.Event):
        cell = self._cell_at(e.pos)
        if cell is None:
            return
        grid = self.sandbox.grid
        if e.button == 3:
            self.sandbox.move_end(cell)
            return
        if e.button != 1:
            return
        if pygame.key.get_mods() & pygame.KMOD_SHIFT:
            self.sandbox.move_start(cell)
        elif cell == grid.start:
            self._drag = "start"
        elif cell == grid.end:
            self._drag = "end"
        else:
            self._drag = "paint"
            self._paint_wall = not grid.is_wall(cell)
            self.sandbox.paint(cell, self._paint_wall)
        self._last_cell = cell

    def _on_drag(self, pos: Tuple[int, int]):
        cell = self._cell_at(pos)
        if cell is None or cell == self._last_cell:
            return
        self._last_cell = cell
        grid = self.sandbox.grid
        if self._drag == "start" and cell != grid.end:
            self.sandbox.move_start(cell)
        elif self._drag == "end" and cell != grid.start:
            self.sandbox.move_end(cell)
        elif self._drag == "paint":
            self.sandbox.paint(cell, self._paint_wall)

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BG_TOP)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        origin = self._grid_origin
        grid = self.sandbox.grid

        for c, v in grid.cells():
            rect = pygame.Rect(cell_rect(c, origin, cs))
            pygame.draw.rect(self.screen, TILE_COLORS[v], rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        result = self.sandbox.result
        if self.show_explored and result is not None:
            overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
            for cells, color in ((result.closed_set, NEON_MAG_A), (result.open_set, NEON_CYAN_A)):
                overlay.fill(color)
                for c in cells:
                    self.screen.blit(overlay, cell_rect(c, origin, cs)[:2])

        # path, drawn from the start marker through every returned cell
        path = self.sandbox.path
        if path:
            pts = [cell_center(c, origin, cs) for c in [grid.start] + path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 6))

        self._draw_marker(grid.start, BLUE, "S")
        self._draw_marker(grid.end, RED, "G")

    def _draw_marker(self, c: Coord, color: Tuple[int,int,int], label: str):
        cx, cy = cell_center(c, self._grid_origin, self.cell_size)
        pygame.draw.circle(self.screen, color, (cx,cy), max(4, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx,cy)))

    # ---------- buttons + info ----------
    def _build_buttons(self):
        x = self._panel_x + 16
        y = 250
        w = PANEL_W - 32
        h = 34
        gap = 10
        for label, cb in (
            ("Reset", self.sandbox.reset),
            ("Next heuristic", self.sandbox.cycle_heuristic),
            ("Explored on/off", self._toggle_explored),
        ):
            self._buttons.append(UIButton(label, pygame.Rect(x, y, w, h), cb))
            y += h + gap

    def _toggle_explored(self):
        self.show_explored = not self.show_explored

    def _draw_panel(self):
        card = pygame.Surface((PANEL_W - 20, 226), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        self.screen.blit(card, (self._panel_x + 10, 10))

        x0 = self._panel_x + 24
        y0 = 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        grid = self.sandbox.grid
        result = self.sandbox.result
        line("A* Sandbox", big=True, color=ACCENT_GOLD)
        line(f"Grid: {grid.rows} x {grid.cols}, {grid.moves} moves")
        line(f"Heuristic: {self.sandbox.heuristic_name}")
        if result is None:
            line("Searching...")
        elif result.found:
            line(f"Path Len: {len(result.path)}")
            line(f"Total Cost: {result.total_cost:.2f}")
            line(f"Expanded: {result.expanded}")
        else:
            line("No path", color=RED)
            line(f"Expanded: {result.expanded}")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv=None):
    try:
        config = resolve_config(argv)
    except ValueError as ex:
        print(f"Bad settings: {ex}")
        sys.exit(2)
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        sandbox = Sandbox.from_config(config)
    except GridError as ex:
        print(f"Failed to build grid: {ex}")
        sys.exit(1)
    logger.info("sandbox %dx%d, %d moves, heuristic=%s",
                config.rows, config.cols, config.moves, config.heuristic)
    Viewer(sandbox, cell_size=config.cell_size).run()

if __name__ == "__main__":
    main()
