# pathsandbox/app/geometry.py
#!/usr/bin/env python3
"""
Screen <-> grid mapping. Pure integer math, no pygame.

  origin (ox, oy)
      +------ col ------>
      |
     row     each cell is cell_size x cell_size pixels
      |
      v
"""

from typing import Optional, Tuple

from pathsandbox.core.types import Coord

Point = Tuple[int, int]
Rect = Tuple[int, int, int, int]  # (x, y, w, h)


def screen_to_cell(pos: Point, origin: Point, cell_size: int, shape: Tuple[int, int]) -> Optional[Coord]:
    """Cell under a pixel, or None when the pixel is outside the grid."""
    x, y = pos
    ox, oy = origin
    dx, dy = x - ox, y - oy
    if dx < 0 or dy < 0:
        return None
    row, col = dy // cell_size, dx // cell_size
    rows, cols = shape
    if row >= rows or col >= cols:
        return None
    return (int(row), int(col))


def cell_rect(c: Coord, origin: Point, cell_size: int) -> Rect:
    row, col = c
    ox, oy = origin
    return (ox + col * cell_size, oy + row * cell_size, cell_size, cell_size)


def cell_center(c: Coord, origin: Point, cell_size: int) -> Point:
    x, y, w, h = cell_rect(c, origin, cell_size)
    return (x + w // 2, y + h // 2)


def window_size(shape: Tuple[int, int], cell_size: int, margin: int, panel_w: int) -> Tuple[int, int]:
    rows, cols = shape
    return (cols * cell_size + 2 * margin + panel_w, rows * cell_size + 2 * margin)
