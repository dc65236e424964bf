# pathsandbox/core/neighbors.py
#!/usr/bin/env python3
"""
Neighbor generation for grid search.

The direction set belongs to one Grid and is fixed when the grid is built:
- 4 moves: N, S, W, E (unit cost)
- 8 moves: adds the diagonals (cost sqrt(2))

Diagonals are not blocked by walls on either side of the move; only the
target cell has to be free.
"""

from math import sqrt
from typing import Iterator, List, Tuple

from pathsandbox.core.types import Coord

DIRECTIONS_4: Tuple[Coord, ...] = (
    (-1, 0),  # N
    (1, 0),   # S
    (0, -1),  # W
    (0, 1),   # E
)

DIRECTIONS_8: Tuple[Coord, ...] = DIRECTIONS_4 + (
    (-1, -1),  # NW
    (-1, 1),   # NE
    (1, -1),   # SW
    (1, 1),    # SE
)

DIAGONAL_COST = sqrt(2)


def directions_for(moves: int) -> Tuple[Coord, ...]:
    if moves == 4:
        return DIRECTIONS_4
    if moves == 8:
        return DIRECTIONS_8
    raise ValueError(f"moves must be 4 or 8, got {moves!r}")


def iter_neighbors(grid, c: Coord) -> Iterator[Coord]:
    r, col = c
    for dr, dc in directions_for(grid.moves):
        n = (r + dr, col + dc)
        if grid.in_bounds(n) and not grid.is_wall(n):
            yield n


def neighbors(grid, c: Coord) -> List[Coord]:
    """Return in-bounds, non-wall neighbors of c in direction order."""
    return list(iter_neighbors(grid, c))


def step_cost(a: Coord, b: Coord) -> float:
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    if (dr, dc) in ((1, 0), (0, 1)):
        return 1.0
    if (dr, dc) == (1, 1):
        return DIAGONAL_COST
    raise ValueError(f"{a!r} and {b!r} are not adjacent")
