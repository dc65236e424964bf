# pathsandbox/core/sandbox.py
#!/usr/bin/env python3
"""
Sandbox session: the one object the viewer owns.

It holds the grid, the selected heuristic and the last search result, and
re-runs search only when the grid revision (or the heuristic) changed since
the last run. User gestures that the grid rejects are logged and reported as
False instead of raising.
"""

import logging
from typing import Callable, List, Optional

from pathsandbox.core.astar import search
from pathsandbox.core.errors import GridError
from pathsandbox.core.grid import Grid
from pathsandbox.core.heuristics import HEURISTICS, get_heuristic
from pathsandbox.core.types import CellType, Coord, MARKERS, SearchResult

logger = logging.getLogger(__name__)


class Sandbox:
    def __init__(self, grid: Grid, heuristic: str = "euclidean"):
        self.grid = grid
        self.heuristic_name = heuristic.lower()
        self.heuristic = get_heuristic(heuristic)
        self.result: Optional[SearchResult] = None
        self._searched_revision: Optional[int] = None

    @classmethod
    def from_config(cls, config) -> "Sandbox":
        grid = Grid(config.rows, config.cols, config.start, config.end, moves=config.moves)
        return cls(grid, heuristic=config.heuristic)

    # -------------------- search --------------------

    @property
    def path(self) -> List[Coord]:
        return self.result.path if self.result else []

    @property
    def stale(self) -> bool:
        return self.result is None or self._searched_revision != self.grid.revision

    def refresh(self) -> bool:
        """Re-run search if the grid changed since the last run."""
        if not self.stale:
            return False
        self.result = search(self.grid, heuristic=self.heuristic)
        self._searched_revision = self.grid.revision
        if self.result.found:
            logger.info("path: %d cells, cost %.2f (%s, %d expanded)",
                        len(self.result.path), self.result.total_cost,
                        self.heuristic_name, self.result.expanded)
        else:
            logger.info("no path from %s to %s", self.grid.start, self.grid.end)
        return True

    def set_heuristic(self, name: str) -> None:
        self.heuristic = get_heuristic(name)
        self.heuristic_name = name.lower()
        self.result = None

    def cycle_heuristic(self) -> str:
        names = list(HEURISTICS)
        i = names.index(self.heuristic_name) if self.heuristic_name in names else -1
        self.set_heuristic(names[(i + 1) % len(names)])
        return self.heuristic_name

    # -------------------- gestures --------------------

    def toggle_wall(self, c: Coord) -> bool:
        return self._apply(self.grid.toggle_wall, c)

    def paint(self, c: Coord, wall: bool) -> bool:
        """Set c to WALL or EMPTY; markers are left alone."""
        if self.grid.in_bounds(c) and self.grid.get(c) in MARKERS:
            return False
        return self._apply(self.grid.set, c, CellType.WALL if wall else CellType.EMPTY)

    def move_start(self, c: Coord) -> bool:
        return self._apply(self.grid.move_start, c)

    def move_end(self, c: Coord) -> bool:
        return self._apply(self.grid.move_end, c)

    def reset(self, start: Optional[Coord] = None, end: Optional[Coord] = None) -> bool:
        return self._apply(self.grid.reset, start, end)

    def _apply(self, op: Callable[..., bool], *args) -> bool:
        try:
            return op(*args)
        except GridError as ex:
            logger.warning("rejected %s%r: %s", op.__name__, args, ex)
            return False
