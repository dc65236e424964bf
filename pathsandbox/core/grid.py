# pathsandbox/core/grid.py
#!/usr/bin/env python3
"""
Grid model: rows x cols typed cells with one START and one END marker.

Every mutation returns True when it changed the grid and False for a no-op.
`revision` is bumped on each change so a caller can tell when to search again.
Rejected requests raise a GridError subclass and leave the grid untouched.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from pathsandbox.core.errors import InvalidDimensions, InvalidMarker, InvalidMutation, OutOfBounds
from pathsandbox.core.neighbors import directions_for, neighbors
from pathsandbox.core.types import CellType, Coord, MARKERS

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    rows: int
    cols: int
    start: Coord
    end: Coord
    moves: int = 8
    revision: int = field(default=0, init=False)
    _cells: List[List[CellType]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise InvalidDimensions(f"{name} must be a positive int, got {value!r}")
        directions_for(self.moves)  # ValueError for anything but 4/8
        self.start, self.end = self._check_markers(self.start, self.end)
        self._fill(self.start, self.end)

    # -------------------- queries --------------------

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, c: Coord) -> bool:
        r, col = c
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (r, col)):
            return False
        return 0 <= r < self.rows and 0 <= col < self.cols

    def is_wall(self, c: Coord) -> bool:
        return self.get(c) is CellType.WALL

    def get(self, c: Coord) -> CellType:
        r, col = self._checked(c)
        return self._cells[r][col]

    def __getitem__(self, c: Coord) -> CellType:
        return self.get(c)

    def cells(self) -> Iterator[Tuple[Coord, CellType]]:
        """Row-major (coord, type) pairs."""
        for r, row in enumerate(self._cells):
            for col, v in enumerate(row):
                yield (r, col), v

    def count(self, cell_type: CellType) -> int:
        return sum(row.count(cell_type) for row in self._cells)

    def neighbors(self, c: Coord) -> List[Coord]:
        return neighbors(self, self._checked(c))

    def copy(self) -> "Grid":
        """Independent snapshot, safe to search while this grid keeps changing."""
        other = Grid(self.rows, self.cols, self.start, self.end, self.moves)
        other._cells = [list(row) for row in self._cells]
        other.revision = self.revision
        return other

    # -------------------- mutations --------------------

    def set(self, c: Coord, cell_type: CellType) -> bool:
        """Set one cell. START/END relocate the marker instead of adding one."""
        c = self._checked(c)
        if not isinstance(cell_type, CellType):
            raise InvalidMutation(f"{cell_type!r} is not a CellType")
        if cell_type is CellType.START:
            return self.move_start(c)
        if cell_type is CellType.END:
            return self.move_end(c)
        current = self._cells[c[0]][c[1]]
        if current in MARKERS:
            raise InvalidMutation(f"cannot overwrite {current.name} marker at {c!r}")
        if current is cell_type:
            return False
        self._cells[c[0]][c[1]] = cell_type
        return self._changed()

    def __setitem__(self, c: Coord, cell_type: CellType) -> None:
        self.set(c, cell_type)

    def toggle_wall(self, c: Coord) -> bool:
        c = self._checked(c)
        flipped = CellType.EMPTY if self._cells[c[0]][c[1]] is CellType.WALL else CellType.WALL
        return self.set(c, flipped)

    def reset(self, start: Optional[Coord] = None, end: Optional[Coord] = None) -> bool:
        """Clear every cell to EMPTY except the two markers."""
        start = self.start if start is None else start
        end = self.end if end is None else end
        start, end = self._check_markers(start, end)
        before = self._snapshot()
        self._fill(start, end)
        self.start, self.end = start, end
        if self._snapshot() == before:
            return False
        return self._changed()

    def move_start(self, new: Coord) -> bool:
        return self._move_marker(CellType.START, new)

    def move_end(self, new: Coord) -> bool:
        return self._move_marker(CellType.END, new)

    # -------------------- helpers --------------------

    def _move_marker(self, marker: CellType, new: Coord) -> bool:
        new = self._checked(new)
        old = self.start if marker is CellType.START else self.end
        other = self.end if marker is CellType.START else self.start
        if new == other:
            raise InvalidMutation(f"cannot move {marker.name} onto the other marker at {new!r}")
        if new == old:
            return False
        # a marker always wins over a wall
        self._cells[old[0]][old[1]] = CellType.EMPTY
        self._cells[new[0]][new[1]] = marker
        if marker is CellType.START:
            self.start = new
        else:
            self.end = new
        return self._changed()

    def _checked(self, c: Coord) -> Coord:
        c = tuple(c)
        if len(c) != 2 or not self.in_bounds(c):
            raise OutOfBounds(c, self.shape)
        return c

    def _check_markers(self, start: Coord, end: Coord) -> Tuple[Coord, Coord]:
        start, end = tuple(start), tuple(end)
        for name, c in (("start", start), ("end", end)):
            if len(c) != 2 or not self.in_bounds(c):
                raise InvalidMarker(f"{name} {c!r} is outside a {self.rows}x{self.cols} grid")
        if start == end:
            raise InvalidMarker(f"start and end must differ, both are {start!r}")
        return start, end

    def _fill(self, start: Coord, end: Coord) -> None:
        self._cells = [[CellType.EMPTY] * self.cols for _ in range(self.rows)]
        self._cells[start[0]][start[1]] = CellType.START
        self._cells[end[0]][end[1]] = CellType.END

    def _snapshot(self) -> Dict[str, object]:
        return {"cells": [list(row) for row in self._cells], "start": self.start, "end": self.end}

    def _changed(self) -> bool:
        self.revision += 1
        logger.debug("grid changed (revision %d)", self.revision)
        return True
