# pathsandbox/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any, Set

Coord = Tuple[int, int]  # (row, col)


class CellType(Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"


MARKERS = (CellType.START, CellType.END)


@dataclass
class StepResult:
    status: str                   # "running" | "done" | "no_path"
    opened: List[Coord] = field(default_factory=list)
    closed: List[Coord] = field(default_factory=list)
    current: Optional[Coord] = None
    path: Optional[List[Coord]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    path: List[Coord]
    total_cost: Optional[float] = None
    expanded: int = 0
    open_set: Set[Coord] = field(default_factory=set)
    closed_set: Set[Coord] = field(default_factory=set)

    @property
    def found(self) -> bool:
        return self.total_cost is not None
