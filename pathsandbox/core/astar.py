# pathsandbox/core/astar.py
#!/usr/bin/env python3
"""
A* search — one expansion per step() so the viewer can animate it,
or run() / run_search() to go straight to the answer.

Priority queue entries are (f, seq, cell): lower f first, then FIFO by seq.
Step cost is 1 for orthogonal moves and sqrt(2) for diagonal ones.

Paths exclude the start cell and include the goal. No path is [].
"""

import heapq
import logging
from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Set, Tuple

from pathsandbox.core.errors import OutOfBounds
from pathsandbox.core.grid import Grid
from pathsandbox.core.heuristics import Heuristic, euclidean
from pathsandbox.core.neighbors import step_cost
from pathsandbox.core.types import Coord, SearchResult, StepResult

logger = logging.getLogger(__name__)


def reconstruct_path(parent: Dict[Coord, Coord], goal: Coord) -> List[Coord]:
    """Walk predecessors back from goal, reverse, and drop the start cell."""
    if goal not in parent:
        return []
    path: List[Coord] = []
    cur = goal
    while cur in parent:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


@dataclass
class AStarSearch:
    grid: Grid
    start: Coord
    goal: Coord
    heuristic: Heuristic = euclidean

    # Internal state, rebuilt for every search
    open_pq: List[Tuple[float, int, Coord]] = field(default_factory=list)  # (f, seq, cell)
    open_set: Set[Coord] = field(default_factory=set)
    closed_set: Set[Coord] = field(default_factory=set)
    g: Dict[Coord, float] = field(default_factory=dict)
    f: Dict[Coord, float] = field(default_factory=dict)
    parent: Dict[Coord, Coord] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    path: Optional[List[Coord]] = None
    seq: int = 0  # monotonic counter for PQ stability

    def __post_init__(self) -> None:
        for c in (self.start, self.goal):
            if not self.grid.in_bounds(c):
                raise OutOfBounds(c, self.grid.shape)
        self.start, self.goal = tuple(self.start), tuple(self.goal)
        self.reset()

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.f.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.path = None
        self.seq = 0

        s = self.start
        self.g[s] = 0.0
        self.f[s] = self.heuristic(s, self.goal)
        self._push(s)

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, c: Coord) -> None:
        heapq.heappush(self.open_pq, (self.f[c], self._bump(), c))
        self.open_set.add(c)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion:
          - Pop the lowest-f node (skipping entries already closed).
          - If goal, reconstruct and finish.
          - Else close it and relax its open neighbors.
        """
        if self.done:
            return StepResult(status="done", path=self.path,
                              metrics=self._metrics(path_len=len(self.path)))

        if self.no_path:
            return StepResult(status="no_path", path=[], metrics=self._metrics())

        u = self._pop()
        if u is None:
            self.no_path = True
            self.path = []
            return StepResult(status="no_path", path=[], metrics=self._metrics())

        self.popped_count += 1

        if u == self.goal:
            self.done = True
            self.path = reconstruct_path(self.parent, u)
            return StepResult(status="done", current=u, path=self.path,
                              metrics=self._metrics(path_len=len(self.path)))

        self.closed_set.add(u)

        opened_now: List[Coord] = []
        for v in self.grid.neighbors(u):
            if v in self.closed_set:
                continue
            alt = self.g[u] + step_cost(u, v)
            if alt < self.g.get(v, inf):
                self.parent[v] = u
                self.g[v] = alt
                self.f[v] = alt + self.heuristic(v, self.goal)
                if v not in self.open_set:
                    opened_now.append(v)
                self._push(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def _pop(self) -> Optional[Coord]:
        while self.open_pq:
            _, _, u = heapq.heappop(self.open_pq)
            if u in self.closed_set:
                continue  # stale entry from before a better g was found
            self.open_set.discard(u)
            return u
        return None

    def run(self) -> SearchResult:
        while not (self.done or self.no_path):
            self.step()
        result = SearchResult(
            path=list(self.path),
            total_cost=self.g[self.goal] if self.done else None,
            expanded=self.popped_count,
            open_set=set(self.open_set),
            closed_set=set(self.closed_set),
        )
        logger.debug("A* %s -> %s: expanded=%d path_len=%d cost=%s",
                     self.start, self.goal, result.expanded, len(result.path), result.total_cost)
        return result

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.g.get(self.goal) if self.done else None,
        }


def search(grid: Grid, start: Optional[Coord] = None, end: Optional[Coord] = None,
           heuristic: Heuristic = euclidean) -> SearchResult:
    """Full search result; start/end default to the grid's markers."""
    start = grid.start if start is None else start
    end = grid.end if end is None else end
    return AStarSearch(grid, start, end, heuristic).run()


def run_search(grid: Grid, start: Optional[Coord] = None, end: Optional[Coord] = None,
               heuristic: Heuristic = euclidean) -> List[Coord]:
    return search(grid, start, end, heuristic).path
