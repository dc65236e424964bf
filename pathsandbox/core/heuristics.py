# pathsandbox/core/heuristics.py
#!/usr/bin/env python3
"""
Distance estimates between two cells.

- manhattan: admissible for 4-connected unit-cost moves only
- euclidean: admissible for both 4 and 8 moves (diagonal cost sqrt(2))
- octile:    exact on an empty 8-connected grid
"""

from math import sqrt
from typing import Callable, Dict

from pathsandbox.core.types import Coord

Heuristic = Callable[[Coord, Coord], float]


def manhattan(a: Coord, b: Coord) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Coord, b: Coord) -> float:
    dr = a[0] - b[0]
    dc = a[1] - b[1]
    return sqrt(dr * dr + dc * dc)


def octile(a: Coord, b: Coord) -> float:
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    return max(dr, dc) + (sqrt(2) - 1) * min(dr, dc)


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "octile": octile,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"unknown heuristic {name!r} (known: {known})") from None
