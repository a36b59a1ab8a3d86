# grid_planner/core/heuristics.py
# Distance estimates from a cell to the goal, used to order A* and RBFS frontiers.
from __future__ import annotations
import math
from typing import Callable, Dict, Tuple

Coord = Tuple[int, int]
Heuristic = Callable[[Coord, Coord], float]


def euclidean(a: Coord, b: Coord) -> float:
    """Straight-line distance. Never exceeds the step count of a 4-neighbor path."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def manhattan(a: Coord, b: Coord) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


HEURISTICS: Dict[str, Heuristic] = {
    "euclidean": euclidean,
    "manhattan": manhattan,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        ) from None
