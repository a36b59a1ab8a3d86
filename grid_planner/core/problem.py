# grid_planner/core/problem.py
# The read-only world interface the engine consumes, and the grid search problem built on it.
from __future__ import annotations
import math
from typing import Any, Iterator, Optional, Protocol, Tuple
from .actions import Action, MOVES
from .heuristics import Heuristic, euclidean

Coord = Tuple[int, int]


class WorldView(Protocol):
    """What the planner needs from a world. Nothing here mutates it."""
    rows: int
    cols: int
    def status(self, row: int, col: int) -> Any: ...
    def cost(self, row: int, col: int) -> int: ...
    def is_traversable(self, row: int, col: int) -> bool: ...
    def goal_location(self) -> Optional[Coord]: ...


class GridSearchProblem:
    """
    Route finding on a WorldView from a fixed start to the world's goal cell.

    - ACTIONS(s): moves from MOVES (right, left, up, down) whose target is traversable
    - IS-GOAL(s): s == goal
    - entry_cost(s'): terrain cost paid for stepping onto s'
    - step_distance(s, s'): Euclidean distance between the two cells (1 for orthogonal moves)
    - heuristic(s): estimate of the remaining distance to the goal
    """
    def __init__(
        self,
        world: WorldView,
        start: Coord,
        goal: Coord,
        heuristic: Heuristic = euclidean,
        step_weight: float = 1.0,
    ):
        self.world = world
        self.start = start
        self.goal = goal
        self.h = heuristic
        self.step_weight = float(step_weight)

    @property
    def max_hops(self) -> int:
        return self.world.rows * self.world.cols

    def initial_state(self) -> Coord:
        return self.start

    def is_goal(self, pos: Coord) -> bool:
        return pos == self.goal

    def successors(self, pos: Coord) -> Iterator[Tuple[Action, Coord]]:
        for action in MOVES:
            nxt = action.apply(pos)
            if self.world.is_traversable(*nxt):
                yield action, nxt

    def entry_cost(self, pos: Coord) -> int:
        return self.world.cost(*pos)

    def step_distance(self, a: Coord, b: Coord) -> float:
        return math.hypot(a[0] - b[0], a[1] - b[1])

    def step_cost(self, a: Coord, b: Coord) -> float:
        """A* edge weight: terrain of the entered cell plus the weighted move length."""
        return float(self.entry_cost(b)) + self.step_weight * self.step_distance(a, b)

    def heuristic(self, pos: Coord) -> float:
        return self.h(pos, self.goal)
