# grid_planner/problems/world.py
# A fixed-size room of tiles, each with a status and an entry cost, plus a single goal tile.
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

Coord = Tuple[int, int]

# Entry cost reported for off-grid coordinates and stored on puddle tiles.
MAX_COST = 100_000_000


class CellStatus(IntEnum):
    OPEN = 0        # plain floor
    HEAVY = 1       # puddle: carries MAX_COST and is not enterable by default
    OBSTACLE = 2    # mountain: enterable, expensive
    BLOCKED = 3     # wall
    GOAL = 4

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    CellStatus.OPEN: ".",
    CellStatus.HEAVY: "w",
    CellStatus.OBSTACLE: "m",
    CellStatus.BLOCKED: "x",
    CellStatus.GOAL: "G",
}

DEFAULT_COSTS = {
    CellStatus.OPEN: 1,
    CellStatus.HEAVY: MAX_COST,
    CellStatus.OBSTACLE: 5,
    CellStatus.BLOCKED: MAX_COST,
    CellStatus.GOAL: 1,
}


@dataclass(frozen=True)
class Cell:
    status: CellStatus
    cost: int


class World:
    """
    rows x cols grid of Cells backed by two numpy arrays (status, cost).

    Off-grid queries behave like a wall with MAX_COST. Puddles (HEAVY) hold a
    cost but are not traversable unless the world is built with
    heavy_passable=True, in which case they are entered at their stored cost.
    """
    def __init__(self, rows: int = 10, cols: int = 10, heavy_passable: bool = False):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"World dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.heavy_passable = heavy_passable
        self._status = np.full((rows, cols), int(CellStatus.OPEN), dtype=np.int8)
        self._cost = np.full((rows, cols), DEFAULT_COSTS[CellStatus.OPEN], dtype=np.int64)
        self._goal: Optional[Coord] = None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ---- queries the planner relies on -------------------------------------

    def status(self, row: int, col: int) -> CellStatus:
        if not self.in_bounds(row, col):
            return CellStatus.BLOCKED
        return CellStatus(int(self._status[row, col]))

    def cost(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            return MAX_COST
        return int(self._cost[row, col])

    def is_traversable(self, row: int, col: int) -> bool:
        s = self.status(row, col)
        if s == CellStatus.BLOCKED:
            return False
        if s == CellStatus.HEAVY:
            return self.heavy_passable
        return True

    def goal_location(self) -> Optional[Coord]:
        return self._goal

    def goal_reached(self, row: int, col: int) -> bool:
        return self._goal is not None and (row, col) == self._goal

    # ---- construction -------------------------------------------------------

    def cell(self, row: int, col: int) -> Cell:
        return Cell(self.status(row, col), self.cost(row, col))

    def set_cell(self, row: int, col: int, status: CellStatus, cost: Optional[int] = None) -> None:
        """
        Replace one tile. Off-grid writes are ignored; GOAL moves the goal.
        Any tile an agent may enter costs at least 1 (walls excepted).
        """
        if not self.in_bounds(row, col):
            return
        status = CellStatus(status)
        if cost is not None and cost < 1 and status != CellStatus.BLOCKED:
            raise ValueError(f"Entry cost of a {status.name} tile must be >= 1, got {cost}")
        if status == CellStatus.GOAL:
            self.set_goal(row, col)
            if cost is not None:
                self._cost[row, col] = cost
            return
        if self._goal == (row, col):
            self._goal = None
        self._status[row, col] = int(status)
        self._cost[row, col] = DEFAULT_COSTS[status] if cost is None else cost

    def set_goal(self, row: int, col: int) -> None:
        """Move the single goal tile; the old one reverts to plain floor."""
        if not self.in_bounds(row, col):
            return
        if self._goal is not None:
            gr, gc = self._goal
            self._status[gr, gc] = int(CellStatus.OPEN)
            self._cost[gr, gc] = DEFAULT_COSTS[CellStatus.OPEN]
        self._goal = (row, col)
        self._status[row, col] = int(CellStatus.GOAL)
        self._cost[row, col] = DEFAULT_COSTS[CellStatus.GOAL]

    def num_tiles(self) -> int:
        """Tiles that are not walls."""
        return int(np.count_nonzero(self._status != int(CellStatus.BLOCKED)))

    @property
    def statuses(self) -> np.ndarray:
        return self._status.copy()

    @property
    def costs(self) -> np.ndarray:
        return self._cost.copy()

    @classmethod
    def from_rows(cls, lines, heavy_passable: bool = False) -> "World":
        """
        Build a world from text rows using the render symbols:
        '.' open, 'w' puddle, 'm' mountain, 'x' wall, 'G' goal.
        Whitespace inside a row is ignored.
        """
        grid = [line.replace(" ", "") for line in lines if line.strip()]
        if not grid:
            raise ValueError("from_rows needs at least one non-empty row")
        width = len(grid[0])
        if any(len(r) != width for r in grid):
            raise ValueError("all rows must have the same width")
        lookup = {v: k for k, v in _SYMBOLS.items()}
        world = cls(len(grid), width, heavy_passable=heavy_passable)
        for r, line in enumerate(grid):
            for c, ch in enumerate(line):
                if ch not in lookup:
                    raise ValueError(f"unknown tile symbol {ch!r} at ({r}, {c})")
                world.set_cell(r, c, lookup[ch])
        return world
