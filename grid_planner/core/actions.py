# grid_planner/core/actions.py
# The five-symbol action vocabulary the simulation driver consumes one tick at a time.
from __future__ import annotations
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]


class Action(Enum):
    MOVE_RIGHT = (0, 1)
    MOVE_LEFT = (0, -1)
    MOVE_UP = (-1, 0)
    MOVE_DOWN = (1, 0)
    DO_NOTHING = (0, 0)

    @property
    def delta(self) -> Coord:
        return self.value

    def apply(self, pos: Coord) -> Coord:
        dr, dc = self.value
        return (pos[0] + dr, pos[1] + dc)


# Neighbor generation order shared by every strategy: right, left, up, down.
MOVES: Tuple[Action, ...] = (
    Action.MOVE_RIGHT,
    Action.MOVE_LEFT,
    Action.MOVE_UP,
    Action.MOVE_DOWN,
)
