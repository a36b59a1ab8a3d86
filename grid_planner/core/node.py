# grid_planner/core/node.py
# Search states on the grid and the per-run store that keeps exactly one State per coordinate.
from __future__ import annotations
import math
from typing import Dict, Iterator, Optional, Tuple
from .actions import Action

Coord = Tuple[int, int]


class State:
    """
    A grid coordinate plus search bookkeeping.

    g      -- cost from the start along the best path found so far (inf until reached)
    f      -- evaluation used to order priority frontiers
    action -- the move that reaches this state from `parent`
    parent -- predecessor State, None for the start
    """
    __slots__ = ("pos", "g", "f", "action", "parent")

    def __init__(self, pos: Coord, parent: Optional["State"] = None, action: Optional[Action] = None):
        self.pos = pos
        self.g = math.inf
        self.f = 0.0
        self.action = action
        self.parent = parent

    @property
    def row(self) -> int:
        return self.pos[0]

    @property
    def col(self) -> int:
        return self.pos[1]

    def link(self, parent: "State", action: Action) -> None:
        self.parent = parent
        self.action = action

    def __repr__(self) -> str:
        return f"State({self.pos}, g={self.g}, f={self.f})"


class StateTable:
    """Coordinate -> canonical State. Relaxation always mutates the one record held here."""

    def __init__(self) -> None:
        self._states: Dict[Coord, State] = {}

    def get(self, pos: Coord) -> Optional[State]:
        return self._states.get(pos)

    def get_or_create(self, pos: Coord) -> State:
        s = self._states.get(pos)
        if s is None:
            s = State(pos)
            self._states[pos] = s
        return s

    def clear(self) -> None:
        self._states.clear()

    def __contains__(self, pos: Coord) -> bool:
        return pos in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states.values())
