# grid_planner/core/utils.py
# Walks predecessor links from a goal State back to the start and returns the moves in start->goal order.
from __future__ import annotations
from typing import List, Optional, Tuple
from .actions import Action
from .errors import ReconstructionError
from .node import State

Coord = Tuple[int, int]


def reconstruct_path(
    node: State,
    start: Optional[Coord] = None,
    max_hops: Optional[int] = None,
) -> Tuple[List[Action], List[Coord]]:
    """
    Returns (actions, cells). `cells` includes both endpoints, so
    len(cells) == len(actions) + 1.

    Raises ReconstructionError if the chain is longer than `max_hops`
    (a cycle or a corrupt link) or, when `start` is given, ends elsewhere.
    """
    actions: List[Action] = []
    cells: List[Coord] = [node.pos]
    cur = node
    hops = 0
    while cur.parent is not None:
        if max_hops is not None and hops >= max_hops:
            raise ReconstructionError(
                f"predecessor chain from {node.pos} did not terminate within {max_hops} hops"
            )
        if cur.action is None:
            raise ReconstructionError(f"state {cur.pos} has a predecessor but no action")
        actions.append(cur.action)
        cur = cur.parent
        cells.append(cur.pos)
        hops += 1
    if start is not None and cur.pos != start:
        raise ReconstructionError(f"predecessor chain ends at {cur.pos}, expected start {start}")
    actions.reverse()
    cells.reverse()
    return actions, cells
