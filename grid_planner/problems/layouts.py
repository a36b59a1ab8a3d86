# grid_planner/problems/layouts.py
# Named obstacle layouts and the factory the CLI and benchmarks use to build a world.
from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple

from .world import CellStatus, World

Coord = Tuple[int, int]


def _layout_1(world: World) -> None:
    """Two puddle bands near the top and bottom, mountains at the gaps, two inner puddle walls."""
    rows, cols = world.rows, world.cols
    for i in range(1, cols - 1):
        world.set_cell(1, i, CellStatus.HEAVY)
        world.set_cell(rows - 2, i, CellStatus.HEAVY)

    world.set_cell(1, 0, CellStatus.OBSTACLE)
    world.set_cell(rows - 2, cols - 1, CellStatus.OBSTACLE)

    world.set_cell(rows // 2 - 1, 1, CellStatus.OBSTACLE)
    world.set_cell(rows // 2, 1, CellStatus.OBSTACLE)
    world.set_cell(rows // 2 - 1, cols - 2, CellStatus.OBSTACLE)
    world.set_cell(rows // 2, cols - 2, CellStatus.OBSTACLE)

    for i in range(3, cols - 2):
        world.set_cell(3, i, CellStatus.HEAVY)

    for i in range(2, cols - 3):
        world.set_cell(rows - 4, i, CellStatus.HEAVY)


def _layout_2(world: World) -> None:
    """A puddle column down the middle, open at the top and bottom rows."""
    rows, cols = world.rows, world.cols
    for i in range(1, rows - 1):
        world.set_cell(i, cols // 2 - 1, CellStatus.HEAVY)


LAYOUTS: Dict[str, Callable[[World], None]] = {
    "1": _layout_1,
    "2": _layout_2,
}


def make_world(
    env_id: Optional[str] = None,
    rows: int = 10,
    cols: int = 10,
    target: Optional[Coord] = None,
    heavy_passable: bool = False,
) -> World:
    """
    env_id None -> open room; "1"/"2" -> named layouts; anything else falls back to "1".
    The target, if given, is placed after the layout (and overwrites that tile).
    """
    world = World(rows, cols, heavy_passable=heavy_passable)
    if env_id is not None:
        LAYOUTS.get(str(env_id), _layout_1)(world)
    if target is not None:
        world.set_goal(*target)
    return world
