# grid_planner/render.py
# Human-readable views of a world and a plan: a one-character-per-tile text dump and a matplotlib figure.
# Neither is parsed back in.
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from .core.metrics import Plan
from .problems.world import CellStatus, World

Coord = Tuple[int, int]

# Indexed by CellStatus value: open, puddle, mountain, wall, goal.
_TILE_COLORS = ["#90ee90", "#add8e6", "#000000", "#404040", "#ff0000"]


def render_lines(world: World, path: Optional[Sequence[Coord]] = None) -> List[str]:
    """
    One string per row, tiles separated by spaces.
    On the path: 'S' start, 'G' goal, '*' everything between.
    Elsewhere: '.' open, 'w' puddle, 'm' mountain, 'x' wall, 'G' goal.
    """
    on_path = set(path or ())
    start = path[0] if path else None
    lines = []
    for r in range(world.rows):
        row = []
        for c in range(world.cols):
            status = world.status(r, c)
            if (r, c) in on_path:
                if status == CellStatus.GOAL:
                    row.append("G")
                elif (r, c) == start:
                    row.append("S")
                else:
                    row.append("*")
            else:
                row.append(status.symbol)
        lines.append(" ".join(row))
    return lines


def render_text(world: World, path: Optional[Sequence[Coord]] = None) -> str:
    return "\n".join(render_lines(world, path))


def plot_world(world: World, plan: Optional[Plan] = None, agent: Optional[Coord] = None, title: Optional[str] = None):
    """Tile map with the planned route drawn over it. Returns the Figure."""
    fig, ax = plt.subplots(figsize=(max(4, world.cols * 0.5), max(4, world.rows * 0.5)))
    cmap = ListedColormap(_TILE_COLORS)
    ax.imshow(world.statuses, cmap=cmap, vmin=0, vmax=len(_TILE_COLORS) - 1, origin="upper")

    # tile borders
    ax.set_xticks([c - 0.5 for c in range(world.cols + 1)], minor=True)
    ax.set_yticks([r - 0.5 for r in range(world.rows + 1)], minor=True)
    ax.grid(which="minor", color="black", linewidth=0.5)
    ax.tick_params(which="minor", length=0)

    if plan is not None and plan.path:
        rows = [p[0] for p in plan.path]
        cols = [p[1] for p in plan.path]
        ax.plot(cols, rows, color="#ffd700", linewidth=2.5, marker="o", markersize=3)
        ax.plot(cols[0], rows[0], marker="s", color="#006400", markersize=9)

    if agent is not None:
        ax.plot(agent[1], agent[0], marker="o", color="#00aa00", markersize=12)

    if title is None and plan is not None:
        status = f"cost={plan.cost:g}, expanded={plan.nodes_expanded}" if plan.success else "no plan"
        title = f"{plan.algo}: {status}"
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig
