# grid_planner/algorithms/bfs.py
from __future__ import annotations
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchOutcome
from ..core.problem import GridSearchProblem
from .graph_search import uninformed_graph_search


def breadth_first_search(problem: GridSearchProblem, max_expansions: Optional[int] = None) -> SearchOutcome:
    """Layer-by-layer search: fewest moves, terrain cost ignored."""
    return uninformed_graph_search(problem, FIFOQueue(), name="BFS", max_expansions=max_expansions)
