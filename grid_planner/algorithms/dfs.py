# grid_planner/algorithms/dfs.py
# Depth-First Search with a LIFO stack. Returns the first route it stumbles on, however long or costly.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchOutcome
from ..core.problem import GridSearchProblem
from .graph_search import uninformed_graph_search


def depth_first_search(problem: GridSearchProblem, max_expansions: Optional[int] = None) -> SearchOutcome:
    return uninformed_graph_search(problem, LIFOStack(), name="DFS", max_expansions=max_expansions)
