# grid_planner/algorithms/graph_search.py
# Shared loop for the uninformed strategies; DFS and BFS differ only in the frontier they pass in.
from __future__ import annotations
from typing import Optional, Union
from ..core.frontiers import FIFOQueue, LIFOStack
from ..core.logging_config import get_logger
from ..core.metrics import SearchOutcome, MeasuredRun, EXPANSION_LIMIT, FRONTIER_EXHAUSTED
from ..core.node import StateTable
from ..core.problem import GridSearchProblem

logger = get_logger(__name__)


def uninformed_graph_search(
    problem: GridSearchProblem,
    frontier: Union[LIFOStack, FIFOQueue],
    name: str,
    max_expansions: Optional[int] = None,
) -> SearchOutcome:
    """
    Pop a state, test it, push its undiscovered traversable neighbors.

    A neighbor is marked discovered (and linked to its parent) the moment it is
    pushed, so no cell enters the frontier twice. Costs are never compared.
    """
    table = StateTable()
    root = table.get_or_create(problem.initial_state())
    root.g = 0.0
    frontier.push(root)
    expanded = 0
    logger.debug(f"{name}: start={problem.start} goal={problem.goal}")

    with MeasuredRun() as meter:
        while frontier:
            node = frontier.pop()
            if problem.is_goal(node.pos):
                logger.debug(f"{name}: goal popped after {expanded} expansions")
                return SearchOutcome(name, node, expanded, meter.elapsed, meter.peak_kb)

            if max_expansions is not None and expanded >= max_expansions:
                logger.debug(f"{name}: ceiling of {max_expansions} expansions hit")
                return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, EXPANSION_LIMIT)

            for action, pos in problem.successors(node.pos):
                if pos in table:
                    continue
                child = table.get_or_create(pos)
                child.link(node, action)
                child.g = node.g + problem.entry_cost(pos)
                expanded += 1
                frontier.push(child)

    return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, FRONTIER_EXHAUSTED)
