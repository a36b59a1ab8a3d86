# grid_planner/algorithms/astar.py
from __future__ import annotations
from typing import Optional, Set, Tuple
from ..core.frontiers import PriorityQueue
from ..core.logging_config import get_logger
from ..core.metrics import SearchOutcome, MeasuredRun, EXPANSION_LIMIT, FRONTIER_EXHAUSTED
from ..core.node import StateTable
from ..core.problem import GridSearchProblem

logger = get_logger(__name__)


def a_star_search(problem: GridSearchProblem, max_expansions: Optional[int] = None) -> SearchOutcome:
    """
    A* ordered by f = g + h.

    g accumulates problem.step_cost (terrain of the entered cell plus the
    weighted move length). When a neighbor's tentative g beats its best known g
    the canonical State is relaxed in place and pushed again; the outdated heap
    entry is skipped once its cell is closed.
    """
    name = "AStar"
    table = StateTable()
    root = table.get_or_create(problem.initial_state())
    root.g = 0.0
    root.f = problem.heuristic(root.pos)

    frontier = PriorityQueue(key=lambda s: s.f)
    frontier.push(root)
    closed: Set[Tuple[int, int]] = set()
    expanded = 0

    with MeasuredRun() as meter:
        while frontier:
            node = frontier.pop()
            if node.pos in closed:
                continue
            closed.add(node.pos)

            if problem.is_goal(node.pos):
                logger.debug(f"{name}: goal popped with g={node.g:.2f} after {expanded} expansions")
                return SearchOutcome(name, node, expanded, meter.elapsed, meter.peak_kb)

            if max_expansions is not None and expanded >= max_expansions:
                logger.debug(f"{name}: ceiling of {max_expansions} expansions hit")
                return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, EXPANSION_LIMIT)

            for action, pos in problem.successors(node.pos):
                if pos in closed:
                    continue
                child = table.get_or_create(pos)
                tentative = node.g + problem.step_cost(node.pos, pos)
                if tentative < child.g:
                    child.g = tentative
                    child.f = tentative + problem.heuristic(pos)
                    child.link(node, action)
                    expanded += 1
                    frontier.push(child)

    return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, FRONTIER_EXHAUSTED)
