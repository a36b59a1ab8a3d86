# grid_planner/algorithms/rbfs.py
# "RBFS" as the planner uses the name: a greedy best-first loop over a priority frontier.
# There is no f-limit and no backed-up alternative; each neighbor is scored once, on discovery,
# by h(neighbor) + terrain cost of entering it. Path cost so far is not part of the score.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import PriorityQueue
from ..core.logging_config import get_logger
from ..core.metrics import SearchOutcome, MeasuredRun, EXPANSION_LIMIT, FRONTIER_EXHAUSTED
from ..core.node import StateTable
from ..core.problem import GridSearchProblem

logger = get_logger(__name__)


def recursive_best_first_search(problem: GridSearchProblem, max_expansions: Optional[int] = None) -> SearchOutcome:
    name = "RBFS"
    table = StateTable()
    root = table.get_or_create(problem.initial_state())
    root.g = 0.0
    root.f = problem.heuristic(root.pos)

    frontier = PriorityQueue(key=lambda s: s.f)
    frontier.push(root)
    expanded = 0

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
                entry = problem.entry_cost(pos)
                child.g = node.g + entry
                child.f = problem.heuristic(pos) + entry
                expanded += 1
                frontier.push(child)

    return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, FRONTIER_EXHAUSTED)
