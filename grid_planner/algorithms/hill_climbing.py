# grid_planner/algorithms/hill_climbing.py
# Stochastic hill-climbing as a random walk over unvisited cells.
# At each step: list the current cell's traversable, unvisited neighbors and move to one chosen
# uniformly at random. At a dead end, forget everything and start over from the start cell.
# Nothing guarantees termination, so the walk always runs under an expansion ceiling.
from __future__ import annotations
import random
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.logging_config import get_logger
from ..core.metrics import SearchOutcome, MeasuredRun, EXPANSION_LIMIT, FRONTIER_EXHAUSTED
from ..core.node import StateTable
from ..core.problem import GridSearchProblem

logger = get_logger(__name__)

RESTART_LIMIT = "restart limit reached"


def stochastic_hill_climbing(
    problem: GridSearchProblem,
    max_expansions: int = 100_000,
    rng: Optional[random.Random] = None,
    max_restarts: Optional[int] = None,
) -> SearchOutcome:
    name = "HillClimbing"
    if max_expansions is None or max_expansions < 0:
        raise ValueError("hill-climbing needs a non-negative max_expansions ceiling")
    rng = rng if rng is not None else random.Random()

    table = StateTable()
    frontier = FIFOQueue()  # holds at most the current cell
    start = problem.initial_state()

    def restart():
        table.clear()
        frontier.clear()
        root = table.get_or_create(start)
        root.g = 0.0
        frontier.push(root)

    restart()
    expanded = 0
    restarts = 0

    with MeasuredRun() as meter:
        while frontier:
            current = frontier.pop()
            if problem.is_goal(current.pos):
                logger.debug(f"{name}: goal reached after {expanded} expansions, {restarts} restarts")
                return SearchOutcome(name, current, expanded, meter.elapsed, meter.peak_kb)

            if expanded >= max_expansions:
                logger.debug(f"{name}: ceiling of {max_expansions} expansions hit")
                return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, EXPANSION_LIMIT)

            candidates = [(a, p) for a, p in problem.successors(current.pos) if p not in table]
            if not candidates:
                if current.pos == start:
                    # Fresh walk with nowhere to go: the start is walled in.
                    return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, FRONTIER_EXHAUSTED)
                restarts += 1
                if max_restarts is not None and restarts > max_restarts:
                    return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, RESTART_LIMIT)
                restart()
                continue

            expanded += len(candidates)
            action, pos = rng.choice(candidates)
            child = table.get_or_create(pos)
            child.link(current, action)
            child.g = current.g + problem.entry_cost(pos)
            frontier.push(child)

    return SearchOutcome(name, None, expanded, meter.elapsed, meter.peak_kb, FRONTIER_EXHAUSTED)
