# grid_planner/algorithms/registry.py
# Strategy tag -> search routine. Every entry takes (problem, config, rng) and returns a SearchOutcome.
from __future__ import annotations
import random
from typing import Callable, Dict, Optional

from ..core.config import PlannerConfig
from ..core.metrics import SearchOutcome
from ..core.problem import GridSearchProblem
from .astar import a_star_search
from .bfs import breadth_first_search
from .dfs import depth_first_search
from .hill_climbing import stochastic_hill_climbing
from .rbfs import recursive_best_first_search

Strategy = Callable[[GridSearchProblem, PlannerConfig, Optional[random.Random]], SearchOutcome]

STRATEGIES: Dict[str, Strategy] = {
    "DFS": lambda p, cfg, rng: depth_first_search(p, max_expansions=cfg.max_expansions),
    "BFS": lambda p, cfg, rng: breadth_first_search(p, max_expansions=cfg.max_expansions),
    "AStar": lambda p, cfg, rng: a_star_search(p, max_expansions=cfg.max_expansions),
    "RBFS": lambda p, cfg, rng: recursive_best_first_search(p, max_expansions=cfg.max_expansions),
    "HillClimbing": lambda p, cfg, rng: stochastic_hill_climbing(
        p,
        max_expansions=cfg.hill_climbing_ceiling,
        rng=rng,
        max_restarts=cfg.max_restarts,
    ),
}


def get_strategy(tag: str) -> Optional[Strategy]:
    return STRATEGIES.get(tag)


def strategy_tags():
    return list(STRATEGIES)
