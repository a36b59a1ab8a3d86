# grid_planner/planner.py
"""
Planner facade: pick a strategy by tag, search once, turn the goal State into a Plan.

    from grid_planner.planner import plan
    from grid_planner.problems.layouts import make_world

    world = make_world("1", target=(9, 9))
    result = plan(world, 0, 0, "AStar")
    result.actions, result.cost, result.nodes_expanded

Bad start/goal setups raise PlannerConfigError before any search. A search
that finds nothing is not an error: the Plan comes back with success=False
and no actions, and the agent simply stays put.
"""
from __future__ import annotations
import random
from typing import Optional

from .algorithms.registry import get_strategy, strategy_tags
from .core.actions import Action
from .core.config import PlannerConfig
from .core.errors import PlannerConfigError
from .core.heuristics import get_heuristic
from .core.logging_config import get_logger
from .core.metrics import Plan
from .core.problem import GridSearchProblem, WorldView
from .core.utils import reconstruct_path

logger = get_logger(__name__)

UNKNOWN_STRATEGY = "unknown strategy"


class Planner:
    def __init__(
        self,
        world: WorldView,
        start_row: int,
        start_col: int,
        strategy: str,
        config: Optional[PlannerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.world = world
        self.start = (start_row, start_col)
        self.strategy = strategy
        self.config = config if config is not None else PlannerConfig()

        if not (0 <= start_row < world.rows and 0 <= start_col < world.cols):
            raise PlannerConfigError(f"start {self.start} is outside the {world.rows}x{world.cols} grid")
        goal = world.goal_location()
        if goal is None:
            raise PlannerConfigError("world has no goal cell")
        if not (0 <= goal[0] < world.rows and 0 <= goal[1] < world.cols):
            raise PlannerConfigError(f"goal {goal} is outside the {world.rows}x{world.cols} grid")
        if self.start != goal and not world.is_traversable(start_row, start_col):
            raise PlannerConfigError(f"start {self.start} is not a traversable cell")

        self._search = get_strategy(strategy)
        if self._search is None and self.config.strict_strategy:
            raise PlannerConfigError(f"unknown strategy {strategy!r}; expected one of {strategy_tags()}")

        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.problem = GridSearchProblem(
            world,
            self.start,
            goal,
            heuristic=get_heuristic(self.config.heuristic),
            step_weight=self.config.step_weight,
        )
        self._plan: Optional[Plan] = None
        self._cursor = 0

    @property
    def goal(self):
        return self.problem.goal

    def plan(self) -> Plan:
        """Run the search once; later calls return the same Plan."""
        if self._plan is None:
            self._plan = self._run()
        return self._plan

    def _run(self) -> Plan:
        if self._search is None:
            logger.warning(f"Unknown strategy {self.strategy!r}; planning nothing (agent stays put)")
            return Plan.not_found(self.strategy, error=UNKNOWN_STRATEGY)

        outcome = self._search(self.problem, self.config, self.rng)
        if not outcome.success:
            logger.info(
                f"{outcome.algo}: no plan from {self.start} to {self.goal}",
                extra={"extra_info": {"expanded": outcome.nodes_expanded, "reason": outcome.error}},
            )
            return Plan.not_found(outcome.algo, outcome.nodes_expanded, outcome.time_s, outcome.peak_kb, outcome.error)

        actions, cells = reconstruct_path(outcome.goal, start=self.start, max_hops=self.problem.max_hops)
        cost = sum(self.world.cost(r, c) for r, c in cells[1:])
        logger.info(
            f"{outcome.algo}: plan of {len(actions)} moves from {self.start} to {self.goal}",
            extra={"extra_info": {"cost": cost, "expanded": outcome.nodes_expanded}},
        )
        return Plan(
            algo=outcome.algo,
            success=True,
            actions=tuple(actions),
            path=tuple(cells),
            cost=float(cost),
            nodes_expanded=outcome.nodes_expanded,
            time_s=outcome.time_s,
            peak_kb=outcome.peak_kb,
        )

    # ---- counters and per-tick consumption ---------------------------------

    @property
    def completed(self) -> bool:
        return self.plan().success

    @property
    def expanded(self) -> int:
        return self.plan().nodes_expanded

    @property
    def energy_cost(self) -> int:
        p = self.plan()
        return int(p.cost) if p.success else 0

    def get_action(self) -> Action:
        """Next move of the plan, DO_NOTHING once it is used up."""
        action = self.plan().next_action(self._cursor)
        if action is not Action.DO_NOTHING:
            self._cursor += 1
        return action

    def reset_actions(self) -> None:
        self._cursor = 0


def plan(
    world: WorldView,
    start_row: int,
    start_col: int,
    strategy_tag: str,
    config: Optional[PlannerConfig] = None,
    rng: Optional[random.Random] = None,
) -> Plan:
    return Planner(world, start_row, start_col, strategy_tag, config=config, rng=rng).plan()
