# grid_planner/simulation.py
# Tick-based driver: build a world, plan once, then apply one planned action per time step.
# Also the `grid-planner` command line entry point.
from __future__ import annotations
import argparse
import dataclasses
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .algorithms.registry import strategy_tags
from .core.actions import Action
from .core.config import PlannerConfig
from .core.errors import PlannerConfigError
from .core.logging_config import configure_logging, get_logger
from .core.metrics import Plan
from .planner import Planner
from .problems.layouts import make_world
from .problems.world import World
from .render import plot_world, render_text

logger = get_logger(__name__)

Coord = Tuple[int, int]

DEFAULT_TIMESTEP_LIMIT = 200


@dataclass
class SimulationResult:
    timesteps: int
    goal_met: bool
    position: Coord
    trajectory: List[Coord] = field(default_factory=list)


class Simulation:
    """
    Single agent on a World. The plan is computed once, up front; each tick
    the agent takes the next action, and a move into a non-traversable tile
    leaves it where it is. Stops at the goal or after `timestep_limit` ticks.
    """
    def __init__(
        self,
        strategy: str,
        start_row: int,
        start_col: int,
        target_row: int,
        target_col: int,
        env_id: Optional[str] = None,
        timestep_limit: int = DEFAULT_TIMESTEP_LIMIT,
        config: Optional[PlannerConfig] = None,
        rng: Optional[random.Random] = None,
        world: Optional[World] = None,
    ):
        if world is None:
            world = make_world(env_id, target=(target_row, target_col))
        else:
            world.set_goal(target_row, target_col)
        if world.goal_location() != (target_row, target_col):
            raise PlannerConfigError(
                f"target {(target_row, target_col)} is outside the {world.rows}x{world.cols} grid"
            )
        self.world = world
        self.planner = Planner(world, start_row, start_col, strategy, config=config, rng=rng)
        self.plan: Plan = self.planner.plan()
        self.position: Coord = (start_row, start_col)
        self.trajectory: List[Coord] = [self.position]
        self.timesteps = 0
        self.timestep_limit = timestep_limit
        self.goal_met = False

    def step(self) -> Action:
        """Advance one tick."""
        self.timesteps += 1
        action = self.planner.get_action()
        nxt = action.apply(self.position)
        if action is not Action.DO_NOTHING and self.world.is_traversable(*nxt):
            self.position = nxt
        self.trajectory.append(self.position)
        return action

    def run(self) -> SimulationResult:
        self.goal_met = self.world.goal_reached(*self.position)
        while not self.goal_met and self.timesteps < self.timestep_limit:
            self.step()
            self.goal_met = self.world.goal_reached(*self.position)
        logger.info(f"Simulation completed in {self.timesteps} timesteps (goal met: {self.goal_met})")
        return SimulationResult(self.timesteps, self.goal_met, self.position, list(self.trajectory))


def _build_config(args) -> PlannerConfig:
    cfg = PlannerConfig.from_env()
    overrides = {}
    if args.heuristic is not None:
        overrides["heuristic"] = args.heuristic
    if args.max_expansions is not None:
        overrides["max_expansions"] = args.max_expansions
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.strict:
        overrides["strict_strategy"] = True
    return dataclasses.replace(cfg, **overrides) if overrides else cfg


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Plan a route across a tile world and simulate it one action per tick.")
    ap.add_argument("strategy", help=f"one of {', '.join(strategy_tags())}")
    ap.add_argument("start_row", type=int)
    ap.add_argument("start_col", type=int)
    ap.add_argument("target_row", type=int)
    ap.add_argument("target_col", type=int)
    ap.add_argument("env_id", nargs="?", default=None, help="obstacle layout: 1 or 2 (omit for an open room)")
    ap.add_argument("--seed", type=int, default=None, help="seed for HillClimbing's random choices")
    ap.add_argument("--heuristic", choices=["euclidean", "manhattan"], default=None)
    ap.add_argument("--max-expansions", type=int, default=None, help="expansion ceiling for every strategy")
    ap.add_argument("--timesteps", type=int, default=DEFAULT_TIMESTEP_LIMIT, help="tick limit for the simulation")
    ap.add_argument("--strict", action="store_true", help="reject unknown strategy tags")
    ap.add_argument("--show", action="store_true", help="print the tile map with the planned route")
    ap.add_argument("--plot", default=None, help="save a picture of the world and route to this file")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)

    try:
        cfg = _build_config(args)
        sim = Simulation(
            args.strategy,
            args.start_row,
            args.start_col,
            args.target_row,
            args.target_col,
            env_id=args.env_id,
            timestep_limit=args.timesteps,
            config=cfg,
        )
    except (PlannerConfigError, ValueError) as e:
        ap.error(str(e))

    result = sim.run()
    plan = sim.plan

    print(f"Simulation Completed in {result.timesteps} timesteps")
    print(f"Goal Condition Met: {str(result.goal_met).lower()}")
    print(f"Strategy: {plan.algo}  plan found: {plan.success}  moves: {len(plan.actions)}  "
          f"expanded: {plan.nodes_expanded}  energy cost: {sim.planner.energy_cost}")
    if not plan.success and plan.error:
        print(f"  reason: {plan.error}")

    if args.show:
        print(render_text(sim.world, plan.path))

    if args.plot:
        fig = plot_world(sim.world, plan, agent=result.position)
        fig.savefig(args.plot, dpi=160)
        print(f"Wrote {args.plot}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
