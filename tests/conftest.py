"""Shared fixtures for the grid_planner test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest

from grid_planner.core.config import PlannerConfig
from grid_planner.problems.world import World

STRATEGIES = ["DFS", "BFS", "AStar", "RBFS", "HillClimbing"]


@pytest.fixture
def open_world():
    """10x10 room, every tile plain, goal in the far corner."""
    world = World(10, 10)
    world.set_goal(9, 9)
    return world


@pytest.fixture
def fast_config():
    """Keeps Hill-Climbing's ceiling small so unreachable-goal tests stay quick."""
    return PlannerConfig(seed=7, hill_climbing_max_expansions=5_000)


@pytest.fixture
def check_plan():
    """Replays a successful plan from `start` and checks it is a legal route to the goal."""

    def _check(world, start, plan):
        assert plan.success
        assert len(plan.path) == len(plan.actions) + 1
        assert plan.path[0] == start
        pos = start
        for action, cell in zip(plan.actions, plan.path[1:]):
            pos = action.apply(pos)
            assert pos == cell
            assert world.is_traversable(*pos)
        assert pos == world.goal_location()
        assert plan.cost == sum(world.cost(r, c) for r, c in plan.path[1:])

    return _check
