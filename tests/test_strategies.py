"""
Tests for the five search strategies, run through the planner facade.

Covers:
- step-optimality of BFS and terrain-optimality of A*
- start == goal and unreachable goals for every strategy
- expansion ceilings, restarts and seeded reproducibility
"""

import random

import pytest

from conftest import STRATEGIES
from grid_planner.algorithms.astar import a_star_search
from grid_planner.algorithms.bfs import breadth_first_search
from grid_planner.algorithms.dfs import depth_first_search
from grid_planner.algorithms.hill_climbing import RESTART_LIMIT, stochastic_hill_climbing
from grid_planner.algorithms.rbfs import recursive_best_first_search
from grid_planner.core.config import PlannerConfig
from grid_planner.core.metrics import EXPANSION_LIMIT, FRONTIER_EXHAUSTED
from grid_planner.core.problem import GridSearchProblem
from grid_planner.planner import plan
from grid_planner.problems.layouts import make_world
from grid_planner.problems.world import CellStatus, World


def _walled_world():
    """5x5 with a full wall across row 2; goal unreachable from the top half."""
    world = World(5, 5)
    for c in range(5):
        world.set_cell(2, c, CellStatus.BLOCKED)
    world.set_goal(4, 4)
    return world


def _corridor_world():
    """
    Short route along row 0 crosses three mountains; the detour through row 1 is plain.
        S m m m G
        . . . . .
    """
    return World.from_rows([
        ". m m m G",
        ". . . . .",
    ])


def _random_world(seed, rows=8, cols=8):
    rng = random.Random(seed)
    world = World(rows, cols)
    for r in range(rows):
        for c in range(cols):
            roll = rng.random()
            if roll < 0.2:
                world.set_cell(r, c, CellStatus.BLOCKED)
            elif roll < 0.45:
                world.set_cell(r, c, CellStatus.OBSTACLE, cost=rng.randint(2, 9))
    world.set_goal(rng.randrange(rows), rng.randrange(cols))
    free = [(r, c) for r in range(rows) for c in range(cols) if world.is_traversable(r, c)]
    return world, rng.choice(free)


class TestBreadthFirst:
    def test_open_grid_corner_to_corner(self, open_world, check_plan):
        result = plan(open_world, 0, 0, "BFS")
        check_plan(open_world, (0, 0), result)
        assert len(result.actions) == 18
        assert result.cost == 18

    @pytest.mark.parametrize("start,goal", [
        ((0, 0), (5, 6)),
        ((5, 6), (0, 0)),
        ((2, 3), (2, 3)),
        ((4, 0), (0, 6)),
        ((3, 3), (1, 5)),
    ])
    def test_plan_length_is_manhattan_distance(self, start, goal, check_plan):
        world = World(6, 7)
        world.set_goal(*goal)
        result = plan(world, start[0], start[1], "BFS")
        check_plan(world, start, result)
        assert len(result.actions) == abs(start[0] - goal[0]) + abs(start[1] - goal[1])


class TestAStar:
    def test_open_grid_unit_costs(self, open_world, check_plan):
        result = plan(open_world, 0, 0, "AStar")
        check_plan(open_world, (0, 0), result)
        assert result.cost == 18
        assert len(result.actions) == 18

    def test_manhattan_heuristic(self, open_world):
        result = plan(open_world, 0, 0, "AStar", config=PlannerConfig(heuristic="manhattan"))
        assert result.cost == 18

    def test_prefers_long_cheap_route_over_short_heavy_one(self, check_plan):
        world = _corridor_world()
        result = plan(world, 0, 0, "AStar")
        check_plan(world, (0, 0), result)
        assert result.cost == 6
        assert len(result.actions) == 6
        assert (0, 1) not in result.path

    def test_avoids_enterable_puddle(self, check_plan):
        world = World.from_rows([
            ". w G",
            ". . .",
        ], heavy_passable=True)
        result = plan(world, 0, 0, "AStar")
        check_plan(world, (0, 0), result)
        assert (0, 1) not in result.path
        assert result.cost == 4

    def test_goal_g_counts_terrain_and_steps(self):
        # cheapest routes skirt the mountain: 4 plain tiles + goal, 5 moves
        world = World.from_rows([
            ". m . G",
            ". . . .",
        ])
        problem = GridSearchProblem(world, (0, 0), (0, 3))
        outcome = a_star_search(problem)
        assert outcome.success
        assert outcome.goal.g == pytest.approx(10.0)

    # The default step_weight of 1.0 prices every move on top of terrain, so A* minimises
    # terrain plus moves and may pay more terrain than DFS. Terrain-only comparisons need 0.0.
    @pytest.mark.parametrize("env_id,start,target", [
        (None, (0, 0), (9, 9)),
        ("1", (0, 0), (9, 9)),
        ("1", (4, 4), (0, 9)),
        ("2", (5, 0), (5, 9)),
        ("2", (9, 9), (0, 0)),
    ])
    def test_never_costlier_than_other_strategies_on_layouts(self, env_id, start, target):
        world = make_world(env_id, target=target)
        cfg = PlannerConfig(step_weight=0.0)
        best = plan(world, start[0], start[1], "AStar", config=cfg)
        assert best.success
        for tag in ("DFS", "BFS", "RBFS"):
            other = plan(world, start[0], start[1], tag)
            assert other.success
            assert best.cost <= other.cost

    @pytest.mark.parametrize("seed", range(12))
    def test_never_costlier_than_dfs_on_random_grids(self, seed):
        world, start = _random_world(seed)
        cfg = PlannerConfig(step_weight=0.0)
        best = plan(world, start[0], start[1], "AStar", config=cfg)
        dfs = plan(world, start[0], start[1], "DFS")
        assert best.success == dfs.success
        if dfs.success:
            assert best.cost <= dfs.cost


class TestDepthFirst:
    def test_open_grid(self, open_world, check_plan):
        result = plan(open_world, 0, 0, "DFS")
        check_plan(open_world, (0, 0), result)
        assert len(result.actions) >= 18

    def test_layout_1(self, check_plan):
        world = make_world("1", target=(9, 9))
        result = plan(world, 0, 0, "DFS")
        check_plan(world, (0, 0), result)


class TestRecursiveBestFirst:
    def test_open_grid(self, open_world, check_plan):
        result = plan(open_world, 0, 0, "RBFS")
        check_plan(open_world, (0, 0), result)

    def test_layout_2(self, check_plan):
        world = make_world("2", target=(5, 9))
        result = plan(world, 5, 0, "RBFS")
        check_plan(world, (5, 0), result)

    def test_orders_by_heuristic_plus_entry_cost(self):
        world = _corridor_world()
        problem = GridSearchProblem(world, (0, 0), (0, 4))
        outcome = recursive_best_first_search(problem)
        assert outcome.success
        # the plain cell below scores h + 1 < the mountain's h + 5, so the walk starts downward
        first = outcome.goal
        while first.parent is not None and first.parent.parent is not None:
            first = first.parent
        assert first.pos == (1, 0)


class TestHillClimbing:
    def test_reaches_goal_on_open_grid(self, check_plan):
        world = World(5, 5)
        world.set_goal(4, 4)
        result = plan(world, 0, 0, "HillClimbing", config=PlannerConfig(seed=3))
        check_plan(world, (0, 0), result)

    def test_same_seed_same_plan(self):
        world = make_world("2", target=(0, 9))
        cfg = PlannerConfig(seed=11)
        first = plan(world, 9, 0, "HillClimbing", config=cfg)
        second = plan(world, 9, 0, "HillClimbing", config=cfg)
        assert first.actions == second.actions
        assert first.nodes_expanded == second.nodes_expanded

    def test_explicit_rng_is_used(self):
        world = make_world(None, target=(6, 6))
        a = plan(world, 0, 0, "HillClimbing", rng=random.Random(5))
        b = plan(world, 0, 0, "HillClimbing", rng=random.Random(5))
        assert a.actions == b.actions

    def test_ceiling_ends_the_walk(self):
        problem = GridSearchProblem(_walled_world(), (0, 0), (4, 4))
        outcome = stochastic_hill_climbing(problem, max_expansions=500, rng=random.Random(1))
        assert not outcome.success
        assert outcome.error == EXPANSION_LIMIT
        assert outcome.nodes_expanded >= 500

    def test_restart_limit(self):
        problem = GridSearchProblem(_walled_world(), (0, 0), (4, 4))
        outcome = stochastic_hill_climbing(problem, max_expansions=5_000, rng=random.Random(1), max_restarts=0)
        assert not outcome.success
        assert outcome.error == RESTART_LIMIT

    def test_walled_in_start(self):
        world = World.from_rows([
            "G x .",
            "x . x",
            ". x .",
        ])
        problem = GridSearchProblem(world, (1, 1), (0, 0))
        outcome = stochastic_hill_climbing(problem, max_expansions=100, rng=random.Random(0))
        assert not outcome.success
        assert outcome.error == FRONTIER_EXHAUSTED
        assert outcome.nodes_expanded == 0

    def test_requires_a_ceiling(self):
        problem = GridSearchProblem(_walled_world(), (0, 0), (4, 4))
        with pytest.raises(ValueError):
            stochastic_hill_climbing(problem, max_expansions=None)


class TestEveryStrategy:
    @pytest.mark.parametrize("tag", STRATEGIES)
    def test_start_equals_goal_gives_empty_plan(self, tag):
        world = World(4, 4)
        world.set_goal(2, 2)
        result = plan(world, 2, 2, tag)
        assert result.success
        assert result.actions == ()
        assert result.cost == 0
        assert result.nodes_expanded == 0

    @pytest.mark.parametrize("tag", STRATEGIES)
    def test_full_wall_means_no_plan(self, tag, fast_config):
        result = plan(_walled_world(), 0, 0, tag, config=fast_config)
        assert not result.success
        assert result.actions == ()
        assert result.path == ()

    @pytest.mark.parametrize("tag", ["DFS", "BFS", "AStar", "RBFS"])
    def test_exhausted_frontier_is_reported(self, tag):
        result = plan(_walled_world(), 0, 0, tag)
        assert result.error == FRONTIER_EXHAUSTED
        assert result.nodes_expanded >= 9

    @pytest.mark.parametrize("tag", ["DFS", "BFS", "RBFS"])
    def test_each_reachable_cell_admitted_once(self, tag):
        result = plan(_walled_world(), 0, 0, tag)
        # the nine other cells of the top half
        assert result.nodes_expanded == 9

    @pytest.mark.parametrize("tag", ["DFS", "BFS", "AStar", "RBFS"])
    def test_reaches_goal_on_layout_1(self, tag, check_plan):
        world = make_world("1", target=(9, 9))
        result = plan(world, 0, 0, tag, config=PlannerConfig(seed=2))
        check_plan(world, (0, 0), result)

    @pytest.mark.parametrize("tag", ["DFS", "BFS", "AStar", "RBFS"])
    def test_deterministic(self, tag):
        world = make_world("1", target=(9, 9))
        assert plan(world, 0, 0, tag).actions == plan(world, 0, 0, tag).actions


class TestExpansionCeiling:
    @pytest.mark.parametrize("search", [
        depth_first_search,
        breadth_first_search,
        a_star_search,
        recursive_best_first_search,
    ])
    def test_ceiling_reports_not_found(self, search, open_world):
        problem = GridSearchProblem(open_world, (0, 0), (9, 9))
        outcome = search(problem, max_expansions=3)
        assert not outcome.success
        assert outcome.error == EXPANSION_LIMIT

    def test_ceiling_through_config(self, open_world):
        result = plan(open_world, 0, 0, "BFS", config=PlannerConfig(max_expansions=3))
        assert not result.success
        assert result.error == EXPANSION_LIMIT

    def test_start_equals_goal_ignores_zero_ceiling(self, open_world):
        problem = GridSearchProblem(open_world, (9, 9), (9, 9))
        assert breadth_first_search(problem, max_expansions=0).success
