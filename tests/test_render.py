import matplotlib.pyplot as plt
import pytest

from grid_planner.planner import plan
from grid_planner.problems.world import World
from grid_planner.render import plot_world, render_lines, render_text


@pytest.fixture
def strip():
    return World.from_rows([
        "m . G",
        "x w .",
    ])


class TestText:
    def test_tiles_without_path(self, strip):
        assert render_lines(strip) == ["m . G", "x w ."]

    def test_path_overlay(self, strip):
        assert render_lines(strip, [(0, 0), (0, 1), (0, 2)]) == ["S * G", "x w ."]

    def test_render_text_joins_rows(self, strip):
        assert render_text(strip) == "m . G\nx w ."

    def test_plan_path_round_trip(self):
        world = World(2, 4)
        world.set_goal(1, 3)
        result = plan(world, 0, 0, "BFS")
        text = render_text(world, result.path)
        assert text.count("*") == len(result.path) - 2
        assert text.startswith("S")


class TestFigure:
    def test_title_from_plan(self, strip):
        result = plan(strip, 0, 0, "BFS")
        fig = plot_world(strip, result)
        try:
            assert fig.axes[0].get_title().startswith("BFS: cost=2")
        finally:
            plt.close(fig)

    def test_no_plan_title(self):
        world = World.from_rows([
            ". x G",
        ])
        result = plan(world, 0, 0, "DFS")
        fig = plot_world(world, result)
        try:
            assert fig.axes[0].get_title() == "DFS: no plan"
        finally:
            plt.close(fig)

    def test_explicit_title_and_agent(self, strip):
        fig = plot_world(strip, agent=(0, 1), title="room")
        try:
            assert fig.axes[0].get_title() == "room"
        finally:
            plt.close(fig)
