# grid_planner/plots/plotting.py
# Bar plots comparing strategies on the averages produced by benchmarks/run_all.py.
from __future__ import annotations
import matplotlib.pyplot as plt


def bar_compare(rows, title="Strategy Comparison"):
    names = [r["algo"] for r in rows]
    nodes = [r["avg_expanded"] for r in rows]
    costs = [r["avg_energy_cost"] for r in rows]
    steps = [r["avg_timesteps"] for r in rows]
    times = [r["avg_time_s"] for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded")
    axs[1].bar(names, costs); axs[1].set_title("Energy Cost")
    axs[2].bar(names, steps); axs[2].set_title("Timesteps")
    axs[3].bar(names, times); axs[3].set_title("Plan Time (s)")
    for ax in axs:
        ax.tick_params(axis="x", rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
