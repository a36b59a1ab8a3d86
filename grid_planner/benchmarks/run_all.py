# grid_planner/benchmarks/run_all.py
# Runs every registered strategy over the open room and both named layouts with seeded random
# start/target pairs, and reports per-strategy averages.
from __future__ import annotations

import argparse
import json
import os
import random
import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..algorithms.registry import strategy_tags
from ..core.config import PlannerConfig
from ..core.errors import PlannerConfigError
from ..core.logging_config import configure_logging
from ..simulation import Simulation

# ---- Tunables (overridable via environment variables) -----------------------
TRIALS = int(os.getenv("BENCH_TRIALS", "50"))       # random start/target pairs
SEED = int(os.getenv("BENCH_SEED", "0"))            # drives pairs and HillClimbing
ROWS = int(os.getenv("BENCH_ROWS", "10"))
COLS = int(os.getenv("BENCH_COLS", "10"))
ENVS: Tuple[Optional[str], ...] = (None, "1", "2")

Coord = Tuple[int, int]


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _pairs(trials: int, seed: int, rows: int, cols: int) -> List[Tuple[Coord, Coord]]:
    r = random.Random(seed)
    return [
        ((r.randrange(rows), r.randrange(cols)), (r.randrange(rows), r.randrange(cols)))
        for _ in range(trials)
    ]


def run_strategy(strategy: str, pairs, envs=ENVS, seed: int = SEED, config: Optional[PlannerConfig] = None) -> Dict:
    """Average timesteps / expanded / energy cost over every (pair, env) that is a valid setup."""
    config = config or PlannerConfig(seed=seed)
    totals = {"timesteps": 0, "expanded": 0, "energy_cost": 0, "time_s": 0.0}
    runs = skipped = 0
    all_done = True

    for i, (start, target) in enumerate(pairs):
        for env_id in envs:
            try:
                sim = Simulation(
                    strategy, start[0], start[1], target[0], target[1],
                    env_id=env_id, config=config, rng=random.Random(seed + i),
                )
            except PlannerConfigError:
                skipped += 1
                continue
            result = sim.run()
            runs += 1
            totals["timesteps"] += result.timesteps
            totals["expanded"] += sim.planner.expanded
            totals["energy_cost"] += sim.planner.energy_cost
            totals["time_s"] += sim.plan.time_s
            all_done &= result.goal_met

    n = max(runs, 1)
    return {
        "algo": strategy,
        "runs": runs,
        "skipped": skipped,
        "avg_timesteps": totals["timesteps"] / n,
        "avg_expanded": totals["expanded"] / n,
        "avg_energy_cost": totals["energy_cost"] / n,
        "avg_time_s": totals["time_s"] / n,
        "all_done": all_done and runs > 0,
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="Compare planning strategies on the built-in layouts.")
    ap.add_argument("--trials", type=int, default=TRIALS)
    ap.add_argument("--seed", type=int, default=SEED)
    ap.add_argument("--out", default=str(Path(__file__).with_name("results.json")))
    ap.add_argument("--plot", default=None, help="save a bar chart of the averages to this file")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    configure_logging(args.log_level)
    pairs = _pairs(args.trials, args.seed, ROWS, COLS)

    rows = []
    for name in strategy_tags():
        print(f"→ Running {name} ...")
        row = run_strategy(name, pairs, seed=args.seed)
        print(
            f"  {name}: runs={row['runs']} "
            f"timesteps={row['avg_timesteps']:.2f} "
            f"expanded={row['avg_expanded']:.2f} "
            f"energy={row['avg_energy_cost']:.2f} "
            f"time={_fmt_time(row['avg_time_s'])}s "
            f"all_done={row['all_done']}"
        )
        rows.append(row)

    out = {"results": rows, "trials": args.trials, "seed": args.seed, "ts": time.time()}
    print(json.dumps(out, indent=2))
    Path(args.out).write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")

    if args.plot:
        from ..plots.plotting import bar_compare
        fig = bar_compare(rows, title=f"Strategy comparison ({args.trials} trials, seed {args.seed})")
        fig.savefig(args.plot, dpi=160)
        print(f"Wrote {args.plot}")

    return rows


if __name__ == "__main__":
    main()
