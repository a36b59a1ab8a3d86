# grid_planner/core/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from .heuristics import HEURISTICS


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class PlannerConfig:
    """
    Tunables for a planning run.

    heuristic                    -- "euclidean" or "manhattan" (A*, RBFS)
    step_weight                  -- multiplier on move length in the A* edge weight
    max_expansions               -- expansion ceiling for every strategy (None = unbounded)
    hill_climbing_max_expansions -- ceiling Hill-Climbing always runs under
    max_restarts                 -- optional cap on Hill-Climbing restarts
    seed                         -- seed for the Hill-Climbing random source
    strict_strategy              -- raise on unknown strategy tags instead of planning nothing
    """
    heuristic: str = "euclidean"
    step_weight: float = 1.0
    max_expansions: Optional[int] = None
    hill_climbing_max_expansions: int = 100_000
    max_restarts: Optional[int] = None
    seed: Optional[int] = None
    strict_strategy: bool = False

    def __post_init__(self) -> None:
        if self.heuristic.lower() not in HEURISTICS:
            raise ValueError(f"Unknown heuristic {self.heuristic!r}; expected one of {sorted(HEURISTICS)}")
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError("max_expansions must be >= 0")
        if self.hill_climbing_max_expansions <= 0:
            raise ValueError("hill_climbing_max_expansions must be positive")

    @property
    def hill_climbing_ceiling(self) -> int:
        if self.max_expansions is None:
            return self.hill_climbing_max_expansions
        return min(self.max_expansions, self.hill_climbing_max_expansions)

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Defaults overridable via GRID_PLANNER_* environment variables."""
        hc = _env_int("GRID_PLANNER_HC_MAX_EXPANSIONS")
        return cls(
            heuristic=os.getenv("GRID_PLANNER_HEURISTIC", "euclidean"),
            step_weight=float(os.getenv("GRID_PLANNER_STEP_WEIGHT", "1.0")),
            max_expansions=_env_int("GRID_PLANNER_MAX_EXPANSIONS"),
            hill_climbing_max_expansions=hc if hc is not None else 100_000,
            max_restarts=_env_int("GRID_PLANNER_MAX_RESTARTS"),
            seed=_env_int("GRID_PLANNER_SEED"),
            strict_strategy=_env_bool("GRID_PLANNER_STRICT"),
        )
