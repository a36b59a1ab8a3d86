# grid_planner/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import math, time, tracemalloc
from .actions import Action
from .node import State

Coord = Tuple[int, int]

EXPANSION_LIMIT = "expansion limit reached"
FRONTIER_EXHAUSTED = "frontier exhausted"


@dataclass
class SearchOutcome:
    """What a strategy hands back: the goal State (or None) plus its counters."""
    algo: str
    goal: Optional[State]
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.goal is not None


@dataclass(frozen=True)
class Plan:
    algo: str
    success: bool
    actions: Tuple[Action, ...]
    path: Tuple[Coord, ...]
    cost: float
    nodes_expanded: int
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.success

    def next_action(self, i: int) -> Action:
        if 0 <= i < len(self.actions):
            return self.actions[i]
        return Action.DO_NOTHING

    @classmethod
    def not_found(cls, algo: str, nodes_expanded: int = 0, time_s: float = 0.0,
                  peak_kb: int = 0, error: Optional[str] = None) -> "Plan":
        return cls(algo, False, (), (), math.inf, nodes_expanded, time_s, peak_kb, error)


class MeasuredRun:
    """
    Wall-clock and tracemalloc peak around one search.

    Strategies return from inside the with-block, so `elapsed` and `peak_kb`
    are read while it is still open. A run nested in an already-traced
    region (a benchmark wrapping several searches) reuses that trace
    instead of restarting it.
    """
    def __init__(self) -> None:
        self.started: Optional[float] = None
        self.finished: Optional[float] = None
        self._frozen_peak_kb = 0
        self._owns_trace = False

    def __enter__(self) -> "MeasuredRun":
        self._owns_trace = not tracemalloc.is_tracing()
        if self._owns_trace:
            tracemalloc.start()
        self.started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.finished = time.perf_counter()
        self._frozen_peak_kb = self._live_peak_kb()
        if self._owns_trace:
            tracemalloc.stop()
            self._owns_trace = False
        return False

    def _live_peak_kb(self) -> int:
        if not tracemalloc.is_tracing():
            return self._frozen_peak_kb
        return max(self._frozen_peak_kb, tracemalloc.get_traced_memory()[1] // 1024)

    @property
    def elapsed(self) -> float:
        if self.started is None:
            return 0.0
        end = self.finished if self.finished is not None else time.perf_counter()
        return end - self.started

    @property
    def peak_kb(self) -> int:
        if self.finished is None:
            return self._live_peak_kb()
        return self._frozen_peak_kb
