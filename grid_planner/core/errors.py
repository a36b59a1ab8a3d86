# grid_planner/core/errors.py
from __future__ import annotations


class PlanningError(Exception):
    """Base class for planner faults. A search that finds nothing is not one of these."""


class PlannerConfigError(PlanningError, ValueError):
    """Bad start/goal setup or strategy tag; raised before any search runs."""


class ReconstructionError(PlanningError, RuntimeError):
    """Predecessor chain is cyclic or does not end at the start state."""
