# grid_planner/core/logging_config.py
"""
Console logging for grid_planner.

Usage:
    from ..core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("plan ready", extra={"extra_info": {"algo": "AStar", "cost": 18}})

Level comes from GRID_PLANNER_LOG_LEVEL (default WARNING) or configure_logging().
"""
from __future__ import annotations
import logging
import os
import sys
from typing import Dict, Optional, Union

ROOT_LOGGER_NAME = "grid_planner"
DEFAULT_LOG_LEVEL = os.getenv("GRID_PLANNER_LOG_LEVEL", "WARNING")


class PlannerLogFormatter(logging.Formatter):
    """[TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE | key=value ..."""

    COLORS: Dict[str, str] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(self, use_colors: bool = False) -> None:
        self.use_colors = use_colors
        fmt = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        extra = getattr(record, "extra_info", None)
        if extra:
            msg += " | " + " | ".join(f"{k}={v}" for k, v in extra.items())
        if self.use_colors:
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            msg = f"{color}{msg}{self.COLORS['RESET']}"
        return msg


_configured = False


def configure_logging(level: Optional[Union[int, str]] = None, use_colors: Optional[bool] = None) -> logging.Logger:
    """Attach one console handler to the package logger. Calling again only changes the level."""
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if level is None:
        level = DEFAULT_LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)

    if not _configured:
        if use_colors is None:
            use_colors = sys.stderr.isatty()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(PlannerLogFormatter(use_colors=use_colors))
        root.addHandler(handler)
        _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        configure_logging()
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
