# -*- coding: utf-8 -*-
"""
Maze solvers with a unified API:
solver = PLANNERS[name](grid, wall)
solver.plan(start: (r,c), goal_value)
  -> {'success': bool, 'path': List[(r,c)] or None, ...}
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .bfs import MazeSolver, Point
from .directions import Direction, annotate_path, direction_between, format_path

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bfs": MazeSolver,
}

__all__ = [
    "MazeSolver",
    "Point",
    "Direction",
    "annotate_path",
    "direction_between",
    "format_path",
    "PLANNERS",
    "get_planner",
]


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'bfs'
    kwargs : dict
        Passed to the planner constructor (grid=..., wall=...)

    Returns
    -------
    planner instance
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)
