# -*- coding: utf-8 -*-
"""
Maze fixtures, parsing, random generation and rendering.
Exposes:
- DEMO_MAZE (+ its wall/goal/start markers)
- parse_maze(...), maze_from_file(...), check_rectangular(...)
- MazeEnvironment / generate_maze(...) / bfs_distances(...)
"""

from __future__ import annotations

from .mazes import (DEMO_MAZE, DEMO_WALL, DEMO_GOAL, DEMO_START,
                    check_rectangular, parse_maze, maze_from_file)
from .generator import MazeEnvironment, generate_maze, bfs_distances

__all__ = [
    "DEMO_MAZE",
    "DEMO_WALL",
    "DEMO_GOAL",
    "DEMO_START",
    "check_rectangular",
    "parse_maze",
    "maze_from_file",
    "MazeEnvironment",
    "generate_maze",
    "bfs_distances",
]
