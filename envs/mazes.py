# -*- coding: utf-8 -*-
"""
Hand-written glyph mazes and a tiny text format for loading more of them.

Text format: one maze row per line, one character per cell. Blank lines and
surrounding whitespace are ignored, so a maze can be indented in a file.
"""

from __future__ import annotations
from typing import List, Sequence

# 10x10 reference maze: '1' = wall, '0' = open, '2' = open decoration,
# '#' = goal at (9, 6).
DEMO_MAZE: List[List[str]] = [list(row) for row in (
    "0011111000",
    "1010001010",
    "1010101010",
    "1010101010",
    "1012121010",
    "1010100010",
    "1010101010",
    "1010101010",
    "1010101010",
    "100010#010",
)]

DEMO_WALL = "1"
DEMO_GOAL = "#"
DEMO_START = (0, 0)


def check_rectangular(grid: Sequence[Sequence]) -> None:
    """Raise ValueError unless grid has >= 1 row, >= 1 column and equal-width rows."""
    if len(grid) == 0:
        raise ValueError("maze is empty")
    width = len(grid[0])
    if width == 0:
        raise ValueError("maze rows must not be empty")
    for r, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(f"maze row {r} has width {len(row)}, expected {width}")


def parse_maze(text: str) -> List[List[str]]:
    grid = [list(line.strip()) for line in text.splitlines() if line.strip()]
    check_rectangular(grid)
    return grid


def maze_from_file(path: str) -> List[List[str]]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_maze(f.read())
