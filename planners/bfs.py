#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search maze solver (unweighted shortest hops).
- 4-connected moves only, expanded in the order up, down, left, right.
- Cell contents are opaque: only `==` against the wall and goal markers is used,
  so grids of characters, ints, enums or any other comparable values all work.
- The goal is a *value*, not a coordinate: the first cell in row-major order
  whose content equals it becomes the target.
"""

from __future__ import annotations
import sys
from collections import deque
from typing import Any, Dict, Generic, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from .directions import Direction

T = TypeVar("T")


class Point(NamedTuple):
    row: int
    col: int


class MazeSolver(Generic[T]):
    """
    Solver bound to one grid and one wall marker.

    The grid is kept by reference and never modified. `parents` holds the BFS
    parent map of the most recent solve and is cleared when a new solve starts,
    so an instance can be reused.
    """

    def __init__(self, grid: Sequence[Sequence[T]], wall: T):
        if grid is None or len(grid) == 0:
            raise ValueError("grid must have at least one row")
        cols = len(grid[0])
        if cols == 0:
            raise ValueError("grid rows must have at least one column")
        for r in range(len(grid)):
            if len(grid[r]) != cols:
                raise ValueError(f"grid is not rectangular: row {r} has width {len(grid[r])}, expected {cols}")

        self.grid = grid
        self.rows = len(grid)
        self.cols = cols
        self.wall = wall
        self.parents: Dict[Point, Point] = {}
        self._arrivals: Dict[Point, Direction] = {}
        self.expanded = 0

    # ------------------------------------------------------------------ #

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, r: int, c: int) -> bool:
        return self.grid[r][c] == self.wall

    def find_goal(self, goal_value: T) -> Optional[Point]:
        """First cell (row-major) whose content equals goal_value, or None."""
        for r in range(self.rows):
            row = self.grid[r]
            for c in range(self.cols):
                if row[c] == goal_value:
                    return Point(r, c)
        return None

    def arrival_direction(self, cell: Tuple[int, int]) -> Optional[Direction]:
        """Direction in which `cell` was first entered during the last solve."""
        return self._arrivals.get(Point(*cell))

    def _reconstruct(self, start: Point, goal: Point) -> List[Point]:
        path = []
        cur = goal
        while cur != start:
            path.append(cur)
            cur = self.parents[cur]
        path.append(start)
        path.reverse()
        return path

    # ------------------------------------------------------------------ #

    def solve_bfs(self, start: Tuple[int, int], goal_value: T) -> Tuple[List[Point], bool]:
        """
        Shortest path from `start` to the first cell equal to `goal_value`.

        Returns (path, True) with path[0] == start and path[-1] the goal cell,
        or ([], False) when the goal value is absent, unreachable, or the start
        is out of bounds or a wall.
        """
        self.parents = {}
        self._arrivals = {}
        self.expanded = 0

        goal = self.find_goal(goal_value)
        if goal is None:
            print(f"Error: no cell with goal value {goal_value!r} found in the maze", file=sys.stderr)
            return [], False

        start = Point(*start)
        if not self.in_bounds(*start) or self.is_wall(*start):
            return [], False

        dq = deque([start])
        visited = {start}

        while dq:
            cur = dq.popleft()
            self.expanded += 1
            if cur == goal:
                return self._reconstruct(start, goal), True
            for d in Direction:
                nr, nc = cur.row + d.dr, cur.col + d.dc
                if not self.in_bounds(nr, nc):
                    continue
                if self.is_wall(nr, nc):
                    continue
                nxt = Point(nr, nc)
                if nxt in visited:
                    continue
                visited.add(nxt)
                self.parents[nxt] = cur
                self._arrivals[nxt] = d
                dq.append(nxt)

        return [], False

    def plan(self, start: Tuple[int, int], goal_value: T) -> Dict[str, Any]:
        """
        Same search as `solve_bfs`, in the unified planner result shape:
        {'success', 'path', 'goal', 'directions', 'expanded'}.
        """
        path, found = self.solve_bfs(start, goal_value)
        if not found:
            return {'success': False, 'path': None, 'goal': None, 'directions': [], 'expanded': self.expanded}
        return {
            'success': True,
            'path': path,
            'goal': path[-1],
            'directions': [self._arrivals[p] for p in path[1:]],
            'expanded': self.expanded,
        }
