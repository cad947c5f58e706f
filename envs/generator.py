#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random glyph mazes for benchmarking and property testing the BFS solver.

Key design goals:
- Same cell convention as the hand-written mazes: single-character strings,
  one glyph for walls, one for open floor, one for the goal.
- Controllable outcome: 'success' / 'failure' / 'any' with respect to
  reachability of the goal from the start.
- An independent reference: a NumPy distance field computed without the
  solver, used to check path lengths.
- Reproducibility: explicit np.random.Generator.

Usage (quick smoke test):
    python3 -m envs.generator
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

WALL = "1"
FLOOR = "0"
GOAL = "#"

DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)


# ------------------------------- Data classes ------------------------------- #

@dataclass
class MazeEnvironment:
    """Glyph maze with a start cell and a single goal cell."""
    grid: np.ndarray            # (H, W) array of 1-char str
    start: Tuple[int, int]
    goal: Tuple[int, int]       # location of goal_value (for reference checks)
    wall: str
    goal_value: str
    settings: Dict              # record of generator settings used (for provenance)
    rng: np.random.Generator

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def H(self) -> int:
        return self.grid.shape[0]

    @property
    def W(self) -> int:
        return self.grid.shape[1]

    def blocked(self) -> np.ndarray:
        """Boolean occupancy mask (True = wall)."""
        return self.grid == self.wall


# ------------------------------ Reference BFS ------------------------------ #

def bfs_distances(grid: np.ndarray, wall, start: Tuple[int, int]) -> np.ndarray:
    """
    Hop distance from `start` to every cell over non-wall 4-neighbours.

    Returns an int32 array with -1 for unreachable cells (and everywhere if the
    start itself is a wall).
    """
    grid = np.asarray(grid)
    H, W = grid.shape
    blocked = grid == wall
    dist = np.full((H, W), -1, dtype=np.int32)
    sr, sc = start
    if blocked[sr, sc]:
        return dist

    dist[sr, sc] = 0
    q = [(sr, sc)]
    head = 0  # manual queue for speed
    while head < len(q):
        r, c = q[head]
        head += 1
        for dr, dc in DELTAS_4:
            nr, nc = r + int(dr), c + int(dc)
            if nr < 0 or nr >= H or nc < 0 or nc >= W:
                continue
            if blocked[nr, nc] or dist[nr, nc] >= 0:
                continue
            dist[nr, nc] = dist[r, c] + 1
            q.append((nr, nc))
    return dist


def _has_path(grid: np.ndarray, wall, start: Tuple[int, int], goal: Tuple[int, int]) -> bool:
    return bool(bfs_distances(grid, wall, start)[goal] >= 0)


# ------------------------------- Generation -------------------------------- #

def _random_grid(H: int, W: int, density: float, rng: np.random.Generator) -> np.ndarray:
    grid = np.full((H, W), FLOOR, dtype="<U1")
    grid[rng.random((H, W)) < density] = WALL
    return grid


def _pick_free(grid: np.ndarray, rng: np.random.Generator, exclude=None) -> Optional[Tuple[int, int]]:
    free = np.argwhere(grid != WALL)
    if exclude is not None:
        free = free[~np.all(free == np.asarray(exclude), axis=1)]
    if free.size == 0:
        return None
    r, c = free[int(rng.integers(0, len(free)))]
    return (int(r), int(c))


def generate_maze(H: int = 20,
                  W: int = 20,
                  density: float = 0.25,
                  ensure_status: str = "any",
                  rng: Optional[np.random.Generator] = None,
                  max_tries: int = 200) -> MazeEnvironment:
    """
    Random maze of HxW glyphs with roughly `density` walls.

    ensure_status:
        'any'     - no constraint
        'success' - the goal is reachable from the start
        'failure' - the goal is walled off from the start
    """
    if H < 1 or W < 1:
        raise ValueError(f"maze must be at least 1x1, got {H}x{W}")
    if H * W < 2:
        raise ValueError("maze needs room for a distinct start and goal")
    if not 0.0 <= density < 1.0:
        raise ValueError(f"density must be in [0, 1), got {density}")
    if ensure_status not in ("any", "success", "failure"):
        raise ValueError(f"Unknown ensure_status '{ensure_status}'")
    if rng is None:
        rng = np.random.default_rng()

    for _ in range(max_tries):
        grid = _random_grid(H, W, density, rng)
        start = _pick_free(grid, rng)
        if start is None:
            continue
        goal = _pick_free(grid, rng, exclude=start)
        if goal is None:
            continue
        reachable = _has_path(grid, WALL, start, goal)
        if ensure_status == "success" and not reachable:
            continue
        if ensure_status == "failure" and reachable:
            continue
        grid[goal] = GOAL
        settings = dict(H=H, W=W, density=density, ensure_status=ensure_status, reachable=reachable)
        return MazeEnvironment(grid=grid, start=start, goal=goal, wall=WALL,
                               goal_value=GOAL, settings=settings, rng=rng)

    raise RuntimeError(f"Could not generate a '{ensure_status}' maze in {max_tries} tries; adjust density")


if __name__ == "__main__":
    env = generate_maze(12, 24, 0.3, ensure_status="success", rng=np.random.default_rng(0))
    for row in env.grid:
        print("".join(row))
    print("start:", env.start, "goal:", env.goal, "settings:", env.settings)
