import numpy as np

from planners.directions import Direction, direction_between


def is_valid_path(grid, wall, path, start=None, goal_value=None):
    """
    True if consecutive entries are 4-neighbours, every entry is in bounds and
    not a wall, and (when given) the path starts at `start` and ends on a cell
    equal to `goal_value`.
    """
    if not path:
        return False
    rows, cols = len(grid), len(grid[0])
    for r, c in path:
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if grid[r][c] == wall:
            return False
    for (r0, c0), (r1, c1) in zip(path[:-1], path[1:]):
        if abs(r1 - r0) + abs(c1 - c0) != 1:
            return False
    if start is not None and tuple(path[0]) != tuple(start):
        return False
    if goal_value is not None:
        r, c = path[-1]
        if grid[r][c] != goal_value:
            return False
    return True


def count_turns(path):
    """Number of direction changes along a 4-connected path."""
    steps = [direction_between(a, b) for a, b in zip(path[:-1], path[1:])]
    return sum(1 for a, b in zip(steps[:-1], steps[1:]) if a is not b)


def compute_path_metrics(path):
    """Hops, cell count, turns and per-direction step counts from a (r,c) path list."""
    counts = {d.name.lower(): 0 for d in Direction}
    if not path:
        return {"cells": 0, "hops": 0, "turns": 0, "manhattan": 0, **counts}
    for a, b in zip(path[:-1], path[1:]):
        counts[direction_between(a, b).name.lower()] += 1
    span = np.abs(np.asarray(path[-1]) - np.asarray(path[0]))
    return {
        "cells": len(path),
        "hops": len(path) - 1,
        "turns": count_turns(path),
        "manhattan": int(span.sum()),
        **counts,
    }
