#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from envs import (DEMO_MAZE, DEMO_GOAL, DEMO_WALL, check_rectangular, parse_maze,
                  maze_from_file, generate_maze, bfs_distances)


def test_demo_maze_shape_and_goal():
    assert len(DEMO_MAZE) == 10
    assert all(len(row) == 10 for row in DEMO_MAZE)
    goals = [(r, c) for r, row in enumerate(DEMO_MAZE) for c, v in enumerate(row) if v == DEMO_GOAL]
    assert goals == [(9, 6)]
    assert DEMO_MAZE[0][0] != DEMO_WALL


def test_parse_maze_ignores_blank_lines_and_indent():
    text = """

        01#
        000

    """
    assert parse_maze(text) == [["0", "1", "#"], ["0", "0", "0"]]


@pytest.mark.parametrize("text", ["", "\n  \n", "012\n01\n"])
def test_parse_maze_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_maze(text)


def test_check_rectangular_names_row():
    with pytest.raises(ValueError, match="row 2"):
        check_rectangular(["abc", "abc", "ab"])


def test_maze_from_file(tmp_path):
    p = tmp_path / "maze.txt"
    p.write_text("0#\n10\n", encoding="utf-8")
    assert maze_from_file(str(p)) == [["0", "#"], ["1", "0"]]


@pytest.mark.parametrize("status", ["success", "failure"])
def test_generate_respects_status(status):
    rng = np.random.default_rng(3)
    env = generate_maze(H=15, W=15, density=0.3, ensure_status=status, rng=rng)
    reachable = bfs_distances(env.grid, env.wall, env.start)[env.goal] >= 0
    assert reachable == (status == "success")
    assert env.settings["reachable"] == reachable
    assert env.grid[env.goal] == env.goal_value
    assert int((env.grid == env.goal_value).sum()) == 1
    assert env.grid[env.start] != env.wall
    assert env.start != env.goal


def test_generate_is_reproducible():
    a = generate_maze(H=8, W=9, density=0.25, rng=np.random.default_rng(11))
    b = generate_maze(H=8, W=9, density=0.25, rng=np.random.default_rng(11))
    assert np.array_equal(a.grid, b.grid)
    assert a.start == b.start and a.goal == b.goal
    assert a.shape == (8, 9) and a.H == 8 and a.W == 9


@pytest.mark.parametrize("kwargs", [
    dict(H=0, W=5), dict(H=1, W=1), dict(H=5, W=5, density=1.0), dict(H=5, W=5, ensure_status="maybe"),
])
def test_generate_rejects_bad_settings(kwargs):
    with pytest.raises(ValueError):
        generate_maze(**kwargs)


def test_bfs_distances_small():
    grid = np.array([list("001"), list("010"), list("000")])
    dist = bfs_distances(grid, "1", (0, 0))
    assert dist.tolist() == [
        [0, 1, -1],
        [1, -1, 5],
        [2, 3, 4],
    ]
    assert (bfs_distances(grid, "1", (0, 2)) == -1).all()
