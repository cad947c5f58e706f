#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Solve a glyph maze with BFS and print the shortest path, each step annotated
with the direction it was entered from.

With no arguments this solves the built-in 10x10 demo maze (wall '1',
goal '#', start (0, 0)).

Example:
  python -m cli.solve
  python -m cli.solve --maze mazes/level1.txt --wall X --goal G --start 2,3 \
      --plot results/figs/level1.png
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional, Tuple

from envs.mazes import DEMO_MAZE, DEMO_WALL, DEMO_GOAL, DEMO_START, maze_from_file
from planners import get_planner, format_path


def _parse_start(s: str) -> Tuple[int, int]:
    parts = [p.strip() for p in s.replace("(", "").replace(")", "").split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Bad start '{s}', expected like 0,0")
    try:
        r, c = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad start '{s}', expected like 0,0") from None
    if r < 0 or c < 0:
        raise argparse.ArgumentTypeError(f"Bad start '{s}', coordinates must be non-negative")
    return r, c


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Find the shortest path through a glyph maze with BFS.")
    ap.add_argument("--maze", type=str, default=None,
                    help="Text maze file, one row per line (default: built-in 10x10 demo maze)")
    ap.add_argument("--wall", type=str, default=DEMO_WALL, help="Glyph of impassable cells")
    ap.add_argument("--goal", type=str, default=DEMO_GOAL, help="Glyph of the goal cell")
    ap.add_argument("--start", type=_parse_start, default=DEMO_START, help="Start cell as R,C")
    ap.add_argument("--no-glyphs", action="store_true", help="Print coordinates without direction glyphs")
    ap.add_argument("--plot", type=str, default=None, help="Save a rendering of the maze and path to this PNG")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.maze:
        try:
            maze = maze_from_file(args.maze)
        except (OSError, ValueError) as e:
            ap.error(f"cannot load maze '{args.maze}': {e}")
    else:
        maze = DEMO_MAZE

    r, c = args.start
    if r >= len(maze) or c >= len(maze[0]):
        ap.error(f"start {args.start} is outside the {len(maze)}x{len(maze[0])} maze")

    solver = get_planner("bfs", grid=maze, wall=args.wall)
    print(f"Searching for the shortest path from {args.start} to the goal (value '{args.goal}')...")
    path, found = solver.solve_bfs(args.start, args.goal)

    if found:
        print("Shortest path found:")
        print(format_path(path, glyphs=not args.no_glyphs))
    else:
        print("No valid path from the start to the goal.")

    if args.plot:
        from envs.render import save_render  # lazy: matplotlib is only needed for plots
        title = f"{len(path) - 1} steps" if found else "no path"
        out = save_render(maze, args.wall, args.plot, path=path or None, title=title)
        print(f"Saved: {out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
