#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Solver benchmark over random mazes:
- Generates random glyph mazes across (sizes x densities x seeds)
- Solves each with the BFS planner and times it
- Checks every result against an independent reference distance field
  (found <=> reachable, path length == reference distance + 1, path valid)
- Writes results to CSV in results/csv/ and prints a per-size summary

Example:
    python -m cli.run_benchmark \
        --sizes 20x20,40x40 \
        --densities 0.10,0.25,0.35 \
        --num-envs 50 \
        --seed 0
"""

from __future__ import annotations
import argparse
import os
import time
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from envs.generator import generate_maze, bfs_distances, MazeEnvironment
from metrics import compute_path_metrics, is_valid_path
from planners import get_planner


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = token.split("x")
        sizes.append((int(h), int(w)))
    return sizes


def _parse_densities(s: str) -> List[float]:
    vals = []
    for token in s.split(","):
        token = token.strip()
        if token.endswith("%"):
            vals.append(float(token[:-1]) / 100.0)
        else:
            vals.append(float(token))
    return vals


def run_case(env: MazeEnvironment, planner_name: str = "bfs") -> Dict:
    solver = get_planner(planner_name, grid=env.grid, wall=env.wall)

    t0 = time.perf_counter()
    out = solver.plan(env.start, env.goal_value)
    t1 = time.perf_counter()

    success = bool(out["success"])
    path = out["path"] if success else []
    ref = int(bfs_distances(env.grid, env.wall, env.start)[env.goal])
    reachable = ref >= 0
    if success:
        correct = (is_valid_path(env.grid, env.wall, path, start=env.start, goal_value=env.goal_value)
                   and len(path) == ref + 1)
    else:
        correct = not reachable
    m = compute_path_metrics(path)

    return {
        "planner": planner_name,
        "H": env.H, "W": env.W,
        "density": env.settings["density"],
        "success": int(success),
        "reachable": int(reachable),
        "correct": int(correct),
        "time_s": t1 - t0,
        "expanded": int(out["expanded"]),
        "path_hops": m["hops"],
        "ref_hops": ref,
        "turns": m["turns"],
    }


def main():
    ap = argparse.ArgumentParser(description="Benchmark the BFS maze solver on random mazes.")
    ap.add_argument("--sizes", type=str, default="20x20,40x40",
                    help="Comma-separated maze sizes like 20x20,40x40")
    ap.add_argument("--densities", type=str, default="0.10,0.25,0.35",
                    help="Comma-separated wall densities (0–1 or %%, e.g., 10%%)")
    ap.add_argument("--num-envs", type=int, default=50, help="Mazes per (size,density)")
    ap.add_argument("--planner", type=str, default="bfs", help="Planner name")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory for CSV")
    args = ap.parse_args()

    sizes = _parse_sizes(args.sizes)
    densities = _parse_densities(args.densities)
    total = len(sizes) * len(densities) * args.num_envs

    rows = []
    env_id = 0
    with tqdm(total=total, desc="Solving mazes") as pbar:
        for (H, W) in sizes:
            for dens in densities:
                for _ in range(args.num_envs):
                    base = (int(args.seed) * 1_000_003 + env_id * 97 + H * 11 + W * 13 + int(round(dens * 1000)) * 17) % 2**32
                    env = generate_maze(H=H, W=W, density=dens, rng=np.random.default_rng(base))
                    row = run_case(env, args.planner)
                    row["env_id"] = env_id
                    row["seed"] = base
                    rows.append(row)
                    env_id += 1
                    pbar.update(1)

    df = pd.DataFrame(rows)
    os.makedirs(args.outdir, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"benchmark_s{args.seed}_{stamp}.csv")
    df.to_csv(out_csv, index=False)
    print(f"Saved: {out_csv}")

    summary = df.groupby(["H", "W", "density"]).agg(
        success=("success", "mean"),
        correct=("correct", "mean"),
        time_ms=("time_s", lambda s: 1000.0 * s.mean()),
        hops=("path_hops", "mean"),
    ).reset_index()
    print(summary.to_string(index=False))
    if not df["correct"].all():
        print(f"[WARN] {int((df['correct'] == 0).sum())} mismatches against the reference distances")


if __name__ == "__main__":
    main()
