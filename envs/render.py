# -*- coding: utf-8 -*-
"""
Matplotlib rendering of a glyph maze with an optional solved path overlay.

Layers:
  - background (white), walls (dark gray)
  - path polyline (lime) with start (green star) and end (red star) markers
"""

from __future__ import annotations
import os
from typing import Optional, Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def _as_cells(grid) -> np.ndarray:
    cells = np.asarray(grid)
    if cells.ndim == 1:  # rows given as strings
        cells = np.array([list(row) for row in grid])
    return cells


def render_maze(grid, wall, path: Optional[Sequence] = None, ax=None, title=None, show_glyphs=False):
    cells = _as_cells(grid)
    H, W = cells.shape[:2]
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W/3), max(3, H/3)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    rgb[cells == wall] = 0.2
    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if show_glyphs:
        for r in range(H):
            for c in range(W):
                if cells[r, c] != wall:
                    ax.text(c, r, str(cells[r, c]), color="0.5", fontsize=7, ha="center", va="center")

    if path:
        rr, cc = zip(*path)
        ax.plot(cc, rr, color="lime", lw=2, alpha=0.8)
        ax.plot(cc[0], rr[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
        ax.plot(cc[-1], rr[-1], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_render(grid, wall, out_path: str, path=None, title=None, show_glyphs=False) -> str:
    cells = _as_cells(grid)
    H, W = cells.shape[:2]
    fig, ax = plt.subplots(figsize=(max(3, W/3), max(3, H/3)), dpi=120)
    render_maze(cells, wall, path=path, ax=ax, title=title, show_glyphs=show_glyphs)
    fig.tight_layout()
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path
