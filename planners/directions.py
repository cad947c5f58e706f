# -*- coding: utf-8 -*-
"""
Cardinal directions on a 4-connected grid and the display convention used to
annotate a solved path.

The member order (UP, DOWN, LEFT, RIGHT) is also the neighbour expansion order
of the BFS solver, which fixes the tie-break between equally short paths.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Sequence, Tuple


class Direction(Enum):
    UP = (-1, 0, "⬆️")
    DOWN = (1, 0, "⬇️")
    LEFT = (0, -1, "⬅️")
    RIGHT = (0, 1, "➡️")

    def __init__(self, dr: int, dc: int, glyph: str):
        self.dr = dr
        self.dc = dc
        self.glyph = glyph

    @property
    def delta(self) -> Tuple[int, int]:
        return (self.dr, self.dc)


_BY_DELTA = {d.delta: d for d in Direction}


def direction_between(parent: Sequence[int], child: Sequence[int]) -> Direction:
    """
    Classify the step parent -> child.

    Raises ValueError if the two cells are not 4-neighbours.
    """
    delta = (child[0] - parent[0], child[1] - parent[1])
    try:
        return _BY_DELTA[delta]
    except KeyError:
        raise ValueError(f"{tuple(parent)} and {tuple(child)} are not 4-neighbours") from None


def annotate_path(path: Sequence[Sequence[int]]) -> List[Tuple[Tuple[int, int], Optional[Direction]]]:
    """Pair every path entry with the direction it was entered from (None for the start)."""
    out = []
    for i, cell in enumerate(path):
        d = direction_between(path[i - 1], cell) if i > 0 else None
        out.append((cell, d))
    return out


def format_cell(cell: Sequence[int]) -> str:
    return f"{{{cell[0]}, {cell[1]}}}"


def format_path(path: Sequence[Sequence[int]], glyphs: bool = True) -> str:
    """
    Render a path as ``{r, c} -> {r, c}<glyph> -> ...``.
    The start entry carries no glyph.
    """
    parts = []
    for cell, d in annotate_path(path):
        text = format_cell(cell)
        if glyphs and d is not None:
            text += d.glyph
        parts.append(text)
    return " -> ".join(parts)
