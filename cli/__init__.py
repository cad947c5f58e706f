# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- solve          : solve a glyph maze (built-in demo by default) and print the path
- run_benchmark  : solve random mazes, check against reference distances, write CSV
"""
__all__ = [
    "solve",
    "run_benchmark",
]
