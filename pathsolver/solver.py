# pathsolver/solver.py
#!/usr/bin/env python3
"""
Whole-operation entry points: map text in, annotated map text out.

Either a complete path is found and rendered, or a PathSolverError aborts the call.
"""

from dataclasses import dataclass
from typing import List

from pathsolver.core.best_first import search
from pathsolver.core.frontier import reconstruct
from pathsolver.core.parser import parse_grid
from pathsolver.core.render import PATH_MARKER, render
from pathsolver.core.types import Cell, Grid


@dataclass
class Solution:
    grid: Grid
    path: List[Cell]
    cost: float
    rendered: str


def solve(text: str, marker: str = PATH_MARKER) -> Solution:
    grid = parse_grid(text)
    terminal = search(grid)
    path = reconstruct(terminal)
    return Solution(grid, path, terminal.cost, render(text, path, marker))


def add_path(text: str) -> str:
    return solve(text).rendered
