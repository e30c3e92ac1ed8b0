# pathsolver/core/parser.py
#!/usr/bin/env python3
from typing import List

from pathsolver.core.types import Cell, Classification, Grid

LINE_SEP = "\n"


def parse_grid(text: str) -> Grid:
    """Build a Grid from map text. Rows are split on '\\n' only."""
    rows: List[List[Cell]] = []
    for r, line in enumerate(text.split(LINE_SEP)):
        rows.append([Cell(r, c, Classification.from_char(ch, r, c)) for c, ch in enumerate(line)])
    return Grid(rows)
