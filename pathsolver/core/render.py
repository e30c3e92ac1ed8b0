# pathsolver/core/render.py
#!/usr/bin/env python3
from typing import Iterable

from pathsolver.core.parser import LINE_SEP
from pathsolver.core.types import Cell

PATH_MARKER = "*"


def render(text: str, path: Iterable[Cell], marker: str = PATH_MARKER) -> str:
    """Overlay `marker` on every path cell of a fresh copy of the map text."""
    if len(marker) != 1:
        raise ValueError(f"marker must be a single character, got {marker!r}")
    overlay = [list(line) for line in text.split(LINE_SEP)]
    for c in path:
        overlay[c.row][c.col] = marker
    return LINE_SEP.join("".join(row) for row in overlay)
