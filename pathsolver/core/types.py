# pathsolver/core/types.py
#!/usr/bin/env python3
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any

from pathsolver.core.errors import ParseError


class Classification(Enum):
    OPEN = "."
    START = "S"
    FINISH = "X"
    BLOCKED = "B"

    @property
    def char(self) -> str:
        return self.value

    @property
    def is_traversable(self) -> bool:
        return self is not Classification.BLOCKED

    @classmethod
    def from_char(cls, ch: str, row: int = -1, col: int = -1) -> "Classification":
        try:
            return cls(ch)
        except ValueError:
            raise ParseError(ch, row, col) from None


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    kind: Classification


@dataclass
class Grid:
    cells: List[List[Cell]]             # [row][col]

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < len(self.cells[row])

    def cell_at(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_block(self, c: Cell) -> bool:
        return c.kind is Classification.BLOCKED

    def find(self, kind: Classification) -> Optional[Cell]:
        """First cell of the given kind in row-major order, or None."""
        for row in self.cells:
            for c in row:
                if c.kind is kind:
                    return c
        return None

    def neighbors(self, c: Cell) -> List[Cell]:
        """The up-to-8 cells around `c`, clipped to the grid, row-major order.

        Blocked cells are included; callers filter them.
        """
        out: List[Cell] = []
        for r in range(c.row - 1, c.row + 2):
            for k in range(c.col - 1, c.col + 2):
                if (r, k) == (c.row, c.col):
                    continue
                if self.in_bounds(r, k):
                    out.append(self.cells[r][k])
        return out

    def connected(self, a: Cell, b: Cell) -> bool:
        """True if b can be reached from a through non-blocked 8-neighbours."""
        seen = {a}
        queue = deque([a])
        while queue:
            c = queue.popleft()
            if c == b:
                return True
            for n in self.neighbors(c):
                if n not in seen and not self.is_block(n):
                    seen.add(n)
                    queue.append(n)
        return False


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    current: Optional[Cell] = None
    expanded: List[Cell] = field(default_factory=list)
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)
