# pathsolver/core/frontier.py
#!/usr/bin/env python3
"""
Search frontier: a heap of candidate partial paths ordered by cost + heuristic.

Heap entries are (priority, seq, path). `seq` is a monotonic counter so
SearchPath objects are never compared and equal priorities pop FIFO.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple
import heapq

from pathsolver.core.types import Cell


@dataclass(frozen=True, eq=False)
class SearchPath:
    cell: Cell
    heuristic: float                       # distance(cell, finish)
    cost: float                            # accumulated from start
    previous: Optional["SearchPath"] = None

    @property
    def priority(self) -> float:
        return self.cost + self.heuristic

    def extend(self, cell: Cell, heuristic: float, step_cost: float) -> "SearchPath":
        return SearchPath(cell, heuristic, self.cost + step_cost, self)

    def walk_back(self) -> Iterator["SearchPath"]:
        """Yield this entry, then each predecessor back to the start entry."""
        node: Optional[SearchPath] = self
        while node is not None:
            yield node
            node = node.previous

    def __iter__(self) -> Iterator["SearchPath"]:
        return self.walk_back()

    @property
    def length(self) -> int:
        return sum(1 for _ in self.walk_back())


def reconstruct(terminal: SearchPath) -> List[Cell]:
    """Cells from start to `terminal.cell`, start first."""
    cells = [node.cell for node in terminal.walk_back()]
    cells.reverse()
    return cells


Entry = Tuple[float, int, SearchPath]


@dataclass
class Frontier:
    heap: List[Entry] = field(default_factory=list)
    seq: int = 0
    peak: int = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def push(self, path: SearchPath) -> None:
        heapq.heappush(self.heap, (path.priority, self._bump(), path))
        self.peak = max(self.peak, len(self.heap))

    def pop(self) -> SearchPath:
        _, _, path = heapq.heappop(self.heap)
        return path

    def prune_dominated(self, candidate: SearchPath) -> Optional[SearchPath]:
        """Remove the first entry for the same cell costing >= candidate.

        At most one entry is removed. A cheaper entry for the same cell is
        left in place.
        """
        for i, (_, _, path) in enumerate(self.heap):
            if path.cell == candidate.cell and path.cost >= candidate.cost:
                last = self.heap.pop()
                if i < len(self.heap):
                    self.heap[i] = last
                    heapq.heapify(self.heap)
                return path
        return None

    def clear(self) -> None:
        self.heap.clear()
        self.seq = 0
        self.peak = 0

    def __len__(self) -> int:
        return len(self.heap)

    def __bool__(self) -> bool:
        return bool(self.heap)

    def __iter__(self) -> Iterator[SearchPath]:
        return (path for _, _, path in self.heap)
