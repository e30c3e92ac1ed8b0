# pathsolver/core/best_first.py
#!/usr/bin/env python3
"""
Best-first search over an 8-connected character grid, one expansion per step().

Implements the stepping algorithm API:
- init(grid) - reset() - step() -> StepResult - run() -> SearchPath

Priority is accumulated cost + distance to Finish. There is no closed set: a
popped cell is expanded every time it comes off the frontier. Before each
candidate is pushed, the first frontier entry for the same cell that costs at
least as much is dropped. The first time Finish is popped its cost is minimal.

Without a closed set the frontier never drains once start has an open
neighbour, so reset() checks that Finish is connected to Start up front and an
unreachable Finish ends the search as no_path before any expansion.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from pathsolver.core.errors import MissingEndpointError, NoPathError
from pathsolver.core.frontier import Frontier, SearchPath, reconstruct
from pathsolver.core.metric import distance
from pathsolver.core.types import Cell, Classification, Grid, StepResult

logger = logging.getLogger(__name__)


@dataclass
class BestFirstAlgo:
    name: str = "Best-first"

    # Internal state
    grid: Optional[Grid] = None
    frontier: Frontier = field(default_factory=Frontier)
    start_cell: Optional[Cell] = None
    goal_cell: Optional[Cell] = None
    result: Optional[SearchPath] = None
    popped_count: int = 0
    pruned_count: int = 0
    reachable: bool = True
    done: bool = False
    no_path: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        """Bind to a grid. Raises MissingEndpointError if S or X is absent."""
        start = grid.find(Classification.START)
        if start is None:
            raise MissingEndpointError(Classification.START)
        goal = grid.find(Classification.FINISH)
        if goal is None:
            raise MissingEndpointError(Classification.FINISH)
        self.grid = grid
        self.start_cell = start
        self.goal_cell = goal
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start entry."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.result = None
        self.popped_count = 0
        self.pruned_count = 0
        self.done = False
        self.no_path = False

        s = self.start_cell
        self.reachable = self.grid.connected(s, self.goal_cell)
        self.frontier.push(SearchPath(s, distance(s, self.goal_cell), 0.0))
        logger.debug("search seeded: start=(%d, %d) finish=(%d, %d)",
                     s.row, s.col, self.goal_cell.row, self.goal_cell.col)

    # -------------------- helpers --------------------

    def _successors(self, current: SearchPath) -> List[SearchPath]:
        out: List[SearchPath] = []
        for n in self.grid.neighbors(current.cell):
            if self.grid.is_block(n):
                continue
            out.append(current.extend(n, distance(n, self.goal_cell), distance(current.cell, n)))
        return out

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE expansion:
          - Pop the lowest cost + heuristic entry.
          - If it sits on Finish, finish.
          - Else push every non-blocked neighbour, pruning one dominated entry each.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = reconstruct(self.result)
            return StepResult(status="done", current=self.result.cell, path=path,
                              metrics=self._metrics())

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.reachable:
            self.no_path = True
            logger.info("finish is walled off from start: no path")
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            logger.info("frontier exhausted after %d pops: no path", self.popped_count)
            return StepResult(status="no_path", metrics=self._metrics())

        current = self.frontier.pop()
        self.popped_count += 1

        if current.cell == self.goal_cell:
            self.done = True
            self.result = current
            path = reconstruct(current)
            logger.info("finish reached: cost=%.1f cells=%d pops=%d",
                        current.cost, len(path), self.popped_count)
            return StepResult(status="done", current=current.cell, path=path,
                              metrics=self._metrics())

        expanded: List[Cell] = []
        for candidate in self._successors(current):
            dropped = self.frontier.prune_dominated(candidate)
            if dropped is not None:
                self.pruned_count += 1
                logger.debug("pruned (%d, %d) cost %.1f for cost %.1f",
                             dropped.cell.row, dropped.cell.col, dropped.cost, candidate.cost)
            self.frontier.push(candidate)
            expanded.append(candidate.cell)

        return StepResult(status="running", current=current.cell, expanded=expanded,
                          metrics=self._metrics())

    def run(self) -> SearchPath:
        """Step until terminal. Returns the Finish entry or raises NoPathError."""
        if self.grid is None:
            raise RuntimeError("call init(grid) before run()")
        res = self.step()
        while res.status == "running":
            res = self.step()
        if res.status != "done":
            raise NoPathError()
        return self.result

    # -------------------- metrics --------------------

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "pruned": self.pruned_count,
            "frontier_size": len(self.frontier),
            "frontier_peak": self.frontier.peak,
            "path_len": self.result.length if self.result else 0,
            "total_cost": self.result.cost if self.result else None,
        }


def search(grid: Grid) -> SearchPath:
    algo = BestFirstAlgo()
    algo.init(grid)
    return algo.run()
