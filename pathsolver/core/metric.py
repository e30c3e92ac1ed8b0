# pathsolver/core/metric.py
#!/usr/bin/env python3
"""
Octile-like distance used both as edge cost and as the heuristic to Finish.

- Diagonal step costs 1.5, orthogonal step costs 1.0.
- For adjacent cells it is exactly the edge cost.
"""

from pathsolver.core.types import Cell

DIAGONAL_COST = 1.5
STRAIGHT_COST = 1.0


def distance(a: Cell, b: Cell) -> float:
    dr = abs(a.row - b.row)
    dc = abs(a.col - b.col)
    return min(dr, dc) * DIAGONAL_COST + abs(dr - dc) * STRAIGHT_COST
