import heapq
import random

import pytest

from pathsolver.core.metric import distance
from pathsolver.core.types import Classification


def dijkstra_cost(grid):
    """Reference minimum S->X cost, or None when X is unreachable."""
    start = grid.find(Classification.START)
    goal = grid.find(Classification.FINISH)
    best = {start: 0.0}
    pq = [(0.0, 0, start)]
    seq = 0
    while pq:
        g, _, u = heapq.heappop(pq)
        if g > best.get(u, float("inf")):
            continue
        if u == goal:
            return g
        for v in grid.neighbors(u):
            if grid.is_block(v):
                continue
            alt = g + distance(u, v)
            if alt < best.get(v, float("inf")):
                best[v] = alt
                seq += 1
                heapq.heappush(pq, (alt, seq, v))
    return None


def random_map(seed, height=6, width=6, density=0.3):
    rng = random.Random(seed)
    rows = [["B" if rng.random() < density else "." for _ in range(width)] for _ in range(height)]
    cells = [(r, c) for r in range(height) for c in range(width)]
    (sr, sc), (fr, fc) = rng.sample(cells, 2)
    rows[sr][sc] = "S"
    rows[fr][fc] = "X"
    return "\n".join("".join(row) for row in rows)


@pytest.fixture
def reference_cost():
    return dijkstra_cost


@pytest.fixture
def make_map():
    return random_map

