"""Shared fixtures and helpers for the pathfinder test suite."""

from collections import deque
from typing import Optional

import pytest

from pathfinder.core.grid import Grid
from pathfinder.core.types import Coord, DIRECTIONS


def bfs_distance(grid: Grid, start: Coord, end: Coord) -> Optional[int]:
    """Reference edge count of a shortest 4-connected route, None if unreachable."""
    dist = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == end:
            return dist[cur]
        for dr, dc in DIRECTIONS:
            n = (cur[0] + dr, cur[1] + dc)
            if grid.in_bounds(n) and not grid.is_wall(n) and n not in dist:
                dist[n] = dist[cur] + 1
                q.append(n)
    return None


@pytest.fixture
def open_3x3() -> Grid:
    return Grid.parse(["S..", "...", "..E"])


@pytest.fixture
def enclosed_3x3() -> Grid:
    return Grid.parse(["S#.", "#..", "..E"])
