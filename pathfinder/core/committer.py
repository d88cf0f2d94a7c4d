# pathfinder/core/committer.py
#!/usr/bin/env python3
from typing import Callable, Iterator, Optional, Sequence

from pathfinder.core.grid import Grid
from pathfinder.core.types import CellType, Coord, InvalidCoordinate

Sink = Callable[[Grid], None]

_KEEP = (CellType.START, CellType.END)


def commit_steps(grid: Grid, path: Sequence[Coord]) -> Iterator[Coord]:
    """Mark path cells as Path one at a time, yielding each cell right after it changed.

    Start and End cells are left alone and not yielded. Every cell is bounds
    checked before the first one is marked, so a bad path leaves the grid as it was.
    """
    for c in path:
        if not grid.in_bounds(c):
            raise InvalidCoordinate(f"path cell {c} is outside the grid")
    for c in path:
        if grid.get(c) in _KEEP:
            continue
        grid.set(c, CellType.PATH)
        yield c


def commit(grid: Grid, path: Sequence[Coord], sink: Optional[Sink] = None) -> Grid:
    for _ in commit_steps(grid, path):
        if sink is not None:
            sink(grid.clone())
    return grid
