# pathfinder/app/editing.py
"""Grid painting used by the viewer. Pure functions on Grid, no pygame."""

from enum import Enum
from typing import Optional, Tuple

from pathfinder.core.grid import Grid, find_cells, in_bounds
from pathfinder.core.types import CellType, Coord


class DrawingMode(str, Enum):
    WALL = "wall"
    START = "start"
    END = "end"


_ENDPOINT = {DrawingMode.START: CellType.START, DrawingMode.END: CellType.END}


def cell_at(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int, grid: Grid) -> Optional[Coord]:
    """Pixel position -> (row, col), or None when the pointer is off the grid."""
    x, y = pos
    ox, oy = origin
    if x < ox or y < oy:
        return None
    row = (y - oy) // cell_size
    col = (x - ox) // cell_size
    return (row, col) if in_bounds(row, col, grid) else None


def paint(grid: Grid, c: Coord, mode: DrawingMode) -> Grid:
    """Apply one brush stroke in place and return the grid.

    Walls never overwrite Start/End. Placing a Start or End first clears the
    previous one, so the grid holds at most one of each.
    """
    if mode == DrawingMode.WALL:
        if grid.get(c) not in (CellType.START, CellType.END):
            grid.set(c, CellType.WALL)
        return grid

    cell_type = _ENDPOINT[mode]
    for old in find_cells([cell_type], grid):
        grid.set(old, CellType.EMPTY)
    grid.set(c, cell_type)
    return grid


def erase(grid: Grid, c: Coord) -> Grid:
    grid.set(c, CellType.EMPTY)
    return grid


def clear_grid(grid: Grid) -> Grid:
    return Grid.empty(grid.rows, grid.cols)


def reset_calculated(grid: Grid) -> Grid:
    return grid.clear_search()
