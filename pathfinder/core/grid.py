# pathfinder/core/grid.py
#!/usr/bin/env python3
"""
Grid model: a fixed-size, row-major matrix of CellType plus the few
coordinate helpers the engine and its callers share.

    cells[row][col]   (row, col) coordinates, 0-indexed

Grids are rectangular; the constructor rejects ragged input, the other
helpers assume it.
"""

from dataclasses import dataclass
from typing import Iterable, List, Dict, Sequence

from pathfinder.core.types import CellType, Coord, LEGEND, SYMBOLS


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[CellType]]

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows or any(len(r) != self.cols for r in self.cells):
            raise ValueError(f"cells are not a {self.rows}x{self.cols} rectangle")

    # -------------------- construction --------------------

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid size must be positive, got {rows}x{cols}")
        return cls(rows, cols, [[CellType.EMPTY] * cols for _ in range(rows)])

    @classmethod
    def parse(cls, lines: Sequence[str]) -> "Grid":
        """Build a grid from legend strings, e.g. ["S.#", "..E"]."""
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("no rows to parse")
        try:
            cells = [[LEGEND[ch] for ch in row] for row in rows]
        except KeyError as ex:
            raise ValueError(f"unknown cell symbol {ex.args[0]!r}") from None
        return cls(len(cells), len(cells[0]), cells)

    def render(self) -> List[str]:
        return ["".join(SYMBOLS[c] for c in row) for row in self.cells]

    # -------------------- access --------------------

    def in_bounds(self, c: Coord) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def get(self, c: Coord) -> CellType:
        r, col = c
        return self.cells[r][col]

    def set(self, c: Coord, cell_type: CellType) -> None:
        r, col = c
        self.cells[r][col] = cell_type

    def is_wall(self, c: Coord) -> bool:
        return self.get(c) == CellType.WALL

    def counts(self) -> Dict[CellType, int]:
        out = {t: 0 for t in CellType}
        for row in self.cells:
            for c in row:
                out[c] += 1
        return out

    def clone(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(row) for row in self.cells])

    def clear_search(self) -> "Grid":
        """Copy with every Visited/Path cell turned back into Empty."""
        calculated = (CellType.VISITED, CellType.PATH)
        return Grid(self.rows, self.cols,
                    [[CellType.EMPTY if c in calculated else c for c in row] for row in self.cells])


# -------------------- module-level helpers --------------------

def in_bounds(row: int, col: int, grid: Grid) -> bool:
    return 0 <= row < grid.rows and 0 <= col < grid.cols


def find_cells(types: Iterable[CellType], grid: Grid) -> List[Coord]:
    """Row-major scan for every cell whose type is in `types`."""
    wanted = set(types)
    return [(r, c)
            for r, row in enumerate(grid.cells)
            for c, cell in enumerate(row)
            if cell in wanted]


def clone(grid: Grid) -> Grid:
    return grid.clone()
