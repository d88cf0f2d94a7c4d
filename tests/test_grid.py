"""Tests for the grid model: construction, legend, bounds and scans."""

import pytest

from pathfinder.core.grid import Grid, clone, find_cells, in_bounds
from pathfinder.core.types import CellType


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Tests for building grids."""

    def test_empty_grid(self) -> None:
        grid = Grid.empty(2, 3)
        assert (grid.rows, grid.cols) == (2, 3)
        assert all(c == CellType.EMPTY for row in grid.cells for c in row)

    def test_empty_rows_are_independent(self) -> None:
        grid = Grid.empty(2, 2)
        grid.set((0, 0), CellType.WALL)
        assert grid.get((1, 0)) == CellType.EMPTY

    def test_empty_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            Grid.empty(0, 4)

    def test_ragged_cells_rejected(self) -> None:
        with pytest.raises(ValueError):
            Grid(2, 2, [[CellType.EMPTY, CellType.EMPTY], [CellType.EMPTY]])

    def test_parse_and_render(self) -> None:
        lines = ["S.#", "v*E"]
        grid = Grid.parse(lines)
        assert grid.get((0, 0)) == CellType.START
        assert grid.get((0, 2)) == CellType.WALL
        assert grid.get((1, 0)) == CellType.VISITED
        assert grid.get((1, 1)) == CellType.PATH
        assert grid.get((1, 2)) == CellType.END
        assert grid.render() == lines

    def test_parse_unknown_symbol(self) -> None:
        with pytest.raises(ValueError, match="unknown cell symbol"):
            Grid.parse(["S?E"])

    def test_parse_ragged(self) -> None:
        with pytest.raises(ValueError):
            Grid.parse(["S..", ".E"])


# =============================================================================
# Bounds and scans
# =============================================================================


class TestBounds:
    """in_bounds depends only on the grid size."""

    @pytest.mark.parametrize("row,col,expected", [
        (0, 0, True), (2, 3, True), (-1, 0, False), (0, -1, False),
        (3, 0, False), (0, 4, False), (100, 100, False),
    ])
    def test_in_bounds(self, row: int, col: int, expected: bool) -> None:
        grid = Grid.empty(3, 4)
        assert in_bounds(row, col, grid) is expected
        assert grid.in_bounds((row, col)) is expected

    def test_in_bounds_ignores_content(self) -> None:
        walls = Grid.parse(["###", "###"])
        assert all(in_bounds(r, c, walls) for r in range(2) for c in range(3))


class TestScans:
    """find_cells, clone, clear_search and counts."""

    def test_find_cells_row_major(self) -> None:
        grid = Grid.parse(["#.#", "..#", "#.."])
        assert find_cells([CellType.WALL], grid) == [(0, 0), (0, 2), (1, 2), (2, 0)]

    def test_find_cells_several_types(self) -> None:
        grid = Grid.parse(["E.S", "..."])
        assert find_cells({CellType.START, CellType.END}, grid) == [(0, 0), (0, 2)]

    def test_find_cells_none(self) -> None:
        assert find_cells([CellType.START], Grid.empty(2, 2)) == []

    def test_clone_is_deep(self) -> None:
        grid = Grid.parse(["S.", ".E"])
        copy = clone(grid)
        copy.set((0, 1), CellType.WALL)
        assert grid.get((0, 1)) == CellType.EMPTY
        assert copy == Grid.parse(["S#", ".E"])

    def test_clear_search(self) -> None:
        grid = Grid.parse(["Sv*", "#vE"])
        cleared = grid.clear_search()
        assert cleared.render() == ["S..", "#.E"]
        assert grid.render() == ["Sv*", "#vE"]

    def test_counts(self) -> None:
        counts = Grid.parse(["S#", "#E"]).counts()
        assert counts[CellType.WALL] == 2
        assert counts[CellType.START] == 1
        assert counts[CellType.PATH] == 0
