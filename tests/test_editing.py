"""Tests for the viewer's grid painting helpers."""

import pytest

from pathfinder.app.editing import DrawingMode, cell_at, clear_grid, erase, paint, reset_calculated
from pathfinder.core.grid import Grid
from pathfinder.core.search import locate_endpoints


class TestHitTesting:
    """Pixel positions to cells."""

    @pytest.mark.parametrize("pos,expected", [
        ((16, 16), (0, 0)),
        ((66, 16), (0, 1)),
        ((65, 16), (0, 0)),
        ((16, 115), (1, 0)),
        ((215, 165), (2, 3)),
        ((15, 16), None),
        ((216, 16), None),
        ((16, 166), None),
    ])
    def test_cell_at(self, pos, expected) -> None:
        grid = Grid.empty(3, 4)
        assert cell_at(pos, (16, 16), 50, grid) == expected


class TestPainting:
    """Walls, unique endpoints and resets."""

    def test_paint_wall(self) -> None:
        grid = paint(Grid.empty(2, 2), (1, 1), DrawingMode.WALL)
        assert grid.render() == ["..", ".#"]

    def test_wall_does_not_overwrite_endpoints(self) -> None:
        grid = Grid.parse(["SE"])
        paint(grid, (0, 0), DrawingMode.WALL)
        paint(grid, (0, 1), DrawingMode.WALL)
        assert grid.render() == ["SE"]

    def test_start_moves(self) -> None:
        grid = Grid.parse(["S..", "..E"])
        paint(grid, (1, 0), DrawingMode.START)
        assert grid.render() == ["...", "S.E"]

    def test_end_replaces_wall(self) -> None:
        grid = Grid.parse(["S#.", "..E"])
        paint(grid, (0, 1), DrawingMode.END)
        assert grid.render() == ["SE.", "..."]

    def test_painted_grid_is_searchable(self) -> None:
        grid = Grid.empty(3, 3)
        paint(grid, (0, 0), DrawingMode.START)
        paint(grid, (2, 2), DrawingMode.END)
        paint(grid, (2, 2), DrawingMode.END)
        assert locate_endpoints(grid) == ((0, 0), (2, 2))

    def test_erase(self) -> None:
        grid = erase(Grid.parse(["S#"]), (0, 1))
        assert grid.render() == ["S."]

    def test_clear_grid(self) -> None:
        grid = clear_grid(Grid.parse(["S#v", "*.E"]))
        assert grid.render() == ["...", "..."]

    def test_reset_calculated(self) -> None:
        grid = reset_calculated(Grid.parse(["S#v", "*.E"]))
        assert grid.render() == ["S#.", "..E"]
