"""Tests for committing a found path into the grid."""

import pytest

from pathfinder.core.committer import commit, commit_steps
from pathfinder.core.grid import Grid
from pathfinder.core.types import CellType, InvalidCoordinate

PATH = ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))


class TestCommit:
    """commit / commit_steps."""

    def test_marks_inner_cells(self) -> None:
        grid = Grid.parse(["Svv", "vvv", "vvE"])
        commit(grid, PATH)
        assert grid.render() == ["Svv", "*vv", "**E"]

    def test_keeps_endpoints(self) -> None:
        grid = Grid.parse(["S..", "...", "..E"])
        commit(grid, PATH)
        assert grid.get((0, 0)) == CellType.START
        assert grid.get((2, 2)) == CellType.END

    def test_idempotent(self) -> None:
        once = commit(Grid.parse(["S..", "...", "..E"]), PATH)
        twice = commit(commit(Grid.parse(["S..", "...", "..E"]), PATH), PATH)
        assert once == twice

    def test_one_snapshot_per_committed_cell(self) -> None:
        grid = Grid.parse(["S..", "...", "..E"])
        seen = []
        commit(grid, PATH, sink=lambda g: seen.append(g.render()))
        assert seen == [
            ["S..", "*..", "..E"],
            ["S..", "*..", "*.E"],
            ["S..", "*..", "**E"],
        ]

    def test_sink_gets_copies(self) -> None:
        grid = Grid.parse(["S..", "...", "..E"])
        seen = []
        commit(grid, PATH, sink=seen.append)
        seen[0].set((1, 1), CellType.WALL)
        assert grid.get((1, 1)) == CellType.EMPTY
        assert all(g is not grid for g in seen)

    def test_steps_are_lazy(self) -> None:
        grid = Grid.parse(["S..", "...", "..E"])
        steps = commit_steps(grid, PATH)
        assert next(steps) == (1, 0)
        assert grid.get((2, 0)) == CellType.EMPTY
        assert list(steps) == [(2, 0), (2, 1)]

    def test_out_of_bounds_path(self) -> None:
        with pytest.raises(InvalidCoordinate):
            commit(Grid.parse(["S.", ".E"]), ((0, 0), (0, 5)))

    def test_bad_cell_leaves_grid_unchanged(self) -> None:
        grid = Grid.parse(["S..", "..E"])
        with pytest.raises(InvalidCoordinate):
            commit(grid, ((0, 0), (0, 1), (0, 9)))
        assert grid.render() == ["S..", "..E"]
