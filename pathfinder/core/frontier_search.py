# pathfinder/core/frontier_search.py
#!/usr/bin/env python3
"""
Frontier search -- one breadth-first round per step() for animation.

Implements the Algorithm API the viewer drives:
- init(grid, start, end) - reset() - step() -> StepResult

Each round takes every path in the frontier, tries to extend it by one
cell (up, down, left, right) and replaces the frontier with the extensions.
A cell is claimed by the first path that reaches it in enumeration order and
is never handed to another path afterwards, so the frontier holds one path
per discovered cell and the first completion is a shortest path.

The engine works on the grid it is given (callers pass a working copy) and
never commits the path; see committer.commit.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from pathfinder.core.grid import Grid
from pathfinder.core.types import (
    CellType, Coord, Path, DIRECTIONS, StepResult,
    InvalidCoordinate, SearchInvariantError,
)

LOGGER = logging.getLogger(__name__)

TERMINAL = ("done", "no_path", "cancelled")


@dataclass
class FrontierSearch:
    name: str = "Frontier BFS"

    # Internal state
    grid: Optional[Grid] = None
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    frontier: List[Path] = field(default_factory=list)
    claimed: Set[Coord] = field(default_factory=set)
    path: Path = ()
    iteration: int = 0
    budget: int = 0
    status: str = "idle"

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Coord, end: Coord) -> None:
        """Validate endpoints and seed the frontier with [start]."""
        for label, c in (("start", start), ("end", end)):
            if not grid.in_bounds(c):
                raise InvalidCoordinate(f"{label} {c} is outside the {grid.rows}x{grid.cols} grid")
            if grid.is_wall(c):
                raise InvalidCoordinate(f"{label} {c} is a wall")
        self.grid = grid
        self.start = tuple(start)
        self.end = tuple(end)
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        self.frontier = [(self.start,)]
        self.claimed = {self.start}
        self.path = ()
        self.iteration = 0
        # no simple path is longer than the cell count
        self.budget = self.grid.rows * self.grid.cols
        self.status = "running"
        if self.start == self.end:
            self.path = (self.start,)
            self.status = "done"

    def cancel(self) -> StepResult:
        if self.status not in TERMINAL:
            self.status = "cancelled"
            self.frontier = []
            LOGGER.info("Search cancelled after %d iterations", self.iteration)
        return self._result()

    @property
    def finished(self) -> bool:
        return self.status in TERMINAL

    # -------------------- helpers --------------------

    def _neighbors4(self, c: Coord) -> List[Coord]:
        r, col = c
        return [(r + dr, col + dc) for dr, dc in DIRECTIONS]

    def _extendable(self, n: Coord) -> bool:
        return self.grid.in_bounds(n) and not self.grid.is_wall(n) and n not in self.claimed

    def _claim(self, n: Coord) -> None:
        self.claimed.add(n)
        if self.grid.get(n) not in (CellType.START, CellType.END):
            self.grid.set(n, CellType.VISITED)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE round:
          - Stop with no_path if the frontier is empty or the budget is spent.
          - Extend every frontier path by each free neighbor.
          - The first neighbor equal to `end` (path order x direction order)
            completes the search; the round is still finished so the grid
            shows every cell the round discovered.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.finished:
            return self._result()

        if not self.frontier or self.iteration >= self.budget:
            self.status = "no_path"
            self.frontier = []
            LOGGER.info("No path found after %d iterations", self.iteration)
            return self._result()

        candidates = self.frontier
        self.frontier = []
        self.iteration += 1
        completed: Optional[Path] = None
        visited_now: List[Coord] = []

        for candidate in candidates:
            if not candidate:
                raise SearchInvariantError("frontier holds an empty path")
            for n in self._neighbors4(candidate[-1]):
                if n == self.end:
                    if completed is None:
                        completed = candidate + (n,)
                    continue
                if self._extendable(n):
                    self._claim(n)
                    visited_now.append(n)
                    self.frontier.append(candidate + (n,))

        LOGGER.debug("Iteration %d: active paths count: %d", self.iteration, len(self.frontier))

        if completed is not None:
            self.path = completed
            self.status = "done"
            self.frontier = []
            LOGGER.info("Path found with %d cells after %d iterations", len(completed), self.iteration)

        return self._result(visited=visited_now)

    # -------------------- results & metrics --------------------

    def _result(self, visited: Optional[List[Coord]] = None) -> StepResult:
        return StepResult(
            status=self.status,
            grid=self.grid.clone() if self.grid is not None else None,
            visited=visited or [],
            frontier=[p[-1] for p in self.frontier],
            path=self.path or None,
            metrics=self._metrics(),
        )

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "iteration": self.iteration,
            "frontier_size": len(self.frontier),
            "visited_count": len(self.claimed) - 1 if self.claimed else 0,
            "path_len": len(self.path),
        }
