# pathfinder/core/search.py
#!/usr/bin/env python3
"""
Search runs: the public entry points of the core.

    locate(grid, CellType.START)          -> [(row, col), ...]
    locate_endpoints(grid)                -> (start, end)   or GridConfigError
    search(grid, start, end, sink)        -> SearchResult(grid, path, status)
    iter_search(grid, start, end)         -> SearchRun, an iterator of Snapshots

A SearchRun owns a working copy of the caller's grid. Consumers pull
snapshots at their own pace (the viewer pulls one per tick); `search` is the
eager form that pushes every snapshot into a sink callback.

Emission order for a run:
    one "round" snapshot per round;
    on success, one "commit" snapshot per cell marked Path, then the final
    "round" snapshot of the winning round (status "done").
The last snapshot is always terminal: "done", "no_path" or "cancelled".

Only one run may be active per grid object at a time.
"""

import logging
import threading
import time
from collections import deque
from typing import Callable, Deque, Iterable, List, Optional, Set, Tuple, Union

from pathfinder.core.committer import commit_steps
from pathfinder.core.frontier_search import FrontierSearch
from pathfinder.core.grid import Grid, find_cells, in_bounds  # noqa: F401  (re-exported)
from pathfinder.core.types import (
    CellType, Coord, Snapshot, SearchResult, StepResult,
    GridConfigError, SearchAlreadyRunning,
)

LOGGER = logging.getLogger(__name__)

Sink = Callable[[Grid], None]

_ACTIVE: Set[int] = set()
_ACTIVE_LOCK = threading.Lock()


def _acquire(grid: Grid) -> None:
    with _ACTIVE_LOCK:
        if id(grid) in _ACTIVE:
            raise SearchAlreadyRunning("a search is already running on this grid")
        _ACTIVE.add(id(grid))


def _release(grid: Grid) -> None:
    with _ACTIVE_LOCK:
        _ACTIVE.discard(id(grid))


def is_running(grid: Grid) -> bool:
    with _ACTIVE_LOCK:
        return id(grid) in _ACTIVE


# -------------------- caller helpers --------------------

def locate(grid: Grid, cell_type: Union[CellType, Iterable[CellType]]) -> List[Coord]:
    types = [cell_type] if isinstance(cell_type, CellType) else list(cell_type)
    return find_cells(types, grid)


def locate_endpoints(grid: Grid) -> Tuple[Coord, Coord]:
    starts = locate(grid, CellType.START)
    ends = locate(grid, CellType.END)
    if not starts or not ends:
        raise GridConfigError("Start or End cell not found in the grid.")
    if len(starts) != 1 or len(ends) != 1:
        raise GridConfigError("There should be exactly one Start and one End cell in the grid.")
    return starts[0], ends[0]


# -------------------- run state machine --------------------

class SearchRun:
    """One search over a working copy of `grid`.

    State moves running -> done | no_path | cancelled and never back; a run
    cannot be restarted. Construction validates the endpoints and claims the
    grid; reaching a terminal state or close() releases it.
    """

    def __init__(self, grid: Grid, start: Coord, end: Coord, cancel=None):
        self.source = grid
        self.algo = FrontierSearch()
        self.algo.init(grid.clone(), start, end)
        _acquire(grid)
        self._held = True
        self._cancel = cancel if cancel is not None else threading.Event()
        self._pending: Deque[Snapshot] = deque()
        self.result: Optional[SearchResult] = None

    @property
    def status(self) -> str:
        return self.algo.status

    @property
    def grid(self) -> Grid:
        """The working grid. Read it, don't write it."""
        return self.algo.grid

    def cancel(self) -> None:
        self._cancel.set()

    # ---- iterator protocol ----

    def __iter__(self) -> "SearchRun":
        return self

    def __next__(self) -> Snapshot:
        if self._pending:
            return self._pending.popleft()
        if self.result is not None:
            raise StopIteration

        if self._cancel.is_set():
            step = self.algo.cancel()
        else:
            step = self.algo.step()

        if step.status == "done":
            for c in commit_steps(self.algo.grid, self.algo.path):
                self._pending.append(Snapshot(
                    kind="commit", status="committing", grid=self.algo.grid.clone(),
                    cell=c, path=self.algo.path, metrics=step.metrics,
                ))
            self._pending.append(self._round(step, self.algo.grid.clone()))
        else:
            self._pending.append(self._round(step, step.grid))

        if self.algo.finished:
            self._finish()
        return self._pending.popleft()

    def _round(self, step: StepResult, grid: Grid) -> Snapshot:
        return Snapshot(kind="round", status=step.status, grid=grid,
                        path=step.path or (), metrics=step.metrics)

    def _finish(self) -> None:
        path = self.algo.path if self.algo.status == "done" else ()
        self.result = SearchResult(grid=self.algo.grid, path=path, status=self.algo.status)
        self._unclaim()

    def _unclaim(self) -> None:
        if self._held:
            self._held = False
            _release(self.source)

    # ---- lifetime ----

    def close(self) -> None:
        """Abandon the run. Safe to call on a finished run."""
        if self.result is None:
            self.algo.cancel()
            self._finish()
        self._pending.clear()
        self._unclaim()

    def __enter__(self) -> "SearchRun":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def iter_search(grid: Grid, start: Coord, end: Coord, cancel=None) -> SearchRun:
    return SearchRun(grid, start, end, cancel=cancel)


def search(grid: Grid, start: Coord, end: Coord, sink: Optional[Sink] = None,
           cancel=None, delay: float = 0.0) -> SearchResult:
    """Run a search to completion, pushing every snapshot grid into `sink`.

    `delay` sleeps between rounds to pace a live display; the sink call
    always returns before the next round starts.
    """
    with SearchRun(grid, start, end, cancel=cancel) as run:
        for snap in run:
            if sink is not None:
                sink(snap.grid)
            if delay > 0 and snap.kind == "round" and not snap.terminal:
                time.sleep(delay)
    return run.result
