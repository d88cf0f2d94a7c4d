# pathfinder/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple, Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from pathfinder.core.grid import Grid

Coord = Tuple[int, int]      # (row, col)
Path = Tuple[Coord, ...]     # start first, end last once complete

# up, down, left, right -- the order doubles as the tie-break
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class CellType(IntEnum):
    WALL = 0
    START = 1
    END = 2
    VISITED = 3
    PATH = 4
    EMPTY = 5


# text legend used by Grid.parse / Grid.render and the JSON map presets
LEGEND: Dict[str, CellType] = {
    "#": CellType.WALL,
    "S": CellType.START,
    "E": CellType.END,
    "v": CellType.VISITED,
    "*": CellType.PATH,
    ".": CellType.EMPTY,
}
SYMBOLS: Dict[CellType, str] = {t: ch for ch, t in LEGEND.items()}


# -------------------- errors --------------------

class PathfinderError(Exception):
    """Base class for everything the core raises on purpose."""


class GridConfigError(PathfinderError, ValueError):
    """Grid does not hold exactly one Start and one End cell."""


class InvalidCoordinate(PathfinderError, ValueError):
    """Coordinate outside the grid, or on a cell that cannot be used."""


class SearchAlreadyRunning(PathfinderError, RuntimeError):
    """A run is already in flight on this grid."""


class SearchInvariantError(PathfinderError, RuntimeError):
    """Engine bookkeeping is broken. Always a bug, never recovered from."""


# -------------------- results --------------------

@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path" | "cancelled"
    grid: Optional["Grid"] = None  # snapshot, safe to keep
    visited: List[Coord] = field(default_factory=list)   # claimed this round
    frontier: List[Coord] = field(default_factory=list)  # heads of the new frontier
    path: Optional[Path] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Snapshot:
    """One emission of a search run, as handed to a sink or an iterator consumer."""
    kind: str                     # "round" | "commit"
    status: str
    grid: "Grid"
    cell: Optional[Coord] = None  # committed cell for kind == "commit"
    path: Path = ()
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def terminal(self) -> bool:
        return self.status in ("done", "no_path", "cancelled")


@dataclass
class SearchResult:
    grid: "Grid"
    path: Path = ()
    status: str = "no_path"

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def steps(self) -> int:
        """Cells strictly between start and end."""
        return max(0, len(self.path) - 2)
