# pathfinder/app/maps.py
"""
JSON map presets: painted layouts the viewer can open.

    {
      "name": "Open field",
      "rows": 10, "cols": 10,
      "cells": ["S.........", "..........", ..., ".........E"]
    }

`cells` uses the grid legend (# wall, S start, E end, . empty). Visited and
Path symbols are accepted but cleared on load; presets never carry results,
and save_map drops them before writing.
"""

import json
from pathlib import Path
from typing import Dict, Union

from pathfinder.core.grid import Grid

MAP_DIR = Path(__file__).resolve().parents[2] / "maps"
CUSTOM_MAP = MAP_DIR / "custom.json"
MAP_FILES: Dict[str, Path] = {
    "01_open_field": MAP_DIR / "01_open_field.json",
    "02_corridors":  MAP_DIR / "02_corridors.json",
    "03_walled_off": MAP_DIR / "03_walled_off.json",
}
MAP_LABELS: Dict[str, str] = {
    "01_open_field": "Map 1: Open field",
    "02_corridors":  "Map 2: Corridors",
    "03_walled_off": "Map 3: Walled off",
}


def load_map(path: Union[str, Path]) -> Grid:
    with open(path, "r") as f:
        data = json.load(f)
    rows = int(data["rows"])
    cols = int(data["cols"])
    cells = data["cells"]
    if len(cells) != rows or any(len(r) != cols for r in cells):
        raise ValueError(f"{path}: cells do not match {rows}x{cols}")
    return Grid.parse(cells).clear_search()


def load_preset(key: str) -> Grid:
    if key not in MAP_FILES:
        raise KeyError(f"unknown map preset {key!r}")
    return load_map(MAP_FILES[key])


def save_map(grid: Grid, path: Union[str, Path], name: str = "Custom") -> Path:
    """Write the painted layout (walls, start, end) as a preset; results are dropped."""
    path = Path(path)
    data = {
        "name": name,
        "rows": grid.rows,
        "cols": grid.cols,
        "cells": grid.clear_search().render(),
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return path
