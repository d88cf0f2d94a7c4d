# pathfinder/app/settings.py
"""
Viewer configuration.

Resolution order (later wins):
    defaults  ->  environment (PATHFINDER_*)  ->  command line (--key=value)

    PATHFINDER_ROWS / --rows=     grid rows            (2..60)
    PATHFINDER_COLS / --cols=     grid columns         (2..60)
    PATHFINDER_SPEED / --speed=   rounds per second    (1..60)
    PATHFINDER_MAP / --map=       preset key to open (see maps.MAP_FILES)
    PATHFINDER_LOG_LEVEL / --log= DEBUG, INFO, WARNING, ...
"""

import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional, Sequence

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "PATHFINDER_"
SIZE_RANGE = (2, 60)
SPEED_RANGE = (1, 60)
HANDLER_NAME = "pathfinder"


@dataclass(frozen=True)
class ViewerSettings:
    rows: int = 10
    cols: int = 10
    steps_per_sec: int = 10
    map_key: Optional[str] = None
    log_level: str = "INFO"
    cell_size: int = 50
    panel_w: int = 360
    grid_margin: int = 16


def _clamp(v: int, lo_hi) -> int:
    lo, hi = lo_hi
    return max(lo, min(hi, v))


def _parse_argv(argv: Sequence[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            out[key.lower()] = value
    return out


def _as_int(raw: str, key: str, default: int) -> int:
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not an integer", key, raw)
        return default


def resolve_settings(env: Optional[Mapping[str, str]] = None,
                     argv: Optional[Sequence[str]] = None) -> ViewerSettings:
    env = os.environ if env is None else env
    argv = sys.argv[1:] if argv is None else argv

    raw: Dict[str, str] = {}
    for key in ("rows", "cols", "speed", "map", "log_level"):
        value = env.get(ENV_PREFIX + key.upper())
        if value:
            raw[key] = value
    cli = _parse_argv(argv)
    if "log" in cli:
        cli["log_level"] = cli.pop("log")
    raw.update(cli)

    s = ViewerSettings()
    if "rows" in raw:
        s = replace(s, rows=_clamp(_as_int(raw["rows"], "rows", s.rows), SIZE_RANGE))
    if "cols" in raw:
        s = replace(s, cols=_clamp(_as_int(raw["cols"], "cols", s.cols), SIZE_RANGE))
    if "speed" in raw:
        s = replace(s, steps_per_sec=_clamp(_as_int(raw["speed"], "speed", s.steps_per_sec), SPEED_RANGE))
    if "map" in raw:
        s = replace(s, map_key=raw["map"])
    if "log_level" in raw:
        level = raw["log_level"].upper()
        if isinstance(logging.getLevelName(level), int):
            s = replace(s, log_level=level)
        else:
            LOGGER.warning("Ignoring unknown log level %r", raw["log_level"])
    return s


def configure_logging(level: str = "INFO") -> None:
    """Attach one message-only stream handler to the package logger."""
    logger = logging.getLogger("pathfinder")
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level)
