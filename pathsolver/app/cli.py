# pathsolver/app/cli.py
#!/usr/bin/env python3
"""
pathsolver command line: read a map, print it with the route marked.

- Input:  MAP_FILE, or stdin when omitted or '-'
- Output: the same map with every path cell replaced by the marker

Config (env var, overridden by the flag):
- PATHSOLVER_LOG_LEVEL / --log-level=LEVEL   (default WARNING)
- PATHSOLVER_MARKER    / --marker=C          (default '*')

Exit status: 0 ok, 1 map has no route or is malformed, 2 map unreadable.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from pathsolver.core.errors import PathSolverError
from pathsolver.core.render import PATH_MARKER
from pathsolver.solver import solve

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def resolve_log_level(flag: Optional[str] = None) -> int:
    name = (flag or os.getenv("PATHSOLVER_LOG_LEVEL", "WARNING")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def resolve_marker(flag: Optional[str] = None) -> str:
    return flag or os.getenv("PATHSOLVER_MARKER", PATH_MARKER)


def setup_logging(level: int) -> logging.Logger:
    logger = logging.getLogger("pathsolver")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pathsolver",
        description="Mark the cheapest S->X route through a grid map of '.', 'S', 'X', 'B'.",
    )
    parser.add_argument("map", nargs="?", default="-",
                        help="map file (default: '-' reads stdin)")
    parser.add_argument("--marker", default=None,
                        help="path marker character (env PATHSOLVER_MARKER, default '*')")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING... (env PATHSOLVER_LOG_LEVEL)")
    return parser.parse_args(argv)


def read_map(source: str) -> str:
    if source == "-":
        text = sys.stdin.read()
    else:
        with open(source, "r", encoding="utf-8") as f:
            text = f.read()
    # one trailing newline ends the last row, it is not an empty row
    return text[:-1] if text.endswith("\n") else text


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(resolve_log_level(args.log_level))
    marker = resolve_marker(args.marker)
    if len(marker) != 1:
        print(f"error: marker must be a single character, got {marker!r}", file=sys.stderr)
        return 2

    try:
        text = read_map(args.map)
    except OSError as ex:
        print(f"error: cannot read map {args.map}: {ex}", file=sys.stderr)
        return 2

    try:
        solution = solve(text, marker)
    except PathSolverError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    logger.info("route cost %.1f over %d cells", solution.cost, len(solution.path))
    print(solution.rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
