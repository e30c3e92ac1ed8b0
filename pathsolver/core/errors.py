# pathsolver/core/errors.py
#!/usr/bin/env python3
"""
Fatal error kinds. Each one aborts the whole operation; nothing is retried.
"""


class PathSolverError(Exception):
    """Base class for every error raised by pathsolver."""


class ParseError(PathSolverError, ValueError):
    def __init__(self, character: str, row: int = -1, col: int = -1):
        self.character = character
        self.row = row
        self.col = col
        where = f" at row {row}, column {col}" if row >= 0 and col >= 0 else ""
        super().__init__(f"Unrecognized cell type for character: {character!r}{where}")


class MissingEndpointError(PathSolverError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"No {kind.name.lower()} node")


class NoPathError(PathSolverError):
    def __init__(self, message: str = "no path found"):
        super().__init__(message)
