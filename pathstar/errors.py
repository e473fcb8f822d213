"""Exception types raised by pathstar.

A missing path is never an error: `find_path` returns None for it. Exceptions
here cover malformed puzzle input only.
"""

from typing import Optional


class PathstarError(Exception):
    """Base class for pathstar errors."""


class PuzzleParseError(PathstarError, ValueError):
    """Raised when puzzle input text cannot be turned into a graph."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        location = ""
        if line is not None:
            location = f" (line {line}"
            if column is not None:
                location += f", column {column}"
            location += ")"
        super().__init__(f"{message}{location}")
        self.line = line
        self.column = column
