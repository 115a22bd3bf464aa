"""Build-phase exceptions: opening, parsing and wiring the movie graph.

All of these are fatal. A dataset that fails to load leaves no usable graph.
"""

from pathlib import Path

from .base import BaconScoreError


class DatasetError(BaconScoreError):
    """Base class for errors raised while building the graph."""

    pass


class FileOpenError(DatasetError):
    """Raised when the dataset file cannot be opened or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Could not open the dataset: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class MalformedInputError(DatasetError):
    """Raised when an actor line appears before any movie heading."""

    def __init__(self, line_number: int, line: str):
        super().__init__(
            f"Actor line before any movie heading at line {line_number}",
            details={"line_number": str(line_number), "line": line},
        )
        self.line_number = line_number
        self.line = line


class OutOfMemoryError(DatasetError):
    """Raised when allocation fails while the graph is being built."""

    def __init__(self, stage: str):
        super().__init__(f"Not enough memory while {stage}", details={"stage": stage})
        self.stage = stage


class GraphIntegrityError(DatasetError):
    """Raised when actor/movie membership links disagree or names collide."""

    def __init__(self, reason: str):
        super().__init__(f"Graph integrity violated: {reason}", details={"reason": reason})
        self.reason = reason
