"""Error types raised by the specification mapper."""
from __future__ import annotations


class SpecMapError(Exception):
    """Base class for errors that abort a run."""


class SpecMapIOError(SpecMapError):
    """An input could not be read or the report could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class SpecMapInternalError(SpecMapError):
    """A pipeline invariant was violated."""
