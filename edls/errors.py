"""Fatal listing errors reported by the CLI as one-line messages."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for errors that abort a listing without partial output."""


class DirectoryReadError(ListingError):
    """Directory cannot be enumerated (missing, not a directory, no permission)."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read directory {path}: {reason}")


class MetadataRetrievalError(ListingError):
    """Metadata lookup for one entry failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot stat {path}: {reason}")


class InvalidPatternError(ListingError):
    """Configured filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


__all__ = [
    "ListingError",
    "DirectoryReadError",
    "MetadataRetrievalError",
    "InvalidPatternError",
]
