"""Domain datatypes for directory entries and their file kinds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

PLACEHOLDER_OWNER = "user"
PLACEHOLDER_GROUP = "group"


class FileKind(enum.Enum):
    """Mutually exclusive category assigned to every listed entry."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    EXECUTABLE = "executable"
    COMPRESSED = "compressed"
    IMAGE = "image"
    SYMBOLIC_LINK = "symlink"


@dataclass(frozen=True)
class RawDirectoryEntry:
    """One enumerated directory child before metadata lookup."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class EntryMetadata:
    """Metadata observed from ``lstat`` for one entry."""

    size_bytes: int
    modified_at: datetime
    mode_string: str


@dataclass(frozen=True)
class FileEntry:
    """Listed entry with metadata and its resolved kind.

    Entries are built with ``kind=FileKind.REGULAR`` and then replaced by a
    classified copy, so ``kind`` is only meaningful after classification.
    """

    name: str
    path: Path
    is_dir: bool
    size_bytes: int
    modified_at: datetime
    mode_string: str
    kind: FileKind = FileKind.REGULAR
    owner_name: str = PLACEHOLDER_OWNER
    group_name: str = PLACEHOLDER_GROUP

    @property
    def is_hidden(self) -> bool:
        return is_hidden_name(self.name)


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` denotes a hidden entry (leading dot)."""
    return name.startswith(".")


__all__ = [
    "PLACEHOLDER_OWNER",
    "PLACEHOLDER_GROUP",
    "FileKind",
    "RawDirectoryEntry",
    "EntryMetadata",
    "FileEntry",
    "is_hidden_name",
]
