"""Domain model for listed directory entries.

This package contains non-UI entry primitives:
- entry/kind datatypes
- kind classification with a pluggable executable strategy
- directory enumeration and metadata lookup
"""

from __future__ import annotations

from .types import (
    EntryMetadata,
    FileEntry,
    FileKind,
    PLACEHOLDER_GROUP,
    PLACEHOLDER_OWNER,
    RawDirectoryEntry,
    is_hidden_name,
)
from .classify import (
    DEFAULT_EXECUTABLE_DETECTOR,
    SUFFIXES_BY_KIND,
    ExecutableDetector,
    ExtensionExecutableDetector,
    ModeExecutableDetector,
    classify,
    classify_entry,
    executable_detector_for_platform,
)
from .fs import build_file_entry, read_entry_metadata, scan_directory

__all__ = [
    "EntryMetadata",
    "FileEntry",
    "FileKind",
    "PLACEHOLDER_GROUP",
    "PLACEHOLDER_OWNER",
    "RawDirectoryEntry",
    "is_hidden_name",
    "DEFAULT_EXECUTABLE_DETECTOR",
    "SUFFIXES_BY_KIND",
    "ExecutableDetector",
    "ExtensionExecutableDetector",
    "ModeExecutableDetector",
    "classify",
    "classify_entry",
    "executable_detector_for_platform",
    "build_file_entry",
    "read_entry_metadata",
    "scan_directory",
]
