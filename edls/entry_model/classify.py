"""Kind classification for directory entries.

Predicates are not mutually exclusive (a directory can be named ``x.tar``), so
they run in a fixed precedence order and the first match wins:

1. symbolic link (mode string starts with ``l``)
2. directory
3. executable (platform strategy)
4. compressed suffix
5. image suffix
6. regular file
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from .types import FileEntry, FileKind

LINK_MODE_PREFIX = "l"
EXECUTABLE_MODE_MARKERS: tuple[str, ...] = ("x", "s", "t")
WINDOWS_EXECUTABLE_SUFFIX = ".exe"

SUFFIXES_BY_KIND: Mapping[FileKind, frozenset[str]] = MappingProxyType(
    {
        FileKind.COMPRESSED: frozenset({".deb", ".zip", ".gz", ".tar", ".rar"}),
        FileKind.IMAGE: frozenset({".png", ".jpg", ".gif"}),
    }
)
SUFFIX_KIND_ORDER: tuple[FileKind, ...] = (FileKind.COMPRESSED, FileKind.IMAGE)


class ExecutableDetector(Protocol):
    """Strategy deciding whether a non-directory entry is executable."""

    def is_executable(self, entry: FileEntry) -> bool: ...


@dataclass(frozen=True)
class ModeExecutableDetector:
    """Executable when a permission position carries an execute marker.

    ``stat.filemode`` writes ``s`` (setuid/setgid) and ``t`` (sticky) in place
    of ``x`` when the execute bit is also set; uppercase ``S``/``T`` mean the
    execute bit is clear. The leading type character is skipped so a socket's
    ``s`` does not count.
    """

    markers: tuple[str, ...] = EXECUTABLE_MODE_MARKERS

    def is_executable(self, entry: FileEntry) -> bool:
        permissions = entry.mode_string[1:]
        return any(marker in permissions for marker in self.markers)


@dataclass(frozen=True)
class ExtensionExecutableDetector:
    """Executable when the name ends with the platform executable suffix."""

    suffix: str = WINDOWS_EXECUTABLE_SUFFIX

    def is_executable(self, entry: FileEntry) -> bool:
        return entry.name.endswith(self.suffix)


def executable_detector_for_platform(platform: str | None = None) -> ExecutableDetector:
    """Pick the executable strategy for ``platform`` (defaults to ``sys.platform``)."""
    if platform is None:
        platform = sys.platform
    if platform.startswith("win"):
        return ExtensionExecutableDetector()
    return ModeExecutableDetector()


DEFAULT_EXECUTABLE_DETECTOR: ExecutableDetector = executable_detector_for_platform()


def is_link(entry: FileEntry) -> bool:
    return entry.mode_string[:1].lower() == LINK_MODE_PREFIX


def suffix_kind(name: str) -> FileKind | None:
    """Return the first suffix-based kind whose exact suffix ends ``name``."""
    for kind in SUFFIX_KIND_ORDER:
        if any(name.endswith(suffix) for suffix in SUFFIXES_BY_KIND[kind]):
            return kind
    return None


def classify(entry: FileEntry, detector: ExecutableDetector | None = None) -> FileKind:
    """Return the kind for ``entry``; every entry receives exactly one."""
    if detector is None:
        detector = DEFAULT_EXECUTABLE_DETECTOR
    if is_link(entry):
        return FileKind.SYMBOLIC_LINK
    if entry.is_dir:
        return FileKind.DIRECTORY
    if detector.is_executable(entry):
        return FileKind.EXECUTABLE
    return suffix_kind(entry.name) or FileKind.REGULAR


def classify_entry(entry: FileEntry, detector: ExecutableDetector | None = None) -> FileEntry:
    """Return a copy of ``entry`` with ``kind`` resolved."""
    return dataclasses.replace(entry, kind=classify(entry, detector))


__all__ = [
    "SUFFIXES_BY_KIND",
    "SUFFIX_KIND_ORDER",
    "ExecutableDetector",
    "ModeExecutableDetector",
    "ExtensionExecutableDetector",
    "executable_detector_for_platform",
    "DEFAULT_EXECUTABLE_DETECTOR",
    "is_link",
    "suffix_kind",
    "classify",
    "classify_entry",
]
