"""Directory enumeration and per-entry metadata lookup.

This is the only module that touches the filesystem. Failures are raised as
``DirectoryReadError`` / ``MetadataRetrievalError`` instead of being skipped.
"""

from __future__ import annotations

import os
import stat
from datetime import datetime
from pathlib import Path

from ..errors import DirectoryReadError, MetadataRetrievalError
from ..logging_config import get_logger
from .classify import ExecutableDetector, classify_entry
from .types import EntryMetadata, FileEntry, RawDirectoryEntry

logger = get_logger(__name__)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def scan_directory(directory: Path) -> list[RawDirectoryEntry]:
    """Return the children of ``directory`` in enumeration order."""
    entries: list[RawDirectoryEntry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(RawDirectoryEntry(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        logger.debug("scan failed for %s: %s", directory, exc)
        raise DirectoryReadError(directory, _reason(exc)) from exc

    logger.debug("scanned %d entries in %s", len(entries), directory)
    return entries


def read_entry_metadata(raw: RawDirectoryEntry) -> EntryMetadata:
    """Return size, mtime, and mode string for ``raw`` without following links."""
    try:
        st = raw.path.lstat()
    except OSError as exc:
        logger.debug("lstat failed for %s: %s", raw.path, exc)
        raise MetadataRetrievalError(raw.path, _reason(exc)) from exc
    return EntryMetadata(
        size_bytes=int(st.st_size),
        modified_at=datetime.fromtimestamp(st.st_mtime),
        mode_string=stat.filemode(st.st_mode),
    )


def build_file_entry(raw: RawDirectoryEntry, detector: ExecutableDetector | None = None) -> FileEntry:
    """Look up metadata for ``raw`` and return the classified entry."""
    metadata = read_entry_metadata(raw)
    entry = FileEntry(
        name=raw.name,
        path=raw.path,
        is_dir=raw.is_dir,
        size_bytes=metadata.size_bytes,
        modified_at=metadata.modified_at,
        mode_string=metadata.mode_string,
    )
    return classify_entry(entry, detector)


__all__ = [
    "scan_directory",
    "read_entry_metadata",
    "build_file_entry",
]
