"""One-directory listing pipeline: scan, filter, classify, sort, cap.

Every entry is built before anything is returned, so a metadata failure on any
entry aborts the whole run and callers never see a partial listing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..entry_model import (
    ExecutableDetector,
    FileEntry,
    RawDirectoryEntry,
    build_file_entry,
    scan_directory,
)
from ..logging_config import get_logger
from .filtering import should_include
from .options import ListingOptions, effective_limit
from .sorting import sort_entries

logger = get_logger(__name__)

DirectoryScanner = Callable[[Path], list[RawDirectoryEntry]]
EntryBuilder = Callable[[RawDirectoryEntry, ExecutableDetector | None], FileEntry]


@dataclass(frozen=True)
class Listing:
    """Sorted entries plus the number of rows to render from the front."""

    entries: tuple[FileEntry, ...]
    row_count: int


def collect_entries(
    directory: Path,
    options: ListingOptions,
    detector: ExecutableDetector | None = None,
    scanner: DirectoryScanner = scan_directory,
    entry_builder: EntryBuilder = build_file_entry,
) -> list[FileEntry]:
    """Return included, classified entries of ``directory`` in sorted order."""
    raw_entries = scanner(directory)
    included = [raw for raw in raw_entries if should_include(raw, options)]
    logger.debug("%d of %d entries pass filters", len(included), len(raw_entries))

    entries = [entry_builder(raw, detector) for raw in included]
    logger.debug("sorting by %s (reverse=%s)", options.sort_key.value, options.reverse)
    return sort_entries(entries, options.sort_key, options.reverse)


def build_listing(
    directory: Path,
    options: ListingOptions,
    detector: ExecutableDetector | None = None,
    scanner: DirectoryScanner = scan_directory,
    entry_builder: EntryBuilder = build_file_entry,
) -> Listing:
    """Run the full pipeline and apply the configured row limit."""
    entries = collect_entries(directory, options, detector, scanner=scanner, entry_builder=entry_builder)
    return Listing(entries=tuple(entries), row_count=effective_limit(options.limit, len(entries)))


__all__ = [
    "DirectoryScanner",
    "EntryBuilder",
    "Listing",
    "collect_entries",
    "build_listing",
]
