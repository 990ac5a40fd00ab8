"""Stable ordering of listed entries by name, size, or modification time."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..entry_model import FileEntry
from .options import SortKey


def name_sort_key(entry: FileEntry) -> str:
    return entry.name.lower()


def size_sort_key(entry: FileEntry) -> int:
    return entry.size_bytes


def time_sort_key(entry: FileEntry) -> int:
    """Whole seconds since epoch; sub-second differences compare equal."""
    return int(entry.modified_at.timestamp())


SORT_KEY_FUNCTIONS: dict[SortKey, Callable[[FileEntry], object]] = {
    SortKey.NAME: name_sort_key,
    SortKey.SIZE: size_sort_key,
    SortKey.TIME: time_sort_key,
}


def sort_entries(entries: Iterable[FileEntry], key: SortKey, reverse: bool = False) -> list[FileEntry]:
    """Return entries ordered by ``key``.

    The sort is stable in both directions: ``sorted(..., reverse=True)`` keeps
    entries with equal keys in their original relative order.
    """
    return sorted(entries, key=SORT_KEY_FUNCTIONS[key], reverse=reverse)


__all__ = [
    "name_sort_key",
    "size_sort_key",
    "time_sort_key",
    "SORT_KEY_FUNCTIONS",
    "sort_entries",
]
