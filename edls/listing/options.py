"""Listing options: filter policy, active sort key, and row limit."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .filtering import compile_pattern


class SortKey(enum.Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"


def select_sort_key(by_time: bool, by_size: bool) -> SortKey:
    """Resolve the single active key; time wins over size, name is the default."""
    if by_time:
        return SortKey.TIME
    if by_size:
        return SortKey.SIZE
    return SortKey.NAME


def effective_limit(limit: int, available: int) -> int:
    """Return how many rows to render for a requested ``limit``.

    ``0`` and limits above ``available`` mean no cap. The result never exceeds
    ``available``, so the listing is clamped but never padded.
    """
    if limit <= 0 or limit > available:
        return available
    return limit


@dataclass(frozen=True)
class ListingOptions:
    """Validated options for one listing run."""

    include_all: bool = False
    pattern: re.Pattern[str] | None = None
    sort_key: SortKey = SortKey.NAME
    reverse: bool = False
    limit: int = 0


def build_listing_options(
    *,
    include_all: bool = False,
    pattern: str | None = None,
    by_time: bool = False,
    by_size: bool = False,
    reverse: bool = False,
    limit: int = 0,
) -> ListingOptions:
    """Build options from raw flag values.

    The pattern is compiled here, before any directory is read, so an invalid
    pattern raises ``InvalidPatternError`` with nothing listed.
    """
    return ListingOptions(
        include_all=include_all,
        pattern=compile_pattern(pattern),
        sort_key=select_sort_key(by_time, by_size),
        reverse=reverse,
        limit=limit,
    )


__all__ = [
    "SortKey",
    "select_sort_key",
    "effective_limit",
    "ListingOptions",
    "build_listing_options",
]
