"""Filter, sort, and limit stages plus the pipeline that chains them."""

from __future__ import annotations

from .filtering import compile_pattern, should_include
from .options import ListingOptions, SortKey, build_listing_options, effective_limit, select_sort_key
from .pipeline import Listing, build_listing, collect_entries
from .sorting import sort_entries

__all__ = [
    "compile_pattern",
    "should_include",
    "ListingOptions",
    "SortKey",
    "build_listing_options",
    "effective_limit",
    "select_sort_key",
    "Listing",
    "build_listing",
    "collect_entries",
    "sort_entries",
]
