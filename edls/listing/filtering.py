"""Per-entry inclusion rules: hidden-name policy and name pattern."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol

from ..entry_model import is_hidden_name
from ..errors import InvalidPatternError

if TYPE_CHECKING:
    from .options import ListingOptions


class Named(Protocol):
    name: str


def compile_pattern(pattern: str | None) -> re.Pattern[str] | None:
    """Compile a case-insensitive name pattern; empty means no pattern."""
    if not pattern:
        return None
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc


def passes_hidden_rule(name: str, include_all: bool) -> bool:
    return include_all or not is_hidden_name(name)


def passes_pattern_rule(name: str, pattern: re.Pattern[str] | None) -> bool:
    # search, not fullmatch: "IMG" matches "img_001.png".
    return pattern is None or pattern.search(name) is not None


def should_include(entry: Named, options: ListingOptions) -> bool:
    """Return whether ``entry`` passes both the hidden rule and the pattern rule."""
    return passes_hidden_rule(entry.name, options.include_all) and passes_pattern_rule(entry.name, options.pattern)


__all__ = [
    "compile_pattern",
    "passes_hidden_rule",
    "passes_pattern_rule",
    "should_include",
]
