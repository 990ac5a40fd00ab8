"""Fixed-column report lines for listed entries.

Column order: mode, owner, group, size, mtime, icon, name + kind symbol.
Columns are positional and never omitted.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from ..entry_model import FileEntry
from ..ui_theme import PLAIN_THEME, UITheme
from .styles import display_style_for

SIZE_COLUMN_WIDTH = 8


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``Jan _2 15:04:05`` (space-padded day, no year)."""
    return f"{moment:%b} {moment.day:>2} {moment:%H:%M:%S}"


def format_entry(entry: FileEntry, theme: UITheme = PLAIN_THEME) -> str:
    """Render one listing row for ``entry``."""
    style = display_style_for(entry.kind)
    color = theme.color_for(entry.kind)
    name = f"{color}{entry.name}{theme.reset}" if color else entry.name
    return (
        f"{entry.mode_string} {entry.owner_name} {entry.group_name} "
        f"{entry.size_bytes:>{SIZE_COLUMN_WIDTH}} {format_timestamp(entry.modified_at)} "
        f"{style.icon} {name}{style.symbol}"
    )


def render_listing(entries: Sequence[FileEntry], count: int, theme: UITheme = PLAIN_THEME) -> list[str]:
    """Render the first ``count`` of the already-sorted ``entries``."""
    return [format_entry(entry, theme) for entry in entries[:count]]


__all__ = [
    "SIZE_COLUMN_WIDTH",
    "format_timestamp",
    "format_entry",
    "render_listing",
]
