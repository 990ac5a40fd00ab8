"""Render stage: display styles and fixed-column listing rows."""

from __future__ import annotations

from .lines import SIZE_COLUMN_WIDTH, format_entry, format_timestamp, render_listing
from .styles import DISPLAY_STYLES, DisplayStyle, display_style_for

__all__ = [
    "SIZE_COLUMN_WIDTH",
    "format_entry",
    "format_timestamp",
    "render_listing",
    "DISPLAY_STYLES",
    "DisplayStyle",
    "display_style_for",
]
