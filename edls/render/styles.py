"""Static kind-to-display-style table (icon glyph plus trailing symbol)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..entry_model import FileKind


@dataclass(frozen=True)
class DisplayStyle:
    icon: str
    symbol: str = ""


DISPLAY_STYLES: Mapping[FileKind, DisplayStyle] = MappingProxyType(
    {
        FileKind.REGULAR: DisplayStyle(icon="📄"),
        FileKind.DIRECTORY: DisplayStyle(icon="📂", symbol="/"),
        FileKind.EXECUTABLE: DisplayStyle(icon="🚀", symbol="*"),
        FileKind.COMPRESSED: DisplayStyle(icon="📦"),
        FileKind.IMAGE: DisplayStyle(icon="📸"),
        FileKind.SYMBOLIC_LINK: DisplayStyle(icon="🔗"),
    }
)


def display_style_for(kind: FileKind) -> DisplayStyle:
    return DISPLAY_STYLES[kind]


__all__ = [
    "DisplayStyle",
    "DISPLAY_STYLES",
    "display_style_for",
]
