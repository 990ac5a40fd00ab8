"""UI theme definitions and selection helpers.

Themes are ANSI palettes keyed by file kind. Only the entry name is colored;
the other columns stay plain so the layout is identical with and without color.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entry_model import FileKind


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the line renderer."""

    name: str
    reset: str
    regular: str
    directory: str
    executable: str
    compressed: str
    image: str
    symbolic_link: str

    def color_for(self, kind: FileKind) -> str:
        """Return the ANSI prefix for names of ``kind``."""
        return {
            FileKind.REGULAR: self.regular,
            FileKind.DIRECTORY: self.directory,
            FileKind.EXECUTABLE: self.executable,
            FileKind.COMPRESSED: self.compressed,
            FileKind.IMAGE: self.image,
            FileKind.SYMBOLIC_LINK: self.symbolic_link,
        }[kind]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    regular="",
    directory="\033[1;34m",
    executable="\033[1;32m",
    compressed="\033[31m",
    image="\033[35m",
    symbolic_link="\033[36m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    regular="\033[38;5;252m",
    directory="\033[1;38;5;45m",
    executable="\033[38;5;84m",
    compressed="\033[38;5;215m",
    image="\033[38;5;117m",
    symbolic_link="\033[38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    regular="",
    directory="",
    executable="",
    compressed="",
    image="",
    symbolic_link="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
