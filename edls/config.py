"""Persistent JSON defaults for command-line flags.

Stores the hidden-file preference, theme name, and color mode.
All access is defensive: malformed or missing config falls back safely.
The listing command only reads this file.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .logging_config import get_logger

APP_NAME = "edls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = get_logger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str) -> bool:
    """Only explicit booleans are accepted; anything else is ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_show_all() -> bool:
    """Return persisted default for including hidden entries."""
    return _load_bool("show_all")


def load_no_color() -> bool:
    """Return persisted default for disabling ANSI colors."""
    return _load_bool("no_color")


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_show_all",
    "load_no_color",
    "load_theme_name",
]
