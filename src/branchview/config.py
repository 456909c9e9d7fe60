"""Configuration file management for branchview."""

from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

import tomli_w

from branchview.layout import PANE_GAP, PANE_WIDTH

# Default configuration file location
CONFIG_FILE = Path.home() / ".branchview.toml"

# Default configuration
DEFAULT_CONFIG = {
    "layout": {
        "pane_width": PANE_WIDTH,
        "pane_gap": PANE_GAP,
    },
    "colors": {
        "cursor": "blue",
        "selected": "green_bold",
        "title": "white_bold",
    },
}

# Color name to (curses color, attribute) mapping
COLOR_MAP = {
    "blue": ("blue", "normal"),
    "blue_bold": ("blue", "bold"),
    "green": ("green", "normal"),
    "green_bold": ("green", "bold"),
    "cyan": ("cyan", "normal"),
    "gray_dim": ("white", "dim"),
    "yellow": ("yellow", "normal"),
    "white": ("white", "normal"),
    "white_bold": ("white", "bold"),
    "red": ("red", "normal"),
    "red_bold": ("red", "bold"),
}


def load_config() -> Dict[str, Any]:
    """Load configuration from file or return defaults."""
    if not CONFIG_FILE.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(CONFIG_FILE, "rb") as f:
            config = tomllib.load(f)
        # Merge with defaults to ensure all keys exist
        return _merge_config(DEFAULT_CONFIG, config)
    except (OSError, tomllib.TOMLDecodeError) as err:
        print(f"Warning: Ignoring unreadable configuration {CONFIG_FILE}: {err}", file=sys.stderr)
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "wb") as f:
            tomli_w.dump(config, f)
    except OSError as err:
        # Don't break the app if config save fails, but inform the user
        print(f"Warning: Failed to save configuration to {CONFIG_FILE}: {err}", file=sys.stderr)


def _merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge user config with defaults, preserving user values."""
    result = copy.deepcopy(default)
    for key, value in user.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value
    return result


def get_layout_settings(config: Optional[Dict[str, Any]] = None) -> Tuple[int, int]:
    """Return ``(pane_width, pane_gap)``, falling back to defaults when invalid."""
    if config is None:
        config = load_config()
    layout = config.get("layout", {})
    pane_width = layout.get("pane_width", PANE_WIDTH)
    pane_gap = layout.get("pane_gap", PANE_GAP)

    if not isinstance(pane_width, int) or isinstance(pane_width, bool) or pane_width <= 0:
        print(f"Warning: Invalid layout.pane_width {pane_width!r}, using {PANE_WIDTH}", file=sys.stderr)
        pane_width = PANE_WIDTH
    if not isinstance(pane_gap, int) or isinstance(pane_gap, bool) or pane_gap < 0:
        print(f"Warning: Invalid layout.pane_gap {pane_gap!r}, using {PANE_GAP}", file=sys.stderr)
        pane_gap = PANE_GAP
    return pane_width, pane_gap


def get_color_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """Get pane color configuration."""
    if config is None:
        config = load_config()
    return config.get("colors", DEFAULT_CONFIG["colors"])


def create_default_config() -> bool:
    """Create default configuration file if it doesn't exist.

    Returns ``True`` when a new file was written.
    """
    if CONFIG_FILE.exists():
        return False

    save_config(DEFAULT_CONFIG)
    return CONFIG_FILE.exists()


__all__ = [
    "COLOR_MAP",
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "create_default_config",
    "get_color_settings",
    "get_layout_settings",
    "load_config",
    "save_config",
]
