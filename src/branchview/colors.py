"""Color management for the branch browser."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Mapping

from branchview.config import COLOR_MAP


class ColorPair(IntEnum):
    """Color pair constants for curses."""
    DEFAULT = 0
    CURSOR = 1
    SELECTED = 2
    TITLE = 3


COLOR_NAME_TO_CURSES = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
    "default": -1,
}

ATTRIBUTE_NAME_TO_CURSES = {
    "normal": curses.A_NORMAL,
    "bold": curses.A_BOLD,
    "dim": curses.A_DIM,
}


@dataclass(frozen=True)
class Theme:
    """Curses attributes used by the panes.

    The defaults only use text attributes, so a theme can be built and used
    for drawing before (or without) colors being initialised.
    """

    cursor: int = curses.A_REVERSE
    selected: int = curses.A_BOLD | curses.A_UNDERLINE
    title: int = curses.A_BOLD
    hint: int = curses.A_DIM


def _attribute_for(name: str) -> int:
    _color, attribute = COLOR_MAP.get(name, ("default", "normal"))
    return ATTRIBUTE_NAME_TO_CURSES.get(attribute, curses.A_NORMAL)


def _curses_color_for(name: str) -> int:
    color, _attribute = COLOR_MAP.get(name, ("default", "normal"))
    return COLOR_NAME_TO_CURSES.get(color, -1)


def init_colors(color_settings: Mapping[str, str]) -> Theme:
    """Initialize curses color pairs and return the matching theme.

    Call this after curses initialization and before rendering.  Terminals
    without color support get the attribute-only default theme.
    """
    if not curses.has_colors():
        return Theme()

    curses.start_color()
    curses.use_default_colors()

    pairs: Dict[str, ColorPair] = {
        "cursor": ColorPair.CURSOR,
        "selected": ColorPair.SELECTED,
        "title": ColorPair.TITLE,
    }
    attrs: Dict[str, int] = {}
    for key, pair in pairs.items():
        name = str(color_settings.get(key, "white")).lower()
        curses.init_pair(pair, _curses_color_for(name), -1)
        attrs[key] = curses.color_pair(pair) | _attribute_for(name)

    return Theme(
        cursor=attrs["cursor"],
        selected=attrs["selected"],
        title=attrs["title"],
    )


__all__ = ["ColorPair", "Theme", "init_colors"]
