"""Utility functions for rendering."""

from __future__ import annotations

import curses
from typing import Tuple

from branchview.layout import Rect

# Box drawing characters (double line)
BOX_TOP_LEFT = "╔"
BOX_TOP_RIGHT = "╗"
BOX_BOTTOM_LEFT = "╚"
BOX_BOTTOM_RIGHT = "╝"
BOX_HORIZONTAL = "═"
BOX_VERTICAL = "║"


def clip_to_window(rect: Rect, window_height: int, window_width: int) -> Rect:
    """Return the part of ``rect`` that lies inside the window."""
    width = max(min(rect.right, window_width) - rect.x, 0)
    height = max(min(rect.bottom, window_height) - rect.y, 0)
    return Rect(rect.x, rect.y, width, height)


def visible_window(cursor_index: int, total: int, viewport_height: int) -> Tuple[int, int]:
    """Return ``(start, stop)`` of the rows to show so the cursor stays visible."""
    if viewport_height <= 0 or total <= 0:
        return 0, 0
    start = max(cursor_index - viewport_height + 1, 0)
    stop = min(start + viewport_height, total)
    return start, stop


def put_text(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    y: int,
    x: int,
    text: str,
    max_width: int,
    attr: int = curses.A_NORMAL,
) -> None:
    """Write at most ``max_width`` characters, ignoring writes off the window."""
    if max_width <= 0:
        return
    try:
        stdscr.addnstr(y, x, text, max_width, attr)
    except curses.error:
        # Writing the bottom-right cell of a window raises after the write.
        pass


def draw_frame(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    rect: Rect,
    window_height: int,
    window_width: int,
) -> None:
    """Draw a double-line frame around ``rect``, skipping cells off the window."""
    if rect.height < 2 or rect.width < 2:
        return

    top = rect.y
    bottom = rect.bottom - 1
    left = rect.x
    right = rect.right - 1

    def put(y: int, x: int, char: str) -> None:
        if 0 <= y < window_height and 0 <= x < window_width:
            try:
                stdscr.addch(y, x, char)
            except curses.error:
                pass

    put(top, left, BOX_TOP_LEFT)
    put(top, right, BOX_TOP_RIGHT)
    put(bottom, left, BOX_BOTTOM_LEFT)
    put(bottom, right, BOX_BOTTOM_RIGHT)

    for x_axis in range(left + 1, min(right, window_width)):
        put(top, x_axis, BOX_HORIZONTAL)
        put(bottom, x_axis, BOX_HORIZONTAL)

    for y_axis in range(top + 1, min(bottom, window_height)):
        put(y_axis, left, BOX_VERTICAL)
        put(y_axis, right, BOX_VERTICAL)


def draw_frame_title(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    rect: Rect,
    title: str,
    window_width: int,
    attr: int = curses.A_BOLD,
) -> None:
    """Overlay a centered title along the top border of a frame."""
    available = max(rect.width - 2, 0)
    if available <= 0:
        return
    label = truncate(title, available)
    x = rect.x + 1 + (available - len(label)) // 2
    put_text(stdscr, rect.y, x, label, max(window_width - x, 0), attr)


def truncate(text: str, max_width: int) -> str:
    """Truncate text to fit within max_width, appending ellipsis if needed."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    if max_width <= 3:
        return text[:max_width]
    return text[: max_width - 3] + "..."


__all__ = [
    "BOX_BOTTOM_LEFT",
    "BOX_BOTTOM_RIGHT",
    "BOX_HORIZONTAL",
    "BOX_TOP_LEFT",
    "BOX_TOP_RIGHT",
    "BOX_VERTICAL",
    "clip_to_window",
    "draw_frame",
    "draw_frame_title",
    "put_text",
    "truncate",
    "visible_window",
]
