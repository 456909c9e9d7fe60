"""Convert the current application state into characters on the screen.

Every refresh follows the same steps: work out the drawing area, split it into
the three fixed panes, draw each pane as a framed box, paint the key hint
strip and flush the window once.  Nothing here changes :class:`AppState`.
"""

from __future__ import annotations

import curses
from typing import Iterable, Optional, Tuple

from branchview.colors import Theme
from branchview.help_text import build_help_line
from branchview.layout import PANE_GAP, PANE_WIDTH, Rect, compute_panes
from branchview.panes import (
    BranchListPane,
    Renderable,
    commit_info_placeholder,
    commits_placeholder,
)
from branchview.render_utils import (
    clip_to_window,
    draw_frame,
    draw_frame_title,
    put_text,
    truncate,
)
from branchview.state import AppState

# Terminal size limits
MIN_TERMINAL_HEIGHT = 4
MIN_TERMINAL_WIDTH = 10
HELP_HINTS_HEIGHT = 1

TOO_SMALL_TEXT = "Terminal too small."


def build_panes(state: AppState, theme: Theme) -> Tuple[Renderable, Renderable, Renderable]:
    """Return the branch, commit and commit-info pane models."""
    return BranchListPane(state, theme), commits_placeholder(), commit_info_placeholder()


def render_browser(
    state: AppState,
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    *,
    theme: Optional[Theme] = None,
    pane_width: int = PANE_WIDTH,
    gap: int = PANE_GAP,
) -> None:
    """Render the three panes and the hint strip, then flush the window."""
    theme = theme or Theme()
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    if height < MIN_TERMINAL_HEIGHT or width < MIN_TERMINAL_WIDTH:
        put_text(stdscr, 0, 0, truncate(TOO_SMALL_TEXT, width), width)
        stdscr.refresh()
        return

    area = Rect(0, 0, width, height - HELP_HINTS_HEIGHT)
    rects = compute_panes(area, pane_width=pane_width, gap=gap)
    render_panes(stdscr, zip(build_panes(state, theme), rects), theme, height, width)

    render_help_hints(state, stdscr, height - HELP_HINTS_HEIGHT, width, theme)

    try:
        curses.curs_set(0)
    except curses.error:
        pass

    stdscr.refresh()


def render_panes(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    panes: Iterable[Tuple[Renderable, Rect]],
    theme: Theme,
    window_height: int,
    window_width: int,
) -> None:
    for pane, rect in panes:
        render_pane(stdscr, pane, rect, theme, window_height, window_width)


def render_pane(
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    pane: Renderable,
    rect: Rect,
    theme: Theme,
    window_height: int,
    window_width: int,
) -> None:
    """Render a single pane, clipping anything outside the window."""
    if rect.is_empty or clip_to_window(rect, window_height, window_width).is_empty:
        return

    draw_frame(stdscr, rect, window_height, window_width)
    draw_frame_title(stdscr, rect, pane.title, window_width, theme.title)

    interior = Rect(rect.x + 1, rect.y + 1, max(rect.width - 2, 0), max(rect.height - 2, 0))
    if interior.is_empty:
        return
    visible = clip_to_window(interior, window_height, window_width)
    if visible.is_empty:
        return

    for offset, (text, attr) in enumerate(pane.render_lines(interior.height)):
        if offset >= visible.height:
            break
        # Pad to the visible part of the pane so highlighted rows span it.
        line = truncate(text, interior.width)[: visible.width].ljust(visible.width)
        put_text(stdscr, interior.y + offset, interior.x, line, visible.width, attr)


def render_help_hints(
    state: AppState,
    stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
    origin_y: int,
    width: int,
    theme: Theme,
) -> None:
    """Render the one-line key hints below the panes."""
    line = truncate(build_help_line(state), width)
    # Leave the last column alone: writing the bottom-right cell fails.
    put_text(stdscr, origin_y, 0, line.ljust(width), width - 1, theme.hint)


__all__ = [
    "build_panes",
    "render_browser",
    "render_help_hints",
    "render_pane",
    "render_panes",
]
