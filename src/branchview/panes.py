"""Pane models that know how to turn their data into display lines.

Each pane implements :class:`Renderable`.  The renderer only deals with titles
and ``(text, attribute)`` lines, so a pane can change what it shows without the
renderer knowing about it.  The commit and commit-info panes are placeholders
that a future commit list or commit detail model can replace.
"""

from __future__ import annotations

import curses
from typing import List, Protocol, Tuple

from branchview.colors import Theme
from branchview.render_utils import visible_window
from branchview.state import AppState

CURSOR_MARKER = "► "
NO_MARKER = "  "
EMPTY_BRANCHES_TEXT = "No branches"

Line = Tuple[str, int]


class Renderable(Protocol):
    title: str

    def render_lines(self, height: int) -> List[Line]:
        """Return at most ``height`` lines to draw inside the pane."""
        ...


class BranchListPane:
    title = "Branches"

    def __init__(self, state: AppState, theme: Theme) -> None:
        self._state = state
        self._theme = theme

    def row_attribute(self, index: int) -> int:
        """Return the attribute for a branch row.

        Selection emphasis does not depend on the cursor.  When the cursor sits
        on the selected row the emphasis is shown in reverse video.
        """
        is_cursor = self._state.is_cursor_row(index)
        if self._state.is_selected_row(index):
            attr = self._theme.selected
            return attr | curses.A_REVERSE if is_cursor else attr
        if is_cursor:
            return self._theme.cursor
        return curses.A_NORMAL

    def format_row(self, index: int) -> str:
        marker = CURSOR_MARKER if self._state.is_cursor_row(index) else NO_MARKER
        return f"{marker}{self._state.branches[index].display_name}"

    def render_lines(self, height: int) -> List[Line]:
        if height <= 0:
            return []
        if self._state.is_empty:
            return [(EMPTY_BRANCHES_TEXT, curses.A_DIM)]
        start, stop = visible_window(
            self._state.cursor_index, len(self._state.branches), height
        )
        return [(self.format_row(index), self.row_attribute(index)) for index in range(start, stop)]


class PlaceholderPane:
    def __init__(self, title: str, text: str) -> None:
        self.title = title
        self.text = text

    def render_lines(self, height: int) -> List[Line]:
        if height <= 0:
            return []
        return [(self.text, curses.A_NORMAL)]


def commits_placeholder() -> PlaceholderPane:
    return PlaceholderPane("Commits", "Commits content placeholder")


def commit_info_placeholder() -> PlaceholderPane:
    return PlaceholderPane("Commit info", "Commit info placeholder")


__all__ = [
    "BranchListPane",
    "CURSOR_MARKER",
    "EMPTY_BRANCHES_TEXT",
    "NO_MARKER",
    "PlaceholderPane",
    "Renderable",
    "commit_info_placeholder",
    "commits_placeholder",
]
