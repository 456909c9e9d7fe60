"""Tests for drawing the panes into a curses window."""

import curses

from branchview.colors import Theme
from branchview.panes import (
    CURSOR_MARKER,
    EMPTY_BRANCHES_TEXT,
    BranchListPane,
    PlaceholderPane,
    commit_info_placeholder,
    commits_placeholder,
)
from branchview.render import TOO_SMALL_TEXT, render_browser
from branchview.render_utils import clip_to_window, truncate, visible_window
from branchview.layout import Rect
from branchview.state import AppState

THEME = Theme(cursor=curses.A_REVERSE, selected=curses.A_BOLD, title=curses.A_BOLD)


def test_branch_rows_have_two_character_marker():
    state = AppState.load(["main", "dev"])
    pane = BranchListPane(state, THEME)
    lines = [text for text, _attr in pane.render_lines(10)]
    assert lines == [f"{CURSOR_MARKER}main", "  dev"]


def test_selected_row_keeps_emphasis_when_cursor_moves_away():
    state = AppState.load(["main", "dev", "feature-x"])
    state.confirm_selection()
    state.move_cursor_next()
    pane = BranchListPane(state, THEME)
    lines = pane.render_lines(10)

    assert lines[0] == ("  main", curses.A_BOLD)
    assert lines[1] == (f"{CURSOR_MARKER}dev", curses.A_REVERSE)
    assert lines[2] == ("  feature-x", curses.A_NORMAL)


def test_cursor_on_selected_row_combines_attributes():
    state = AppState.load(["main"])
    state.confirm_selection()
    pane = BranchListPane(state, THEME)
    assert pane.render_lines(5) == [(f"{CURSOR_MARKER}main", curses.A_BOLD | curses.A_REVERSE)]


def test_empty_branch_list_has_no_cursor_marker():
    pane = BranchListPane(AppState.load([]), THEME)
    lines = pane.render_lines(5)
    assert lines == [(EMPTY_BRANCHES_TEXT, curses.A_DIM)]
    assert CURSOR_MARKER not in lines[0][0]


def test_long_list_scrolls_to_keep_cursor_visible():
    state = AppState.load([f"b{i}" for i in range(10)])
    state.cursor_index = 7
    pane = BranchListPane(state, THEME)
    lines = [text for text, _attr in pane.render_lines(3)]
    assert lines == ["  b5", "  b6", f"{CURSOR_MARKER}b7"]
    assert state.cursor_index == 7


def test_placeholder_panes_render_static_text():
    assert commits_placeholder().render_lines(4) == [("Commits content placeholder", curses.A_NORMAL)]
    assert commit_info_placeholder().title == "Commit info"
    assert PlaceholderPane("X", "y").render_lines(0) == []


def test_render_browser_draws_three_titled_panes(fake_window):
    window = fake_window(height=12, width=160)
    state = AppState.load(["main", "dev"])
    render_browser(state, window, theme=THEME)

    top = window.row(0)
    assert "Branches" in top
    assert "Commits" in top
    assert "Commit info" in top
    assert window.grid[0][0] == "╔"
    assert window.grid[0][49] == "╗"
    assert window.grid[0][51] == "╔"
    assert window.row(1).startswith(f"║{CURSOR_MARKER}main")
    assert window.row(2).startswith("║  dev")
    assert "Commits content placeholder" in window.row(1)
    assert "Commit info placeholder" in window.row(1)
    assert "q quit" in window.row(11)
    assert window.refresh_count == 1


def test_render_browser_clips_panes_on_narrow_terminal(fake_window):
    window = fake_window(height=10, width=70)
    state = AppState.load(["main"])
    render_browser(state, window, theme=THEME)

    assert "Branches" in window.row(0)
    assert window.row(1)[52:] == "Commits content pl"
    assert "Commit info" not in window.text()
    assert window.refresh_count == 1


def test_render_browser_does_not_mutate_state(fake_window):
    state = AppState.load(["main", "dev"])
    state.move_cursor_next()
    state.confirm_selection()
    before = (list(state.branches), state.cursor_index, state.selected_index, state.exit_requested)
    render_browser(state, fake_window(height=6, width=40), theme=THEME)
    render_browser(state, fake_window(), theme=THEME)
    assert (list(state.branches), state.cursor_index, state.selected_index, state.exit_requested) == before


def test_render_browser_reports_tiny_terminal(fake_window):
    window = fake_window(height=2, width=40)
    render_browser(AppState.load(["main"]), window)
    assert window.row(0).startswith(TOO_SMALL_TEXT)
    assert window.refresh_count == 1


def test_hint_strip_shows_selected_branch(fake_window):
    window = fake_window(height=8, width=160)
    state = AppState.load(["main", "dev"])
    state.move_cursor_next()
    state.confirm_selection()
    render_browser(state, window, theme=THEME)
    assert "selected: dev" in window.row(7)


def test_render_helpers():
    assert visible_window(0, 0, 5) == (0, 0)
    assert visible_window(2, 10, 5) == (0, 5)
    assert visible_window(9, 10, 5) == (5, 10)
    assert clip_to_window(Rect(30, 0, 50, 10), 5, 60) == Rect(30, 0, 30, 5)
    assert clip_to_window(Rect(70, 0, 50, 10), 5, 60).is_empty
    assert truncate("feature-branch", 8) == "featu..."
    assert truncate("main", 8) == "main"


def test_huge_pane_width_only_builds_visible_text(fake_window):
    written = []

    class RecordingWindow(fake_window):
        def addnstr(self, y, x, text, n, attr=0):
            written.append(text)
            super().addnstr(y, x, text, n, attr)

    window = RecordingWindow(height=10, width=80)
    state = AppState.load(["main", "dev"])
    render_browser(state, window, theme=THEME, pane_width=100_000_000)

    assert window.row(1).startswith(f"║{CURSOR_MARKER}main")
    assert max(len(text) for text in written) <= window.width
