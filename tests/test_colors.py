"""Tests for color management."""

import curses
from unittest.mock import patch

from branchview.colors import ColorPair, Theme, init_colors


@patch("curses.has_colors", return_value=False)
def test_no_color_terminal_uses_attribute_theme(mock_has_colors):
    theme = init_colors({"cursor": "blue"})
    assert theme == Theme()
    assert theme.cursor == curses.A_REVERSE


def test_default_theme_distinguishes_cursor_and_selection():
    theme = Theme()
    assert theme.cursor != theme.selected


@patch("curses.color_pair", side_effect=lambda pair: pair << 8)
@patch("curses.init_pair")
@patch("curses.use_default_colors")
@patch("curses.start_color")
@patch("curses.has_colors", return_value=True)
def test_color_theme_from_settings(mock_has_colors, mock_start, mock_default, mock_init_pair, mock_color_pair):
    theme = init_colors({"cursor": "blue", "selected": "green_bold", "title": "unknown"})

    mock_init_pair.assert_any_call(ColorPair.CURSOR, curses.COLOR_BLUE, -1)
    mock_init_pair.assert_any_call(ColorPair.SELECTED, curses.COLOR_GREEN, -1)
    mock_init_pair.assert_any_call(ColorPair.TITLE, -1, -1)
    assert theme.cursor == (ColorPair.CURSOR << 8) | curses.A_NORMAL
    assert theme.selected == (ColorPair.SELECTED << 8) | curses.A_BOLD
    assert theme.title == ColorPair.TITLE << 8
