"""Core branch browser loop."""

from __future__ import annotations

import curses
import locale
from typing import Optional

from .colors import Theme, init_colors
from .input_handlers import decode_key, is_press_event
from .layout import PANE_GAP, PANE_WIDTH
from .modes import KeyAction, LoopState
from .render import render_browser
from .state import AppState


class TerminalError(Exception):
    """Raised when the terminal cannot be driven by the browser."""


class BranchBrowser:
    """Display the branch list and the commit panes in a curses interface.

    The loop alternates between drawing the current state and blocking on one
    key press.  Quitting only sets a flag on the state; the loop notices it at
    the start of the next iteration and returns, after which
    :func:`curses.wrapper` restores the terminal.
    """

    def __init__(
        self,
        state: AppState,
        *,
        color_settings: Optional[dict] = None,
        pane_width: int = PANE_WIDTH,
        gap: int = PANE_GAP,
    ) -> None:
        self.state = state
        self.color_settings = color_settings or {}
        self.pane_width = pane_width
        self.gap = gap
        self.theme = Theme()
        self.loop_state = LoopState.RUNNING

    def browse(self) -> AppState:
        """Launch the UI and return the final state."""
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            pass  # fall back to the C locale
        try:
            return curses.wrapper(self._loop)
        except curses.error as err:
            raise TerminalError(f"Terminal failure: {err}") from err

    def _loop(self, stdscr: "curses._CursesWindow") -> AppState:  # type: ignore[name-defined]
        """Main curses event loop."""
        self.theme = init_colors(self.color_settings)
        stdscr.nodelay(False)
        stdscr.keypad(True)
        return self.run(stdscr)

    def run(self, stdscr: "curses._CursesWindow") -> AppState:  # type: ignore[name-defined]
        """Render, wait for one key and apply it until the user quits."""
        while self.loop_state is LoopState.RUNNING:
            if self.state.exit_requested:
                self.loop_state = LoopState.TERMINATED
                break
            self.render(stdscr)
            self.handle_key(stdscr.getch())
        return self.state

    def render(self, stdscr: "curses._CursesWindow") -> None:  # type: ignore[name-defined]
        render_browser(
            self.state,
            stdscr,
            theme=self.theme,
            pane_width=self.pane_width,
            gap=self.gap,
        )

    def handle_key(self, key_code: int) -> KeyAction:
        """Apply the action bound to ``key_code`` and return it.

        Resize and mouse events are dropped without touching the state.
        """
        if not is_press_event(key_code):
            return KeyAction.NONE
        action = decode_key(key_code)
        self.state.apply(action)
        return action


__all__ = ["BranchBrowser", "TerminalError"]
