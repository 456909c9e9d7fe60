"""Translate raw curses key codes into browser actions."""

from __future__ import annotations

import curses
from typing import Dict

from branchview.modes import KeyAction

# Codes ``getch`` returns for things that are not key presses.
NON_PRESS_EVENTS = frozenset({curses.ERR, curses.KEY_RESIZE, curses.KEY_MOUSE})

KEY_BINDINGS: Dict[int, KeyAction] = {
    ord("q"): KeyAction.QUIT,
    ord("j"): KeyAction.CURSOR_NEXT,
    ord("k"): KeyAction.CURSOR_PREVIOUS,
    ord("\n"): KeyAction.CONFIRM,
    ord("\r"): KeyAction.CONFIRM,
    curses.KEY_ENTER: KeyAction.CONFIRM,
}


def is_press_event(key_code: int) -> bool:
    """Return ``False`` for resize, mouse and "no input" codes."""
    return key_code not in NON_PRESS_EVENTS


def decode_key(key_code: int) -> KeyAction:
    """Map a key code to its action; unknown keys map to ``KeyAction.NONE``."""
    return KEY_BINDINGS.get(key_code, KeyAction.NONE)


__all__ = ["KEY_BINDINGS", "NON_PRESS_EVENTS", "decode_key", "is_press_event"]
