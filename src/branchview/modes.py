"""Enumerations for the event loop states and the decoded key actions."""

from __future__ import annotations

from enum import Enum


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class KeyAction(Enum):
    QUIT = "quit"
    CURSOR_NEXT = "cursor_next"
    CURSOR_PREVIOUS = "cursor_previous"
    CONFIRM = "confirm"
    NONE = "none"


__all__ = ["LoopState", "KeyAction"]
