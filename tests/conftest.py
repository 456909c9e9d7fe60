"""Shared fixtures: a fake curses window that records what is drawn."""

from __future__ import annotations

import curses
from typing import Dict, Iterable, List, Tuple

import pytest


class FakeWindow:
    """Stand-in for a curses window with a character grid and scripted keys."""

    def __init__(self, height: int = 24, width: int = 160, keys: Iterable[int] = ()) -> None:
        self.height = height
        self.width = width
        self.keys: List[int] = list(keys)
        self.refresh_count = 0
        self.erase_count = 0
        self.getch_count = 0
        self.attrs: Dict[Tuple[int, int], int] = {}
        self.grid: List[List[str]] = []
        self.erase()
        self.erase_count = 0

    def getmaxyx(self) -> Tuple[int, int]:
        return self.height, self.width

    def erase(self) -> None:
        self.erase_count += 1
        self.grid = [[" "] * self.width for _ in range(self.height)]
        self.attrs = {}

    def _put(self, y: int, x: int, text: str, attr: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise curses.error("addnstr() returned ERR")
        for offset, char in enumerate(text):
            column = x + offset
            if column >= self.width:
                raise curses.error("addnstr() returned ERR")
            self.grid[y][column] = char
            self.attrs[(y, column)] = attr

    def addnstr(self, y: int, x: int, text: str, n: int, attr: int = 0) -> None:
        self._put(y, x, text[:n], attr)

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        self._put(y, x, text, attr)

    def addch(self, y: int, x: int, char: str, attr: int = 0) -> None:
        self._put(y, x, char, attr)

    def refresh(self) -> None:
        self.refresh_count += 1

    def nodelay(self, flag: bool) -> None:
        pass

    def keypad(self, flag: bool) -> None:
        pass

    def getch(self) -> int:
        self.getch_count += 1
        if not self.keys:
            raise AssertionError("event loop asked for more keys than scripted")
        return self.keys.pop(0)

    def row(self, y: int) -> str:
        return "".join(self.grid[y])

    def text(self) -> str:
        return "\n".join(self.row(y) for y in range(self.height))


@pytest.fixture
def fake_window():
    return FakeWindow


@pytest.fixture(autouse=True)
def no_cursor_visibility(monkeypatch):
    """``curs_set`` needs an initialised screen; tests never have one."""
    def _fail(_visibility):
        raise curses.error("curs_set() returned ERR")

    monkeypatch.setattr(curses, "curs_set", _fail)
