import curses

import pytest

from branchview.input_handlers import decode_key, is_press_event
from branchview.modes import KeyAction


@pytest.mark.parametrize(
    "key, action",
    [
        (ord("q"), KeyAction.QUIT),
        (ord("j"), KeyAction.CURSOR_NEXT),
        (ord("k"), KeyAction.CURSOR_PREVIOUS),
        (ord("\n"), KeyAction.CONFIRM),
        (ord("\r"), KeyAction.CONFIRM),
        (curses.KEY_ENTER, KeyAction.CONFIRM),
        (ord("J"), KeyAction.NONE),
        (curses.KEY_DOWN, KeyAction.NONE),
    ],
)
def test_decode_key(key, action):
    assert decode_key(key) is action


def test_non_press_events():
    assert not is_press_event(curses.KEY_RESIZE)
    assert not is_press_event(curses.KEY_MOUSE)
    assert not is_press_event(curses.ERR)
    assert is_press_event(ord("j"))
