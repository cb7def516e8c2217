"""
Unit tests for curses key translation.
"""
import curses

import pytest
from sweeper.terminal import key_name


@pytest.mark.parametrize(
    "key, name",
    [
        (curses.KEY_UP, "up"),
        (curses.KEY_DOWN, "down"),
        (curses.KEY_LEFT, "left"),
        (curses.KEY_RIGHT, "right"),
        (ord(" "), "space"),
        (3, "ctrl+c"),
        (ord("F"), "f"),
        (ord("q"), "q"),
    ],
)
def test_key_name(key: int, name: str) -> None:
    assert key_name(key) == name


def test_unknown_key_is_none() -> None:
    assert key_name(curses.KEY_F1) is None
    assert key_name(-1) is None
