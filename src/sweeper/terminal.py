"""
Interactive curses front end.

Controls:
  Arrow keys / hjkl : move cursor
  Space             : open cell
  F                 : flag/unflag
  Q / Ctrl+C        : quit
"""
import curses
from typing import Optional

from .board import Board
from .controls import Session
from .render import render


HEADER_LINES = 4
HELP = "Arrows/hjkl move  Space open  F flag  Q quit"

CURSES_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    ord(" "): "space",
    3: "ctrl+c",
}


def key_name(key: int) -> Optional[str]:
    """Translate a curses key code into a binding name."""
    if key in CURSES_KEYS:
        return CURSES_KEYS[key]
    if 0 <= key < 256 and chr(key).isprintable():
        return chr(key).lower()
    return None


def draw(stdscr, board: Board) -> None:
    stdscr.erase()
    lines = render(board).split("\n")
    grid_top = len(lines) - board.height
    max_y, max_x = stdscr.getmaxyx()

    for row, line in enumerate(lines):
        if row >= max_y - 1:
            break
        stdscr.addnstr(row, 0, line, max_x - 1)

    cx, cy = board.cursor
    row, col = grid_top + cy, cx * 2
    if row < max_y - 1 and col + 1 < max_x - 1:
        stdscr.chgat(row, col, 2, curses.A_REVERSE)

    help_row = len(lines) + 1
    if help_row < max_y:
        stdscr.addnstr(help_row, 0, HELP, max_x - 1)
    stdscr.refresh()


def run(stdscr, session: Session) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.raw()

    draw(stdscr, session.board)
    while session.running:
        key = stdscr.getch()
        if key == curses.KEY_RESIZE:
            draw(stdscr, session.board)
            continue
        name = key_name(key)
        if name is not None:
            session.handle_key(name)
        draw(stdscr, session.board)


def play(board: Board) -> Session:
    """Play interactively until the player quits or hits a mine."""
    session = Session(board)
    curses.wrapper(run, session)
    print(render(board))
    return session
