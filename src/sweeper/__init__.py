"""
Terminal Minesweeper.

Provides the board engine, the command session that drives it, text
rendering and a Gymnasium environment.
"""
from .cell import Cell, CellState, CellView, MINE
from .board import Board, BoardConfig, Direction, GameStatus, DEFAULT, create
from .controls import Command, KEY_BINDINGS, Session, parse_key
from .render import render
from .environment import SweeperEnv, ACTIONS

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "MINE",
    "Board",
    "BoardConfig",
    "Direction",
    "GameStatus",
    "DEFAULT",
    "create",
    "Command",
    "KEY_BINDINGS",
    "Session",
    "parse_key",
    "render",
    "SweeperEnv",
    "ACTIONS",
]
