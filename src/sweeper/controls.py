"""
Input handling for Minesweeper.

Maps key names to commands and applies each command to a board as
exactly one engine operation.
"""
from enum import Enum, auto
from typing import Dict, Optional

from .board import Board, Direction


# ============================================================================
# Commands
# ============================================================================

class Command(Enum):
    """Discrete player inputs."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    OPEN = auto()
    FLAG = auto()
    QUIT = auto()


MOVES: Dict[Command, Direction] = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}

# Arrow keys and vi keys move, space opens, f flags
KEY_BINDINGS: Dict[str, Command] = {
    "up": Command.UP,
    "k": Command.UP,
    "down": Command.DOWN,
    "j": Command.DOWN,
    "left": Command.LEFT,
    "h": Command.LEFT,
    "right": Command.RIGHT,
    "l": Command.RIGHT,
    "space": Command.OPEN,
    "f": Command.FLAG,
    "q": Command.QUIT,
    "ctrl+c": Command.QUIT,
}


def parse_key(key: str) -> Optional[Command]:
    """Look up the command bound to a key name, if any."""
    return KEY_BINDINGS.get(key)


# ============================================================================
# Session
# ============================================================================

class Session:
    """
    A single game driven by commands.

    The session stops on QUIT and when opening a cell loses the game.
    A won game keeps running so the finished board stays on screen
    until the player quits.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def handle(self, command: Command) -> bool:
        """
        Apply one command to the board.

        Args:
            command: The player's input.

        Returns:
            True while the session keeps running.
        """
        if not self._running:
            return False

        if command == Command.QUIT:
            self._running = False
        elif command in MOVES:
            self.board.move(MOVES[command])
        elif command == Command.OPEN:
            self.board.open(*self.board.cursor)
            if self.board.is_lost:
                self._running = False
        elif command == Command.FLAG:
            self.board.toggle_flag(*self.board.cursor)

        return self._running

    def handle_key(self, key: str) -> bool:
        """Apply the command bound to ``key``; unbound keys are ignored."""
        command = parse_key(key)
        if command is None:
            return self._running
        return self.handle(command)
