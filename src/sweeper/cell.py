"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/opened/flagged) and content (mine/adjacency count), plus the
read-only view handed to the presentation layer.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

MINE = -1


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    OPENED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, opened, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if cell was opened, False if already opened or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.OPENED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is opened.
        """
        if self.state == CellState.OPENED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def value(self) -> int:
        """Adjacency count, or MINE for a mine cell."""
        return MINE if self.is_mine else self.adjacent_mines

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.state == CellState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Opened mine (lost game)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Snapshot of one cell for rendering.

    ``value`` is only filled in for opened cells; closed cells keep
    their content hidden.
    """

    x: int
    y: int
    is_cursor: bool
    is_flagged: bool
    is_opened: bool
    value: Optional[int] = None

    @property
    def is_mine(self) -> bool:
        """True for an opened mine."""
        return self.value == MINE

    @classmethod
    def of(cls, cell: Cell, x: int, y: int, is_cursor: bool) -> "CellView":
        return cls(
            x=x,
            y=y,
            is_cursor=is_cursor,
            is_flagged=cell.is_flagged,
            is_opened=cell.is_opened,
            value=cell.value if cell.is_opened else None,
        )
