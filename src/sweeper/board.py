"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counting,
flood-fill reveal, flagging and win/lose detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellView


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class Direction(Enum):
    """Cursor movement directions as (dx, dy) deltas."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 30
    height: int = 23
    num_mines: int = 99

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def area(self) -> int:
        return self.width * self.height


DEFAULT = BoardConfig(30, 23, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the flat grid of cells (indexed ``y * width + x``), the cursor
    and the game status. Mines are placed once at construction, either
    from ``rng`` or from a fixed ``mines`` layout.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    mines: Optional[Iterable[Position]] = field(default=None, repr=False)
    _grid: List[Cell] = field(default_factory=list, repr=False)
    _status: GameStatus = GameStatus.IN_PROGRESS
    _cursor: Position = (0, 0)

    def __post_init__(self) -> None:
        """Build the grid, lay out mines and count neighbours."""
        self._init_grid()
        if self.mines is None:
            self._place_mines()
        else:
            self._place_fixed_mines(self.mines)
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Create a board with a fixed mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of every mine.
        """
        mines = list(mines)
        return cls(BoardConfig(width, height, len(set(mines))), mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [Cell() for _ in range(self.config.area)]

    def _place_mines(self) -> None:
        """
        Place mines by rejection sampling.

        Draws uniformly random cells and mines each one not already mined
        until exactly ``num_mines`` distinct cells hold a mine.
        """
        placed = 0
        while placed < self.config.num_mines:
            x = self.rng.randrange(self.config.width)
            y = self.rng.randrange(self.config.height)
            cell = self._cell(x, y)
            if cell.is_mine:
                continue
            cell.is_mine = True
            placed += 1

    def _place_fixed_mines(self, mines: Iterable[Position]) -> None:
        """Place mines at the given positions, validating the layout."""
        positions: Set[Position] = set()
        for x, y in mines:
            if not self._is_valid_position(x, y):
                raise ValueError(f"Mine position ({x}, {y}) is off the board")
            positions.add((x, y))
        if len(positions) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} distinct mines, "
                f"got {len(positions)}"
            )
        for x, y in positions:
            self._cell(x, y).is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._cell(x, y)
                if not cell.is_mine:
                    cell.adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for nx, ny in self._get_neighbors(x, y):
            if self._cell(nx, ny).is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _cell(self, x: int, y: int) -> Cell:
        return self._grid[y * self.config.width + x]

    def _get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbors.
        """
        neighbors = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self._is_valid_position(nx, ny):
                    neighbors.append((nx, ny))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _require_position(self, x: int, y: int) -> None:
        if not self._is_valid_position(x, y):
            raise IndexError(
                f"Position ({x}, {y}) outside "
                f"{self.config.width}x{self.config.height} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, x: int, y: int) -> bool:
        """
        Open the cell at the given position.

        A mine loses the game. A safe cell with no adjacent mines opens
        its whole connected empty region and the numbered cells bordering
        it.

        Args:
            x: Column to open.
            y: Row to open.

        Returns:
            True if anything was opened, False for a no-op.

        Raises:
            IndexError: If the position is off the board.
        """
        self._require_position(x, y)
        if self._status != GameStatus.IN_PROGRESS:
            return False

        cell = self._cell(x, y)
        if not cell.is_hidden:
            return False

        if cell.is_mine:
            cell.open()
            self._status = GameStatus.LOST
            return True

        self._flood_open(x, y)
        return True

    def _flood_open(self, x: int, y: int) -> None:
        """Open a safe cell and spread through zero-count cells."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self._cell(cx, cy)
            if not cell.open():
                continue
            if cell.adjacent_mines != 0:
                continue
            for nx, ny in self._get_neighbors(cx, cy):
                if self._cell(nx, ny).is_hidden:
                    stack.append((nx, ny))

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Flagging the last unflagged mine wins the game; flags on safe
        cells do not prevent the win. Flags stay editable after the game
        ends, but the status never changes once won or lost.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            IndexError: If the position is off the board.
        """
        self._require_position(x, y)
        if not self._cell(x, y).toggle_flag():
            return False
        self._check_win_condition()
        return True

    def _check_win_condition(self) -> None:
        """Win once every mine carries a flag."""
        if self._status != GameStatus.IN_PROGRESS:
            return
        flagged_mines = sum(
            1 for cell in self._grid if cell.is_mine and cell.is_flagged
        )
        if flagged_mines == self.config.num_mines:
            self._status = GameStatus.WON

    def move(self, direction: Direction) -> bool:
        """
        Move the cursor one cell, clamped to the board edges.

        Returns:
            True if the cursor moved.
        """
        x, y = self._cursor
        nx = min(max(x + direction.dx, 0), self.config.width - 1)
        ny = min(max(y + direction.dy, 0), self.config.height - 1)
        self._cursor = (nx, ny)
        return (nx, ny) != (x, y)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def cursor(self) -> Position:
        """Current cursor position as (x, y)."""
        return self._cursor

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self._grid if cell.is_flagged)

    @property
    def opened_count(self) -> int:
        return sum(1 for cell in self._grid if cell.is_opened)

    def remaining_flags(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._cell(x, y)

    def cell_view(self, x: int, y: int) -> CellView:
        """
        Describe a cell for rendering.

        Raises:
            IndexError: If the position is off the board.
        """
        self._require_position(x, y)
        return CellView.of(self._cell(x, y), x, y, (x, y) == self._cursor)

    def mine_positions(self) -> List[Position]:
        """All mine positions in row-major order."""
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._cell(x, y).is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D (height, width) array where:
                -1 = hidden
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._grid),
            dtype=np.int8,
            count=len(self._grid),
        )
        return obs.reshape(self.config.height, self.config.width)


def create(
    width: int,
    height: int,
    num_mines: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """Create a new randomly mined board."""
    config = BoardConfig(width, height, num_mines)
    if rng is None:
        return Board(config)
    return Board(config, rng=rng)
