"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, Session


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def seeded_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 9, 10), rng=random.Random(1234))


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its only mine at (2, 2)."""
    return Board.from_mines(3, 3, [(2, 2)])


@pytest.fixture
def tiny_board() -> Board:
    """2x2 board with its only mine at (0, 0)."""
    return Board.from_mines(2, 2, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a column of mines at x=2.

    The left two columns form a region cut off from the right.
    """
    return Board.from_mines(5, 5, [(2, y) for y in range(5)])


@pytest.fixture
def session(corner_mine_board: Board) -> Session:
    return Session(corner_mine_board)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an opened cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.open()
    return cell

