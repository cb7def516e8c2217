"""
Unit tests for Cell and CellView.

Tests cell state management, open/flag behavior, and observation conversion.
"""
import pytest
from sweeper import Cell, CellState, CellView, MINE


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_value_of_mine_is_sentinel(self, mine_cell: Cell) -> None:
        """A mine reports the MINE sentinel as its value."""
        assert mine_cell.value == MINE

    def test_value_of_safe_cell_is_count(self) -> None:
        """A safe cell reports its adjacency count."""
        assert Cell(adjacent_mines=4).value == 4


# ============================================================================
# Cell Open/Flag Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_hidden_cell(self, hidden_cell: Cell) -> None:
        """Opening a hidden cell should succeed."""
        assert hidden_cell.open() is True
        assert hidden_cell.is_opened is True

    def test_open_twice_fails(self, numbered_cell: Cell) -> None:
        """Opening an opened cell is a no-op."""
        assert numbered_cell.open() is False
        assert numbered_cell.is_opened is True

    def test_open_flagged_cell_fails(self, hidden_cell: Cell) -> None:
        """Flags block opening."""
        hidden_cell.toggle_flag()
        assert hidden_cell.open() is False
        assert hidden_cell.is_flagged is True


class TestCellFlag:
    """Test flag toggling."""

    def test_flag_then_unflag(self, hidden_cell: Cell) -> None:
        """Toggling twice returns the cell to hidden."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_flagged is True
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_hidden is True

    def test_cannot_flag_opened_cell(self, numbered_cell: Cell) -> None:
        """Opened cells cannot be flagged."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_opened is True


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test observation encoding."""

    @pytest.mark.parametrize(
        "cell, expected",
        [
            (Cell(), -1),
            (Cell(state=CellState.FLAGGED), -2),
            (Cell(adjacent_mines=0, state=CellState.OPENED), 0),
            (Cell(adjacent_mines=7, state=CellState.OPENED), 7),
            (Cell(is_mine=True, state=CellState.OPENED), 9),
        ],
    )
    def test_observation_values(self, cell: Cell, expected: int) -> None:
        assert cell.to_observation() == expected


# ============================================================================
# CellView Tests
# ============================================================================

class TestCellView:
    """Test the render-facing snapshot."""

    def test_hidden_cell_hides_value(self, mine_cell: Cell) -> None:
        """Closed cells never leak their content."""
        view = CellView.of(mine_cell, 1, 2, is_cursor=False)
        assert view.value is None
        assert view.is_mine is False
        assert (view.x, view.y) == (1, 2)

    def test_opened_mine_view(self, mine_cell: Cell) -> None:
        mine_cell.open()
        view = CellView.of(mine_cell, 0, 0, is_cursor=True)
        assert view.is_opened is True
        assert view.is_mine is True
        assert view.is_cursor is True

    def test_opened_count_view(self, numbered_cell: Cell) -> None:
        view = CellView.of(numbered_cell, 0, 0, is_cursor=False)
        assert view.value == 3
        assert view.is_flagged is False
