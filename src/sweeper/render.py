"""
Text rendering for Minesweeper boards.

Turns the board's query surface into a plain-text frame. Each cell
takes two columns: a marker column (``>`` on the cursor) and a glyph.
"""
from typing import List

from .board import Board
from .cell import CellView, MINE


HIDDEN = "."
FLAG = "F"
MINE_GLYPH = "*"
EMPTY = " "
CURSOR = ">"


def cell_symbol(view: CellView) -> str:
    """
    Glyph for a single cell.

    Flags win over everything else, then opened content; closed cells
    show as hidden.
    """
    if view.is_flagged:
        return FLAG
    if not view.is_opened:
        return HIDDEN
    if view.value == MINE:
        return MINE_GLYPH
    if view.value == 0:
        return EMPTY
    return str(view.value)


def _final_view(board: Board, view: CellView, reveal: bool) -> CellView:
    """Expose hidden content once the game is over, or on request."""
    if view.is_opened or view.is_flagged:
        return view
    cell = board.get_cell(view.x, view.y)
    if reveal or board.is_won or (board.is_lost and cell.is_mine):
        return CellView(
            view.x, view.y, view.is_cursor, False, True, cell.value
        )
    return view


def render_rows(board: Board, reveal: bool = False) -> List[str]:
    """Render the grid, one string per row; ``reveal`` shows every cell."""
    rows = []
    finished = reveal or not board.is_playing
    for y in range(board.height):
        parts = []
        for x in range(board.width):
            view = board.cell_view(x, y)
            if finished:
                view = _final_view(board, view, reveal)
            marker = CURSOR if view.is_cursor else " "
            parts.append(marker + cell_symbol(view))
        rows.append("".join(parts))
    return rows


def status_line(board: Board) -> str:
    if board.is_lost:
        return "Game Over"
    if board.is_won:
        return "You Win"
    return ""


def render(board: Board, reveal: bool = False) -> str:
    """Render the header and grid as one frame."""
    lines = [
        f"Mines: {board.num_mines}",
        f"Remaining Flags: {board.remaining_flags()}",
        "",
    ]
    status = status_line(board)
    if status:
        lines.append(status)
    lines.extend(render_rows(board, reveal))
    return "\n".join(lines)
