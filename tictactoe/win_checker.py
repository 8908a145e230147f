"""
Win checker for the N×N TicTacToe engine.

Instead of scanning every row, column and diagonal after each move, only
the lines that could contain the cell just played are looked at. A line of
three through that cell has it either in the middle or at one end:

- middle: the neighbours at +1 and -1 along one of the 4 axes
- end:    the cells at +1 and +2 along one of the 8 directions

That is at most 12 candidate lines no matter how big the board is.
"""

from typing import Iterator, Optional, Tuple

from .board import Board, CellMark
from .config import GameConfig

Cell = Tuple[int, int]
Line = Tuple[Cell, Cell, Cell]


def candidate_lines(row: int, col: int) -> Iterator[Line]:
    """
    Yield every line of three that could contain (row, col).

    Middle configurations come first (N, E, NE, SE axes), then end
    configurations clockwise from north. Each line is ordered along its
    direction. Cells may fall off the board; callers check bounds.
    """
    for dr, dc in GameConfig.MIDDLE_AXES:
        yield (row - dr, col - dc), (row, col), (row + dr, col + dc)

    for dr, dc in GameConfig.DIRECTIONS:
        yield (row, col), (row + dr, col + dc), (row + 2 * dr, col + 2 * dc)


def holds_mark(board: Board, cell: Cell, mark: CellMark) -> bool:
    """True if the cell is on the board and holds mark."""
    row, col = cell
    return board.is_in_bounds(row, col) and board.mark_at(row, col) is mark


def find_winning_line(board: Board, row: int, col: int) -> Optional[Line]:
    """
    Find a line of three identical marks through the given cell.

    Args:
        board: The board, with the move at (row, col) already placed.
        row: Row of the cell just played.
        col: Column of the cell just played.

    Returns:
        The three cells of the first winning line found, or None.

    Raises:
        OutOfBounds: If (row, col) itself is not on the board.
    """
    mark = board.mark_at(row, col)
    if mark is CellMark.EMPTY:
        return None

    anchor = (row, col)
    for line in candidate_lines(row, col):
        others = [cell for cell in line if cell != anchor]
        if all(holds_mark(board, cell, mark) for cell in others):
            return line

    return None


def has_winning_line(board: Board, row: int, col: int) -> bool:
    return find_winning_line(board, row, col) is not None


class WinChecker:
    """
    Checks for win conditions around the last move.

    Win condition: 3 identical marks in a straight line
    (horizontally, vertically, or diagonally) that include the last move.
    """

    def check_winner(self, board: Board, row: int, col: int) -> bool:
        """
        Check whether the mark at (row, col) completes a line of three.

        Args:
            board: The board after the move.
            row: Row of the move.
            col: Column of the move.

        Returns:
            True if the move won the game.
        """
        return has_winning_line(board, row, col)

    def get_winning_line(self, board: Board, row: int, col: int) -> Optional[Line]:
        """The winning line through (row, col) as three (row, col) tuples, or None."""
        return find_winning_line(board, row, col)
