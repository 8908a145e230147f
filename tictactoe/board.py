"""
Board state for the N×N TicTacToe engine.
Stores the grid of marks and guards every read and write.
"""

from enum import Enum
from typing import List, Tuple

import numpy as np

from .config import GameConfig
from .errors import CellOccupied, InvalidArgument, InvalidConfiguration, OutOfBounds


class CellMark(Enum):
    """What a single cell holds."""
    EMPTY = 0
    CROSS = 1
    NOUGHT = 2

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board."""
        return GameConfig.MARK_SYMBOLS[self.value]


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid coordinate or size
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Board:
    """
    A square N×N grid of CellMark values.

    The grid is a numpy int8 array holding the CellMark values. The size is
    fixed at construction and the only way to change the grid is place(),
    which only ever fills an EMPTY cell.
    """

    def __init__(self, size: int = GameConfig.DEFAULT_BOARD_SIZE):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns). Must be at least 3.

        Raises:
            InvalidConfiguration: If size is not an integer >= 3.
        """
        if not _is_int(size) or size < GameConfig.MIN_BOARD_SIZE:
            raise InvalidConfiguration(
                f"Board size must be an integer >= {GameConfig.MIN_BOARD_SIZE}, got {size!r}"
            )

        self._size = int(size)
        self._grid = np.zeros((self._size, self._size), dtype=np.int8)

    @property
    def size(self) -> int:
        return self._size

    def is_in_bounds(self, row: int, col: int) -> bool:
        """True if both coordinates lie in [0, size)."""
        return (
            _is_int(row) and _is_int(col)
            and 0 <= row < self._size
            and 0 <= col < self._size
        )

    def mark_at(self, row: int, col: int) -> CellMark:
        """
        Read a cell.

        Raises:
            OutOfBounds: If (row, col) is not on the board.
        """
        self._check_bounds(row, col)
        return CellMark(int(self._grid[row, col]))

    def place(self, row: int, col: int, mark: CellMark) -> None:
        """
        Put a mark into an empty cell.

        Args:
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).
            mark: CROSS or NOUGHT.

        Raises:
            InvalidArgument: If mark is not a CellMark or is EMPTY.
            OutOfBounds: If (row, col) is not on the board.
            CellOccupied: If the cell already holds a mark.
        """
        if not isinstance(mark, CellMark) or mark is CellMark.EMPTY:
            raise InvalidArgument(f"Cannot place {mark!r} on the board")

        self._check_bounds(row, col)

        if self._grid[row, col] != CellMark.EMPTY.value:
            raise CellOccupied(f"Cell ({row}, {col}) is already occupied")

        self._grid[row, col] = mark.value

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.is_in_bounds(row, col):
            raise OutOfBounds(
                f"Cell ({row}, {col}) is outside the {self._size}x{self._size} board"
            )

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, row by row.

        Returns:
            List of (row, col) tuples.
        """
        rows, cols = np.nonzero(self._grid == CellMark.EMPTY.value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_marks(self) -> int:
        """Number of cells that hold a mark."""
        return int(np.count_nonzero(self._grid))

    def is_full(self) -> bool:
        return self.count_marks() == self._size * self._size

    def to_array(self) -> np.ndarray:
        """A copy of the grid as CellMark values; changing it does not touch the board."""
        return self._grid.copy()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board(self._size)
        new_board._grid = self._grid.copy()
        return new_board

    def render(self) -> str:
        """
        Draw the board as text, with row and column numbers.

        Example for a 3x3 board::

              0 1 2
            0 X . .
            1 . O .
            2 . . .
        """
        width = len(str(self._size - 1))
        header = " " * (width + 1) + " ".join(str(c).rjust(width) for c in range(self._size))
        lines = [header]
        for row in range(self._size):
            cells = " ".join(
                CellMark(int(value)).symbol.rjust(width) for value in self._grid[row]
            )
            lines.append(f"{str(row).rjust(width)} {cells}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(size={self._size}, marks={self.count_marks()})"
