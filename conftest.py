"""Shared fixtures and helpers for the TicTacToe engine tests."""

import pytest

from tictactoe import Board, CellMark, Game


def scan_for_run(board: Board):
    """
    Brute-force search of the whole board for three identical marks in a row.

    Slow on purpose: it is the reference the O(1) checker is compared with.

    Returns:
        Set of every winning line, each as a frozenset of three cells.
    """
    runs = set()
    for row in range(board.size):
        for col in range(board.size):
            first = board.mark_at(row, col)
            if first is CellMark.EMPTY:
                continue
            for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
                cells = [(row + i * dr, col + i * dc) for i in range(3)]
                if all(board.is_in_bounds(r, c) and board.mark_at(r, c) is first for r, c in cells):
                    runs.add(frozenset(cells))
    return runs


def board_from_rows(rows):
    """Build a board from strings like "X.O" (X = CROSS, O = NOUGHT, . = empty)."""
    marks = {"X": CellMark.CROSS, "O": CellMark.NOUGHT}
    board = Board(len(rows))
    for row, line in enumerate(rows):
        for col, char in enumerate(line):
            if char in marks:
                board.place(row, col, marks[char])
    return board


@pytest.fixture
def game():
    """A 3x3 game with Alice (CROSS) and Bob (NOUGHT) registered."""
    g = Game(3)
    g.register_player("Alice", CellMark.CROSS)
    g.register_player("Bob", CellMark.NOUGHT)
    return g


@pytest.fixture
def big_game():
    """A 7x7 game with Alice (CROSS) and Bob (NOUGHT) registered."""
    g = Game(7)
    g.register_player("Alice", CellMark.CROSS)
    g.register_player("Bob", CellMark.NOUGHT)
    return g
