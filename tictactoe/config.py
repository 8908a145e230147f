"""
Game configuration for the N×N TicTacToe engine.
All the fixed rules and constants live here.
"""


class GameConfig:
    """
    Configuration class for the rules engine.
    These are rules of the game, not user settings.
    """

    # ==================== BOARD SETTINGS ====================
    # Smallest board that can hold a line of three
    MIN_BOARD_SIZE = 3

    # Board size used when a Game is created without one
    DEFAULT_BOARD_SIZE = 3

    # ==================== WIN SETTINGS ====================
    # A win is always exactly 3 marks in a row. Informational only: the
    # +1/+2 offsets in win_checker.candidate_lines assume this value.
    WIN_LENGTH = 3

    # Compass directions as (d_row, d_col), clockwise starting from north
    DIRECTIONS = (
        (-1, 0),   # N
        (-1, 1),   # NE
        (0, 1),    # E
        (1, 1),    # SE
        (1, 0),    # S
        (1, -1),   # SW
        (0, -1),   # W
        (-1, -1),  # NW
    )

    # One direction per axis, used when the played cell sits in the middle
    # of the line. The opposite half of each axis is the negated vector.
    MIDDLE_AXES = (
        (-1, 0),   # N  (vertical)
        (0, 1),    # E  (horizontal)
        (-1, 1),   # NE (anti-diagonal)
        (1, 1),    # SE (main diagonal)
    )

    # ==================== DISPLAY SETTINGS ====================
    # Symbols used by Board.render(), keyed by CellMark value
    MARK_SYMBOLS = {
        0: ".",
        1: "X",
        2: "O",
    }
