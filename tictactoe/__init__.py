"""
N×N TicTacToe rules engine
==========================
Board state, player registration, turn enforcement and win detection for
Tic-tac-toe on any square board of size 3 or more. A win is always three
marks in a row, found by looking only at the cells around the last move.
"""

from logging import NullHandler, getLogger

from .config import GameConfig
from .board import Board, CellMark
from .win_checker import WinChecker, candidate_lines, find_winning_line, has_winning_line
from .game_state import Game, GameStatus, Move, Player
from .move_validator import MoveValidator, ValidationResult
from .errors import (
    CellOccupied,
    DuplicateMark,
    DuplicateName,
    GameEnded,
    InvalidArgument,
    InvalidConfiguration,
    MoveError,
    NotYourTurn,
    OutOfBounds,
    PlayersNotReady,
    RegistrationError,
    RosterFull,
    TicTacToeError,
    UnknownPlayer,
)

__version__ = "1.0.0"

# Silent unless the host configures logging
getLogger(__name__).addHandler(NullHandler())
