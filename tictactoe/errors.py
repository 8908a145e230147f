"""
Errors raised by the TicTacToe engine.

Every error is raised straight to the caller. The engine never retries
and never swallows them, and a call that raises has changed nothing.
"""


class TicTacToeError(Exception):
    """Base class for every rule violation raised by the engine."""


class InvalidConfiguration(TicTacToeError, ValueError):
    """The board size is not an integer of at least 3."""


class InvalidArgument(TicTacToeError, ValueError):
    """A blank player name or an unusable mark was supplied."""


# ==================== REGISTRATION ====================

class RegistrationError(TicTacToeError):
    pass


class DuplicateName(RegistrationError):
    """The second player tried to register with the first player's name."""


class DuplicateMark(RegistrationError):
    """The second player tried to register with the first player's mark."""


class RosterFull(RegistrationError):
    """Both player slots are already taken."""


# ==================== MOVES ====================

class MoveError(TicTacToeError):
    pass


class GameEnded(MoveError):
    """The game is already won or drawn."""


class UnknownPlayer(MoveError):
    """The name does not belong to either registered player."""


class PlayersNotReady(MoveError):
    """A move was attempted before both players registered."""


class NotYourTurn(MoveError):
    """The same player tried to move twice in a row."""


class OutOfBounds(MoveError, IndexError):
    """Coordinates fall outside the board."""


class CellOccupied(MoveError):
    """The target cell already holds a mark."""
