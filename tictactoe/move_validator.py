"""
Move validator for the N×N TicTacToe engine.
Lets a host ask whether a move is legal without catching exceptions.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import TicTacToeError
from .game_state import Game


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[TicTacToeError] = None


class MoveValidator:
    """
    Validates TicTacToe moves against a Game.

    Uses exactly the checks Game.play() uses, so a move that validates
    will not be rejected by play() on the same, unchanged game.
    """

    def validate_move(self, game: Game, name: str, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: The game to check against. It is not modified.
            name: Name of the player who wants to move.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid, and the error when it is not.
        """
        try:
            game.check_move(name, row, col)
        except TicTacToeError as e:
            return ValidationResult(is_valid=False, error_message=str(e), error=e)

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game: Game) -> List[Tuple[int, int]]:
        """
        Get every cell a mark could still go into.

        Returns:
            List of (row, col) positions; empty once the game is over.
        """
        if game.has_game_ended:
            return []

        return game.get_empty_cells()
