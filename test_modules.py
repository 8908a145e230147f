"""
Smoke test for the TicTacToe engine modules.
Run this as a script to check every component before embedding the engine:

    python test_modules.py
"""

import sys
import traceback


def check_config():
    """Check the game configuration."""
    print("\n=== Checking Game Config ===")
    try:
        from tictactoe.config import GameConfig
        print(f"  Minimum board size: {GameConfig.MIN_BOARD_SIZE}")
        print(f"  Win length: {GameConfig.WIN_LENGTH}")
        print(f"  Directions: {len(GameConfig.DIRECTIONS)}")
        assert len(GameConfig.DIRECTIONS) == 8
        assert len(GameConfig.MIDDLE_AXES) == 4
        print("  ✓ Game config OK")
        return True
    except Exception as e:
        print(f"  ✗ Game config FAILED: {e}")
        return False


def check_board():
    """Check the board."""
    print("\n=== Checking Board ===")
    try:
        from tictactoe.board import Board, CellMark

        board = Board(4)
        board.place(1, 2, CellMark.CROSS)
        print(f"  Placed CROSS at (1,2), empty cells left: {len(board.get_empty_cells())}")
        print(board.render())
        assert board.mark_at(1, 2) is CellMark.CROSS
        print("  ✓ Board OK")
        return True
    except Exception as e:
        print(f"  ✗ Board FAILED: {e}")
        traceback.print_exc()
        return False


def check_game_logic():
    """Play the example game: Alice wins on the top row."""
    print("\n=== Checking Game Logic ===")
    try:
        from tictactoe.board import CellMark
        from tictactoe.game_state import Game, GameStatus
        from tictactoe.move_validator import MoveValidator
        from tictactoe.win_checker import WinChecker

        game = Game(3)
        game.register_player("Alice", CellMark.CROSS)
        game.register_player("Bob", CellMark.NOUGHT)
        print(f"  Status after registration: {game.status.value}")

        validator = MoveValidator()
        result = validator.validate_move(game, "Alice", 0, 0)
        print(f"  Validate Alice (0,0): valid={result.is_valid}")

        moves = [("Alice", 0, 0), ("Bob", 1, 1), ("Alice", 0, 1), ("Bob", 2, 2), ("Alice", 0, 2)]
        for name, row, col in moves:
            won = game.play(name, row, col)
            print(f"  {name} plays ({row},{col}) -> won={won}")

        print(game)
        assert game.status is GameStatus.WON
        assert game.winner.name == "Alice"
        assert WinChecker().check_winner(game.board, 0, 2)
        print("  ✓ Game logic OK")
        return True
    except Exception as e:
        print(f"  ✗ Game logic FAILED: {e}")
        traceback.print_exc()
        return False


def check_errors():
    """Check that illegal moves are rejected."""
    print("\n=== Checking Errors ===")
    try:
        from tictactoe import CellMark, Game, NotYourTurn, OutOfBounds

        game = Game(3)
        game.register_player("Alice", CellMark.CROSS)
        game.register_player("Bob", CellMark.NOUGHT)
        game.play("Alice", 0, 0)

        for call, expected in [(("Alice", 1, 1), NotYourTurn), (("Bob", 3, 0), OutOfBounds)]:
            try:
                game.play(*call)
            except expected as e:
                print(f"  {call} rejected: {type(e).__name__}")
            else:
                raise AssertionError(f"{call} was not rejected")

        assert game.plays == 1
        print("  ✓ Errors OK")
        return True
    except Exception as e:
        print(f"  ✗ Errors FAILED: {e}")
        return False


CHECKS = [
    ("Game Config", check_config),
    ("Board", check_board),
    ("Game Logic", check_game_logic),
    ("Errors", check_errors),
]


def run_all_tests():
    """Run every check and return a process exit code (0 when all pass)."""
    print(f"Checking {len(CHECKS)} engine components")

    failed = [name for name, check in CHECKS if not check()]

    print("\n--- Summary ---")
    for name, _ in CHECKS:
        print(f"  {name:<12} {'failed' if name in failed else 'ok'}")

    if failed:
        print(f"\n{len(failed)} check(s) failed: {', '.join(failed)}\n")
        return 1
    print("\nEngine ready.\n")
    return 0


def test_all_modules():
    assert run_all_tests() == 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
