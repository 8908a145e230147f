"""
Game state management for the N×N TicTacToe engine.
Tracks the board, the two players, whose turn it is, and the result.
"""

from dataclasses import dataclass, replace
from enum import Enum
from logging import getLogger
from typing import List, Optional, Tuple, Union

from .board import Board, CellMark
from .config import GameConfig
from .errors import (
    CellOccupied,
    DuplicateMark,
    DuplicateName,
    GameEnded,
    InvalidArgument,
    NotYourTurn,
    PlayersNotReady,
    RosterFull,
    UnknownPlayer,
)
from .win_checker import Line, WinChecker

logger = getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """A registered player: a unique name and the mark they place."""
    name: str
    mark: CellMark

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument("Player name cannot be empty")
        if not isinstance(self.mark, CellMark) or self.mark is CellMark.EMPTY:
            raise InvalidArgument(f"Player mark must be CROSS or NOUGHT, got {self.mark!r}")


# ==================== ROSTER ====================
# Registration only ever moves forward: NoPlayers -> OnePlayer -> TwoPlayers.
# A second player without a first one cannot be expressed.

@dataclass(frozen=True)
class NoPlayers:
    pass


@dataclass(frozen=True)
class OnePlayer:
    first: Player


@dataclass(frozen=True)
class TwoPlayers:
    first: Player
    second: Player


Roster = Union[NoPlayers, OnePlayer, TwoPlayers]


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    AWAITING_PLAYERS = "awaiting_players"
    READY = "ready"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.DRAWN)


@dataclass(frozen=True)
class Move:
    """One accepted play, kept in Game.moves in the order it happened."""
    player: Player
    row: int
    col: int
    move_number: int        # 1 for the opening move


class Game:
    """
    The complete state of one N×N TicTacToe game.

    Usage:
        game = Game(3)
        game.register_player("Alice", CellMark.CROSS)
        game.register_player("Bob", CellMark.NOUGHT)
        won = game.play("Alice", 1, 1)

    Not thread safe: a host that takes moves from several callers must
    serialize register_player()/play() per game.
    """

    def __init__(self, size: int = GameConfig.DEFAULT_BOARD_SIZE):
        """
        Create a game on an empty size x size board.

        Raises:
            InvalidConfiguration: If size is not an integer >= 3.
        """
        self._board = Board(size)
        self._roster: Roster = NoPlayers()
        self._win_checker = WinChecker()

        self._last_played: Optional[Player] = None
        self._plays = 0
        self._moves: List[Move] = []

        self._has_game_ended = False
        self._winner: Optional[Player] = None
        self._winning_line: Optional[Line] = None

    # ==================== OBSERVERS ====================

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def board(self) -> Board:
        """A copy of the board. Moves only go through play()."""
        return self._board.copy()

    @property
    def player_a(self) -> Optional[Player]:
        if isinstance(self._roster, (OnePlayer, TwoPlayers)):
            return self._roster.first
        return None

    @property
    def player_b(self) -> Optional[Player]:
        if isinstance(self._roster, TwoPlayers):
            return self._roster.second
        return None

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(p for p in (self.player_a, self.player_b) if p is not None)

    @property
    def winner(self) -> Optional[Player]:
        """Snapshot of the winning player, or None (no result yet, or a draw)."""
        return self._winner

    @property
    def winning_line(self) -> Optional[Line]:
        return self._winning_line

    @property
    def last_played(self) -> Optional[Player]:
        return self._last_played

    @property
    def plays(self) -> int:
        return self._plays

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def has_game_ended(self) -> bool:
        return self._has_game_ended

    @property
    def is_draw(self) -> bool:
        return self._has_game_ended and self._winner is None

    @property
    def status(self) -> GameStatus:
        if self._has_game_ended:
            return GameStatus.WON if self._winner is not None else GameStatus.DRAWN
        if not isinstance(self._roster, TwoPlayers):
            return GameStatus.AWAITING_PLAYERS
        if self._plays == 0:
            return GameStatus.READY
        return GameStatus.IN_PROGRESS

    @property
    def current_player(self) -> Optional[Player]:
        """
        The player expected to move next.

        None before the first move (either player may open), while players
        are missing, and once the game has ended.
        """
        if self._has_game_ended or self._last_played is None:
            return None
        if not isinstance(self._roster, TwoPlayers):
            return None
        if self._last_played.name == self._roster.first.name:
            return self._roster.second
        return self._roster.first

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        return self._board.get_empty_cells()

    def get_state(self) -> dict:
        """
        The game as plain data, for hosts that need to send or show it.

        Returns:
            dict with the board (rows of mark names), players, status and result.
        """
        def player_dict(player: Optional[Player]) -> Optional[dict]:
            if player is None:
                return None
            return {"name": player.name, "mark": player.mark.name}

        return {
            "size": self.size,
            "board": [
                [CellMark(int(value)).name for value in row]
                for row in self._board.to_array()
            ],
            "players": [player_dict(p) for p in (self.player_a, self.player_b)],
            "status": self.status.value,
            "plays": self._plays,
            "last_played": player_dict(self._last_played),
            "winner": player_dict(self._winner),
            "winning_line": [list(cell) for cell in self._winning_line] if self._winning_line else None,
            "game_over": self._has_game_ended,
        }

    # ==================== REGISTRATION ====================

    def register_player(self, name: str, mark: CellMark) -> Player:
        """
        Register the next player.

        The first call registers player A, the second player B.

        Args:
            name: Display name, unique within the game.
            mark: CROSS or NOUGHT, different from the other player's.

        Returns:
            The registered Player.

        Raises:
            RosterFull: If two players are already registered.
            InvalidArgument: If name is blank or mark is EMPTY.
            DuplicateName: If player A already uses this name.
            DuplicateMark: If player A already uses this mark.
        """
        if isinstance(self._roster, TwoPlayers):
            raise RosterFull("Players already registered")

        player = Player(name, mark)

        if isinstance(self._roster, NoPlayers):
            self._roster = OnePlayer(player)
        else:
            first = self._roster.first
            if first.name == player.name:
                raise DuplicateName(f"Name {player.name!r} already registered")
            if first.mark is player.mark:
                raise DuplicateMark(f"Mark {player.mark.name} already registered")
            self._roster = TwoPlayers(first, player)

        logger.debug("Registered %s as %s", player.name, player.mark.name)
        return player

    # ==================== MOVES ====================

    def check_move(self, name: str, row: int, col: int) -> Player:
        """
        Run every check play() runs, without changing anything.

        Returns:
            The player who would make the move.

        Raises:
            GameEnded, InvalidArgument, UnknownPlayer, PlayersNotReady,
            NotYourTurn, OutOfBounds, CellOccupied: in that order of checking.
        """
        if self._has_game_ended:
            raise GameEnded("Game has ended")

        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("Player name cannot be empty")

        player = self._find_player(name)
        if player is None:
            raise UnknownPlayer(f"Invalid player {name!r}")

        if not isinstance(self._roster, TwoPlayers):
            raise PlayersNotReady("Both players must register before the first move")

        if self._last_played is not None and self._last_played.name == name:
            raise NotYourTurn(f"Not your turn {name}")

        # Raises OutOfBounds for coordinates off the board
        if self._board.mark_at(row, col) is not CellMark.EMPTY:
            raise CellOccupied(f"Cell ({row}, {col}) is already occupied")

        return player

    def play(self, name: str, row: int, col: int) -> bool:
        """
        Place the named player's mark at (row, col).

        Args:
            name: The registered name of the player moving.
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).

        Returns:
            True if this move won the game.

        Raises:
            See check_move(). A move that raises changes nothing.
        """
        player = self.check_move(name, row, col)

        self._board.place(row, col, player.mark)
        self._plays += 1
        self._last_played = player
        self._moves.append(Move(player=player, row=row, col=col, move_number=self._plays))

        line = self._win_checker.get_winning_line(self._board, row, col)
        if line is not None:
            self._has_game_ended = True
            self._winner = replace(player)
            self._winning_line = line
            logger.debug("%s wins with %s after %d plays", player.name, line, self._plays)
            return True

        if self._plays == self.size * self.size:
            self._has_game_ended = True
            logger.debug("Board full after %d plays, game drawn", self._plays)
        else:
            logger.debug("%s played (%d, %d)", player.name, row, col)

        return False

    def _find_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def __str__(self) -> str:
        lines = [self._board.render()]
        if self.status is GameStatus.WON:
            lines.append(f"{self._winner.name} ({self._winner.mark.symbol}) wins!")
        elif self.status is GameStatus.DRAWN:
            lines.append("It's a draw!")
        elif self.current_player is not None:
            lines.append(f"Current turn: {self.current_player.name}")
        return "\n".join(lines)
