"""Turn-based tic-tac-toe game logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import product

from .simulation import Simulation

BOARD_SIZE = 3


class Tile(Enum):
    """State of one board cell."""

    EMPTY = "empty"
    X = "x"
    O = "o"  # noqa: E741


class Player(Enum):
    """A player's marker."""

    X = "x"
    O = "o"  # noqa: E741

    def opponent(self) -> Player:
        """The other player."""
        return Player.O if self is Player.X else Player.X

    def to_tile(self) -> Tile:
        """The tile this player places on the board."""
        return Tile.X if self is Player.X else Tile.O


class GameStateKind(Enum):
    """Phase of a game."""

    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameState:
    """Current phase of a game, with the winner once someone has won."""

    kind: GameStateKind
    winner: Player | None = None

    @classmethod
    def playing(cls) -> GameState:
        return cls(GameStateKind.PLAYING)

    @classmethod
    def won(cls, player: Player) -> GameState:
        return cls(GameStateKind.WON, player)

    @classmethod
    def draw(cls) -> GameState:
        return cls(GameStateKind.DRAW)


@dataclass
class Score:
    """Results tallied across several games."""

    wins: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    draws: int = 0


def _empty_board() -> list[list[Tile]]:
    return [[Tile.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    *(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
    tuple((i, i) for i in range(BOARD_SIZE)),
    tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
)


class TicTacToeSimulation(Simulation):
    """A 3x3 tic-tac-toe game; scores survive a reset."""

    name = "tictactoe"

    def __init__(self) -> None:
        self._board = _empty_board()
        self._current_player = Player.X
        self._game_state = GameState.playing()
        self._score = Score()

    @property
    def board(self) -> tuple[tuple[Tile, ...], ...]:
        """The board, indexed as ``board[row][col]``."""
        return tuple(tuple(row) for row in self._board)

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @property
    def score(self) -> Score:
        return self._score

    @property
    def draws(self) -> int:
        return self._score.draws

    def wins(self, player: Player) -> int:
        """Number of games ``player`` has won."""
        return self._score.wins[player]

    def make_move(self, row: int, col: int) -> bool:
        """Place the current player's piece; return whether the move was made."""
        if self._game_state.kind is not GameStateKind.PLAYING:
            return False
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return False
        if self._board[row][col] is not Tile.EMPTY:
            return False

        self._board[row][col] = self._current_player.to_tile()

        if self._has_won(self._current_player):
            self._game_state = GameState.won(self._current_player)
            self._score.wins[self._current_player] += 1
        elif self._is_board_full():
            self._game_state = GameState.draw()
            self._score.draws += 1
        else:
            self._current_player = self._current_player.opponent()
        return True

    def reset(self) -> None:
        """Clear the board for a new game, keeping the scores."""
        self._board = _empty_board()
        self._current_player = Player.X
        self._game_state = GameState.playing()

    def tick(self, delta_time: float) -> None:
        """Turn-based: nothing advances with time."""

    def _has_won(self, player: Player) -> bool:
        tile = player.to_tile()
        return any(
            all(self._board[r][c] is tile for r, c in line) for line in _LINES
        )

    def _is_board_full(self) -> bool:
        return all(
            self._board[r][c] is not Tile.EMPTY
            for r, c in product(range(BOARD_SIZE), repeat=2)
        )