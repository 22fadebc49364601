"""
Game state management for Gomoku.
Tracks the board, current player, move history, outcome and scores.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import EngineConfig


class Player(Enum):
    """The two players in the game."""
    BLACK = "black"
    WHITE = "white"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    @property
    def cell(self) -> "Cell":
        """The board value of this player's stones."""
        return Cell.BLACK if self == Player.BLACK else Cell.WHITE


class Cell(IntEnum):
    """What a single board position holds."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def player(self) -> Optional[Player]:
        """The owner of this stone, or None for an empty cell."""
        if self == Cell.BLACK:
            return Player.BLACK
        if self == Cell.WHITE:
            return Player.WHITE
        return None


@dataclass(frozen=True)
class Move:
    """
    A stone placed on the board.
    """
    row: int                # Row (0 to N-1)
    col: int                # Column (0 to N-1)
    player: Player          # Who placed it


class Outcome(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    InProgress, Won(player) or Draw.

    `winner` is only set when the outcome is WON.
    """
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    def __str__(self) -> str:
        if self.outcome == Outcome.WON:
            return f"won({self.winner.value})"
        return self.outcome.value


@dataclass
class Scores:
    """Games won by each player in this session."""
    black: int = 0
    white: int = 0

    def award(self, player: Player):
        if player == Player.BLACK:
            self.black += 1
        else:
            self.white += 1

    def copy(self) -> "Scores":
        return Scores(black=self.black, white=self.white)


@dataclass
class GameState:
    """
    The complete state of a Gomoku game.

    Tracks:
    - The NxN board (numpy int8 array of Cell values)
    - Current player
    - Move history
    - Game status (in progress, won, draw)
    - Session scores and the last hint

    GameState does not check the rules; that is the job of
    MoveValidator and WinChecker.
    """

    size: int = EngineConfig.BOARD_SIZE

    board: np.ndarray = field(init=False, repr=False, compare=False)
    current_player: Player = field(init=False)
    moves: List[Move] = field(init=False)
    status: GameStatus = field(init=False)

    # Scores survive clear(), so they are not reset with the board
    scores: Scores = field(default_factory=Scores)
    hint: Optional[Tuple[int, int]] = None

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Board size must be at least 1, got {self.size}")
        self.clear()

    def clear(self):
        """Start a new game on an empty board. Scores are kept."""
        self.board = np.full((self.size, self.size), Cell.EMPTY, dtype=np.int8)
        self.current_player = Player.BLACK
        self.moves = []
        self.status = GameStatus.in_progress()
        self.hint = None

    def in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) are integer indices on the board. bool is not an index."""
        for index in (row, col):
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                return False
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col). Raises IndexError when off the board."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        return Cell(int(self.board[row, col]))

    def place_stone(self, row: int, col: int) -> Move:
        """
        Put the current player's stone at (row, col) and record the move.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The recorded Move.
        """
        move = Move(row=row, col=col, player=self.current_player)
        self.board[row, col] = self.current_player.cell
        self.moves.append(move)
        return move

    def pop_move(self) -> Optional[Move]:
        """Take the last stone off the board. Returns None if there is none."""
        if not self.moves:
            return None
        move = self.moves.pop()
        self.board[move.row, move.col] = Cell.EMPTY
        return move

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        return [(int(r), int(c)) for r, c in np.argwhere(self.board == Cell.EMPTY)]

    def is_full(self) -> bool:
        return not bool(np.any(self.board == Cell.EMPTY))

    def render(self) -> str:
        """Text picture of the board: X for black, O for white."""
        symbols = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}
        lines = ["   " + " ".join(f"{c:2}" for c in range(self.size))]
        for r in range(self.size):
            row_cells = []
            for c in range(self.size):
                if self.hint == (r, c):
                    row_cells.append(" *")
                else:
                    row_cells.append(" " + symbols[Cell(int(self.board[r, c]))])
            lines.append(f"{r:2} " + " ".join(row_cells))
        return "\n".join(lines)
