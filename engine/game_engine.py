"""
Game engine for Gomoku.

Ties together the game state, move validation, win detection and hints
behind the interface a UI layer talks to.
"""

import logging
from typing import Optional, List, Tuple
from dataclasses import dataclass

import numpy as np

from .config import EngineConfig
from .game_state import GameState, GameStatus, Player, Cell, Move, Scores
from .move_validator import MoveValidator, MoveError
from .win_checker import WinChecker
from .hint_advisor import HintAdvisor

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """What happened when a move was requested."""
    success: bool
    status: GameStatus
    just_won: bool = False
    just_draw: bool = False
    error: Optional[MoveError] = None
    error_message: Optional[str] = None
    move: Optional[Move] = None


class GameEngine:
    """
    Rule engine and move history for one Gomoku board.

    Game flow:
    1. apply_move() places the current player's stone
    2. The engine checks for five in a row, then for a full board
    3. If neither, the turn passes to the other player
    4. Once won or drawn, moves are rejected until restart() or undo()

    Rejected moves never change anything; they come back as a MoveResult
    with an error. The engine is single-threaded: callers must not use
    one instance from several threads at once.
    """

    def __init__(
        self,
        board_size: Optional[int] = None,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the engine.

        Args:
            board_size: Board is board_size x board_size (default: config.BOARD_SIZE).
            config: Engine configuration.
        """
        self.config = config or EngineConfig()
        size = self.config.BOARD_SIZE if board_size is None else board_size

        self._state = GameState(size=size)
        self._validator = MoveValidator()
        self._win_checker = WinChecker(self.config)
        self._hint_advisor = HintAdvisor(self.config)

        self._winning_line: Optional[List[Tuple[int, int]]] = None

        logger.debug("Created %dx%d engine", size, size)

    @property
    def board_size(self) -> int:
        return self._state.size

    # ==================== COMMANDS ====================

    def apply_move(self, row: int, col: int) -> MoveResult:
        """
        Place the current player's stone at (row, col).

        Args:
            row: Row index (0 to N-1).
            col: Column index (0 to N-1).

        Returns:
            MoveResult with the new status, or the reason for rejection.
        """
        validation = self._validator.validate_move(self._state, row, col)
        if not validation.is_valid:
            logger.info("Rejected move (%s, %s): %s", row, col, validation.error_message)
            return MoveResult(
                success=False,
                status=self._state.status,
                error=validation.error,
                error_message=validation.error_message
            )

        player = self._state.current_player
        move = self._state.place_stone(row, col)
        self._state.hint = None
        logger.debug("%s plays (%d, %d)", player.value, row, col)

        winning_line = self._win_checker.get_winning_line(self._state.board, row, col)
        if winning_line is not None:
            # Winner keeps the turn; the game is frozen on the last mover
            self._state.status = GameStatus.won(player)
            self._state.scores.award(player)
            self._winning_line = winning_line
            logger.info(
                "%s wins after %d moves (score %d-%d)",
                player.value, len(self._state.moves),
                self._state.scores.black, self._state.scores.white
            )
            return MoveResult(success=True, status=self._state.status, just_won=True, move=move)

        if self._state.is_full():
            self._state.status = GameStatus.draw()
            logger.info("Draw: board is full after %d moves", len(self._state.moves))
            return MoveResult(success=True, status=self._state.status, just_draw=True, move=move)

        self._state.current_player = player.opposite()
        return MoveResult(success=True, status=self._state.status, move=move)

    def undo(self):
        """
        Take back the last move.

        The turn goes back to whoever made that move and a finished game
        is reopened. Scores already awarded are left alone. Does nothing
        when there is no move to take back.
        """
        move = self._state.pop_move()
        if move is None:
            logger.debug("Undo ignored: no moves")
            return

        self._state.current_player = move.player
        if self._state.status.is_terminal:
            self._state.status = GameStatus.in_progress()
            self._winning_line = None
        self._state.hint = None
        logger.info("Undid %s at (%d, %d)", move.player.value, move.row, move.col)

    def restart(self):
        """Clear the board for a new game. Scores are kept."""
        self._state.clear()
        self._winning_line = None
        logger.info(
            "Restarted (score black %d, white %d)",
            self._state.scores.black, self._state.scores.white
        )

    def compute_hint(self) -> Optional[Tuple[int, int]]:
        """
        Suggest a cell near the center and remember it as the hint.

        Returns:
            (row, col), or None if the game is over.
        """
        if self._state.status.is_terminal:
            logger.info("Hint refused: game is already over")
            return None

        hint = self._hint_advisor.suggest(self._state)
        self._state.hint = hint
        logger.debug("Hint: %s", hint)
        return hint

    # ==================== QUERIES ====================

    def get_cell(self, row: int, col: int) -> Cell:
        return self._state.cell_at(row, col)

    def get_current_player(self) -> Player:
        return self._state.current_player

    def get_status(self) -> GameStatus:
        return self._state.status

    def get_scores(self) -> Scores:
        """Copy of the session scores."""
        return self._state.scores.copy()

    def get_hint(self) -> Optional[Tuple[int, int]]:
        return self._state.hint

    def get_move_count(self) -> int:
        return len(self._state.moves)

    def get_moves(self) -> Tuple[Move, ...]:
        return tuple(self._state.moves)

    def get_board(self) -> np.ndarray:
        """Copy of the board; changing it does not affect the game."""
        return self._state.board.copy()

    def get_winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Cells of the line that won the game, or None."""
        if self._winning_line is None:
            return None
        return list(self._winning_line)

    def is_board_full(self) -> bool:
        return self._state.is_full()

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells the current player may play, in row-major order."""
        return self._validator.get_valid_moves(self._state)

    def render(self) -> str:
        """Text picture of the board, hint included."""
        return self._state.render()
