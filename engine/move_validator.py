"""
Move validator for Gomoku.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import GameState, Cell


class MoveError(Enum):
    """Why a move was rejected."""
    GAME_ALREADY_OVER = "game_already_over"
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Gomoku moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the stone.
            col: Column to place the stone.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if game_state.status.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_ALREADY_OVER,
                error_message=f"Game is already over ({game_state.status})"
            )

        if not game_state.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_BOUNDS,
                error_message=(
                    f"Invalid position ({row}, {col}). "
                    f"Must be 0-{game_state.size - 1}."
                )
            )

        occupant = game_state.cell_at(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.player.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.status.is_terminal:
            return []
        return game_state.get_empty_cells()
