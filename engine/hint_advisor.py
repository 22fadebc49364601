"""
Hint advisor for Gomoku.
Suggests an empty cell close to the center of the board.
"""

from typing import Optional, Tuple

import numpy as np

from .config import EngineConfig
from .game_state import GameState, Cell


class HintAdvisor:
    """
    Suggests a move by center proximity.

    This is not a move evaluator: it ignores every stone on the board
    except to skip occupied cells. The suggestion is the empty cell with
    the smallest Manhattan distance to (N // 2, N // 2); on a tie the
    first cell in row-major order wins.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def suggest(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get a suggested cell for the current player.

        Args:
            game_state: Current game state.

        Returns:
            (row, col) of the suggestion, or None if the game is over
            or no empty cell is left.
        """
        if game_state.status.is_terminal:
            return None

        # argwhere yields row-major order, argmin keeps the first minimum
        empty = np.argwhere(game_state.board == Cell.EMPTY)
        if len(empty) == 0:
            return None

        center = self.config.center(game_state.size)
        distances = np.abs(empty - center).sum(axis=1)
        row, col = empty[int(np.argmin(distances))]
        return int(row), int(col)
