"""
Win checker for Gomoku.
Checks whether the last stone placed completes five in a row.
"""

from typing import Optional, List, Tuple

import numpy as np

from .config import EngineConfig
from .game_state import Cell


class WinChecker:
    """
    Checks for win conditions in Gomoku.

    Win condition: WIN_LENGTH (5) or more stones of the same color in an
    unbroken line (horizontally, vertically, or diagonally).

    Only lines through the last stone are inspected. For each of the four
    orientations we walk at most MAX_SCAN_STEPS cells each way, so a check
    never looks at more than 8 neighbours per orientation.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the win checker.

        Args:
            config: Engine configuration.
        """
        self.config = config or EngineConfig()

    def check_win(self, board: np.ndarray, row: int, col: int) -> bool:
        """
        Check if the stone at (row, col) is part of a winning line.

        Args:
            board: NxN array of Cell values.
            row: Row of the stone just placed.
            col: Column of the stone just placed.

        Returns:
            True if the stone completes a line of WIN_LENGTH or more.
        """
        return self.get_winning_line(board, row, col) is not None

    def get_winning_line(
        self,
        board: np.ndarray,
        row: int,
        col: int
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line through (row, col) if there is one.

        Args:
            board: NxN array of Cell values.
            row: Row of the stone just placed.
            col: Column of the stone just placed.

        Returns:
            The cells of the run in line order, or None.
        """
        stone = board[row, col]
        if stone == Cell.EMPTY:
            return None

        for d_row, d_col in self.config.DIRECTIONS:
            forward = self._walk(board, row, col, d_row, d_col, stone)
            backward = self._walk(board, row, col, -d_row, -d_col, stone)

            # count starts at 1 for the stone itself
            if 1 + len(forward) + len(backward) >= self.config.WIN_LENGTH:
                return list(reversed(backward)) + [(row, col)] + forward

        return None

    def _walk(
        self,
        board: np.ndarray,
        row: int,
        col: int,
        d_row: int,
        d_col: int,
        stone: int
    ) -> List[Tuple[int, int]]:
        """Collect same-colored cells from (row, col) in one direction, origin excluded."""
        size = board.shape[0]
        cells = []
        for step in range(1, self.config.MAX_SCAN_STEPS + 1):
            r = row + d_row * step
            c = col + d_col * step
            if not (0 <= r < size and 0 <= c < size):
                break
            if board[r, c] != stone:
                break
            cells.append((r, c))
        return cells
