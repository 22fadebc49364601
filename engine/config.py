"""
Engine configuration for Gomoku.
Board dimensions, win rule constants and logging defaults.
"""

import logging


class EngineConfig:
    """
    Configuration class for the rule engine.
    Change these values to play on a different board!
    """

    # ==================== BOARD SETTINGS ====================
    # Standard Gomoku board is 15x15
    BOARD_SIZE = 15

    # ==================== WIN RULE ====================
    # Stones in an unbroken line needed to win
    WIN_LENGTH = 5

    # How far to walk from the last stone in each direction
    # (WIN_LENGTH - 1 covers every line through the stone)
    MAX_SCAN_STEPS = WIN_LENGTH - 1

    # Line orientations scanned for a win, as (d_row, d_col)
    DIRECTIONS = (
        (0, 1),   # horizontal
        (1, 0),   # vertical
        (1, 1),   # diagonal down-right
        (1, -1),  # diagonal up-right
    )

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    def center(self, board_size: int = BOARD_SIZE) -> int:
        """Index of the center row/column for a board of this size."""
        return board_size // 2
