"""
Gomoku Rule Engine
==================
Board model, five-in-a-row detection, undo history and a simple
center-proximity hint for two-player Gomoku on an NxN board.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .game_state import GameState, GameStatus, Player, Cell, Move, Outcome, Scores
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker
from .hint_advisor import HintAdvisor
from .game_engine import GameEngine, MoveResult
