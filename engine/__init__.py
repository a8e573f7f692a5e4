"""
Game engine for Gomoku (five in a row).
Handles the board, move rules, win detection and turn order.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board_state import BoardState, Player, OutOfBoundsError
from .turn_manager import TurnManager
from .game_state import GameState, GameStatus, StatusKind
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker
from .game_controller import GameController, MoveResult
