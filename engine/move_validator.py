"""
Move validator for Gomoku.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .board_state import BoardState
from .game_state import GameStatus


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Gomoku moves.

    Rules, checked in this order:
    1. Position must be a whole-number intersection on the board
    2. Can only place on empty intersections
    3. Game must not be over
    """

    def validate_move(
        self,
        board: BoardState,
        status: GameStatus,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move. Nothing is changed.

        Args:
            board: Current board.
            status: Current game status.
            row: Row to place the stone.
            col: Column to place the stone.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_BOUNDS,
                error_message=(
                    f"Invalid position ({row!r}, {col!r}). Must be integers 0-{board.size - 1}."
                )
            )

        occupant = board.get(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=(
                    f"Cell ({row}, {col}) is already occupied by {occupant.display_name}"
                )
            )

        if status.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        return ValidationResult(is_valid=True)
