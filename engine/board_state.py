"""
Board state for Gomoku.
Owns the grid and which player occupies each intersection.
"""

import numbers
from enum import Enum
from typing import Optional, List, Tuple

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    BLACK = 1
    WHITE = 2

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


# A cell is either empty (None) or holds a player's stone
Cell = Optional[Player]


class OutOfBoundsError(IndexError):
    """Raised when a cell outside the board is read."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"Position ({row}, {col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class BoardState:
    """
    A square Gomoku board.

    The size is fixed when the board is created. Once a stone is placed
    it stays until the whole board is reset.
    """

    def __init__(self, size: int = GameConfig.BOARD_SIZE):
        """
        Create an empty board.

        Args:
            size: Number of lines in each direction (default: 15).
        """
        if size < GameConfig.MIN_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at least {GameConfig.MIN_BOARD_SIZE}, got {size}"
            )
        self._size = size
        self._grid: List[List[Cell]] = self._empty_grid()
        self._stones = 0

    def _empty_grid(self) -> List[List[Cell]]:
        return [[None for _ in range(self._size)] for _ in range(self._size)]

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, row, col) -> bool:
        """Check if (row, col) is on the board. Non-integer indices never are."""
        for index in (row, col):
            if not isinstance(index, numbers.Integral) or isinstance(index, bool):
                return False
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, row: int, col: int) -> Cell:
        """
        Get the stone at a position.

        Args:
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).

        Returns:
            The Player whose stone is there, or None if empty.

        Raises:
            OutOfBoundsError: If the position is not on the board.
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._size)
        return self._grid[row][col]

    def set(self, row: int, col: int, player: Player):
        """
        Place a stone. The caller checks the move with MoveValidator first.
        """
        if self._grid[row][col] is None:
            self._stones += 1
        self._grid[row][col] = player

    def is_full(self) -> bool:
        """True if no empty intersection remains."""
        return self._stones == self._size * self._size

    def reset(self):
        """Clear every stone, keeping the same size."""
        self._grid = self._empty_grid()
        self._stones = 0

    def stone_count(self) -> int:
        """Number of stones on the board."""
        return self._stones

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Read-only copy of the grid for renderers."""
        return tuple(tuple(row) for row in self._grid)

    def to_text(self) -> str:
        """
        Draw the board as text. X is Black, O is White, . is empty.
        """
        symbols = {None: ".", Player.BLACK: "X", Player.WHITE: "O"}
        width = len(str(self._size - 1))

        header = " " * (width + 1) + " ".join(
            str(col % 10) for col in range(self._size)
        )
        lines = [header]
        for row in range(self._size):
            cells = " ".join(symbols[cell] for cell in self._grid[row])
            lines.append(f"{row:>{width}} {cells}")
        return "\n".join(lines)
