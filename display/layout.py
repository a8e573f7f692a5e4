"""
Board layout for Gomoku.
Works out where the grid sits inside a viewport of a given size.
"""

from typing import Tuple
from dataclasses import dataclass

from .config import DisplayConfig


@dataclass(frozen=True)
class Layout:
    """
    Pixel metrics for drawing a board.

    Grid line i (row or column) is at padding + i * cell_size pixels.
    """
    board_size: int       # Number of lines in each direction
    padding: int          # Distance from image edge to first grid line
    cell_size: int        # Distance between grid lines
    piece_radius: int     # Stone radius
    image_size: int       # Width and height of the square board image

    def grid_to_pixel(self, row: int, col: int) -> Tuple[int, int]:
        """Get the (x, y) pixel of a grid intersection."""
        return (
            self.padding + col * self.cell_size,
            self.padding + row * self.cell_size
        )

    @property
    def grid_extent(self) -> int:
        """Pixel length of one grid line."""
        return (self.board_size - 1) * self.cell_size


def compute_layout(width: int, height: int, board_size: int) -> Layout:
    """
    Fit a board into a viewport.

    The board image is a square as large as the smaller viewport side.
    Each line gets one cell of room, so the outer lines sit half a cell
    in from the edge. Leftover pixels are split evenly on both sides.

    Args:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        board_size: Number of lines on the board.

    Returns:
        Layout for drawing and click mapping.
    """
    side = max(min(width, height), 0)
    cell_size = max(side // board_size, DisplayConfig.MIN_CELL_SIZE)
    image_size = max(side, cell_size * board_size)

    leftover = image_size - cell_size * board_size
    padding = cell_size // 2 + leftover // 2

    return Layout(
        board_size=board_size,
        padding=padding,
        cell_size=cell_size,
        piece_radius=max(int(cell_size * DisplayConfig.PIECE_RATIO), 1),
        image_size=image_size
    )


def default_layout(board_size: int) -> Layout:
    """Layout using the fixed CELL_SIZE and PADDING from DisplayConfig."""
    cell_size = DisplayConfig.CELL_SIZE
    padding = DisplayConfig.PADDING
    return Layout(
        board_size=board_size,
        padding=padding,
        cell_size=cell_size,
        piece_radius=DisplayConfig.PIECE_RADIUS,
        image_size=2 * padding + (board_size - 1) * cell_size
    )
