"""
Input mapper for Gomoku.
Turns a click or touch position into the nearest grid intersection.
"""

import math
from typing import Tuple

from .layout import Layout


class InputMapper:
    """
    Maps pixel coordinates to (row, col).

    Results are not clipped to the board. A click in the margin can map
    to row -1 or row 15; the game engine rejects those itself.
    """

    def __init__(self, offset_x: int = 0, offset_y: int = 0):
        """
        Args:
            offset_x: Left edge of the board image inside the widget.
            offset_y: Top edge of the board image inside the widget.
        """
        self.offset_x = offset_x
        self.offset_y = offset_y

    def set_offset(self, offset_x: int, offset_y: int):
        """Update where the board image is drawn inside the widget."""
        self.offset_x = offset_x
        self.offset_y = offset_y

    def to_cell(self, x: float, y: float, layout: Layout) -> Tuple[int, int]:
        """
        Get the grid intersection nearest to a pixel.

        Args:
            x: Pixel x inside the widget.
            y: Pixel y inside the widget.
            layout: Current board layout.

        Returns:
            (row, col), possibly outside the board.
        """
        col = _round_half_up((x - self.offset_x - layout.padding) / layout.cell_size)
        row = _round_half_up((y - self.offset_y - layout.padding) / layout.cell_size)
        return row, col


def _round_half_up(value: float) -> int:
    # round() would send 0.5 to 0 and 1.5 to 2
    return int(math.floor(value + 0.5))
