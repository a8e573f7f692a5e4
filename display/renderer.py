"""
Board renderer for Gomoku.
Draws the board, stones and highlights into an OpenCV (BGR) image.
"""

import cv2
import numpy as np
from typing import Optional, List, Tuple, Sequence

from engine.board_state import Cell, Player
from .config import DisplayConfig
from .layout import Layout


def star_points(board_size: int) -> List[Tuple[int, int]]:
    """
    Get the decorative star points for a board.

    A 15x15 board gets the centre (7, 7) and the four points three lines
    in from each corner. Small boards only get the centre.
    """
    points = []
    center = board_size // 2
    if board_size % 2 == 1:
        points.append((center, center))

    if board_size >= DisplayConfig.STAR_POINT_MIN_BOARD:
        near = DisplayConfig.STAR_POINT_OFFSET
        far = board_size - 1 - DisplayConfig.STAR_POINT_OFFSET
        points.extend([(near, near), (near, far), (far, near), (far, far)])

    return points


class BoardRenderer:
    """
    Renders a board snapshot to an image.

    The renderer only reads the snapshot it is given; it never touches
    the game itself.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    def render(
        self,
        snapshot: Sequence[Sequence[Cell]],
        layout: Layout,
        last_move: Optional[Tuple[int, int]] = None,
        winning_line: Optional[List[Tuple[int, int]]] = None
    ) -> np.ndarray:
        """
        Draw the full board.

        Args:
            snapshot: Grid of cells (None, Player.BLACK or Player.WHITE).
            layout: Pixel metrics to draw with.
            last_move: Cell to mark as the newest stone.
            winning_line: Cells to connect with the win highlight.

        Returns:
            BGR image of shape (image_size, image_size, 3).
        """
        image = self.draw_board(layout)

        for row, cells in enumerate(snapshot):
            for col, cell in enumerate(cells):
                if cell is not None:
                    self.draw_piece(image, layout, row, col, cell)

        if winning_line:
            self._draw_winning_line(image, layout, winning_line)

        if last_move is not None:
            x, y = layout.grid_to_pixel(*last_move)
            radius = max(layout.piece_radius // 4, 2)
            cv2.circle(image, (x, y), radius, self.config.LAST_MOVE_COLOR, -1, cv2.LINE_AA)

        return image

    def draw_board(self, layout: Layout) -> np.ndarray:
        """Draw the empty board: background, grid lines and star points."""
        size = layout.image_size
        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        start = layout.padding
        end = layout.padding + layout.grid_extent

        for i in range(layout.board_size):
            offset = layout.padding + i * layout.cell_size
            # Horizontal line
            cv2.line(image, (start, offset), (end, offset),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)
            # Vertical line
            cv2.line(image, (offset, start), (offset, end),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)

        for row, col in star_points(layout.board_size):
            cv2.circle(image, layout.grid_to_pixel(row, col),
                       self.config.STAR_POINT_RADIUS, self.config.GRID_COLOR,
                       -1, cv2.LINE_AA)

        return image

    def draw_piece(self, image: np.ndarray, layout: Layout, row: int, col: int, player: Player):
        """
        Draw one stone with a small highlight so it looks rounded.
        """
        x, y = layout.grid_to_pixel(row, col)
        radius = layout.piece_radius

        if player == Player.BLACK:
            base = self.config.BLACK_STONE_COLOR
            highlight = self.config.BLACK_STONE_HIGHLIGHT
            border = self.config.BLACK_STONE_BORDER
        else:
            base = self.config.WHITE_STONE_COLOR
            highlight = self.config.WHITE_STONE_HIGHLIGHT
            border = self.config.WHITE_STONE_BORDER

        cv2.circle(image, (x, y), radius, base, -1, cv2.LINE_AA)

        # Light comes from the top left
        shift = max(radius // 3, 1)
        cv2.circle(image, (x - shift, y - shift), max(radius // 3, 1), highlight, -1, cv2.LINE_AA)

        cv2.circle(image, (x, y), radius, border, 1, cv2.LINE_AA)

    def _draw_winning_line(self, image: np.ndarray, layout: Layout, cells: List[Tuple[int, int]]):
        start = layout.grid_to_pixel(*cells[0])
        end = layout.grid_to_pixel(*cells[-1])
        cv2.line(image, start, end, self.config.WIN_LINE_COLOR,
                 self.config.WIN_LINE_THICKNESS, cv2.LINE_AA)
