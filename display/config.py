"""
Display configuration for Gomoku.
All the settings for drawing the board and mapping clicks to cells.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Colors are BGR, as OpenCV expects.
    """

    # ==================== BOARD GEOMETRY ====================
    # Classic fixed layout: 15 lines, 40px apart, 20px margin = 600px
    CELL_SIZE = 40
    PADDING = 20

    # Stone radius as a fraction of the cell size (16px at 40px cells)
    PIECE_RATIO = 0.4
    PIECE_RADIUS = int(CELL_SIZE * PIECE_RATIO)

    # Cells never shrink below this, even in a tiny window
    MIN_CELL_SIZE = 8

    # ==================== STAR POINTS ====================
    # Star points sit this many lines in from each edge
    STAR_POINT_OFFSET = 3
    STAR_POINT_RADIUS = 4
    # Boards smaller than this only get the centre point
    STAR_POINT_MIN_BOARD = 9

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (135, 184, 222)    # Burlywood (#DEB887)
    GRID_COLOR = (0, 0, 0)
    GRID_THICKNESS = 1

    BLACK_STONE_COLOR = (0, 0, 0)
    BLACK_STONE_HIGHLIGHT = (102, 102, 102)
    BLACK_STONE_BORDER = (0, 0, 0)

    WHITE_STONE_COLOR = (204, 204, 204)
    WHITE_STONE_HIGHLIGHT = (255, 255, 255)
    WHITE_STONE_BORDER = (153, 153, 153)

    LAST_MOVE_COLOR = (0, 0, 255)         # Red dot on the newest stone
    WIN_LINE_COLOR = (0, 200, 0)          # Green line through the winning stones
    WIN_LINE_THICKNESS = 3

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Gomoku"
    WINDOW_SIZE = 640
    MIN_WINDOW_SIZE = 300
    UI_BACKGROUND = '#1a1a2e'
