"""
Game configuration for Gomoku.
Board dimensions and rule settings.
"""


class GameConfig:
    """
    Configuration for the game engine.
    Change these values to play on a different board.
    """

    # ==================== BOARD SETTINGS ====================
    # Standard Gomoku board is 15x15 intersections
    BOARD_SIZE = 15

    # Smallest board that can still hold a winning line
    MIN_BOARD_SIZE = 5

    # ==================== RULE SETTINGS ====================
    # Stones in a row needed to win (longer lines also win)
    WIN_LENGTH = 5

    # ==================== OUTPUT SETTINGS ====================
    # Print rejected moves and status changes to the console
    VERBOSE = False
