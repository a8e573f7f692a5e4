"""
Turn manager for Gomoku.
"""

from .board_state import Player


class TurnManager:
    """Tracks whose turn it is. Black always moves first."""

    FIRST_PLAYER = Player.BLACK

    def __init__(self):
        self._current = self.FIRST_PLAYER

    def current(self) -> Player:
        return self._current

    def switch_player(self) -> Player:
        """Hand the turn to the other player and return them."""
        self._current = self._current.opposite()
        return self._current

    def reset(self):
        self._current = self.FIRST_PLAYER
