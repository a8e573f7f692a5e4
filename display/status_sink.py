"""
Status messages for Gomoku.
Turns the game status into text for the player.
"""

from abc import ABC, abstractmethod
from typing import Optional

from engine.board_state import Player
from engine.game_state import GameStatus, StatusKind


def format_status(status: GameStatus, current_player: Player) -> str:
    """
    Get the message for a game status.

    Returns:
        "Current turn: Black", "White wins!" or "Draw! The board is full."
    """
    if status.kind == StatusKind.WON:
        return f"{status.winner.display_name} wins!"
    if status.kind == StatusKind.DRAW:
        return "Draw! The board is full."
    return f"Current turn: {current_player.display_name}"


class StatusSink(ABC):
    """
    Receives status messages from the game.

    Subclasses override show(). Register update() as a controller
    listener to get a message after every move and reset.
    """

    def __init__(self):
        self.last_message: Optional[str] = None

    def update(self, controller) -> str:
        message = format_status(controller.status, controller.current_player)
        if message != self.last_message:
            self.last_message = message
            self.show(message)
        return message

    @abstractmethod
    def show(self, message: str):
        """Display one message."""


class ConsoleStatusSink(StatusSink):
    """Prints status messages."""

    def show(self, message: str):
        print(message)
