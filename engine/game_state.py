"""
Game state for Gomoku.
Tracks the board, whose turn it is, and whether the game is over.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board_state import BoardState, Player
from .turn_manager import TurnManager


class StatusKind(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    The game status: in progress, won by a player, or drawn.

    Use the in_progress(), won() and draw() constructors.
    """
    kind: StatusKind
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(StatusKind.WON, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(StatusKind.DRAW)

    @property
    def is_in_progress(self) -> bool:
        return self.kind == StatusKind.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        """Won and Draw accept no further moves."""
        return not self.is_in_progress

    def __str__(self) -> str:
        if self.kind == StatusKind.WON:
            return f"Won({self.winner.display_name})"
        if self.kind == StatusKind.DRAW:
            return "Draw"
        return "InProgress"


@dataclass
class GameState:
    """
    The complete state of one Gomoku game.

    Tracks:
    - The board
    - Whose turn it is
    - How many moves have been played
    - Game status (in progress, won, draw)
    - The last move and the winning line, for highlighting
    """

    board: BoardState = field(default_factory=BoardState)
    turns: TurnManager = field(default_factory=TurnManager)
    move_count: int = 0
    status: GameStatus = field(default_factory=GameStatus.in_progress)
    last_move: Optional[Tuple[int, int]] = None
    winning_line: Optional[List[Tuple[int, int]]] = None

    @classmethod
    def new(cls, size: int) -> "GameState":
        """Fresh game: empty board, Black to move."""
        return cls(board=BoardState(size))

    @property
    def current_player(self) -> Player:
        return self.turns.current()
