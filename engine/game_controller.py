"""
Game controller for Gomoku.

Ties together the board, move validation, win detection and turn
order behind a single apply_move() entry point. Collaborators (renderer,
status display, input handling) read from the controller and register
listeners; they never change the board themselves.
"""

from typing import Callable, List, Optional, Tuple
from dataclasses import dataclass

from .board_state import Cell, Player
from .config import GameConfig
from .game_state import GameState, GameStatus
from .move_validator import MoveError, MoveValidator
from .win_checker import WinChecker


@dataclass
class MoveResult:
    """What happened when a move was attempted."""
    applied: bool
    row: int
    col: int
    status: GameStatus
    player: Optional[Player] = None       # Who placed the stone (if applied)
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


Listener = Callable[["GameController"], None]


class GameController:
    """
    Runs one Gomoku session.

    Game flow:
    1. A player picks an intersection and apply_move(row, col) is called
    2. The move is validated; rejected moves change nothing
    3. The stone is placed and checked for five in a row
    4. If nobody won and the board is full, the game is a draw
    5. Otherwise the turn passes to the other player

    No method raises on a bad move. Rejections come back as a MoveResult
    with applied=False and the reason.
    """

    def __init__(
        self,
        size: int = GameConfig.BOARD_SIZE,
        win_length: int = GameConfig.WIN_LENGTH,
        verbose: bool = GameConfig.VERBOSE
    ):
        """
        Initialize the controller with a new game.

        Args:
            size: Board size (default: 15).
            win_length: Stones in a row needed to win (default: 5).
            verbose: Print rejected moves and results.
        """
        self.size = size
        self.verbose = verbose
        self.validator = MoveValidator()
        self.win_checker = WinChecker(win_length)
        self.state = GameState.new(size)
        self._listeners: List[Listener] = []

    # ==================== QUERIES ====================

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def move_count(self) -> int:
        return self.state.move_count

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self.state.last_move

    @property
    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        return self.state.winning_line

    @property
    def is_game_over(self) -> bool:
        return self.state.status.is_terminal

    def board_snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self.state.board.snapshot()

    # ==================== COMMANDS ====================

    def apply_move(self, row: int, col: int) -> MoveResult:
        """
        Place the current player's stone at (row, col).

        Args:
            row: Row index.
            col: Column index.

        Returns:
            MoveResult describing the outcome. On rejection the board,
            status and current player are unchanged.
        """
        state = self.state

        if state.status.is_terminal:
            return self._reject(row, col, MoveError.GAME_OVER, "Game is already over!")

        validation = self.validator.validate_move(state.board, state.status, row, col)
        if not validation.is_valid:
            return self._reject(row, col, validation.error, validation.error_message)

        player = state.current_player
        state.board.set(row, col, player)
        state.move_count += 1
        state.last_move = (row, col)

        if self.win_checker.check_win(state.board, row, col, player):
            state.status = GameStatus.won(player)
            state.winning_line = self.win_checker.get_winning_line(
                state.board, row, col, player
            )
            if self.verbose:
                print(f"{player.display_name} wins after {state.move_count} moves!")
        elif state.board.is_full():
            state.status = GameStatus.draw()
            if self.verbose:
                print("Draw! The board is full.")
        else:
            state.turns.switch_player()

        result = MoveResult(
            applied=True,
            row=row,
            col=col,
            status=state.status,
            player=player
        )
        self._notify()
        return result

    def reset(self):
        """Start a new game: empty board, Black to move."""
        self.state.board.reset()
        self.state.turns.reset()
        self.state = GameState(board=self.state.board, turns=self.state.turns)
        if self.verbose:
            print("Game reset!")
        self._notify()

    # ==================== LISTENERS ====================

    def add_listener(self, listener: Listener):
        """Call listener(controller) after every applied move and reset."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                print(f"Warning: listener {listener!r} failed: {e}")

    def _reject(
        self,
        row: int,
        col: int,
        error: MoveError,
        message: str
    ) -> MoveResult:
        if self.verbose:
            print(f"Move ({row}, {col}) rejected: {message}")
        return MoveResult(
            applied=False,
            row=row,
            col=col,
            status=self.state.status,
            error=error,
            error_message=message
        )

    def print_board(self):
        """Print the board and game info to the console."""
        print()
        print(self.state.board.to_text())

        status = self.state.status
        if status.is_terminal:
            if status.winner is not None:
                print(f"\n{status.winner.display_name.upper()} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.display_name}")
            print(f"Moves played: {self.move_count}")
