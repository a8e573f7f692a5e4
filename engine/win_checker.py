"""
Win checker for Gomoku.
Checks if the last move completed a line of five or more.
"""

from typing import Optional, List, Tuple

from .board_state import BoardState, Player
from .config import GameConfig


class WinChecker:
    """
    Checks for win conditions in Gomoku.

    Win condition: WIN_LENGTH or more stones of the same color in an
    unbroken line (horizontally, vertically, or diagonally). Longer
    lines also win.

    Only the four lines through the last move are scanned, so a check
    never looks at more than a few dozen cells however full the board is.
    """

    # Each orientation is a pair of opposite unit steps (d_row, d_col)
    DIRECTIONS = [
        ((0, -1), (0, 1)),    # Horizontal
        ((-1, 0), (1, 0)),    # Vertical
        ((-1, -1), (1, 1)),   # Main diagonal
        ((-1, 1), (1, -1)),   # Anti-diagonal
    ]

    def __init__(self, win_length: int = GameConfig.WIN_LENGTH):
        self.win_length = win_length

    def check_win(self, board: BoardState, row: int, col: int, player: Player) -> bool:
        """
        Check if the stone just placed at (row, col) wins the game.

        Args:
            board: The board after the move.
            row: Row of the last move.
            col: Column of the last move.
            player: The player who made the move.

        Returns:
            True if some line through (row, col) has WIN_LENGTH or more
            of player's stones.
        """
        for direction_pair in self.DIRECTIONS:
            count = 1  # The placed stone itself
            for d_row, d_col in direction_pair:
                count += self._count_direction(board, row, col, d_row, d_col, player)
            if count >= self.win_length:
                return True
        return False

    def _count_direction(
        self,
        board: BoardState,
        row: int,
        col: int,
        d_row: int,
        d_col: int,
        player: Player
    ) -> int:
        """Count player's stones walking away from (row, col), not including it."""
        count = 0
        r, c = row + d_row, col + d_col
        while board.in_bounds(r, c) and board.get(r, c) == player:
            count += 1
            r += d_row
            c += d_col
        return count

    def get_winning_line(
        self,
        board: BoardState,
        row: int,
        col: int,
        player: Player
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line through (row, col) if there is one.

        Returns:
            All contiguous cells of the first winning orientation, ordered
            from one end to the other, or None.
        """
        for (back_row, back_col), (fwd_row, fwd_col) in self.DIRECTIONS:
            back = self._count_direction(board, row, col, back_row, back_col, player)
            forward = self._count_direction(board, row, col, fwd_row, fwd_col, player)
            if back + forward + 1 < self.win_length:
                continue

            start_row = row + back_row * back
            start_col = col + back_col * back
            return [
                (start_row + fwd_row * step, start_col + fwd_col * step)
                for step in range(back + forward + 1)
            ]
        return None
