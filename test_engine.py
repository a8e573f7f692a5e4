"""
Tests for the Gomoku game engine.
Run with pytest, or directly to get a summary table.
"""

import random
import sys

from engine.board_state import BoardState, Player, OutOfBoundsError
from engine.game_controller import GameController
from engine.game_state import GameStatus, StatusKind
from engine.move_validator import MoveValidator, MoveError
from engine.turn_manager import TurnManager
from engine.win_checker import WinChecker


def _play(controller, moves):
    """Apply a list of (row, col) moves and return the results."""
    return [controller.apply_move(row, col) for row, col in moves]


def _draw_pattern(size):
    """
    Cells split so that no color has more than two in a row in any
    direction. Black gets the larger half, since Black moves first.
    """
    black, white = [], []
    for row in range(size):
        for col in range(size):
            if (col // 2 + row) % 2 == 0:
                black.append((row, col))
            else:
                white.append((row, col))
    return black, white


def _interleave(black, white):
    moves = []
    for i, cell in enumerate(black):
        moves.append(cell)
        if i < len(white):
            moves.append(white[i])
    return moves


# ==================== BOARD STATE ====================

def test_board_starts_empty():
    board = BoardState()
    assert board.size == 15
    assert board.stone_count() == 0
    assert all(cell is None for row in board.snapshot() for cell in row)


def test_board_get_out_of_bounds_raises():
    board = BoardState(15)
    for row, col in [(-1, 0), (0, -1), (15, 0), (0, 15)]:
        try:
            board.get(row, col)
        except OutOfBoundsError as e:
            assert (e.row, e.col) == (row, col)
        else:
            raise AssertionError(f"get({row}, {col}) should have failed")


def test_board_too_small_rejected():
    try:
        BoardState(4)
    except ValueError:
        pass
    else:
        raise AssertionError("4x4 board should be rejected")


def test_board_set_full_and_reset():
    board = BoardState(5)
    for row in range(5):
        for col in range(5):
            assert not board.is_full()
            board.set(row, col, Player.BLACK if (row + col) % 2 else Player.WHITE)
    assert board.is_full()
    assert board.stone_count() == 25

    board.reset()
    assert board.size == 5
    assert board.stone_count() == 0
    assert not board.is_full()


def test_board_full_counts_each_cell_once():
    board = BoardState(5)
    board.set(0, 0, Player.BLACK)
    board.set(0, 0, Player.WHITE)
    assert board.stone_count() == 1
    assert not board.is_full()


def test_board_to_text():
    board = BoardState(5)
    board.set(0, 0, Player.BLACK)
    board.set(4, 4, Player.WHITE)
    lines = board.to_text().splitlines()
    assert lines[0] == "  0 1 2 3 4"
    assert lines[1] == "0 X . . . ."
    assert lines[5] == "4 . . . . O"


# ==================== MOVE VALIDATOR ====================

def test_validator_order_and_errors():
    validator = MoveValidator()
    board = BoardState()
    board.set(7, 7, Player.BLACK)
    in_progress = GameStatus.in_progress()
    won = GameStatus.won(Player.BLACK)

    assert validator.validate_move(board, in_progress, 0, 0).is_valid
    assert validator.validate_move(board, in_progress, -1, 0).error == MoveError.OUT_OF_BOUNDS
    assert validator.validate_move(board, in_progress, 7, 7).error == MoveError.CELL_OCCUPIED

    # Bounds first, then occupancy, then game over
    assert validator.validate_move(board, won, 15, 0).error == MoveError.OUT_OF_BOUNDS
    assert validator.validate_move(board, won, 7, 7).error == MoveError.CELL_OCCUPIED
    assert validator.validate_move(board, won, 0, 0).error == MoveError.GAME_OVER


def test_validator_does_not_mutate():
    validator = MoveValidator()
    board = BoardState()
    before = board.snapshot()
    validator.validate_move(board, GameStatus.in_progress(), 3, 3)
    assert board.snapshot() == before


def test_validator_rejects_non_integer_positions():
    validator = MoveValidator()
    board = BoardState()
    for row, col in [(1.5, 2), ("1", 2), (2, None), (True, 0)]:
        result = validator.validate_move(board, GameStatus.in_progress(), row, col)
        assert result.error == MoveError.OUT_OF_BOUNDS
        assert not board.in_bounds(row, col)


# ==================== WIN CHECKER ====================

def test_win_all_orientations():
    checker = WinChecker()
    lines = {
        "horizontal": [(7, c) for c in range(3, 8)],
        "vertical": [(r, 2) for r in range(0, 5)],
        "main diagonal": [(r, r) for r in range(10, 15)],
        "anti diagonal": [(r, 14 - r) for r in range(0, 5)],
    }
    for name, cells in lines.items():
        board = BoardState()
        for row, col in cells:
            board.set(row, col, Player.WHITE)
        # Any stone in the line, including the middle, completes it
        for row, col in cells:
            assert checker.check_win(board, row, col, Player.WHITE), name
            assert not checker.check_win(board, row, col, Player.BLACK), name


def test_four_is_not_a_win():
    checker = WinChecker()
    board = BoardState()
    for col in range(4):
        board.set(0, col, Player.BLACK)
    board.set(0, 4, Player.WHITE)
    assert not checker.check_win(board, 0, 3, Player.BLACK)
    assert checker.get_winning_line(board, 0, 3, Player.BLACK) is None


def test_overline_wins():
    checker = WinChecker()
    board = BoardState()
    for col in [3, 4, 6, 7, 8]:
        board.set(3, col, Player.BLACK)
    board.set(3, 5, Player.BLACK)

    assert checker.check_win(board, 3, 5, Player.BLACK)
    assert checker.get_winning_line(board, 3, 5, Player.BLACK) == [(3, c) for c in range(3, 9)]


def test_winning_line_anti_diagonal_order():
    checker = WinChecker()
    board = BoardState()
    cells = [(r, 10 - r) for r in range(2, 7)]
    for row, col in cells:
        board.set(row, col, Player.WHITE)
    assert checker.get_winning_line(board, 4, 6, Player.WHITE) == cells


def test_broken_line_is_not_a_win():
    checker = WinChecker()
    board = BoardState()
    for col in [0, 1, 2, 4, 5]:
        board.set(9, col, Player.BLACK)
    board.set(9, 3, Player.WHITE)
    assert not checker.check_win(board, 9, 2, Player.BLACK)


# ==================== TURN MANAGER ====================

def test_turn_manager_alternates():
    turns = TurnManager()
    assert turns.current() == Player.BLACK
    assert turns.switch_player() == Player.WHITE
    assert turns.switch_player() == Player.BLACK
    turns.switch_player()
    turns.reset()
    assert turns.current() == Player.BLACK


# ==================== GAME CONTROLLER ====================

def test_initial_state():
    game = GameController()
    assert game.status == GameStatus.in_progress()
    assert game.current_player == Player.BLACK
    assert game.move_count == 0
    assert game.last_move is None
    assert not game.is_game_over


def test_scenario_black_wins_horizontally():
    game = GameController()
    black = [(7, 7), (7, 8), (7, 9), (7, 10), (7, 11)]
    white = [(0, 0), (0, 1), (0, 2), (0, 3)]

    for i, (row, col) in enumerate(black):
        result = game.apply_move(row, col)
        assert result.applied
        assert result.player == Player.BLACK
        if i < len(white):
            assert game.status.is_in_progress
            assert game.apply_move(*white[i]).player == Player.WHITE

    assert game.status == GameStatus.won(Player.BLACK)
    assert game.status.kind == StatusKind.WON
    assert game.is_game_over
    assert game.winning_line == black
    assert game.move_count == 9
    # No turn switch after a win
    assert game.current_player == Player.BLACK


def test_scenario_full_board_draw():
    game = GameController()
    black, white = _draw_pattern(15)
    assert len(black) == 113 and len(white) == 112

    results = _play(game, _interleave(black, white))
    assert all(r.applied for r in results)

    assert game.move_count == 225
    assert game.status == GameStatus.draw()
    assert game.winning_line is None
    assert game.state.board.is_full()


def test_scenario_reset_after_win_and_draw():
    for moves in (
        [(7, 7), (0, 0), (7, 8), (0, 1), (7, 9), (0, 2), (7, 10), (0, 3), (7, 11)],
        _interleave(*_draw_pattern(15)),
    ):
        game = GameController()
        _play(game, moves)
        assert game.is_game_over

        game.reset()
        assert game.status == GameStatus.in_progress()
        assert game.current_player == Player.BLACK
        assert game.move_count == 0
        assert game.last_move is None
        assert game.winning_line is None
        assert all(cell is None for row in game.board_snapshot() for cell in row)


def test_scenario_out_of_bounds_rejected():
    game = GameController()
    game.apply_move(7, 7)
    before = (game.board_snapshot(), game.status, game.current_player, game.move_count)

    for row, col in [(-1, 0), (15, 0), (0, 15), (0, -1)]:
        result = game.apply_move(row, col)
        assert not result.applied
        assert result.error == MoveError.OUT_OF_BOUNDS
        assert result.error_message

    assert (game.board_snapshot(), game.status, game.current_player, game.move_count) == before


def test_non_integer_positions_rejected():
    game = GameController()
    game.apply_move(7, 7)
    before = (game.board_snapshot(), game.status, game.current_player, game.move_count)

    for row, col in [(1.5, 2), ("1", 2), (2, 7.0), (None, None)]:
        result = game.apply_move(row, col)
        assert not result.applied
        assert result.error == MoveError.OUT_OF_BOUNDS

    assert (game.board_snapshot(), game.status, game.current_player, game.move_count) == before


def test_win_on_last_empty_cell_beats_draw():
    # Black completes the top row on the 25th move, filling the board
    pattern = [
        "BBBB.",
        "WBWBW",
        "WBWBW",
        "BWBWB",
        "WWBWW",
    ]
    black = [(r, c) for r, line in enumerate(pattern) for c, mark in enumerate(line) if mark == "B"]
    white = [(r, c) for r, line in enumerate(pattern) for c, mark in enumerate(line) if mark == "W"]
    black.append((0, 4))
    assert len(black) == 13 and len(white) == 12

    game = GameController(size=5)
    results = _play(game, _interleave(black, white))

    assert all(r.applied for r in results)
    assert all(r.status.is_in_progress for r in results[:-1])
    assert game.state.board.is_full()
    assert game.status == GameStatus.won(Player.BLACK)
    assert game.winning_line == [(0, c) for c in range(5)]


def test_occupied_cell_rejected():
    game = GameController()
    game.apply_move(3, 3)
    result = game.apply_move(3, 3)
    assert not result.applied
    assert result.error == MoveError.CELL_OCCUPIED
    assert game.current_player == Player.WHITE
    assert game.move_count == 1


def test_moves_after_game_over_rejected():
    game = GameController()
    _play(game, [(7, 7), (0, 0), (7, 8), (0, 1), (7, 9), (0, 2), (7, 10), (0, 3), (7, 11)])
    snapshot = game.board_snapshot()

    result = game.apply_move(14, 14)
    assert not result.applied
    assert result.error == MoveError.GAME_OVER
    assert result.status == GameStatus.won(Player.BLACK)
    assert game.board_snapshot() == snapshot
    assert game.move_count == 9


def test_white_can_win():
    game = GameController()
    moves = []
    for i in range(5):
        moves.append((14, i * 2))   # Black, scattered
        moves.append((i, 0))        # White, vertical line
    _play(game, moves)
    assert game.status == GameStatus.won(Player.WHITE)
    assert game.winning_line == [(r, 0) for r in range(5)]


def test_random_play_invariants():
    rng = random.Random(1234)
    for _ in range(20):
        game = GameController(size=9)
        applied = 0
        expected_player = Player.BLACK
        while not game.is_game_over:
            row, col = rng.randint(-1, 9), rng.randint(-1, 9)
            before = game.current_player
            result = game.apply_move(row, col)
            if result.applied:
                applied += 1
                assert result.player == expected_player
                if game.status.is_in_progress:
                    expected_player = expected_player.opposite()
                    assert game.current_player == expected_player
            else:
                assert game.current_player == before
            assert game.state.board.stone_count() == applied == game.move_count

        # Terminal: player no longer alternates
        frozen = game.current_player
        game.apply_move(rng.randint(0, 8), rng.randint(0, 8))
        assert game.current_player == frozen
        assert game.move_count == applied


def test_listeners_notified_on_apply_and_reset():
    game = GameController()
    calls = []
    game.add_listener(lambda controller: calls.append(controller.move_count))

    game.apply_move(0, 0)
    game.apply_move(0, 0)       # Rejected: no notification
    game.apply_move(99, 99)     # Rejected: no notification
    game.reset()
    assert calls == [1, 0]


def test_failing_listener_does_not_break_game():
    game = GameController()

    def broken(controller):
        raise RuntimeError("display gone")

    game.add_listener(broken)
    result = game.apply_move(5, 5)
    assert result.applied
    assert game.current_player == Player.WHITE

    game.remove_listener(broken)
    game.remove_listener(broken)
    assert game.apply_move(5, 6).applied


def test_custom_board_size_draw():
    game = GameController(size=5)
    black, white = _draw_pattern(5)
    _play(game, _interleave(black, white))
    assert game.move_count == 25
    assert game.status == GameStatus.draw()


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   Gomoku - Engine Tests")
    print("="*60)

    tests = [
        (name, func) for name, func in globals().items()
        if name.startswith("test_") and callable(func)
    ]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"  ✓ PASS  {name}")
        except Exception as e:
            failed += 1
            print(f"  ✗ FAIL  {name}: {e!r}")

    print("="*60)
    print(f"   {len(tests) - failed}/{len(tests)} passed")
    print("="*60)
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
