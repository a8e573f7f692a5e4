"""
Main entry point for Gomoku.

Two ways to play:
- Window (default): click intersections to place stones
- Console (--no-ui): type "row col" to place stones

Black moves first. Five or more in a row wins.
"""

import argparse
from typing import Optional, Tuple

from engine.config import GameConfig
from engine.game_controller import GameController
from display.status_sink import ConsoleStatusSink


class ConsoleGame:
    """
    Plays Gomoku in the terminal.

    Commands:
    - "row col": place a stone (e.g. "7 7")
    - "r": restart
    - "q": quit
    """

    def __init__(self, size: int = GameConfig.BOARD_SIZE, verbose: bool = False):
        self.controller = GameController(size=size, verbose=verbose)
        self.status_sink = ConsoleStatusSink()
        self.controller.add_listener(lambda controller: controller.print_board())
        self.controller.add_listener(self.status_sink.update)

    def start(self):
        """Run the input loop until the player quits."""
        self.controller.print_board()
        self.status_sink.update(self.controller)

        while True:
            try:
                line = input("\nYour move (row col, r = restart, q = quit): ")
            except EOFError:
                break

            command = line.strip().lower()
            if command in ("q", "quit"):
                break
            if command in ("r", "restart"):
                self.controller.reset()
                continue

            move = parse_move(command)
            if move is None:
                print("Please enter two numbers, e.g. 7 7")
                continue

            result = self.controller.apply_move(*move)
            if not result.applied:
                print(result.error_message)


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row col" (space or comma separated).

    Returns:
        (row, col), or None if the text is not two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Gomoku (five in a row)")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board size (default: 15)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print rejected moves and results"
    )

    args = parser.parse_args()

    if args.size < GameConfig.MIN_BOARD_SIZE:
        parser.error(f"--size must be at least {GameConfig.MIN_BOARD_SIZE}")

    # Launch UI by default
    if not args.no_ui:
        try:
            import tkinter as tk
            from ui import GomokuUI
        except ImportError as e:
            print(f"ERROR: Tkinter UI is not available: {e}")
            print("Falling back to console mode.")
        else:
            print("\n" + "="*60)
            print("   Gomoku")
            print("="*60 + "\n")
            try:
                ui = GomokuUI(size=args.size, verbose=args.verbose)
            except tk.TclError as e:
                print(f"ERROR: Could not open the window: {e}")
                print("Falling back to console mode.")
            else:
                ui.run()
                return

    game = ConsoleGame(size=args.size, verbose=args.verbose)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
