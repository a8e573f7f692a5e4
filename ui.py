"""
Gomoku UI
A graphical interface for Gomoku using Tkinter.

Shows:
- The board, redrawn to fit the window
- Whose turn it is, or the result
- A restart button
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from engine.config import GameConfig
from engine.game_controller import GameController

from display.config import DisplayConfig
from display.layout import Layout, compute_layout
from display.input_mapper import InputMapper
from display.renderer import BoardRenderer
from display.status_sink import StatusSink


class LabelStatusSink(StatusSink):
    """Writes status messages into a Tkinter label."""

    def __init__(self, label: ttk.Label):
        super().__init__()
        self.label = label

    def show(self, message: str):
        self.label.configure(text=message)


class GomokuUI:
    """
    Main UI class for Gomoku.
    """

    def __init__(self, size: int = GameConfig.BOARD_SIZE, verbose: bool = False):
        """Initialize the UI."""
        self.config = DisplayConfig()
        self.controller = GameController(size=size, verbose=verbose)
        self.renderer = BoardRenderer(self.config)
        self.mapper = InputMapper()
        self.layout: Optional[Layout] = None

        self._create_ui()

        self.status_sink = LabelStatusSink(self.status_label)
        self.controller.add_listener(self._on_game_changed)
        self.controller.add_listener(self.status_sink.update)
        self.status_sink.update(self.controller)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.UI_BACKGROUND)

        self.root.geometry(f"{self.config.WINDOW_SIZE}x{self.config.WINDOW_SIZE + 60}")
        self.root.minsize(self.config.MIN_WINDOW_SIZE, self.config.MIN_WINDOW_SIZE + 60)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.UI_BACKGROUND)
        style.configure('Status.TLabel', background=self.config.UI_BACKGROUND,
                        font=('Segoe UI', 14, 'bold'), foreground='#ffd700')
        style.configure('TButton', font=('Segoe UI', 10, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Top bar - status and restart
        top_frame = ttk.Frame(main_frame)
        top_frame.pack(fill=tk.X, pady=(0, 10))

        self.status_label = ttk.Label(top_frame, text="", style='Status.TLabel')
        self.status_label.pack(side=tk.LEFT)

        ttk.Button(top_frame, text="Quit", command=self._quit).pack(side=tk.RIGHT)
        ttk.Button(top_frame, text="Restart", command=self.controller.reset).pack(
            side=tk.RIGHT, padx=(0, 5)
        )

        # Board canvas
        self.board_canvas = tk.Canvas(main_frame, bg=self.config.UI_BACKGROUND,
                                      highlightthickness=0)
        self.board_canvas.pack(fill=tk.BOTH, expand=True)

        self.board_canvas.bind("<Button-1>", self._on_click)
        self.board_canvas.bind("<Configure>", self._on_resize)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_resize(self, event):
        """Recompute the layout for the new canvas size and redraw."""
        self.layout = compute_layout(event.width, event.height, self.controller.size)
        self.mapper.set_offset(
            (event.width - self.layout.image_size) // 2,
            (event.height - self.layout.image_size) // 2
        )
        self._redraw()

    def _on_click(self, event):
        """Place a stone at the intersection nearest the click."""
        if self.layout is None:
            return
        row, col = self.mapper.to_cell(event.x, event.y, self.layout)
        self.controller.apply_move(row, col)

    def _on_game_changed(self, controller: GameController):
        self._redraw()

    def _redraw(self):
        """Render the board and show it on the canvas."""
        if self.layout is None:
            return

        frame = self.renderer.render(
            self.controller.board_snapshot(),
            self.layout,
            last_move=self.controller.last_move,
            winning_line=self.controller.winning_line
        )

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(
            self.mapper.offset_x, self.mapper.offset_y, anchor=tk.NW, image=photo
        )
        self.board_canvas.image = photo  # Keep reference

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku UI")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help="Board size (default: 15)"
    )
    args = parser.parse_args()

    print("\n" + "="*60)
    print("   Gomoku UI")
    print("="*60)
    print(f"   Board: {args.size}x{args.size}")
    print("="*60 + "\n")

    ui = GomokuUI(size=args.size)
    ui.run()


if __name__ == "__main__":
    main()
