"""
TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board for the viewed step
- Game status (next player, winner or draw)
- The move history, each entry jumps back to that step
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List

from .board import Cell
from .config import GameConfig
from .game_state import GameStateMachine

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Holds no game rules: clicks go to the state machine and the widgets
    are redrawn from its read accessors.
    """

    def __init__(self):
        """Initialize the UI."""
        self.game_state = GameStateMachine()
        self.history_buttons: List[tk.Button] = []
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.WINDOW_BG)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.WINDOW_BG)
        style.configure('TLabel', background=GameConfig.WINDOW_BG, foreground='white',
                        font=(GameConfig.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(GameConfig.FONT_FAMILY, 16, 'bold'),
                        foreground=GameConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(GameConfig.FONT_FAMILY, 12),
                        foreground=GameConfig.STATUS_COLOR)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        size = GameConfig.BOARD_SIZE
        self.board_cells: List[tk.Button] = []
        for index in range(GameConfig.CELL_COUNT):
            cell = tk.Button(
                board_frame,
                text="",
                font=(GameConfig.FONT_FAMILY, 24, 'bold'),
                width=4,
                height=2,
                bg=GameConfig.CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // size, column=index % size, padx=2, pady=2)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Reset",
            font=(GameConfig.FONT_FAMILY, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=(GameConfig.FONT_FAMILY, 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=220)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))

        ttk.Label(right_frame, text="History", style='Title.TLabel').pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.Y)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        if self.game_state.apply_move(index):
            self._refresh()

    def _on_history_click(self, step: int):
        if self.game_state.jump_to(step):
            self._refresh()

    def _refresh(self):
        """Redraw every widget from the game state."""
        self._update_board_display()
        self.status_label.configure(text=self.game_state.status_text())
        self._update_history_list()

    def _update_board_display(self):
        """Update the board grid display."""
        snapshot = self.game_state.current_snapshot()
        winning_line = self.game_state.winning_line() or ()

        for index, cell in enumerate(snapshot):
            if cell == Cell.X:
                fg_color = GameConfig.X_COLOR
            elif cell == Cell.O:
                fg_color = GameConfig.O_COLOR
            else:
                fg_color = 'white'
            bg_color = GameConfig.CELL_WIN_BG if index in winning_line else GameConfig.CELL_BG
            self.board_cells[index].configure(text=str(cell), fg=fg_color, bg=bg_color)

    def _update_history_list(self):
        """Rebuild the history buttons, the viewed step is shown pressed."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        for step, label in enumerate(self.game_state.history_labels()):
            button = tk.Button(
                self.history_frame,
                text=label,
                font=(GameConfig.FONT_FAMILY, 10),
                width=18,
                relief='sunken' if step == self.game_state.step else 'raised',
                command=lambda s=step: self._on_history_click(s)
            )
            button.pack(pady=2)
            self.history_buttons.append(button)

    def _reset_game(self):
        """Start a new game."""
        logger.info("Resetting game")
        self.game_state = GameStateMachine()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
