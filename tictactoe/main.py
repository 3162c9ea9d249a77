"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
"""

import argparse
import logging
from typing import List, Optional

from .board import format_board
from .game_state import GameStateMachine
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  0-8       play that cell
  jump N    go to history step N (also: j N)
  history   list the history steps
  new       start a new game
  help      show this help
  quit      leave (also: q)"""


class TicTacToeConsole:
    """
    Console front end for TicTacToe.

    Each line of input is one command; the board is reprinted after
    every change.
    """

    def __init__(self):
        self.game_state = GameStateMachine()

    def print_board(self):
        """Print the viewed board and status."""
        print()
        print(format_board(self.game_state.current_snapshot()))
        print(f"Step {self.game_state.step}/{self.game_state.history_length - 1}: "
              f"{self.game_state.status_text()}")

    def print_history(self):
        for step, label in enumerate(self.game_state.history_labels()):
            marker = ">" if step == self.game_state.step else " "
            print(f" {marker} {step}: {label}")

    def handle_command(self, text: str) -> bool:
        """
        Run one console command.

        Args:
            text: The raw input line.

        Returns:
            False when the player wants to quit, True otherwise.
        """
        parts = text.strip().lower().split()
        if not parts:
            return True

        command, args = parts[0], parts[1:]

        if command in ("quit", "q", "exit"):
            return False

        if command == "help":
            print(HELP_TEXT)
        elif command == "history":
            self.print_history()
        elif command == "new":
            self.game_state = GameStateMachine()
            print("New game started.")
            self.print_board()
        elif command in ("jump", "j"):
            if len(args) != 1 or not args[0].isdecimal():
                print("Usage: jump N")
            elif self.game_state.jump_to(int(args[0])):
                self.print_board()
            else:
                print(f"No step {args[0]}. History has steps 0-{self.game_state.history_length - 1}.")
        elif command.isdecimal() and not args:
            if self.game_state.apply_move(int(command)):
                self.print_board()
            elif self.game_state.is_game_over():
                print("Game is over. Jump back in history or start a new game.")
            else:
                print(f"Can't play cell {command}.")
        else:
            print(f"Unknown command: {text.strip()!r}. Type 'help'.")

        return True

    def run(self):
        """Read commands until the player quits."""
        print(HELP_TEXT)
        self.print_board()

        while True:
            try:
                line = input("> ")
            except EOFError:
                break
            if not self.handle_command(line):
                break


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $TICTACTOE_LOG_LEVEL or WARNING)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(level=args.log_level)

    # Launch UI by default
    if not args.no_ui:
        from .ui import TicTacToeUI
        logger.info("Starting UI")
        ui = TicTacToeUI()
        ui.run()
        return

    console = TicTacToeConsole()
    try:
        console.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
