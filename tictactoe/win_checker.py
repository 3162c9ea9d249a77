"""
Win checker for TicTacToe.
Checks if a player has won or if the board is a draw.
"""

from typing import Optional, Tuple

from .board import BoardSnapshot, Cell


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same symbol in a row
    (horizontally, vertically, or diagonally).
    Lines are checked in a fixed order and the first complete one wins.
    """

    # All possible winning lines (as cell index triples)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, snapshot: BoardSnapshot) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            snapshot: The board to inspect (9 cells).

        Returns:
            The winning symbol, or None if no winner yet.
        """
        line = self.get_winning_line(snapshot)
        if line is None:
            return None
        return snapshot[line[0]]

    def get_winning_line(self, snapshot: BoardSnapshot) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line if there is one.

        Returns:
            The winning line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if snapshot[a] != Cell.EMPTY and snapshot[a] == snapshot[b] == snapshot[c]:
                return line
        return None

    def is_full(self, snapshot: BoardSnapshot) -> bool:
        """True when no cell is empty."""
        return Cell.EMPTY not in snapshot

    def check_draw(self, snapshot: BoardSnapshot) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.is_full(snapshot) and self.check_winner(snapshot) is None


_CHECKER = WinChecker()


def evaluate(snapshot: BoardSnapshot) -> Optional[Cell]:
    """Report the winner of a board snapshot, or None."""
    return _CHECKER.check_winner(snapshot)
