"""
Game state management for TicTacToe.
Tracks the board history, the viewed step, and whose turn it is.
"""

import logging
from typing import List, Optional, Tuple

from .board import BoardSnapshot, Cell, empty_board, with_cell
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameStateMachine:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - Every board snapshot played so far (history[0] is the empty board)
    - The step currently being viewed

    Everything else (winner, next mover, game over) is derived from the
    snapshot at the viewed step. Snapshots are immutable tuples; a move
    appends a new one and a jump only moves the step.
    """

    def __init__(self):
        self._history: List[BoardSnapshot] = [empty_board()]
        self._step = 0
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    # ==================== READ ACCESSORS ====================

    @property
    def step(self) -> int:
        """Index of the viewed snapshot."""
        return self._step

    @property
    def history(self) -> Tuple[BoardSnapshot, ...]:
        """Read-only copy of the board history."""
        return tuple(self._history)

    @property
    def history_length(self) -> int:
        return len(self._history)

    def current_snapshot(self) -> BoardSnapshot:
        """The board at the viewed step."""
        return self._history[self._step]

    def snapshot_at(self, step: int) -> Optional[BoardSnapshot]:
        """The board at any history step, or None if there is no such step."""
        if not self.validator.validate_jump(self, step).is_valid:
            return None
        return self._history[step]

    def winner(self) -> Optional[Cell]:
        """Winner of the viewed board, or None."""
        return self.win_checker.check_winner(self.current_snapshot())

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.current_snapshot())

    def is_draw(self) -> bool:
        return self.win_checker.check_draw(self.current_snapshot())

    def is_game_over(self) -> bool:
        """True when the viewed board is won or full."""
        return self.winner() is not None or self.win_checker.is_full(self.current_snapshot())

    def next_mover(self) -> Cell:
        """X moves on even steps, O on odd steps."""
        return Cell.X if self._step % 2 == 0 else Cell.O

    def status_text(self) -> str:
        """One-line status for the view, e.g. "Next player X" or "Winner O"."""
        winner = self.winner()
        if winner is not None:
            return GameConfig.STATUS_WINNER.format(symbol=winner)
        if self.is_draw():
            return GameConfig.STATUS_DRAW
        return GameConfig.STATUS_NEXT_PLAYER.format(symbol=self.next_mover())

    def history_labels(self) -> List[str]:
        """Labels for the history list, one per step."""
        labels = []
        for step in range(len(self._history)):
            if step == 0:
                labels.append(GameConfig.HISTORY_START_LABEL)
            else:
                labels.append(GameConfig.HISTORY_MOVE_LABEL.format(step=step))
        return labels

    # ==================== OPERATIONS ====================

    def apply_move(self, cell_index: int) -> bool:
        """
        Play the next mover's symbol at the given cell.

        A move from an earlier step discards the snapshots after it.
        Invalid requests are ignored.

        Args:
            cell_index: Cell index (0-8).

        Returns:
            True if the move was applied, False if it was ignored.
        """
        result = self.validator.validate_move(self, cell_index)
        if not result.is_valid:
            logger.debug("Move at %r ignored: %s", cell_index, result.error_message)
            return False

        mover = self.next_mover()
        new_snapshot = with_cell(self.current_snapshot(), cell_index, mover)

        # Drop the alternate future before appending
        del self._history[self._step + 1:]
        self._history.append(new_snapshot)
        self._step += 1

        logger.debug("%s played cell %d (step %d)", mover, cell_index, self._step)
        return True

    def jump_to(self, target_step: int) -> bool:
        """
        View an earlier (or later) snapshot without changing history.

        Returns:
            True if the step changed to target_step, False if it was ignored.
        """
        result = self.validator.validate_jump(self, target_step)
        if not result.is_valid:
            logger.debug("Jump to %r ignored: %s", target_step, result.error_message)
            return False

        self._step = target_step
        logger.debug("Jumped to step %d of %d", target_step, len(self._history) - 1)
        return True
