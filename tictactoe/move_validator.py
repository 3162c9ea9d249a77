"""
Move validator for TicTacToe.
Decides whether a move or a history jump is accepted.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .board import Cell
from .config import GameConfig

if TYPE_CHECKING:
    from .game_state import GameStateMachine


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def _is_index(value) -> bool:
    # bool is an int subclass but never a valid index here
    return isinstance(value, int) and not isinstance(value, bool)


class MoveValidator:
    """
    Validates TicTacToe requests.

    Rules:
    1. Cell index must be 0-8
    2. Game must not be over at the viewed step
    3. Can only place on empty cells
    4. History jumps must target an existing step
    """

    def validate_move(self, machine: "GameStateMachine", cell_index) -> ValidationResult:
        """
        Validate a move.

        Args:
            machine: Game state to check against.
            cell_index: Cell the player clicked (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not _is_index(cell_index) or not 0 <= cell_index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell_index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        if machine.is_game_over():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        occupant = machine.current_snapshot()[cell_index]
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell_index} is already occupied by {occupant}"
            )

        return ValidationResult(is_valid=True)

    def validate_jump(self, machine: "GameStateMachine", target_step) -> ValidationResult:
        """Validate a jump to a history step."""
        if not _is_index(target_step) or not 0 <= target_step < machine.history_length:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid step {target_step!r}. Must be 0-{machine.history_length - 1}."
            )
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, machine: "GameStateMachine") -> List[int]:
        """
        Get all playable cells at the viewed step.

        Returns:
            Cell indices in ascending order, empty if the game is over.
        """
        if machine.is_game_over():
            return []

        return [
            index for index, cell in enumerate(machine.current_snapshot())
            if cell == Cell.EMPTY
        ]
