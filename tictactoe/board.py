"""
Board primitives for TicTacToe.
Cell states and immutable 9-cell board snapshots.
"""

from enum import Enum
from typing import Sequence, Tuple

from .config import GameConfig


class Cell(Enum):
    """The state of a single board cell."""
    EMPTY = ""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


# One full board state, cells 0-8 in row-major order
BoardSnapshot = Tuple[Cell, ...]


def empty_board() -> BoardSnapshot:
    """The all-empty starting board."""
    return (Cell.EMPTY,) * GameConfig.CELL_COUNT


def with_cell(snapshot: BoardSnapshot, index: int, value: Cell) -> BoardSnapshot:
    """
    Copy a snapshot with one cell replaced.

    Args:
        snapshot: The board to copy.
        index: Cell index (0-8).
        value: New state for that cell.

    Returns:
        A new snapshot; the original is left untouched.
    """
    cells = list(snapshot)
    cells[index] = value
    return tuple(cells)


def snapshot_from_string(text: str) -> BoardSnapshot:
    """
    Build a snapshot from a compact string such as "XO.XO...." ('.' or ' ' is empty).
    """
    cells = []
    for char in text:
        if char in (".", " ", "-"):
            cells.append(Cell.EMPTY)
        else:
            cells.append(Cell(char.upper()))
    if len(cells) != GameConfig.CELL_COUNT:
        raise ValueError(f"Board needs {GameConfig.CELL_COUNT} cells, got {len(cells)}")
    return tuple(cells)


def format_board(snapshot: Sequence[Cell]) -> str:
    """Render a snapshot as a text grid, empty cells show their index."""
    size = GameConfig.BOARD_SIZE
    lines = ["┌───┬───┬───┐"]

    for row in range(size):
        row_str = "│"
        for col in range(size):
            index = row * size + col
            cell = snapshot[index]
            symbol = str(cell) if cell != Cell.EMPTY else str(index)
            row_str += f" {symbol} │"
        lines.append(row_str)

        if row < size - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
