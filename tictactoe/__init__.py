"""
TicTacToe
=========
Two-player TicTacToe with time travel: every move is kept as a board
snapshot, and any earlier snapshot can be revisited. Playing a move from
an earlier snapshot starts a new branch and drops the old future.

X always moves first.
"""

from .board import BoardSnapshot, Cell, empty_board
from .game_state import GameStateMachine
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, evaluate

__version__ = "1.0.0"
