"""
Test script for TicTacToe modules.
Runs under pytest, or directly: python test_modules.py
"""

import logging
import os
import sys
from unittest.mock import patch

from tictactoe.board import Cell, empty_board, format_board, snapshot_from_string, with_cell
from tictactoe.game_state import GameStateMachine
from tictactoe.logging_utils import resolve_log_level
from tictactoe.main import TicTacToeConsole, main
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WinChecker, evaluate


def play(machine, *cells):
    """Apply a sequence of moves, all of which must succeed."""
    for cell in cells:
        assert machine.apply_move(cell), f"move at {cell} was rejected"
    return machine


# ==================== BOARD ====================

def test_board_helpers():
    board = empty_board()
    assert len(board) == 9
    assert all(cell == Cell.EMPTY for cell in board)

    changed = with_cell(board, 4, Cell.X)
    assert changed[4] == Cell.X
    assert board[4] == Cell.EMPTY

    assert snapshot_from_string("X.O......")[:3] == (Cell.X, Cell.EMPTY, Cell.O)
    assert str(Cell.EMPTY) == ""


def test_format_board_shows_symbols_and_free_indices():
    text = format_board(snapshot_from_string("X...O...."))
    assert "│ X │ 1 │ 2 │" in text
    assert "│ 3 │ O │ 5 │" in text


# ==================== WIN CHECKER ====================

def test_win_checker_lines():
    checker = WinChecker()

    assert checker.check_winner(empty_board()) is None
    assert checker.check_winner(snapshot_from_string("XXXOO....")) == Cell.X
    assert checker.check_winner(snapshot_from_string("XO.XO....")) is None
    assert checker.check_winner(snapshot_from_string("XO.XO.X..")) == Cell.X
    assert checker.get_winning_line(snapshot_from_string("XO.XO.X..")) == (0, 3, 6)
    assert checker.check_winner(snapshot_from_string("X.O.O.OXX")) == Cell.O
    assert checker.get_winning_line(snapshot_from_string("X.O.O.OXX")) == (2, 4, 6)


def test_win_checker_first_line_wins():
    # Two complete lines: the one listed first wins
    assert evaluate(snapshot_from_string("OOOXXX...")) == Cell.O
    assert evaluate(snapshot_from_string("OX.OX.OX.")) == Cell.O
    assert WinChecker().get_winning_line(snapshot_from_string("OX.OX.OX.")) == (0, 3, 6)


def test_win_checker_draw():
    checker = WinChecker()
    draw = snapshot_from_string("XOXOXOOXO")

    assert evaluate(draw) is None
    assert checker.is_full(draw)
    assert checker.check_draw(draw)
    assert not checker.check_draw(snapshot_from_string("XXXOO.OO."))
    assert not checker.check_draw(empty_board())


# ==================== GAME STATE MACHINE ====================

def test_initial_state():
    game = GameStateMachine()
    assert game.history_length == 1
    assert game.step == 0
    assert game.current_snapshot() == empty_board()
    assert game.winner() is None
    assert game.next_mover() == Cell.X
    assert not game.is_game_over()
    assert game.status_text() == "Next player X"
    assert game.history_labels() == ["Go to game start"]


def test_moves_alternate_and_grow_history():
    game = GameStateMachine()
    cells = [4, 0, 8, 2, 1]

    for k, cell in enumerate(cells, start=1):
        length, step = game.history_length, game.step
        assert game.apply_move(cell)
        assert game.history_length == length + 1
        assert game.step == step + 1
        expected = Cell.X if k % 2 == 1 else Cell.O
        assert game.current_snapshot()[cell] == expected


def test_each_snapshot_differs_by_one_cell():
    game = play(GameStateMachine(), 4, 0, 8, 2, 1, 7)
    history = game.history

    for n in range(1, len(history)):
        changed = [i for i in range(9) if history[n][i] != history[n - 1][i]]
        assert len(changed) == 1
        assert history[n - 1][changed[0]] == Cell.EMPTY


def test_occupied_cell_is_ignored():
    game = play(GameStateMachine(), 4)
    before = (game.history, game.step)

    assert not game.apply_move(4)
    assert (game.history, game.step) == before
    assert game.next_mover() == Cell.O


def test_invalid_cell_is_ignored():
    game = GameStateMachine()
    for bad in (-1, 9, 42, "3", None, 1.0, True):
        assert not game.apply_move(bad)
    assert game.history_length == 1
    assert game.step == 0


def test_top_row_win():
    game = play(GameStateMachine(), 0, 3, 1, 4, 2)

    assert game.winner() == Cell.X
    assert game.is_game_over()
    assert game.winning_line() == (0, 1, 2)
    assert game.status_text() == "Winner X"

    before = (game.history, game.step)
    assert not game.apply_move(8)
    assert (game.history, game.step) == before


def test_full_board_draw():
    # X O X / X O O / O X X
    game = play(GameStateMachine(), 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert game.winner() is None
    assert game.is_game_over()
    assert game.is_draw()
    assert game.status_text() == "Draw"
    assert game.history_length == 10
    assert not game.apply_move(0)


def test_jump_to_earlier_step():
    game = play(GameStateMachine(), 0, 1, 2, 3)
    history = game.history

    assert game.jump_to(1)
    assert game.step == 1
    assert game.current_snapshot() == history[1]
    assert game.snapshot_at(3) == history[3]
    assert game.snapshot_at(-1) is None
    assert game.snapshot_at(99) is None
    assert game.next_mover() == Cell.O
    assert game.history_length == 5
    assert game.history == history
    assert game.status_text() == "Next player O"


def test_jump_out_of_range_is_ignored():
    game = play(GameStateMachine(), 0, 1)
    for bad in (-1, 3, 100, "1", None, False):
        assert not game.jump_to(bad)
    assert game.step == 2


def test_jump_round_trip():
    game = play(GameStateMachine(), 0, 1, 2, 3)
    history = game.history
    original_step = game.step
    snapshot = game.current_snapshot()

    assert game.jump_to(2)
    assert game.jump_to(original_step)
    assert game.current_snapshot() == snapshot
    assert game.history == history


def test_move_after_jump_branches():
    game = play(GameStateMachine(), 0, 1, 2, 3)
    old_history = game.history

    game.jump_to(1)
    assert game.apply_move(4)

    assert game.history_length == 3
    assert game.step == 2
    assert game.history[:2] == old_history[:2]
    assert game.current_snapshot()[4] == Cell.O
    assert game.current_snapshot()[2] == Cell.EMPTY
    assert game.history_labels() == ["Go to game start", "Go to move #1", "Go to move #2"]


def test_moves_resume_after_jumping_back_from_a_win():
    game = play(GameStateMachine(), 0, 3, 1, 4, 2)
    assert game.is_game_over()

    assert game.jump_to(4)
    assert not game.is_game_over()
    assert game.apply_move(8)
    assert game.history_length == 6
    assert game.current_snapshot()[8] == Cell.X
    assert game.winner() is None

    # Reviewing a finished game is still allowed
    assert game.jump_to(0)
    assert game.current_snapshot() == empty_board()


def test_history_is_read_only_copy():
    game = play(GameStateMachine(), 4)
    history = game.history
    assert isinstance(history, tuple)
    assert isinstance(history[1], tuple)

    history = history + (empty_board(),)
    assert game.history_length == 2


# ==================== MOVE VALIDATOR ====================

def test_move_validator_reasons():
    validator = MoveValidator()
    game = play(GameStateMachine(), 4)

    assert validator.validate_move(game, 0).is_valid
    assert validator.validate_move(game, 0).error_message is None

    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(game, 9)
    assert not result.is_valid
    assert "Invalid cell" in result.error_message

    finished = play(GameStateMachine(), 0, 3, 1, 4, 2)
    result = validator.validate_move(finished, 8)
    assert result.error_message == "Game is already over!"

    assert validator.validate_jump(game, 1).is_valid
    assert not validator.validate_jump(game, 2).is_valid


def test_get_valid_moves():
    validator = MoveValidator()
    game = play(GameStateMachine(), 4, 0)
    assert validator.get_valid_moves(game) == [1, 2, 3, 5, 6, 7, 8]

    finished = play(GameStateMachine(), 0, 3, 1, 4, 2)
    assert validator.get_valid_moves(finished) == []


# ==================== CONSOLE ====================

def test_console_commands():
    console = TicTacToeConsole()

    assert console.handle_command("4")
    assert console.handle_command("0")
    assert console.game_state.history_length == 3

    assert console.handle_command("jump 1")
    assert console.game_state.step == 1
    assert console.handle_command("8")
    assert console.game_state.history_length == 3
    assert console.game_state.current_snapshot()[8] == Cell.O

    # Bad input keeps the game running and changes nothing
    for text in ("", "8", "9", "jump", "jump 7", "j x", "²", "jump ²", "dance", "history", "help"):
        assert console.handle_command(text)
    assert console.game_state.history_length == 3

    assert console.handle_command("new")
    assert console.game_state.history_length == 1

    assert not console.handle_command("quit")
    assert not console.handle_command("Q")


def test_main_console_mode():
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    try:
        with patch("builtins.input", side_effect=["4", "0", "q"]):
            main(["--no-ui"])

        with patch("builtins.input", side_effect=EOFError):
            main(["--no-ui", "--log-level", "debug"])
        assert root_logger.level == logging.DEBUG
    finally:
        root_logger.setLevel(saved_level)


def test_console_ignores_non_ascii_digits():
    console = TicTacToeConsole()
    for text in ("²", "jump ²", "j ³", "①"):
        assert console.handle_command(text)
    assert console.game_state.history_length == 1
    assert console.game_state.step == 0


# ==================== LOGGING ====================

def test_log_level_resolution():
    assert resolve_log_level("debug") == "DEBUG"
    assert resolve_log_level("nonsense") == "WARNING"

    with patch.dict(os.environ, {"TICTACTOE_LOG_LEVEL": "info"}):
        assert resolve_log_level() == "INFO"

    with patch.dict(os.environ, {}, clear=True):
        assert resolve_log_level() == "WARNING"


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Module Tests")
    print("=" * 60)

    tests = [
        (name, func) for name, func in sorted(globals().items())
        if name.startswith("test_") and callable(func)
    ]

    failed = []
    for name, func in tests:
        try:
            func()
            print(f"  ✓ {name}")
        except Exception as e:
            print(f"  ✗ {name}: {e!r}")
            failed.append(name)

    print("=" * 60)

    if not failed:
        print(f"\nAll {len(tests)} tests passed!\n")
        return 0
    else:
        print(f"\n{len(failed)} of {len(tests)} tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
