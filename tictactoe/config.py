"""
Game configuration for time-travel TicTacToe.
Board constants, display text, logging defaults and UI look.
"""


class GameConfig:
    """
    Configuration class for the game.
    Everything here is a plain class constant.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== DISPLAY TEXT ====================
    STATUS_WINNER = "Winner {symbol}"
    STATUS_NEXT_PLAYER = "Next player {symbol}"
    STATUS_DRAW = "Draw"

    HISTORY_START_LABEL = "Go to game start"
    HISTORY_MOVE_LABEL = "Go to move #{step}"

    # ==================== LOGGING ====================
    # Environment variable that overrides the default level
    LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_BG = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_WIN_BG = '#065f46'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    FONT_FAMILY = 'Segoe UI'
