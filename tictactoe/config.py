"""
Game configuration for TicTacToe.
All the settings for the board, rendering, and the computer opponent.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak how the game looks and plays!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid (not configurable - the search depends on it)
    BOARD_SIZE = 3

    # Internal cell codes stored in the numpy grid
    EMPTY_CODE = 0
    X_CODE = 1
    O_CODE = -1

    # ==================== RENDER SETTINGS ====================
    EMPTY_SYMBOL = " "
    CELL_SEPARATOR = "|"
    ROW_SEPARATOR = "-+-+-"

    # ==================== GAME SETTINGS ====================
    # X always moves first
    FIRST_PLAYER = "X"

    # ==================== AI SETTINGS ====================
    # One of "easy", "medium", "hard"
    DEFAULT_DIFFICULTY = "hard"

    # Chance that a MEDIUM opponent plays the optimal move instead of a random one
    MEDIUM_OPTIMAL_PROBABILITY = 0.5

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
