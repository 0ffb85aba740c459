"""
Game configuration for TicTacToe.
Settings for the console game loop.
"""

from .game_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== TURN SETTINGS ====================
    # X always opens the game
    FIRST_TURN = Mark.X

    # Swap the human's mark when a game is restarted
    SWAP_MARKS_ON_RESTART = True

    # ==================== AI TIMING ====================
    # Pause before the AI answers a human move (seconds)
    AI_MOVE_DELAY_S = 0.30

    # Pause before the AI opens a new game as X (seconds)
    AI_OPENING_DELAY_S = 0.35

    # ==================== DISPLAY SETTINGS ====================
    # Show cell numbers in empty cells
    SHOW_CELL_INDICES = True

    BANNER_WIDTH = 60

    # ==================== DEBUG SETTINGS ====================
    # Print the AI's suggestion text after each AI move
    DEBUG_MODE = False
