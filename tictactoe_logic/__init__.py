"""
TicTacToe decision core.
Board outcome evaluation and the automated opponent's move heuristic.
"""

__version__ = "1.0.0"

from .game_state import (
    Mark, Outcome, InvalidBoardError, InvalidMarksError,
    BOARD_CELLS, CENTER, CORNERS, NO_MOVE,
    empty_board, to_board, get_empty_cells, place_mark, format_board,
)
from .win_checker import WIN_LINES, evaluate, check_winner, is_draw, get_winning_line
from .ai_player import AIPlayer, select_move
from .move_validator import ValidationResult, validate_move, get_valid_moves
