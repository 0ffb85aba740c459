"""
Move validator for TicTacToe.
Validates moves entered by a human player.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import BOARD_CELLS, Board, get_empty_cells
from .win_checker import evaluate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def validate_move(board: Board, index: int) -> ValidationResult:
    """
    Validate a move.

    Rules:
    1. Game must not be over
    2. Index must be 0-8
    3. Can only place on empty cells

    Args:
        board: The board snapshot.
        index: Cell to place the mark in.

    Returns:
        ValidationResult with is_valid and error_message.
    """
    # Check if game is over
    if evaluate(board).is_over:
        return ValidationResult(
            is_valid=False,
            error_message="Game is already over!"
        )

    # Check if index is in valid range
    if not (0 <= index < BOARD_CELLS):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}."
        )

    # Check if cell is empty
    if board[index] is not None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Cell {index} is already occupied by {board[index].value}"
        )

    return ValidationResult(is_valid=True)


def get_valid_moves(board: Board) -> List[int]:
    """
    Get all valid moves on the board.

    Returns:
        List of empty cell indices, or [] once the game is over.
    """
    if evaluate(board).is_over:
        return []
    return get_empty_cells(board)
