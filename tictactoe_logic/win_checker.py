"""
Win checker for TicTacToe.
Classifies a board as a win, a draw, or still ongoing.
"""

from typing import Optional, Tuple
from .game_state import Board, Mark, Outcome, validate_board


# All possible winning lines as index triples.
# The order is fixed: the first matching line decides the winner.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def _check_line(board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
    """Return the mark filling all 3 cells of the line, or None."""
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the winning line if there is one.

    Args:
        board: The board snapshot.

    Returns:
        The first complete line as an index triple, or None.
    """
    validate_board(board)
    for line in WIN_LINES:
        if _check_line(board, line) is not None:
            return line
    return None


def check_winner(board: Board) -> Optional[Mark]:
    """
    Check if there's a winner.

    Args:
        board: The board snapshot.

    Returns:
        The winning Mark, or None if no line is complete.
    """
    line = get_winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_draw(board: Board) -> bool:
    """A draw is a full board with no complete line."""
    return evaluate(board) == Outcome.DRAW


def evaluate(board: Board) -> Outcome:
    """
    Classify a board.

    Args:
        board: The board snapshot (9 cells, None for empty).

    Returns:
        The winner's Outcome if any line is complete, DRAW if the board
        is full, ONGOING otherwise.

    Raises:
        InvalidBoardError: If the board is not well formed.
    """
    winner = check_winner(board)
    if winner is not None:
        return Outcome.win_for(winner)

    if all(cell is not None for cell in board):
        return Outcome.DRAW

    return Outcome.ONGOING
