"""
AI player for TicTacToe.
Picks a move with a fixed-priority, one-ply heuristic.
"""

import math
import random
from typing import Callable, List, Optional
from .game_state import (
    Board, Mark, Outcome, CENTER, CORNERS, NO_MOVE,
    get_empty_cells, index_to_row_col, place_mark, validate_board, validate_marks,
)
from .win_checker import evaluate


# Zero-argument callable returning a float in [0, 1)
RandomSource = Callable[[], float]


def _clamp_index(value: float, length: int) -> int:
    """
    Turn a random value into an index in [0, length - 1].

    NaN, infinities and non-numbers count as 0. Values outside [0, 1),
    including ints too large for a float, are clamped.
    """
    if length <= 0:
        return 0
    try:
        value = float(value)
    except OverflowError:
        # Ints too large for a float
        value = 1.0 if value > 0 else 0.0
    except (TypeError, ValueError):
        value = 0.0
    if not math.isfinite(value):
        value = 0.0
    value = min(max(value, 0.0), 1.0)
    index = math.floor(value * length)
    return min(max(index, 0), length - 1)


def _find_winning_cell(board: Board, empty: List[int], mark: Mark) -> Optional[int]:
    """First empty cell (ascending) where placing mark wins, or None."""
    target = Outcome.win_for(mark)
    for index in empty:
        if evaluate(place_mark(board, index, mark)) == target:
            return index
    return None


def select_move(
    board: Board,
    ai_mark: Mark,
    opponent_mark: Mark,
    rng: Optional[RandomSource] = None,
) -> int:
    """
    Choose the AI's next move.

    Heuristic, first rule that applies wins:
        1. Win immediately if possible
        2. Block the opponent's immediate win
        3. Take the center
        4. Take a random empty corner
        5. Take a random empty cell

    Args:
        board: The board snapshot. Never modified.
        ai_mark: The mark the AI plays.
        opponent_mark: The mark the opponent plays.
        rng: Random source for steps 4 and 5. Defaults to random.random.

    Returns:
        An empty cell index (0-8), or NO_MOVE (-1) if the board is full.

    Raises:
        InvalidBoardError: If the board is not well formed.
        InvalidMarksError: If the marks are not two distinct Mark values.
    """
    validate_board(board)
    validate_marks(ai_mark, opponent_mark)
    if rng is None:
        rng = random.random

    empty = get_empty_cells(board)
    if not empty:
        return NO_MOVE

    # 1) Try to win now
    move = _find_winning_cell(board, empty, ai_mark)
    if move is not None:
        return move

    # 2) Block opponent immediate win
    move = _find_winning_cell(board, empty, opponent_mark)
    if move is not None:
        return move

    # 3) Center
    if board[CENTER] is None:
        return CENTER

    # 4) Corners
    corners = [index for index in CORNERS if board[index] is None]
    if corners:
        return corners[_clamp_index(rng(), len(corners))]

    # 5) Any remaining
    return empty[_clamp_index(rng(), len(empty))]


class AIPlayer:
    """
    The automated opponent.

    Holds its mark and its random source, so a caller can inject a
    seeded or fixed source for repeatable games.
    """

    def __init__(self, mark: Mark = Mark.O, rng: Optional[RandomSource] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            rng: Random source for corner and fallback picks.
        """
        self.mark = mark
        self.rng = rng if rng is not None else random.random

    @property
    def opponent_mark(self) -> Mark:
        return self.mark.opposite()

    def get_move(self, board: Board) -> int:
        """
        Get the AI's move for the current position.

        Returns:
            Cell index (0-8), or NO_MOVE if no moves are available.
        """
        return select_move(board, self.mark, self.opponent_mark, self.rng)

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: The board snapshot.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_move(board)

        if move == NO_MOVE:
            return "No moves available!"

        row, col = index_to_row_col(move)
        return f"Place {self.mark.value} at cell {move} ({row}, {col})"
