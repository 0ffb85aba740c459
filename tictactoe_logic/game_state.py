"""
Board model for TicTacToe.
Marks, cells, outcomes and the fixed board geometry.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple


class Mark(Enum):
    """The two marks placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


# A cell is either empty (None) or holds a Mark
Cell = Optional[Mark]

# Row-major over the 3x3 grid:
#   0 1 2
#   3 4 5
#   6 7 8
Board = Sequence[Cell]

BOARD_SIZE = 3
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

CENTER = 4
CORNERS = (0, 2, 6, 8)

# Returned by the move selector when the board is full
NO_MOVE = -1


class Outcome(Enum):
    """Classification of a board. Exactly one applies to any board."""
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"
    ONGOING = "ongoing"

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        """Get the winning outcome for a mark."""
        return cls.X_WINS if mark == Mark.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or an ongoing game."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None

    @property
    def is_over(self) -> bool:
        return self != Outcome.ONGOING


class InvalidBoardError(ValueError):
    """The board is not a 9-cell sequence of empty cells and marks."""


class InvalidMarksError(ValueError):
    """The AI and opponent marks are not two distinct Mark values."""


# Loose cell values accepted by to_board()
_CELL_ALIASES = {
    "X": Mark.X,
    "O": Mark.O,
    "": None,
    " ": None,
    ".": None,
}


def to_board(cells) -> Tuple[Cell, ...]:
    """
    Normalize loose input into a board tuple.

    Accepts Mark values, None, and the strings "X", "O", "", " ", ".".

    Raises:
        InvalidBoardError: Wrong length or an unknown cell value.
    """
    cells = list(cells)
    if len(cells) != BOARD_CELLS:
        raise InvalidBoardError(
            f"Board must have {BOARD_CELLS} cells, got {len(cells)}"
        )

    board = []
    for index, cell in enumerate(cells):
        if cell is None or isinstance(cell, Mark):
            board.append(cell)
        elif isinstance(cell, str) and cell.upper() in _CELL_ALIASES:
            board.append(_CELL_ALIASES[cell.upper()])
        else:
            raise InvalidBoardError(f"Invalid value {cell!r} in cell {index}")
    return tuple(board)


def validate_board(board: Board) -> None:
    """
    Check that a board is well formed.

    Raises:
        InvalidBoardError: Wrong length, or a cell that is neither None
            nor a Mark.
    """
    if len(board) != BOARD_CELLS:
        raise InvalidBoardError(
            f"Board must have {BOARD_CELLS} cells, got {len(board)}"
        )
    for index, cell in enumerate(board):
        if cell is not None and not isinstance(cell, Mark):
            raise InvalidBoardError(
                f"Invalid value {cell!r} in cell {index}. Use to_board() for strings."
            )


def validate_marks(ai_mark: Mark, opponent_mark: Mark) -> None:
    """
    Check that the two marks in play are distinct Mark values.

    Raises:
        InvalidMarksError: If either is not a Mark or they are equal.
    """
    if not isinstance(ai_mark, Mark) or not isinstance(opponent_mark, Mark):
        raise InvalidMarksError(
            f"Marks must be Mark values, got {ai_mark!r} and {opponent_mark!r}"
        )
    if ai_mark == opponent_mark:
        raise InvalidMarksError(f"AI and opponent both play {ai_mark.value}")


def empty_board() -> Tuple[Cell, ...]:
    """Create a board with all 9 cells empty."""
    return (None,) * BOARD_CELLS


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board snapshot.

    Returns:
        List of cell indices in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def place_mark(board: Board, index: int, mark: Mark) -> Tuple[Cell, ...]:
    """
    Place a mark on a copy of the board.

    The board passed in is never modified.

    Args:
        board: The board snapshot.
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board tuple with the mark placed.
    """
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * BOARD_SIZE + col


def format_board(board: Board, show_indices: bool = True) -> str:
    """
    Render the board as a text grid.

    Empty cells show their index when show_indices is set, so a human
    player can see which number to type.
    """
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = row_col_to_index(row, col)
            cell = board[index]
            if cell is not None:
                cells.append(cell.value)
            elif show_indices:
                cells.append(str(index))
            else:
                cells.append(" ")
        lines.append(" " + " | ".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")
    return "\n".join(lines)
