"""
Test script for the TicTacToe AI player.
Run this directly, or collect it with pytest.
"""

import sys
from itertools import product

import pytest

from tictactoe_logic.game_state import (
    Mark, InvalidBoardError, InvalidMarksError, NO_MOVE, CORNERS,
    to_board, empty_board,
)
from tictactoe_logic.win_checker import evaluate
from tictactoe_logic.ai_player import AIPlayer, select_move


X = Mark.X
O = Mark.O


def fixed(value):
    """Random source that always returns value."""
    return lambda: value


def sequence(*values):
    """Random source that returns values in order."""
    values = iter(values)
    return lambda: next(values)


# Center, corners and all-but-two edges filled; no open line for either mark
EDGES_ONLY = to_board(["O", "X", "O", "", "X", "", "X", "O", "X"])


def test_takes_immediate_win():
    """AI completes its own line."""
    print("\n=== Testing Immediate Win ===")
    board = to_board(["X", "X", "", "", "O", "", "", "", "O"])
    assert select_move(board, X, O, fixed(0)) == 2
    print("  ✓ Takes the win")


def test_blocks_opponent_win():
    """AI blocks the opponent's line."""
    print("\n=== Testing Block ===")
    board = to_board(["O", "O", "", "X", "", "", "", "", ""])
    assert select_move(board, X, O, fixed(0)) == 2
    print("  ✓ Blocks the opponent")


def test_win_beats_block():
    """A win is preferred over blocking, center or corners."""
    print("\n=== Testing Win Priority ===")
    board = to_board(["X", "X", "", "O", "O", "", "", "", ""])
    # X wins at 2 even though O threatens 5
    assert select_move(board, X, O, fixed(0)) == 2
    # O wins at 5 even though X threatens 2
    assert select_move(board, O, X, fixed(0)) == 5

    # Center is open, but the win comes first
    board = to_board(["O", "", "", "O", "", "", "", "", ""])
    assert select_move(board, O, X, fixed(0)) == 6
    print("  ✓ Win comes first")


def test_first_winning_cell_in_index_order():
    """With two winning cells, the lower index is chosen."""
    print("\n=== Testing Win Tie-Break ===")
    board = to_board(["X", "X", "", "X", "", "", "", "O", "O"])
    # Both 2 (row) and 6 (column) win for X
    assert select_move(board, X, O, fixed(0)) == 2
    print("  ✓ Lowest winning index")


def test_takes_center():
    """AI takes the center on an open board."""
    print("\n=== Testing Center ===")
    assert select_move(empty_board(), X, O, fixed(0)) == 4
    assert select_move(to_board(["X", "", "", "", "", "", "", "", ""]), O, X, fixed(0.9)) == 4
    print("  ✓ Takes center")


def test_picks_corner():
    """With the center taken, AI picks a corner using the random source."""
    print("\n=== Testing Corner ===")
    board = to_board(["", "", "", "", "O", "", "", "", ""])
    assert select_move(board, X, O, fixed(0)) == 0
    assert select_move(board, X, O, fixed(0.3)) == 2
    assert select_move(board, X, O, fixed(0.5)) == 6
    assert select_move(board, X, O, fixed(0.99)) == 8
    assert select_move(board, X, O) in CORNERS

    # Only the empty corners are candidates (0-4-8 is mixed, no threat)
    board = to_board(["X", "", "", "", "O", "", "", "", "O"])
    assert select_move(board, X, O, fixed(0)) == 2
    assert select_move(board, X, O, fixed(0.99)) == 6
    print("  ✓ Picks corner")


def test_fallback_any_cell():
    """With center and corners gone, AI picks any empty cell."""
    print("\n=== Testing Fallback ===")
    board = to_board(["X", "O", "X", "O", "X", "O", "", "O", "X"])
    assert select_move(board, X, O, fixed(0)) == 6

    assert select_move(EDGES_ONLY, X, O, fixed(0)) == 3
    assert select_move(EDGES_ONLY, X, O, fixed(0.7)) == 5
    print("  ✓ Falls back to any cell")


def test_bad_random_source_is_clamped():
    """Out-of-range and non-finite random values never break the AI."""
    print("\n=== Testing Random Clamping ===")
    corner_board = to_board(["", "", "", "", "O", "", "", "", ""])

    assert select_move(corner_board, X, O, fixed(1.0)) == 8
    assert select_move(corner_board, X, O, fixed(5.0)) == 8
    assert select_move(corner_board, X, O, fixed(1e308)) == 8
    assert select_move(corner_board, X, O, fixed(-0.5)) == 0
    assert select_move(corner_board, X, O, fixed(float("nan"))) == 0
    assert select_move(corner_board, X, O, fixed(float("inf"))) == 0
    assert select_move(corner_board, X, O, fixed(float("-inf"))) == 0
    assert select_move(corner_board, X, O, fixed(None)) == 0
    assert select_move(corner_board, X, O, fixed(10 ** 400)) == 8
    assert select_move(corner_board, X, O, fixed(-10 ** 400)) == 0

    assert select_move(EDGES_ONLY, X, O, fixed(1.0)) == 5
    assert select_move(EDGES_ONLY, X, O, fixed(float("nan"))) == 3
    print("  ✓ Random values clamped")


def test_random_source_only_used_when_needed():
    """Win, block and center never consult the random source."""
    print("\n=== Testing Random Source Use ===")

    def boom():
        raise AssertionError("random source should not be called")

    assert select_move(empty_board(), X, O, boom) == 4
    assert select_move(to_board(["O", "O", "", "X", "", "", "", "", ""]), X, O, boom) == 2

    # One draw per corner pick
    board = to_board(["", "", "", "", "O", "", "", "", ""])
    rng = sequence(0.99, 0.0)
    assert select_move(board, X, O, rng) == 8
    assert select_move(board, X, O, rng) == 0
    print("  ✓ Random source use OK")


def test_full_board_returns_no_move():
    """A full board has no legal move."""
    print("\n=== Testing Full Board ===")
    draw = to_board(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    assert select_move(draw, X, O, fixed(0)) == NO_MOVE
    assert select_move(draw, O, X, fixed(0)) == NO_MOVE
    print("  ✓ Full board returns -1")


def test_does_not_mutate_board():
    """The board passed in is never changed."""
    print("\n=== Testing No Mutation ===")
    board = [X, X, None, None, O, None, None, None, O]
    before = list(board)
    select_move(board, X, O, fixed(0))
    select_move(board, O, X, fixed(0))
    assert board == before
    print("  ✓ Board untouched")


def test_rejects_bad_input():
    """Malformed input is a programming error."""
    print("\n=== Testing Bad Input ===")
    with pytest.raises(InvalidMarksError):
        select_move(empty_board(), X, X)
    with pytest.raises(InvalidMarksError):
        select_move(empty_board(), "X", "O")
    with pytest.raises(InvalidBoardError):
        select_move([None] * 8, X, O)
    with pytest.raises(InvalidBoardError):
        select_move(["", "", "", "", "", "", "", "", ""], X, O)
    print("  ✓ Bad input rejected")


def test_all_boards():
    """On every 9-cell board, the move is an empty cell, or -1 iff full."""
    print("\n=== Testing All Boards ===")
    for cells in product((None, X, O), repeat=9):
        for ai_mark in (X, O):
            move = select_move(cells, ai_mark, ai_mark.opposite(), fixed(0.5))
            if None in cells:
                assert 0 <= move <= 8
                assert cells[move] is None
            else:
                assert move == NO_MOVE
    print("  ✓ All boards OK")


def test_winning_move_is_taken_when_available():
    """If any empty cell wins for the AI, the chosen move wins."""
    print("\n=== Testing Win Property ===")
    for cells in product((None, X, O), repeat=9):
        if evaluate(cells).is_over:
            continue
        winning = [
            i for i in range(9)
            if cells[i] is None
            and evaluate(cells[:i] + (X,) + cells[i + 1:]).winner == X
        ]
        if winning:
            assert select_move(cells, X, O, fixed(0)) == winning[0]
    print("  ✓ Win property OK")


def test_ai_player():
    """AIPlayer wraps select_move with its own mark and random source."""
    print("\n=== Testing AIPlayer ===")
    ai = AIPlayer(X, rng=fixed(0))
    assert ai.opponent_mark == O
    assert ai.get_move(to_board(["X", "X", "", "", "O", "", "", "", "O"])) == 2
    assert ai.get_move(to_board(["", "", "", "", "O", "", "", "", ""])) == 0

    assert ai.get_move_suggestion(empty_board()) == "Place X at cell 4 (1, 1)"
    full = to_board(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    assert ai.get_move(full) == NO_MOVE
    assert ai.get_move_suggestion(full) == "No moves available!"

    default = AIPlayer()
    assert default.mark == O
    assert default.get_move(empty_board()) == 4
    print("  ✓ AIPlayer OK")


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - AI Player Tests")
    print("=" * 60)

    tests = {
        "Immediate Win": test_takes_immediate_win,
        "Block": test_blocks_opponent_win,
        "Win Priority": test_win_beats_block,
        "Win Tie-Break": test_first_winning_cell_in_index_order,
        "Center": test_takes_center,
        "Corner": test_picks_corner,
        "Fallback": test_fallback_any_cell,
        "Random Clamping": test_bad_random_source_is_clamped,
        "Random Source Use": test_random_source_only_used_when_needed,
        "Full Board": test_full_board_returns_no_move,
        "No Mutation": test_does_not_mutate_board,
        "Bad Input": test_rejects_bad_input,
        "All Boards": test_all_boards,
        "Win Property": test_winning_move_is_taken_when_available,
        "AIPlayer": test_ai_player,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e!r}")
            results[name] = False

    print("\n" + "=" * 60)
    print("   Test Results")
    print("=" * 60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("\nAll tests passed!\n")
        return 0
    else:
        print("\nSome tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
