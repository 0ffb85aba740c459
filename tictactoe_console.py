"""
Console TicTacToe against the AI.

This script owns everything around the decision core:
- The board and whose turn it is
- Reading the human's moves
- Pausing before the AI answers
- Restarting with swapped marks

Run this script to play TicTacToe against the AI!
"""

import random
import time
from typing import Optional, Tuple

from tictactoe_logic.config import GameConfig
from tictactoe_logic.game_state import (
    Mark, Outcome, Cell, NO_MOVE, empty_board, place_mark, format_board,
)
from tictactoe_logic.move_validator import validate_move
from tictactoe_logic.win_checker import evaluate, get_winning_line
from tictactoe_logic.ai_player import AIPlayer, RandomSource


class TicTacToeGame:
    """
    Main controller for a console game.

    Game flow:
    1. X moves first (human or AI)
    2. After every mark the board is evaluated
    3. The AI answers after a short pause
    4. Repeat until someone wins or it's a draw
    5. Restart swaps the marks
    """

    def __init__(
        self,
        player_mark: Optional[Mark] = None,
        rng: Optional[RandomSource] = None,
        ai_delay: bool = True,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the game.

        Args:
            player_mark: Mark for the human. Random if None.
            rng: Random source for the AI's corner and fallback picks.
            ai_delay: If False, the AI answers immediately.
            config: Game settings.
        """
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.random
        self.ai_delay = ai_delay

        if player_mark is None:
            player_mark = Mark.X if self.rng() < 0.5 else Mark.O
        self.player_mark = player_mark
        self.ai = AIPlayer(player_mark.opposite(), rng=self.rng)

        self.board: Tuple[Cell, ...] = empty_board()
        self.current_turn = self.config.FIRST_TURN
        self.game_over = False
        self.result = Outcome.ONGOING

    @property
    def ai_mark(self) -> Mark:
        return self.ai.mark

    def start_new_game(self, swap_player_mark: bool = False):
        """
        Reset the board for a new round.

        Args:
            swap_player_mark: Give the human the other mark.
        """
        if swap_player_mark:
            self.player_mark = self.player_mark.opposite()
            self.ai = AIPlayer(self.player_mark.opposite(), rng=self.rng)

        self.board = empty_board()
        self.current_turn = self.config.FIRST_TURN
        self.game_over = False
        self.result = Outcome.ONGOING

        # The AI opens when it plays first
        if self.current_turn == self.ai_mark:
            self._pause(self.config.AI_OPENING_DELAY_S)
            self.ai_move()

    def handle_player_move(self, index: int) -> bool:
        """
        Place the human's mark and let the AI answer.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was accepted.
        """
        if self.game_over:
            print("Game is already over! Type 'r' to restart.")
            return False
        if self.current_turn != self.player_mark:
            print("It's not your turn!")
            return False

        validation = validate_move(self.board, index)
        if not validation.is_valid:
            print(f"Invalid move: {validation.error_message}")
            return False

        self._place_mark(index, self.player_mark)
        if self._check_game_end():
            return True

        self._pause(self.config.AI_MOVE_DELAY_S)
        self.ai_move()
        return True

    def ai_move(self):
        """Let the AI place its mark."""
        if self.game_over:
            return
        if self.current_turn != self.ai_mark:
            return

        move = self.ai.get_move(self.board)
        if move != NO_MOVE:
            if self.config.DEBUG_MODE:
                print(f"AI: {self.ai.get_move_suggestion(self.board)}")
            self._place_mark(move, self.ai_mark)

        self._check_game_end()

    def _place_mark(self, index: int, mark: Mark):
        self.board = place_mark(self.board, index, mark)
        self.current_turn = mark.opposite()

    def _check_game_end(self) -> bool:
        """Evaluate the board and end the game if it is decided."""
        self.result = evaluate(self.board)
        if self.result.is_over:
            self.game_over = True
        return self.game_over

    def _pause(self, seconds: float):
        if self.ai_delay and seconds > 0:
            time.sleep(seconds)

    def status_text(self) -> str:
        """Get the status line shown under the board."""
        if self.game_over:
            if self.result == Outcome.DRAW:
                return "Draw! Type 'r' to play again."
            if self.result.winner == self.player_mark:
                return f"You win as {self.player_mark}! Type 'r' to swap and play again."
            return f"AI wins as {self.ai_mark}. Type 'r' to swap and play again."

        role = f"You are {self.player_mark}"
        if self.current_turn == self.player_mark:
            return f"{role} - Your turn"
        return f"{role} - AI is thinking..."

    def print_board(self):
        """Print the board and status to console."""
        print()
        print(format_board(self.board, show_indices=self.config.SHOW_CELL_INDICES))

        line = get_winning_line(self.board)
        if line is not None:
            print(f"\nWinning line: {line}")

        print(f"\n{self.status_text()}")

    def run(self):
        """Interactive game loop."""
        width = self.config.BANNER_WIDTH
        print("\n" + "=" * width)
        print("   TicTacToe - You vs AI")
        print("   Cells are numbered 0-8. 'r' restarts, 'q' quits.")
        print("=" * width)

        self.start_new_game()

        while True:
            self.print_board()
            command = input("\n> ").strip().lower()

            if command in ("q", "quit", "exit"):
                break
            if command in ("r", "restart"):
                self.start_new_game(swap_player_mark=self.config.SWAP_MARKS_ON_RESTART)
                continue
            if not command.isdecimal():
                print("Enter a cell number 0-8, 'r' or 'q'.")
                continue

            self.handle_player_move(int(command))


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the AI")
    parser.add_argument(
        "--mark",
        choices=["X", "O"],
        type=str.upper,
        help="Your mark (default: random). X moves first."
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the AI's random choices for a repeatable game"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Let the AI answer immediately"
    )

    args = parser.parse_args()

    rng = random.Random(args.seed).random if args.seed is not None else None
    player_mark = Mark(args.mark) if args.mark else None

    game = TicTacToeGame(
        player_mark=player_mark,
        rng=rng,
        ai_delay=not args.no_delay
    )

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
