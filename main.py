"""
Main script for TicTacToe.

This script ties together:
- UI (console prompts and board display)
- Logic (board, move validation, win checking, AI)

Run this script to play TicTacToe against the computer!
"""

import random
from typing import Optional

from tictactoe.board import Board, Mark
from tictactoe.config import GameConfig
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import Result, Status, WinChecker
from tictactoe.ai_player import AIPlayer, Difficulty

from ui import ConsoleIO, parse_move, parse_tile


class TicTacToeGame:
    """
    Main controller for a game against the computer.

    Game flow:
    1. Human chooses X or O (X moves first)
    2. Human types a move, which is validated and applied
    3. Computer calculates its response and plays it
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        io: Optional[ConsoleIO] = None,
        human_mark: Optional[Mark] = None,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.DEBUG_MODE
    ):
        """
        Initialize the game.

        Args:
            io: Console input/output. Uses stdin/stdout if not provided.
            human_mark: The human's mark. Asked for at the start if None.
            difficulty: How well the computer plays.
            rng: Random source for the computer on EASY and MEDIUM.
            verbose: Print AI debug output.
        """
        self.io = io or ConsoleIO()
        self.human_mark = human_mark
        self.difficulty = difficulty
        self.rng = rng
        self.verbose = verbose

        self.board = Board.empty()
        self.current = Mark.from_symbol(GameConfig.FIRST_PLAYER)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai: Optional[AIPlayer] = None

    def choose_tiles(self) -> Mark:
        """Ask the human for their mark until they give a valid one."""
        while True:
            line = self.io.prompt("Do you want to be X or O? ")
            try:
                return parse_tile(line)
            except ValueError as e:
                self.io.show(f"ERROR: {e}")

    def play(self) -> Result:
        """
        Play one game.

        Returns:
            The final Result. Status.CONTINUE if the human quit early.
        """
        if self.human_mark is None:
            self.human_mark = self.choose_tiles()

        self.ai = AIPlayer(
            self.human_mark.opposite(),
            difficulty=self.difficulty,
            rng=self.rng,
            verbose=self.verbose
        )

        self.io.show("=" * 40)
        self.io.show(f"   Human plays: {self.human_mark.symbol}")
        self.io.show(f"   Computer plays: {self.ai.player.symbol} ({self.difficulty.value})")
        self.io.show("=" * 40)
        self.io.show_board(self.board)

        while True:
            result = self.win_checker.evaluate(self.board)
            if result.is_terminal:
                self.announce(result)
                return result

            if self.current == self.human_mark:
                new_board = self._human_move()
                if new_board is None:
                    self.io.show("Game quit by user.")
                    return result
            else:
                new_board = self._computer_move()

            self.board = new_board
            self.current = self.current.opposite()
            self.io.show_board(self.board)

    def _human_move(self) -> Optional[Board]:
        """
        Read moves until the human gives a legal one.

        Returns:
            The board after the move, or None if the human quit.
        """
        while True:
            line = self.io.prompt(f"Your move ({self.human_mark.symbol}), enter row col (0-2): ")
            try:
                move = parse_move(line)
            except ValueError as e:
                self.io.show(f"ERROR: {e}")
                continue

            if move is None:
                return None

            row, col = move
            new_board, validation = self.validator.try_move(self.board, row, col, self.human_mark)
            if not validation.is_valid:
                self.io.show(f"ERROR: {validation.error_message}")
                continue

            return new_board

    def _computer_move(self) -> Board:
        """Let the AI choose a move and apply it."""
        self.io.show(">>> Computer is thinking...")

        move = self.ai.get_best_move(self.board)
        if move is None:
            raise RuntimeError(f"AI could not find a move on a non-terminal board:\n{self.board}")

        row, col = move
        self.io.show(f">>> Computer places {self.ai.player.symbol} at ({row}, {col})")

        # Moves from the AI are always legal; a MoveError here is a bug
        return self.board.apply_move(row, col, self.ai.player)

    def announce(self, result: Result):
        """Show the final game result."""
        self.io.show("=" * 40)
        self.io.show("   GAME OVER!")
        self.io.show("=" * 40)

        if result.status == Status.WIN:
            if result.winner == self.human_mark:
                self.io.show(f"Congratulations! {result.winner.symbol} wins - you beat the computer!")
            else:
                self.io.show(f"{result.winner.symbol} wins! The computer got you this time.")
        else:
            self.io.show("It's a draw! Good game!")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Play TicTacToe against a perfect computer opponent")
    parser.add_argument(
        "--tile",
        choices=["X", "O", "x", "o"],
        help="Your mark (asked at the start if not given). X moves first."
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Computer strength: easy (random), medium (mixed), hard (perfect play)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the easy and medium computer"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI debug output"
    )

    args = parser.parse_args(argv)

    game = TicTacToeGame(
        human_mark=Mark.from_symbol(args.tile) if args.tile else None,
        difficulty=Difficulty(args.difficulty),
        rng=random.Random(args.seed) if args.seed is not None else None,
        verbose=args.verbose or GameConfig.DEBUG_MODE
    )

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
