"""
TicTacToe console UI.
A line-based interface for playing against the computer.

Shows:
- The board after every move
- Prompts for the human's mark and moves
- Game status and the final result
"""

from typing import Callable, Optional, Tuple

from tictactoe.board import Board, Mark, render


QUIT_WORDS = {"q", "quit", "exit"}


class ConsoleIO:
    """
    Input/Output for the game.

    Everything the game reads or prints goes through here, so tests
    can swap in a scripted version.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def prompt(self, text: str) -> str:
        """
        Show a prompt and read one line.

        Raises:
            EOFError: If input is closed.
        """
        return self.input_fn(text)

    def show(self, text: str = ""):
        """Display a line of text."""
        self.output_fn(text)

    def show_board(self, board: Board):
        """Print the board between blank lines."""
        self.show()
        self.show(render(board))
        self.show()


def parse_tile(line: str) -> Mark:
    """
    Parse the human's choice of mark.

    Raises:
        ValueError: If the line is not X or O.
    """
    return Mark.from_symbol(line)


def parse_move(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse a move like "1 2" or "1,2" into (row, col).

    Range is not checked here - the board rejects coordinates outside 0-2.

    Returns:
        (row, col), or None if the player wants to quit.

    Raises:
        ValueError: If the line is not two whole numbers.
    """
    text = line.strip().lower()
    if text in QUIT_WORDS:
        return None

    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError("Enter a move as: row col (e.g. 1 2), or q to quit.")

    try:
        row, col = (int(part) for part in parts)
    except ValueError:
        raise ValueError(f"Invalid move {line.strip()!r}. Row and column must be numbers.") from None

    return row, col
