"""
Win checker for TicTacToe.
Classifies a board as a win, a draw, or a game still in progress.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass

from .board import Board, Mark
from .config import GameConfig

Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]


# All possible winning lines, in the order they are checked.
# The first complete line found decides the winner.
WINNING_LINES: List[Line] = [
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
]


class Status(Enum):
    """Possible states of a board."""
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"


@dataclass(frozen=True)
class Result:
    """
    Result of evaluating a board.

    winner and line are only set when status is WIN.
    """
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @classmethod
    def win(cls, mark: Mark, line: Optional[Line] = None) -> "Result":
        return cls(Status.WIN, mark, line)

    @property
    def is_terminal(self) -> bool:
        """True if no further moves should be made."""
        return self.status != Status.CONTINUE


DRAW = Result(Status.DRAW)
CONTINUE = Result(Status.CONTINUE)


# Each line as indices into the row-major list of cell codes
FLAT_LINES: List[Tuple[int, int, int]] = [
    tuple(row * GameConfig.BOARD_SIZE + col for row, col in line) for line in WINNING_LINES
]


def first_complete_line(codes: Sequence[int]) -> Optional[int]:
    """
    Find the first line filled by a single mark.

    Args:
        codes: Row-major cell codes, as returned by Board.codes().

    Returns:
        Index into WINNING_LINES, or None if no line is complete.
    """
    for index, (a, b, c) in enumerate(FLAT_LINES):
        first = codes[a]
        if first != GameConfig.EMPTY_CODE and first == codes[b] == codes[c]:
            return index
    return None


def evaluate_codes(codes: Sequence[int]) -> Result:
    """Classify a row-major list of cell codes. See evaluate."""
    index = first_complete_line(codes)
    if index is not None:
        owner = Mark.from_code(codes[FLAT_LINES[index][0]])
        return Result.win(owner, WINNING_LINES[index])

    if GameConfig.EMPTY_CODE not in codes:
        return DRAW
    return CONTINUE


def evaluate(board: Board) -> Result:
    """
    Classify a board.

    Lines are scanned in WINNING_LINES order and the first complete line
    is returned, even on boards that could never occur in a real game.

    Args:
        board: Any board.

    Returns:
        Result.win(mark, line) for a completed line, DRAW for a full board
        with no line, CONTINUE otherwise.
    """
    return evaluate_codes(board.codes())


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    def evaluate(self, board: Board) -> Result:
        return evaluate(board)

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return evaluate(board).winner

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return evaluate(board).status == Status.DRAW

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as three (row, col) tuples, or None.
        """
        return evaluate(board).line


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    won = Board.from_rows(["XXX", "OO ", "   "])
    print(won)
    print(f"Winner: {checker.check_winner(won)}, line: {checker.get_winning_line(won)}")
    assert checker.check_winner(won) == Mark.X

    drawn = Board.from_rows(["XOX", "XOO", "OXX"])
    print(f"Draw: {checker.check_draw(drawn)}")
    assert checker.check_draw(drawn)

    print("\nWinChecker test done!")
