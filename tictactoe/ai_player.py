"""
AI player for TicTacToe.
Uses an exhaustive Minimax search to choose the best move.
"""

import random
from enum import Enum
from typing import NamedTuple, Optional, Tuple, List

from .board import Board, Mark
from .config import GameConfig
from .move_validator import empty_cells, valid_moves
from .win_checker import FLAT_LINES, first_complete_line


class Outcome(Enum):
    """Result of perfect play, seen from the player about to move."""
    VICTORY = "victory"
    TIE = "tie"
    DEFEAT = "defeat"

    def inverted(self) -> "Outcome":
        """The same outcome seen from the other player."""
        if self == Outcome.VICTORY:
            return Outcome.DEFEAT
        if self == Outcome.DEFEAT:
            return Outcome.VICTORY
        return Outcome.TIE


# Preference order when choosing between moves
OUTCOME_PRIORITY = [Outcome.VICTORY, Outcome.TIE, Outcome.DEFEAT]


class BestMove(NamedTuple):
    row: int
    col: int
    outcome: Outcome


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Sometimes optimal, sometimes random
    HARD = "hard"        # Full minimax


def _classify(codes: Tuple[int, ...], empty: List[int], player: Mark) -> Outcome:
    """Outcome for player of a position on which player has just moved."""
    line = first_complete_line(codes)
    if line is not None:
        return Outcome.VICTORY if codes[FLAT_LINES[line][0]] == player.code else Outcome.DEFEAT
    if not empty:
        return Outcome.TIE

    # Opponent moves next; their victory is our defeat
    return _search(codes, empty, player.opposite())[1].inverted()


def _search(codes: Tuple[int, ...], empty: List[int], player: Mark) -> Tuple[int, Outcome]:
    """
    Minimax over row-major tuples of cell codes.

    Works on plain tuples rather than Boards, since it visits about
    half a million positions from an empty board.

    Returns:
        (cell index, outcome) of the chosen move.
    """
    code = player.code
    first_move = {}
    for position, index in enumerate(empty):
        child = codes[:index] + (code,) + codes[index + 1:]
        outcome = _classify(child, empty[:position] + empty[position + 1:], player)
        first_move.setdefault(outcome, index)

    for outcome in OUTCOME_PRIORITY:
        if outcome in first_move:
            return first_move[outcome], outcome

    # Every move gets an outcome, so this is never reached
    raise RuntimeError("No move was classified")


def best_move(board: Board, player: Mark) -> BestMove:
    """
    Find the optimal move for player with a full Minimax search.

    Every empty cell is tried and its outcome worked out under perfect
    play. A winning move is preferred over a tie, and a tie over a loss.
    Among equally good moves the first in row-major order is chosen.

    Args:
        board: A board that still has empty cells.
        player: The mark to move.

    Returns:
        BestMove(row, col, outcome).

    Raises:
        RuntimeError: If the board has no empty cells.
    """
    codes = tuple(board.codes())
    empty = empty_cells(codes)
    if not empty:
        raise RuntimeError(f"best_move called on a board with no valid moves:\n{board}")

    index, outcome = _search(codes, empty, player)
    row, col = divmod(index, GameConfig.BOARD_SIZE)
    return BestMove(row, col, outcome)


def random_move(board: Board, rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """
    Pick a uniformly random empty cell.

    Raises:
        RuntimeError: If the board has no empty cells.
    """
    moves = valid_moves(board)
    if not moves:
        raise RuntimeError(f"random_move called on a board with no valid moves:\n{board}")
    return (rng or random).choice(moves)


class AIPlayer:
    """
    An AI that plays TicTacToe.

    On HARD it always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.DEBUG_MODE
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            difficulty: How well the AI plays.
            rng: Random source for EASY and MEDIUM play.
            verbose: Print the outcome of each search.
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.verbose = verbose

        # Outcome predicted by the last search, None after a random move
        self.last_outcome: Optional[Outcome] = None

    def get_best_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Get the move to play on the current board.

        Returns:
            (row, col) of the chosen move, or None if no moves available.
        """
        if not valid_moves(board):
            return None

        self.last_outcome = None

        if self.difficulty == Difficulty.EASY:
            return random_move(board, self.rng)

        if (self.difficulty == Difficulty.MEDIUM
                and self.rng.random() >= GameConfig.MEDIUM_OPTIMAL_PROBABILITY):
            return random_move(board, self.rng)

        row, col, outcome = best_move(board, self.player)
        self.last_outcome = outcome

        if self.verbose:
            print(f"AI ({self.player.symbol}) best move: ({row}, {col}), expects {outcome.value}")

        return row, col

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        moves: List[Tuple[int, int]] = valid_moves(board)
        if not moves:
            return "No moves available!"

        row, col, outcome = best_move(board, self.player)
        return f"Place {self.player.symbol} at position ({row}, {col}) ({outcome.value})"


# Quick test
if __name__ == "__main__":
    import time

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = Board.from_rows(["XX ", " O ", "   "])
    print(board)
    move = ai.get_best_move(board)
    print(f"AI's move: {move} ({ai.last_outcome.value})")
    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: full search from an empty board
    start = time.perf_counter()
    result = best_move(Board.empty(), Mark.X)
    print(f"Opening move: {result} in {time.perf_counter() - start:.2f}s")
    assert result.outcome == Outcome.TIE

    print("\nAIPlayer test done!")
