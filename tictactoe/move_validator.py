"""
Move validator for TicTacToe.
Lists the legal moves and checks moves coming from a human player.
"""

from typing import Optional, Sequence, Tuple, List
from dataclasses import dataclass

from .board import Board, Mark, MoveError, OutOfBounds, CellOccupied
from .config import GameConfig
from .win_checker import evaluate


def empty_cells(codes: Sequence[int]) -> List[int]:
    """Indices of the empty cells in a row-major list of cell codes."""
    return [index for index, code in enumerate(codes) if code == GameConfig.EMPTY_CODE]


def valid_moves(board: Board) -> List[Tuple[int, int]]:
    """
    Get every empty cell in row-major order.

    Returns:
        List of (row, col) tuples. Empty when the board is full.
    """
    return [divmod(index, GameConfig.BOARD_SIZE) for index in empty_cells(board.codes())]


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[MoveError] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be 0-2
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if evaluate(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        try:
            current = board.get(row, col)
        except OutOfBounds as e:
            return ValidationResult(is_valid=False, error_message=str(e), error=e)

        if current is not None:
            error = CellOccupied(row, col, current)
            return ValidationResult(is_valid=False, error_message=str(error), error=error)

        return ValidationResult(is_valid=True)

    def try_move(
        self,
        board: Board,
        row: int,
        col: int,
        mark: Mark
    ) -> Tuple[Board, ValidationResult]:
        """
        Apply a move if it is legal.

        Returns:
            (new board, result) on success, or (the unchanged board, result)
            when the move was refused.
        """
        result = self.validate_move(board, row, col)
        if not result.is_valid:
            return board, result
        return board.apply_move(row, col, mark), result

    def get_valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves on the board.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if evaluate(board).is_terminal:
            return []
        return valid_moves(board)
