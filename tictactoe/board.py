"""
Board model for TicTacToe.
Tracks which mark sits in each of the nine cells.

A Board is an immutable value: every update returns a new Board and
leaves the old one untouched, so the search can explore moves freely.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple
from dataclasses import dataclass

import numpy as np

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def code(self) -> int:
        """Cell code used in the numpy grid."""
        return GameConfig.X_CODE if self == Mark.X else GameConfig.O_CODE

    @classmethod
    def from_code(cls, code: int) -> Optional["Mark"]:
        """
        Get the mark stored under a cell code, None for an empty cell.

        Raises:
            ValueError: If code is not a cell code.
        """
        if code == GameConfig.EMPTY_CODE:
            return None
        if code == GameConfig.X_CODE:
            return cls.X
        if code == GameConfig.O_CODE:
            return cls.O
        raise ValueError(f"Invalid cell code {code!r}")

    @classmethod
    def from_symbol(cls, text: str) -> "Mark":
        """
        Parse a mark from text ("x" or "o", any case).

        Raises:
            ValueError: If the text is not a mark.
        """
        symbol = text.strip().upper()
        for mark in cls:
            if mark.value == symbol:
                return mark
        raise ValueError(f"Invalid mark {text!r}. Must be X or O.")


class MoveError(ValueError):
    """Base class for moves the board refuses."""


class OutOfBounds(MoveError):
    """Row or column outside 0-2."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Invalid position ({row}, {col}). Must be 0-{GameConfig.BOARD_SIZE - 1}."
        )


class CellOccupied(MoveError):
    """The target cell already holds a mark."""

    def __init__(self, row: int, col: int, mark: Mark):
        self.row = row
        self.col = col
        self.mark = mark
        super().__init__(f"Cell ({row}, {col}) is already occupied by {mark.symbol}")


_CELL_CODES = [GameConfig.EMPTY_CODE, GameConfig.X_CODE, GameConfig.O_CODE]


def _check_bounds(row: int, col: int):
    size = GameConfig.BOARD_SIZE
    # Negative indices would wrap around in numpy, so check explicitly
    if not (0 <= row < size and 0 <= col < size):
        raise OutOfBounds(row, col)


@dataclass(frozen=True, eq=False)
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored in a read-only numpy int8 array:
    0 means empty, otherwise the code of the Mark in the cell.
    """

    grid: np.ndarray

    def __post_init__(self):
        size = GameConfig.BOARD_SIZE
        grid = np.asarray(self.grid)
        if grid.shape != (size, size):
            raise ValueError(f"Board grid must be {size}x{size}, got {grid.shape}")
        if not np.isin(grid, _CELL_CODES).all():
            raise ValueError(f"Board grid may only hold the codes {_CELL_CODES}, got:\n{grid}")

        # Own copy, so the caller cannot change the board through their array
        grid = np.array(grid, dtype=np.int8)
        grid.flags.writeable = False
        object.__setattr__(self, "grid", grid)

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with all nine cells empty."""
        size = GameConfig.BOARD_SIZE
        return cls(np.full((size, size), GameConfig.EMPTY_CODE, dtype=np.int8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """
        Build a board from three rows of symbols.

        Args:
            rows: e.g. ["X O", " X ", "O  "]. Empty cells are " " or ".".

        Returns:
            The Board.
        """
        board = cls.empty()
        if len(rows) != GameConfig.BOARD_SIZE:
            raise ValueError(f"Expected {GameConfig.BOARD_SIZE} rows, got {len(rows)}")

        for row, cells in enumerate(rows):
            if len(cells) != GameConfig.BOARD_SIZE:
                raise ValueError(f"Row {row} must have {GameConfig.BOARD_SIZE} cells: {cells!r}")
            for col, symbol in enumerate(cells):
                if symbol in (" ", "."):
                    continue
                board = board.set(row, col, Mark.from_symbol(symbol))
        return board

    def get(self, row: int, col: int) -> Optional[Mark]:
        """
        Get the mark at a cell.

        Raises:
            OutOfBounds: If row or col is not 0-2.
        """
        _check_bounds(row, col)
        return Mark.from_code(int(self.grid[row, col]))

    def set(self, row: int, col: int, mark: Mark) -> "Board":
        """
        Return a new board with the cell overwritten by mark.
        Does not check occupancy - use apply_move for gameplay.

        Raises:
            OutOfBounds: If row or col is not 0-2.
        """
        _check_bounds(row, col)
        grid = self.grid.copy()
        grid[row, col] = mark.code
        return Board(grid)

    def apply_move(self, row: int, col: int, mark: Mark) -> "Board":
        """
        Place a mark on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: The mark to place.

        Returns:
            The new board. The original board is unchanged.

        Raises:
            OutOfBounds: If row or col is not 0-2.
            CellOccupied: If the cell already holds a mark.
        """
        current = self.get(row, col)
        if current is not None:
            raise CellOccupied(row, col, current)
        return self.set(row, col, mark)

    def codes(self) -> List[int]:
        """Cell codes as a plain row-major list."""
        return self.grid.ravel().tolist()

    def is_full(self) -> bool:
        return not np.any(self.grid == GameConfig.EMPTY_CODE)

    def count(self, mark: Mark) -> int:
        """Number of cells holding mark."""
        return int(np.count_nonzero(self.grid == mark.code))

    def cells(self) -> Iterator[Tuple[int, int, Optional[Mark]]]:
        """Iterate (row, col, mark) in row-major order."""
        size = GameConfig.BOARD_SIZE
        for row in range(size):
            for col in range(size):
                yield row, col, Mark.from_code(int(self.grid[row, col]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash(self.grid.tobytes())

    def __str__(self) -> str:
        return render(self)


def render(board: Board) -> str:
    """
    Render the board as text.

    Cells are joined by a vertical bar and rows by a separator line;
    an empty cell is a blank space:

        X| |O
        -+-+-
         |X|
        -+-+-
        O| |
    """
    lines = []
    size = GameConfig.BOARD_SIZE
    for row in range(size):
        symbols = []
        for col in range(size):
            mark = board.get(row, col)
            symbols.append(GameConfig.EMPTY_SYMBOL if mark is None else mark.symbol)
        lines.append(GameConfig.CELL_SEPARATOR.join(symbols))
    return f"\n{GameConfig.ROW_SEPARATOR}\n".join(lines)
