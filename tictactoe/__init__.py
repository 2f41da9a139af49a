"""
TicTacToe game logic.
Handles the board, rules, and the Minimax AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board, Mark, MoveError, OutOfBounds, CellOccupied, render
from .win_checker import WinChecker, Result, Status, evaluate
from .move_validator import MoveValidator, ValidationResult, valid_moves
from .ai_player import AIPlayer, Difficulty, Outcome, BestMove, best_move, random_move
