"""Connect4 game rules and evaluation."""

from .state import Connect4State
from .game import Connect4Game
from .heuristic import evaluate_board
from .utils import CONNECT4_COLS, CONNECT4_ROWS, check_n_in_row

__all__ = [
    "Connect4State",
    "Connect4Game",
    "CONNECT4_ROWS",
    "CONNECT4_COLS",
    "check_n_in_row",
    "evaluate_board",
]
