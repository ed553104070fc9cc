"""Connect4 rules (copy-on-apply state, for search algorithms)."""

from __future__ import annotations

from typing import Optional, Sequence

import math

import numpy as np

from ..turn_based_game import TurnBasedGame
from .heuristic import evaluate_board
from .state import Connect4State
from .utils import CONNECT4_COLS, CONNECT4_ROWS, check_n_in_row


class Connect4Game(TurnBasedGame[Connect4State]):
    """
    Pure Connect4 transitions. White is the first player (token ``+1``).
    """

    def __init__(
        self,
        rows: int = CONNECT4_ROWS,
        cols: int = CONNECT4_COLS,
        normalize: bool = False,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.normalize = normalize
        self._player_tokens = np.array([1, -1], dtype=np.int8)

    def initial_state(self) -> Connect4State:
        board = np.zeros((self.rows, self.cols), dtype=np.int8)
        return Connect4State(
            board=board,
            current_player_index=0,
            winner=None,
            done=False,
        )

    def legal_actions(self, state: Connect4State) -> Sequence[int]:
        if state.done:
            return []
        top_row = state.board[0]
        return [col for col in range(self.cols) if top_row[col] == 0]

    def apply_action(self, state: Connect4State, action: int) -> Connect4State:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        if action < 0 or action >= self.cols:
            raise ValueError(f"Illegal action: {action}")

        if state.board[0, action] != 0:
            raise ValueError(f"Column {action} is full")

        board = state.board.copy()
        current_token = self.current_token(state)
        row = self._drop_piece(board, action, current_token)

        winner: Optional[int] = None
        done = False

        if check_n_in_row(board, row, action, current_token, n=4, rows=self.rows, cols=self.cols):
            winner = current_token
            done = True
        elif np.all(board != 0):
            winner = 0
            done = True

        return Connect4State(
            board=board,
            current_player_index=1 - state.current_player_index,
            winner=winner,
            done=done,
            last_move=(row, action),
        )

    def current_token(self, state: Connect4State) -> int:
        return int(self._player_tokens[state.current_player_index])

    def white_playing(self, state: Connect4State) -> bool:
        return state.current_player_index == 0

    def white_reward(self, state: Connect4State) -> Optional[float]:
        if not state.done:
            return None
        return float(state.winner)

    def heuristic_value(self, state: Connect4State) -> float:
        score = evaluate_board(state.board, self.current_token(state))
        if self.normalize:
            return math.tanh(score / 100.0)
        return score

    def _drop_piece(self, board: np.ndarray, col: int, player: int) -> int:
        for row in range(self.rows - 1, -1, -1):
            if board[row, col] == 0:
                board[row, col] = player
                return row
        raise ValueError(f"Column {col} is full")
