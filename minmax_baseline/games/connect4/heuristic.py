"""Pattern-based static evaluation of Connect4 boards."""

from __future__ import annotations

import numpy as np

CENTER_BONUS = 3.0

# Score of a 4-cell window by (own pieces, empty cells).
_WINDOW_SCORES = {
    (4, 0): 1000.0,
    (3, 1): 50.0,
    (2, 2): 5.0,
    (1, 3): 1.0,
}


def score_window(w0: int, w1: int, w2: int, w3: int, player: int) -> float:
    """Score 4 cells for ``player``. Mixed windows are worth nothing."""
    opp = -player
    player_count = (w0 == player) + (w1 == player) + (w2 == player) + (w3 == player)
    opp_count = (w0 == opp) + (w1 == opp) + (w2 == opp) + (w3 == opp)

    if player_count > 0 and opp_count > 0:
        return 0.0

    empty_count = 4 - player_count - opp_count
    if player_count:
        return _WINDOW_SCORES.get((player_count, empty_count), 0.0)
    if opp_count:
        return -_WINDOW_SCORES.get((opp_count, empty_count), 0.0)
    return 0.0


def evaluate_board(board: np.ndarray, player: int) -> float:
    """
    Evaluate ``board`` for ``player``: center control plus every
    horizontal, vertical and diagonal window of four cells.
    """
    rows, cols = board.shape
    score = 0.0
    opp = -player

    center_col = cols // 2
    for r in range(rows):
        v = int(board[r, center_col])
        if v == player:
            score += CENTER_BONUS
        elif v == opp:
            score -= CENTER_BONUS

    # Horizontal windows
    for r in range(rows):
        for c in range(cols - 3):
            score += score_window(
                int(board[r, c]), int(board[r, c + 1]),
                int(board[r, c + 2]), int(board[r, c + 3]), player
            )

    # Vertical windows
    for r in range(rows - 3):
        for c in range(cols):
            score += score_window(
                int(board[r, c]), int(board[r + 1, c]),
                int(board[r + 2, c]), int(board[r + 3, c]), player
            )

    # Positive diagonal (bottom-left to top-right)
    for r in range(3, rows):
        for c in range(cols - 3):
            score += score_window(
                int(board[r, c]), int(board[r - 1, c + 1]),
                int(board[r - 2, c + 2]), int(board[r - 3, c + 3]), player
            )

    # Negative diagonal (top-left to bottom-right)
    for r in range(rows - 3):
        for c in range(cols - 3):
            score += score_window(
                int(board[r, c]), int(board[r + 1, c + 1]),
                int(board[r + 2, c + 2]), int(board[r + 3, c + 3]), player
            )

    return score
