"""Shared board helpers for Connect4."""

from __future__ import annotations

import numpy as np

# Default board dimensions
CONNECT4_ROWS = 6
CONNECT4_COLS = 7


def check_n_in_row(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    n: int,
    rows: int,
    cols: int,
) -> bool:
    """
    Check if there are at least n pieces in a row for the given player
    passing through (row, col).

    Args:
        board: Game board array.
        row: Row of the piece just placed.
        col: Column of the piece just placed.
        player: Player token (1 or -1).
        n: Required run length.
        rows: Total number of rows.
        cols: Total number of columns.

    Returns:
        True if player has at least n in a row through (row, col).
    """
    directions = [(0, 1), (1, 0), (1, 1), (1, -1)]

    for dr, dc in directions:
        count = 1
        for sign in (1, -1):
            for i in range(1, n):
                r, c = row + sign * dr * i, col + sign * dc * i
                if 0 <= r < rows and 0 <= c < cols and board[r, c] == player:
                    count += 1
                else:
                    break

        if count >= n:
            return True

    return False
