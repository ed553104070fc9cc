from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass
class Connect4State:
    """
    Board of tokens (``1`` white, ``-1`` black, ``0`` empty), row 0 on top.

    ``winner`` is the winning token, ``0`` for a draw, ``None`` while playing.
    ``Connect4Game.apply_action`` builds a new state with a copied board.
    """

    board: np.ndarray
    current_player_index: int = 0
    winner: Optional[int] = None
    done: bool = False
    last_move: Optional[Tuple[int, int]] = None

    @property
    def num_moves(self) -> int:
        return int(np.count_nonzero(self.board))
