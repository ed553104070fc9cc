"""One-row Nim: players remove tokens, whoever takes the last one wins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .turn_based_game import TurnBasedGame


@dataclass(frozen=True)
class NimState:
    tokens: int
    white_to_play: bool = True


class NimGame(TurnBasedGame[NimState]):
    """
    Single pile of ``tokens``; the mover removes between 1 and ``max_take``.

    The player taking the last token wins. There is no useful static
    evaluation, so ``heuristic_value`` is a flat 0.
    """

    def __init__(self, tokens: int = 3, max_take: int = 1) -> None:
        if tokens < 1:
            raise ValueError(f"Nim needs at least one token, got {tokens}")
        if max_take < 1:
            raise ValueError(f"max_take must be >= 1, got {max_take}")
        self.tokens = tokens
        self.max_take = max_take

    def initial_state(self) -> NimState:
        return NimState(tokens=self.tokens, white_to_play=True)

    def legal_actions(self, state: NimState) -> Sequence[int]:
        return list(range(1, min(self.max_take, state.tokens) + 1))

    def apply_action(self, state: NimState, action: int) -> NimState:
        if state.tokens == 0:
            raise ValueError("Cannot apply action in terminal state")
        if action not in self.legal_actions(state):
            raise ValueError(f"Illegal action: {action}")
        return NimState(
            tokens=state.tokens - action,
            white_to_play=not state.white_to_play,
        )

    def white_playing(self, state: NimState) -> bool:
        return state.white_to_play

    def white_reward(self, state: NimState) -> Optional[float]:
        if state.tokens > 0:
            return None
        # The player who just moved took the last token.
        return -1.0 if state.white_to_play else 1.0

    def heuristic_value(self, state: NimState) -> float:
        return 0.0
