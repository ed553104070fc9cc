"""Uniformly random policy."""

from __future__ import annotations

from typing import Generic, Optional, Sequence, TypeVar

import numpy as np

from minmax_baseline.games.turn_based_game import Action, TurnBasedGame
from .action_policy import ActionPolicy

S = TypeVar("S")


class RandomPolicy(ActionPolicy[S], Generic[S]):
    """Policy that selects actions uniformly from the legal actions."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.rng = rng or np.random.default_rng(seed)

    def select_action(
        self,
        game: TurnBasedGame[S],
        state: S,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        if legal_actions is None:
            legal_actions = list(game.legal_actions(state))
        if not legal_actions:
            raise ValueError("No legal actions available")
        return legal_actions[int(self.rng.integers(len(legal_actions)))]
