"""Common interface of the players that can take part in a match."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from minmax_baseline.games.turn_based_game import Action, TurnBasedGame

S = TypeVar("S")


class ActionPolicy(ABC, Generic[S]):
    """
    A player: picks one move for whoever is to move in ``state``.

    Policies never mutate ``state``; ``play_game`` asks the policy of the
    side reported by ``game.white_playing`` at every ply.
    """

    @abstractmethod
    def select_action(
        self,
        game: TurnBasedGame[S],
        state: S,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        """
        Return one of ``legal_actions`` (``game.legal_actions(state)`` when
        not given). The state must not be decided.
        """
        raise NotImplementedError
