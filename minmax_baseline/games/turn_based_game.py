from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Optional, Sequence, TypeVar

S = TypeVar("S")  # state type
Action = Hashable  # bundled games use integer indices


class TurnBasedGame(ABC, Generic[S]):
    """
    Rules of a deterministic two-player game with perfect information.

    No environment, only pure transitions: ``apply_action`` must return a new
    state and leave its argument untouched. Rewards are expressed from the
    fixed perspective of the "white" player.
    """

    @abstractmethod
    def initial_state(self) -> S:
        """Starting position."""

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """All legal actions in ``state`` (non-empty unless decided)."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Return the successor state after ``action``."""

    @abstractmethod
    def white_playing(self, state: S) -> bool:
        """Whether white is the player to move."""

    @abstractmethod
    def white_reward(self, state: S) -> Optional[float]:
        """
        Final reward from white's perspective:

        * ``None`` -- the game is not decided yet
        * ``0``    -- draw
        * ``> 0``  -- white won, ``< 0`` -- black won
        """

    @abstractmethod
    def heuristic_value(self, state: S) -> float:
        """
        Estimate of an undecided state, higher is better for the player to move.
        """

    def is_terminal(self, state: S) -> bool:
        return self.white_reward(state) is not None
