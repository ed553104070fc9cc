"""Exhaustive fixed-depth minmax evaluation.

Values are always expressed for the player to move. Forced wins and losses
found within the horizon are ``+inf`` / ``-inf``; undecided frontier states
fall back to ``game.heuristic_value``.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from minmax_baseline.games.turn_based_game import Action, TurnBasedGame

StateT = TypeVar("StateT")


def current_player_value(white_reward: float, white_playing: bool) -> float:
    """Translate a final white reward into a value for the player to move."""
    if white_reward == 0:
        return 0.0
    v = math.copysign(math.inf, white_reward)
    return v if white_playing else -v


def value(game: TurnBasedGame[StateT], state: StateT, depth: int) -> float:
    """Value of ``state`` for the player to move, searching ``depth`` plies."""
    assert depth >= 0, f"negative search depth: {depth}"
    wr = game.white_reward(state)
    if wr is not None:
        return current_player_value(wr, game.white_playing(state))
    if depth == 0:
        return game.heuristic_value(state)
    actions = game.legal_actions(state)
    assert len(actions) > 0, "undecided state has no legal actions"
    return max(qvalue(game, state, a, depth) for a in actions)


def qvalue(
    game: TurnBasedGame[StateT],
    state: StateT,
    action: Action,
    depth: int,
) -> float:
    """Value of playing ``action`` in ``state``, for the player to move."""
    assert game.white_reward(state) is None, "qvalue called on a decided state"
    next_state = game.apply_action(state, action)
    switched = game.white_playing(state) != game.white_playing(next_state)
    next_value = value(game, next_state, depth - 1)
    return -next_value if switched else next_value


def minmax(
    game: TurnBasedGame[StateT],
    state: StateT,
    actions: Sequence[Action],
    depth: int,
) -> int:
    """Index in ``actions`` of the first action with maximal Q-value."""
    qs = [qvalue(game, state, a, depth) for a in actions]
    return max(range(len(qs)), key=qs.__getitem__)
