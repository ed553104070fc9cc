"""Utilities for playing games and matches between policies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from minmax_baseline.games.turn_based_game import Action, TurnBasedGame
from minmax_baseline.policies.action_policy import ActionPolicy

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    actions: List[Action] = field(default_factory=list)
    white_reward: Optional[float] = None

    @property
    def num_moves(self) -> int:
        return len(self.actions)


@dataclass
class MatchResult:
    policy1_wins: int = 0
    draws: int = 0
    policy2_wins: int = 0
    episode_lengths: List[int] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return self.policy1_wins + self.draws + self.policy2_wins

    @property
    def policy1_score(self) -> float:
        """Average score of policy1 (win = 1, draw = 0.5)."""
        if self.num_games == 0:
            return 0.0
        return (self.policy1_wins + 0.5 * self.draws) / self.num_games


def play_game(
    game: TurnBasedGame[Any],
    white_policy: ActionPolicy[Any],
    black_policy: ActionPolicy[Any],
    max_moves: Optional[int] = None,
) -> GameRecord:
    """
    Play one game from ``game.initial_state()``.

    The mover is read from ``game.white_playing`` at every ply, so games where
    a player moves several times in a row are supported. If ``max_moves`` is
    reached first, the record's ``white_reward`` stays ``None``.
    """
    record = GameRecord()
    state = game.initial_state()
    while not game.is_terminal(state):
        if max_moves is not None and record.num_moves >= max_moves:
            return record
        policy = white_policy if game.white_playing(state) else black_policy
        legal_actions = list(game.legal_actions(state))
        action = policy.select_action(game, state, legal_actions)
        state = game.apply_action(state, action)
        record.actions.append(action)
    record.white_reward = game.white_reward(state)
    return record


def play_match(
    game: TurnBasedGame[Any],
    policy1: ActionPolicy[Any],
    policy2: ActionPolicy[Any],
    num_games: int = 10,
    seed: Optional[int] = None,
    randomize_first_player: bool = False,
    max_moves: Optional[int] = None,
) -> MatchResult:
    """
    Play a match between two policies.

    Args:
        game: Rules shared by both policies.
        policy1: First policy.
        policy2: Second policy.
        num_games: Number of games to play.
        seed: Seed of the generator used to pick colours.
        randomize_first_player: If True, randomly choose who plays white each
            game. If False, policy1 always plays white.
        max_moves: Optional cap on game length; truncated games count as draws.

    Returns:
        MatchResult with wins/draws counted from policy1's point of view.
    """
    rng = np.random.default_rng(seed)
    result = MatchResult()

    for game_idx in range(num_games):
        if randomize_first_player:
            policy1_is_white = bool(rng.random() < 0.5)
        else:
            policy1_is_white = True

        if policy1_is_white:
            record = play_game(game, policy1, policy2, max_moves=max_moves)
        else:
            record = play_game(game, policy2, policy1, max_moves=max_moves)
        result.episode_lengths.append(record.num_moves)

        reward = record.white_reward
        if reward is None or reward == 0:
            result.draws += 1
            outcome = "draw" if reward is not None else "truncated"
        elif (reward > 0) == policy1_is_white:
            result.policy1_wins += 1
            outcome = "policy1"
        else:
            result.policy2_wins += 1
            outcome = "policy2"

        logger.debug(
            "game %d: policy1 %s, %d moves, winner %s",
            game_idx,
            "white" if policy1_is_white else "black",
            record.num_moves,
            outcome,
        )

    logger.info(
        "match finished: %d-%d-%d (policy1 wins / draws / policy2 wins)",
        result.policy1_wins,
        result.draws,
        result.policy2_wins,
    )
    return result
