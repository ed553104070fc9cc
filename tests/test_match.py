"""Tests for game and match utilities."""

import numpy as np

from minmax_baseline.games import Connect4Game, NimGame
from minmax_baseline.policies import RandomPolicy
from minmax_baseline.search import MinmaxConfig, MinmaxPolicy
from minmax_baseline.utils import play_game, play_match


def _minmax(depth, temperature=0.0, seed=0):
    return MinmaxPolicy(
        MinmaxConfig(depth=depth, temperature=temperature),
        rng=np.random.default_rng(seed),
    )


def test_play_game_records_actions():
    game = NimGame(tokens=5, max_take=3)
    record = play_game(game, _minmax(depth=5), _minmax(depth=5, seed=1))
    assert record.actions[0] == 1
    assert sum(record.actions) == 5
    assert record.white_reward == 1.0
    assert record.num_moves == len(record.actions)


def test_play_game_truncation():
    game = NimGame(tokens=5, max_take=1)
    record = play_game(game, RandomPolicy(seed=0), RandomPolicy(seed=1), max_moves=2)
    assert record.actions == [1, 1]
    assert record.white_reward is None


def test_minmax_wins_winning_position_against_random():
    game = NimGame(tokens=5, max_take=3)
    result = play_match(game, _minmax(depth=5), RandomPolicy(seed=0), num_games=10, seed=0)
    assert result.policy1_wins == 10
    assert result.draws == 0
    assert result.policy2_wins == 0
    assert result.policy1_score == 1.0


def test_second_player_wins_lost_position():
    game = NimGame(tokens=4, max_take=3)
    result = play_match(game, _minmax(depth=4), _minmax(depth=4, seed=1), num_games=5)
    assert result.policy2_wins == 5
    assert len(result.episode_lengths) == 5


def test_randomized_colours_count_every_game():
    game = NimGame(tokens=4, max_take=3)
    result = play_match(
        game,
        _minmax(depth=4),
        _minmax(depth=4, seed=1),
        num_games=8,
        seed=3,
        randomize_first_player=True,
    )
    # Black always wins with perfect play, so wins split by colour assignment.
    assert result.draws == 0
    assert result.policy1_wins + result.policy2_wins == 8
    assert result.num_games == 8


def test_truncated_games_count_as_draws():
    game = Connect4Game()
    result = play_match(game, RandomPolicy(seed=0), RandomPolicy(seed=1), num_games=3, max_moves=4)
    assert result.draws == 3
    assert result.episode_lengths == [4, 4, 4]
