"""Tests for the bundled game rules."""

import numpy as np
import pytest

from minmax_baseline.games import Connect4Game, NimGame
from minmax_baseline.games.connect4 import evaluate_board
from minmax_baseline.games.nim import NimState


def test_nim_transitions():
    game = NimGame(tokens=5, max_take=3)
    state = game.initial_state()
    assert state == NimState(tokens=5, white_to_play=True)
    assert game.legal_actions(state) == [1, 2, 3]
    assert game.white_reward(state) is None

    state = game.apply_action(state, 3)
    assert state == NimState(tokens=2, white_to_play=False)
    assert game.legal_actions(state) == [1, 2]
    assert not game.white_playing(state)


def test_nim_last_token_wins():
    game = NimGame(tokens=2, max_take=2)
    state = game.apply_action(game.initial_state(), 2)
    assert game.is_terminal(state)
    assert game.white_reward(state) == 1.0
    assert game.legal_actions(state) == []

    state = game.apply_action(game.apply_action(game.initial_state(), 1), 1)
    assert game.white_reward(state) == -1.0


def test_nim_rejects_bad_input():
    with pytest.raises(ValueError):
        NimGame(tokens=0)
    game = NimGame(tokens=3, max_take=2)
    with pytest.raises(ValueError):
        game.apply_action(game.initial_state(), 3)


def test_connect4_apply_action_copies_board():
    game = Connect4Game()
    state = game.initial_state()
    next_state = game.apply_action(state, 3)

    assert np.all(state.board == 0)
    assert next_state.board[5, 3] == 1
    assert next_state.last_move == (5, 3)
    assert state.num_moves == 0
    assert next_state.num_moves == 1
    assert game.white_playing(state)
    assert not game.white_playing(next_state)


def test_connect4_vertical_win():
    game = Connect4Game()
    state = game.initial_state()
    for action in [0, 1, 0, 1, 0, 1]:
        state = game.apply_action(state, action)
    assert game.white_reward(state) is None

    state = game.apply_action(state, 0)
    assert game.is_terminal(state)
    assert game.white_reward(state) == 1.0
    assert game.legal_actions(state) == []
    with pytest.raises(ValueError):
        game.apply_action(state, 2)


def test_connect4_black_win_is_negative():
    game = Connect4Game()
    state = game.initial_state()
    for action in [0, 6, 1, 6, 0, 6, 1, 6]:
        state = game.apply_action(state, action)
    assert game.white_reward(state) == -1.0


def test_connect4_full_board_is_draw():
    game = Connect4Game(rows=1, cols=2)
    state = game.apply_action(game.initial_state(), 0)
    state = game.apply_action(state, 1)
    assert game.is_terminal(state)
    assert game.white_reward(state) == 0.0


def test_connect4_full_column_rejected():
    game = Connect4Game(rows=2, cols=4)
    state = game.apply_action(game.initial_state(), 0)
    state = game.apply_action(state, 0)
    assert game.legal_actions(state) == [1, 2, 3]
    with pytest.raises(ValueError):
        game.apply_action(state, 0)


def test_connect4_heuristic_is_from_mover_perspective():
    game = Connect4Game()
    state = game.initial_state()
    assert game.heuristic_value(state) == 0.0

    state = game.apply_action(state, 3)
    # Black to move, white holds the center.
    assert game.heuristic_value(state) < 0.0
    assert evaluate_board(state.board, 1) == -evaluate_board(state.board, -1)


def test_connect4_normalized_heuristic_is_bounded():
    game = Connect4Game(normalize=True)
    state = game.initial_state()
    for action in [3, 3, 2, 2, 4]:
        state = game.apply_action(state, action)
    assert -1.0 < game.heuristic_value(state) < 1.0
