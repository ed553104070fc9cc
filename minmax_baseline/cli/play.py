"""CLI for pitting the minmax baseline against another policy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Optional

import tyro

from minmax_baseline.config import GameConfig, MatchAppConfig, MatchConfig, PolicyConfig, load_config
from minmax_baseline.registry import make_game, make_policy
from minmax_baseline.search import MinmaxPolicy
from minmax_baseline.utils import play_match


def _config_from_args(
    game: str,
    depth: int,
    temperature: float,
    opponent: str,
    opponent_depth: int,
    num_games: int,
    seed: int,
    randomize_first_player: bool,
    max_moves: Optional[int],
) -> MatchAppConfig:
    opponent_params = {"seed": seed + 1}
    if opponent == "minmax":
        opponent_params["depth"] = opponent_depth
    return MatchAppConfig(
        game=GameConfig(id=game),
        players=[
            PolicyConfig(id="minmax", params={"depth": depth, "temperature": temperature, "seed": seed}),
            PolicyConfig(id=opponent, params=opponent_params),
        ],
        match=MatchConfig(
            num_games=num_games,
            seed=seed,
            randomize_first_player=randomize_first_player,
            max_moves=max_moves,
        ),
    )


def play(
    config: Optional[Path] = None,
    game: Literal["nim", "connect4"] = "connect4",
    depth: int = 2,
    temperature: float = 0.0,
    opponent: Literal["random", "minmax"] = "random",
    opponent_depth: int = 1,
    num_games: int = 10,
    seed: int = 42,
    randomize_first_player: bool = True,
    max_moves: Optional[int] = None,
    show_policy: bool = False,
    verbose: bool = False,
) -> None:
    """
    Play a match between the minmax baseline and an opponent.

    Args:
        config: YAML match config; when given, the other match options are ignored.
        game: Registered game id.
        depth: Search depth of the minmax player.
        temperature: Action-selection temperature (0 = argmax).
        opponent: Opponent policy id.
        opponent_depth: Search depth when the opponent is also minmax.
        num_games: Number of games to play.
        seed: Random seed.
        randomize_first_player: Randomly choose who plays white each game.
        max_moves: Optional cap on game length.
        show_policy: Print the first player's policy for the initial position.
        verbose: Log every game.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if config is not None:
            app_cfg = load_config(config)
        else:
            app_cfg = _config_from_args(
                game, depth, temperature, opponent, opponent_depth,
                num_games, seed, randomize_first_player, max_moves,
            )
        game_rules = make_game(app_cfg.game.id, **app_cfg.game.params)
        policy1, policy2 = (make_policy(p.id, **p.params) for p in app_cfg.players)
    except (OSError, KeyError, ValueError, TypeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if show_policy and isinstance(policy1, MinmaxPolicy):
        actions, probs = policy1.think(game_rules, game_rules.initial_state())
        print("Initial position policy:")
        for action, p in zip(actions, probs):
            print(f"  {action}: {p:.3f}")

    match_cfg = app_cfg.match
    result = play_match(
        game_rules,
        policy1,
        policy2,
        num_games=match_cfg.num_games,
        seed=match_cfg.seed,
        randomize_first_player=match_cfg.randomize_first_player,
        max_moves=match_cfg.max_moves,
    )

    n = result.num_games
    p1_name, p2_name = (p.id for p in app_cfg.players)
    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"{p1_name} (policy 1) wins: {result.policy1_wins} ({result.policy1_wins/n*100:.1f}%)")
    print(f"{p2_name} (policy 2) wins: {result.policy2_wins} ({result.policy2_wins/n*100:.1f}%)")
    print(f"Draws: {result.draws} ({result.draws/n*100:.1f}%)")
    print(f"Average length: {sum(result.episode_lengths)/n:.1f} moves")
    print("=" * 50)


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()
