"""Configuration schema for baseline matches."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


@dataclass
class GameConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PolicyConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MatchConfig:
    num_games: int = 10
    seed: Optional[int] = None
    randomize_first_player: bool = False
    max_moves: Optional[int] = None

    def __post_init__(self) -> None:
        if self.num_games < 1:
            raise ValueError(f"match.num_games must be >= 1, got {self.num_games}")


@dataclass
class MatchAppConfig:
    game: GameConfig
    players: List[PolicyConfig]
    match: MatchConfig = field(default_factory=MatchConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchAppConfig":
        if "game" not in data:
            raise ValueError("game is required")
        game_data = data["game"]
        game = GameConfig(id=game_data["id"], params=game_data.get("params") or {})

        players_data = data.get("players", [])
        if len(players_data) != 2:
            raise ValueError(f"Exactly two players are required, got {len(players_data)}")
        players = [
            PolicyConfig(id=p["id"], params=p.get("params") or {})
            for p in players_data
        ]

        match_data = data.get("match") or {}
        seed = match_data.get("seed")
        max_moves = match_data.get("max_moves")
        match = MatchConfig(
            num_games=int(match_data.get("num_games", 10)),
            seed=int(seed) if seed is not None else None,
            randomize_first_player=bool(match_data.get("randomize_first_player", False)),
            max_moves=int(max_moves) if max_moves is not None else None,
        )
        return cls(game=game, players=players, match=match)


def load_config(path: Union[str, Path]) -> MatchAppConfig:
    """Load MatchAppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return MatchAppConfig.from_dict(data)
