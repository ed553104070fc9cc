"""Config package exports."""

from .schema import (
    GameConfig,
    MatchAppConfig,
    MatchConfig,
    PolicyConfig,
    load_config,
)

__all__ = [
    "GameConfig",
    "MatchAppConfig",
    "MatchConfig",
    "PolicyConfig",
    "load_config",
]
