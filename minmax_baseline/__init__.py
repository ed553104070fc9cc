"""Exhaustive minmax baseline player for two-player perfect-information games."""

from .games import Connect4Game, NimGame, TurnBasedGame
from .policies import ActionPolicy, RandomPolicy
from .search import MinmaxConfig, MinmaxPolicy, decide, qvalue, value

__version__ = "0.1.0"

__all__ = [
    "ActionPolicy",
    "Connect4Game",
    "MinmaxConfig",
    "MinmaxPolicy",
    "NimGame",
    "RandomPolicy",
    "TurnBasedGame",
    "decide",
    "qvalue",
    "value",
]
