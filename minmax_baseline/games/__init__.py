from __future__ import annotations

from .turn_based_game import Action, TurnBasedGame
from .nim import NimGame, NimState
from .connect4 import Connect4Game, Connect4State
from ..registry import list_games, register_game

if "nim" not in list_games():
    register_game("nim", NimGame)
if "connect4" not in list_games():
    register_game("connect4", Connect4Game)

__all__ = [
    "Action",
    "TurnBasedGame",
    "NimGame",
    "NimState",
    "Connect4Game",
    "Connect4State",
]
