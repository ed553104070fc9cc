"""Shared fixtures: a game defined by an explicit tree of named nodes."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pytest

from minmax_baseline.games.turn_based_game import TurnBasedGame


class TreeGame(TurnBasedGame[str]):
    """
    Each node is a dict with optional keys ``white`` (mover, default True),
    ``children`` (action -> node name), ``reward`` (white reward once decided)
    and ``h`` (heuristic for the mover). Heuristics are multiplied by ``scale``.
    """

    def __init__(self, nodes: Dict[str, Dict[str, Any]], root: str = "root", scale: float = 1.0) -> None:
        self.nodes = nodes
        self.root = root
        self.scale = scale
        self.heuristic_calls: List[str] = []

    def initial_state(self) -> str:
        return self.root

    def legal_actions(self, state: str) -> Sequence[str]:
        return list(self.nodes[state].get("children", {}))

    def apply_action(self, state: str, action: str) -> str:
        return self.nodes[state]["children"][action]

    def white_playing(self, state: str) -> bool:
        return self.nodes[state].get("white", True)

    def white_reward(self, state: str) -> Optional[float]:
        return self.nodes[state].get("reward")

    def heuristic_value(self, state: str) -> float:
        self.heuristic_calls.append(state)
        return self.scale * self.nodes[state].get("h", 0.0)


@pytest.fixture
def tree_game():
    """Factory building a ``TreeGame`` from a node table."""
    return TreeGame


@pytest.fixture
def leaves_game():
    """
    Factory for a white root whose actions lead to white-to-move leaves with
    the given heuristics, so Q-values equal the heuristics at depth 1.
    ``"win"`` and ``"loss"`` stand for leaves already decided for white.
    """

    def make(heuristics, scale: float = 1.0) -> TreeGame:
        nodes: Dict[str, Dict[str, Any]] = {"root": {"white": True, "children": {}}}
        for i, h in enumerate(heuristics):
            name = f"leaf{i}"
            nodes["root"]["children"][f"a{i}"] = name
            if h == "win":
                nodes[name] = {"white": True, "reward": 1.0}
            elif h == "loss":
                nodes[name] = {"white": True, "reward": -1.0}
            else:
                nodes[name] = {"white": True, "h": h}
        return TreeGame(nodes, scale=scale)

    return make
