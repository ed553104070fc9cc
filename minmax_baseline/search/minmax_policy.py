"""Stochastic minmax baseline policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from minmax_baseline.games.turn_based_game import Action, TurnBasedGame
from minmax_baseline.policies.action_policy import ActionPolicy
from .minmax import qvalue

StateT = TypeVar("StateT")

# Added to the Q-value scale so that all-zero Q-values do not divide by zero.
EPSILON = float(np.finfo(np.float64).eps)


def check_search_params(
    depth: Optional[int] = None,
    temperature: float = 0.0,
    epsilon: float = EPSILON,
) -> None:
    """Raise ``ValueError`` for a depth, temperature or epsilon out of range."""
    if depth is not None and depth < 1:
        raise ValueError(f"Minmax depth must be >= 1, got {depth}")
    if temperature < 0:
        raise ValueError(f"Temperature must be >= 0, got {temperature}")
    if epsilon <= 0:
        raise ValueError(f"Epsilon must be > 0, got {epsilon}")


@dataclass
class MinmaxConfig:
    depth: int = 2
    temperature: float = 0.0
    epsilon: float = EPSILON

    def __post_init__(self) -> None:
        check_search_params(self.depth, self.temperature, self.epsilon)


def action_probabilities(
    qs: np.ndarray,
    temperature: float,
    epsilon: float = EPSILON,
) -> np.ndarray:
    """
    Turn minmax Q-values into a distribution over the same actions.

    - Winning moves (``+inf``) share all the mass.
    - If every move is losing (``-inf``) the distribution is uniform.
    - Otherwise, with ``temperature == 0`` the mass is shared by the maximal
      Q-values; with ``temperature > 0`` action ``a`` gets a weight
      proportional to ``exp(q_a / (C * temperature))`` where ``C`` is the
      largest absolute non-losing Q-value. Dividing by ``C`` makes the result
      invariant to a positive rescaling of the heuristic.
    """
    check_search_params(temperature=temperature, epsilon=epsilon)
    qs = np.asarray(qs, dtype=np.float64)
    n = qs.shape[0]
    winning = qs == np.inf
    if winning.any():
        probs = winning.astype(np.float64)
    else:
        notlosing = qs > -np.inf
        if not notlosing.any():
            probs = np.ones(n, dtype=np.float64)
        else:
            qmax = qs[int(np.argmax(qs))]
            if temperature == 0:
                probs = (qs == qmax).astype(np.float64)
            else:
                c = np.max(np.abs(qs[notlosing])) + epsilon
                probs = np.exp((qs - qmax) / c) ** (1.0 / temperature)
    return probs / probs.sum()


def decide(
    game: TurnBasedGame[StateT],
    state: StateT,
    depth: int,
    temperature: float = 0.0,
    epsilon: float = EPSILON,
) -> Tuple[List[Action], np.ndarray]:
    """
    Search every legal action of ``state`` at ``depth`` plies.

    Returns:
        ``(actions, probs)`` with ``actions`` in ``game.legal_actions`` order.
    """
    check_search_params(depth, temperature, epsilon)
    actions = list(game.legal_actions(state))
    if not actions:
        raise ValueError("No legal actions available for minmax")
    qs = np.array([qvalue(game, state, a, depth) for a in actions], dtype=np.float64)
    return actions, action_probabilities(qs, temperature, epsilon)


class MinmaxPolicy(ActionPolicy[StateT], Generic[StateT]):
    """
    Baseline player exploring the game tree exhaustively at a fixed depth.

    ``think`` returns the full action distribution, ``select_action`` samples
    from it with the policy's generator.
    """

    def __init__(
        self,
        config: Optional[MinmaxConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or MinmaxConfig()
        self.rng = rng or np.random.default_rng()

    def think(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
    ) -> Tuple[List[Action], np.ndarray]:
        return decide(
            game,
            state,
            depth=self.config.depth,
            temperature=self.config.temperature,
            epsilon=self.config.epsilon,
        )

    def select_action(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        actions, probs = self.think(game, state)
        if legal_actions is not None and list(legal_actions) != actions:
            raise ValueError("legal_actions does not match game.legal_actions(state)")
        return actions[int(self.rng.choice(len(actions), p=probs))]
