"""Minmax search and the baseline policy built on it."""

from typing import Optional

import numpy as np

from .minmax import current_player_value, minmax, qvalue, value
from .minmax_policy import (
    EPSILON,
    MinmaxConfig,
    MinmaxPolicy,
    action_probabilities,
    check_search_params,
    decide,
)
from ..registry import list_policies, register_policy

if "minmax" not in list_policies():
    def _minmax_factory(
        depth: int = 2,
        temperature: float = 0.0,
        epsilon: float = EPSILON,
        seed: Optional[int] = None,
    ) -> MinmaxPolicy:
        config = MinmaxConfig(depth=depth, temperature=temperature, epsilon=epsilon)
        return MinmaxPolicy(config=config, rng=np.random.default_rng(seed))

    register_policy("minmax", _minmax_factory)

__all__ = [
    "EPSILON",
    "MinmaxConfig",
    "MinmaxPolicy",
    "action_probabilities",
    "check_search_params",
    "current_player_value",
    "decide",
    "minmax",
    "qvalue",
    "value",
]
