"""Central registries for games and policies."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Tuple


GameFactory = Callable[..., Any]
PolicyFactory = Callable[..., Any]

_GAME_REGISTRY: Dict[str, Tuple[GameFactory, Dict[str, Any]]] = {}
_POLICY_REGISTRY: Dict[str, PolicyFactory] = {}


def register_game(game_id: str, entry_point: GameFactory, **default_kwargs: Any) -> None:
    """Register a turn-based game constructor."""
    if game_id in _GAME_REGISTRY:
        raise ValueError(f"Game id '{game_id}' is already registered.")
    _GAME_REGISTRY[game_id] = (entry_point, dict(default_kwargs))


def make_game(game_id: str, **overrides: Any) -> Any:
    """Instantiate a registered game using optional parameter overrides."""
    entry_point, defaults = get_game_entry(game_id)
    params = {**defaults, **overrides}
    return entry_point(**params)


def list_games() -> Iterable[str]:
    """Return iterable of registered game identifiers."""
    return tuple(_GAME_REGISTRY.keys())


def get_game_entry(game_id: str) -> Tuple[GameFactory, Dict[str, Any]]:
    """Retrieve the raw entry point and defaults for a game."""
    if game_id not in _GAME_REGISTRY:
        raise KeyError(f"Game id '{game_id}' is not registered.")
    entry_point, defaults = _GAME_REGISTRY[game_id]
    return entry_point, dict(defaults)


def register_policy(policy_id: str, ctor: PolicyFactory) -> None:
    """Register a policy constructor."""
    if policy_id in _POLICY_REGISTRY:
        raise ValueError(f"Policy id '{policy_id}' is already registered.")
    _POLICY_REGISTRY[policy_id] = ctor


def make_policy(policy_id: str, **kwargs: Any) -> Any:
    """Instantiate a registered policy."""
    return get_policy_entry(policy_id)(**kwargs)


def list_policies() -> Iterable[str]:
    """Return iterable of registered policy identifiers."""
    return tuple(_POLICY_REGISTRY.keys())


def get_policy_entry(policy_id: str) -> PolicyFactory:
    """Retrieve the raw constructor for a policy."""
    if policy_id not in _POLICY_REGISTRY:
        raise KeyError(f"Policy id '{policy_id}' is not registered.")
    return _POLICY_REGISTRY[policy_id]
