"""Registries mapping string ids to game-state and policy factories.

Config files and the command-line driver refer to games and engines by id
(``"tictactoe"``, ``"minimax"``); these tables turn an id plus keyword
parameters into a live object.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Tuple, TypeVar

from minimax.errors import ConfigurationError

T = TypeVar("T")

GameFactory = Callable[..., Any]
PolicyFactory = Callable[..., Any]

_GAMES: Dict[str, Tuple[GameFactory, Dict[str, Any]]] = {}
_POLICIES: Dict[str, PolicyFactory] = {}


def _lookup(table: Mapping[str, T], kind: str, key: str) -> T:
    try:
        return table[key]
    except KeyError:
        known = ", ".join(sorted(table)) or "none"
        raise KeyError(f"Unknown {kind} id {key!r} (registered: {known})") from None


def _build(kind: str, key: str, factory: Callable[..., T], params: Dict[str, Any]) -> T:
    try:
        return factory(**params)
    except TypeError as exc:
        raise ConfigurationError(f"Bad parameters for {kind} {key!r}: {exc}") from exc


def register_game(game_id: str, factory: GameFactory, **defaults: Any) -> None:
    """Register a game-state factory with default parameters."""
    if game_id in _GAMES:
        raise ValueError(f"Game id {game_id!r} is already registered")
    _GAMES[game_id] = (factory, dict(defaults))


def make_game(game_id: str, **params: Any) -> Any:
    """
    Build a fresh game state. ``params`` override the registered defaults.

    Raises:
        KeyError: ``game_id`` is not registered.
        ConfigurationError: the factory rejects the parameters.
    """
    factory, defaults = _lookup(_GAMES, "game", game_id)
    return _build("game", game_id, factory, {**defaults, **params})


def list_games() -> Iterable[str]:
    return tuple(_GAMES)


def register_policy(policy_id: str, factory: PolicyFactory) -> None:
    if policy_id in _POLICIES:
        raise ValueError(f"Policy id {policy_id!r} is already registered")
    _POLICIES[policy_id] = factory


def make_policy(policy_id: str, **params: Any) -> Any:
    """Build a move-selection policy; errors as for :func:`make_game`."""
    factory = _lookup(_POLICIES, "policy", policy_id)
    return _build("policy", policy_id, factory, params)


def list_policies() -> Iterable[str]:
    return tuple(_POLICIES)
