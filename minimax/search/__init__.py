"""Search algorithms and move-selection policies."""

from .action_policy import ActionPolicy
from .minimax_policy import MinimaxConfig, MinimaxPolicy, SearchResult, best_move
from .random_policy import RandomPolicy
from ..registry import list_policies, register_policy


def _minimax_factory(**kwargs):
    return MinimaxPolicy(MinimaxConfig(**kwargs))


if "minimax" not in list_policies():
    register_policy("minimax", _minimax_factory)
if "random" not in list_policies():
    register_policy("random", RandomPolicy)

__all__ = [
    "ActionPolicy",
    "MinimaxConfig",
    "MinimaxPolicy",
    "RandomPolicy",
    "SearchResult",
    "best_move",
]
