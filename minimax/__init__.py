"""Alpha-beta minimax search for two-player, zero-sum, perfect-information games."""

from .errors import ConfigurationError, InvalidMove, MinimaxError, NoLegalMoves
from .games import Mark, TicTacToe, TicTacToeConfig, TurnBasedGame
from .search import (
    ActionPolicy,
    MinimaxConfig,
    MinimaxPolicy,
    RandomPolicy,
    SearchResult,
    best_move,
)

__version__ = "0.2.0"

__all__ = [
    "ActionPolicy",
    "ConfigurationError",
    "InvalidMove",
    "Mark",
    "MinimaxConfig",
    "MinimaxError",
    "MinimaxPolicy",
    "NoLegalMoves",
    "RandomPolicy",
    "SearchResult",
    "TicTacToe",
    "TicTacToeConfig",
    "TurnBasedGame",
    "best_move",
]
