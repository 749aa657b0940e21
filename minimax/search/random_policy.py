"""Random policy implementation."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

import numpy as np

from minimax.errors import NoLegalMoves
from minimax.games.turn_based_game import TurnBasedGame
from .action_policy import ActionPolicy

M = TypeVar("M")


class RandomPolicy(ActionPolicy[M], Generic[M]):
    """Policy that selects uniformly among legal moves."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Args:
            seed: Random seed for reproducibility (ignored when ``rng`` is given)
            rng: Explicit generator to draw from
        """
        self.rng = rng or np.random.default_rng(seed)

    def select_action(self, state: TurnBasedGame[M], maximizing: bool = True) -> M:
        legal_moves = state.legal_moves()
        if not legal_moves:
            raise NoLegalMoves("RandomPolicy: no legal moves available")
        return legal_moves[int(self.rng.integers(len(legal_moves)))]
