from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from minimax.games.turn_based_game import TurnBasedGame

M = TypeVar("M")


class ActionPolicy(ABC, Generic[M]):
    """
    Abstract policy that picks a move for one side of a game.

    Knows only about:
      - a ``TurnBasedGame[M]`` state
      - which side (maximizer or minimizer) is to move
    """

    @abstractmethod
    def select_action(self, state: TurnBasedGame[M], maximizing: bool = True) -> M:
        """
        Choose a move for the side given by ``maximizing``.

        Implementations may explore the state with apply/undo but must leave
        it exactly as they found it.
        """
        raise NotImplementedError
