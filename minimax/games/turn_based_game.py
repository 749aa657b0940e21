from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Hashable, List, Optional, Sequence, Tuple, TypeVar

from minimax.errors import InvalidMove

M = TypeVar("M", bound=Hashable)  # move type


class TurnBasedGame(ABC, Generic[M]):
    """
    Mutable state of a deterministic two-player game with perfect information.

    The search borrows the state, plays moves with :meth:`apply`, recurses and
    restores it with :meth:`undo`. Scores are always given from the
    maximizer's point of view.
    """

    win_score: ClassVar[float] = 1000.0

    def __init__(self) -> None:
        self._history: List[Tuple[M, bool]] = []

    @abstractmethod
    def legal_moves(self) -> List[M]:
        """All playable moves, in a stable order. Empty once the game is over."""

    @abstractmethod
    def apply(self, move: M, maximizing: bool) -> None:
        """Play ``move`` for the maximizer (``True``) or the minimizer."""

    @abstractmethod
    def undo(self, move: M, maximizing: bool) -> None:
        """Take back the most recent :meth:`apply` of ``move``."""

    @abstractmethod
    def is_terminal(self) -> bool:
        """Whether the game is decided or drawn."""

    @abstractmethod
    def evaluate(self, depth_remaining: int) -> float:
        """
        Score of the position for the maximizer.

        Decided games return ``±(win_score + depth_remaining)``, draws ``0``,
        anything else a heuristic smaller in magnitude than ``win_score``.
        """

    @abstractmethod
    def winner(self) -> Optional[Any]:
        """The player who won, or ``None`` while undecided or drawn."""

    def is_tied(self) -> bool:
        return self.is_terminal() and self.winner() is None

    def is_valid_move(self, move: M) -> bool:
        return move in self.legal_moves()

    @property
    def history(self) -> Sequence[Tuple[M, bool]]:
        """Moves applied so far as ``(move, maximizing)`` pairs."""
        return tuple(self._history)

    def _push(self, move: M, maximizing: bool) -> None:
        self._history.append((move, maximizing))

    def _pop(self, move: M, maximizing: bool) -> None:
        if not self._history or self._history[-1] != (move, maximizing):
            last = self._history[-1] if self._history else None
            raise InvalidMove(move, f"last applied move is {last!r}")
        self._history.pop()
