"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Tuple, TypeVar

from minimax.errors import NoLegalMoves
from minimax.games.turn_based_game import TurnBasedGame
from .action_policy import ActionPolicy

LOGGER = logging.getLogger(__name__)

M = TypeVar("M")


@dataclass
class MinimaxConfig:
    depth: int = 9
    use_alpha_beta: bool = True


@dataclass(frozen=True)
class SearchResult(Generic[M]):
    """Best move found for the root position and its score."""

    move: Optional[M]
    score: float
    depth: int
    nodes: int


class MinimaxPolicy(ActionPolicy[M], Generic[M]):
    """
    Depth-limited minimax over a mutable ``TurnBasedGame``.

    The state is explored in place: every move is applied, searched and undone
    before the next sibling is tried, so the caller gets the state back exactly
    as it was. With ``use_alpha_beta`` the search carries alpha/beta bounds
    down the tree and stops iterating siblings once they cannot change the
    ancestors' choice. Ties keep the first move in ``legal_moves()`` order.
    """

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        self._nodes = 0

    def select_action(self, state: TurnBasedGame[M], maximizing: bool = True) -> M:
        if self.config.depth <= 0:
            raise ValueError("Minimax depth must be >= 1 to select a move")
        result = self.best_move(state, maximizing=maximizing)
        if result.move is None:
            # is_terminal() held at the root although legal_moves() was not empty
            raise NoLegalMoves("Position is terminal; no move to select")
        return result.move

    def best_move(
        self,
        state: TurnBasedGame[M],
        depth: Optional[int] = None,
        maximizing: bool = True,
    ) -> SearchResult[M]:
        """
        Search ``depth`` plies ahead for the side given by ``maximizing``.

        Raises:
            ValueError: ``depth`` is negative.
            NoLegalMoves: the position has no legal move to choose from.
        """
        if depth is None:
            depth = self.config.depth
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        if not state.legal_moves():
            raise NoLegalMoves("No legal moves available for minimax")

        self._nodes = 0
        candidates: Optional[List[Tuple[M, float]]] = (
            [] if LOGGER.isEnabledFor(logging.DEBUG) else None
        )
        move, score = self._search(
            state,
            depth=depth,
            maximizing=maximizing,
            alpha=-math.inf,
            beta=math.inf,
            candidates=candidates,
        )
        result = SearchResult(move=move, score=score, depth=depth, nodes=self._nodes)

        if candidates is not None:
            # Siblings after the first are searched with a narrowed window, so
            # their values are bounds rather than exact scores.
            for move_, value in candidates:
                LOGGER.debug("Candidate move=%r value=%.3f chosen=%s", move_, value, move_ == move)
        LOGGER.debug(
            "Minimax selected %r with score %.3f (depth=%d nodes=%d alpha_beta=%s)",
            result.move,
            result.score,
            depth,
            result.nodes,
            self.config.use_alpha_beta,
        )
        return result

    def _search(
        self,
        state: TurnBasedGame[M],
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        candidates: Optional[List[Tuple[M, float]]] = None,
    ) -> Tuple[Optional[M], float]:
        self._nodes += 1
        if depth == 0 or state.is_terminal():
            return None, state.evaluate(depth)

        best: Optional[M] = None
        best_score = -math.inf if maximizing else math.inf

        for move in state.legal_moves():
            state.apply(move, maximizing)
            try:
                _, child_score = self._search(
                    state,
                    depth=depth - 1,
                    maximizing=not maximizing,
                    alpha=alpha,
                    beta=beta,
                )
            finally:
                state.undo(move, maximizing)

            if candidates is not None:
                candidates.append((move, child_score))

            if maximizing and child_score > best_score:
                best_score, best = child_score, move
            elif not maximizing and child_score < best_score:
                best_score, best = child_score, move

            if self.config.use_alpha_beta:
                if maximizing:
                    alpha = max(alpha, best_score)
                else:
                    beta = min(beta, best_score)
                if alpha >= beta:
                    break

        if best is None:
            # No moves although not terminal: score the position as it stands.
            return None, state.evaluate(depth)
        return best, best_score


def best_move(
    state: TurnBasedGame[M],
    depth: int,
    maximizing: bool = True,
    use_alpha_beta: bool = True,
) -> SearchResult[M]:
    """Search ``state`` with a one-off :class:`MinimaxPolicy`."""
    policy: MinimaxPolicy[M] = MinimaxPolicy(
        MinimaxConfig(depth=depth, use_alpha_beta=use_alpha_beta)
    )
    return policy.best_move(state, depth=depth, maximizing=maximizing)
