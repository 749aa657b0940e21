"""Utilities for playing games and matches between policies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from minimax.games.turn_based_game import TurnBasedGame
from minimax.search.action_policy import ActionPolicy

LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[Any, bool], None]


@dataclass
class GameRecord:
    """Outcome of one game, seen from the maximizer."""

    moves: List[Tuple[Any, bool]] = field(default_factory=list)
    winner: Optional[Any] = None
    result: int = 0  # 1 maximizer won, -1 minimizer won, 0 draw or unfinished
    finished: bool = False

    @property
    def plies(self) -> int:
        return len(self.moves)


@dataclass
class MatchResult:
    a_wins: int = 0
    draws: int = 0
    b_wins: int = 0

    @property
    def games(self) -> int:
        return self.a_wins + self.draws + self.b_wins


def play_game(
    state: TurnBasedGame,
    first: ActionPolicy,
    second: ActionPolicy,
    *,
    first_is_maximizer: bool = True,
    max_plies: Optional[int] = None,
    on_move: Optional[MoveCallback] = None,
) -> GameRecord:
    """
    Alternate ``first`` and ``second`` on ``state`` until the game ends.

    Args:
        state: Game state, mutated in place.
        first: Policy making the first move.
        second: Policy replying.
        first_is_maximizer: Whether ``first`` plays the maximizer's side.
        max_plies: Optional cap on the number of moves played.
        on_move: Called with ``(move, maximizing)`` after every move.

    Returns:
        GameRecord with the moves played and the result for the maximizer.
    """
    record = GameRecord()
    maximizing = first_is_maximizer

    while not state.is_terminal() and state.legal_moves():
        if max_plies is not None and record.plies >= max_plies:
            break
        policy = first if record.plies % 2 == 0 else second
        move = policy.select_action(state, maximizing=maximizing)
        state.apply(move, maximizing)
        record.moves.append((move, maximizing))
        if on_move is not None:
            on_move(move, maximizing)
        maximizing = not maximizing

    record.finished = state.is_terminal()
    record.winner = state.winner()
    if record.finished:
        score = state.evaluate(0)
        record.result = (score > 0) - (score < 0)
    LOGGER.debug("Game finished=%s after %d plies, result=%d", record.finished, record.plies, record.result)
    return record


def play_match(
    make_state: Callable[[], TurnBasedGame],
    policy_a: ActionPolicy,
    policy_b: ActionPolicy,
    num_games: int = 10,
    alternate_first: bool = True,
) -> MatchResult:
    """
    Play ``num_games`` fresh games between two policies.

    The first mover always plays the maximizer. With ``alternate_first``
    ``policy_b`` opens every other game.
    """
    result = MatchResult()
    for game_idx in range(num_games):
        a_first = not (alternate_first and game_idx % 2 == 1)
        first, second = (policy_a, policy_b) if a_first else (policy_b, policy_a)
        record = play_game(make_state(), first, second, first_is_maximizer=True)

        if record.result == 0:
            result.draws += 1
        elif (record.result > 0) == a_first:
            result.a_wins += 1
        else:
            result.b_wins += 1

    LOGGER.info(
        "Match over %d games: a_wins=%d draws=%d b_wins=%d",
        num_games,
        result.a_wins,
        result.draws,
        result.b_wins,
    )
    return result
