"""Chess on top of python-chess (mutable state, for search algorithms)."""

from __future__ import annotations

from typing import ClassVar, List, Optional

import chess

from minimax.errors import InvalidMove
from minimax.games.turn_based_game import TurnBasedGame
from .eval import material_balance


class ChessGame(TurnBasedGame[chess.Move]):
    """
    Standard chess with white as the maximizer.

    Moves are :class:`chess.Move` objects; :meth:`parse_move` accepts UCI or
    SAN strings for callers that read moves from a user.
    """

    win_score: ClassVar[float] = 100_000.0

    def __init__(self, fen: str = chess.STARTING_FEN) -> None:
        super().__init__()
        self._board = chess.Board(fen)

    @classmethod
    def from_fen(cls, fen: str) -> "ChessGame":
        return cls(fen)

    @property
    def board(self) -> chess.Board:
        return self._board.copy(stack=False)

    def fen(self) -> str:
        return self._board.fen()

    def parse_move(self, text: str) -> chess.Move:
        try:
            return self._board.parse_uci(text)
        except ValueError:
            pass
        try:
            return self._board.parse_san(text)
        except ValueError as exc:
            raise InvalidMove(text, str(exc)) from exc

    def legal_moves(self) -> List[chess.Move]:
        if self._board.is_game_over():
            return []
        return list(self._board.legal_moves)

    def apply(self, move: chess.Move, maximizing: bool) -> None:
        if self._board.turn != (chess.WHITE if maximizing else chess.BLACK):
            side = "white" if maximizing else "black"
            raise InvalidMove(move, f"it is not {side}'s turn")
        if self._board.is_game_over():
            raise InvalidMove(move, "game is already over")
        if not self._board.is_legal(move):
            raise InvalidMove(move, "illegal in this position")
        self._board.push(move)
        self._push(move, maximizing)

    def undo(self, move: chess.Move, maximizing: bool) -> None:
        self._pop(move, maximizing)
        self._board.pop()

    def is_terminal(self) -> bool:
        return self._board.is_game_over()

    def winner(self) -> Optional[chess.Color]:
        outcome = self._board.outcome()
        return None if outcome is None else outcome.winner

    def evaluate(self, depth_remaining: int) -> float:
        outcome = self._board.outcome()
        if outcome is not None:
            if outcome.winner is None:
                return 0.0
            magnitude = self.win_score + max(depth_remaining, 0)
            return magnitude if outcome.winner == chess.WHITE else -magnitude
        return float(material_balance(self._board))

    def render(self) -> str:
        return str(self._board)

    def __str__(self) -> str:
        return self.render()
