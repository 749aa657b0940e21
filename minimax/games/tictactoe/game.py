"""TicTacToe rules on an N x N board (mutable state, for search algorithms)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from minimax.errors import ConfigurationError, InvalidMove
from minimax.games.turn_based_game import TurnBasedGame
from .eval import open_lines_heuristic, terminal_score
from .utils import parse_board, render_board, winning_mark


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = -1


@dataclass(frozen=True)
class TicTacToeConfig:
    size: int = 3
    maximizer: Mark = Mark.X
    empty_char: str = "-"
    x_char: str = "x"
    o_char: str = "o"

    def __post_init__(self) -> None:
        if isinstance(self.maximizer, str):
            try:
                object.__setattr__(self, "maximizer", Mark[self.maximizer.upper()])
            except KeyError:
                raise ConfigurationError(f"Maximizer must be X or O, got {self.maximizer!r}") from None
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size < 1:
            raise ConfigurationError(f"Board size must be a positive integer, got {self.size!r}")
        if self.maximizer not in (Mark.X, Mark.O):
            raise ConfigurationError(f"Maximizer must be X or O, got {self.maximizer!r}")
        chars = (self.empty_char, self.x_char, self.o_char)
        if any(len(ch) != 1 or ch.isspace() for ch in chars):
            raise ConfigurationError(f"Board characters must be single visible characters, got {chars!r}")
        if len({ch.lower() for ch in chars}) != len(chars):
            raise ConfigurationError(f"Board characters must be distinct, got {chars!r}")

    @classmethod
    def from_params(cls, **params) -> "TicTacToeConfig":
        try:
            return cls(**params)
        except TypeError as exc:
            raise ConfigurationError(f"Bad TicTacToe parameters: {exc}") from exc

    @property
    def chars(self) -> Dict[int, str]:
        return {
            int(Mark.EMPTY): self.empty_char,
            int(Mark.X): self.x_char,
            int(Mark.O): self.o_char,
        }


class TicTacToe(TurnBasedGame[int]):
    """
    N-in-a-row on an N x N grid.

    Moves are cell indices in ``[0, size * size)``, numbered row-major. The
    board is an ``int8`` array holding :class:`Mark` tokens.
    """

    def __init__(self, config: Optional[TicTacToeConfig] = None, *, size: Optional[int] = None) -> None:
        super().__init__()
        if config is None:
            config = TicTacToeConfig() if size is None else TicTacToeConfig(size=size)
        elif size is not None and size != config.size:
            raise ConfigurationError(f"size={size} conflicts with config.size={config.size}")
        self.config = config
        self.size = config.size
        self._board = np.zeros((self.size, self.size), dtype=np.int8)
        self._empty = self.size * self.size
        self._winner: Optional[int] = None

    @classmethod
    def from_rows(cls, rows: Sequence[str], config: Optional[TicTacToeConfig] = None) -> "TicTacToe":
        """Build a position from one string per row, e.g. ``["xx-", "oo-", "---"]``."""
        if config is None:
            config = TicTacToeConfig(size=len(rows))
        elif config.size != len(rows):
            raise ConfigurationError(f"Expected {config.size} rows, got {len(rows)}")
        chars = {ch: token for token, ch in config.chars.items()}
        try:
            board = parse_board(rows, chars)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        game = cls(config)
        game._board = board
        game._empty = int(np.count_nonzero(board == Mark.EMPTY))
        game._winner = winning_mark(board)
        return game

    @property
    def board(self) -> np.ndarray:
        return self._board.copy()

    @property
    def maximizer(self) -> Mark:
        return Mark(self.config.maximizer)

    @property
    def minimizer(self) -> Mark:
        return Mark(-self.config.maximizer)

    def mark_for(self, maximizing: bool) -> Mark:
        return self.maximizer if maximizing else self.minimizer

    def cell_to_coords(self, move: int) -> Tuple[int, int]:
        return divmod(move, self.size)

    def coords_to_cell(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidMove((row, col), "outside the board")
        return row * self.size + col

    def legal_moves(self) -> List[int]:
        if self._winner is not None:
            return []
        return [int(i) for i in np.flatnonzero(self._board.ravel() == Mark.EMPTY)]

    def apply(self, move: int, maximizing: bool) -> None:
        row, col = self._checked_coords(move)
        if self._winner is not None:
            raise InvalidMove(move, "game is already over")
        if self._board[row, col] != Mark.EMPTY:
            raise InvalidMove(move, "cell is occupied")

        token = int(self.mark_for(maximizing))
        self._board[row, col] = token
        self._empty -= 1
        self._push(move, maximizing)
        if self._completes_line(row, col, token):
            self._winner = token

    def undo(self, move: int, maximizing: bool) -> None:
        row, col = self._checked_coords(move)
        if self._board[row, col] != self.mark_for(maximizing):
            raise InvalidMove(move, "cell does not hold the mover's mark")
        self._pop(move, maximizing)

        self._board[row, col] = Mark.EMPTY
        self._empty += 1
        # apply() refuses moves once decided, so the undone move decided it (or nothing did)
        self._winner = None

    def is_terminal(self) -> bool:
        return self._winner is not None or self._empty == 0

    def winner(self) -> Optional[Mark]:
        return None if self._winner is None else Mark(self._winner)

    def evaluate(self, depth_remaining: int) -> float:
        if self._winner is not None:
            return terminal_score(self._winner, int(self.maximizer), depth_remaining, self.win_score)
        if self._empty == 0:
            return 0.0
        return open_lines_heuristic(self._board, int(self.maximizer))

    def render(self) -> str:
        return render_board(self._board, self.config.chars)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows = self.render().splitlines()
        return f"TicTacToe(size={self.size}, rows={rows!r})"

    def _checked_coords(self, move: int) -> Tuple[int, int]:
        if isinstance(move, bool) or not isinstance(move, (int, np.integer)):
            raise InvalidMove(move, "cell index must be an integer")
        if not 0 <= move < self.size * self.size:
            raise InvalidMove(move, f"cell index must be in [0, {self.size * self.size})")
        return self.cell_to_coords(int(move))

    def _completes_line(self, row: int, col: int, token: int) -> bool:
        b = self._board
        if np.all(b[row, :] == token) or np.all(b[:, col] == token):
            return True
        if row == col and np.all(np.diagonal(b) == token):
            return True
        if row + col == self.size - 1 and np.all(np.diagonal(np.fliplr(b)) == token):
            return True
        return False
