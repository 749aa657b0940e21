"""Board helpers shared by the TicTacToe rules and evaluation."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional, Sequence

import numpy as np


def iter_lines(board: np.ndarray) -> Iterator[np.ndarray]:
    """Yield every row, column and both diagonals of a square board."""
    size = board.shape[0]
    for r in range(size):
        yield board[r, :]
    for c in range(size):
        yield board[:, c]
    yield np.diagonal(board)
    yield np.diagonal(np.fliplr(board))


def count_lines(size: int) -> int:
    return 2 * size + 2


def winning_mark(board: np.ndarray) -> Optional[int]:
    """Token filling a complete line, if any."""
    for line in iter_lines(board):
        first = int(line[0])
        if first != 0 and np.all(line == first):
            return first
    return None


def render_board(board: np.ndarray, chars: Mapping[int, str]) -> str:
    return "\n".join("".join(chars[int(cell)] for cell in row) for row in board)


def parse_board(rows: Sequence[str], chars: Mapping[str, int]) -> np.ndarray:
    """
    Build a board from one string per row.

    Whitespace is ignored and characters are matched case-insensitively, so
    ``["x x -", "o o -", "- - -"]`` and ``["XX-", "OO-", "---"]`` are the same.
    """
    lookup = {ch.lower(): token for ch, token in chars.items()}
    size = len(rows)
    board = np.zeros((size, size), dtype=np.int8)
    for r, row in enumerate(rows):
        cells = [ch for ch in row if not ch.isspace()]
        if len(cells) != size:
            raise ValueError(f"Row {r} has {len(cells)} cells, expected {size}")
        for c, ch in enumerate(cells):
            try:
                board[r, c] = lookup[ch.lower()]
            except KeyError:
                raise ValueError(f"Unknown cell character {ch!r} in row {r}") from None
    return board
