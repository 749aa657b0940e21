"""TicTacToe evaluation functions for search algorithms."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .utils import count_lines, iter_lines


def terminal_score(
    winner: Optional[int],
    maximizer: int,
    depth_remaining: int,
    win_score: float,
) -> float:
    if winner is None or winner == 0:
        return 0.0
    magnitude = win_score + max(depth_remaining, 0)
    return magnitude if winner == maximizer else -magnitude


def open_lines_heuristic(board: np.ndarray, maximizer: int) -> float:
    """
    Lines still winnable by the maximizer minus lines still winnable by the
    minimizer, scaled into ``(-1, 1)``.
    """
    minimizer = -maximizer
    open_max = 0
    open_min = 0
    for line in iter_lines(board):
        if not np.any(line == minimizer):
            open_max += 1
        if not np.any(line == maximizer):
            open_min += 1
    return (open_max - open_min) / (count_lines(board.shape[0]) + 1)
