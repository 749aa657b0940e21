"""TicTacToe rules and evaluation."""

from .game import Mark, TicTacToe, TicTacToeConfig
from .eval import open_lines_heuristic, terminal_score
from .utils import iter_lines, parse_board, render_board, winning_mark

__all__ = [
    "Mark",
    "TicTacToe",
    "TicTacToeConfig",
    "iter_lines",
    "open_lines_heuristic",
    "parse_board",
    "render_board",
    "terminal_score",
    "winning_mark",
]
