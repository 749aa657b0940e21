from __future__ import annotations

from .turn_based_game import TurnBasedGame
from .tictactoe import Mark, TicTacToe, TicTacToeConfig
from ..registry import list_games, register_game


def _make_tictactoe(**params) -> TicTacToe:
    return TicTacToe(TicTacToeConfig.from_params(**params))


def _make_chess(**kwargs):
    # python-chess is an optional extra
    from .chess import ChessGame

    return ChessGame(**kwargs)


if "tictactoe" not in list_games():
    register_game("tictactoe", _make_tictactoe, size=3)
if "chess" not in list_games():
    register_game("chess", _make_chess)

__all__ = ["Mark", "TicTacToe", "TicTacToeConfig", "TurnBasedGame"]
