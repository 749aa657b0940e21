"""Chess adapter. Requires the ``chess`` extra (python-chess)."""

from .game import ChessGame
from .eval import PIECE_VALUES, material_balance

__all__ = ["ChessGame", "PIECE_VALUES", "material_balance"]
