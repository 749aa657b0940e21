"""Exceptions raised by games, search and the command-line driver."""

from __future__ import annotations

from typing import Any, Optional


class MinimaxError(Exception):
    """Base class for all package errors."""


class InvalidMove(MinimaxError, ValueError):
    """A move is not a member of the current ``legal_moves()``."""

    def __init__(self, move: Any, reason: Optional[str] = None) -> None:
        self.move = move
        self.reason = reason
        message = f"Invalid move: {move!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoLegalMoves(MinimaxError, RuntimeError):
    """Search or move selection was requested on a position without moves."""


class ConfigurationError(MinimaxError, ValueError):
    """Malformed game or search configuration."""
