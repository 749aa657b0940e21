"""Tests for the python-chess adapter."""

import pytest

chess = pytest.importorskip("chess")

from minimax.errors import InvalidMove  # noqa: E402
from minimax.games.chess import ChessGame, material_balance  # noqa: E402
from minimax.registry import make_game  # noqa: E402
from minimax.search import best_move  # noqa: E402

BACK_RANK_MATE = "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"


def test_start_position():
    game = ChessGame()
    assert len(game.legal_moves()) == 20
    assert not game.is_terminal()
    assert game.winner() is None
    assert game.evaluate(0) == 0
    assert material_balance(game.board) == 0


def test_apply_checks_side_and_legality():
    game = ChessGame()
    with pytest.raises(InvalidMove):
        game.apply(chess.Move.from_uci("e2e4"), False)
    with pytest.raises(InvalidMove):
        game.apply(chess.Move.from_uci("e2e5"), True)
    assert game.fen() == chess.STARTING_FEN


def test_apply_undo_restores_position():
    game = ChessGame()
    move = game.parse_move("e4")
    game.apply(move, True)
    reply = game.parse_move("e7e5")
    game.apply(reply, False)
    assert game.history == ((move, True), (reply, False))

    with pytest.raises(InvalidMove):
        game.undo(move, True)

    game.undo(reply, False)
    game.undo(move, True)
    assert game.fen() == chess.STARTING_FEN
    assert game.history == ()


def test_parse_move_rejects_garbage():
    with pytest.raises(InvalidMove):
        ChessGame().parse_move("zz9")


def test_finds_back_rank_mate():
    game = ChessGame.from_fen(BACK_RANK_MATE)
    result = best_move(game, depth=1, maximizing=True)

    assert result.move == chess.Move.from_uci("a1a8")
    assert result.score >= ChessGame.win_score
    assert game.fen() == BACK_RANK_MATE


def test_checkmate_is_terminal():
    game = ChessGame.from_fen(BACK_RANK_MATE)
    game.apply(chess.Move.from_uci("a1a8"), True)

    assert game.is_terminal()
    assert game.legal_moves() == []
    assert game.winner() == chess.WHITE
    assert game.evaluate(2) == ChessGame.win_score + 2


def test_registry_builds_chess():
    game = make_game("chess", fen=BACK_RANK_MATE)
    assert isinstance(game, ChessGame)
    assert game.fen() == BACK_RANK_MATE
