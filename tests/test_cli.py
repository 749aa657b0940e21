"""Tests for the human-vs-engine TicTacToe driver."""

import pytest

import minimax.cli.play_human_vs_engine as cli
from minimax.cli.play_human_vs_engine import (
    build_config,
    parse_cell,
    play_human_vs_engine,
    run_game,
)
from minimax.errors import ConfigurationError, InvalidMove
from minimax.games import TicTacToe
from minimax.search import MinimaxConfig, MinimaxPolicy


def _scripted(lines):
    feed = iter(lines)

    def read_line(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_parse_cell_formats():
    game = TicTacToe()
    assert parse_cell("4", game) == 4
    assert parse_cell(" 2,1 ", game) == 7
    assert parse_cell("0 2", game) == 2
    with pytest.raises(ValueError):
        parse_cell("centre", game)
    with pytest.raises(ValueError):
        parse_cell("1 2 3", game)
    with pytest.raises(InvalidMove):
        parse_cell("3,0", game)


def test_run_game_quit_returns_none():
    out = []
    result = run_game(TicTacToe(), MinimaxPolicy(), read_line=_scripted(["q"]), write=out.append)
    assert result is None
    assert "Bye." in out


def test_run_game_eof_counts_as_quit():
    result = run_game(TicTacToe(), MinimaxPolicy(), read_line=_scripted([]), write=lambda _: None)
    assert result is None


def test_run_game_reprompts_on_bad_input():
    out = []
    lines = ["hello", "9", "4", "4", "quit"]
    result = run_game(TicTacToe(), MinimaxPolicy(), read_line=_scripted(lines), write=out.append)

    assert result is None
    assert "Please enter a cell index or 'row,col'." in out
    assert sum("Legal moves" in line for line in out) == 2
    assert sum(line.startswith("Move played by you") for line in out) == 1
    assert sum(line.startswith("Move played by engine") for line in out) == 1


def test_engine_never_loses_to_scripted_human():
    """Human keeps trying cells in order; the full-depth engine wins or draws."""
    out = []
    lines = [str(cell) for cell in range(9)] * 9
    engine = MinimaxPolicy(MinimaxConfig(depth=9))
    result = run_game(TicTacToe(), engine, read_line=_scripted(lines), write=out.append)

    assert result in (0, -1)
    assert "Game is complete." in out


def test_engine_moves_first_when_human_is_second():
    out = []
    engine = MinimaxPolicy(MinimaxConfig(depth=1))
    run_game(TicTacToe(), engine, human_first=False, read_line=_scripted(["q"]), write=out.append)

    assert out[1] == "Move played by engine: 4 (i.e. 1, 1)"


def test_build_config_validation(tmp_path):
    cfg = build_config(size=4, depth=3, human_first=False, log_level="INFO")
    assert cfg.game.params == {"size": 4}
    assert cfg.search.depth == 3
    assert cfg.play.human_first is False

    with pytest.raises(ConfigurationError):
        build_config(size=3, depth=0, human_first=True, log_level="INFO")

    path = tmp_path / "chess.yaml"
    path.write_text("game:\n  id: chess\n")
    with pytest.raises(ConfigurationError):
        build_config(size=3, depth=3, human_first=True, log_level="INFO", config=path)


@pytest.mark.parametrize("kwargs", [{"size": 0}, {"depth": -2}, {"log_level": "LOUD"}])
def test_play_rejects_bad_options(kwargs, capsys):
    with pytest.raises(SystemExit) as excinfo:
        play_human_vs_engine(**kwargs)
    assert excinfo.value.code == 2
    assert "Error:" in capsys.readouterr().err


def test_play_builds_engine_from_config(tmp_path, monkeypatch):
    seen = {}

    def fake_run_game(game, engine, human_first=True):
        seen.update(game=game, engine=engine, human_first=human_first)

    monkeypatch.setattr(cli, "run_game", fake_run_game)
    path = tmp_path / "session.yaml"
    path.write_text(
        "game:\n"
        "  params:\n"
        "    size: 4\n"
        "search:\n"
        "  depth: 2\n"
        "  use_alpha_beta: false\n"
        "play:\n"
        "  human_first: false\n"
    )

    play_human_vs_engine(config=path)

    assert isinstance(seen["engine"], MinimaxPolicy)
    assert seen["engine"].config == MinimaxConfig(depth=2, use_alpha_beta=False)
    assert seen["game"].size == 4
    assert seen["human_first"] is False
