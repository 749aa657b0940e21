"""Tests for configuration schemas."""

from __future__ import annotations

import pytest

from minimax.config import AppConfig, load_config
from minimax.errors import ConfigurationError


def test_app_config_parsing():
    data = {
        "game": {"id": "tictactoe", "params": {"size": 4, "maximizer": "o"}},
        "search": {"depth": 5, "use_alpha_beta": False},
        "play": {"human_first": False, "log_level": "debug"},
        "seed": "7",
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.game.id == "tictactoe"
    assert cfg.game.params == {"size": 4, "maximizer": "o"}
    assert cfg.search.depth == 5
    assert cfg.search.use_alpha_beta is False
    assert cfg.play.human_first is False
    assert cfg.play.log_level == "debug"
    assert cfg.seed == 7


def test_app_config_defaults():
    cfg = AppConfig.from_dict({})
    assert cfg.game.id == "tictactoe"
    assert cfg.game.params == {}
    assert cfg.search.depth == 9
    assert cfg.search.use_alpha_beta is True
    assert cfg.play.human_first is True
    assert cfg.play.log_level == "WARNING"
    assert cfg.seed is None


def test_empty_sections_fall_back_to_defaults():
    cfg = AppConfig.from_dict({"game": None, "search": None, "play": None})
    assert cfg == AppConfig()


@pytest.mark.parametrize(
    "data",
    [
        {"search": {"depth": -1}},
        {"search": {"depth": 2.5}},
        {"search": {"depth": True}},
        {"game": {"params": [1, 2]}},
        {"play": {"log_level": "LOUD"}},
        {"search": [3]},
        {"seed": "abc"},
    ],
)
def test_app_config_rejects_bad_values(data):
    with pytest.raises(ConfigurationError):
        AppConfig.from_dict(data)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "session.yaml"
    path.write_text(
        "game:\n"
        "  id: tictactoe\n"
        "  params:\n"
        "    size: 3\n"
        "search:\n"
        "  depth: 4\n"
        "play:\n"
        "  human_first: false\n"
    )

    cfg = load_config(path)
    assert cfg.game.params == {"size": 3}
    assert cfg.search.depth == 4
    assert cfg.play.human_first is False


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("game: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_config(broken)

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("just a string\n")
    with pytest.raises(ConfigurationError):
        load_config(scalar)
