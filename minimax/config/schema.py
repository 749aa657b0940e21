"""Configuration schema for game sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from minimax.errors import ConfigurationError


@dataclass
class GameConfig:
    id: str = "tictactoe"
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchConfig:
    depth: int = 9
    use_alpha_beta: bool = True


@dataclass
class PlayConfig:
    human_first: bool = True
    log_level: str = "WARNING"


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    play: PlayConfig = field(default_factory=PlayConfig)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        depth = self.search.depth
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise ConfigurationError(f"search.depth must be a non-negative integer, got {depth!r}")
        if not isinstance(self.game.params, dict):
            raise ConfigurationError("game.params must be a mapping")
        if not isinstance(logging.getLevelName(self.play.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.play.log_level!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        try:
            game_data = data.get("game") or {}
            game = GameConfig(
                id=str(game_data.get("id", "tictactoe")),
                params=game_data.get("params", {}) or {},
            )

            search_data = data.get("search") or {}
            search = SearchConfig(
                depth=search_data.get("depth", 9),
                use_alpha_beta=bool(search_data.get("use_alpha_beta", True)),
            )

            play_data = data.get("play") or {}
            play = PlayConfig(
                human_first=bool(play_data.get("human_first", True)),
                log_level=str(play_data.get("log_level", "WARNING")),
            )
        except AttributeError as exc:
            raise ConfigurationError(f"Config sections must be mappings: {exc}") from exc

        seed = data.get("seed")
        if seed is not None:
            try:
                seed = int(seed)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"seed must be an integer, got {seed!r}") from exc

        return cls(game=game, search=search, play=play, seed=seed)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
