"""Config package exports."""

from .schema import AppConfig, GameConfig, PlayConfig, SearchConfig, load_config

__all__ = [
    "AppConfig",
    "GameConfig",
    "PlayConfig",
    "SearchConfig",
    "load_config",
]
