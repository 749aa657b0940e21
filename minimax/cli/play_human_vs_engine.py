"""CLI for playing TicTacToe against the minimax engine."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Callable, Optional

import tyro

from minimax.config import AppConfig, GameConfig, PlayConfig, SearchConfig, load_config
from minimax.errors import ConfigurationError, InvalidMove
from minimax.games import TicTacToe
from minimax.registry import make_game, make_policy
from minimax.search import MinimaxPolicy

LOGGER = logging.getLogger("minimax.cli")

QUIT_COMMANDS = {"q", "quit", "exit"}

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def parse_cell(text: str, game: TicTacToe) -> int:
    """
    Parse a human move: a cell index (``"4"``) or ``"row,col"`` / ``"row col"``.

    Raises:
        ValueError: the text is not a move at all.
        InvalidMove: the coordinates fall outside the board.
    """
    parts = [p for p in re.split(r"[,\s]+", text.strip()) if p]
    if len(parts) == 1:
        return int(parts[0])
    if len(parts) == 2:
        row, col = (int(p) for p in parts)
        return game.coords_to_cell(row, col)
    raise ValueError(f"Cannot parse move {text!r}")


def build_config(
    size: int,
    depth: int,
    human_first: bool,
    log_level: str,
    config: Optional[Path] = None,
) -> AppConfig:
    if config is not None:
        app_config = load_config(config)
    else:
        app_config = AppConfig(
            game=GameConfig(id="tictactoe", params={"size": size}),
            search=SearchConfig(depth=depth),
            play=PlayConfig(human_first=human_first, log_level=log_level),
        )
    if app_config.game.id != "tictactoe":
        raise ConfigurationError(f"This driver plays tictactoe only, got game id {app_config.game.id!r}")
    if app_config.search.depth < 1:
        raise ConfigurationError("Search depth must be >= 1 for the engine to move")
    return app_config


def run_game(
    game: TicTacToe,
    engine: MinimaxPolicy[int],
    human_first: bool = True,
    read_line: ReadLine = input,
    write: Write = print,
) -> Optional[int]:
    """
    Alternate human and engine moves until the game ends.

    The first mover plays the maximizer. Returns ``1`` if the human won,
    ``-1`` if the engine won, ``0`` for a tie and ``None`` if the human quit.
    """
    human_maximizing = human_first
    maximizing = True
    example = min(7, game.size * game.size - 1)
    ex_row, ex_col = game.cell_to_coords(example)

    while not game.is_terminal():
        write(f"Board:\n{game.render()}\n")
        if maximizing == human_maximizing:
            prompt = f"Enter a move (e.g. '{example}' or '{ex_row},{ex_col}' is row {ex_row}, col {ex_col}): "
            try:
                text = read_line(prompt)
            except EOFError:
                text = "q"
            if text.strip().lower() in QUIT_COMMANDS:
                write("Bye.")
                return None
            try:
                move = parse_cell(text, game)
                game.apply(move, maximizing)
            except InvalidMove as exc:
                write(f"{exc}. Legal moves: {game.legal_moves()}")
                continue
            except ValueError:
                write("Please enter a cell index or 'row,col'.")
                continue
            row, col = game.cell_to_coords(move)
            write(f"Move played by you: {move} (i.e. {row}, {col})")
        else:
            result = engine.best_move(game, maximizing=maximizing)
            move = result.move
            game.apply(move, maximizing)
            row, col = game.cell_to_coords(move)
            LOGGER.info("Engine move %d score=%.3f nodes=%d", move, result.score, result.nodes)
            write(f"Move played by engine: {move} (i.e. {row}, {col})")
        maximizing = not maximizing

    write(f"Board:\n{game.render()}\n")
    write("Game is complete.")
    winner = game.winner()
    if winner is None:
        write("Game tied!")
        return 0
    human_mark = game.mark_for(human_maximizing)
    write(f"{game.config.chars[int(winner)]} wins!")
    return 1 if winner == human_mark else -1


def play_human_vs_engine(
    size: int = 3,
    depth: int = 9,
    human_first: bool = True,
    config: Optional[Path] = None,
    log_level: str = "WARNING",
) -> None:
    """
    Play TicTacToe against the alpha-beta minimax engine.

    Args:
        size: Side length of the board.
        depth: Search depth in plies; higher is stronger and slower.
        human_first: Whether the human makes the first move (plays X).
        config: Optional YAML config; replaces the other options when given.
        log_level: Python logging level.
    """
    try:
        app_config = build_config(size, depth, human_first, log_level, config)
        game = make_game(app_config.game.id, **app_config.game.params)
        engine: MinimaxPolicy[int] = make_policy(
            "minimax",
            depth=app_config.search.depth,
            use_alpha_beta=app_config.search.use_alpha_beta,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(level=getattr(logging, app_config.play.log_level.upper(), logging.WARNING))
    LOGGER.info(
        "Starting TicTacToe %dx%d, depth=%d, human_first=%s",
        game.size,
        game.size,
        app_config.search.depth,
        app_config.play.human_first,
    )
    run_game(game, engine, human_first=app_config.play.human_first)


def main() -> None:
    tyro.cli(play_human_vs_engine)


if __name__ == "__main__":
    main()
