#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                      # 3×3, 100 shuffle moves
    python main.py -s 4 --shuffle 320   # 4×4, well mixed
    python main.py -d hard              # 5×5 with a 10 minute clock
    python main.py --seed 7             # reproducible scramble
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tilegrid.config import Difficulty, GameSettings, recommended_shuffle_moves  # noqa: E402
from tilegrid.engine.gridengine import RECOMMENDED_MAX_SIZE  # noqa: E402


# -- options ------------------------------------------------------------------


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def build_settings(
    difficulty: Optional[Difficulty],
    size: Optional[int],
    shuffle: Optional[int],
    time_limit: Optional[float],
    untimed: bool = False,
) -> GameSettings:
    """Resolve CLI options into settings; explicit options beat the preset."""
    if untimed and time_limit is not None:
        raise typer.BadParameter("--time-limit and --no-time-limit are exclusive.")
    base = (
        GameSettings.for_difficulty(difficulty)
        if difficulty is not None
        else GameSettings()
    )
    try:
        settings = base.with_overrides(
            grid_size=size, shuffle_moves=shuffle, time_limit=time_limit
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return settings.without_time_limit() if untimed else settings


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2,
        help=f"Grid size (2+, up to {RECOMMENDED_MAX_SIZE} recommended).",
    ),
    difficulty: Optional[Difficulty] = typer.Option(
        None, "-d", "--difficulty",
        help="Preset for size, shuffle moves and time limit.",
    ),
    shuffle: Optional[int] = typer.Option(
        None, "--shuffle",
        min=0,
        help="Random slides used to scramble the board.",
    ),
    time_limit: Optional[float] = typer.Option(
        None, "--time-limit",
        help="Seconds allowed per round. Omit to play untimed.",
    ),
    no_time_limit: bool = typer.Option(
        False, "--no-time-limit",
        help="Play untimed even if the difficulty preset has a clock.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging level.",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run",
        help="Print the resolved settings and exit.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    logging.basicConfig(
        level=log_level.value.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = build_settings(difficulty, size, shuffle, time_limit, no_time_limit)

    recommended = recommended_shuffle_moves(settings.grid_size)
    if settings.shuffle_moves < recommended:
        logging.getLogger(__name__).info(
            "%d shuffle moves may leave a %dx%d board poorly mixed (try %d).",
            settings.shuffle_moves,
            settings.grid_size,
            settings.grid_size,
            recommended,
        )

    if dry_run:
        typer.echo(
            f"size={settings.grid_size} shuffle={settings.shuffle_moves} "
            f"time_limit={settings.time_limit}"
        )
        return

    from frontend.cli.rich.app import run

    run(settings, seed=seed)


if __name__ == "__main__":
    app()
