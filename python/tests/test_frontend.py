"""Terminal frontend — key decoding, board rendering and the CLI options."""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from typer.testing import CliRunner

from frontend.cli.input_handler import ACTION_DIRECTIONS, Action, decode
from frontend.cli.rich.app import render_board
from main import app
from tilegrid.engine.gridengine import GridEngine
from tilegrid.models.board import Board, Direction

runner = CliRunner()


# -- key decoding ---------------------------------------------------------------


@pytest.mark.parametrize(
    "keys, action",
    [
        ("w", Action.UP),
        ("S", Action.DOWN),
        ("a", Action.LEFT),
        ("D", Action.RIGHT),
        ("\x1b[A", Action.UP),
        ("\x1b[B", Action.DOWN),
        ("\x1b[C", Action.RIGHT),
        ("\x1b[D", Action.LEFT),
        ("\xe0H", Action.UP),
        ("\x00K", Action.LEFT),
        ("\x1b", Action.QUIT),
        ("q", Action.QUIT),
        ("\x03", Action.QUIT),
        ("r", Action.RESTART),
        ("p", Action.PAUSE),
        ("\r", Action.ENTER),
        ("z", Action.NONE),
        ("\x1b[Z", Action.NONE),
        ("\x1b[", Action.NONE),
        ("\x1bx", Action.QUIT),
        ("\x1bO", Action.QUIT),
        ("", Action.NONE),
    ],
)
def test_decode(keys: str, action: Action) -> None:
    assert decode(keys) is action


def test_movement_actions_map_to_directions() -> None:
    assert set(ACTION_DIRECTIONS.values()) == set(Direction)


# -- rendering ------------------------------------------------------------------


def _text(renderable) -> str:
    console = Console(file=io.StringIO(), record=True, width=80, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_render_board_shows_every_tile() -> None:
    engine = GridEngine(3)
    text = _text(render_board(engine.snapshot(), engine.movable_positions()))

    for tile in range(1, 9):
        assert str(tile) in text
    assert "·" in text


def test_render_board_large_grid() -> None:
    text = _text(render_board(Board.solved(5)))
    assert "24" in text


# -- CLI ------------------------------------------------------------------------


def test_cli_dry_run_defaults() -> None:
    result = runner.invoke(app, ["--dry-run"])

    assert result.exit_code == 0
    assert "size=3 shuffle=100 time_limit=None" in result.output


def test_cli_difficulty_with_override() -> None:
    result = runner.invoke(app, ["-d", "hard", "-s", "4", "--dry-run"])

    assert result.exit_code == 0
    assert "size=4 shuffle=300 time_limit=600.0" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["-s", "1", "--dry-run"],
        ["--shuffle", "-5", "--dry-run"],
        ["--time-limit", "-1", "--dry-run"],
        ["-d", "impossible", "--dry-run"],
    ],
)
def test_cli_rejects_bad_settings(args: list[str]) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 2


def test_cli_no_time_limit_clears_preset_clock() -> None:
    result = runner.invoke(app, ["-d", "hard", "--no-time-limit", "--dry-run"])

    assert result.exit_code == 0
    assert "size=5 shuffle=300 time_limit=None" in result.output


def test_cli_time_limit_options_are_exclusive() -> None:
    result = runner.invoke(app, ["--time-limit", "60", "--no-time-limit", "--dry-run"])
    assert result.exit_code == 2
