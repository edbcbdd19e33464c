"""Rich terminal frontend — styled board, live clock and win/time-out screens.

The frontend is a host of the grid engine: it owns a ``GameSession``,
forwards key presses as moves and redraws from board snapshots.
"""

from __future__ import annotations

import random
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from frontend.cli.input_handler import ACTION_DIRECTIONS, Action, get_key, get_key_timeout
from tilegrid.config import GameSettings
from tilegrid.engine.gamesession import GameSession
from tilegrid.engine.gridengine import GridEngine
from tilegrid.models.board import EMPTY, Board, Position

console = Console()

_TICK = 0.5


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _stats(session: GameSession) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(session.elapsed_time), style="bold yellow")
    remaining = session.remaining_time
    if remaining is not None:
        stats.append("    Left: ", style="dim")
        style = "bold red" if remaining < 30 else "bold yellow"
        stats.append(_format_time(remaining), style=style)
    return stats


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, movable: list[Position] | None = None) -> Table:
    """Return a Rich Table for *board*; tiles in *movable* are highlighted."""
    width = len(str(board.size * board.size - 1))
    movable_set = set(movable or ())
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for y, row in enumerate(board.tiles):
        cells: list[str] = []
        for x, val in enumerate(row):
            pos = Position(x, y)
            if val == EMPTY:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(pos):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            elif pos in movable_set:
                cells.append(f"[bold cyan]{val:>{width}}[/bold cyan]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_game(session: GameSession, paused: bool = False) -> None:
    console.clear()

    size = session.engine.size
    board_table = render_board(session.board, session.engine.movable_positions())

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  pause   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    body = (
        Align.center(Text("\n  PAUSED  \n", style="bold yellow"))
        if paused
        else Align.center(board_table)
    )
    panel = Panel(
        body,
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # come back and repaint only that line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(session)))
    console.print(Align.center(controls))


def _update_time(session: GameSession) -> None:
    """Repaint just the stats line at the saved cursor position."""
    sys.stdout.write("\033[u\033[K")
    sys.stdout.flush()
    console.print(Align.center(_stats(session)))


def _draw_result(session: GameSession) -> None:
    console.clear()

    size = session.engine.size
    won = session.is_won

    banner = Text()
    if won:
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("CONGRATULATIONS!", style="bold green")
        banner.append("  You solved it!  ", style="green")
        banner.append("★\n", style="bold yellow")
    else:
        banner.append("\n  TIME'S UP!  ", style="bold red")
        banner.append("The clock ran out.\n", style="red")

    group = Group(
        Align.center(render_board(session.board)),
        Align.center(banner),
        Align.center(_stats(session)),
    )
    colour = "green" if won else "red"
    panel = Panel(
        group,
        title=f"[bold {colour}]Sliding Puzzle  {size}×{size}[/bold {colour}]",
        border_style=f"bold {colour}",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _wait_for_key(session: GameSession) -> Action | None:
    """Wait for a key, ticking the clock; ``None`` means the time ran out."""
    while True:
        key = get_key_timeout(_TICK)
        if key is not None:
            return key
        if session.is_timed_out:
            session.pause()
            return None
        _update_time(session)


def _play_round(session: GameSession) -> bool:
    """Play until win, time-out or quit. Returns False when the player quits."""
    session.start()
    paused = False

    while not session.is_won:
        _draw_game(session, paused)
        key = get_key() if paused else _wait_for_key(session)
        if key is None:
            break

        if paused:
            if key in (Action.PAUSE, Action.ENTER):
                session.resume()
                paused = False
            elif key == Action.QUIT:
                return False
            continue

        if key in ACTION_DIRECTIONS:
            session.move(ACTION_DIRECTIONS[key])
            if session.is_timed_out:
                break
        elif key == Action.PAUSE:
            session.pause()
            paused = True
        elif key == Action.RESTART:
            session.start()
        elif key == Action.QUIT:
            return False

    _draw_result(session)
    while True:
        key = get_key()
        if key == Action.RESTART:
            return True
        if key == Action.QUIT:
            return False


# -- public entry point -------------------------------------------------------


def run(settings: GameSettings, seed: int | None = None) -> None:
    """Launch the Rich terminal game with *settings*."""
    engine = GridEngine(settings.grid_size, rng=random.Random(seed))
    session = GameSession(engine, settings)

    while _play_round(session):
        pass

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
