#!/usr/bin/env python3
"""Sliding puzzle solver.

Usage::

    python main.py solve 2.3.4:7.1.6:0.8.5          # 3×3, frame reduction
    python main.py solve -s 4 --strategy astar GRID   # A* on a 4×4 grid
    python main.py solve --play GRID                  # watch it in the terminal
    python main.py shuffle -s 5 -m 500 --seed 7       # print a random grid
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taquin.engine.gamegenerator import GameGenerator  # noqa: E402
from taquin.engine.gamesearch import SearchMode  # noqa: E402
from taquin.engine.gamesolver import Solver, Strategy  # noqa: E402
from taquin.models.board import Board, Move, format_grid, parse_grid  # noqa: E402
from taquin.models.heuristics import get_heuristic  # noqa: E402
from taquin.settings import load_settings  # noqa: E402

err_console = Console(stderr=True)

# Blank direction for each move, as printed in solutions.
_MOVE_NAMES: dict[Move, str] = {
    (1, 0): "DOWN",
    (-1, 0): "UP",
    (0, 1): "RIGHT",
    (0, -1): "LEFT",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_hist(hist: list[Move]) -> None:
    print(f"Solution in {len(hist)} moves")
    for nb, mv in enumerate(hist, 1):
        print(f"{nb} : {_MOVE_NAMES[mv]}")


def _load_board(grid: str, size: int, heuristic: str) -> Board:
    try:
        get_heuristic(heuristic)
        return parse_grid(grid, size).with_heuristic(heuristic)
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from None


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Slowly solves the given fifteen puzzle game.")


@app.command()
def solve(
    grid: str = typer.Argument(
        ..., help="Rows separated by ':' and cells by '.', e.g. 2.3.4:7.1.6:0.8.5",
    ),
    size: int = typer.Option(3, "-s", "--size", min=1, help="The size of a column."),
    strategy: Optional[Strategy] = typer.Option(
        None, "--strategy", help="Solving strategy (default from settings).",
    ),
    mode: Optional[SearchMode] = typer.Option(
        None, "--mode", help="A* open-set selection rule.",
    ),
    heuristic: Optional[str] = typer.Option(
        None, "--heuristic", help="misplaced, manhattan or offset.",
    ),
    play: bool = typer.Option(False, "--play", help="Replay the solution in the terminal."),
    delay: Optional[float] = typer.Option(None, "--delay", min=0.0, help="Seconds per move."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log solver progress."),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON settings file."),
) -> None:
    """Solve GRID and print the moves of the blank."""
    settings = load_settings(config)
    _configure_logging("DEBUG" if verbose else settings["log_level"])

    board = _load_board(grid, size, heuristic or settings["heuristic"])
    strategy = strategy or Strategy(settings["strategy"])
    mode = mode or SearchMode(settings["search_mode"])

    if not Solver.is_solvable(board):
        print("Sorry\nNo solution could be found")
        return

    moves = Solver.solve_moves(board, strategy, mode)
    if moves is None:
        print("Sorry\nNo solution could be found")
        return
    _print_hist(moves)

    if play:
        from frontend.cli.rich.app import run

        run(board, moves, settings["playback_delay"] if delay is None else delay)


@app.command()
def shuffle(
    size: int = typer.Option(4, "-s", "--size", min=1, help="The size of a column."),
    moves: Optional[int] = typer.Option(None, "-m", "--moves", min=0, help="Random moves to play."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible boards."),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON settings file."),
) -> None:
    """Print a random solvable grid."""
    settings = load_settings(config)
    _configure_logging(settings["log_level"])
    board = GameGenerator.generate(
        size, settings["shuffle_moves"] if moves is None else moves, seed
    )
    print(format_grid(board))


if __name__ == "__main__":
    app()
