"""Rich terminal playback — shows a computed solution one move per tick.

The solver hands over the whole move list at once; this view queues it on
the game state and applies a single move per frame so the board can be
watched being solved.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taquin.engine.gameplay import GamePlay
from taquin.models.board import Board, Direction, Move

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
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

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw_frame(game: GamePlay, done: int, total: int, last: Move | None) -> None:
    console.clear()

    size = game.size
    progress = Text()
    progress.append(f"  Solving… move {done}/{total} ", style="bold cyan")
    if last is not None:
        progress.append(f"({Direction.from_move(last).value})", style="dim")

    panel = Panel(
        Align.center(_render_board(game.state.board)),
        title=f"[bold cyan]Auto-Solve  {size}×{size}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(progress))
    sys.stdout.flush()


# -- public entry point -------------------------------------------------------


def run(board: Board, moves: list[Move], delay: float = 0.05) -> GamePlay:
    """Replay *moves* on a copy of *board*, one per tick, and return the game."""
    game = GamePlay.from_board(board.copy())
    game.state.enqueue(moves)
    total = len(moves)

    _draw_frame(game, 0, total, None)
    while game.state.has_pending:
        time.sleep(delay)
        last = game.step()
        _draw_frame(game, game.state.moves, total, last)

    game.state.pause()
    if game.is_won:
        console.print(
            Align.center(Text(f"\n  Solved in {total} moves!\n", style="bold green"))
        )
    else:
        console.print(
            Align.center(Text("\n  Board is not solved.\n", style="bold red"))
        )
    return game
