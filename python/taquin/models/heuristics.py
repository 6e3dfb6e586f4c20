"""Heuristic estimates of the distance from a board to the goal state.

Each heuristic is a plain function ``Board -> int`` registered by name so a
board can carry the name and still hash and copy cheaply.

* ``misplaced`` — non-blank tiles outside their goal cell (admissible).
* ``manhattan`` — sum of tile Manhattan distances (admissible).
* ``offset`` — ``10 - tiles already placed``.  This is the legacy estimate
  and over-counts: it is 2 on a solved 3×3 board, so A* results obtained
  with it carry no optimality guarantee.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from taquin.models.board import Board

Heuristic = Callable[["Board"], int]

OFFSET_BASE = 10


def _placed(board: Board) -> int:
    count = 0
    for r in range(board.size):
        for c in range(board.size):
            if board.tiles[r][c] != 0 and board.is_tile_correct(r, c):
                count += 1
    return count


def misplaced(board: Board) -> int:
    return (board.size * board.size - 1) - _placed(board)


def manhattan(board: Board) -> int:
    n = board.size
    dist = 0
    for r, row in enumerate(board.tiles):
        for c, val in enumerate(row):
            if val == 0:
                continue
            gr, gc = divmod(val - 1, n)
            dist += abs(r - gr) + abs(c - gc)
    return dist


def offset(board: Board) -> int:
    return OFFSET_BASE - _placed(board)


HEURISTICS: dict[str, Heuristic] = {
    "misplaced": misplaced,
    "manhattan": manhattan,
    "offset": offset,
}

DEFAULT_HEURISTIC = "misplaced"


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"Unknown heuristic {name!r} (expected one of: {known})") from None
