"""Breadth-first routing over raw grid coordinates.

Used by the reducer to move a single tile, or the blank, across the part
of the board that is still free.  Searching coordinates instead of whole
boards keeps each query at most N² states.
"""

from __future__ import annotations

from collections import deque

from taquin.engine.gamesearch.search import resolve_history
from taquin.errors import NoPathError
from taquin.models.board import DOWN, LEFT, RIGHT, UP, Move, Position

# Neighbour order decides which of several shortest routes is returned.
ROUTE_ORDER: tuple[Move, ...] = (LEFT, RIGHT, DOWN, UP)


def is_traversable(cell: Position, avoid: Position, availables: list[list[bool]]) -> bool:
    r, c = cell
    size = len(availables)
    return 0 <= r < size and 0 <= c < size and availables[r][c] and cell != avoid


def legal_moves(pos: Position, avoid: Position, availables: list[list[bool]]) -> list[Move]:
    return [
        (dr, dc)
        for dr, dc in ROUTE_ORDER
        if is_traversable((pos[0] + dr, pos[1] + dc), avoid, availables)
    ]


def find_path(
    start: Position,
    target: Position,
    avoid: Position,
    availables: list[list[bool]],
) -> list[Move]:
    """Return the moves leading from *start* to *target*.

    Only in-bounds cells marked available and different from *avoid* are
    entered; *start* itself is not checked.  Raises :class:`NoPathError`
    when *target* cannot be reached.
    """
    history: dict[Position, tuple[Position, Move]] = {}
    visited: set[Position] = {start}
    frontier: deque[Position] = deque([start])

    while frontier:
        pos = frontier.popleft()
        if pos == target:
            return resolve_history(start, pos, history)
        for dr, dc in legal_moves(pos, avoid, availables):
            nxt = (pos[0] + dr, pos[1] + dc)
            if nxt in visited:
                continue
            visited.add(nxt)
            history[nxt] = (pos, (dr, dc))
            frontier.append(nxt)

    raise NoPathError(start, target, avoid, availables)
