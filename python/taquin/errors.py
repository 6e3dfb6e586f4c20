"""Exception types raised by the taquin engine.

``InvalidBoardError`` is the only one a caller is expected to recover
from.  Everything deriving from ``SolverInvariantError`` means the engine
reached a state its own bookkeeping says is impossible.
"""

from __future__ import annotations


class InvalidBoardError(ValueError):
    """A grid handed to the engine is not a valid sliding-puzzle board."""


class SolverInvariantError(RuntimeError):
    """An internal invariant of the search or reduction was violated."""


class TileNotFoundError(SolverInvariantError):
    def __init__(self, value: int, size: int) -> None:
        super().__init__(f"tile {value} not found on {size}×{size} board")
        self.value = value
        self.size = size


class NoPathError(SolverInvariantError):
    """The grid path-finder exhausted every available cell."""

    def __init__(
        self,
        start: tuple[int, int],
        target: tuple[int, int],
        avoid: tuple[int, int],
        availables: list[list[bool]],
    ) -> None:
        frozen = sum(not cell for row in availables for cell in row)
        super().__init__(
            f"no path from {start} to {target} avoiding {avoid} "
            f"({frozen} frozen cells)"
        )
        self.start = start
        self.target = target
        self.avoid = avoid
        self.availables = [row[:] for row in availables]


class SearchInvariantError(SolverInvariantError):
    """The predecessor chain of a search does not lead back to its source."""
