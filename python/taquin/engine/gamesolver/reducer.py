"""Frame reduction: shrink a large board to its bottom-right 3×3 block.

Columns and rows are completed from the outside in (column 0, row 0,
column 1, row 1, ...).  Each finished cell is frozen in ``availables`` so
later routing never crosses it.  The last cell of a line cannot be pushed
home directly without lifting its neighbour, so it is staged beside the
line and rotated in by a fixed eight-move sequence.  What is left is a 3×3
puzzle small enough for exhaustive search.
"""

from __future__ import annotations

import logging

from taquin.engine.gamesearch.search import bfs
from taquin.engine.gamesolver.pathfinder import find_path
from taquin.errors import SolverInvariantError
from taquin.models.board import Board, Move, Position

logger = logging.getLogger(__name__)

RESIDUAL_SIZE = 3

# left, down, down, right, up, left, up, right
COLUMN_GADGET: tuple[Move, ...] = (
    (0, -1), (1, 0), (1, 0), (0, 1), (-1, 0), (0, -1), (-1, 0), (0, 1),
)
ROW_GADGET: tuple[Move, ...] = tuple((dc, dr) for dr, dc in COLUMN_GADGET)


class Reducer:
    """Solves one board by frame reduction.  Not reusable across boards."""

    def __init__(self, board: Board) -> None:
        self.grid = board.copy()
        size = board.size
        self.availables: list[list[bool]] = [[True] * size for _ in range(size)]
        self.moves: list[Move] = []

    # -- driver ---------------------------------------------------------------

    def reduce(self) -> list[Move]:
        """Return the moves that solve the board, in order."""
        size = self.grid.size
        for i in range(size - RESIDUAL_SIZE):
            self.reduce_col(i)
            logger.debug("finished col %d (%d moves)", i, len(self.moves))
            self.reduce_row(i)
            logger.debug("finished row %d (%d moves)", i, len(self.moves))

        residual = (
            self.grid.bottom_right_subboard(RESIDUAL_SIZE)
            if size > RESIDUAL_SIZE
            else self.grid.copy()
        )
        tail = bfs(residual)
        if tail is None:
            logger.warning(
                "residual %d×%d block has no solution; returning %d moves",
                residual.size, residual.size, len(self.moves),
            )
            return list(self.moves)

        for mv in tail:
            self._play(mv)
        logger.debug("residual solved in %d moves", len(tail))
        return list(self.moves)

    # -- lines ----------------------------------------------------------------

    def reduce_col(self, col: int) -> None:
        """Complete column *col*, top to bottom."""
        size = self.grid.size
        for r in range(col, size - 1):
            self.bring_cell((r, col), r * size + col + 1)
            self._freeze((r, col))

        last = (size - 1) * size + col + 1
        home = (size - 1, col)
        staging = (size - 1, col + 1)
        self._place_last(last, home, staging, (size - 3, col + 1), COLUMN_GADGET)
        self._freeze(home)

    def reduce_row(self, row: int) -> None:
        """Complete row *row*, left to right; its first cell is already fixed."""
        size = self.grid.size
        for c in range(row + 1, size - 1):
            self.bring_cell((row, c), row * size + c + 1)
            self._freeze((row, c))

        last = row * size + size
        home = (row, size - 1)
        staging = (row + 1, size - 1)
        self._place_last(last, home, staging, (row + 1, size - 3), ROW_GADGET)
        self._freeze(home)

    def _place_last(
        self,
        last: int,
        home: Position,
        staging: Position,
        blank_stage: Position,
        gadget: tuple[Move, ...],
    ) -> None:
        if self.grid.search(last) == staging and self.grid.blank_pos == home:
            self.forward(last)
        elif self.grid.search(last) != home:
            self.bring_cell(staging, last)
            self.bring_blank(blank_stage, staging)
            # Lifts the two previous cells of the line and puts them back.
            for mv in gadget:
                self._play(mv)

        if self.grid.search(last) != home:
            raise SolverInvariantError(
                f"tile {last} ended at {self.grid.search(last)}, expected {home}"
            )

    # -- tile and blank movement ----------------------------------------------

    def bring_cell(self, target_pos: Position, value: int) -> None:
        """Bring the tile *value* to *target_pos* one swap at a time."""
        start = self.grid.search(value)
        path = find_path(start, target_pos, start, self.availables)
        for dr, dc in path:
            tile = self.grid.search(value)
            next_cell = (tile[0] + dr, tile[1] + dc)
            self.bring_blank(next_cell, tile)
            self.forward(value)

    def bring_blank(self, next_cell: Position, avoid: Position) -> None:
        """Route the blank to *next_cell* without touching *avoid*."""
        for mv in find_path(self.grid.blank_pos, next_cell, avoid, self.availables):
            self._play(mv)

    def forward(self, target_val: int) -> None:
        """Swap the tile *target_val* with the adjacent blank."""
        br, bc = self.grid.blank_pos
        tr, tc = self.grid.search(target_val)
        mv = (tr - br, tc - bc)
        if abs(mv[0]) + abs(mv[1]) != 1:
            raise SolverInvariantError(
                f"tile {target_val} at {(tr, tc)} is not next to the blank at {(br, bc)}"
            )
        self._play(mv)

    # -- bookkeeping ----------------------------------------------------------

    def _play(self, mv: Move) -> None:
        self.moves.append(mv)
        self.grid.apply(mv)

    def _freeze(self, pos: Position) -> None:
        self.availables[pos[0]][pos[1]] = False


def reduce(board: Board) -> list[Move]:
    return Reducer(board).reduce()
