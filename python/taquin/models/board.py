"""Board model for the sliding puzzle solver."""

from __future__ import annotations

import random
from bisect import bisect_left, insort
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from taquin.errors import InvalidBoardError, TileNotFoundError
from taquin.models.heuristics import DEFAULT_HEURISTIC, get_heuristic

# A move is the (row, col) delta travelled by the *blank*.
Move = tuple[int, int]
Position = tuple[int, int]

UP: Move = (-1, 0)
DOWN: Move = (1, 0)
LEFT: Move = (0, -1)
RIGHT: Move = (0, 1)
MOVES: tuple[Move, ...] = (UP, DOWN, LEFT, RIGHT)


class Direction(StrEnum):
    """Direction the *tile* slides (the blank travels the opposite way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_move(cls, move: Move) -> Direction:
        return _MOVE_TO_DIRECTION[move]

    def to_move(self) -> Move:
        return _DIRECTION_TO_MOVE[self]


_DIRECTION_TO_MOVE: dict[Direction, Move] = {
    Direction.UP: DOWN,
    Direction.DOWN: UP,
    Direction.LEFT: RIGHT,
    Direction.RIGHT: LEFT,
}
_MOVE_TO_DIRECTION: dict[Move, Direction] = {
    m: d for d, m in _DIRECTION_TO_MOVE.items()
}


def _validate_rows(rows: Sequence[Sequence[int]]) -> tuple[list[list[int]], Position]:
    """Copy *rows* into a tile grid, rejecting anything that is not a board."""
    size = len(rows)
    if size == 0:
        raise InvalidBoardError("A board needs at least one row.")

    tiles: list[list[int]] = []
    seen: set[int] = set()
    blank_pos: Position | None = None
    for r, row in enumerate(rows):
        if len(row) != size:
            raise InvalidBoardError(
                f"Row {r} has {len(row)} cells, expected {size} "
                f"for a {size}×{size} board."
            )
        out: list[int] = []
        for c, val in enumerate(row):
            if isinstance(val, bool) or not isinstance(val, int):
                raise InvalidBoardError(
                    f"Cell ({r}, {c}) holds {val!r}, expected an integer."
                )
            if not 0 <= val < size * size:
                raise InvalidBoardError(
                    f"Cell ({r}, {c}) holds {val}, expected 0..{size * size - 1}."
                )
            if val in seen:
                raise InvalidBoardError(f"Tile {val} appears more than once.")
            seen.add(val)
            if val == 0:
                blank_pos = (r, c)
            out.append(val)
        tiles.append(out)

    if blank_pos is None:
        raise InvalidBoardError("Please set the empty cell to zero.")
    return tiles, blank_pos


def parse_grid(text: str, size: int) -> Board:
    """Build a board from ``"2.3.4:7.1.6:0.8.5"`` style text.

    Rows are separated by ``:`` and cells by ``.``.
    """
    rows: list[list[int]] = []
    for r, line in enumerate(text.strip().split(":")):
        row: list[int] = []
        for c, cell in enumerate(line.split(".")):
            try:
                row.append(int(cell))
            except ValueError:
                raise InvalidBoardError(
                    f"error at position : {r}, {c} cannot parse integer"
                ) from None
        rows.append(row)

    if len(rows) != size:
        raise InvalidBoardError("Wrong number of lines")
    if any(len(row) != size for row in rows):
        raise InvalidBoardError("Some lines does not have the specified length")
    return Board.from_rows(rows)


def format_grid(board: Board) -> str:
    """Inverse of :func:`parse_grid`."""
    return ":".join(".".join(str(v) for v in row) for row in board.tiles)


@dataclass(eq=False)
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    Boards compare and hash by their tiles, so a board that has been used
    as a dict or set key must not be mutated afterwards; search code works
    on ``copy()``.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: Position
    heuristic_name: str = DEFAULT_HEURISTIC

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {size}.")
        flat = list(range(1, size * size)) + [0]
        tiles = [flat[r * size : (r + 1) * size] for r in range(size)]
        return cls(size=size, tiles=tiles, blank_pos=(size - 1, size - 1))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a square list of rows, validating it."""
        tiles, blank_pos = _validate_rows(rows)
        return cls(size=len(tiles), tiles=tiles, blank_pos=blank_pos)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 1 or len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        )

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
            heuristic_name=self.heuristic_name,
        )

    def with_heuristic(self, name: str) -> Board:
        get_heuristic(name)
        board = self.copy()
        board.heuristic_name = name
        return board

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash((self.size, tuple(map(tuple, self.tiles))))

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def at(self, pos: Position) -> int | None:
        """Label at *pos*, or ``None`` for the blank."""
        val = self.tiles[pos[0]][pos[1]]
        return val or None

    def search(self, value: int) -> Position:
        """Return the coordinates of *value*."""
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == value:
                    return (r, c)
        raise TileNotFoundError(value, self.size)

    def is_goal(self, from_start: bool = True) -> bool:
        """Check if all tiles are in their goal positions.

        Scans forward from the top-left cell, or backward from the
        bottom-right one when *from_start* is false.  Both scans agree.
        """
        n = self.size
        last = n * n - 1
        cells = range(n * n) if from_start else range(last, -1, -1)
        for idx in cells:
            r, c = divmod(idx, n)
            expected = 0 if idx == last else idx + 1
            if self.tiles[r][c] != expected:
                return False
        return True

    def is_solved(self) -> bool:
        return self.is_goal()

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def is_solvable(self) -> bool:
        """Return True if the board can reach the goal state."""
        n = self.size
        inv = 0
        seen: list[int] = []
        for v in (v for row in self.tiles for v in row if v != 0):
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        if n % 2 == 1:
            return inv % 2 == 0
        blank_from_bottom = n - 1 - self.blank_pos[0]
        return (inv + blank_from_bottom) % 2 == 0

    # -- moves ----------------------------------------------------------------

    def available_moves(self) -> list[Move]:
        br, bc = self.blank_pos
        moves: list[Move] = []
        if br > 0:
            moves.append(UP)
        if br < self.size - 1:
            moves.append(DOWN)
        if bc > 0:
            moves.append(LEFT)
        if bc < self.size - 1:
            moves.append(RIGHT)
        return moves

    def validate(self, move: Move) -> bool:
        return move in self.available_moves()

    def apply(self, move: Move) -> None:
        """Slide the blank by *move*.  The move must have been validated."""
        br, bc = self.blank_pos
        nr, nc = br + move[0], bc + move[1]
        self.tiles[br][bc] = self.tiles[nr][nc]
        self.tiles[nr][nc] = 0
        self.blank_pos = (nr, nc)

    def randomize(self, k: int, seed: int | None = None) -> list[Move]:
        """Play *k* random legal moves in place and return them."""
        rng = random.Random(seed)
        played: list[Move] = []
        for _ in range(k):
            move = rng.choice(self.available_moves())
            self.apply(move)
            played.append(move)
        return played

    # -- search node ----------------------------------------------------------

    def heuristic(self) -> int:
        return get_heuristic(self.heuristic_name)(self)

    def edge_cost(self, other: Board) -> int:
        return 1

    # -- sub-boards -----------------------------------------------------------

    def bottom_right_subboard(self, k: int = 3) -> Board:
        """Return the trailing k×k block as a standalone k×k puzzle.

        Tiles are renumbered to the block's own goal order, so the block
        is solved exactly when the full board is.  Every tile in the block
        must have its goal cell inside the block.
        """
        n = self.size
        if not 1 <= k <= n:
            raise InvalidBoardError(f"Cannot take a {k}×{k} block of a {n}×{n} board.")
        base = n - k
        tiles: list[list[int]] = []
        for r in range(base, n):
            row: list[int] = []
            for c in range(base, n):
                val = self.tiles[r][c]
                if val == 0:
                    row.append(0)
                    continue
                gr, gc = divmod(val - 1, n)
                if gr < base or gc < base:
                    raise InvalidBoardError(
                        f"Tile {val} at ({r}, {c}) belongs outside the "
                        f"bottom-right {k}×{k} block."
                    )
                row.append((gr - base) * k + (gc - base) + 1)
            tiles.append(row)
        br, bc = self.blank_pos
        return Board(
            size=k,
            tiles=tiles,
            blank_pos=(br - base, bc - base),
            heuristic_name=self.heuristic_name,
        )
