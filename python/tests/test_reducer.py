"""Reducer tests — frame reduction, the rotation gadget and frozen cells."""

from __future__ import annotations

import pytest

from taquin.engine.gamesolver.pathfinder import find_path
from taquin.engine.gamesolver.reducer import COLUMN_GADGET, ROW_GADGET, Reducer
from taquin.errors import NoPathError
from taquin.models.board import Board, Move, Position


# -- helpers ------------------------------------------------------------------


def _replay(board: Board, moves: list[Move]) -> Board:
    board = board.copy()
    for i, mv in enumerate(moves):
        assert board.validate(mv), f"move {i} {mv} illegal at {board.blank_pos}"
        board.apply(mv)
    return board


def _scrambled(size: int, k: int, seed: int) -> Board:
    board = Board.solved(size)
    board.randomize(k, seed)
    return board


class CheckedReducer(Reducer):
    """Reducer that checks the frozen-cell invariants as it goes."""

    def __init__(self, board: Board) -> None:
        super().__init__(board)
        self.routes = 0
        self.lines = 0

    def bring_blank(self, next_cell: Position, avoid: Position) -> None:
        route = find_path(self.grid.blank_pos, next_cell, avoid, self.availables)
        r, c = self.grid.blank_pos
        for dr, dc in route:
            r, c = r + dr, c + dc
            assert self.availables[r][c], f"blank routed through frozen {(r, c)}"
            assert (r, c) != avoid
        self.routes += 1
        super().bring_blank(next_cell, avoid)

    def reduce_col(self, col: int) -> None:
        super().reduce_col(col)
        self._check_frozen()

    def reduce_row(self, row: int) -> None:
        super().reduce_row(row)
        self._check_frozen()

    def _check_frozen(self) -> None:
        n = self.grid.size
        for r in range(n):
            for c in range(n):
                if not self.availables[r][c]:
                    assert self.grid.tiles[r][c] == r * n + c + 1, (r, c)
        self.lines += 1


# -- gadget -------------------------------------------------------------------


def test_gadget_constants() -> None:
    left, down, up, right = (0, -1), (1, 0), (-1, 0), (0, 1)
    assert COLUMN_GADGET == (left, down, down, right, up, left, up, right)
    assert ROW_GADGET == (up, right, right, down, left, up, left, down)


def test_column_gadget_rotates_last_tile_home() -> None:
    board = Board.from_rows([
        [1, 2, 3, 4],
        [5, 0, 7, 8],
        [9, 10, 11, 12],
        [14, 13, 15, 6],
    ])
    for mv in COLUMN_GADGET:
        assert board.validate(mv)
        board.apply(mv)
    assert board.tiles == [
        [1, 2, 3, 4],
        [5, 0, 7, 8],
        [9, 14, 11, 12],
        [13, 10, 15, 6],
    ]


def test_row_gadget_rotates_last_tile_home() -> None:
    # transpose of the column case
    board = Board.from_rows([
        [1, 5, 9, 14],
        [2, 0, 10, 13],
        [3, 7, 11, 15],
        [4, 8, 12, 6],
    ])
    for mv in ROW_GADGET:
        assert board.validate(mv)
        board.apply(mv)
    assert board.tiles == [
        [1, 5, 9, 13],
        [2, 0, 14, 10],
        [3, 7, 11, 15],
        [4, 8, 12, 6],
    ]


# -- single lines -------------------------------------------------------------


def test_reduce_col_forward_only() -> None:
    board = Board.from_rows([
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 10, 11, 12],
        [0, 13, 14, 15],
    ])
    reducer = Reducer(board)
    reducer.reduce_col(0)
    assert reducer.moves == [(0, 1)]
    assert [reducer.availables[r][0] for r in range(4)] == [False] * 4


def test_reduce_col_uses_gadget() -> None:
    board = Board.from_rows([
        [1, 2, 3, 4],
        [5, 6, 7, 8],
        [9, 10, 11, 12],
        [14, 15, 13, 0],
    ])
    reducer = Reducer(board)
    reducer.reduce_col(0)
    assert [row[0] for row in reducer.grid.tiles] == [1, 5, 9, 13]
    assert reducer.moves[-len(COLUMN_GADGET):] == list(COLUMN_GADGET)
    assert _replay(board, reducer.moves) == reducer.grid


def test_reduce_row_completes_first_row() -> None:
    board = _scrambled(5, 300, seed=11)
    reducer = CheckedReducer(board)
    reducer.reduce_col(0)
    reducer.reduce_row(0)
    assert reducer.grid.tiles[0] == [1, 2, 3, 4, 5]
    assert all(not cell for cell in reducer.availables[0])
    assert _replay(board, reducer.moves) == reducer.grid


# -- whole boards -------------------------------------------------------------


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_solved_board_is_idempotent(size: int) -> None:
    assert Reducer(Board.solved(size)).reduce() == []


def test_solved_3x3_scenario() -> None:
    assert Reducer(Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])).reduce() == []


def test_one_swap_3x3_scenario() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    moves = Reducer(board).reduce()
    assert moves == [(0, 1)]
    assert _replay(board, moves).is_goal()


def test_5x5_after_500_random_moves() -> None:
    board = _scrambled(5, 500, seed=2024)
    reducer = CheckedReducer(board)
    moves = reducer.reduce()
    assert _replay(board, moves).is_goal()
    assert reducer.grid.is_goal()
    assert reducer.lines == 4
    assert reducer.routes > 0


@pytest.mark.parametrize(
    "size, seed",
    [(4, 0), (4, 1), (4, 2), (5, 3), (6, 4), (7, 5)],
    ids=lambda v: str(v),
)
def test_random_boards_solved_by_replay(size: int, seed: int) -> None:
    board = _scrambled(size, size * size * 50, seed)
    reducer = CheckedReducer(board)
    moves = reducer.reduce()
    assert _replay(board, moves).is_goal()


def test_reducer_does_not_touch_input() -> None:
    board = _scrambled(4, 200, seed=9)
    before = [row[:] for row in board.tiles]
    Reducer(board).reduce()
    assert board.tiles == before


def test_unsolvable_residual_returns_partial_moves() -> None:
    board = Board.from_rows([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
    assert Reducer(board).reduce() == []


def test_mask_only_ever_closes() -> None:
    board = _scrambled(5, 400, seed=8)
    reducer = Reducer(board)
    snapshots: list[list[list[bool]]] = []
    for i in range(2):
        reducer.reduce_col(i)
        snapshots.append([row[:] for row in reducer.availables])
        reducer.reduce_row(i)
        snapshots.append([row[:] for row in reducer.availables])
    for before, after in zip(snapshots, snapshots[1:]):
        for r in range(5):
            for c in range(5):
                assert before[r][c] or not after[r][c]


def test_corrupted_mask_raises_no_path() -> None:
    reducer = Reducer(Board.solved(4))
    reducer.availables[2][3] = False
    reducer.availables[3][2] = False
    with pytest.raises(NoPathError) as exc_info:
        reducer.bring_blank((0, 0), (1, 1))
    assert exc_info.value.start == (3, 3)
    assert exc_info.value.availables[2][3] is False
