"""Sliding puzzle solver."""

from __future__ import annotations

import logging
from enum import StrEnum

from taquin.engine.gamesearch.search import SearchMode, astar, bfs, dfs
from taquin.engine.gamesolver.reducer import reduce
from taquin.models.board import Board, Direction, Move

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    REDUCE = "reduce"
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve_moves(
        board: Board,
        strategy: Strategy = Strategy.REDUCE,
        mode: SearchMode = SearchMode.MINIMIZE,
    ) -> list[Move] | None:
        """Return the blank moves that solve *board*, or ``None`` if none were found.

        *board* is never modified.
        """
        strategy = Strategy(strategy)
        logger.debug("solving %d×%d board with %s", board.size, board.size, strategy)
        if strategy is Strategy.REDUCE:
            return reduce(board)
        if strategy is Strategy.BFS:
            return bfs(board.copy())
        if strategy is Strategy.DFS:
            return dfs(board.copy())
        return astar(board.copy(), mode)

    @staticmethod
    def solve(
        board: Board,
        strategy: Strategy = Strategy.REDUCE,
        mode: SearchMode = SearchMode.MINIMIZE,
    ) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if unsolvable."""
        if board.is_solved():
            return []

        if not Solver.is_solvable(board):
            return []

        moves = Solver.solve_moves(board, strategy, mode)
        if moves is None:
            return []
        return [Direction.from_move(mv) for mv in moves]

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        strategy = Strategy.ASTAR if board.size <= 3 else Strategy.REDUCE
        moves = Solver.solve(board, strategy)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return board.is_solvable()
