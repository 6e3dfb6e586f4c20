"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging

from taquin.engine.gamegenerator import GameGenerator
from taquin.engine.gamesearch import SearchMode
from taquin.engine.gamesolver import Solver, Strategy
from taquin.engine.gamestate import GameState
from taquin.models.board import Board, Direction, Move

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, seed: int | None = None) -> None:
        self.size = size
        board = GameGenerator.generate(size, seed=seed)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board (e.g. parsed from the CLI)."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board)
        return obj

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        return self.play(direction.to_move())

    def move_tile(self, row: int, col: int) -> bool:
        """Move a tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        br, bc = self.state.board.blank_pos
        return self.play((row - br, col - bc))

    def play(self, mv: Move) -> bool:
        """Slide the blank by *mv* if that is legal."""
        board = self.state.board
        if not board.validate(mv):
            return False
        board.apply(mv)
        self.state.increment_moves()
        return True

    # -- solving --------------------------------------------------------------

    def queue_solution(
        self,
        strategy: Strategy = Strategy.REDUCE,
        mode: SearchMode = SearchMode.MINIMIZE,
    ) -> int:
        """Compute a solution for the current board and queue it.

        Returns the number of queued moves (0 when solved or unsolvable).
        """
        self.state.clear_pending()
        board = self.state.board
        if board.is_solved() or not Solver.is_solvable(board):
            return 0
        moves = Solver.solve_moves(board, strategy, mode) or []
        self.state.enqueue(moves)
        logger.debug("queued %d moves", len(moves))
        return len(moves)

    def step(self) -> Move | None:
        """Apply the next queued move, returning it, or ``None`` when idle."""
        mv = self.state.pop_pending()
        if mv is None:
            return None
        if not self.play(mv):
            self.state.clear_pending()
            raise ValueError(
                f"queued move {mv} is illegal with the blank at "
                f"{self.state.board.blank_pos}"
            )
        return mv

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
