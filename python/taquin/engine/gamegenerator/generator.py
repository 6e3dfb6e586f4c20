"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

from taquin.models.board import Board


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def default_moves(size: int) -> int:
        return size * size * 100

    @staticmethod
    def generate(size: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size.

        Only legal moves are played from the solved board, so the result
        is always reachable.  A walk that happens to end solved is
        replayed with the next seed.
        """
        if moves is None:
            moves = GameGenerator.default_moves(size)
        board = GameGenerator.solved(size)
        board.randomize(moves, seed)

        # Ensure the board is not already solved
        if board.is_solved() and size > 1 and moves > 0:
            next_seed = None if seed is None else seed + 1
            return GameGenerator.generate(size, moves, next_seed)

        return board
