"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections import deque

from taquin.models.board import Board, Move


class GameState:
    """Holds the current board, move counter, elapsed time and queued moves.

    Queued moves are a computed solution waiting to be shown; a frontend
    takes one per tick rather than applying the whole list at once.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.pending: deque[Move] = deque()
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def enqueue(self, moves: list[Move]) -> None:
        self.pending.extend(moves)

    def pop_pending(self) -> Move | None:
        return self.pending.popleft() if self.pending else None

    def clear_pending(self) -> None:
        self.pending.clear()

    @property
    def has_pending(self) -> bool:
        return bool(self.pending)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
