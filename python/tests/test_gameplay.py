"""Game session tests — manual moves, queued solutions and the timer."""

from __future__ import annotations

import pytest

from taquin.engine.gamegenerator import GameGenerator
from taquin.engine.gameplay.game import GamePlay
from taquin.engine.gamestate import GameState
from taquin.engine.gamesolver import Strategy
from taquin.models.board import Board, Direction

ONE_MOVE = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


# -- generator ----------------------------------------------------------------


def test_generated_boards_are_solvable_and_scrambled() -> None:
    for seed in range(10):
        board = GameGenerator.generate(4, 50, seed)
        assert board.is_solvable()
        assert not board.is_solved()


def test_generator_is_reproducible() -> None:
    assert GameGenerator.generate(5, 300, seed=3) == GameGenerator.generate(5, 300, seed=3)


def test_generator_zero_moves_returns_goal() -> None:
    assert GameGenerator.generate(3, 0).is_solved()


def test_seeded_sessions_match() -> None:
    assert GamePlay(4, seed=12).state.board == GamePlay(4, seed=12).state.board


# -- manual moves -------------------------------------------------------------


def test_move_slides_tile_into_blank() -> None:
    game = GamePlay.from_board(Board.from_rows(ONE_MOVE))
    assert not game.move(Direction.UP)
    assert game.move(Direction.LEFT)
    assert game.is_won
    assert game.state.moves == 1


def test_invalid_move_is_not_counted() -> None:
    game = GamePlay.from_board(Board.solved(3))
    assert not game.move(Direction.UP)
    assert game.state.moves == 0


def test_move_tile_requires_adjacency() -> None:
    game = GamePlay.from_board(Board.from_rows(ONE_MOVE))
    assert not game.move_tile(0, 0)
    assert not game.move_tile(2, 1)
    assert game.move_tile(2, 2)
    assert game.is_won


def test_play_uses_blank_motion() -> None:
    game = GamePlay.from_board(Board.from_rows(ONE_MOVE))
    assert not game.play((1, 0))
    assert game.play((0, 1))
    assert game.state.board.blank_pos == (2, 2)


# -- queued solutions ---------------------------------------------------------


@pytest.mark.parametrize("strategy", [Strategy.REDUCE, Strategy.ASTAR])
def test_queue_solution_then_step_until_won(strategy: Strategy) -> None:
    game = GamePlay.from_board(GameGenerator.generate(3, 30, seed=6))
    queued = game.queue_solution(strategy)
    assert queued > 0

    steps = 0
    while game.state.has_pending:
        assert game.step() is not None
        steps += 1

    assert steps == queued
    assert game.state.moves == queued
    assert game.is_won
    assert game.step() is None


def test_queue_solution_on_solved_board_is_empty() -> None:
    game = GamePlay.from_board(Board.solved(4))
    assert game.queue_solution() == 0
    assert game.step() is None


def test_queue_solution_on_unsolvable_board_is_empty() -> None:
    game = GamePlay.from_board(Board.from_rows([[2, 1, 3], [4, 5, 6], [7, 8, 0]]))
    assert game.queue_solution() == 0
    assert not game.state.has_pending


def test_illegal_queued_move_raises_and_clears() -> None:
    game = GamePlay.from_board(Board.solved(3))
    game.state.enqueue([(1, 0), (0, -1)])
    with pytest.raises(ValueError, match="illegal"):
        game.step()
    assert not game.state.has_pending


# -- state --------------------------------------------------------------------


def test_timer_pause_freezes_elapsed_time() -> None:
    state = GameState(Board.solved(3))
    state.pause()
    frozen = state.elapsed_time
    assert state.elapsed_time == frozen
    state.resume()
    assert state.elapsed_time >= frozen
