from taquin.models.board import Board, Direction, Move, parse_grid
from taquin.models.heuristics import HEURISTICS, get_heuristic

__all__ = ["Board", "Direction", "HEURISTICS", "Move", "get_heuristic", "parse_grid"]
