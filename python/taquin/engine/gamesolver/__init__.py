from taquin.engine.gamesolver.pathfinder import find_path
from taquin.engine.gamesolver.reducer import Reducer
from taquin.engine.gamesolver.solver import Solver, Strategy

__all__ = ["Reducer", "Solver", "Strategy", "find_path"]
