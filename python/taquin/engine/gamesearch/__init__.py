from taquin.engine.gamesearch.search import (
    AStar,
    SearchMode,
    SearchNode,
    astar,
    bfs,
    dfs,
    exhaustive_search,
    resolve_history,
)

__all__ = [
    "AStar",
    "SearchMode",
    "SearchNode",
    "astar",
    "bfs",
    "dfs",
    "exhaustive_search",
    "resolve_history",
]
