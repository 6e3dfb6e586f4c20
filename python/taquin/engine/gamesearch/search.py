"""Generic state-space search: exhaustive BFS/DFS and A*.

Every function here works on any state type that satisfies
:class:`SearchNode`: the puzzle ``Board`` is one, but the engine never
imports it.  States are used as dict/set keys, so each successor is a
fresh ``copy()`` and nothing stored in the frontier or history is ever
mutated.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque
from collections.abc import Hashable, Sequence
from enum import StrEnum
from typing import Generic, Protocol, TypeVar

from taquin.errors import SearchInvariantError

logger = logging.getLogger(__name__)

M = TypeVar("M")
S = TypeVar("S", bound="SearchNode")


class SearchNode(Protocol[M]):
    """Capabilities a state needs to be searchable."""

    def heuristic(self) -> int: ...

    def available_moves(self) -> Sequence[M]: ...

    def apply(self, move: M) -> None: ...

    def is_goal(self) -> bool: ...

    def edge_cost(self, other: SearchNode[M]) -> int: ...

    def copy(self) -> SearchNode[M]: ...

    def __hash__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...


K = TypeVar("K", bound=Hashable)


def resolve_history(origin: K, goal: K, history: dict[K, tuple[K, M]]) -> list[M]:
    """Walk *history* back from *goal* to *origin* and return the moves in order.

    *history* maps a state to ``(predecessor, move that produced it)``.
    """
    path: list[M] = []
    node = goal
    while node != origin:
        try:
            node, move = history[node]
        except KeyError:
            raise SearchInvariantError(
                f"predecessor chain broken after {len(path)} steps"
            ) from None
        path.append(move)
        if len(path) > len(history):
            raise SearchInvariantError("predecessor chain contains a cycle")
    path.reverse()
    return path


# -- exhaustive search --------------------------------------------------------


def exhaustive_search(source: S, breadth_first: bool = True) -> list[M] | None:
    """Search every state reachable from *source* until a goal is popped.

    Pops from the front of the frontier (breadth-first) or from the back
    (depth-first).  Returns the move list, or ``None`` once the frontier is
    empty.
    """
    history: dict[S, tuple[S, M]] = {}
    discovered: set[S] = {source}
    frontier: deque[S] = deque([source])
    expanded = 0

    while frontier:
        node = frontier.popleft() if breadth_first else frontier.pop()
        if node.is_goal():
            logger.debug(
                "%s reached goal after expanding %d states",
                "bfs" if breadth_first else "dfs", expanded,
            )
            return resolve_history(source, node, history)

        expanded += 1
        for move in node.available_moves():
            succ = node.copy()
            succ.apply(move)
            if succ in discovered:
                continue
            discovered.add(succ)
            history[succ] = (node, move)
            frontier.append(succ)

    logger.debug("exhaustive search found no goal (%d states)", expanded)
    return None


def bfs(source: S) -> list[M] | None:
    return exhaustive_search(source, breadth_first=True)


def dfs(source: S) -> list[M] | None:
    return exhaustive_search(source, breadth_first=False)


# -- A* -----------------------------------------------------------------------


class SearchMode(StrEnum):
    """How A* picks the next open state."""

    MINIMIZE = "minimize"  # lowest f = g + h, conventional A*
    MAXIMIZE = "maximize"  # highest f, the legacy selection rule


class _OpenSet(Generic[S]):
    """Binary-heap open set with lazy invalidation.

    A state may sit in the heap several times; only the entry matching its
    current ``f`` counts.  Ties go to the lower ``g``, then to the earlier
    insertion.
    """

    def __init__(self, mode: SearchMode) -> None:
        self._sign = -1 if mode is SearchMode.MAXIMIZE else 1
        self._heap: list[tuple[int, int, int, S]] = []
        self._f: dict[S, int] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._f)

    def __contains__(self, state: object) -> bool:
        return state in self._f

    def push(self, state: S, f: int, g: int) -> None:
        self._f[state] = f
        heapq.heappush(self._heap, (self._sign * f, g, next(self._counter), state))

    def pop(self) -> S:
        while self._heap:
            key, _g, _n, state = heapq.heappop(self._heap)
            if self._f.get(state) == self._sign * key:
                del self._f[state]
                return state
        raise KeyError("pop from an empty open set")


class AStar(Generic[S, M]):
    """Best-first search from *source*.

    ``mode`` selects whether the open state with the lowest or the highest
    ``f`` is expanded next.  Only MINIMIZE with an admissible heuristic
    returns shortest paths.
    """

    def __init__(self, source: S, mode: SearchMode = SearchMode.MINIMIZE) -> None:
        self.source = source
        self.mode = SearchMode(mode)
        self.f_costs: dict[S, int] = {}
        self.expanded = 0

    def solve(self) -> list[M] | None:
        source = self.source
        lowest_to: dict[S, int] = {source: 0}
        best_previous: dict[S, tuple[S, M]] = {}
        self.f_costs = {source: source.heuristic()}
        ongoing: _OpenSet[S] = _OpenSet(self.mode)
        ongoing.push(source, self.f_costs[source], 0)
        self.expanded = 0

        while ongoing:
            best_node = ongoing.pop()
            if best_node.is_goal():
                logger.debug(
                    "a* (%s) reached goal after expanding %d states",
                    self.mode, self.expanded,
                )
                return resolve_history(source, best_node, best_previous)

            self.expanded += 1
            base = lowest_to[best_node]
            for move in best_node.available_moves():
                n = best_node.copy()
                n.apply(move)
                new_cost = base + best_node.edge_cost(n)
                if n not in lowest_to or new_cost < lowest_to[n]:
                    lowest_to[n] = new_cost
                    best_previous[n] = (best_node, move)
                    self.f_costs[n] = new_cost + n.heuristic()
                    ongoing.push(n, self.f_costs[n], new_cost)

        logger.debug("a* (%s) open set exhausted", self.mode)
        return None


def astar(source: S, mode: SearchMode = SearchMode.MINIMIZE) -> list[M] | None:
    return AStar(source, mode).solve()
