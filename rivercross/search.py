# rivercross/search.py
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Set, Tuple

from .state import WorldState
from .frontier import Frontier, FIFOFrontier, LIFOFrontier, PriorityFrontier
from .heuristics import greedy_key, astar_key

KeyFn = Callable[[WorldState, int], object]


class SearchExhausted(RuntimeError):
    def __init__(self, start: WorldState, expanded: int):
        super().__init__(f"no solution from [{start}] after expanding {expanded} states")
        self.start = start
        self.expanded = expanded


class SearchResult:
    def __init__(self, path: Optional[List[WorldState]], expanded: Set[WorldState], depth: Dict[WorldState, int]):
        self.path = path
        self.expanded = expanded
        self.depth = depth


def graph_search(start: WorldState, frontier: Frontier, key: Optional[KeyFn] = None) -> SearchResult:
    """
    Generic graph search; the frontier decides the expansion order.
    A popped state is closed and never reopened. A recorded state is pushed
    again only when reached at a smaller depth before it is closed; BFS never
    hits that case, while DFS, greedy and A* may, and the stale entry is then
    skipped when popped.
    """

    def k(s: WorldState, d: int):
        return key(s, d) if key is not None else None

    depth: Dict[WorldState, int] = {start: 0}
    parent: Dict[WorldState, WorldState] = {}
    closed: Set[WorldState] = set()

    # unsafe start: rejected before the goal test
    if start.is_gameover():
        return SearchResult(None, closed, depth)

    frontier.push(start, k(start, 0))

    while len(frontier):
        s = frontier.pop()
        if s in closed:
            continue
        closed.add(s)

        if s.is_goal():
            path = [s]
            while s in parent:
                s = parent[s]
                path.append(s)
            path.reverse()
            return SearchResult(path, closed, depth)

        for nxt in s.successors():
            if nxt in closed:
                continue
            d = s.cost(depth[s])
            if nxt in depth and d >= depth[nxt]:
                continue
            depth[nxt] = d
            parent[nxt] = s
            frontier.push(nxt, k(nxt, d))

    return SearchResult(None, closed, depth)


# name -> (frontier factory, priority key)
STRATEGIES: Dict[str, Tuple[Callable[[], Frontier], Optional[KeyFn]]] = {
    "bfs": (FIFOFrontier, None),
    "dfs": (LIFOFrontier, None),
    "greedy": (PriorityFrontier, greedy_key),
    "astar": (PriorityFrontier, astar_key),
}

def run_strategy(name: str, start: WorldState) -> SearchResult:
    make_frontier, key = STRATEGIES[name]
    return graph_search(start, make_frontier(), key)

def _solve(name: str, start: WorldState) -> List[WorldState]:
    res = run_strategy(name, start)
    if res.path is None:
        raise SearchExhausted(start, len(res.expanded))
    return res.path

def search_bfs(start: WorldState) -> List[WorldState]:
    """Fewest crossings."""
    return _solve("bfs", start)

def search_dfs(start: WorldState) -> List[WorldState]:
    """Some valid path, not necessarily the shortest."""
    return _solve("dfs", start)

def search_greedy(start: WorldState) -> List[WorldState]:
    return _solve("greedy", start)

def search_a_star(start: WorldState) -> List[WorldState]:
    """Fewest crossings, guided by crossings_lower_bound."""
    return _solve("astar", start)


ALGORITHMS: Dict[str, Callable[[WorldState], List[WorldState]]] = {
    "bfs": search_bfs,
    "dfs": search_dfs,
    "greedy": search_greedy,
    "astar": search_a_star,
}
