# rivercross/__init__.py
from .types import Move
from .state import SideState, WorldState, InvalidState, MOVES, BOAT_CAPACITY, initial_state, describe_move
from .heuristics import crossings_lower_bound, greedy_key, astar_key
from .frontier import FIFOFrontier, LIFOFrontier, PriorityFrontier, PrioritizedState
from .search import (SearchResult, SearchExhausted, graph_search, run_strategy,
                     search_bfs, search_dfs, search_greedy, search_a_star, ALGORITHMS)
from .planners import run_algorithm, run_all_algs, RunStats
from .viz import draw_solution_png

__all__ = [
    "Move", "SideState", "WorldState", "InvalidState", "MOVES", "BOAT_CAPACITY",
    "initial_state", "describe_move",
    "crossings_lower_bound", "greedy_key", "astar_key",
    "FIFOFrontier", "LIFOFrontier", "PriorityFrontier", "PrioritizedState",
    "SearchResult", "SearchExhausted", "graph_search", "run_strategy",
    "search_bfs", "search_dfs", "search_greedy", "search_a_star", "ALGORITHMS",
    "run_algorithm", "run_all_algs", "RunStats",
    "draw_solution_png",
]
