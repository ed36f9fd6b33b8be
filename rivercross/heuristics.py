# rivercross/heuristics.py
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import WorldState

STEP_COST = 1  # every crossing costs the same

def path_cost(depth: int) -> int:
    return depth * STEP_COST

def crossings_lower_bound(s: "WorldState") -> int:
    """
    Fewest crossings that could still empty the left bank with a 2-seat boat.
    A round trip nets at most one person; the final crossing carries two.
    Admissible and consistent, so A* stays optimal.
    """
    n = s.left.people
    if s.left.boat:
        return max(1, 2 * n - 3) if n else 0
    return 2 * n

# frontier keys: (state, depth) -> priority, smaller is served first

def greedy_key(s: "WorldState", depth: int) -> int:
    return s.heuristic()

def astar_key(s: "WorldState", depth: int) -> int:
    return s.heuristic() + path_cost(depth)
