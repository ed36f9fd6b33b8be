# rivercross/planners.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import time

from .state import WorldState
from .search import STRATEGIES, run_strategy

@dataclass
class RunStats:
    reached: bool
    crossings: int
    expansions: int
    elapsed_sec: float
    path: Optional[List[WorldState]]

def run_algorithm(name: str, start: WorldState) -> RunStats:
    if name not in STRATEGIES:
        raise KeyError(f"unknown algorithm {name!r}; choose from {', '.join(STRATEGIES)}")
    t0 = time.perf_counter()
    res = run_strategy(name, start)
    elapsed = time.perf_counter() - t0
    if res.path is None:
        return RunStats(False, 0, len(res.expanded), elapsed, None)
    return RunStats(True, len(res.path) - 1, len(res.expanded), elapsed, res.path)

def run_all_algs(start: WorldState) -> List[Tuple[str, RunStats]]:
    return [(name, run_algorithm(name, start)) for name in STRATEGIES]
