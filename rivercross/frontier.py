# rivercross/frontier.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, List, Protocol
import heapq

from .state import WorldState


class Frontier(Protocol):
    def push(self, s: WorldState, key: Any = None) -> None: ...
    def pop(self) -> WorldState: ...
    def __len__(self) -> int: ...


class FIFOFrontier:
    """Queue: breadth-first order, key ignored."""
    def __init__(self):
        self.q: Deque[WorldState] = deque()

    def push(self, s: WorldState, key: Any = None) -> None:
        self.q.append(s)

    def pop(self) -> WorldState:
        return self.q.popleft()

    def __len__(self) -> int:
        return len(self.q)


class LIFOFrontier:
    """Stack: depth-first order, key ignored."""
    def __init__(self):
        self.q: List[WorldState] = []

    def push(self, s: WorldState, key: Any = None) -> None:
        self.q.append(s)

    def pop(self) -> WorldState:
        return self.q.pop()

    def __len__(self) -> int:
        return len(self.q)


@dataclass(order=True)
class PrioritizedState:
    key: Any
    seq: int
    state: WorldState = field(compare=False)


class PriorityFrontier:
    """
    Min-first priority queue: the smallest key is popped first.
    Equal keys come out in the order they were pushed.
    """
    def __init__(self):
        self.h: List[PrioritizedState] = []
        self.counter = 0

    def push(self, s: WorldState, key: Any = None) -> None:
        heapq.heappush(self.h, PrioritizedState(key, self.counter, s))
        self.counter += 1

    def pop(self) -> WorldState:
        return heapq.heappop(self.h).state

    def __len__(self) -> int:
        return len(self.h)
