from rivercross.state import WorldState, initial_state
from rivercross.frontier import FIFOFrontier, LIFOFrontier, PriorityFrontier, PrioritizedState
from rivercross.heuristics import greedy_key, astar_key, crossings_lower_bound

A, B, C = initial_state().successors()


def drain(f):
    out = []
    while len(f):
        out.append(f.pop())
    return out


def test_fifo_and_lifo_orders():
    fifo, lifo = FIFOFrontier(), LIFOFrontier()
    for s in (A, B, C):
        fifo.push(s)
        lifo.push(s, key=123)
    assert drain(fifo) == [A, B, C]
    assert drain(lifo) == [C, B, A]


def test_priority_is_min_first():
    f = PriorityFrontier()
    f.push(A, 5)
    f.push(B, 1)
    f.push(C, 3)
    assert drain(f) == [B, C, A]


def test_priority_ties_keep_insertion_order():
    f = PriorityFrontier()
    for s in (C, A, B):
        f.push(s, 0)
    assert drain(f) == [C, A, B]


def test_prioritized_state_ignores_state_in_ordering():
    assert PrioritizedState(1, 7, C) < PrioritizedState(2, 0, A)
    assert PrioritizedState(1, 0, C) < PrioritizedState(1, 1, A)


def test_keys():
    goal = WorldState.parse("0 0 3 3 right")
    assert crossings_lower_bound(goal) == 0
    assert crossings_lower_bound(initial_state()) == 9
    assert crossings_lower_bound(WorldState.parse("1 1 2 2 left")) == 1
    assert crossings_lower_bound(WorldState.parse("1 1 2 2 right")) == 4
    assert greedy_key(initial_state(), 4) == 9
    assert astar_key(initial_state(), 4) == 13
