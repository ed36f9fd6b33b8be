import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from rivercross.pygame_viewer import Viewer, bank_slots, Colors
from rivercross.state import SideState, initial_state


def test_bank_slots():
    slots = bank_slots(SideState(2, 1), 0, 0, 10)
    assert [(x, y) for x, y, _ in slots] == [(5, 5), (15, 5), (5, 15)]
    assert slots[-1][2] == Colors.CANNIBAL


def test_viewer_steps_through_solution():
    pygame.init()
    try:
        v = Viewer(initial_state(), alg="bfs", cell=20)
        assert "start" in v.caption()
        v.advance(100)
        assert v.step == 11
        assert "11/11" in v.caption()
        v.draw()
        v.advance(-100)
        assert v.step == 0
    finally:
        pygame.quit()


def test_viewer_without_solution():
    pygame.init()
    try:
        v = Viewer(initial_state(4, 4), alg="astar", cell=20)
        assert v.caption() == "astar: no solution"
        v.advance(1)
        assert v.step == 0
        v.draw()
    finally:
        pygame.quit()
