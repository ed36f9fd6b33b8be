# rivercross/pygame_viewer.py (solution playback)
from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import List, Optional
import pygame

from .state import SideState, WorldState, initial_state, describe_move
from .search import STRATEGIES
from .planners import run_algorithm

@dataclass
class Colors:
    BG = (18, 18, 22)
    LAND = (90, 140, 80)
    WATER = (50, 90, 160)
    BOAT = (150, 100, 50)
    MISSIONARY = (230, 230, 240)
    CANNIBAL = (220, 90, 90)
    TEXT = (240, 240, 240)

def bank_slots(side: SideState, x0: int, y0: int, cell: int) -> List[tuple]:
    """Pixel centres and colours of the people standing on one bank."""
    out = []
    for row, (count, color) in enumerate(((side.missionaries, Colors.MISSIONARY), (side.cannibals, Colors.CANNIBAL))):
        for i in range(count):
            out.append((x0 + i * cell + cell // 2, y0 + row * cell + cell // 2, color))
    return out

class Viewer:
    def __init__(self, start: WorldState, alg: str = "bfs", cell: int = 40, fps: int = 30, speed: float = 1.5):
        self.start = start
        self.cell = cell
        self.fps = fps
        self.speed_steps_per_sec = speed
        m, c = start.totals
        self.bank_w = (max(m, c, 1) + 1) * cell
        self.river_w = 4 * cell
        self.W = 2 * self.bank_w + self.river_w
        self.H = 4 * cell

        self.screen = pygame.display.set_mode((self.W, self.H))
        self.font = pygame.font.Font(None, max(16, cell // 2))
        self.clock = pygame.time.Clock()
        self.autopilot = False
        self._step_timer = 0.0
        self._select(alg)

    # ----------------- planning -----------------
    def _select(self, alg: str) -> None:
        self.alg = alg
        self.stats = run_algorithm(alg, self.start)
        self.path: List[WorldState] = self.stats.path or [self.start]
        self.step = 0
        pygame.display.set_caption(f"Missionaries & Cannibals - {alg}")
        print(f"{alg}: reached={self.stats.reached} crossings={self.stats.crossings} expansions={self.stats.expansions}")

    def caption(self) -> str:
        if not self.stats.reached:
            return f"{self.alg}: no solution"
        if self.step == 0:
            return f"{self.alg}: start ({self.stats.crossings} crossings)"
        return f"{self.alg} {self.step}/{len(self.path) - 1}: {describe_move(self.path[self.step - 1], self.path[self.step])}"

    def advance(self, delta: int) -> None:
        self.step = max(0, min(len(self.path) - 1, self.step + delta))

    # ----------------- draw -----------------
    def draw(self) -> None:
        cell, scr = self.cell, self.screen
        s = self.path[self.step]
        scr.fill(Colors.BG)
        top = cell
        scr.fill(Colors.LAND, pygame.Rect(0, top, self.bank_w, 2 * cell))
        scr.fill(Colors.WATER, pygame.Rect(self.bank_w, top, self.river_w, 2 * cell))
        scr.fill(Colors.LAND, pygame.Rect(self.bank_w + self.river_w, top, self.bank_w, 2 * cell))

        r = cell // 3
        for x, y, color in bank_slots(s.left, cell // 2, top, cell):
            pygame.draw.circle(scr, color, (x, y), r)
        for x, y, color in bank_slots(s.right, self.bank_w + self.river_w + cell // 2, top, cell):
            pygame.draw.circle(scr, color, (x, y), r)

        bx = self.bank_w + cell // 4 if s.left.boat else self.bank_w + self.river_w - 2 * cell
        boat = pygame.Rect(bx, top + cell // 2, 2 * cell - cell // 4, cell)
        pygame.draw.rect(scr, Colors.BOAT, boat, border_radius=8)

        txt = self.font.render(self.caption(), True, Colors.TEXT)
        scr.blit(txt, (cell // 4, cell // 4))
        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        names = list(STRATEGIES)
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.autopilot = not self.autopilot
                    elif event.key == pygame.K_RIGHT:
                        self.advance(1)
                    elif event.key == pygame.K_LEFT:
                        self.advance(-1)
                    elif event.key == pygame.K_r:
                        self.step = 0
                    elif pygame.K_1 <= event.key < pygame.K_1 + len(names):
                        self._select(names[event.key - pygame.K_1])

            if self.autopilot and self.step < len(self.path) - 1:
                self._step_timer += dt
                if self._step_timer >= 1.0 / self.speed_steps_per_sec:
                    self.advance(1)
                    self._step_timer = 0.0

            self.draw()

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Missionaries and cannibals solution viewer")
    parser.add_argument("--alg", choices=list(STRATEGIES), default="bfs", help="Algorithm shown first (switch with 1-4)")
    parser.add_argument("--missionaries", type=int, default=3)
    parser.add_argument("--cannibals", type=int, default=3)
    parser.add_argument("--cell", type=int, default=40, help="Person size in pixels")
    parser.add_argument("--speed", type=float, default=1.5, help="Autopilot speed in crossings/sec")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        Viewer(initial_state(args.missionaries, args.cannibals), alg=args.alg, cell=args.cell, speed=args.speed).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
