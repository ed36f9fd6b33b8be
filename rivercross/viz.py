# rivercross/viz.py
from __future__ import annotations
import os
from typing import List, Tuple
try:
    from PIL import Image, ImageDraw
    PIL_AVAILABLE = True
except Exception:
    PIL_AVAILABLE = False

from .state import SideState, WorldState

MISSIONARY = (90, 130, 220)
CANNIBAL = (220, 90, 90)
BOAT = (150, 100, 50)
WATER = (160, 200, 240)
LAND = (200, 230, 180)

def _bank_width(path: List[WorldState], cell: int) -> int:
    m, c = path[0].totals
    return (max(m, c, 1) + 1) * cell

def _draw_people(drw, side: SideState, x0: int, y0: int, cell: int) -> None:
    pad = cell // 6
    for row, (count, color) in enumerate(((side.missionaries, MISSIONARY), (side.cannibals, CANNIBAL))):
        for i in range(count):
            x, y = x0 + i * cell, y0 + row * cell
            drw.ellipse((x + pad, y + pad, x + cell - pad, y + cell - pad), fill=color)

def draw_solution_png(path: List[WorldState], out_png: str, cell: int = 20) -> Tuple[int, int]:
    """One row per state, top to bottom: left bank, river with boat, right bank."""
    if not PIL_AVAILABLE:
        print("Pillow not installed; skipping PNG:", out_png)
        return (0, 0)
    if not path:
        raise ValueError("cannot draw an empty path")

    bank_w = _bank_width(path, cell)
    river_w = 3 * cell
    row_h = 2 * cell + cell // 2
    W, H = 2 * bank_w + river_w, len(path) * row_h
    img = Image.new("RGB", (W, H), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    for r, s in enumerate(path):
        y0 = r * row_h
        drw.rectangle((0, y0, bank_w, y0 + 2 * cell), fill=LAND)
        drw.rectangle((bank_w, y0, bank_w + river_w, y0 + 2 * cell), fill=WATER)
        drw.rectangle((bank_w + river_w, y0, W, y0 + 2 * cell), fill=LAND)
        _draw_people(drw, s.left, cell // 2, y0, cell)
        _draw_people(drw, s.right, bank_w + river_w + cell // 2, y0, cell)

        bx = bank_w + cell // 4 if s.left.boat else bank_w + river_w - cell - cell // 4
        drw.rectangle((bx, y0 + cell // 2, bx + cell, y0 + cell + cell // 2), fill=BOAT)

    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    img.save(out_png)
    return (W, H)
