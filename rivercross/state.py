# rivercross/state.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import Move, LEFT, RIGHT
from .heuristics import path_cost, crossings_lower_bound

BOAT_CAPACITY = 2

# Enumeration order of crossings; also the tie-break order for equal priorities.
MOVES: Tuple[Move, ...] = ((1, 0), (0, 1), (2, 0), (0, 2), (1, 1))


class InvalidState(ValueError):
    pass


@dataclass(frozen=True, order=True)
class SideState:
    missionaries: int
    cannibals: int
    boat: bool = False

    def __post_init__(self):
        if self.missionaries < 0 or self.cannibals < 0:
            raise InvalidState(f"negative count on a bank: {self.missionaries}M {self.cannibals}C")

    @property
    def people(self) -> int:
        return self.missionaries + self.cannibals

    def is_danger(self) -> bool:
        return self.cannibals > self.missionaries > 0


@dataclass(frozen=True, order=True)
class WorldState:
    """
    One configuration of the puzzle: both banks plus the boat.
    Everyone starts on the left bank; the goal is an empty left bank.
    """
    left: SideState
    right: SideState

    def __post_init__(self):
        if self.left.boat == self.right.boat:
            raise InvalidState("the boat must be on exactly one bank")

    # ---- derived ----
    @property
    def boat_bank(self) -> str:
        return LEFT if self.left.boat else RIGHT

    @property
    def totals(self) -> Tuple[int, int]:
        return (self.left.missionaries + self.right.missionaries,
                self.left.cannibals + self.right.cannibals)

    def is_goal(self) -> bool:
        if self.left.people:
            return False
        # nobody to ferry: the boat never has to leave
        return not self.left.boat or self.right.people == 0

    def is_gameover(self) -> bool:
        return self.left.is_danger() or self.right.is_danger()

    def successors(self) -> List["WorldState"]:
        src, dst = (self.left, self.right) if self.left.boat else (self.right, self.left)
        out: List[WorldState] = []
        for m, c in MOVES:
            if m > src.missionaries or c > src.cannibals:
                continue
            new_src = SideState(src.missionaries - m, src.cannibals - c, False)
            new_dst = SideState(dst.missionaries + m, dst.cannibals + c, True)
            nxt = WorldState(new_src, new_dst) if self.left.boat else WorldState(new_dst, new_src)
            if nxt.is_gameover():
                continue
            out.append(nxt)
        return out

    def cost(self, from_depth: int) -> int:
        return path_cost(from_depth + 1)

    def heuristic(self) -> int:
        return crossings_lower_bound(self)

    def crossed_move(self, other: "WorldState") -> Optional[Move]:
        """The move that turns self into other in one crossing, or None."""
        if self.boat_bank == other.boat_bank or self.totals != other.totals:
            return None
        src, arrived = (self.left, other.left) if self.left.boat else (self.right, other.right)
        move = (src.missionaries - arrived.missionaries, src.cannibals - arrived.cannibals)
        return move if move in MOVES else None

    # ---- text form: "<lm> <lc> <rm> <rc> <left|right>" ----
    def to_text(self) -> str:
        return (f"{self.left.missionaries} {self.left.cannibals} "
                f"{self.right.missionaries} {self.right.cannibals} {self.boat_bank}")

    @staticmethod
    def parse(text: str, totals: Optional[Tuple[int, int]] = None) -> "WorldState":
        parts = text.split()
        if len(parts) != 5:
            raise InvalidState(f"expected '<lm> <lc> <rm> <rc> <left|right>', got {text!r}")
        try:
            lm, lc, rm, rc = map(int, parts[:4])
        except ValueError:
            raise InvalidState(f"counts must be integers: {text!r}") from None
        side = parts[4].lower()
        if side not in (LEFT, RIGHT):
            raise InvalidState(f"boat side must be 'left' or 'right', got {parts[4]!r}")
        st = WorldState(SideState(lm, lc, side == LEFT), SideState(rm, rc, side == RIGHT))
        if totals is not None and st.totals != tuple(totals):
            raise InvalidState(f"state {text!r} does not hold {totals[0]}M/{totals[1]}C in total")
        return st

    def __str__(self) -> str:
        lb = "B" if self.left.boat else " "
        rb = "B" if self.right.boat else " "
        return (f"{self.left.missionaries}M {self.left.cannibals}C {lb} ~~ "
                f"{rb} {self.right.missionaries}M {self.right.cannibals}C")


def initial_state(missionaries: int = 3, cannibals: int = 3) -> WorldState:
    return WorldState(SideState(missionaries, cannibals, True), SideState(0, 0, False))


def _plural(n: int, word: str, many: str) -> str:
    return f"{n} {word if n == 1 else many}"


def describe_move(prev: WorldState, nxt: WorldState) -> str:
    move = prev.crossed_move(nxt)
    if move is None:
        raise InvalidState(f"no single crossing leads from [{prev}] to [{nxt}]")
    m, c = move
    who = [w for n, w in ((m, _plural(m, "missionary", "missionaries")),
                          (c, _plural(c, "cannibal", "cannibals"))) if n]
    return f"send {' and '.join(who)} to the {nxt.boat_bank} bank"
