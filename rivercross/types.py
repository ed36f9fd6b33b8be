# rivercross/types.py
from typing import Tuple

Move = Tuple[int, int]  # (missionaries, cannibals) carried by one crossing

LEFT = "left"    # origin bank
RIGHT = "right"  # destination bank
