from typing import List, NamedTuple, Tuple

# Wall indices
TOP = 0
RIGHT = 1
BOTTOM = 2
LEFT = 3

# (d_row, d_col, wall, opposite_wall) scanned up -> right -> down -> left
DIRECTIONS = (
    (-1, 0, TOP, BOTTOM),
    (0, 1, RIGHT, LEFT),
    (1, 0, BOTTOM, TOP),
    (0, -1, LEFT, RIGHT),
)

OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}


class CellView(NamedTuple):
    visited: bool
    walls: Tuple[bool, bool, bool, bool]


class Cell:
    __slots__ = ('visited', 'walls')

    def __init__(self):
        self.visited = False
        # All walls present by default
        self.walls: List[bool] = [True, True, True, True]

    def view(self) -> CellView:
        return CellView(self.visited, tuple(self.walls))

    def __repr__(self):
        return f"Cell(visited={self.visited}, walls={self.walls})"
