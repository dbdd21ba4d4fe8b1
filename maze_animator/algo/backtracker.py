import logging
import random
from typing import List, Optional
from maze_animator.core.cell import BOTTOM, LEFT, RIGHT, TOP
from maze_animator.core.grid import Coord, Grid, GridSnapshot
from maze_animator.algo.base import Generator, GeneratorState

logger = logging.getLogger(__name__)


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first search with an explicit backtracking stack.

    One call to step() carves at most one wall, so the maze can be animated
    a tick at a time. The random source is anything with a choice() method;
    pass a seeded random.Random (or a stub) for reproducible mazes.
    """

    def __init__(self, rows: int, cols: int, seed: int = None, rng=None):
        super().__init__(rows, cols, seed)
        self.rng = rng if rng is not None else random.Random(seed)
        self.grid: Optional[Grid] = None
        self.stack: List[Coord] = []
        self.cursor: Coord = (0, 0)
        self.carved = 0
        self.visit_order: List[Coord] = []

    def initialize(self, rows: int, cols: int):
        if any(isinstance(n, bool) or not isinstance(n, int) or n < 1 for n in (rows, cols)):
            raise ValueError(f"Grid dimensions must be positive integers, got {rows}x{cols}")

        if self.state is GeneratorState.GENERATING:
            logger.debug(f"Restarting mid-run after {self.step_count} steps")

        # Replace everything at once; nothing from the previous run survives
        self.rows = rows
        self.cols = cols
        self.grid = Grid(rows, cols)
        self.stack = []
        self.cursor = (0, 0)
        self.carved = 0
        self.step_count = 0
        self.grid.set_visited(*self.cursor)
        self.visit_order = [self.cursor]
        self.state = GeneratorState.GENERATING

    def neighbors(self, row: int, col: int) -> List[Coord]:
        """Unvisited in-bounds neighbors, ordered up, right, down, left."""
        return [
            (n_row, n_col)
            for n_row, n_col, _, _ in self.grid.get_neighbors(row, col)
            if not self.grid.is_visited(n_row, n_col)
        ]

    def remove_wall(self, from_cell: Coord, to_cell: Coord):
        r1, c1 = from_cell
        r2, c2 = to_cell
        if not (self.grid.in_bounds(r1, c1) and self.grid.in_bounds(r2, c2)):
            raise ValueError(f"Cannot carve between {from_cell} and {to_cell}: out of bounds")
        if abs(r1 - r2) + abs(c1 - c2) != 1:
            raise ValueError(f"Cells {from_cell} and {to_cell} are not orthogonally adjacent")

        a = self.grid.cells[r1][c1]
        b = self.grid.cells[r2][c2]

        if r1 == r2:
            if c1 < c2:
                a.walls[RIGHT] = False
                b.walls[LEFT] = False
            else:
                a.walls[LEFT] = False
                b.walls[RIGHT] = False
        else:
            if r1 < r2:
                a.walls[BOTTOM] = False
                b.walls[TOP] = False
            else:
                a.walls[TOP] = False
                b.walls[BOTTOM] = False

        self.carved += 1

    def step(self) -> bool:
        if self.state is not GeneratorState.GENERATING:
            return False

        neighbors = self.neighbors(*self.cursor)

        if neighbors:
            self.stack.append(self.cursor)
            chosen = self.rng.choice(neighbors)
            self.remove_wall(self.cursor, chosen)
            self.cursor = chosen
            self.grid.set_visited(*chosen)
            self.visit_order.append(chosen)
        elif self.stack:
            # Backtrack
            self.cursor = self.stack.pop()
        else:
            self.state = GeneratorState.DONE
            logger.debug(f"Generation finished: {self.step_count} steps, {self.carved} walls carved")
            return False

        self.step_count += 1
        return True

    def snapshot(self) -> Optional[GridSnapshot]:
        if self.grid is None:
            return None
        return self.grid.snapshot(self.cursor, self.state.value)

    @property
    def stack_depth(self) -> int:
        return len(self.stack)
