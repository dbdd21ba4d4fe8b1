from typing import Iterator, List, NamedTuple, Tuple
from maze_animator.core.cell import Cell, CellView, DIRECTIONS

Coord = Tuple[int, int]


class GridSnapshot(NamedTuple):
    """Immutable copy of the generator state handed to renderers."""
    rows: int
    cols: int
    cells: Tuple[Tuple[CellView, ...], ...]
    cursor: Coord
    state: str

    def cell(self, row: int, col: int) -> CellView:
        return self.cells[row][col]


class Grid:
    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        # Fresh cells: unvisited, all four walls present
        self.cells: List[List[Cell]] = [[Cell() for _ in range(cols)] for _ in range(rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Cell:
        if self.in_bounds(row, col):
            return self.cells[row][col]
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def set_visited(self, row: int, col: int, visited: bool = True):
        self.get_cell(row, col).visited = visited

    def is_visited(self, row: int, col: int) -> bool:
        return self.get_cell(row, col).visited

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int, int]]:
        """
        Yields (n_row, n_col, wall, opposite_wall) for every in-bounds neighbor,
        in up, right, down, left order. Does NOT check visited flags.
        """
        for d_row, d_col, wall, opposite in DIRECTIONS:
            n_row, n_col = row + d_row, col + d_col
            if self.in_bounds(n_row, n_col):
                yield (n_row, n_col, wall, opposite)

    def snapshot(self, cursor: Coord, state: str) -> GridSnapshot:
        cells = tuple(tuple(cell.view() for cell in row) for row in self.cells)
        return GridSnapshot(self.rows, self.cols, cells, cursor, state)
