from collections import deque
from maze_animator.core.cell import BOTTOM, DIRECTIONS, RIGHT
from maze_animator.core.grid import GridSnapshot


def count_carved_edges(snapshot: GridSnapshot) -> int:
    """Number of removed wall pairs. Each interior edge is counted once via its RIGHT/BOTTOM side."""
    carved = 0
    for row in range(snapshot.rows):
        for col in range(snapshot.cols):
            walls = snapshot.cells[row][col].walls
            if col < snapshot.cols - 1 and not walls[RIGHT]:
                carved += 1
            if row < snapshot.rows - 1 and not walls[BOTTOM]:
                carved += 1
    return carved


def walls_consistent(snapshot: GridSnapshot) -> bool:
    """Every wall flag agrees with the facing flag of its neighbor; the border stays closed."""
    for row in range(snapshot.rows):
        for col in range(snapshot.cols):
            walls = snapshot.cells[row][col].walls
            for d_row, d_col, wall, opposite in DIRECTIONS:
                n_row, n_col = row + d_row, col + d_col
                if not (0 <= n_row < snapshot.rows and 0 <= n_col < snapshot.cols):
                    if not walls[wall]:
                        return False
                elif walls[wall] != snapshot.cells[n_row][n_col].walls[opposite]:
                    return False
    return True


def reachable_cells(snapshot: GridSnapshot, start=(0, 0)) -> int:
    """BFS over carved edges."""
    seen = {start}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        walls = snapshot.cells[row][col].walls
        for d_row, d_col, wall, _ in DIRECTIONS:
            n_row, n_col = row + d_row, col + d_col
            if walls[wall] or not (0 <= n_row < snapshot.rows and 0 <= n_col < snapshot.cols):
                continue
            if (n_row, n_col) not in seen:
                seen.add((n_row, n_col))
                queue.append((n_row, n_col))
    return len(seen)


def is_perfect_maze(snapshot: GridSnapshot) -> bool:
    """
    A connected graph on N nodes with exactly N - 1 edges is a tree,
    so connectivity plus the edge count rules out cycles.
    """
    total = snapshot.rows * snapshot.cols
    if not all(cell.visited for row in snapshot.cells for cell in row):
        return False
    if not walls_consistent(snapshot):
        return False
    if count_carved_edges(snapshot) != total - 1:
        return False
    return reachable_cells(snapshot) == total


def calculate_stats(snapshot: GridSnapshot):
    dead_ends = 0
    intersections = 0  # 0, 1 walls
    corridors = 0  # 2 walls

    for row in snapshot.cells:
        for cell in row:
            walls = sum(cell.walls)
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1

    total = snapshot.rows * snapshot.cols
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "intersections": intersections,
        "carved_edges": count_carved_edges(snapshot),
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
