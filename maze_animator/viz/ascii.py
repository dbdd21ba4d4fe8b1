from typing import Optional
from maze_animator.core.cell import BOTTOM, LEFT, RIGHT, TOP
from maze_animator.core.grid import GridSnapshot


def render_ascii(snapshot: Optional[GridSnapshot], mark_cursor: bool = False) -> str:
    """
    Draws the maze with '+', '---' and '|'.
    Unvisited cells are shaded with '.', the cursor (optionally) with '@'.
    """
    if snapshot is None:
        return ""

    lines = []
    top = "+"
    for cell in snapshot.cells[0]:
        top += ("---" if cell.walls[TOP] else "   ") + "+"
    lines.append(top)

    for r, row in enumerate(snapshot.cells):
        middle = "|" if row[0].walls[LEFT] else " "
        bottom = "+"
        for c, cell in enumerate(row):
            if mark_cursor and (r, c) == snapshot.cursor:
                body = " @ "
            elif not cell.visited:
                body = " . "
            else:
                body = "   "
            middle += body + ("|" if cell.walls[RIGHT] else " ")
            bottom += ("---" if cell.walls[BOTTOM] else "   ") + "+"
        lines.append(middle)
        lines.append(bottom)

    return "\n".join(lines)
