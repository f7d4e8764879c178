"""
common.py — Shared Grid Search Plumbing
=======================================
Board layout, random wall generation, the per-run working copy and the
path-tracing tail every search ends with.

Board:
    ROWS × COLS = 10 × 20, start at (1, 1), goal at (8, 18).

The logical state of a pathfinding algorithm is the board as generated
(walls + endpoints). A search never touches it: it works on a fresh copy
with search fields cleared and publishes grid projections of that copy.
"""

import random
from typing import Optional, Tuple

from algorithms.step import Producer, projection
from projection.grid import Grid, GridCell, INF, copy_grid, make_grid

ROWS  = 10
COLS  = 20
START = (1, 1)
END   = (8, 18)

DEFAULT_WALL_PERCENT = 20
MAX_WALL_PERCENT     = 45


def _board_cell(row: int, col: int) -> GridCell:
    return GridCell(row=row, col=col, is_start=(row, col) == START, is_end=(row, col) == END)


def random_board(size: Optional[int] = None) -> Grid:
    """
    Build a fresh board. `size` is the wall density in percent, clamped to
    [0, 45]; start and goal are never walls.
    """
    percent = DEFAULT_WALL_PERCENT if size is None else max(0, min(MAX_WALL_PERCENT, int(size)))
    grid = make_grid(ROWS, COLS, _board_cell)
    for row in grid:
        for cell in row:
            if not (cell.is_start or cell.is_end) and random.random() < percent / 100:
                cell.is_wall = True
    return grid


def working_copy(board: Grid) -> Tuple[Grid, GridCell, GridCell]:
    """Copy `board` with search fields cleared; return (grid, start, end)."""
    grid = copy_grid(board)
    start = end = None
    for row in grid:
        for cell in row:
            cell.is_visited = False
            cell.is_path    = False
            cell.distance   = INF
            cell.previous   = None
            if cell.is_start:
                start = cell
            if cell.is_end:
                end = cell
    start = start or grid[START[0]][START[1]]
    end   = end or grid[END[0]][END[1]]
    return grid, start, end


def manhattan(a: GridCell, b: GridCell) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def frame(grid: Grid, description: str, cell: Optional[GridCell] = None):
    """Projection snapshot of the working grid, optionally focused on `cell`."""
    return projection(copy_grid(grid), active=cell.key if cell else None, description=description)


def trace_path(grid: Grid, start: GridCell, end: GridCell, done: str = "Shortest path found!") -> Producer:
    """Walk `previous` links back from the goal, marking and yielding each cell."""
    current = end
    while current.previous is not None:
        current.is_path = True
        prev_row, prev_col = current.previous
        current = grid[prev_row][prev_col]
        yield frame(grid, "Reconstructing path...")
    start.is_path = True
    yield frame(grid, done)


def path_length(grid: Grid) -> int:
    return sum(1 for row in grid for cell in row if cell.is_path)


__all__ = [
    "ROWS", "COLS", "START", "END",
    "random_board", "working_copy", "manhattan", "frame", "trace_path",
    "path_length",
]
