"""
grid.py — Grid Projection
=========================
A rectangular list of rows of GridCells. Pathfinding searches, N-Queens
and Sudoku all speak this shape; the grid-2d renderer draws it.

Every cell knows its own `row` / `col`, which is also what makes a grid
recognisable as a projection (as opposed to a raw heightmap of numbers).
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple

from projection.node import Tint


INF = float("inf")

# neighbour visiting orders
UP_DOWN_LEFT_RIGHT: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
CLOCKWISE:          List[Tuple[int, int]] = [(-1, 0), (0, 1), (1, 0), (0, -1)]


@dataclass
class GridCell:
    """
    Attributes:
        row, col   : Position in the grid.
        is_start   : Search origin.
        is_end     : Search goal.
        is_wall    : Impassable (pathfinding) or fixed clue (Sudoku).
        is_visited : Expanded by the search.
        is_path    : On the reconstructed path.
        distance   : Best known cost from the start (g-score for A*).
        previous   : (row, col) of the predecessor on the best path.
        value      : Text drawn in the cell ('♛', Sudoku digits, …).
        color      : Optional Tint overriding the state colour.
    """

    row:        int
    col:        int
    is_start:   bool                       = False
    is_end:     bool                       = False
    is_wall:    bool                       = False
    is_visited: bool                       = False
    is_path:    bool                       = False
    distance:   float                      = INF
    previous:   Optional[Tuple[int, int]]  = None
    value:      Any                        = ""
    color:      Optional[Tint]             = None

    @property
    def key(self) -> str:
        return cell_key(self.row, self.col)

    def to_dict(self) -> dict:
        return {
            "row":        self.row,
            "col":        self.col,
            "is_start":   self.is_start,
            "is_end":     self.is_end,
            "is_wall":    self.is_wall,
            "is_visited": self.is_visited,
            "is_path":    self.is_path,
            "distance":   None if self.distance == INF else self.distance,
            "previous":   list(self.previous) if self.previous else None,
            "value":      self.value,
            "color":      self.color.value if self.color else None,
        }


Grid = List[List[GridCell]]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def cell_key(row: int, col: int) -> str:
    """Grid coordinate key used as a Snapshot's active_node."""
    return f"{row}-{col}"


def make_grid(rows: int, cols: int, factory: Optional[Callable[[int, int], GridCell]] = None) -> Grid:
    factory = factory or GridCell
    return [[factory(r, c) for c in range(cols)] for r in range(rows)]


def copy_grid(grid: Grid) -> Grid:
    """Cell-by-cell copy; the result shares nothing mutable with `grid`."""
    return [[replace(cell) for cell in row] for row in grid]


def grid_neighbours(
    grid: Grid,
    cell: GridCell,
    order: List[Tuple[int, int]] = UP_DOWN_LEFT_RIGHT,
) -> List[GridCell]:
    """4-connected in-bounds neighbours of `cell`, in the given order."""
    rows, cols = len(grid), len(grid[0])
    result = []
    for dr, dc in order:
        r, c = cell.row + dr, cell.col + dc
        if 0 <= r < rows and 0 <= c < cols:
            result.append(grid[r][c])
    return result


def count_cells(grid: Grid, predicate: Callable[[GridCell], bool]) -> int:
    return sum(1 for row in grid for cell in row if predicate(cell))


# ---------------------------------------------------------------------------
# Structural recogniser
# ---------------------------------------------------------------------------
def is_grid_projection(data: Any) -> bool:
    """True for a non-empty list of rows whose first cell carries a `row` attribute."""
    if not isinstance(data, list) or not data:
        return False
    first_row = data[0]
    if not isinstance(first_row, list) or not first_row:
        return False
    first = first_row[0]
    if isinstance(first, dict):
        return "row" in first
    return hasattr(first, "row")
