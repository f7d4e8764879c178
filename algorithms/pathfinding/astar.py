"""
astar.py — A* Search
====================
Dijkstra + Manhattan-distance guidance. Open-set entries are ordered by
(f, h, insertion) so that among equal f the cell closer to the goal is
expanded first; on an open board that walks straight down the
shortest-path corridor.

The g-score lives in each cell's `distance`.
"""

import heapq
import itertools

from algorithms.step import Producer
from algorithms.pathfinding.common import frame, manhattan, trace_path, working_copy
from projection.grid import Grid, grid_neighbours


def astar(board: Grid) -> Producer:
    grid, start, end = working_copy(board)
    start.distance = 0
    counter = itertools.count()
    h0 = manhattan(start, end)
    open_set = [(h0, h0, next(counter), start.row, start.col)]

    yield frame(grid, "Starting A*")

    found = False
    while open_set:
        f, _, _, row, col = heapq.heappop(open_set)
        cell = grid[row][col]
        if cell.is_visited:
            continue

        if cell is end:
            found = True
            yield frame(grid, "Target found!")
            break

        cell.is_visited = True
        yield frame(grid, f"Visiting [{row}, {col}] (F: {int(f)})", cell)

        for nbr in grid_neighbours(grid, cell):
            if nbr.is_wall or nbr.is_visited:
                continue
            tentative_g = cell.distance + 1
            if tentative_g < nbr.distance:
                nbr.distance = tentative_g
                nbr.previous = (row, col)
                h = manhattan(nbr, end)
                heapq.heappush(open_set, (tentative_g + h, h, next(counter), nbr.row, nbr.col))

    if found:
        yield from trace_path(grid, start, end)
    else:
        yield frame(grid, "No path found.")
