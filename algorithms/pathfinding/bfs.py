"""
bfs.py — Breadth-First Search
=============================
Generator-based BFS over the 4-connected board. Yields a snapshot at
every meaningful event:
  1. Start                      →  untouched working grid
  2. Dequeue a cell             →  mark it VISITED, focus on it
  3. Goal dequeued              →  "Target found!"
  4. Path tail                  →  one frame per cell traced back to start

On an unweighted grid BFS reaches the goal by a shortest path.
Walls are skipped transparently.
"""

from collections import deque
from typing import Set, Tuple

from algorithms.step import Producer
from algorithms.pathfinding.common import frame, trace_path, working_copy
from projection.grid import Grid, grid_neighbours


def bfs(board: Grid) -> Producer:
    grid, start, end = working_copy(board)
    start.distance = 0
    queue = deque([start])
    seen: Set[Tuple[int, int]] = {(start.row, start.col)}

    yield frame(grid, "Starting BFS")

    found = False
    while queue:
        cell = queue.popleft()
        cell.is_visited = True
        yield frame(grid, f"Visiting [{cell.row}, {cell.col}] (depth {int(cell.distance)})", cell)

        if cell is end:
            found = True
            yield frame(grid, "Target found!")
            break

        for nbr in grid_neighbours(grid, cell):
            if nbr.is_wall or (nbr.row, nbr.col) in seen:
                continue
            seen.add((nbr.row, nbr.col))
            nbr.distance = cell.distance + 1
            nbr.previous = (cell.row, cell.col)
            queue.append(nbr)

    if found:
        yield from trace_path(grid, start, end)
    else:
        yield frame(grid, "No path found.")
