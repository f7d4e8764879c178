"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
================================================
Generator-based Dijkstra over the board using a min-heap (heapq).
Every step costs 1, so distances are hop counts.

Yields a snapshot at:
  1. Initialise (start distance = 0)
  2. Pop the minimum-distance cell  →  VISITED
  3. Goal popped                    →  trace path back
  4. Heap empty                     →  "No path found."

Stale heap entries (cell already finalised) are skipped silently.
"""

import heapq
import itertools

from algorithms.step import Producer
from algorithms.pathfinding.common import frame, trace_path, working_copy
from projection.grid import Grid, grid_neighbours


def dijkstra(board: Grid) -> Producer:
    grid, start, end = working_copy(board)
    start.distance = 0
    counter = itertools.count()              # FIFO among equal distances
    pq = [(0, next(counter), start.row, start.col)]

    yield frame(grid, "Starting Dijkstra")

    found = False
    while pq:
        d, _, row, col = heapq.heappop(pq)
        cell = grid[row][col]
        if cell.is_visited or d > cell.distance:
            continue

        cell.is_visited = True
        yield frame(grid, f"Visiting [{row}, {col}] (dist: {int(d)})", cell)

        if cell is end:
            found = True
            yield frame(grid, "Target found!")
            break

        for nbr in grid_neighbours(grid, cell):
            if nbr.is_visited or nbr.is_wall:
                continue
            new_dist = cell.distance + 1
            if new_dist < nbr.distance:
                nbr.distance = new_dist
                nbr.previous = (row, col)
                heapq.heappush(pq, (new_dist, next(counter), nbr.row, nbr.col))

    if found:
        yield from trace_path(grid, start, end)
    else:
        yield frame(grid, "No path found.")
