"""
dfs.py — Depth-First Search
===========================
Stack-based DFS. Neighbours are pushed up, right, down, left, so the
last one pushed (left) is explored first. Dives deep before
backtracking and does NOT guarantee a shortest path.
"""

from algorithms.step import Producer
from algorithms.pathfinding.common import frame, trace_path, working_copy
from projection.grid import CLOCKWISE, Grid, grid_neighbours


def dfs(board: Grid) -> Producer:
    grid, start, end = working_copy(board)
    start.distance = 0
    stack = [start]

    yield frame(grid, "Starting DFS")

    found = False
    while stack:
        cell = stack.pop()
        if cell.is_visited:
            continue

        cell.is_visited = True
        yield frame(grid, f"Visiting [{cell.row}, {cell.col}]", cell)

        if cell is end:
            found = True
            yield frame(grid, "Target found!")
            break

        for nbr in grid_neighbours(grid, cell, CLOCKWISE):
            if not nbr.is_visited and not nbr.is_wall:
                nbr.previous = (cell.row, cell.col)
                stack.append(nbr)

    if found:
        yield from trace_path(grid, start, end, done="Path found!")
    else:
        yield frame(grid, "No path found.")
