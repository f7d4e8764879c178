"""
sudoku.py — Sudoku Solver
=========================
Generates a random puzzle and solves it cell by cell with backtracking.

Puzzle generation:
  1. Fill the three diagonal 3×3 boxes at random (they never constrain
     each other).
  2. Complete the board with a plain, non-visual solver.
  3. Blank 40 randomly chosen squares (repeats allowed, so usually
     fewer than 40 blanks).

Given digits are marked `is_wall` and drawn NEUTRAL; the solver never
touches them.
"""

import random
from typing import List, Optional

from algorithms.step import Producer, projection
from projection.grid import Grid, GridCell, copy_grid
from projection.node import Tint

N               = 9
REMOVE_ATTEMPTS = 40


# ---------------------------------------------------------------------------
# Puzzle generation (plain ints, no snapshots)
# ---------------------------------------------------------------------------
def _fill_box(board: List[List[int]], row0: int, col0: int):
    digits = random.sample(range(1, 10), 9)
    for i in range(3):
        for j in range(3):
            board[row0 + i][col0 + j] = digits[i * 3 + j]


def _fits(board: List[List[int]], row: int, col: int, num: int) -> bool:
    for x in range(N):
        if board[row][x] == num or board[x][col] == num:
            return False
    r0, c0 = row - row % 3, col - col % 3
    for i in range(3):
        for j in range(3):
            if board[r0 + i][c0 + j] == num:
                return False
    return True


def _complete(board: List[List[int]]) -> bool:
    for row in range(N):
        for col in range(N):
            if board[row][col] == 0:
                for num in range(1, 10):
                    if _fits(board, row, col, num):
                        board[row][col] = num
                        if _complete(board):
                            return True
                        board[row][col] = 0
                return False
    return True


def random_puzzle(size: Optional[int] = None) -> Grid:
    """`size` is ignored; the board is always 9×9."""
    board = [[0] * N for _ in range(N)]
    for i in range(0, N, 3):
        _fill_box(board, i, i)
    _complete(board)

    for _ in range(REMOVE_ATTEMPTS):
        board[random.randrange(N)][random.randrange(N)] = 0

    return [
        [
            GridCell(
                row=r, col=c,
                value=val if val else "",
                is_wall=bool(val),
                color=Tint.NEUTRAL if val else Tint.BOARD,
            )
            for c, val in enumerate(row)
        ]
        for r, row in enumerate(board)
    ]


# ---------------------------------------------------------------------------
# Visual solver
# ---------------------------------------------------------------------------
def is_valid(grid: Grid, row: int, col: int, num: int) -> bool:
    for c in range(N):
        if c != col and grid[row][c].value == num:
            return False
    for r in range(N):
        if r != row and grid[r][col].value == num:
            return False
    r0, c0 = row // 3 * 3, col // 3 * 3
    for r in range(r0, r0 + 3):
        for c in range(c0, c0 + 3):
            if (r, c) != (row, col) and grid[r][c].value == num:
                return False
    return True


def sudoku(grid: Grid) -> Producer:
    yield projection(copy_grid(grid), description="Starting Sudoku solver")

    solved = yield from _solve(grid)

    if solved:
        yield projection(copy_grid(grid), description="Solved!")
    else:
        yield projection(copy_grid(grid), description="No solution exists for this puzzle.")


def _solve(grid: Grid):
    for row in range(N):
        for col in range(N):
            cell = grid[row][col]
            if cell.is_wall or cell.value != "":
                continue

            for num in range(1, 10):
                cell.value = num
                cell.color = Tint.CANDIDATE
                yield projection(copy_grid(grid), active=cell.key, description=f"Trying {num} at [{row}, {col}]...")

                if is_valid(grid, row, col, num):
                    cell.color = Tint.SELECTED
                    yield projection(copy_grid(grid), active=cell.key, description="Valid placement")
                    if (yield from _solve(grid)):
                        return True
                    cell.color = Tint.REJECTED
                    yield projection(copy_grid(grid), active=cell.key, description="Backtracking...")
                else:
                    cell.color = Tint.REJECTED
                    yield projection(copy_grid(grid), active=cell.key, description=f"{num} conflicts")

                cell.value = ""
                cell.color = Tint.BOARD
            return False
    return True
