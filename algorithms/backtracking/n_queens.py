"""
n_queens.py — N-Queens Solver
=============================
Column-by-column backtracking on an N×N board. The board itself is the
logical state: queens are placed on it in place and every frame is a
fresh grid projection of it, so a queen stays visible ('♛') in every
later frame until it is explicitly lifted.

Cell colours:
    CANDIDATE  – square under consideration
    SELECTED   – confirmed queen
    REJECTED   – attacked square / backtrack
"""

from typing import Optional

from algorithms.step import Producer, projection
from projection.grid import Grid, GridCell, copy_grid, make_grid
from projection.node import Tint

QUEEN = "♛"

MIN_N     = 4
MAX_N     = 10
DEFAULT_N = 4


def _square_colour(row: int, col: int) -> Tint:
    return Tint.FAINT if (row + col) % 2 == 0 else Tint.BOARD


def empty_board(size: Optional[int] = None) -> Grid:
    """Empty N×N chessboard, N clamped to [4, 10]."""
    n = DEFAULT_N if size is None else max(MIN_N, min(MAX_N, int(size)))
    return make_grid(n, n, lambda r, c: GridCell(row=r, col=c, color=_square_colour(r, c)))


def is_safe(board: Grid, row: int, col: int) -> bool:
    """Queens are placed left to right, so only columns < col can attack."""
    n = len(board)
    for c in range(col):
        if board[row][c].value == QUEEN:
            return False
    r, c = row, col
    while r >= 0 and c >= 0:
        if board[r][c].value == QUEEN:
            return False
        r, c = r - 1, c - 1
    r, c = row, col
    while r < n and c >= 0:
        if board[r][c].value == QUEEN:
            return False
        r, c = r + 1, c - 1
    return True


def n_queens(board: Grid) -> Producer:
    yield projection(copy_grid(board), description=f"Starting {len(board)}-Queens")

    solved = yield from _solve(board, 0)

    if solved:
        yield projection(copy_grid(board), description="Solution found!")
    else:
        yield projection(copy_grid(board), description="No solution exists for this board.")


def _solve(board: Grid, col: int):
    n = len(board)
    if col >= n:
        return True

    for row in range(n):
        cell = board[row][col]
        cell.color = Tint.CANDIDATE
        yield projection(copy_grid(board), active=cell.key, description=f"Checking position [{row}, {col}]...")

        if is_safe(board, row, col):
            cell.value = QUEEN
            cell.color = Tint.SELECTED
            yield projection(copy_grid(board), active=cell.key, description=f"Placed queen at [{row}, {col}]")

            if (yield from _solve(board, col + 1)):
                return True

            cell.value = ""
            cell.color = Tint.REJECTED
            yield projection(copy_grid(board), active=cell.key, description=f"Backtracking from [{row}, {col}]")
        else:
            cell.color = Tint.REJECTED
            yield projection(copy_grid(board), active=cell.key, description=f"Conflict at [{row}, {col}]!")

        cell.color = _square_colour(row, col)

    return False
