"""
algorithms/pathfinding/
-----------------------
Grid searches from START to END on a walled 10×20 board. Each search
publishes grid projections of its own working copy of the board.
"""

from algorithms.pathfinding.common import random_board, ROWS, COLS, START, END

__all__ = ["random_board", "ROWS", "COLS", "START", "END"]
