"""
maze_generator.py — Recursive Backtracker Maze
==============================================
Carve passages through a solid odd-sized block with an explicit stack,
jumping two cells at a time and knocking out the wall in between.

Heights:
    100 – wall
     50 – the miner's current position
     30 – cell being backtracked to
      0 – carved floor
"""

import random
from typing import Optional

from algorithms.step import Producer, domain
from algorithms.terrain import Heightmap, clamp_size, copy_map

WALL      = 100
HEAD      = 50
BACKTRACK = 30
FLOOR     = 0

JUMPS = [(-2, 0), (0, 2), (2, 0), (0, -2)]


def solid_block(size: Optional[int] = None) -> Heightmap:
    n = clamp_size(size, 21, 11, 45)
    if n % 2 == 0:
        n += 1
    return [[WALL] * n for _ in range(n)]


def maze_generator(heightmap: Heightmap) -> Producer:
    n = len(heightmap)
    stack = [(1, 1)]
    heightmap[1][1] = FLOOR
    yield domain(copy_map(heightmap), description="Starting the miner at (1, 1)")

    while stack:
        r, c = stack[-1]
        heightmap[r][c] = HEAD

        options = [
            (r + dr, c + dc, dr, dc)
            for dr, dc in JUMPS
            if 0 < r + dr < n - 1 and 0 < c + dc < n - 1 and heightmap[r + dr][c + dc] == WALL
        ]

        if options:
            nr, nc, dr, dc = random.choice(options)
            heightmap[r + dr // 2][c + dc // 2] = FLOOR
            heightmap[r][c] = FLOOR
            heightmap[nr][nc] = HEAD
            stack.append((nr, nc))
            yield domain(copy_map(heightmap), active=f"{nr}-{nc}", description=f"Carving path to [{nr}, {nc}]")
        else:
            heightmap[r][c] = FLOOR
            stack.pop()
            if stack:
                pr, pc = stack[-1]
                heightmap[pr][pc] = BACKTRACK
                yield domain(copy_map(heightmap), active=f"{pr}-{pc}", description="Dead end. Backtracking...")
                heightmap[pr][pc] = FLOOR

    yield domain(copy_map(heightmap), description="Maze generation complete!")
