"""
cellular_caves.py — Cellular Automata Caves
===========================================
Start from ~45 % random walls and apply the 4-5 smoothing rule ten times:
a cell with more than four wall neighbours (out-of-bounds counts as wall)
becomes wall, fewer than four becomes floor, exactly four stays put.
"""

import random
from typing import Optional

from algorithms.step import Producer, domain
from algorithms.terrain import Heightmap, clamp_size, copy_map

WALL  = 100
FLOOR = 0
SMOOTHING_STEPS = 10


def random_noise(size: Optional[int] = None) -> Heightmap:
    n = clamp_size(size, 30, 10, 40)
    return [[WALL if random.random() < 0.45 else FLOOR for _ in range(n)] for _ in range(n)]


def _wall_neighbours(heightmap: Heightmap, r: int, c: int) -> int:
    n = len(heightmap)
    count = 0
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            nr, nc = r + dr, c + dc
            if not (0 <= nr < n and 0 <= nc < n) or heightmap[nr][nc] > 50:
                count += 1
    return count


def cellular_caves(heightmap: Heightmap) -> Producer:
    n = len(heightmap)
    yield domain(copy_map(heightmap), description="Initial random noise")

    for step in range(1, SMOOTHING_STEPS + 1):
        nxt = copy_map(heightmap)
        for r in range(n):
            for c in range(n):
                walls = _wall_neighbours(heightmap, r, c)
                if walls > 4:
                    nxt[r][c] = WALL
                elif walls < 4:
                    nxt[r][c] = FLOOR
        heightmap[:] = nxt
        yield domain(copy_map(heightmap), description=f"Step {step}/{SMOOTHING_STEPS}: smoothing walls")

    yield domain(copy_map(heightmap), description="Cave generation complete")
