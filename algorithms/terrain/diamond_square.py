"""
diamond_square.py — Diamond-Square Terrain
==========================================
Midpoint displacement on a (2^k + 1)-sized map. Each level runs a diamond
step (square centres from four corners) then a square step (edge
midpoints from up to four neighbours), halving chunk size and roughness.
"""

import random
from typing import Optional

from algorithms.step import Producer, domain
from algorithms.terrain import Heightmap, copy_map

VALID_SIZES = [5, 9, 17, 33]
ROUGHNESS   = 40.0


def flat_square(size: Optional[int] = None) -> Heightmap:
    """Zero map whose side is the smallest valid size ≥ `size` (default 17)."""
    wanted = 17 if size is None else int(size)
    n = next((s for s in VALID_SIZES if s >= wanted), VALID_SIZES[-1])
    return [[0.0] * n for _ in range(n)]


def _clamp(v: float) -> float:
    return max(0.0, min(100.0, v))


def diamond_square(heightmap: Heightmap) -> Producer:
    n = len(heightmap)
    for r, c in ((0, 0), (0, n - 1), (n - 1, 0), (n - 1, n - 1)):
        heightmap[r][c] = random.random() * 50 + 20
    yield domain(copy_map(heightmap), description="Step 1: initialise corners")

    chunk = n - 1
    roughness = ROUGHNESS
    while chunk > 1:
        half = chunk // 2

        # diamond
        for y in range(0, n - 1, chunk):
            for x in range(0, n - 1, chunk):
                avg = (heightmap[y][x] + heightmap[y][x + chunk]
                       + heightmap[y + chunk][x] + heightmap[y + chunk][x + chunk]) / 4
                heightmap[y + half][x + half] = _clamp(avg + (random.random() - 0.5) * roughness)
        yield domain(copy_map(heightmap), description=f"Diamond step: calculated centres (roughness: {roughness:.1f})")

        # square
        for y in range(0, n, half):
            shift = half if y % chunk == 0 else 0
            for x in range(shift, n, chunk):
                total, count = 0.0, 0
                if y - half >= 0:
                    total += heightmap[y - half][x]
                    count += 1
                if y + half < n:
                    total += heightmap[y + half][x]
                    count += 1
                if x - half >= 0:
                    total += heightmap[y][x - half]
                    count += 1
                if x + half < n:
                    total += heightmap[y][x + half]
                    count += 1
                heightmap[y][x] = _clamp(total / count + (random.random() - 0.5) * roughness)
        yield domain(copy_map(heightmap), description=f"Square step: filled edges (chunk size: {chunk} -> {half})")

        roughness /= 2
        chunk = half

    yield domain(copy_map(heightmap), description="Terrain generation complete!")
