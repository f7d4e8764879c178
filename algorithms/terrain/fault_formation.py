"""
fault_formation.py — Fault Formation Terrain
============================================
Repeatedly draw a random fault line across a flat map and lift one side
by 1.5 while lowering the other. Heights are normalised back into
0–100; a frame is published every ten faults.
"""

import random
from typing import Optional

from algorithms.step import Producer, domain
from algorithms.terrain import Heightmap, clamp_size, copy_map

SHIFT        = 1.5
FRAME_STRIDE = 10


def flat_ground(size: Optional[int] = None) -> Heightmap:
    n = clamp_size(size, 20, 10, 40)
    return [[50.0] * n for _ in range(n)]


def normalise(heightmap: Heightmap):
    lo = min(min(row) for row in heightmap)
    hi = max(max(row) for row in heightmap)
    if hi == lo:
        return
    for row in heightmap:
        for c, v in enumerate(row):
            row[c] = (v - lo) / (hi - lo) * 100


def fault_formation(heightmap: Heightmap) -> Producer:
    n = len(heightmap)
    iterations = 60 + n * 2
    yield domain(copy_map(heightmap), description="Starting with flat terrain...")

    for i in range(iterations):
        x1, y1 = random.random() * n, random.random() * n
        x2, y2 = random.random() * n, random.random() * n
        dx, dy = x2 - x1, y2 - y1

        for r in range(n):
            for c in range(n):
                side = (c - x1) * dy - (r - y1) * dx
                heightmap[r][c] += SHIFT if side > 0 else -SHIFT

        if i % FRAME_STRIDE == 0:
            normalise(heightmap)
            yield domain(copy_map(heightmap), description=f"Fault {i}/{iterations}: tectonic shift")

    normalise(heightmap)
    yield domain(copy_map(heightmap), description="Simulation complete: tectonic mountains")
