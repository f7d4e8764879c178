"""
algorithms/terrain/
-------------------
Procedural generators over square heightmaps (rows of floats in 0–100),
drawn by the terrain renderer. A heightmap is plain domain data, so each
frame is published as a `domain()` snapshot of a copy of the map.
"""

from typing import List

Heightmap = List[List[float]]


def copy_map(heightmap: Heightmap) -> Heightmap:
    return [list(row) for row in heightmap]


def clamp_size(size, default: int, low: int, high: int) -> int:
    return default if size is None else max(low, min(high, int(size)))
