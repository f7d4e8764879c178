"""
min_heap.py — Binary Min-Heap
=============================
Builds a min-heap by inserting the input values one at a time (sift up),
then demonstrates one extract-min (sift down). The heap array is drawn
as a complete binary tree: index i sits on level ⌊log2(i+1)⌋, its parent
is (i-1)//2.
"""

import math
import random
from typing import List, Optional, Sequence

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

MIN_VALUES     = 5
MAX_VALUES     = 31              # five full levels
DEFAULT_VALUES = 12
SCREEN_WIDTH   = 800
LEVEL_HEIGHT   = 70


def random_values(size: Optional[int] = None) -> List[int]:
    count = DEFAULT_VALUES if size is None else max(MIN_VALUES, min(MAX_VALUES, int(size)))
    return [random.randint(1, 99) for _ in range(count)]


def layout(index: int):
    level = int(math.log2(index + 1))
    position = index - (2 ** level - 1)
    slice_width = SCREEN_WIDTH / (2 ** level + 1)
    return slice_width * (position + 1), 50 + level * LEVEL_HEIGHT


def draw_heap(heap: Sequence[int], active: Sequence[int] = (), completed: bool = False) -> GraphProjection:
    graph = GraphProjection()
    for i, value in enumerate(heap):
        x, y = layout(i)
        colour = None
        if i in active:
            colour = Tint.CANDIDATE
        if completed:
            colour = Tint.SELECTED
        graph.create_node(x=x, y=y, value=str(value), node_id=str(i), color=colour, is_active=i in active)
        if i > 0:
            graph.create_edge(str((i - 1) // 2), str(i), color=Tint.LINK)
    return graph


def min_heap(values: List[int]) -> Producer:
    heap: List[int] = []
    yield projection(draw_heap(heap), description=f"Building a min-heap from {len(values)} values")

    for value in values:
        heap.append(value)
        curr = len(heap) - 1
        yield projection(draw_heap(heap, [curr]), active=str(curr),
                         description=f"Insert {value} at the next available position (index {curr})")

        while curr > 0:
            parent = (curr - 1) // 2
            yield projection(draw_heap(heap, [curr, parent]), active=str(curr),
                             description=f"Compare child ({heap[curr]}) with parent ({heap[parent]})")
            if heap[curr] >= heap[parent]:
                break
            heap[curr], heap[parent] = heap[parent], heap[curr]
            yield projection(draw_heap(heap, [curr, parent]), active=str(parent),
                             description=f"Swap! {heap[parent]} < {heap[curr]}, so bubble up.")
            curr = parent

    yield projection(draw_heap(heap, completed=True),
                     description="Min-heap construction complete! Root is the minimum element.")
    yield from _extract_min(heap)


def _extract_min(heap: List[int]) -> Producer:
    if not heap:
        yield projection(draw_heap(heap), description="Heap is empty: nothing to extract.")
        return

    yield projection(draw_heap(heap, [0], completed=True), active="0",
                     description="Now, let's remove the minimum (root)...")

    removed = heap[0]
    last = heap.pop()
    if not heap:
        yield projection(draw_heap(heap), description=f"Removed {removed}. The heap is now empty.")
        return
    heap[0] = last
    yield projection(draw_heap(heap, [0]), active="0",
                     description=f"Removed {removed}; replaced root with last element ({heap[0]}). Now sift down.")

    curr = 0
    while True:
        left, right = 2 * curr + 1, 2 * curr + 2
        smallest = curr
        if left < len(heap) and heap[left] < heap[smallest]:
            smallest = left
        if right < len(heap) and heap[right] < heap[smallest]:
            smallest = right
        if smallest == curr:
            break
        yield projection(draw_heap(heap, [curr, smallest]), active=str(curr),
                         description=f"Swapping with smaller child ({heap[smallest]})")
        heap[curr], heap[smallest] = heap[smallest], heap[curr]
        curr = smallest

    yield projection(draw_heap(heap, completed=True), description="Root removed. Heap property restored.")
