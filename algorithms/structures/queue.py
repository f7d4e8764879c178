"""
queue.py — Interactive Queue
============================
FIFO. The logical state is a plain list (front = index 0); frames draw
it as a horizontal row with arrows pointing from front to rear.
"""

from typing import List, Optional, Sequence

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

START_X = 100
ROW_Y   = 200
SPACING = 70


def starter_queue(size: Optional[int] = None) -> List[int]:
    return [10, 20, 30]


def _node_id(idx: int, value) -> str:
    return f"q-{idx}-{value}"


def draw_queue(queue: List[int], active: Sequence[int] = ()) -> GraphProjection:
    graph = GraphProjection(directed=True)
    for idx, value in enumerate(queue):
        if idx in active:
            colour = Tint.REJECTED
        elif idx == 0:
            colour = Tint.SELECTED
        else:
            colour = None
        graph.create_node(
            x=START_X + idx * SPACING, y=ROW_Y, value=value, node_id=_node_id(idx, value),
            color=colour, is_active=idx in active,
        )
        if idx < len(queue) - 1:
            graph.create_edge(_node_id(idx, value), _node_id(idx + 1, queue[idx + 1]))
    return graph


def enqueue(queue: List[int], value: Optional[int] = None) -> Producer:
    if value is None:
        yield projection(draw_queue(queue), description="Nothing enqueued: no value given.")
        return

    queue.append(value)
    rear = len(queue) - 1
    yield projection(draw_queue(queue, [rear]), active=_node_id(rear, value),
                     description=f"Enqueued {value} at the rear.")
    yield projection(draw_queue(queue), description="Ready")


def dequeue(queue: List[int]) -> Producer:
    if not queue:
        yield projection(draw_queue(queue), description="Queue underflow!")
        return

    value = queue[0]
    yield projection(draw_queue(queue, [0]), active=_node_id(0, value), description=f"Dequeuing front value: {value}")

    del queue[0]
    yield projection(draw_queue(queue), description=f"Removed {value}. Elements shifted.")
