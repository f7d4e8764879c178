"""
stack.py — Interactive Stack
============================
LIFO. The logical state is a plain list (top = last element) that
`push` / `pop` mutate in place; frames draw it as a vertical tower.
"""

from typing import List, Optional

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

BASE_Y       = 350
NODE_SPACING = 50


def empty_stack(size: Optional[int] = None) -> List[int]:
    return []


def draw_stack(stack: List[int], active: int = -1) -> GraphProjection:
    graph = GraphProjection(directed=True)
    for idx, value in enumerate(stack):
        graph.create_node(
            x=400, y=BASE_Y - idx * NODE_SPACING, value=value, node_id=f"node-{idx}",
            color=Tint.CANDIDATE if idx == active else None, is_active=idx == active,
        )
        if idx > 0:
            graph.create_edge(f"node-{idx - 1}", f"node-{idx}", color=Tint.LINK)
    return graph


def push(stack: List[int], value: Optional[int] = None) -> Producer:
    if value is None:
        yield projection(draw_stack(stack), description="Nothing pushed: no value given.")
        return

    stack.append(value)
    top = len(stack) - 1
    yield projection(draw_stack(stack, top), active=f"node-{top}", description=f"Pushed {value} to the top.")
    yield projection(draw_stack(stack), description="Ready")


def pop(stack: List[int]) -> Producer:
    if not stack:
        yield projection(draw_stack(stack), description="Stack underflow! (empty)")
        return

    top = len(stack) - 1
    value = stack[top]
    yield projection(draw_stack(stack, top), active=f"node-{top}", description=f"Popping top value: {value}")

    stack.pop()
    new_top = stack[-1] if stack else "none"
    yield projection(draw_stack(stack), description=f"Removed {value}. New top is {new_top}")
