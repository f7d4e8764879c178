"""
convex_hull.py — Convex Hull (Jarvis March)
===========================================
Gift wrapping: from the leftmost point, pick as next hull point the one
that leaves every other point on the same side of the wrapping line.
Collinear ties go to the farther point so that hull edges span whole
sides. The wrap stops when it returns to the leftmost point.
"""

import random
from typing import Optional

from algorithms.step import Producer, projection
from projection.edge import GraphEdge
from projection.graph import GraphProjection
from projection.node import GraphNode, Tint

MIN_POINTS     = 5
MAX_POINTS     = 50
DEFAULT_POINTS = 10
SCAN_STRIDE    = 3            # yield on every third scanned point


def random_points(size: Optional[int] = None) -> GraphProjection:
    count = DEFAULT_POINTS if size is None else max(MIN_POINTS, min(MAX_POINTS, int(size)))
    graph = GraphProjection(directed=True)
    for i in range(count):
        graph.create_node(
            x=random.randint(100, 699),
            y=random.randint(50, 349),
            node_id=str(i),
            color=Tint.MUTED,
        )
    return graph


def cross(o: GraphNode, a: GraphNode, b: GraphNode) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull(graph: GraphProjection) -> Producer:
    nodes = graph.nodes
    n = len(nodes)
    if n < 3:
        yield projection(graph.copy(), description="A hull needs at least three points.")
        return

    leftmost = min(range(n), key=lambda i: (nodes[i].x, nodes[i].y))
    hull_edges = []
    graph.edges = []

    p = leftmost
    nodes[p].color = Tint.SELECTED
    nodes[p].is_active = True
    yield projection(graph.copy(), active=nodes[p].id, description="Starting at leftmost point")
    nodes[p].is_active = False

    for _ in range(n):
        q = (p + 1) % n
        for i in range(n):
            if i == p:
                continue
            graph.edges = hull_edges + [GraphEdge(nodes[p].id, nodes[i].id, Tint.CANDIDATE, directed=True)]
            turn = cross(nodes[p], nodes[i], nodes[q])
            if turn < 0 or (turn == 0 and nodes[p].distance_to(nodes[i]) > nodes[p].distance_to(nodes[q])):
                q = i
            if i % SCAN_STRIDE == 0:
                yield projection(graph.copy(), active=nodes[i].id, description="Scanning points...")

        hull_edges.append(GraphEdge(nodes[p].id, nodes[q].id, Tint.SELECTED, directed=True))
        graph.edges = list(hull_edges)
        nodes[q].color = Tint.SELECTED
        nodes[q].is_active = True
        yield projection(graph.copy(), active=nodes[q].id, description=f"Found hull edge to point {q}")
        nodes[q].is_active = False

        p = q
        if p == leftmost:
            break

    yield projection(graph.copy(), description=f"Convex hull wrapping complete! {len(hull_edges)} hull edges.")
