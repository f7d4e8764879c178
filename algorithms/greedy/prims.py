"""
prims.py — Prim's Minimum Spanning Tree
=======================================
Grow a tree from node 0 by repeatedly taking the shortest edge that
crosses the cut (one end in the tree, one end out). Edge length is the
Euclidean distance between the endpoints.

Edge colours:
    CANDIDATE – crosses the cut right now
    SELECTED  – in the tree
    FAINT     – both ends already in the tree, never needed
    NEUTRAL   – both ends still outside
"""

import random
from typing import Optional

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

MIN_NODES     = 5
MAX_NODES     = 15
DEFAULT_NODES = 8
LINK_RANGE    = 350


def random_network(size: Optional[int] = None) -> GraphProjection:
    """Scatter nodes on the canvas and link every pair closer than LINK_RANGE."""
    count = DEFAULT_NODES if size is None else max(MIN_NODES, min(MAX_NODES, int(size)))
    graph = GraphProjection()
    for i in range(count):
        graph.create_node(
            x=random.randint(100, 699),
            y=random.randint(50, 349),
            value=chr(65 + i),
            node_id=str(i),
        )
    for i, a in enumerate(graph.nodes):
        for b in graph.nodes[i + 1:]:
            if a.distance_to(b) < LINK_RANGE:
                graph.create_edge(a.id, b.id, color=Tint.NEUTRAL)
    return graph


def prims(graph: GraphProjection) -> Producer:
    if not graph.nodes:
        yield projection(graph.copy(), description="Nothing to span: the graph has no nodes.")
        return

    root = graph.nodes[0]
    in_tree = {root.id}
    total = 0.0

    root.color = Tint.SELECTED
    root.is_active = True
    yield projection(graph.copy(), active=root.id, description=f"Starting Prim's algorithm at node {root.value}")
    root.is_active = False

    while len(in_tree) < len(graph.nodes):
        best_edge, best_len, best_target = None, float("inf"), None

        for edge in graph.edges:
            src_in, tgt_in = edge.source in in_tree, edge.target in in_tree
            if src_in != tgt_in:
                if edge.color is not Tint.SELECTED:
                    edge.color = Tint.CANDIDATE
                length = graph.get_node(edge.source).distance_to(graph.get_node(edge.target))
                if length < best_len:
                    best_edge, best_len = edge, length
                    best_target = edge.target if src_in else edge.source
            elif not src_in:
                edge.color = Tint.NEUTRAL
            elif edge.color is not Tint.SELECTED:
                edge.color = Tint.FAINT

        yield projection(graph.copy(), description="Searching for shortest connection...")

        if best_edge is None:
            yield projection(
                graph.copy(),
                description=f"Graph is disconnected: {len(graph.nodes) - len(in_tree)} node(s) cannot be reached.",
            )
            return

        best_edge.color = Tint.SELECTED
        in_tree.add(best_target)
        total += best_len
        node = graph.get_node(best_target)
        node.color = Tint.SELECTED
        node.is_active = True
        yield projection(graph.copy(), active=node.id, description=f"Connected node {node.value} (dist: {int(best_len)})")
        node.is_active = False

    for edge in graph.edges:
        if edge.color is not Tint.SELECTED:
            edge.color = Tint.FAINT
    yield projection(graph.copy(), description=f"MST complete! Total wire length: {int(total)}")
