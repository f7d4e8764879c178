"""
graph_coloring.py — Graph Coloring (m = 4)
==========================================
Colour nodes in index order so that no edge joins two nodes of the same
colour, backtracking when a node has no safe colour left.

Only a fixed four-colour palette is tried. Running out of options means
"no valid colouring with these four colours", which is reported as such
and is not a claim that the graph cannot be coloured at all.
"""

import math
import random
from typing import Optional

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

PALETTE = [Tint.RED, Tint.GREEN, Tint.BLUE, Tint.YELLOW]

MIN_NODES     = 4
MAX_NODES     = 12
DEFAULT_NODES = 6

CENTER_X    = 400
CENTER_Y    = 200
BASE_RADIUS = 130


def random_graph(size: Optional[int] = None) -> GraphProjection:
    """Jittered ring of A, B, C, … plus random chords."""
    count = DEFAULT_NODES if size is None else max(MIN_NODES, min(MAX_NODES, int(size)))
    graph = GraphProjection()

    for i in range(count):
        angle  = i / count * 2 * math.pi - math.pi / 2 + (random.random() - 0.5) * 0.5
        radius = BASE_RADIUS + (random.random() - 0.5) * 60
        graph.create_node(
            x=CENTER_X + radius * math.cos(angle),
            y=CENTER_Y + radius * math.sin(angle),
            value=chr(65 + i),
            node_id=str(i),
        )

    for i in range(count):
        nxt = (i + 1) % count
        graph.create_edge(str(i), str(nxt))
        for j in range(i + 2, count):
            if i == 0 and j == count - 1:
                continue                     # already the closing ring edge
            if random.random() > 0.55:
                graph.create_edge(str(i), str(j))

    return graph


def is_safe(graph: GraphProjection, index: int, colour: Tint) -> bool:
    node = graph.nodes[index]
    for other_id, _ in graph.neighbours(node.id):
        other = graph.get_node(other_id)
        if other is not None and other.color is colour:
            return False
    return True


def graph_coloring(graph: GraphProjection) -> Producer:
    yield projection(graph.copy(), description=f"Colouring {len(graph)} nodes with {len(PALETTE)} colours")

    coloured = yield from _solve(graph, 0)

    if coloured:
        yield projection(graph.copy(), description="Finished! Every edge joins two different colours.")
    else:
        yield projection(graph.copy(), description=f"No valid colouring with {len(PALETTE)} colours.")


def _solve(graph: GraphProjection, index: int):
    if index == len(graph.nodes):
        return True

    node = graph.nodes[index]
    for colour in PALETTE:
        node.is_active = True
        yield projection(graph.copy(), active=node.id, description=f"Trying colour for node {node.value}")

        if is_safe(graph, index, colour):
            node.color = colour
            node.is_active = False
            yield projection(graph.copy(), active=node.id, description="Colour valid so far")

            if (yield from _solve(graph, index + 1)):
                return True

            node.is_active = True
            yield projection(graph.copy(), active=node.id, description=f"Backtracking node {node.value}")
            node.color = None

    node.is_active = False
    return False
