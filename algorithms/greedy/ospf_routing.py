"""
ospf_routing.py — Network Routing (OSPF)
========================================
Router R0 runs Dijkstra (heapq) over the link-state database to build
its shortest-path tree. Link costs model bandwidth: 1 = fast, 10 =
normal, 50 = slow.

Each time a router is finalised, the link it was reached by turns
SELECTED and is re-oriented to point away from R0, so the finished
picture shows the routing tree as arrows.
"""

import heapq
import random
from typing import Dict, Optional

from algorithms.step import Producer, projection
from projection.edge import GraphEdge
from projection.graph import GraphProjection
from projection.node import Tint

MIN_ROUTERS     = 4
MAX_ROUTERS     = 10
DEFAULT_ROUTERS = 6
MIN_SPACING     = 90
LINK_RANGE      = 250
PLACEMENT_TRIES = 50


def _random_cost() -> int:
    roll = random.random()
    if roll > 0.8:
        return 1
    if roll < 0.3:
        return 50
    return 10


def random_topology(size: Optional[int] = None) -> GraphProjection:
    """R0 on the left, other routers spread out; R0 always links to R1 and R2."""
    count = DEFAULT_ROUTERS if size is None else max(MIN_ROUTERS, min(MAX_ROUTERS, int(size)))
    graph = GraphProjection()
    graph.create_node(x=150, y=200, value="R0", node_id="0", color=Tint.SELECTED)

    for i in range(1, count):
        for _ in range(PLACEMENT_TRIES):
            x, y = random.randint(200, 699), random.randint(50, 349)
            if all(((n.x - x) ** 2 + (n.y - y) ** 2) ** 0.5 >= MIN_SPACING for n in graph.nodes):
                break
        graph.create_node(x=x, y=y, value=f"R{i}", node_id=str(i))

    for i, a in enumerate(graph.nodes):
        for j in range(i + 1, count):
            b = graph.nodes[j]
            if a.distance_to(b) < LINK_RANGE or (i == 0 and j < 3):
                graph.create_edge(a.id, b.id, color=Tint.NEUTRAL, weight=_random_cost())
    return graph


def ospf_routing(graph: GraphProjection) -> Producer:
    if not graph.nodes:
        yield projection(graph.copy(), description="No routers in the network.")
        return

    source = graph.nodes[0]
    dist: Dict[str, float] = {n.id: float("inf") for n in graph.nodes}
    via: Dict[str, Optional[GraphEdge]] = {n.id: None for n in graph.nodes}
    settled = set()
    dist[source.id] = 0
    pq = [(0, graph.index_of(source.id), source.id)]

    yield projection(graph.copy(), active=source.id, description=f"OSPF init: router {source.value} detects neighbours...")

    while pq:
        d, _, uid = heapq.heappop(pq)
        if uid in settled or d > dist[uid]:
            continue
        settled.add(uid)
        router = graph.get_node(uid)

        link = via[uid]
        if link is not None:
            if link.target != uid:
                link.source, link.target = link.target, link.source
            link.color = Tint.SELECTED
            link.directed = True

        router.is_active = True
        yield projection(
            graph.copy(), active=uid,
            description=f"Router {router.value} processing link state advertisements. Metric: {d}",
        )
        router.is_active = False

        for vid, edge in graph.neighbours(uid):
            if vid in settled:
                continue
            neighbour = graph.get_node(vid)
            cost = edge.weight or 1

            if edge.color is not Tint.SELECTED:
                edge.color = Tint.CANDIDATE
            yield projection(
                graph.copy(), active=uid,
                description=f"{router.value} checks link to {neighbour.value} (cost {cost}). Total: {dist[uid]} + {cost}",
            )

            new_dist = dist[uid] + cost
            if new_dist < dist[vid]:
                old = via[vid]
                if old is not None and old is not edge:
                    old.color = Tint.NEUTRAL
                dist[vid] = new_dist
                via[vid] = edge
                heapq.heappush(pq, (new_dist, graph.index_of(vid), vid))
                yield projection(
                    graph.copy(), active=vid,
                    description=f"New best route found to {neighbour.value}! Metric updated to {new_dist}",
                )
            elif edge is not via[vid]:
                edge.color = Tint.NEUTRAL

    unreachable = len(graph.nodes) - len(settled)
    if unreachable:
        yield projection(graph.copy(), description=f"OSPF converged. {unreachable} router(s) unreachable from {source.value}.")
    else:
        yield projection(graph.copy(), description="OSPF converged. Routing table built.")
