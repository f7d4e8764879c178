"""
graph.py — Graph Projection Container
=====================================
The node/edge picture the primitive-graph renderer draws.

Responsibilities:
  1. Hold an ordered list of GraphNodes and GraphEdges   (order = draw order)
  2. Adjacency queries                                   (neighbours, edge_between)
  3. Deep copy                                           (every yielded picture is fresh)
  4. Serialisation                                       (to_dict / from_dict)

Design decisions:
  - Nodes and edges are plain lists: algorithms index them positionally
    (node 0 is the start router / first hull candidate) and the renderer
    draws them in order.
  - `copy()` is deep: a Snapshot must never alias the live structure an
    algorithm keeps mutating after the yield.
"""

from typing import List, Optional, Tuple, Any

from projection.node import GraphNode
from projection.edge import GraphEdge


class GraphProjection:
    """
    Attributes:
        nodes    : [GraphNode]
        edges    : [GraphEdge]
        directed : graph-level arrow flag (edges may still set their own)
    """

    def __init__(
        self,
        nodes: Optional[List[GraphNode]] = None,
        edges: Optional[List[GraphEdge]] = None,
        directed: bool = False,
    ):
        self.nodes:    List[GraphNode] = list(nodes) if nodes else []
        self.edges:    List[GraphEdge] = list(edges) if edges else []
        self.directed: bool            = directed

    # ==================================================================
    # NODE / EDGE CRUD
    # ==================================================================
    def add_node(self, node: GraphNode) -> GraphNode:
        self.nodes.append(node)
        return node

    def create_node(self, x: float, y: float, value: Any = "", node_id: Optional[str] = None, **kwargs) -> GraphNode:
        """Convenience: create + add in one call."""
        return self.add_node(GraphNode(x=x, y=y, value=value, node_id=node_id, **kwargs))

    def add_edge(self, edge: GraphEdge) -> GraphEdge:
        self.edges.append(edge)
        return edge

    def create_edge(self, source: str, target: str, **kwargs) -> GraphEdge:
        kwargs.setdefault("directed", self.directed)
        return self.add_edge(GraphEdge(source, target, **kwargs))

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def index_of(self, node_id: str) -> int:
        for idx, node in enumerate(self.nodes):
            if node.id == node_id:
                return idx
        return -1

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, GraphEdge]]:
        """Return [(neighbour_id, edge)] treating every edge as undirected."""
        result = []
        for edge in self.edges:
            other = edge.other_end(node_id)
            if other is not None:
                result.append((other, edge))
        return result

    def edge_between(self, a: str, b: str) -> Optional[GraphEdge]:
        for edge in self.edges:
            if edge.connects(a, b):
                return edge
        return None

    # ==================================================================
    # COPY / SERIALISATION
    # ==================================================================
    def copy(self) -> "GraphProjection":
        return GraphProjection(
            nodes=[n.copy() for n in self.nodes],
            edges=[e.copy() for e in self.edges],
            directed=self.directed,
        )

    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "nodes":    [n.to_dict() for n in self.nodes],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphProjection":
        return cls(
            nodes=[GraphNode.from_dict(nd) for nd in data.get("nodes", [])],
            edges=[GraphEdge.from_dict(ed) for ed in data.get("edges", [])],
            directed=data.get("directed", False),
        )

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"GraphProjection(nodes={len(self.nodes)}, edges={len(self.edges)}, directed={self.directed})"


# ---------------------------------------------------------------------------
# Structural recogniser
# ---------------------------------------------------------------------------
def is_graph_projection(data: Any) -> bool:
    """True when `data` carries both a node collection and an edge collection."""
    if isinstance(data, GraphProjection):
        return True
    if isinstance(data, dict):
        return isinstance(data.get("nodes"), list) and "edges" in data
    return isinstance(getattr(data, "nodes", None), list) and hasattr(data, "edges")
