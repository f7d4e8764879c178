"""
edge.py — Graph Projection Edge
===============================
Connects two GraphNodes by id. Carries an optional weight (routing cost)
and its own colour so algorithms can mark candidate / chosen links
directly on the picture they hand to the renderer.

`source` and `target` are node-id strings, NOT node references, which
keeps edges serialisable and trivially copyable.
"""

from typing import Optional

from projection.node import Tint


class GraphEdge:
    """
    Attributes:
        source   : ID of the tail node.
        target   : ID of the head node.
        color    : Optional Tint (None → renderer default).
        weight   : Optional numeric cost, drawn at the midpoint when set.
        directed : Draw an arrowhead at the target end.
    """

    __slots__ = ("source", "target", "color", "weight", "directed")

    def __init__(
        self,
        source: str,
        target: str,
        color: Optional[Tint] = None,
        weight: Optional[float] = None,
        directed: bool = False,
    ):
        self.source:   str             = source
        self.target:   str             = target
        self.color:    Optional[Tint]  = color
        self.weight:   Optional[float] = weight
        self.directed: bool            = directed

    def copy(self) -> "GraphEdge":
        return GraphEdge(self.source, self.target, self.color, self.weight, self.directed)

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b, ignoring direction."""
        return {self.source, self.target} == {node_a, node_b}

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source":   self.source,
            "target":   self.target,
            "color":    self.color.value if self.color else None,
            "weight":   self.weight,
            "directed": self.directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        color = data.get("color")
        return cls(
            source=data["source"],
            target=data["target"],
            color=Tint(color) if color else None,
            weight=data.get("weight"),
            directed=data.get("directed", False),
        )

    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"GraphEdge({self.source}{arrow}{self.target}, w={self.weight})"
