from enum import Enum
from typing import Optional, Any
import uuid


# ---------------------------------------------------------------------------
# Tint: the shared colour vocabulary of every projection
# ---------------------------------------------------------------------------
class Tint(Enum):
    SELECTED   = "#22c55e"   # green: confirmed, part of the answer
    CANDIDATE  = "#fbbf24"   # amber: being examined RIGHT NOW
    REJECTED   = "#ef4444"   # red: conflict / backtrack
    NEUTRAL    = "#334155"   # slate: untouched link or fixed cell
    FAINT      = "#1e293b"   # near-background: discarded link, dark square
    BOARD      = "#0f172a"   # board background: light square, empty cell
    MUTED      = "#64748b"   # grey point / secondary link
    LINK       = "#475569"   # structural link (heap / stack)
    HEAD       = "#8b5cf6"   # purple: list head
    TAIL       = "#ec4899"   # pink: list tail
    # graph-colouring palette; RED and GREEN alias REJECTED and SELECTED
    RED        = "#ef4444"
    GREEN      = "#22c55e"
    BLUE       = "#3b82f6"
    YELLOW     = "#eab308"


# ---------------------------------------------------------------------------
# GraphNode
# ---------------------------------------------------------------------------
class GraphNode:
    """
    One drawable vertex of a graph projection.

    Attributes:
        id        : Unique identifier (uuid fragment by default, or caller-supplied).
        value     : Label drawn inside the circle (letter, number, router name, …).
        x, y      : Canvas coordinates in pixels.
        color     : Optional Tint overriding the renderer's default fill.
        is_active : True while the algorithm focuses on this node.
    """

    __slots__ = ("id", "value", "x", "y", "color", "is_active")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        value: Any = "",
        node_id: Optional[str] = None,
        color: Optional[Tint] = None,
        is_active: bool = False,
    ):
        self.id: str                = node_id or str(uuid.uuid4())[:8]
        self.value: Any             = value
        self.x: float               = x
        self.y: float               = y
        self.color: Optional[Tint]  = color
        self.is_active: bool        = is_active

    def copy(self) -> "GraphNode":
        return GraphNode(
            x=self.x, y=self.y, value=self.value, node_id=self.id,
            color=self.color, is_active=self.is_active,
        )

    def distance_to(self, other: "GraphNode") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":        self.id,
            "value":     self.value,
            "x":         self.x,
            "y":         self.y,
            "color":     self.color.value if self.color else None,
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        color = data.get("color")
        return cls(
            x=data["x"], y=data["y"], value=data.get("value", ""), node_id=data["id"],
            color=Tint(color) if color else None,
            is_active=data.get("is_active", False),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphNode(id={self.id}, value={self.value}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, GraphNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
