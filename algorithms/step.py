"""
step.py — Snapshot Protocol
===========================
Every algorithm is a generator (a *producer*) that yields Snapshot
objects. A Snapshot is a frozen-in-time picture of everything the
renderer needs to draw one frame:

    • `data`                 – the domain value itself, or a projection of it
    • `highlighted_indices`  – positions being compared / swapped / examined
    • `active_node`          – the cell key ("row-col") or node id in focus
    • `description`          – plain-English narration of this step

Design decisions:
  - Snapshot is a plain frozen dataclass. The producer is the only
    writer; the engine and renderer are pure readers.
  - `kind` tags whether `data` IS the logical state (DOMAIN) or a
    throwaway picture of it (PROJECTION). Producers should build
    snapshots with `domain()` / `projection()` so the engine never has
    to guess; untagged snapshots fall back to a structural check.
  - A Snapshot is a complete redraw state. Nothing is diffed against
    the previous frame.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generator, List, Optional

from projection.graph import is_graph_projection
from projection.grid import is_grid_projection


class SnapshotKind(Enum):
    DOMAIN     = "domain"
    PROJECTION = "projection"


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        data                : Domain value T, or a projection (graph / grid).
        highlighted_indices : Ordered positions of interest (may be empty).
        active_node         : Grid coordinate key or graph node id in focus.
        description         : Human-readable narration.
        kind                : Explicit DOMAIN / PROJECTION tag (None → sniff).
    """

    data:                Any                     = None
    highlighted_indices: List[int]               = field(default_factory=list)
    active_node:         Optional[str]           = None
    description:         str                     = ""
    kind:                Optional[SnapshotKind]  = None

    @property
    def is_projection(self) -> bool:
        """True when `data` is a picture of the state rather than the state."""
        if self.kind is not None:
            return self.kind is SnapshotKind.PROJECTION
        return looks_like_projection(self.data)

    def to_dict(self) -> dict:
        """JSON-friendly view (projection data serialised, domain data as-is)."""
        return {
            "data":                _serialise(self.data),
            "highlighted_indices": list(self.highlighted_indices),
            "active_node":         self.active_node,
            "description":         self.description,
            "kind":                self.kind.value if self.kind else None,
        }


# A producer is simply a generator of Snapshots.
Producer = Generator[Snapshot, None, None]


# ---------------------------------------------------------------------------
# Constructors used by every algorithm
# ---------------------------------------------------------------------------
def domain(data: Any, highlighted: Optional[List[int]] = None,
           active: Optional[str] = None, description: str = "") -> Snapshot:
    """Snapshot whose payload is the live logical state."""
    return Snapshot(
        data=data,
        highlighted_indices=list(highlighted) if highlighted else [],
        active_node=active,
        description=description,
        kind=SnapshotKind.DOMAIN,
    )


def projection(data: Any, highlighted: Optional[List[int]] = None,
               active: Optional[str] = None, description: str = "") -> Snapshot:
    """Snapshot whose payload is a freshly built picture of the state."""
    return Snapshot(
        data=data,
        highlighted_indices=list(highlighted) if highlighted else [],
        active_node=active,
        description=description,
        kind=SnapshotKind.PROJECTION,
    )


def looks_like_projection(data: Any) -> bool:
    """Structural fallback: graph (nodes + edges) or grid (rows of cells with `row`)."""
    return is_graph_projection(data) or is_grid_projection(data)


# ---------------------------------------------------------------------------
def _serialise(data: Any) -> Any:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if isinstance(data, list):
        return [_serialise(item) for item in data]
    return data
