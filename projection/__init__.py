"""
projection/
-----------
Renderer-friendly shapes computed from an algorithm's logical state.
Public API:

    from projection import GraphProjection, GraphNode, GraphEdge, Tint
    from projection import GridCell, copy_grid, make_grid
    from projection import is_graph_projection, is_grid_projection
"""

from projection.node  import GraphNode, Tint
from projection.edge  import GraphEdge
from projection.graph import GraphProjection, is_graph_projection
from projection.grid  import (
    GridCell, Grid, INF, cell_key, make_grid, copy_grid,
    grid_neighbours, count_cells, is_grid_projection,
)

__all__ = [
    "GraphNode",       "GraphEdge",   "GraphProjection", "Tint",
    "GridCell",        "Grid",        "INF",
    "cell_key",        "make_grid",   "copy_grid",
    "grid_neighbours", "count_cells",
    "is_graph_projection", "is_grid_projection",
]
