"""
canvas.py — SVG Snapshot Renderer
=================================
Pure rendering function: Visualizer kind + Snapshot → SVG string.

The renderer consumes:
  • visualizer – which drawer to use (bar-chart, grid-2d, primitive-graph, terrain-3d)
  • snapshot   – the current Snapshot (data, highlights, active node)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless: the caller passes in
    everything it needs and gets back a string.
  - Every drawer first checks the shape of `snapshot.data`.  Data the
    drawer cannot display yields a placeholder SVG and a logged warning;
    rendering never raises back into the engine.
  - Colours come from projection Tints when a producer set one, otherwise
    from the state palette below.
  - "terrain-3d" is drawn as a top-down height map (elevation bands),
    the 2-D stand-in for the isometric view.
"""

import html
import logging
import math
from typing import Any, Dict, Optional

from algorithms import Visualizer
from algorithms.step import Snapshot
from projection.edge import GraphEdge
from projection.graph import GraphProjection
from projection.grid import GridCell, is_grid_projection
from projection.node import GraphNode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 500
    bg:     str = "#0d1117"
    pad:    int = 20

    font:       str = "'DM Sans', sans-serif"
    mono_font:  str = "'JetBrains Mono', monospace"
    text_color: str = "#e6edf3"
    muted_text: str = "#7d8590"

    # bar chart
    bar_color:        str = "#0ea5e9"   # cyan
    bar_highlight:    str = "#f43f5e"   # rose, compared / swapped
    bar_gap:          int = 2
    bar_label_limit:  int = 40          # value labels only for short arrays

    # grid (state → fill)
    cell_colors: Dict[str, str] = {
        "empty":   "#161b22",
        "wall":    "#334155",
        "visited": "#0e7490",
        "path":    "#facc15",
        "start":   "#22c55e",
        "end":     "#ef4444",
    }
    cell_stroke:   str = "#21262d"
    cell_active:   str = "#06b6d4"

    # node
    node_radius:        int = 20
    node_fill:          str = "#1c2128"
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_active:        str = "#06b6d4"   # bright teal focus ring
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 13
    node_label_weight:  str = "600"

    # edge
    edge_color:         str = "#30363d"
    edge_width:         int = 2
    edge_arrow_size:    int = 10
    edge_weight_color:  str = "#7d8590"
    edge_weight_size:   int = 12
    edge_weight_bg:     str = "#161b22"

    # terrain elevation bands (upper bound as a fraction of the range → fill)
    terrain_bands = [
        (0.20, "#1e3a8a"),   # deep water
        (0.35, "#3b82f6"),   # shallow water
        (0.45, "#fde68a"),   # sand
        (0.65, "#22c55e"),   # grass
        (0.85, "#78716c"),   # rock
        (1.01, "#f8fafc"),   # snow
    ]


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_snapshot(
    visualizer: Visualizer,
    snapshot: Optional[Snapshot],
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        visualizer : The algorithm's declared visualizer kind.
        snapshot   : Current snapshot (or None before anything is loaded).
        config     : Visual config.
    """
    if snapshot is None:
        return render_placeholder("Pick an algorithm to begin.", config)

    drawer = _DRAWERS.get(visualizer)
    if drawer is None:
        logger.warning("No drawer for visualizer %r", visualizer)
        return render_placeholder(f"Cannot display: unknown visualizer {visualizer}", config)

    if not _SHAPES[visualizer](snapshot.data):
        logger.warning(
            "Cannot display %s data on the %s visualizer",
            type(snapshot.data).__name__, visualizer.value,
        )
        return render_placeholder(snapshot.description or "Cannot display this state.", config)

    body = drawer(snapshot, config)
    return _svg(body, config)


def render_placeholder(message: str, config: CanvasConfig = CONFIG) -> str:
    body = (
        f'<text x="{config.width / 2}" y="{config.height / 2}" text-anchor="middle" '
        f'font-size="16" font-family="{config.font}" fill="{config.muted_text}">'
        f'{html.escape(message)}</text>'
    )
    return _svg(body, config, css_class="placeholder")


def _svg(body: str, config: CanvasConfig, css_class: str = "canvas") -> str:
    return "\n".join([
        f'<svg class="{css_class}" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
        body,
        "</svg>",
    ])


# ---------------------------------------------------------------------------
# Shape checks
# ---------------------------------------------------------------------------
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_bar_data(data: Any) -> bool:
    return isinstance(data, list) and all(_is_number(v) for v in data)


def _is_cell_grid(data: Any) -> bool:
    return is_grid_projection(data) and isinstance(data[0][0], GridCell)


def _is_graph(data: Any) -> bool:
    return isinstance(data, GraphProjection)


def _is_heightmap(data: Any) -> bool:
    return (
        isinstance(data, list) and len(data) > 0
        and all(isinstance(row, list) and row and all(_is_number(v) for v in row) for row in data)
    )


# ---------------------------------------------------------------------------
# Bar chart
# ---------------------------------------------------------------------------
def _render_bars(snapshot: Snapshot, config: CanvasConfig) -> str:
    values = snapshot.data
    if not values:
        return ""

    highlighted = set(snapshot.highlighted_indices)
    top = max(max(values), 1)
    usable_w = config.width - 2 * config.pad
    usable_h = config.height - 2 * config.pad - 16
    bar_w = usable_w / len(values)
    labels = len(values) <= config.bar_label_limit

    parts = ['<g class="bars">']
    for i, value in enumerate(values):
        h = max(1.0, usable_h * max(value, 0) / top)
        x = config.pad + i * bar_w
        y = config.height - config.pad - h
        fill = config.bar_highlight if i in highlighted else config.bar_color
        parts.append(
            f'  <rect x="{x:.1f}" y="{y:.1f}" width="{max(1.0, bar_w - config.bar_gap):.1f}" '
            f'height="{h:.1f}" fill="{fill}" rx="2"/>'
        )
        if labels:
            parts.append(
                f'  <text x="{x + bar_w / 2:.1f}" y="{y - 4:.1f}" text-anchor="middle" '
                f'font-size="10" font-family="{config.mono_font}" fill="{config.muted_text}">{value}</text>'
            )
    parts.append('</g>')
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
def _cell_fill(cell: GridCell, config: CanvasConfig) -> str:
    if cell.color is not None:
        return cell.color.value
    if cell.is_start:
        return config.cell_colors["start"]
    if cell.is_end:
        return config.cell_colors["end"]
    if cell.is_path:
        return config.cell_colors["path"]
    if cell.is_wall:
        return config.cell_colors["wall"]
    if cell.is_visited:
        return config.cell_colors["visited"]
    return config.cell_colors["empty"]


def _render_grid(snapshot: Snapshot, config: CanvasConfig) -> str:
    grid = snapshot.data
    rows, cols = len(grid), len(grid[0])
    size = min((config.width - 2 * config.pad) / cols, (config.height - 2 * config.pad) / rows)
    ox = (config.width - cols * size) / 2
    oy = (config.height - rows * size) / 2

    parts = ['<g class="grid">']
    for row in grid:
        for cell in row:
            x = ox + cell.col * size
            y = oy + cell.row * size
            active = cell.key == snapshot.active_node
            stroke = config.cell_active if active else config.cell_stroke
            parts.append(
                f'  <rect x="{x:.1f}" y="{y:.1f}" width="{size:.1f}" height="{size:.1f}" '
                f'fill="{_cell_fill(cell, config)}" stroke="{stroke}" '
                f'stroke-width="{3 if active else 1}" data-key="{cell.key}"/>'
            )
            if cell.value != "":
                parts.append(
                    f'  <text x="{x + size / 2:.1f}" y="{y + size / 2 + size * 0.18:.1f}" '
                    f'text-anchor="middle" font-size="{size * 0.5:.1f}" font-family="{config.font}" '
                    f'fill="{config.text_color}">{html.escape(str(cell.value))}</text>'
                )
    parts.append('</g>')
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Graph (node / edge primitives)
# ---------------------------------------------------------------------------
def _render_graph(snapshot: Snapshot, config: CanvasConfig) -> str:
    graph: GraphProjection = snapshot.data
    parts = ['<g class="graph">']
    # edges first so nodes sit on top
    for edge in graph.edges:
        parts.append(_render_edge(graph, edge, config))
    for node in graph.nodes:
        parts.append(_render_node(node, node.is_active or node.id == snapshot.active_node, config))
    parts.append('</g>')
    return "\n".join(parts)


def _render_node(node: GraphNode, active: bool, config: CanvasConfig) -> str:
    fill = node.color.value if node.color is not None else config.node_fill

    stroke = config.node_stroke
    stroke_width = config.node_stroke_width
    glow = ""
    if active:
        stroke = config.node_active
        stroke_width = 3
        glow = (
            f'<circle cx="{node.x}" cy="{node.y}" r="{config.node_radius + 8}" fill="none" '
            f'stroke="{config.node_active}" stroke-width="2" opacity="0.3"/>'
        )

    cx, cy = node.x, node.y
    r = config.node_radius

    parts = [
        f'<g class="node" data-id="{html.escape(str(node.id))}">',
        glow,
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <text x="{cx}" y="{cy + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="{config.font}" '
        f'fill="{config.node_label_color}" font-weight="{config.node_label_weight}">'
        f'{html.escape(str(node.value))}</text>',
        '</g>',
    ]
    return "\n".join(parts)


def _render_edge(graph: GraphProjection, edge: GraphEdge, config: CanvasConfig) -> str:
    src_node = graph.get_node(edge.source)
    tgt_node = graph.get_node(edge.target)
    if not src_node or not tgt_node:
        return ""

    stroke = edge.color.value if edge.color is not None else config.edge_color

    x1, y1 = src_node.x, src_node.y
    x2, y2 = tgt_node.x, tgt_node.y

    # shorten the line by node_radius on both ends
    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate edge

    ux, uy = dx / dist, dy / dist
    r = config.node_radius

    x1_adj = x1 + ux * r
    y1_adj = y1 + uy * r
    x2_adj = x2 - ux * r
    y2_adj = y2 - uy * r

    # a pair of opposite directed edges (list next/prev) is drawn side by side
    if edge.directed and graph.edge_between(edge.target, edge.source) is not None:
        x1_adj, y1_adj = x1_adj - uy * 6, y1_adj + ux * 6
        x2_adj, y2_adj = x2_adj - uy * 6, y2_adj + ux * 6

    parts = [f'<g class="edge" data-source="{edge.source}" data-target="{edge.target}">']
    parts.append(
        f'  <line x1="{x1_adj:.1f}" y1="{y1_adj:.1f}" x2="{x2_adj:.1f}" y2="{y2_adj:.1f}" '
        f'stroke="{stroke}" stroke-width="{config.edge_width}"/>'
    )

    if edge.directed:
        parts.append(_render_arrow(x2_adj, y2_adj, ux, uy, stroke, config))

    if edge.weight is not None:
        mx = (x1 + x2) / 2
        my = (y1 + y2) / 2
        # offset label perpendicular to edge
        perp_x = -uy * 12
        perp_y = ux * 12
        parts.append(
            f'  <circle cx="{mx + perp_x:.1f}" cy="{my + perp_y:.1f}" r="12" '
            f'fill="{config.edge_weight_bg}" opacity="0.9"/>'
        )
        parts.append(
            f'  <text x="{mx + perp_x:.1f}" y="{my + perp_y + 4:.1f}" text-anchor="middle" '
            f'font-size="{config.edge_weight_size}" font-family="{config.font}" '
            f'fill="{config.edge_weight_color}" font-weight="600">{_weight_label(edge.weight)}</text>'
        )

    parts.append('</g>')
    return "\n".join(parts)


def _weight_label(weight: float) -> str:
    return str(int(weight)) if float(weight).is_integer() else f"{weight:.1f}"


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    # perpendicular
    px, py = -uy, ux
    # two points of the triangle
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'<polygon points="{x:.1f},{y:.1f} {p1_x:.1f},{p1_y:.1f} {p2_x:.1f},{p2_y:.1f}" fill="{color}"/>'


# ---------------------------------------------------------------------------
# Terrain (top-down height map)
# ---------------------------------------------------------------------------
def _band(fraction: float, config: CanvasConfig) -> str:
    for upper, colour in config.terrain_bands:
        if fraction < upper:
            return colour
    return config.terrain_bands[-1][1]


def _render_terrain(snapshot: Snapshot, config: CanvasConfig) -> str:
    heightmap = snapshot.data
    rows, cols = len(heightmap), max(len(row) for row in heightmap)
    low = min(min(row) for row in heightmap)
    high = max(max(row) for row in heightmap)
    span = (high - low) or 1

    size = min((config.width - 2 * config.pad) / cols, (config.height - 2 * config.pad) / rows)
    ox = (config.width - cols * size) / 2
    oy = (config.height - rows * size) / 2

    parts = ['<g class="terrain">']
    for r, row in enumerate(heightmap):
        for c, height in enumerate(row):
            parts.append(
                f'  <rect x="{ox + c * size:.1f}" y="{oy + r * size:.1f}" '
                f'width="{size + 0.5:.1f}" height="{size + 0.5:.1f}" '
                f'fill="{_band((height - low) / span, config)}"/>'
            )
    parts.append('</g>')
    return "\n".join(parts)


_DRAWERS = {
    Visualizer.BAR_CHART:       _render_bars,
    Visualizer.GRID_2D:         _render_grid,
    Visualizer.PRIMITIVE_GRAPH: _render_graph,
    Visualizer.TERRAIN_3D:      _render_terrain,
}

_SHAPES = {
    Visualizer.BAR_CHART:       _is_bar_data,
    Visualizer.GRID_2D:         _is_cell_grid,
    Visualizer.PRIMITIVE_GRAPH: _is_graph,
    Visualizer.TERRAIN_3D:      _is_heightmap,
}
