"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Graph + PlaybackView → SVG string.

The renderer consumes:
  • graph      – the Graph object (node positions, edges)
  • view       – what playback currently shows (MST so far, edge under
                 consideration, edges already skipped, DSU snapshot)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes in everything and gets back a string.
  - Edge colour is a lookup on the edge's role in the current frame:
    default / mst / current / skipped.
  - The DSU panel shows the parent map of the step on screen, so the user
    can watch the trees merge.
"""

import math
from html import escape
from typing import Dict, Optional

from engine.playback import PlaybackView
from graph import Edge, Graph, Node
from ui.export import format_weight


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 600
    bg:     str = "#0d1117"

    # edge role → stroke
    edge_colors: Dict[str, str] = {
        "default":  "#30363d",   # medium grey
        "mst":      "#10b981",   # emerald: accepted into the tree
        "current":  "#f59e0b",   # amber: being considered right now
        "rejected": "#f43f5e",   # rose: the current edge closed a cycle
        "skipped":  "#4b1d24",   # faded rose: skipped earlier
    }

    # node
    node_radius:        int = 22
    node_fill:          str = "#1c2128"
    node_fill_tree:     str = "#0e3b2e"
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 13

    # edge
    edge_width:         int = 2
    edge_width_mst:     int = 4
    edge_arrow_size:    int = 10
    edge_weight_color:  str = "#cbd5e1"
    edge_weight_size:   int = 12
    edge_weight_bg:     str = "#0f172a"

    # overlay panel
    overlay_bg:         str = "#161b22"
    overlay_border:     str = "#30363d"
    overlay_text:       str = "#7d8590"
    overlay_accent:     str = "#0ea5e9"
    overlay_font_size:  int = 12


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Graph,
    view: Optional[PlaybackView] = None,
    config: CanvasConfig = CONFIG,
    show_overlays: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph         : The graph to render.
        view          : Current playback view (or None for the plain graph).
        config        : Visual config.
        show_overlays : If True, render the DSU parent panel.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    tree_nodes = set()
    if view:
        for e in view.visible_mst:
            tree_nodes.update(e.endpoints)

    # -- edges (draw first so nodes sit on top) --
    for edge in graph.edges.values():
        svg_parts.append(_render_edge(graph, edge, edge_role(edge, view), config))

    # -- nodes --
    for node in graph.nodes.values():
        svg_parts.append(_render_node(node, node.id in tree_nodes, config))

    # -- overlays --
    if show_overlays and view and view.current_step:
        svg_parts.append(_render_dsu_panel(view.current_step.parents, config,
                                           x=config.width - 200, y=20))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def edge_role(edge: Edge, view: Optional[PlaybackView]) -> str:
    """Key into CanvasConfig.edge_colors for `edge` at `view`."""
    if view is None:
        return "default"
    if edge.id == view.current_edge_id:
        return "current" if view.current_step.added else "rejected"
    if edge.id in view.visible_edge_ids:
        return "mst"
    if edge.id in view.skipped_ids:
        return "skipped"
    return "default"


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: Node, in_tree: bool, config: CanvasConfig) -> str:
    fill = config.node_fill_tree if in_tree else config.node_fill
    stroke = config.edge_colors["mst"] if in_tree else config.node_stroke
    return "\n".join([
        f'<g class="node" data-id="{escape(node.id)}">',
        f'  <circle cx="{node.x}" cy="{node.y}" r="{config.node_radius}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{config.node_stroke_width}"/>',
        f'  <text x="{node.x}" y="{node.y + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.node_label_color}" font-weight="600">{escape(node.name)}</text>',
        '</g>',
    ])


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(graph: Graph, edge: Edge, role: str, config: CanvasConfig) -> str:
    src_node = graph.get_node(edge.source)
    tgt_node = graph.get_node(edge.target)
    if not src_node or not tgt_node:
        return ""

    stroke = config.edge_colors[role]
    stroke_width = config.edge_width_mst if role in ("mst", "current") else config.edge_width
    dash = ' stroke-dasharray="6 4"' if role in ("skipped", "rejected") else ""

    # shorten the line by node_radius on both ends
    x1, y1 = src_node.x, src_node.y
    x2, y2 = tgt_node.x, tgt_node.y
    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate edge

    ux, uy = dx / dist, dy / dist
    r = config.node_radius
    x1_adj, y1_adj = x1 + ux * r, y1 + uy * r
    x2_adj, y2_adj = x2 - ux * r, y2 - uy * r

    parts = [
        f'<g class="edge edge-{role}" data-id="{edge.id}">',
        f'  <line x1="{x1_adj}" y1="{y1_adj}" x2="{x2_adj}" y2="{y2_adj}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"{dash}/>',
    ]

    if edge.directed:
        parts.append(_render_arrow(x2_adj, y2_adj, ux, uy, stroke, config))

    # weight label (at midpoint, offset perpendicular to the edge)
    mx, my = (x1 + x2) / 2 - uy * 12, (y1 + y2) / 2 + ux * 12
    parts.append(
        f'  <rect x="{mx - 14}" y="{my - 10}" width="28" height="18" rx="4" '
        f'fill="{config.edge_weight_bg}" opacity="0.9"/>'
    )
    parts.append(
        f'  <text x="{mx}" y="{my + 4}" text-anchor="middle" '
        f'font-size="{config.edge_weight_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.edge_weight_color}" font-weight="600">{format_weight(edge.weight)}</text>'
    )
    parts.append('</g>')
    return "\n".join(parts)


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    px, py = -uy, ux
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'<polygon points="{x},{y} {p1_x},{p1_y} {p2_x},{p2_y}" fill="{color}"/>'


# ---------------------------------------------------------------------------
# Overlay Panel
# ---------------------------------------------------------------------------
def _render_dsu_panel(parents, config: CanvasConfig, x: int, y: int) -> str:
    """DSU parent pointers of the step on screen."""
    rows = list(parents.items())
    height = 40 + min(len(rows), 14) * 16 + 10
    parts = [
        f'<g class="dsu-panel" transform="translate({x},{y})">',
        f'  <rect width="180" height="{height}" fill="{config.overlay_bg}" stroke="{config.overlay_border}" '
        f'stroke-width="1" rx="8" opacity="0.95"/>',
        f'  <text x="12" y="22" font-size="13" font-weight="700" fill="{config.overlay_accent}" '
        f'font-family="\'DM Sans\', sans-serif">DSU parents</text>',
    ]
    for i, (nid, parent) in enumerate(rows[:14]):
        marker = " (root)" if nid == parent else ""
        parts.append(
            f'  <text x="16" y="{44 + i * 16}" font-size="{config.overlay_font_size}" '
            f'font-family="\'JetBrains Mono\', monospace" fill="{config.overlay_text}">'
            f'{escape(nid)} → {escape(parent)}{marker}</text>'
        )
    if len(rows) > 14:
        parts.append(
            f'  <text x="16" y="{44 + 14 * 16}" font-size="11" fill="#484f58">… +{len(rows) - 14} more</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
