"""
report.py — Image & PDF Reports
================================
The two reports that need real drawing rather than text: a PNG of the
graph and the multi-page step-by-step PDF.  Both are drawn with
matplotlib on the Agg backend, so they work on a headless server.

PDF layout:
  1. Cover              – title, date, summary, the graph at the final step
  2. Graph Summary      – node names + edge table
  3. Sorted Edges       – the processing order
  4. Algorithm Overview – description, complexity, pseudocode
  5. Steps              – one row per step, DSU parents included (landscape)
  6. Final MST          – the plain-text MST report

Like export.py, nothing here computes anything; rows come from step_rows().
"""

import io
from datetime import datetime
from typing import List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from algorithms import KRUSKAL, KruskalResult
from engine.playback import PlaybackView
from graph import Edge, Graph
from ui.canvas import CONFIG, CanvasConfig, edge_role
from ui.export import STEP_HEADER, format_weight, mst_text, step_rows


REPORT_TITLE = "Kruskal's Algorithm — Step-by-step Report"

A4_PORTRAIT  = (8.27, 11.69)
A4_LANDSCAPE = (11.69, 8.27)
MARGIN       = 0.07               # figure fraction
HEADER_FILL  = "#14191f"

EDGE_HEADER       = ["ID", "Source", "Target", "Weight"]
TABLE_ROWS        = 32            # rows per portrait page
STEP_ROWS         = 20            # rows per landscape page
CELL_LIMIT        = 64            # characters before a cell is clipped
STEP_COL_WIDTHS   = [0.05, 0.08, 0.06, 0.07, 0.17, 0.25, 0.07, 0.25]


# ---------------------------------------------------------------------------
# Graph drawing
# ---------------------------------------------------------------------------
def draw_graph(ax, graph: Graph, view: Optional[PlaybackView] = None, config: CanvasConfig = CONFIG) -> None:
    """Draw `graph` onto `ax` with the same edge roles as the SVG canvas."""
    ax.set_facecolor(config.bg)
    ax.set_xlim(0, config.width)
    ax.set_ylim(config.height, 0)          # canvas y grows downwards
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    tree_nodes = set()
    if view:
        for e in view.visible_mst:
            tree_nodes.update(e.endpoints)

    for edge in graph.edges.values():
        role = edge_role(edge, view)
        a, b = graph.nodes[edge.source], graph.nodes[edge.target]
        ax.plot(
            [a.x, b.x], [a.y, b.y],
            color=config.edge_colors[role],
            linewidth=config.edge_width_mst if role in ("mst", "current") else config.edge_width,
            linestyle="--" if role in ("skipped", "rejected") else "-",
            zorder=1,
        )
        ax.text(
            (a.x + b.x) / 2, (a.y + b.y) / 2, format_weight(edge.weight),
            color=config.edge_weight_color, fontsize=8, ha="center", va="center",
            bbox=dict(boxstyle="round,pad=0.2", fc=config.edge_weight_bg, ec="none"),
            zorder=2,
        )

    for node in graph.nodes.values():
        in_tree = node.id in tree_nodes
        ax.scatter(
            [node.x], [node.y], s=config.node_radius ** 2,
            c=config.node_fill_tree if in_tree else config.node_fill,
            edgecolors=config.edge_colors["mst"] if in_tree else config.node_stroke,
            linewidths=config.node_stroke_width, zorder=3,
        )
        ax.text(
            node.x, node.y, _plain(node.name), color=config.node_label_color,
            fontsize=9, fontweight="bold", ha="center", va="center", zorder=4,
        )


def graph_png(graph: Graph, view: Optional[PlaybackView] = None, config: CanvasConfig = CONFIG) -> bytes:
    fig, ax = plt.subplots(figsize=(config.width / 100, config.height / 100), dpi=100)
    try:
        fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        fig.patch.set_facecolor(config.bg)
        draw_graph(ax, graph, view, config)
        buf = io.BytesIO()
        fig.savefig(buf, format="png", facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return buf.getvalue()


# ---------------------------------------------------------------------------
# PDF report
# ---------------------------------------------------------------------------
def pdf_report(
    graph: Graph,
    result: KruskalResult,
    view: Optional[PlaybackView] = None,
    order: Optional[Sequence[str]] = None,
    generated_at: Optional[datetime] = None,
    config: CanvasConfig = CONFIG,
) -> bytes:
    """
    Build the step-by-step report.

    Args:
        graph        : The graph the run was generated from.
        result       : The finished run.
        view         : Playback view the cover drawing shows (usually the final one).
        order        : Node order for the DSU column.
        generated_at : Timestamp printed on the cover (now by default).
    """
    generated_at = generated_at or datetime.now()
    buf = io.BytesIO()
    with PdfPages(buf) as pdf:
        _cover_page(pdf, graph, result, view, generated_at, config)

        names = ", ".join(n.name for n in graph.nodes.values()) or "—"
        _table_pages(pdf, "Graph Summary", EDGE_HEADER, _edge_rows(graph.edge_list()),
                     intro=f"Nodes: {names}", empty="No edges in the graph.")
        _table_pages(pdf, "Sorted Edges (ascending by weight)", EDGE_HEADER,
                     _edge_rows(result.sorted_edges), empty="No edges in the graph.")
        _overview_page(pdf)
        _table_pages(pdf, "Step-by-step Kruskal Execution", STEP_HEADER,
                     step_rows(result.steps, order), empty="No steps: the graph has no edges.",
                     per_page=STEP_ROWS, font_size=6, col_widths=STEP_COL_WIDTHS,
                     size=A4_LANDSCAPE)
        _text_page(pdf, "Final MST", mst_text(result.mst, result.total_cost).splitlines(),
                   family="monospace")

        info = pdf.infodict()
        info["Title"] = REPORT_TITLE
        info["Subject"] = f"MST cost {format_weight(result.total_cost)}"
    return buf.getvalue()


def _cover_page(pdf, graph, result, view, generated_at, config) -> None:
    fig = _page(REPORT_TITLE, size=A4_PORTRAIT, font_size=18)
    fig.text(MARGIN, 0.90, f"Date: {generated_at:%Y-%m-%d %H:%M}", fontsize=11, va="top")
    fig.text(
        MARGIN, 0.87,
        "Summary: this report shows the edges considered by Kruskal's algorithm, the action "
        "(added/skipped), MST progression and total cost.",
        fontsize=10, va="top", wrap=True,
    )
    fig.text(
        MARGIN, 0.81,
        f"Total MST Cost: {format_weight(result.total_cost)}    "
        f"Edges in MST: {len(result.mst)}    Steps: {len(result.steps)}",
        fontsize=11, fontweight="bold", va="top",
    )
    ax = fig.add_axes([MARGIN, 0.30, 1 - 2 * MARGIN, 0.48])
    draw_graph(ax, graph, view, config)
    _save(pdf, fig)


def _overview_page(pdf) -> None:
    lines = [
        "Kruskal's algorithm: sort edges by weight, iterate edges from smallest to largest,",
        "use a Disjoint-Set (Union-Find) to avoid cycles, add edges until V-1 edges are selected.",
        "",
        f"Time complexity:  {KRUSKAL.complexity_time}",
        f"Space complexity: {KRUSKAL.complexity_space}",
        "",
        "Pseudocode:",
        "",
    ] + KRUSKAL.pseudocode
    _text_page(pdf, "Algorithm Overview", lines, family="monospace")


def _edge_rows(edges: Sequence[Edge]) -> List[List[str]]:
    return [[str(e.id), e.source, e.target, format_weight(e.weight)] for e in edges]


# ---------------------------------------------------------------------------
# Page helpers
# ---------------------------------------------------------------------------
def _page(title: str, size=A4_PORTRAIT, font_size: int = 14):
    fig = plt.figure(figsize=size)
    fig.text(MARGIN, 0.95, _plain(title), fontsize=font_size, fontweight="bold", va="top")
    return fig


def _text_page(pdf, title: str, lines: Sequence[str], family: str = "sans-serif") -> None:
    fig = _page(title)
    fig.text(MARGIN, 0.90, _plain("\n".join(lines)), fontsize=9, family=family,
             va="top", linespacing=1.5)
    _save(pdf, fig)


def _table_pages(
    pdf,
    title: str,
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    intro: Optional[str] = None,
    empty: str = "",
    per_page: int = TABLE_ROWS,
    font_size: int = 8,
    col_widths: Optional[Sequence[float]] = None,
    size=A4_PORTRAIT,
) -> None:
    """One table split over as many pages as it needs; `empty` is shown when there are no rows."""
    chunks = [rows[i:i + per_page] for i in range(0, len(rows), per_page)] or [[]]
    for n, chunk in enumerate(chunks):
        fig = _page(title if n == 0 else f"{title} (cont.)", size=size)
        top = 0.90
        if intro and n == 0:
            fig.text(MARGIN, top, _plain(intro), fontsize=10, va="top", wrap=True)
            top = 0.85
        if not chunk:
            fig.text(MARGIN, top, empty, fontsize=10, va="top")
            _save(pdf, fig)
            continue

        ax = fig.add_axes([MARGIN, 0.05, 1 - 2 * MARGIN, top - 0.05])
        ax.set_axis_off()
        table = ax.table(
            cellText=[[_cell(c) for c in row] for row in chunk],
            colLabels=list(header),
            colWidths=list(col_widths) if col_widths else None,
            cellLoc="left",
            loc="upper center",
        )
        table.auto_set_font_size(False)
        table.set_fontsize(font_size)
        table.scale(1, 1.4)
        for (r, _), cell in table.get_celld().items():
            if r == 0:
                cell.set_facecolor(HEADER_FILL)
                cell.get_text().set_color("white")
        _save(pdf, fig)


def _save(pdf, fig) -> None:
    try:
        pdf.savefig(fig)
    finally:
        plt.close(fig)


def _cell(text: str) -> str:
    if len(text) > CELL_LIMIT:
        text = text[:CELL_LIMIT - 1] + "…"
    return _plain(text)


def _plain(text: str) -> str:
    # a pair of "$" would switch matplotlib into mathtext
    return text.replace("$", r"\$")
