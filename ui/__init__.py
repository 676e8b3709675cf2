"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, sorted_edges_panel, …
    from ui import mst_csv, steps_csv, mst_text
    from ui import graph_png, pdf_report
"""

from ui.canvas import render_canvas, CanvasConfig

from ui.controls import (
    playback_controls,
    status_panel,
    sorted_edges_panel,
    results_panel,
    pseudocode_viewer,
    steps_table,
)

from ui.export import (
    STEP_HEADER,
    compact_dsu,
    format_weight,
    mst_csv,
    mst_text,
    step_rows,
    steps_csv,
)

from ui.report import draw_graph, graph_png, pdf_report

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "playback_controls",
    "status_panel",
    "sorted_edges_panel",
    "results_panel",
    "pseudocode_viewer",
    "steps_table",
    "STEP_HEADER",
    "compact_dsu",
    "format_weight",
    "mst_csv",
    "mst_text",
    "step_rows",
    "steps_csv",
    "draw_graph",
    "graph_png",
    "pdf_report",
]
