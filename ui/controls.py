"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – reset/prev/play/next/end + speed slider
  • status_panel            – the current step's message
  • sorted_edges_panel      – edges in processing order, coloured by fate
  • results_panel           – visible MST weight + run metrics
  • pseudocode_viewer       – with live line highlighting
  • steps_table             – the step-by-step report as an HTML table

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings; user-supplied names go through escape().
"""

from html import escape
from typing import List, Optional, Sequence

from engine.playback import MAX_SPEED, MIN_SPEED, PlaybackView
from engine.recorder import RunMetrics
from graph.edge import Edge
from ui.export import format_weight


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(view: Optional[PlaybackView] = None) -> str:
    playing = bool(view and view.playing)
    cursor = view.cursor if view else 0
    total = view.total_steps if view else 0
    speed = view.speed if view else 1.0
    play_icon = "⏸" if playing else "▶"
    play_label = "Pause" if playing else "Play"
    finished = view is not None and total > 0 and view.is_complete

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-reset" title="Reset">⟲</button>
        <button id="btn-prev" title="Previous step" {'disabled' if cursor == 0 else ''}>◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step" {'disabled' if cursor >= total else ''}>▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{cursor}</span> / <span id="total-steps">{total}</span>
        {' <span class="finished-badge">COMPLETE</span>' if finished else ''}
      </div>
      <div class="speed-control">
        <label>Animation Speed: <span id="speed-val">{speed:.1f}x</span></label>
        <input type="range" id="speed-slider" min="{MIN_SPEED}" max="{MAX_SPEED}" step="0.1" value="{speed}">
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------
def status_panel(message: str = "") -> str:
    if not message:
        message = "Build a graph (or load the sample) and click <strong>Run Kruskal</strong>."
    else:
        message = escape(message)
    return f"""<div class="status-text">{message}</div>"""


# ---------------------------------------------------------------------------
# Sorted Edges
# ---------------------------------------------------------------------------
def sorted_edges_panel(sorted_edges: Sequence[Edge], view: Optional[PlaybackView] = None) -> str:
    if not sorted_edges:
        return """
        <div class="panel sorted-edges">
          <h3>Sorted Edges</h3>
          <p class="placeholder">Run the algorithm to see the processing order.</p>
        </div>
        """

    in_mst = set(view.visible_edge_ids) if view else set()
    skipped = set(view.skipped_ids) if view else set()
    current = view.current_edge_id if view else None

    rows = []
    for edge in sorted_edges:
        if edge.id == current:
            cls = "edge-current"
        elif edge.id in in_mst:
            cls = "edge-mst"
        elif edge.id in skipped:
            cls = "edge-skipped"
        else:
            cls = "edge-pending"
        rows.append(
            f'<div class="edge-row {cls}" data-id="{edge.id}">'
            f'<span>Edge: {escape(edge.label)}</span>'
            f'<span>Weight: {format_weight(edge.weight)}</span></div>'
        )

    return f"""
    <div class="panel sorted-edges">
      <h3>Sorted Edges</h3>
      {''.join(rows)}
    </div>
    """


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
def results_panel(metrics: Optional[RunMetrics] = None, view: Optional[PlaybackView] = None) -> str:
    if not metrics:
        return """
        <div class="panel results-panel">
          <h3>📊 Results</h3>
          <p class="placeholder">Run Kruskal to see the MST.</p>
        </div>
        """

    visible = format_weight(view.visible_cost) if view else "0"
    shape = "✅ Spanning tree" if metrics.spanning else f"⚠️ Forest of {metrics.components} trees"

    return f"""
    <div class="panel results-panel">
      <h3>📊 Results</h3>
      <div class="big-number" id="visible-cost">{visible}</div>
      <table>
        <tr><td>Final MST Cost:</td><td><strong>{format_weight(metrics.total_cost)}</strong></td></tr>
        <tr><td>Edges Added:</td><td><strong>{metrics.added}</strong></td></tr>
        <tr><td>Edges Skipped:</td><td><strong>{metrics.skipped}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Shape:</td><td><strong>{shape}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Steps Table (report)
# ---------------------------------------------------------------------------
def steps_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    head = "".join(f"<th>{escape(h)}</th>" for h in header)
    body = []
    for row in rows:
        cls = "step-added" if row[3] == "Added" else "step-skipped"
        cells = "".join(
            f'<td class="{cls}">{escape(c)}</td>' if i == 3 else f"<td>{escape(c)}</td>"
            for i, c in enumerate(row)
        )
        body.append(f"<tr>{cells}</tr>")
    return f"""
    <table class="steps-table">
      <thead><tr>{head}</tr></thead>
      <tbody>{''.join(body)}</tbody>
    </table>
    """
