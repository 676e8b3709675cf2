"""
main.py — Kruskal MST Visualizer Flask App
===========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/graph              – current graph
  POST /api/graph              – replace the graph (nodes + edges)
  POST /api/graph/sample       – load the seven-node sample
  POST /api/graph/import       – import from adjacency-list text
  POST /api/graph/clear        – empty graph
  POST /api/graph/node         – add a node            (DELETE /api/graph/node/<id> removes it)
  POST /api/graph/node/<id>/move – reposition a node (keeps the run)
  POST /api/graph/edge         – add an edge           (DELETE /api/graph/edge/<id> removes it)
  POST /api/run                – generate Kruskal's steps
  POST /api/step/<action>      – next / prev / reset / end / play / pause / toggle
  POST /api/config/speed       – speed multiplier or preset
  GET  /api/state              – current playback state (polled; drives autoplay)
  GET  /api/export/<name>      – mst.csv / mst.txt / steps.csv / steps.html / run.json /
                                 report.pdf / graph.svg / graph.png

State management:
  Each browser gets a random id in the Flask session cookie.  The id keys
  an in-process VisualizerSession (at most MAX_SESSIONS, least recently used
  evicted first) holding:
    • graph       – the editor Graph
    • recorder    – last run (steps, metrics)
    • controller  – PlaybackController + its TickScheduler
  Autoplay is cooperative: every /api/state poll runs whatever autoplay
  action has come due, so the browser's poll loop is the timer.
"""

import logging
import math
import os
import sys
import threading
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Union

from flask import (
    Blueprint, Flask, Response, current_app, jsonify, render_template_string,
    request, session,
)

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import KRUSKAL, KruskalError, pseudocode_line
from config import DefaultConfig
from engine import (
    MAX_SPEED, MIN_SPEED, PlaybackController, PlaybackView, Recorder, TickScheduler, final_view,
)
from graph import Graph
from ui import (
    STEP_HEADER,
    mst_csv,
    mst_text,
    playback_controls,
    pseudocode_viewer,
    render_canvas,
    results_panel,
    sorted_edges_panel,
    status_panel,
    step_rows,
    steps_csv,
    steps_table,
    CanvasConfig,
    graph_png,
    pdf_report,
)

log = logging.getLogger(__name__)

bp = Blueprint("visualizer", __name__)


# ---------------------------------------------------------------------------
# Per-browser state
# ---------------------------------------------------------------------------
class VisualizerSession:
    """One user's graph, last run and playback cursor."""

    def __init__(self, base_interval: float, speed: float, clock: Callable[[], float]):
        self.graph:      Graph              = Graph.sample()
        self.recorder:   Recorder           = Recorder()
        self.scheduler:  TickScheduler      = TickScheduler(clock)
        self.controller: PlaybackController = PlaybackController(
            scheduler=self.scheduler, base_interval=base_interval, speed=speed,
        )

    def replace_graph(self, graph: Graph) -> None:
        self.graph = graph
        self.discard_run()

    def discard_run(self) -> None:
        """Graph changed → the old run no longer applies."""
        self.recorder = Recorder()
        self.controller.load(())

    def close(self) -> None:
        self.controller.pause()
        self.scheduler.cancel_all()

    def run(self) -> None:
        # generate first: a failed run leaves the previous one on screen
        recorder = Recorder()
        recorder.run(self.graph)
        self.recorder = recorder
        self.controller.load(recorder.result)


class SessionStore:
    """
    In-process VisualizerSessions keyed by browser id.

    Holds at most MAX_SESSIONS; past that the least recently used session
    is dropped, and its browser starts over with the sample graph.
    """

    def __init__(self, config):
        self._config = config
        self._max_size = max(1, int(config["MAX_SESSIONS"]))
        self._sessions: "OrderedDict[str, VisualizerSession]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, sid: str) -> VisualizerSession:
        with self._lock:
            vs = self._sessions.get(sid)
            if vs is not None:
                self._sessions.move_to_end(sid)
                return vs
            vs = self._sessions[sid] = VisualizerSession(
                base_interval=float(self._config["BASE_INTERVAL_SECONDS"]),
                speed=float(self._config["DEFAULT_SPEED"]),
                clock=self._config.get("CLOCK") or time.monotonic,
            )
            log.debug("new visualizer session %s", sid)
            while len(self._sessions) > self._max_size:
                old_sid, old = self._sessions.popitem(last=False)
                old.close()
                log.info("evicted visualizer session %s (limit %d)", old_sid, self._max_size)
            return vs

    def __contains__(self, sid: object) -> bool:
        return sid in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


def get_session() -> VisualizerSession:
    if "sid" not in session:
        session["sid"] = uuid.uuid4().hex
    return current_app.extensions["kruskal_sessions"].get(session["sid"])


def canvas_config() -> CanvasConfig:
    cfg = CanvasConfig()
    cfg.width = current_app.config["CANVAS_WIDTH"]
    cfg.height = current_app.config["CANVAS_HEIGHT"]
    return cfg


def state_payload(vs: VisualizerSession) -> dict:
    """Everything the page needs to redraw after any change."""
    has_run = vs.recorder.has_run
    view = vs.controller.view() if has_run else None
    sorted_edges = vs.recorder.result.sorted_edges if has_run else ()
    payload = {
        "has_run":     has_run,
        "graph":       vs.graph.to_dict(),
        "svg":         render_canvas(vs.graph, view, config=canvas_config()),
        "playback":    playback_controls(view),
        "status":      status_panel(view.message if view else ""),
        "sorted":      sorted_edges_panel(sorted_edges, view),
        "results":     results_panel(vs.recorder.metrics, view),
        "pseudocode":  pseudocode_viewer(KRUSKAL.pseudocode,
                                         pseudocode_line(view.current_step) if view else -1),
    }
    if view:
        payload.update(view.to_dict())
    return payload


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@bp.route("/")
def index():
    vs = get_session()
    return render_template_string(INDEX_TEMPLATE, algo=KRUSKAL, **state_payload(vs))


# ---------------------------------------------------------------------------
# API: Graph Editing
# ---------------------------------------------------------------------------
@bp.route("/api/graph", methods=["GET"])
def api_graph_get():
    return jsonify(get_session().graph.to_dict())


@bp.route("/api/graph", methods=["POST"])
def api_graph_replace():
    vs = get_session()
    vs.replace_graph(Graph.from_dict(request.get_json(force=True) or {}))
    return jsonify(state_payload(vs))


@bp.route("/api/graph/sample", methods=["POST"])
def api_graph_sample():
    vs = get_session()
    vs.replace_graph(Graph.sample())
    return jsonify(state_payload(vs))


@bp.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    vs = get_session()
    text = (request.get_json(force=True) or {}).get("text", "")
    vs.replace_graph(Graph.from_adjacency_list(text))
    return jsonify(state_payload(vs))


@bp.route("/api/graph/clear", methods=["POST"])
def api_graph_clear():
    vs = get_session()
    vs.replace_graph(Graph())
    return jsonify(state_payload(vs))


@bp.route("/api/graph/node", methods=["POST"])
def api_node_add():
    vs = get_session()
    data = request.get_json(force=True) or {}
    node_id = str(data.get("id") or data.get("name") or "").strip()
    name = str(data["name"]).strip() if data.get("name") else None
    vs.graph.create_node(node_id, _coord(data, "x"), _coord(data, "y"), name=name)
    vs.discard_run()
    return jsonify(state_payload(vs))


@bp.route("/api/graph/node/<node_id>", methods=["DELETE"])
def api_node_delete(node_id: str):
    vs = get_session()
    if vs.graph.get_node(node_id) is None:
        return jsonify({"error": f"Unknown node: {node_id}"}), 404
    vs.graph.remove_node(node_id)
    vs.discard_run()
    return jsonify(state_payload(vs))


@bp.route("/api/graph/node/<node_id>/move", methods=["POST"])
def api_node_move(node_id: str):
    # layout only: the run stays valid
    vs = get_session()
    data = request.get_json(force=True) or {}
    vs.graph.move_node(node_id, _coord(data, "x"), _coord(data, "y"))
    return jsonify(state_payload(vs))


@bp.route("/api/graph/edge", methods=["POST"])
def api_edge_add():
    vs = get_session()
    data = request.get_json(force=True) or {}
    vs.graph.create_edge(str(data.get("from", "")), str(data.get("to", "")), data.get("weight"))
    vs.discard_run()
    return jsonify(state_payload(vs))


@bp.route("/api/graph/edge/<int:edge_id>", methods=["DELETE"])
def api_edge_delete(edge_id: int):
    vs = get_session()
    if vs.graph.get_edge(edge_id) is None:
        return jsonify({"error": f"Unknown edge: {edge_id}"}), 404
    vs.graph.remove_edge(edge_id)
    vs.discard_run()
    return jsonify(state_payload(vs))


def _coord(data: dict, key: str) -> float:
    try:
        value = float(data.get(key) or 0.0)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a number, got {data.get(key)!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite, got {data.get(key)!r}")
    return value


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@bp.route("/api/run", methods=["POST"])
def api_run():
    vs = get_session()
    vs.run()
    current_app.logger.info(
        "run: %d steps, MST cost %s", vs.recorder.metrics.total_steps, vs.recorder.metrics.total_cost,
    )
    return jsonify(state_payload(vs))


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
STEP_ACTIONS = {
    "next":   lambda c: c.step_forward(),
    "prev":   lambda c: c.step_backward(),
    "reset":  lambda c: c.reset(),
    "end":    lambda c: c.jump_to_end(),
    "play":   lambda c: c.play(),
    "pause":  lambda c: c.pause(),
    "toggle": lambda c: c.toggle_play(),
}


@bp.route("/api/step/<action>", methods=["POST"])
def api_step(action: str):
    vs = get_session()
    if action not in STEP_ACTIONS:
        return jsonify({"error": f"Unknown action: {action}"}), 404
    if not vs.recorder.has_run:
        return jsonify({"error": "Run the algorithm first"}), 409
    vs.scheduler.run_due()
    STEP_ACTIONS[action](vs.controller)
    return jsonify(state_payload(vs))


@bp.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    vs = get_session()
    data = request.get_json(force=True) or {}
    if "preset" in data:
        vs.controller.set_speed_preset(data["preset"])
    else:
        try:
            speed = float(data.get("speed", 1.0))
        except (TypeError, ValueError):
            raise ValueError(f"Speed must be a number, got {data.get('speed')!r}") from None
        if not math.isfinite(speed):
            raise ValueError(f"Speed must be finite, got {data.get('speed')!r}")
        vs.controller.set_speed(min(MAX_SPEED, max(MIN_SPEED, speed)))
    return jsonify({"speed": vs.controller.speed, "interval": vs.controller.interval})


@bp.route("/api/state", methods=["GET"])
def api_state():
    vs = get_session()
    vs.scheduler.run_due()
    return jsonify(state_payload(vs))


# ---------------------------------------------------------------------------
# API: Reports
# ---------------------------------------------------------------------------
@bp.route("/api/export/<name>", methods=["GET"])
def api_export(name: str):
    vs = get_session()
    # images work before a run too: they show the plain graph
    if name == "graph.svg":
        svg = render_canvas(vs.graph, _export_view(vs), config=canvas_config(), show_overlays=False)
        return _download(svg, "image/svg+xml", "graph_mst.svg")
    if name == "graph.png":
        return _download(graph_png(vs.graph, _export_view(vs), config=canvas_config()),
                         "image/png", "graph_mst.png")
    if not vs.recorder.has_run:
        return jsonify({"error": "No algorithm steps available. Run Kruskal first."}), 409

    result = vs.recorder.result
    order = vs.graph.node_ids()
    if name == "mst.csv":
        return _download(mst_csv(result.mst), "text/csv", "mst_results.csv")
    if name == "mst.txt":
        return _download(mst_text(result.mst, result.total_cost), "text/plain", "mst_results.txt")
    if name == "steps.csv":
        return _download(steps_csv(result.steps, order), "text/csv", "kruskal_steps.csv")
    if name == "steps.html":
        table = steps_table(STEP_HEADER, step_rows(result.steps, order))
        return render_template_string(STEPS_TEMPLATE, table=table)
    if name == "run.json":
        return jsonify(vs.recorder.export())
    if name == "report.pdf":
        body = pdf_report(vs.graph, result, _export_view(vs), order, config=canvas_config())
        current_app.logger.info("pdf report: %d steps, %d bytes", len(result.steps), len(body))
        return _download(body, "application/pdf", "kruskal_report.pdf")
    return jsonify({"error": f"Unknown report: {name}"}), 404


def _export_view(vs: VisualizerSession) -> Optional[PlaybackView]:
    """Reports show the finished run, whatever step is on screen."""
    return final_view(vs.recorder.result) if vs.recorder.has_run else None


def _download(body: Union[str, bytes], mimetype: str, filename: str) -> Response:
    return Response(body, mimetype=mimetype,
                    headers={"Content-Disposition": f"attachment; filename={filename}"})


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
def _bad_request(exc: Exception):
    current_app.logger.warning("%s %s rejected: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc), "type": type(exc).__name__}), 400


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("KRUSKAL")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.extensions["kruskal_sessions"] = SessionStore(app.config)
    app.register_blueprint(bp)
    # KruskalError covers InvalidGraph / InvalidEdge; ValueError covers bad speeds
    app.register_error_handler(KruskalError, _bad_request)
    app.register_error_handler(ValueError, _bad_request)
    return app


# ---------------------------------------------------------------------------
# HTML Templates
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ algo.label }} Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    :root {
      --bg-dark: #0d1117; --bg-darker: #010409; --bg-panel: #161b22;
      --border: #30363d; --text-primary: #e6edf3; --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9; --accent-emerald: #10b981;
      --accent-amber: #f59e0b; --accent-rose: #f43f5e;
    }
    body { font-family: 'DM Sans', -apple-system, sans-serif; background: var(--bg-darker);
           color: var(--text-primary); display: flex; height: 100vh; overflow: hidden; }
    #sidebar, #rightbar { width: 320px; background: var(--bg-dark); overflow-y: auto; padding: 20px 16px; }
    #sidebar { border-right: 1px solid var(--border); }
    #rightbar { border-left: 1px solid var(--border); }
    #main { flex: 1; display: flex; flex-direction: column; }
    #canvas-svg { flex: 1; display: flex; align-items: center; justify-content: center; }
    #pseudocode { padding: 16px; border-top: 1px solid var(--border); background: var(--bg-dark); }
    .panel { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 12px;
             padding: 14px; margin-bottom: 16px; }
    .panel h3 { font-size: 14px; margin-bottom: 10px; color: var(--accent-cyan); }
    button { background: #1c2128; color: var(--text-primary); border: 1px solid var(--border);
             border-radius: 6px; padding: 6px 10px; cursor: pointer; }
    button:disabled { opacity: 0.3; }
    .btn-primary { background: var(--accent-cyan); border: none; width: 100%; margin-top: 8px; }
    input { background: #0d1117; color: var(--text-primary); border: 1px solid var(--border);
            border-radius: 6px; padding: 5px 8px; margin: 3px 0; }
    #node-name { width: 100%; }
    textarea { width: 100%; background: #0d1117; color: var(--text-primary); border: 1px solid var(--border); }
    .edge-row { display: flex; justify-content: space-between; padding: 6px; border-radius: 6px;
                margin-bottom: 4px; font-size: 13px; color: var(--text-secondary); }
    .edge-current { color: var(--accent-amber); background: rgba(245,158,11,0.12); }
    .edge-mst { color: var(--accent-emerald); background: rgba(16,185,129,0.12); }
    .edge-skipped { color: var(--accent-rose); background: rgba(244,63,94,0.12); }
    .big-number { font-size: 36px; font-weight: 700; color: var(--accent-cyan); }
    .code-line { font-family: 'JetBrains Mono', monospace; font-size: 12px; white-space: pre;
                 color: var(--text-secondary); }
    .code-line.highlight { color: var(--accent-amber); }
    .status-text { font-size: 13px; color: var(--text-secondary); line-height: 1.5; }
    .error { color: var(--accent-rose); font-size: 13px; min-height: 1em; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div class="panel">
      <h3>🌲 {{ algo.label }}</h3>
      <p class="status-text">{{ algo.description }}</p>
      <p class="status-text">Time {{ algo.complexity_time }}, space {{ algo.complexity_space }}</p>
    </div>
    <div class="panel">
      <h3>🧱 Graph</h3>
      <button id="btn-sample">Load Sample</button>
      <button id="btn-clear">Clear</button>
      <textarea id="import-text" rows="6" placeholder="A: B(2) C(5)&#10;B: D(3)"></textarea>
      <button id="btn-import">Import Adjacency List</button>
      <button id="btn-run" class="btn-primary">▶ Run Kruskal</button>
      <p id="error" class="error"></p>
    </div>
    <div class="panel">
      <h3>✏️ Edit</h3>
      <input id="node-name" placeholder="New node name, then click the canvas">
      <input id="edge-from" placeholder="From" size="4">
      <input id="edge-to" placeholder="To" size="4">
      <input id="edge-weight" placeholder="Weight" size="5">
      <button id="btn-add-edge">Add Edge</button>
      <input id="del-node" placeholder="Node" size="4">
      <button id="btn-del-node">Delete Node</button>
      <input id="del-edge" placeholder="Edge #" size="4">
      <button id="btn-del-edge">Delete Edge</button>
    </div>
    <div id="playback">{{ playback|safe }}</div>
    <div class="panel">
      <h3>⬇ Reports</h3>
      <a href="/api/export/mst.csv">MST CSV</a> ·
      <a href="/api/export/mst.txt">MST Text</a> ·
      <a href="/api/export/steps.csv">Steps CSV</a> ·
      <a href="/api/export/steps.html" target="_blank">Steps Report</a> ·
      <a href="/api/export/run.json">JSON</a> ·
      <a href="/api/export/report.pdf">PDF Report</a> ·
      <a href="/api/export/graph.svg">SVG</a> ·
      <a href="/api/export/graph.png">PNG</a>
    </div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="pseudocode">{{ pseudocode|safe }}</div>
  </div>

  <div id="rightbar">
    <div class="panel"><h3>Algorithm Status</h3><div id="status">{{ status|safe }}</div></div>
    <div id="sorted">{{ sorted|safe }}</div>
    <div id="results">{{ results|safe }}</div>
  </div>

  <script>
    let pollTimer = null;

    async function call(method, url, data) {
      const res = await fetch(url, {
        method: method,
        headers: {'Content-Type': 'application/json'},
        body: data === undefined ? undefined : JSON.stringify(data),
      });
      const body = await res.json();
      document.getElementById('error').textContent = body.error || '';
      if (!body.error) redraw(body);
      return body;
    }

    function redraw(s) {
      for (const key of ['svg', 'playback', 'status', 'sorted', 'results', 'pseudocode']) {
        if (s[key] !== undefined) {
          const id = key === 'svg' ? 'canvas-svg' : key;
          document.getElementById(id).innerHTML = s[key];
        }
      }
      bindPlayback();
      if (s.playing && !pollTimer) pollTimer = setInterval(() => call('GET', '/api/state'), 200);
      if (!s.playing && pollTimer) { clearInterval(pollTimer); pollTimer = null; }
    }

    function bindPlayback() {
      const bind = (id, action) => document.getElementById(id)?.addEventListener('click',
        () => call('POST', '/api/step/' + action, {}));
      bind('btn-reset', 'reset'); bind('btn-prev', 'prev'); bind('btn-play', 'toggle');
      bind('btn-next', 'next'); bind('btn-end', 'end');
      document.getElementById('speed-slider')?.addEventListener('change', async (e) => {
        const data = await call('POST', '/api/config/speed', {speed: +e.target.value});
        if (data.speed) document.getElementById('speed-val').textContent = data.speed.toFixed(1) + 'x';
      });
    }

    document.getElementById('btn-sample').addEventListener('click', () => call('POST', '/api/graph/sample', {}));
    document.getElementById('btn-clear').addEventListener('click', () => call('POST', '/api/graph/clear', {}));
    document.getElementById('btn-run').addEventListener('click', () => call('POST', '/api/run', {}));
    document.getElementById('btn-import').addEventListener('click', () =>
      call('POST', '/api/graph/import', {text: document.getElementById('import-text').value}));
    const val = (id) => document.getElementById(id).value.trim();
    document.getElementById('btn-add-edge').addEventListener('click', () =>
      call('POST', '/api/graph/edge', {from: val('edge-from'), to: val('edge-to'), weight: val('edge-weight')}));
    document.getElementById('btn-del-node').addEventListener('click', () =>
      call('DELETE', '/api/graph/node/' + encodeURIComponent(val('del-node'))));
    document.getElementById('btn-del-edge').addEventListener('click', () =>
      call('DELETE', '/api/graph/edge/' + encodeURIComponent(val('del-edge'))));

    // click a node: fill From, then To.  Click empty canvas: place the named node there.
    document.getElementById('canvas-svg').addEventListener('click', (e) => {
      const node = e.target.closest('.node');
      if (node) {
        const slot = val('edge-from') ? 'edge-to' : 'edge-from';
        document.getElementById(slot).value = node.dataset.id;
        return;
      }
      const svg = e.currentTarget.querySelector('svg');
      if (!svg || !val('node-name')) return;
      const box = svg.getBoundingClientRect(), vb = svg.viewBox.baseVal;
      call('POST', '/api/graph/node', {
        name: val('node-name'),
        x: Math.round((e.clientX - box.left) * vb.width / box.width),
        y: Math.round((e.clientY - box.top) * vb.height / box.height),
      }).then((body) => { if (!body.error) document.getElementById('node-name').value = ''; });
    });
    bindPlayback();
  </script>
</body>
</html>
"""

STEPS_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Kruskal Steps</title>
  <style>
    body { font-family: Inter, system-ui, sans-serif; background: #0b1220; color: #e6eef8; padding: 18px; }
    table { border-collapse: collapse; width: 100%; max-width: 1100px; background: #081023; }
    th, td { padding: 10px 12px; border-bottom: 1px solid rgba(255,255,255,0.04); text-align: left; font-size: 13px; }
    th { background: #071223; position: sticky; top: 0; }
    .step-added { color: #9fe6a0; }
    .step-skipped { color: #fbbf24; }
    a { color: #9fe6a0; }
  </style>
</head>
<body>
  <p><a href="/api/export/steps.csv">Download CSV</a></p>
  {{ table|safe }}
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Kruskal MST Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{app.config['HOST']}:{app.config['PORT']}")
    print("=" * 60)
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=False)
