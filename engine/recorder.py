"""
recorder.py — Run Recorder & Analytics
========================================
Runs Kruskal on an editor Graph, keeps the complete result, and computes
the summary numbers the Results panel shows.

Usage:
    rec = Recorder()
    rec.run(graph)                   # raises InvalidGraph on an empty graph
    metrics = rec.metrics            # the analytics card
    rec.export()                     # serialisable snapshot for the JSON report
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import KruskalResult, compute_kruskal
from graph import Graph

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Results panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    node_count:    int   = 0
    edge_count:    int   = 0
    total_steps:   int   = 0          # one per edge
    added:         int   = 0          # edges accepted into the MST
    skipped:       int   = 0          # edges rejected as cycles
    mst_edges:     List[str] = field(default_factory=list)   # "u-v" labels, in order added
    total_cost:    float = 0.0
    components:    int   = 0          # trees in the spanning forest
    spanning:      bool  = False      # True iff the MST spans every node
    wall_time_ms:  float = 0.0        # wall-clock time to generate the steps


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        result  : The KruskalResult of the last run (None before run()).
        metrics : RunMetrics of the last run.
    """

    def __init__(self):
        self.result:  Optional[KruskalResult] = None
        self.metrics: Optional[RunMetrics]    = None
        self._graph:  Optional[Graph]         = None

    def run(self, graph: Graph) -> RunMetrics:
        """Generate every step for `graph` and compute the metrics."""
        start = time.monotonic()
        result = compute_kruskal(graph.node_ids(), graph.edge_list())
        wall_ms = (time.monotonic() - start) * 1000

        self._graph  = graph
        self.result  = result
        self.metrics = RunMetrics(
            node_count=graph.node_count(),
            edge_count=result.edge_count,
            total_steps=len(result.steps),
            added=result.added_count,
            skipped=result.skipped_count,
            mst_edges=[e.label for e in result.mst],
            total_cost=result.total_cost,
            components=result.component_count,
            spanning=result.is_spanning_tree,
            wall_time_ms=round(wall_ms, 2),
        )
        log.debug("recorder: %s", self.metrics)
        return self.metrics

    @property
    def has_run(self) -> bool:
        return self.result is not None

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.result is None:
            raise RuntimeError("Call run() first.")
        return {
            "algorithm": "kruskal",
            "graph":     self._graph.to_dict() if self._graph else {},
            "metrics":   asdict(self.metrics) if self.metrics else {},
            **self.result.to_dict(),
        }
