"""
step.py — Algorithm Step Snapshot
==================================
Kruskal is a generator that yields AlgorithmStep objects, one per edge
in sorted order.  A step is a frozen-in-time picture of everything the
visualizer and the report exporters need for one frame:

    • Which edge was considered, and whether it was added or skipped
    • The MST built so far and its running cost
    • The DSU parent / rank maps right after the edge was processed
    • A plain-English message for the status panel

Design decisions:
  - Steps are frozen dataclasses holding tuples and read-only mappings.
    The generator is the only writer; playback, renderer and exporters
    are pure readers and may share one run freely.
  - KruskalResult bundles the step sequence with the sorted edge list
    and the final totals, so the exporter never recomputes anything.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from algorithms.dsu import DSUSnapshot
from graph.edge import Edge


ADDED   = "added"
SKIPPED = "skipped"


@dataclass(frozen=True)
class AlgorithmStep:
    """
    Attributes:
        index    : 0-based position of this step in the run.
        edge     : The edge considered.
        added    : True if the edge joined the MST, False if it closed a cycle.
        message  : Status text, e.g. "Considering edge (A, B) — added."
        mst      : MST edges accumulated so far (including this one if added).
        cost     : Sum of weights in `mst`.
        snapshot : DSU state right after this edge was processed.
    """

    index:    int
    edge:     Edge
    added:    bool
    message:  str
    mst:      Tuple[Edge, ...]
    cost:     float
    snapshot: DSUSnapshot

    @property
    def decision(self) -> str:
        return ADDED if self.added else SKIPPED

    @property
    def parents(self) -> Mapping[str, str]:
        return self.snapshot.parents

    @property
    def ranks(self) -> Mapping[str, int]:
        return self.snapshot.ranks

    def to_dict(self) -> dict:
        return {
            "index":    self.index,
            "edge":     self.edge.to_dict(),
            "decision": self.decision,
            "message":  self.message,
            "mst":      [e.to_dict() for e in self.mst],
            "cost":     self.cost,
            "parents":  dict(self.snapshot.parents),
            "ranks":    dict(self.snapshot.ranks),
        }


@dataclass(frozen=True)
class KruskalResult:
    """
    Attributes:
        node_ids     : Node ids in input order.
        steps        : One AlgorithmStep per edge, in processing order.
        sorted_edges : Input edges, stably sorted by weight.
        mst          : Final MST (a spanning forest if the graph is disconnected).
        total_cost   : Sum of weights in `mst`.
    """

    node_ids:     Tuple[str, ...]
    steps:        Tuple[AlgorithmStep, ...]
    sorted_edges: Tuple[Edge, ...]
    mst:          Tuple[Edge, ...]
    total_cost:   float

    @property
    def edge_count(self) -> int:
        return len(self.sorted_edges)

    @property
    def added_count(self) -> int:
        return len(self.mst)

    @property
    def skipped_count(self) -> int:
        return len(self.steps) - len(self.mst)

    @property
    def final_snapshot(self) -> Optional[DSUSnapshot]:
        return self.steps[-1].snapshot if self.steps else None

    @property
    def component_count(self) -> int:
        # each MST edge merges two components
        return len(self.node_ids) - len(self.mst)

    @property
    def is_spanning_tree(self) -> bool:
        return len(self.mst) == len(self.node_ids) - 1

    def to_dict(self) -> dict:
        return {
            "node_ids":     list(self.node_ids),
            "sorted_edges": [e.to_dict() for e in self.sorted_edges],
            "mst":          [e.to_dict() for e in self.mst],
            "total_cost":   self.total_cost,
            "steps":        [s.to_dict() for s in self.steps],
        }
