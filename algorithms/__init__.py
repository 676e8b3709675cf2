"""
algorithms/__init__.py — Step generation
=========================================
Everything the visualizer computes lives here: the disjoint set, the
step records and Kruskal itself.

    from algorithms import compute_kruskal, KRUSKAL

KRUSKAL is the metadata card the UI shows next to the pseudocode.
"""

from dataclasses import dataclass, field
from typing import Callable, List

from algorithms.errors  import KruskalError, InvalidGraph, InvalidEdge
from algorithms.dsu     import DisjointSet, DSUSnapshot
from algorithms.step    import AlgorithmStep, KruskalResult, ADDED, SKIPPED
from algorithms.kruskal import (
    compute_kruskal,
    iter_kruskal_steps,
    kruskal_for_graph,
    pseudocode_line,
    sort_edges,
    step_message,
    PSEUDOCODE,
    COMPLEXITY_TIME,
    COMPLEXITY_SPACE,
)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # e.g. "kruskal"
    label:            str                    # e.g. "Kruskal's Algorithm"
    fn:               Callable               # the run-to-completion function
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


KRUSKAL = AlgoInfo(
    key="kruskal", label="Kruskal's Algorithm", fn=compute_kruskal, pseudocode=PSEUDOCODE,
    tags=["weighted", "undirected", "mst", "greedy"],
    complexity_time=COMPLEXITY_TIME, complexity_space=COMPLEXITY_SPACE,
    description=(
        "Sorts edges by weight and adds the smallest edge that doesn't form a cycle, "
        "using Union-Find to detect cycles."
    ),
)


__all__ = [
    "AlgoInfo",
    "KRUSKAL",
    "KruskalError",
    "InvalidGraph",
    "InvalidEdge",
    "DisjointSet",
    "DSUSnapshot",
    "AlgorithmStep",
    "KruskalResult",
    "ADDED",
    "SKIPPED",
    "compute_kruskal",
    "iter_kruskal_steps",
    "kruskal_for_graph",
    "pseudocode_line",
    "sort_edges",
    "step_message",
    "PSEUDOCODE",
]
