"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Generator-based Kruskal over a Disjoint-Set-Union.

Yields one AlgorithmStep per edge, in ascending weight order:
  1. Sort a copy of the edges by weight (stable: ties keep input order)
  2. Start every node in its own set
  3. For each edge, try to union its endpoints
        → success: edge joins the MST, cost grows   (step "added")
        → failure: endpoints already connected      (step "skipped")
  4. Every step carries the MST so far and a DSU snapshot

There is no early exit at |V| − 1 edges: the step sequence always has
one entry per input edge, so a report can show why each remaining edge
was skipped.

Disconnected graphs are fine: the result is a minimum spanning forest.
Zero edges is fine too: no steps, cost 0.
"""

import logging
from typing import Generator, Iterable, List, Sequence

from algorithms.dsu import DisjointSet
from algorithms.errors import InvalidGraph
from algorithms.step import AlgorithmStep, KruskalResult
from graph.edge import Edge

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Kruskal(V, E):",                           # 0
    "    sort E by weight (stable)",                # 1
    "    for v in V: make_set(v)",                  # 2
    "    mst ← [], cost ← 0",                       # 3
    "    for (u, v, w) in E:",                      # 4
    "        if find(u) ≠ find(v):",                # 5
    "            union(u, v)",                      # 6
    "            mst.append((u, v)); cost += w",    # 7
    "        else: skip  # would form a cycle",     # 8
    "    return mst, cost",                         # 9
]

COMPLEXITY_TIME  = "O(E log E)"
COMPLEXITY_SPACE = "O(V + E)"


def pseudocode_line(step) -> int:
    """Line of PSEUDOCODE a step corresponds to; -1 for the ready state."""
    if step is None:
        return -1
    return 7 if step.added else 8


def step_message(edge: Edge, added: bool) -> str:
    outcome = "added." if added else "skipped (cycle)."
    return f"Considering edge ({edge.source}, {edge.target}) — {outcome}"


def sort_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Ascending by weight.  sorted() is stable, which is the tie-break."""
    return sorted(edges, key=lambda e: e.weight)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def iter_kruskal_steps(
    node_ids: Sequence[str],
    edges: Iterable[Edge],
) -> Generator[AlgorithmStep, None, None]:
    """
    Lazily yield the steps for `edges` over `node_ids`.

    The DSU is created when the generator starts, so an empty node set
    raises InvalidGraph on the first next(); compute_kruskal checks it
    up front instead.
    """
    dsu = DisjointSet(node_ids)
    mst: List[Edge] = []
    cost = 0

    for index, edge in enumerate(sort_edges(edges)):
        added = dsu.union(edge.source, edge.target)
        if added:
            mst.append(edge)
            cost += edge.weight
        yield AlgorithmStep(
            index=index,
            edge=edge,
            added=added,
            message=step_message(edge, added),
            mst=tuple(mst),
            cost=cost,
            snapshot=dsu.snapshot(),
        )


def compute_kruskal(node_ids: Iterable[str], edges: Iterable[Edge]) -> KruskalResult:
    """
    Run Kruskal to completion and return every step plus the totals.

    Raises:
        InvalidGraph: if `node_ids` is empty.
    """
    node_ids = tuple(node_ids)
    if not node_ids:
        raise InvalidGraph("Please add nodes first")

    sorted_edges = tuple(sort_edges(edges))
    log.debug("kruskal: %d nodes, %d edges", len(node_ids), len(sorted_edges))

    steps = tuple(iter_kruskal_steps(node_ids, sorted_edges))
    mst = steps[-1].mst if steps else ()
    total = steps[-1].cost if steps else 0

    log.info(
        "kruskal: %d/%d edges added, total cost %s",
        len(mst), len(sorted_edges), total,
    )
    return KruskalResult(
        node_ids=node_ids,
        steps=steps,
        sorted_edges=sorted_edges,
        mst=mst,
        total_cost=total,
    )


def kruskal_for_graph(graph) -> KruskalResult:
    """Convenience wrapper taking an editor Graph."""
    return compute_kruskal(graph.node_ids(), graph.edge_list())
