"""
export.py — Report Formatting
==============================
Turns a finished run into downloadable text.  Nothing here computes
anything about the graph; every number comes straight off the steps.

Reports:
  • mst_csv       – final MST, one edge per row
  • mst_text      – the same as a human-readable summary
  • steps_csv     – one row per step, DSU parents included
  • step_rows     – the table rows behind the steps report
"""

import csv
import io
from typing import Iterable, List, Mapping, Optional, Sequence

from algorithms.step import AlgorithmStep
from graph.edge import Edge


STEP_HEADER = ["Step", "Edge (U-V)", "Weight", "Action", "Reason",
               "MST Edges (so far)", "Total Cost", "DSU Parents"]


def format_weight(value) -> str:
    """12.0 → "12", 2.5 → "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_edge(edge: Edge) -> str:
    return f"{edge.source}-{edge.target}({format_weight(edge.weight)})"


def compact_dsu(parents: Mapping[str, str], order: Optional[Sequence[str]] = None) -> str:
    """"A->A, B->A, C->C" in node order, or sorted when no order is given."""
    keys = list(order) if order else sorted(parents)
    return ", ".join(f"{k}->{parents[k]}" for k in keys if k in parents)


def step_rows(steps: Iterable[AlgorithmStep], order: Optional[Sequence[str]] = None) -> List[List[str]]:
    rows = []
    for s in steps:
        rows.append([
            str(s.index + 1),
            s.edge.label,
            format_weight(s.edge.weight),
            "Added" if s.added else "Skipped",
            "Connected different components" if s.added else "Forms a cycle (skipped)",
            ", ".join(format_edge(e) for e in s.mst) or "—",
            format_weight(s.cost),
            compact_dsu(s.parents, order),
        ])
    return rows


# ---------------------------------------------------------------------------
# CSV / text reports
# ---------------------------------------------------------------------------
def mst_csv(mst: Iterable[Edge]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["Edge", "Source", "Destination", "Weight"])
    for e in mst:
        writer.writerow([f"{e.source} - {e.target}", e.source, e.target, format_weight(e.weight)])
    return buf.getvalue()


def steps_csv(steps: Iterable[AlgorithmStep], order: Optional[Sequence[str]] = None) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(STEP_HEADER)
    writer.writerows(step_rows(steps, order))
    return buf.getvalue()


def mst_text(mst: Sequence[Edge], total_cost) -> str:
    lines = [
        "Kruskal's Algorithm: Minimum Spanning Tree Results",
        "",
        f"Total MST Cost: {format_weight(total_cost)}",
        f"Edges in MST: {len(mst)}",
        "",
        "Minimum Spanning Tree Edges:",
        "EDGE (U-V)\tSOURCE (U)\tDESTINATION (V)\tWEIGHT",
    ]
    for e in mst:
        lines.append(f"{e.source} - {e.target}\t{e.source}\t\t{e.target}\t\t{format_weight(e.weight)}")
    return "\n".join(lines) + "\n"
