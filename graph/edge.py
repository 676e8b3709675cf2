"""
edge.py — Graph Edge
====================
Connects two nodes with a positive weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and lets algorithm steps embed them
    without dragging the whole graph along.
  - `id` is an integer handed out by the editor (max id + 1), so edge
    identity survives a round trip through JSON.
  - `directed` is a display flag only.  Kruskal treats every edge as
    undirected regardless of it.
  - Edges are read-only once built: steps hold on to them, so changing a
    weight means building a new Edge.
"""

from typing import Any, Dict


class Edge:
    """
    Attributes:
        id       : Unique integer identifier.
        source   : ID of the first endpoint ("from").
        target   : ID of the second endpoint ("to").
        weight   : Positive, finite cost.
        directed : Whether the canvas draws an arrowhead.
    """

    __slots__ = ("_id", "_source", "_target", "_weight", "_directed")

    def __init__(
        self,
        edge_id: int,
        source: str,
        target: str,
        weight: float,
        directed: bool = False,
    ):
        self._id:       int   = edge_id
        self._source:   str   = source
        self._target:   str   = target
        self._weight:   float = weight
        self._directed: bool  = directed

    @property
    def id(self) -> int:
        return self._id

    @property
    def source(self) -> str:
        return self._source

    @property
    def target(self) -> str:
        return self._target

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def endpoints(self):
        return self._source, self._target

    @property
    def label(self) -> str:
        return f"{self._source}-{self._target}"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a and node_b in either direction."""
        return {self._source, self._target} == {node_a, node_b}

    def touches(self, node_id: str) -> bool:
        return node_id == self._source or node_id == self._target

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":       self._id,
            "from":     self._source,
            "to":       self._target,
            "weight":   self._weight,
            "directed": self._directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        # accept both the wire spelling (from/to) and the attribute spelling
        return cls(
            edge_id=int(data["id"]),
            source=str(data.get("from", data.get("source"))),
            target=str(data.get("to", data.get("target"))),
            weight=data["weight"],
            directed=bool(data.get("directed", False)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self._directed else " ↔ "
        return f"Edge(#{self._id} {self._source}{arrow}{self._target}, w={self._weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)
