"""
graph.py — Graph Container (the editor model)
==============================================
Single source of truth for the graph the user is building.  The step
generator and the renderer both read from this object; only the editor
writes to it.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get / move)
  2. Input validation                       (weights, endpoints, duplicates)
  3. The bundled sample graph               (seven nodes, eight edges)
  4. Import from adjacency-list text        (text → graph)
  5. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in insertion-ordered dicts keyed by id.  Edge
    order matters: Kruskal breaks weight ties by it.
  - Every check the generator is allowed to skip happens here, raising
    InvalidEdge, so a Graph that exists is always safe to hand to
    compute_kruskal.
  - Weights are stored parsed: an edge added with "10" holds 10.0.
  - `directed` is a display flag only; MST ignores it.
"""

import math
from numbers import Real
from typing import Dict, List, Optional, Set, Tuple

from algorithms.errors import InvalidEdge
from graph.edge import Edge
from graph.node import Node


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}
        edges      : {edge_id: Edge}
        directed   : bool – draw arrowheads
    """

    def __init__(self, directed: bool = False):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[int, Edge] = {}
        self.directed: bool            = directed

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if not node.id:
            raise InvalidEdge("Node id must be a non-empty string")
        if node.id in self.nodes:
            raise InvalidEdge(f"Duplicate node id: {node.id!r}")
        self.nodes[node.id] = node
        return node

    def create_node(self, node_id: str, x: float = 0.0, y: float = 0.0, name: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, name=name, x=x, y=y))

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        # remove every edge touching this node
        for eid in [eid for eid, e in self.edges.items() if e.touches(node_id)]:
            del self.edges[eid]
        del self.nodes[node_id]

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise InvalidEdge(f"Unknown node {node_id!r}")
        node.move_to(float(x), float(y))
        return node

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def next_edge_id(self) -> int:
        return max(self.edges) + 1 if self.edges else 1

    def add_edge(self, edge: Edge) -> Edge:
        weight = self._validate_edge(edge)
        if weight is not edge.weight:
            # "10" from a form or JSON body is stored as 10.0
            edge = Edge(edge_id=edge.id, source=edge.source, target=edge.target,
                        weight=weight, directed=edge.directed)
        self.edges[edge.id] = edge
        return edge

    def create_edge(self, source: str, target: str, weight, edge_id: Optional[int] = None) -> Edge:
        eid = self.next_edge_id() if edge_id is None else edge_id
        return self.add_edge(Edge(edge_id=eid, source=source, target=target,
                                  weight=parse_weight(weight), directed=self.directed))

    def remove_edge(self, edge_id: int) -> None:
        self.edges.pop(edge_id, None)

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge connecting a and b, in either direction."""
        for e in self.edges.values():
            if e.connects(a, b):
                return e
        return None

    def _validate_edge(self, edge: Edge):
        """Raise InvalidEdge if `edge` can't join this graph; return its parsed weight."""
        if edge.id in self.edges:
            raise InvalidEdge(f"Duplicate edge id: {edge.id}")
        for endpoint in edge.endpoints:
            if endpoint not in self.nodes:
                raise InvalidEdge(f"Edge #{edge.id} references unknown node {endpoint!r}")
        if edge.source == edge.target:
            raise InvalidEdge(f"Edge #{edge.id} is a self-loop on {edge.source!r}")
        return parse_weight(edge.weight)

    # ==================================================================
    # RESET
    # ==================================================================
    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=bool(data.get("directed", False)))
        for nd in data.get("nodes", []):
            try:
                node = Node.from_dict(nd)
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidEdge(f"Malformed node {nd!r}: {exc}") from exc
            g.add_node(node)
        for ed in data.get("edges", []):
            try:
                edge = Edge.from_dict(ed)
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidEdge(f"Malformed edge {ed!r}: {exc}") from exc
            g.add_edge(edge)
        return g

    # ==================================================================
    # SAMPLE GRAPH
    # ==================================================================
    @classmethod
    def sample(cls) -> "Graph":
        """The seven-node demo graph.  Its MST has six edges and costs 21."""
        g = cls()
        positions = {
            "A": (330, 100), "B": (610, 180), "C": (480, 260), "D": (480, 380),
            "E": (610, 460), "F": (330, 460), "G": (200, 380),
        }
        for nid, (x, y) in positions.items():
            g.create_node(nid, x, y)
        for eid, (u, v, w) in enumerate(
            [("A", "C", 5), ("A", "B", 2), ("B", "D", 3), ("B", "C", 6),
             ("C", "F", 4), ("D", "E", 1), ("E", "G", 6), ("F", "G", 7)],
            start=1,
        ):
            g.create_edge(u, v, w, edge_id=eid)
        return g

    # ==================================================================
    # IMPORT
    # ==================================================================
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        canvas_w: float = 900,
        canvas_h: float = 600,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B(3) C(7)        → A–B weight 3, A–C weight 7
            A -> B(3), C(7)     → alternate arrow syntax
            A:                  → isolated node

        Every neighbour needs a weight.  Nodes are laid out in a circle;
        an undirected pair listed twice is kept once.
        """
        adjacency: Dict[str, List[Tuple[str, str]]] = {}

        for lineno, line in enumerate(text.strip().splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                src, rest = line.split(":", 1)
            elif "->" in line:
                src, rest = line.split("->", 1)
            else:
                raise InvalidEdge(f"Line {lineno}: expected 'node: neighbour(weight) ...'")

            src = src.strip()
            adjacency.setdefault(src, [])

            for token in rest.replace(",", " ").split():
                if "(" not in token or not token.endswith(")"):
                    raise InvalidEdge(f"Line {lineno}: neighbour {token!r} has no weight")
                tgt, w_str = token[:-1].split("(", 1)
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w_str))

        g = cls()
        labels = list(adjacency)
        n = len(labels)
        if n == 0:
            return g

        # layout in a circle
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        for i, label in enumerate(labels):
            angle = 2 * math.pi * i / n
            g.create_node(label, cx + radius * math.cos(angle), cy + radius * math.sin(angle))

        seen: Set[frozenset] = set()
        for src, targets in adjacency.items():
            for tgt, w_str in targets:
                key = frozenset([src, tgt])
                if key in seen:
                    continue
                seen.add(key)
                g.create_edge(src, tgt, w_str)

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def edge_list(self) -> List[Edge]:
        return list(self.edges.values())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, directed={self.directed})"


def parse_weight(value) -> float:
    """Coerce editor input to a weight; reject anything non-numeric, non-finite or ≤ 0."""
    if isinstance(value, bool):
        raise InvalidEdge(f"Weight must be a number, got {value!r}")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise InvalidEdge(f"Weight must be a number, got {value!r}") from None
    if not isinstance(value, Real):
        raise InvalidEdge(f"Weight must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidEdge(f"Weight must be a positive finite number, got {value!r}")
    return value
