"""
dsu.py — Disjoint-Set-Union (Union-Find)
=========================================
Path compression + union by rank, keyed by node-id strings.

Kruskal asks one question per edge: "are these two endpoints already in
the same tree?"  `union` answers it and merges in one call, returning
False when the edge would close a cycle.

Design decisions:
  - `find` is iterative.  It walks up to the root collecting the nodes it
    passed, then points every one of them straight at the root.  Same
    compression as the textbook recursive version, no recursion limit.
  - A DisjointSet is built fresh for every generation call and thrown
    away afterwards; only its snapshots outlive it.
  - `snapshot()` copies both maps into read-only proxies, so a step that
    holds a snapshot never sees later unions.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from algorithms.errors import InvalidGraph


@dataclass(frozen=True)
class DSUSnapshot:
    """
    Attributes:
        parents : {node_id: parent_id} at capture time.
        ranks   : {node_id: rank} at capture time.
    """

    parents: Mapping[str, str]
    ranks:   Mapping[str, int]

    def root_of(self, node_id: str) -> str:
        """Follow parent links without compressing (snapshots are read-only)."""
        while self.parents[node_id] != node_id:
            node_id = self.parents[node_id]
        return node_id

    def components(self) -> Dict[str, List[str]]:
        """{root: [members]} in node insertion order."""
        groups: Dict[str, List[str]] = {}
        for nid in self.parents:
            groups.setdefault(self.root_of(nid), []).append(nid)
        return groups

    def to_dict(self) -> dict:
        return {"parents": dict(self.parents), "ranks": dict(self.ranks)}


class DisjointSet:
    """
    Attributes:
        parent : {node_id: parent_id}; a root is its own parent.
        rank   : {node_id: int}; upper bound on tree height under that root.
    """

    def __init__(self, node_ids: Iterable[str]):
        self.parent: Dict[str, str] = {}
        self.rank:   Dict[str, int] = {}
        for nid in node_ids:
            self.parent[nid] = nid
            self.rank[nid] = 0
        if not self.parent:
            raise InvalidGraph("Cannot build a disjoint set over zero nodes")

    def find(self, x: str) -> str:
        """Representative of x's set; compresses the path it walked."""
        visited: List[str] = []
        root = x
        while self.parent[root] != root:
            visited.append(root)
            root = self.parent[root]
        for nid in visited:
            self.parent[nid] = root
        return root

    def union(self, x: str, y: str) -> bool:
        """Merge the sets of x and y.  False if they were already one set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] < self.rank[ry]:
            self.parent[rx] = ry
        elif self.rank[rx] > self.rank[ry]:
            self.parent[ry] = rx
        else:
            self.parent[ry] = rx
            self.rank[rx] += 1
        return True

    def connected(self, x: str, y: str) -> bool:
        return self.find(x) == self.find(y)

    def component_count(self) -> int:
        return sum(1 for nid, p in self.parent.items() if nid == p)

    def snapshot(self) -> DSUSnapshot:
        return DSUSnapshot(
            parents=MappingProxyType(dict(self.parent)),
            ranks=MappingProxyType(dict(self.rank)),
        )

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.parent

    def __repr__(self) -> str:
        return f"DisjointSet(size={len(self)}, components={self.component_count()})"
