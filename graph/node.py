"""
node.py — Graph Node
====================
A vertex as the editor sees it: a unique id, a display name and a canvas
position.  Kruskal never reads the position; it is carried through so the
renderer can draw the node where the user dropped it.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Unique identifier (the editor uses the typed name).
        name  : Human-readable name shown on the canvas.
        x, y  : Canvas coordinates in pixels.
    """

    __slots__ = ("id", "name", "x", "y")

    def __init__(
        self,
        node_id: str,
        name: Optional[str] = None,
        x: float = 0.0,
        y: float = 0.0,
    ):
        self.id:   str   = node_id
        self.name: str   = name or node_id
        self.x:    float = x
        self.y:    float = y

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":   self.id,
            "name": self.name,
            "x":    self.x,
            "y":    self.y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=str(data["id"]),
            name=data.get("name") or data.get("label"),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, name={self.name}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
