"""
errors.py — Error taxonomy
===========================
Generation itself is total on validated input, so the only error it can
surface is InvalidGraph.  InvalidEdge belongs to the editor: Graph raises
it while the user is building the graph, the generator never does.

Stepping past either end of a run is not an error at all; the playback
controller treats it as a no-op.
"""


class KruskalError(Exception):
    """Base class for every error this package raises on purpose."""


class InvalidGraph(KruskalError, ValueError):
    """The graph cannot be run, e.g. it has no nodes."""


class InvalidEdge(KruskalError, ValueError):
    """An edge (or node) the editor refuses to accept."""
