"""Value types used by the graph package."""

from .schema import Edge, GraphIdentity, Node

__all__ = [
    "Edge",
    "GraphIdentity",
    "Node",
]
