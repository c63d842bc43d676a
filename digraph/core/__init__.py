"""Core graph container APIs."""

from .backend import GraphBackend, NetworkXBackend
from .graph import Graph
from .sync import SynchronizedGraph

__all__ = [
    "Graph",
    "GraphBackend",
    "NetworkXBackend",
    "SynchronizedGraph",
]
