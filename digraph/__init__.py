"""Minimal mutable directed graph with graph-scoped node identity."""

from typing import Optional, Union

from digraph.config import GraphConfig
from digraph.core import Graph, GraphBackend, NetworkXBackend, SynchronizedGraph
from digraph.errors import (
    DuplicateEdgeError,
    EdgeNotFoundError,
    GraphError,
    NodeNotFoundError,
)
from digraph.models import Edge, GraphIdentity, Node
from digraph.utils import setup_logging

__version__ = "0.1.0"


def new(config: Optional[GraphConfig] = None) -> Union[Graph, SynchronizedGraph]:
    """Create an empty, mutable directed graph.

    Args:
        config: Optional configuration. Defaults to ``GraphConfig()``.

    Returns:
        Graph, or SynchronizedGraph when ``config.synchronized`` is set.
    """
    config = config or GraphConfig()
    graph = Graph.from_config(config)
    if config.synchronized:
        return SynchronizedGraph(graph)
    return graph


__all__ = [
    "DuplicateEdgeError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphBackend",
    "GraphConfig",
    "GraphError",
    "GraphIdentity",
    "NetworkXBackend",
    "Node",
    "NodeNotFoundError",
    "SynchronizedGraph",
    "__version__",
    "new",
    "setup_logging",
]
