"""Opt-in thread-safe wrapper around Graph.

Graph itself never locks. Callers that share a graph between threads wrap it
here, which serializes every operation behind one lock.
"""

import logging
import threading
from typing import Any, ContextManager, Dict, Iterator, List, Optional

from digraph.models.schema import Edge, GraphIdentity, Node

from .graph import Graph

logger = logging.getLogger("digraph.core.sync")


class SynchronizedGraph:
    """Graph wrapper that runs every operation under a lock.

    Exposes the same operations and raises the same errors as Graph.
    """

    def __init__(
        self,
        graph: Optional[Graph] = None,
        lock: Optional[ContextManager[Any]] = None,
    ) -> None:
        """Initialize the wrapper.

        Args:
            graph: Graph to wrap. A new empty Graph is created when omitted.
            lock: Optional lock object. Defaults to a ``threading.RLock``.
        """
        self._graph = graph if graph is not None else Graph()
        self._lock = lock if lock is not None else threading.RLock()
        logger.debug("SynchronizedGraph wrapping %r", self._graph.identity)

    @property
    def wrapped(self) -> Graph:
        return self._graph

    @property
    def lock(self) -> ContextManager[Any]:
        return self._lock

    @property
    def graph_id(self) -> str:
        return self._graph.graph_id

    @property
    def identity(self) -> GraphIdentity:
        return self._graph.identity

    def new_node(self) -> Node:
        with self._lock:
            return self._graph.new_node()

    def nodes(self) -> List[Node]:
        with self._lock:
            return self._graph.nodes()

    def contains(self, node: Any) -> bool:
        with self._lock:
            return self._graph.contains(node)

    def remove(self, node: Node) -> None:
        with self._lock:
            self._graph.remove(node)

    def connect(self, origin: Node, destination: Node) -> Edge:
        with self._lock:
            return self._graph.connect(origin, destination)

    def disconnect(self, origin: Node, destination: Node) -> None:
        with self._lock:
            self._graph.disconnect(origin, destination)

    def edges(self) -> List[Edge]:
        with self._lock:
            return self._graph.edges()

    def has_edge(self, origin: Any, destination: Any) -> bool:
        with self._lock:
            return self._graph.has_edge(origin, destination)

    def node_count(self) -> int:
        with self._lock:
            return self._graph.node_count()

    def edge_count(self) -> int:
        with self._lock:
            return self._graph.edge_count()

    def get_summary(self) -> Dict[str, Any]:
        with self._lock:
            return self._graph.get_summary()

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node: Any) -> bool:
        return self.contains(node)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return f"SynchronizedGraph({self._graph!r})"
