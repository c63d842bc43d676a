"""Graph backend abstraction layer.

Wraps NetworkX so the Graph container stays independent of the storage
library. Backends store plain integer node ids; mapping ids to graph-scoped
``Node`` values is the Graph's job.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Tuple

import networkx as nx

logger = logging.getLogger("digraph.core.backend")


class GraphBackend(ABC):
    """Abstract graph backend protocol.

    Implementations must keep node and edge iteration in insertion order of
    surviving entries, and ``remove_node`` must drop every incident edge.
    """

    @property
    @abstractmethod
    def native_graph(self) -> Any:
        """Get native graph object for read-only inspection."""
        pass

    @abstractmethod
    def add_node(self, node_id: int) -> None:
        """Add node to graph."""
        pass

    @abstractmethod
    def remove_node(self, node_id: int) -> int:
        """Remove node and its incident edges.

        Returns:
            int: Number of edges removed along with the node.
        """
        pass

    @abstractmethod
    def has_node(self, node_id: int) -> bool:
        """Check if node exists."""
        pass

    @abstractmethod
    def add_edge(self, source: int, target: int) -> None:
        """Add edge to graph."""
        pass

    @abstractmethod
    def remove_edge(self, source: int, target: int) -> None:
        """Remove edge from graph."""
        pass

    @abstractmethod
    def has_edge(self, source: int, target: int) -> bool:
        """Check if edge exists."""
        pass

    @abstractmethod
    def nodes(self) -> List[int]:
        """List node ids in insertion order."""
        pass

    @abstractmethod
    def edges(self) -> List[Tuple[int, int]]:
        """List (source, target) pairs in insertion order."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        """Get number of nodes."""
        pass

    @abstractmethod
    def edge_count(self) -> int:
        """Get number of edges."""
        pass


class NetworkXBackend(GraphBackend):
    """NetworkX-based in-memory graph backend.

    This is the default implementation. A ``DiGraph`` already holds at most
    one edge per ordered pair; each edge carries a ``seq`` attribute so
    ``edges()`` can report global insertion order.
    """

    def __init__(self) -> None:
        """Initialize backend with NetworkX DiGraph."""
        self._graph = nx.DiGraph()
        self._edge_seq = itertools.count()
        logger.debug("NetworkXBackend initialized")

    @property
    def native_graph(self) -> nx.DiGraph:
        return self._graph

    def add_node(self, node_id: int) -> None:
        self._graph.add_node(node_id)

    def remove_node(self, node_id: int) -> int:
        # A self-loop shows up in both views, count it once.
        incident = set(self._graph.in_edges(node_id)) | set(self._graph.out_edges(node_id))
        self._graph.remove_node(node_id)
        return len(incident)

    def has_node(self, node_id: int) -> bool:
        return self._graph.has_node(node_id)

    def add_edge(self, source: int, target: int) -> None:
        self._graph.add_edge(source, target, seq=next(self._edge_seq))

    def remove_edge(self, source: int, target: int) -> None:
        self._graph.remove_edge(source, target)

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def nodes(self) -> List[int]:
        return list(self._graph.nodes)

    def edges(self) -> List[Tuple[int, int]]:
        ordered = sorted(self._graph.edges(data="seq"), key=lambda edge: edge[2])
        return [(source, target) for source, target, _ in ordered]

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()
