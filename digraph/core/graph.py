"""Mutable directed graph container.

A Graph owns the nodes and edges of one isolated graph instance. Nodes are
minted by the graph itself and carry a reference to its identity token, so
nodes from different graphs never compare equal even when their ids match.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from digraph.errors import DuplicateEdgeError, EdgeNotFoundError, NodeNotFoundError
from digraph.models.schema import Edge, GraphIdentity, Node

from .backend import GraphBackend, NetworkXBackend

if TYPE_CHECKING:
    from digraph.config.schema import GraphConfig

logger = logging.getLogger("digraph.core.graph")


class Graph:
    """Directed graph with graph-scoped node identity.

    Not safe for concurrent use; wrap it in ``SynchronizedGraph`` when
    several threads share one instance.
    """

    def __init__(
        self,
        graph_id: Optional[str] = None,
        backend: Optional[GraphBackend] = None,
    ) -> None:
        """Initialize an empty graph.

        Args:
            graph_id: Optional display label. Does not affect identity.
            backend: Optional empty graph backend. Defaults to NetworkXBackend.

        Raises:
            ValueError: If the given backend already holds nodes.
        """
        self.graph_id = graph_id or "default"
        self._backend: GraphBackend = backend or NetworkXBackend()
        if self._backend.node_count():
            raise ValueError("Graph backend must be empty")

        self._identity = GraphIdentity(label=self.graph_id)
        self._last_node_id = 0

        logger.debug("Graph initialized: %r", self._identity)

    @classmethod
    def from_config(cls, config: "GraphConfig") -> "Graph":
        """Create a graph from a GraphConfig."""
        return cls(graph_id=config.graph_id)

    @property
    def identity(self) -> GraphIdentity:
        """Identity token shared by every node of this graph."""
        return self._identity

    @property
    def backend(self) -> GraphBackend:
        """Return the underlying graph backend.

        Meant for read-only inspection; mutating it directly bypasses the
        graph's checks.
        """
        return self._backend

    # ------------------------------------------------------------------ #
    # Nodes
    # ------------------------------------------------------------------ #
    def new_node(self) -> Node:
        """Create a node inside the graph and return it.

        Ids start at 1 and are never reused, even after removal.
        """
        self._last_node_id += 1
        node = Node(self._identity, self._last_node_id)
        self._backend.add_node(node.node_id)
        logger.debug("Added node: %r", node)
        return node

    def nodes(self) -> List[Node]:
        """Get all live nodes in insertion order.

        Returns:
            List[Node]: A new list; changing it does not affect the graph.
        """
        return [Node(self._identity, node_id) for node_id in self._backend.nodes()]

    def contains(self, node: Any) -> bool:
        """Check whether ``node`` was created by this graph and is still live."""
        return (
            isinstance(node, Node)
            and node.graph is self._identity
            and self._backend.has_node(node.node_id)
        )

    def remove(self, node: Node) -> None:
        """Remove a node and every edge it is origin or destination of.

        Args:
            node: Node to remove.

        Raises:
            NodeNotFoundError: If the node is not contained in this graph.
        """
        self._require(node)
        dropped = self._backend.remove_node(node.node_id)
        logger.debug("Removed node: %r (%d incident edges)", node, dropped)

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def connect(self, origin: Node, destination: Node) -> Edge:
        """Add a directed edge from ``origin`` to ``destination``.

        Self-loops are allowed.

        Args:
            origin: Node the edge starts at.
            destination: Node the edge points to.

        Returns:
            Edge: The new edge.

        Raises:
            NodeNotFoundError: If either node is not contained in this graph.
            DuplicateEdgeError: If the pair is already connected.
        """
        self._require(origin)
        self._require(destination)

        edge = Edge(origin, destination)
        if self._backend.has_edge(origin.node_id, destination.node_id):
            raise DuplicateEdgeError(edge)

        self._backend.add_edge(origin.node_id, destination.node_id)
        logger.debug("Added edge: %r -> %r", origin, destination)
        return edge

    def disconnect(self, origin: Node, destination: Node) -> None:
        """Remove the directed edge from ``origin`` to ``destination``.

        Raises:
            NodeNotFoundError: If either node is not contained in this graph.
            EdgeNotFoundError: If the pair is not connected.
        """
        self._require(origin)
        self._require(destination)

        if not self._backend.has_edge(origin.node_id, destination.node_id):
            raise EdgeNotFoundError(Edge(origin, destination))

        self._backend.remove_edge(origin.node_id, destination.node_id)
        logger.debug("Removed edge: %r -> %r", origin, destination)

    def edges(self) -> List[Edge]:
        """Get all live edges in insertion order.

        Returns:
            List[Edge]: A new list; changing it does not affect the graph.
        """
        return [
            Edge(Node(self._identity, source), Node(self._identity, target))
            for source, target in self._backend.edges()
        ]

    def has_edge(self, origin: Any, destination: Any) -> bool:
        """Check whether both nodes are live here and connected."""
        return (
            self.contains(origin)
            and self.contains(destination)
            and self._backend.has_edge(origin.node_id, destination.node_id)
        )

    # ------------------------------------------------------------------ #
    # Summary
    # ------------------------------------------------------------------ #
    def node_count(self) -> int:
        return self._backend.node_count()

    def edge_count(self) -> int:
        return self._backend.edge_count()

    def get_summary(self) -> Dict[str, Any]:
        """Get graph summary.

        Returns:
            Dict[str, Any]: Summary containing graph label and node/edge counts.
        """
        return {
            "graph_id": self.graph_id,
            "node_count": self.node_count(),
            "edge_count": self.edge_count(),
        }

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, node: Any) -> bool:
        return self.contains(node)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return (
            f"Graph({self.graph_id!r}, nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )

    def _require(self, node: Any) -> None:
        if not self.contains(node):
            raise NodeNotFoundError(node)
