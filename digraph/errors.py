"""Exception hierarchy for digraph.

Every error raised by a graph operation is an expected, recoverable outcome
of bad caller input. The graph raises it synchronously and leaves its state
untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from digraph.models.schema import Edge


class GraphError(Exception):
    """Base class for recoverable graph errors.

    Catch this to handle any rejected graph operation without caring which
    precondition failed.
    """

    pass


class NodeNotFoundError(GraphError, LookupError):
    """Node is not live in this graph.

    Raised when the node belongs to another graph, was never created here,
    or has already been removed.
    """

    def __init__(self, node: Any) -> None:
        super().__init__(f"Node not found in graph: {node!r}")
        self.node = node


class DuplicateEdgeError(GraphError, ValueError):
    """An edge for the same ordered pair already exists."""

    def __init__(self, edge: "Edge") -> None:
        super().__init__(
            f"Edge already exists: {edge.origin!r} -> {edge.destination!r}"
        )
        self.edge = edge


class EdgeNotFoundError(GraphError, LookupError):
    """No edge exists for the ordered pair."""

    def __init__(self, edge: "Edge") -> None:
        super().__init__(
            f"Edge not found in graph: {edge.origin!r} -> {edge.destination!r}"
        )
        self.edge = edge
