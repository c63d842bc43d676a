"""Node and edge value types.

Nodes are scoped to the graph that minted them through a shared
``GraphIdentity`` token. Every node keeps a reference to that token (not a
copy), so two nodes compare equal only when they come from the same graph
instance and carry the same id.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_serials = itertools.count(1)


@dataclass(frozen=True, eq=False)
class GraphIdentity:
    """Opaque identity token of one graph instance.

    Compared and hashed by object identity. ``serial`` and ``label`` exist
    for diagnostics only.

    Attributes:
        label: Display label of the owning graph.
        serial: Process-wide creation counter.
    """

    label: str = "default"
    serial: int = field(default_factory=lambda: next(_serials))

    def __repr__(self) -> str:
        return f"GraphIdentity({self.label!r}#{self.serial})"


@dataclass(frozen=True)
class Node:
    """A node of a directed graph.

    Immutable and hashable; usable as a dict key. Stays valid after being
    removed from its graph, only its membership changes.

    Attributes:
        graph: Identity token of the owning graph.
        node_id: Id unique within the owning graph, starting at 1.
    """

    graph: GraphIdentity
    node_id: int

    def __repr__(self) -> str:
        return f"Node({self.graph.label!r}#{self.graph.serial}, {self.node_id})"


@dataclass(frozen=True)
class Edge:
    """Directed connection between two nodes of the same graph.

    Attributes:
        origin: Node the edge starts at.
        destination: Node the edge points to.
    """

    origin: Node
    destination: Node

    @property
    def is_self_loop(self) -> bool:
        return self.origin == self.destination
