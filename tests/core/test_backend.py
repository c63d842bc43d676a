"""Tests for the NetworkX graph backend."""

import networkx as nx
import pytest

from digraph import Graph
from digraph.core.backend import GraphBackend, NetworkXBackend


def test_backend_is_a_digraph() -> None:
    """The default backend wraps a NetworkX DiGraph."""
    backend = NetworkXBackend()

    assert isinstance(backend, GraphBackend)
    assert isinstance(backend.native_graph, nx.DiGraph)
    assert backend.node_count() == 0
    assert backend.edge_count() == 0


def test_edges_follow_insertion_order() -> None:
    """Edge order is global insertion order, not adjacency order."""
    backend = NetworkXBackend()
    for node_id in (1, 2, 3):
        backend.add_node(node_id)

    backend.add_edge(3, 1)
    backend.add_edge(1, 2)
    backend.add_edge(2, 2)
    backend.add_edge(1, 3)

    assert backend.edges() == [(3, 1), (1, 2), (2, 2), (1, 3)]
    assert backend.nodes() == [1, 2, 3]


def test_remove_node_reports_incident_edges() -> None:
    """remove_node drops incident edges and counts a self-loop once."""
    backend = NetworkXBackend()
    for node_id in (1, 2, 3):
        backend.add_node(node_id)
    backend.add_edge(1, 2)
    backend.add_edge(2, 2)
    backend.add_edge(3, 2)
    backend.add_edge(1, 3)

    dropped = backend.remove_node(2)

    assert dropped == 3
    assert not backend.has_node(2)
    assert backend.edges() == [(1, 3)]
    assert backend.edge_count() == 1


def test_remove_edge() -> None:
    """remove_edge removes exactly one ordered pair."""
    backend = NetworkXBackend()
    backend.add_node(1)
    backend.add_node(2)
    backend.add_edge(1, 2)
    backend.add_edge(2, 1)

    backend.remove_edge(1, 2)

    assert not backend.has_edge(1, 2)
    assert backend.has_edge(2, 1)


def test_graph_uses_given_backend() -> None:
    """Graph stores integer ids in the backend it was given."""
    backend = NetworkXBackend()
    g = Graph(backend=backend)
    a, b = g.new_node(), g.new_node()
    g.connect(a, b)

    assert g.backend is backend
    assert list(backend.native_graph.nodes) == [1, 2]
    assert backend.has_edge(1, 2)


def test_graph_rejects_populated_backend() -> None:
    """A backend that already holds nodes cannot back a new graph."""
    backend = NetworkXBackend()
    backend.add_node(1)

    with pytest.raises(ValueError, match="must be empty"):
        Graph(backend=backend)
