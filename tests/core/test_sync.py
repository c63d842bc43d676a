"""Tests for the opt-in synchronized graph wrapper."""

import threading
import unittest
from concurrent.futures import ThreadPoolExecutor

import digraph
from digraph import (
    DuplicateEdgeError,
    Edge,
    Graph,
    GraphConfig,
    NodeNotFoundError,
    SynchronizedGraph,
)


class TestSynchronizedGraph(unittest.TestCase):
    def test_wraps_new_graph_by_default(self) -> None:
        sg = SynchronizedGraph()

        self.assertIsInstance(sg.wrapped, Graph)
        self.assertEqual(sg.graph_id, "default")
        self.assertIs(sg.identity, sg.wrapped.identity)

    def test_delegates_operations(self) -> None:
        g = Graph(graph_id="shared")
        sg = SynchronizedGraph(g)

        a = sg.new_node()
        b = sg.new_node()
        edge = sg.connect(a, b)
        sg.connect(b, b)
        sg.disconnect(b, b)

        self.assertEqual(edge, Edge(a, b))
        self.assertEqual(sg.nodes(), [a, b])
        self.assertEqual(sg.edges(), [Edge(a, b)])
        self.assertTrue(sg.contains(a))
        self.assertIn(b, sg)
        self.assertTrue(sg.has_edge(a, b))
        self.assertEqual(len(sg), 2)
        self.assertEqual(list(sg), [a, b])
        self.assertEqual(
            sg.get_summary(), {"graph_id": "shared", "node_count": 2, "edge_count": 1}
        )

        sg.remove(a)
        self.assertEqual(g.nodes(), [b])
        self.assertEqual(sg.edge_count(), 0)
        self.assertEqual(sg.node_count(), 1)

    def test_propagates_errors(self) -> None:
        sg = SynchronizedGraph()
        a = sg.new_node()
        sg.connect(a, a)

        with self.assertRaises(DuplicateEdgeError):
            sg.connect(a, a)
        with self.assertRaises(NodeNotFoundError):
            sg.remove(Graph().new_node())

    def test_uses_caller_supplied_lock(self) -> None:
        lock = threading.Lock()
        sg = SynchronizedGraph(lock=lock)

        self.assertIs(sg.lock, lock)
        sg.new_node()
        self.assertFalse(lock.locked())

    def test_concurrent_new_node_is_unique(self) -> None:
        sg = SynchronizedGraph()

        def create(_: int) -> list:
            return [sg.new_node() for _ in range(200)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            batches = list(executor.map(create, range(8)))

        created = [node for batch in batches for node in batch]
        self.assertEqual(len(set(created)), 1600)
        self.assertEqual(sg.node_count(), 1600)
        self.assertEqual(
            sorted(node.node_id for node in sg.nodes()), list(range(1, 1601))
        )

    def test_new_with_synchronized_config(self) -> None:
        sg = digraph.new(GraphConfig(graph_id="threads", synchronized=True))

        self.assertIsInstance(sg, SynchronizedGraph)
        self.assertEqual(sg.graph_id, "threads")


if __name__ == "__main__":
    unittest.main()
