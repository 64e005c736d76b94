from windowpairs.graphs import *
from windowpairs.pairs import count_pairs

import unittest

class TestDependencyGraph(unittest.TestCase):

    def test_edges(self):
        config = {"size": {"min": 1, "max": 4}, "index": {"from": 0, "to": 4}}
        graph = dependency_graph(config)
        self.assertEqual(count_pairs(config), graph.order())
        self.assertTrue(is_directed_acyclic_graph(graph))
        self.assertEqual({(0, 1), (1, 2)}, set(graph.predecessors((0, 2))))
        self.assertEqual({(0, 3), (1, 3), (1, 4)}, set(graph.predecessors((0, 4))))
        self.assertEqual([], list(graph.predecessors((0, 1))))
        self.assertEqual(3, graph.nodes[(0, 4)]["iteration"])
        self.assertEqual(0, graph.nodes[(3, 4)]["iteration"])

    def test_reverse_sink(self):
        config = {"index": {"from": 4, "to": 0}}
        graph = dependency_graph(config)
        sinks = [v for v in graph.nodes if graph.out_degree(v) == 0]
        self.assertEqual([(4, 0)], sinks)

    def test_topological(self):
        for config in [
            {"index": {"to": 6}},
            {"index": {"from": 6, "to": 1}},
            {"index": {"from": 2, "to": 8}, "size": {"min": 2, "max": 5}},
            {"index": {"to": 3}, "size": {"min": 3, "max": 3}},
        ]:
            self.assertTrue(is_generation_order_topological(config))

if __name__ == '__main__':
    unittest.main()
