import unittest

from markov import SENTINEL, Chain
from markov.markov_chain.graph import chain_graph, to_dot

S = SENTINEL


class TestChainGraph(unittest.TestCase):

    def test_order_one_graph(self):
        chain = Chain().feed(['I', 'like', 'cats']).feed(['I', 'hate', 'cats'])
        graph = chain_graph(chain)
        self.assertCountEqual(graph.nodes, [(S,), ('I',), ('like',), ('hate',), ('cats',)])
        self.assertCountEqual(graph.edges, [
            ((S,), ('I',), 1.0),
            (('I',), ('like',), 0.5),
            (('I',), ('hate',), 0.5),
            (('like',), ('cats',), 1.0),
            (('hate',), ('cats',), 1.0),
            (('cats',), (S,), 1.0),
        ])

    def test_terminal_states_become_nodes(self):
        chain = Chain(order=2).feed(['e', 'r', 't'])
        graph = chain_graph(chain)
        self.assertIn(('t', S), graph.nodes)
        self.assertEqual(len(graph.nodes), len(set(graph.nodes)))

    def test_outgoing_weights_sum_to_one(self):
        chain = Chain(order=2).feed('ertrtyrtertytr')
        graph = chain_graph(chain)
        totals = {}
        for source, _, weight in graph.edges:
            totals[source] = totals.get(source, 0) + weight
        for total in totals.values():
            self.assertAlmostEqual(total, 1.0)

    def test_empty_chain_has_no_edges(self):
        graph = chain_graph(Chain())
        self.assertEqual(graph.nodes, [(S,)])
        self.assertEqual(graph.edges, [])

    def test_to_dot(self):
        dot = to_dot(Chain().feed(['say', '"hi"']))
        self.assertTrue(dot.startswith('digraph {'))
        self.assertTrue(dot.endswith('}'))
        self.assertIn('label = "·"', dot)
        self.assertIn('label = "\\"hi\\""', dot)
        self.assertIn('0 -> 1 [ label = "1" ]', dot)


if __name__ == '__main__':
    unittest.main()
