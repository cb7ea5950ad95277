from collections import namedtuple

from .markov_chain import SENTINEL

# A read-only view of a chain as a directed graph: nodes are contexts and
# each edge is an observed transition weighted by its probability.
ChainGraph = namedtuple('ChainGraph', ['nodes', 'edges'])


def chain_graph(chain):
    nodes = []
    seen = set()
    edges = []

    def add_node(key):
        if key not in seen:
            seen.add(key)
            nodes.append(key)

    for key, dist in chain.map.items():
        add_node(key)
        total = dist.total()
        for slot, count in dist.items():
            target = key[1:] + (slot,)
            add_node(target)
            edges.append((key, target, count / total))
    return ChainGraph(nodes, edges)


def _label(key):
    return ' '.join('·' if slot is SENTINEL else str(slot) for slot in key)


def to_dot(chain):
    """Renders the chain graph as Graphviz DOT text."""
    graph = chain_graph(chain)
    index = {key: i for i, key in enumerate(graph.nodes)}
    lines = ['digraph {']
    for key, i in index.items():
        label = _label(key).replace('\\', '\\\\').replace('"', '\\"')
        lines.append(f'    {i} [ label = "{label}" ]')
    for source, target, weight in graph.edges:
        lines.append(f'    {index[source]} -> {index[target]} [ label = "{weight:.4g}" ]')
    lines.append('}')
    return '\n'.join(lines)
