from networkx import DiGraph, is_directed_acyclic_graph

from .pairs import generate_pairs

def dependency_graph(config) -> DiGraph:
    """Directed graph over window pairs with an edge child -> parent for every child reference.
    Each node carries the `iteration` of the tier that produced it."""
    graph = DiGraph()
    for payload in generate_pairs(config):
        graph.add_node(payload.pair, iteration = payload.iteration)
        for child in payload.child.present():
            graph.add_edge(child, payload.pair)
    return graph

def is_generation_order_topological(config) -> bool:
    """True when every child window is produced before each of its parents,
    so that `sliding_window` can always resolve it."""
    graph = dependency_graph(config)
    if not is_directed_acyclic_graph(graph):
        return False
    position = {payload.pair: idx for (idx, payload) in enumerate(generate_pairs(config))}
    for (child, parent) in graph.edges:
        if child not in position or position[child] >= position[parent]:
            return False
    return True
