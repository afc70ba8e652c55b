import pickle
from pathlib import Path

import networkx as nx

from cbtsp.core.problem import Edge, Problem


def read_problem_file(path):
    """Parse a text edge list ("V E" header, then "a b value" lines) into a Problem."""
    with open(Path(path), "r") as f:
        return Problem.from_text(f.read())


def load_graph(path):
    """Unpickle a networkx graph. Directed graphs are folded into undirected ones."""
    with open(Path(path), "rb") as f:
        graph = pickle.load(f)
    if not isinstance(graph, nx.Graph):
        raise TypeError(f"{path} does not hold a networkx graph, got {type(graph).__name__}.")
    return graph.to_undirected() if graph.is_directed() else graph


def problem_from_graph(G: nx.Graph, weight="weight"):
    """
    Build a Problem from a weighted graph. Nodes are relabeled 0..V-1 in
    iteration order; edges without the weight attribute are rejected.
    """
    index_map = {node: i for i, node in enumerate(G.nodes())}
    edges = []
    for u, v, data in G.edges(data=True):
        if weight not in data:
            raise ValueError(f"Edge {u}-{v} has no '{weight}' attribute.")
        value = data[weight]
        if int(value) != value:
            raise ValueError(f"Edge {u}-{v} has non-integer weight {value}.")
        edges.append(Edge(index_map[u], index_map[v], int(value)))
    return Problem.from_edges(len(index_map), edges)


def load_problem(path):
    """Pickled networkx graphs (.pkl) or text edge lists."""
    path = Path(path)
    if path.suffix == ".pkl":
        return problem_from_graph(load_graph(path))
    return read_problem_file(path)
