"""Named test graphs for the coloring searches."""

import networkx as nx

from .graph import AdjacencyGraph


def paper_5vertex() -> AdjacencyGraph:
    """Two triangles sharing an edge, closed by a path. Chromatic number = 3."""
    return AdjacencyGraph.from_edges(5, [(0, 1), (0, 2), (1, 2), (1, 3), (2, 4), (3, 4)])


def triangle() -> AdjacencyGraph:
    """K3 triangle. Chromatic number = 3."""
    return complete(3)


def complete_k4() -> AdjacencyGraph:
    """K4 complete graph. Chromatic number = 4."""
    return complete(4)


def path_p4() -> AdjacencyGraph:
    """P4 path graph. Chromatic number = 2."""
    return AdjacencyGraph.from_networkx(nx.path_graph(4))


def cycle_c5() -> AdjacencyGraph:
    """C5 odd cycle (0-1, 1-2, 2-3, 3-4, 4-0). Chromatic number = 3."""
    return AdjacencyGraph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


def wheel_w5() -> AdjacencyGraph:
    """Wheel graph W5 (6 nodes including center). Chromatic number = 4."""
    return AdjacencyGraph.from_networkx(nx.wheel_graph(6))


def petersen() -> AdjacencyGraph:
    """Petersen graph. Chromatic number = 3."""
    return AdjacencyGraph.from_networkx(nx.petersen_graph())


def empty(n: int) -> AdjacencyGraph:
    """*n* isolated nodes."""
    return AdjacencyGraph(n)


def complete(k: int) -> AdjacencyGraph:
    return AdjacencyGraph.from_networkx(nx.complete_graph(k))


def erdos_renyi(n: int, p: float, seed: int = 42) -> AdjacencyGraph:
    """Erdos-Renyi random graph G(n,p)."""
    return AdjacencyGraph.from_networkx(nx.gnp_random_graph(n, p, seed=seed))


KNOWN_CHROMATIC = {
    "paper_5vertex": 3,
    "triangle": 3,
    "complete_k4": 4,
    "path_p4": 2,
    "cycle_c5": 3,
    "wheel_w5": 4,
    "petersen": 3,
}

TEST_GRAPHS = {
    "paper_5vertex": paper_5vertex,
    "triangle": triangle,
    "complete_k4": complete_k4,
    "path_p4": path_p4,
    "cycle_c5": cycle_c5,
    "wheel_w5": wheel_w5,
    "petersen": petersen,
}
