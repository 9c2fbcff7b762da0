"""Read-only graph abstraction searched by the coloring algorithms."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence, Tuple

import networkx as nx


class NodeOutOfRangeError(IndexError):
    """Raised when a node index falls outside ``0 .. size - 1``."""

    def __init__(self, node: int, size: int):
        super().__init__(f"node {node} out of range for graph of size {size}")
        self.node = node
        self.size = size


class Graph(ABC):
    """Adjacency view over nodes labelled ``0 .. size - 1``.

    Adjacency is symmetric.  Implementations must not change while a
    search holds a reference to them.
    """

    @abstractmethod
    def size(self) -> int:
        """Total node count."""

    @abstractmethod
    def neighbors(self, node: int) -> Sequence[int]:
        """Neighbors of *node*; raises NodeOutOfRangeError for bad indices."""

    def edges(self) -> List[Tuple[int, int]]:
        """Every adjacency, each undirected edge listed from both endpoints."""
        return [(u, v) for u in range(self.size()) for v in self.neighbors(u)]

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(range(self.size()))
        G.add_edges_from((u, v) for u, v in self.edges() if u < v)
        return G

    def __len__(self) -> int:
        return self.size()


class AdjacencyGraph(Graph):
    """List-of-lists graph built by appending edges."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"graph size must be non-negative, got {size}")
        self._size = size
        self._adjacency: List[List[int]] = [[] for _ in range(size)]

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Tuple[int, int]]) -> "AdjacencyGraph":
        graph = cls(size)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> "AdjacencyGraph":
        """Convert a networkx graph, relabelling nodes in sorted order."""
        node_list = sorted(nx_graph.nodes())
        node_to_idx = {node: i for i, node in enumerate(node_list)}
        graph = cls(len(node_list))
        for u, v in nx_graph.edges():
            if u == v:
                raise ValueError(f"self-loop on node {u!r} cannot be colored")
            graph.add_edge(node_to_idx[u], node_to_idx[v])
        return graph

    def _check(self, node: int) -> None:
        if not 0 <= node < self._size:
            raise NodeOutOfRangeError(node, self._size)

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        if u == v:
            raise ValueError(f"self-loop on node {u} cannot be colored")
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def size(self) -> int:
        return self._size

    def neighbors(self, node: int) -> Tuple[int, ...]:
        self._check(node)
        return tuple(self._adjacency[node])

    def edges(self) -> List[Tuple[int, int]]:
        return [(u, v) for u, nbrs in enumerate(self._adjacency) for v in nbrs]

    def __repr__(self) -> str:
        num_edges = sum(len(nbrs) for nbrs in self._adjacency) // 2
        return f"AdjacencyGraph(size={self._size}, edges={num_edges})"
