"""Graph fixtures shared by the search, validation and chromatic tests.

Each fixture builds a fresh AdjacencyGraph, so tests may not observe one
another's graphs even though searches never mutate them.
"""

import pytest

from csp_coloring import graphs
from csp_coloring.graphs import KNOWN_CHROMATIC, TEST_GRAPHS


@pytest.fixture
def graph_5vertex():
    """Two triangles on edge 1-2, joined through 3-4; needs 3 colors."""
    return graphs.paper_5vertex()


@pytest.fixture
def graph_triangle():
    return graphs.triangle()


@pytest.fixture
def graph_k4():
    """Clique on 4 nodes: the smallest graph that 3 colors cannot cover."""
    return graphs.complete_k4()


@pytest.fixture
def graph_p4():
    return graphs.path_p4()


@pytest.fixture
def graph_c5():
    """Odd cycle 0-1-2-3-4-0: not bipartite, 3-colorable."""
    return graphs.cycle_c5()


@pytest.fixture
def graph_w5():
    """Hub joined to every node of a 5-cycle; needs 4 colors."""
    return graphs.wheel_w5()


@pytest.fixture
def graph_petersen():
    """Triangle-free but not 2-colorable; exercises backtracking past the clique bound."""
    return graphs.petersen()


@pytest.fixture(params=sorted(KNOWN_CHROMATIC))
def named_graph(request):
    """(name, graph, chromatic number) for every entry of TEST_GRAPHS."""
    return request.param, TEST_GRAPHS[request.param](), KNOWN_CHROMATIC[request.param]
