"""Chromatic number by scanning color budgets between clique and DSATUR bounds."""

from typing import List, Tuple

import networkx as nx

from .batch import make_search
from .graph import Graph
from .validation import validate


def clique_lower_bound(graph: Graph) -> int:
    """Size of a maximum clique, a lower bound on the chromatic number."""
    if graph.size() == 0:
        return 0
    clique, _ = nx.max_weight_clique(graph.to_networkx(), weight=None)
    return len(clique)


def greedy_upper_bound(graph: Graph) -> Tuple[int, List[int]]:
    """DSATUR greedy coloring: (colors used, assignment)."""
    if graph.size() == 0:
        return 0, []
    coloring = nx.greedy_color(graph.to_networkx(), strategy="DSATUR")
    assignment = [coloring[v] for v in range(graph.size())]
    return max(assignment) + 1, assignment


def chromatic_number(
    graph: Graph,
    search: str = "heuristic",
    verbose: bool = False,
) -> Tuple[int, List[int]]:
    """Smallest k for which *graph* is k-colorable, with a witness coloring.

    Budgets are tried upward from the clique bound; the first success is
    optimal because colorability is monotone in k.  The DSATUR coloring is
    returned when every budget below its color count fails.

    Args:
        graph: Input graph (nodes 0..n-1).
        search: Name of the exact search in ``batch.SEARCHES``.
        verbose: Print per-budget details.

    Returns:
        (chromatic_number, assignment)
    """
    lower = clique_lower_bound(graph)
    upper, greedy = greedy_upper_bound(graph)
    if verbose:
        print(f"  bounds: clique={lower}  dsatur={upper}")

    algo = make_search(search, graph)
    for k in range(lower, upper):
        assignment = algo.color(k)
        if verbose:
            print(f"  k={k}: {'colorable' if assignment is not None else 'infeasible'}"
                  f"  {algo.stats.summary()}")
        if assignment is not None:
            assert validate(graph, assignment), (
                f"search returned an invalid {k}-coloring"
            )
            return k, assignment

    return upper, greedy
