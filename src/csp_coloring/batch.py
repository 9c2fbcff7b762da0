"""Color many independent graphs, optionally across worker processes."""

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Type

from .graph import Graph
from .search.base import ColoringSearch
from .search.heuristic import HeuristicColoring
from .search.naive import NaiveColoring

logger = logging.getLogger(__name__)

SEARCHES = {
    "naive": NaiveColoring,
    "heuristic": HeuristicColoring,
}


def make_search(name: str, graph: Graph, **kwargs) -> ColoringSearch:
    try:
        cls: Type[ColoringSearch] = SEARCHES[name]
    except KeyError:
        raise ValueError(
            f"Unknown search: {name}. Use one of {sorted(SEARCHES)}."
        ) from None
    return cls(graph, **kwargs)


def _color_one(
    graph: Graph, color_count: int, search: str, max_steps: Optional[int],
) -> Optional[List[int]]:
    return make_search(search, graph, max_steps=max_steps).color(color_count)


def color_graphs(
    graphs: Sequence[Graph],
    color_count: int,
    search: str = "heuristic",
    max_workers: Optional[int] = None,
    max_steps: Optional[int] = None,
    verbose: bool = False,
) -> List[Optional[List[int]]]:
    """Run an independent search on every graph.

    Each graph gets its own search instance, so graphs only need to be
    readable (and picklable when *max_workers* is not 1).

    Args:
        graphs: Graphs to color.
        color_count: Color budget shared by every search.
        search: Name of the search in SEARCHES.
        max_workers: Worker processes; 1 runs in-process, None lets
            ProcessPoolExecutor pick.
        max_steps: Per-search step budget; SearchAborted propagates.
        verbose: Print a line per uncolorable graph and a final tally.

    Returns:
        One result per graph, in input order; None where no coloring exists.
    """
    if search not in SEARCHES:
        raise ValueError(f"Unknown search: {search}. Use one of {sorted(SEARCHES)}.")

    n = len(graphs)
    if max_workers == 1 or n <= 1:
        results = [_color_one(g, color_count, search, max_steps) for g in graphs]
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(
                _color_one,
                graphs,
                [color_count] * n,
                [search] * n,
                [max_steps] * n,
            ))

    failures = [i for i, r in enumerate(results) if r is None]
    if verbose:
        for i in failures:
            print(f"  graph {i}: no {color_count}-coloring")
        print(f"  {n - len(failures)}/{n} graphs colorable with {color_count} colors")
    logger.debug("color_graphs(k=%d): %d/%d colorable", color_count, n - len(failures), n)
    return results
