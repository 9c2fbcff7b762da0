"""Exhaustive backtracking baseline."""

from typing import List, Optional

from .base import ColoringSearch


class NaiveColoring(ColoringSearch):
    """Fixed-order backtracking with direct neighbor conflict checks only.

    Nodes are colored in index order and colors tried in increasing order.
    No pruning, so this serves as the correctness baseline for
    HeuristicColoring rather than a practical solver.
    """

    def _search(self, color_count: int) -> Optional[List[int]]:
        size = self._graph.size()
        neighbors = [tuple(self._graph.neighbors(v)) for v in range(size)]
        colors: List[Optional[int]] = [None] * size
        # next color to try at each depth
        cursor = [0] * size

        node = 0
        while node < size:
            color = cursor[node]
            while color < color_count and any(colors[n] == color for n in neighbors[node]):
                color += 1

            if color == color_count:
                # exhausted: undo this node and resume its predecessor
                colors[node] = None
                cursor[node] = 0
                node -= 1
                if node < 0:
                    return None
                self.stats.backtracks += 1
                continue

            self._step()
            colors[node] = color
            cursor[node] = color + 1
            node += 1

        return list(colors)
