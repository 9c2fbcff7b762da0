"""Abstract base class for coloring searches."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..graph import Graph
from ..validation import validate

logger = logging.getLogger(__name__)


class SearchAborted(RuntimeError):
    """Raised when a search exceeds its step budget.

    Distinct from a ``None`` result, which means no coloring exists.
    """

    def __init__(self, steps: int):
        super().__init__(f"search aborted after {steps} assignments")
        self.steps = steps


@dataclass
class SearchStats:
    """Counters for a single ``color()`` call."""

    color_count: int = 0
    assignments: int = 0
    backtracks: int = 0
    pruned: int = 0
    elapsed_seconds: float = 0.0
    found: Optional[bool] = None

    def summary(self) -> Dict[str, object]:
        """Return a dict of search statistics suitable for JSON serialization."""
        return {
            "color_count": self.color_count,
            "assignments": self.assignments,
            "backtracks": self.backtracks,
            "pruned": self.pruned,
            "elapsed_seconds": round(self.elapsed_seconds, 4),
            "found": self.found,
        }


class ColoringSearch(ABC):
    """Interface for complete k-coloring searches over a read-only graph.

    Every ``color()`` call builds fresh search state; nothing carries over
    between calls except the statistics of the last one.

    Args:
        graph: Graph to color.  Never mutated.
        max_steps: Optional budget on color assignments per call.  When
            exceeded the call raises SearchAborted instead of returning.
    """

    def __init__(self, graph: Graph, max_steps: Optional[int] = None):
        self._graph = graph
        self.max_steps = max_steps
        self.stats = SearchStats()

    @property
    def graph(self) -> Graph:
        return self._graph

    def color(self, color_count: int) -> Optional[List[int]]:
        """Attempt to color the graph with *color_count* colors.

        Returns:
            One color per node, or None when no proper coloring with
            *color_count* colors exists.
        """
        if color_count < 0:
            raise ValueError(f"color_count must be non-negative, got {color_count}")

        self.stats = SearchStats(color_count=color_count)
        t0 = time.time()
        try:
            result = self._search(color_count)
        finally:
            self.stats.elapsed_seconds = time.time() - t0
        self.stats.found = result is not None

        logger.debug("%s(k=%d) on %d nodes: %s", type(self).__name__,
                     color_count, self._graph.size(), self.stats.summary())
        return result

    def validate(self, assignment: Sequence[int]) -> bool:
        """True iff no edge of the graph joins two nodes of the same color."""
        return validate(self._graph, assignment)

    def _step(self) -> None:
        """Count one assignment, enforcing the step budget."""
        self.stats.assignments += 1
        if self.max_steps is not None and self.stats.assignments > self.max_steps:
            raise SearchAborted(self.max_steps)

    @abstractmethod
    def _search(self, color_count: int) -> Optional[List[int]]:
        """Run one complete search with fresh state."""
