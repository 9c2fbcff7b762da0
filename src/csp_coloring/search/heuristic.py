"""Backtracking search with forward checking, LCV and MCV ordering.

Each node carries a domain of colors not yet ruled out.  Assigning a color
removes it from the domains of uncolored neighbors (forward checking), so a
dead end shows up as an empty domain before the search descends into it.
Candidate colors are tried least-constraining first, and the next node to
branch on is always the uncolored node with the smallest domain.

Colors that have not been assigned anywhere on the current branch are
interchangeable, so only one representative of them is tried per node.
Such a color was never forward-checked away, which keeps it in every domain.

The search keeps an explicit frame stack rather than recursing, so large
graphs are not bounded by the interpreter's recursion limit.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from .base import ColoringSearch


@dataclass
class _Frame:
    """Branching state for one node on the search stack."""

    node: int
    candidates: Iterator[int]
    color: Optional[int] = None
    removals: List[Tuple[int, int]] = field(default_factory=list)
    took_unused: bool = False


class HeuristicColoring(ColoringSearch):
    """Complete k-coloring search with forward checking, LCV and MCV."""

    def _init_state(self, color_count: int) -> None:
        size = self._graph.size()
        self._neighbors = [tuple(self._graph.neighbors(v)) for v in range(size)]
        self._colors: List[Optional[int]] = [None] * size
        self._domains: List[Set[int]] = [set(range(color_count)) for _ in range(size)]
        self._unassigned: Set[int] = set(range(size))
        self._unused: Set[int] = set(range(color_count))

    @property
    def domains(self) -> List[frozenset]:
        """Snapshot of the per-node domains left by the last ``color()`` call."""
        return [frozenset(d) for d in getattr(self, "_domains", [])]

    # ------------------------------------------------------------------
    # Ordering heuristics
    # ------------------------------------------------------------------

    def _impact(self, node: int, color: int) -> int:
        """Number of uncolored neighbors that would lose *color*."""
        return sum(
            1 for n in self._neighbors[node]
            if self._colors[n] is None and color in self._domains[n]
        )

    def _order_colors(self, node: int) -> List[int]:
        """Candidate colors for *node*, least constraining first."""
        domain = self._domains[node]
        candidates = sorted(domain - self._unused)
        if self._unused:
            representative = min(self._unused)
            assert representative in domain, (
                f"unused color {representative} missing from domain of node {node}"
            )
            candidates.append(representative)
        candidates.sort(key=lambda c: self._impact(node, c))
        return candidates

    def _select_node(self) -> int:
        """Most constrained unassigned node; ties go to the lowest index."""
        return min(self._unassigned, key=lambda v: (len(self._domains[v]), v))

    def _open(self, node: int) -> _Frame:
        return _Frame(node=node, candidates=iter(self._order_colors(node)))

    # ------------------------------------------------------------------
    # Domain bookkeeping
    # ------------------------------------------------------------------

    def _restore(self, removals: List[Tuple[int, int]]) -> None:
        for node, color in reversed(removals):
            assert color not in self._domains[node], (
                f"color {color} restored twice to node {node}"
            )
            self._domains[node].add(color)

    def _forward_check(self, node: int, color: int) -> Optional[List[Tuple[int, int]]]:
        """Remove *color* from uncolored neighbors' domains.

        Returns the removal log, or None (with all removals undone) when a
        neighbor is left with an empty domain.
        """
        removals: List[Tuple[int, int]] = []
        for n in self._neighbors[node]:
            if self._colors[n] is None and color in self._domains[n]:
                self._domains[n].remove(color)
                removals.append((n, color))
                if not self._domains[n]:
                    self._restore(removals)
                    return None
        return removals

    def _assign(self, frame: _Frame) -> bool:
        """Try the remaining candidates of *frame* until one sticks."""
        node = frame.node
        for color in frame.candidates:
            if any(self._colors[n] == color for n in self._neighbors[node]):
                continue

            removals = self._forward_check(node, color)
            if removals is None:
                self.stats.pruned += 1
                continue

            self._step()
            assert color in self._domains[node], (
                f"assigning color {color} outside domain of node {node}"
            )
            frame.took_unused = color in self._unused
            self._unused.discard(color)
            self._colors[node] = color
            self._unassigned.remove(node)
            frame.color = color
            frame.removals = removals
            return True
        return False

    def _unassign(self, frame: _Frame) -> None:
        node = frame.node
        self._colors[node] = None
        if frame.took_unused:
            self._unused.add(frame.color)
        self._unassigned.add(node)
        self._restore(frame.removals)
        frame.color = None
        frame.removals = []
        frame.took_unused = False
        self.stats.backtracks += 1

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search(self, color_count: int) -> Optional[List[int]]:
        self._init_state(color_count)
        if not self._unassigned:
            return []

        stack = [self._open(self._select_node())]
        while stack:
            frame = stack[-1]
            if frame.color is not None:
                # child subtree failed
                self._unassign(frame)

            if not self._assign(frame):
                stack.pop()
                continue

            if not self._unassigned:
                return list(self._colors)
            stack.append(self._open(self._select_node()))

        return None
