"""Solver-independent checks on color assignments."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

import numpy as np

from .graph import Graph


def _edge_array(graph: Graph) -> np.ndarray:
    return np.asarray(graph.edges(), dtype=np.int64).reshape(-1, 2)


def validate(graph: Graph, assignment: Sequence[Optional[int]]) -> bool:
    """Check that *assignment* is a proper coloring of *graph*.

    Returns True iff every node has a color and, for every edge (a, b)
    reported by the graph, ``assignment[a] != assignment[b]``.
    """
    if len(assignment) != graph.size():
        return False
    if any(c is None for c in assignment):
        return False

    edges = _edge_array(graph)
    if edges.size == 0:
        return True
    colors = np.asarray(assignment, dtype=np.int64)
    return bool(np.all(colors[edges[:, 0]] != colors[edges[:, 1]]))


@dataclass
class ValidationResult:
    """Detailed coloring validation result."""
    valid: bool
    num_colors: int
    num_nodes_covered: int
    num_nodes_expected: int
    unassigned_nodes: List[int]
    edge_violations: List[Tuple[int, int]]  # (a, b) with a < b


def validate_coloring(
    graph: Graph, assignment: Sequence[Optional[int]],
) -> ValidationResult:
    """Detailed validation of a color assignment.

    Nodes beyond the end of a short assignment count as unassigned, and each
    conflicting undirected edge is reported once.
    """
    size = graph.size()
    padded = list(assignment[:size]) + [None] * (size - len(assignment))
    unassigned = [v for v, c in enumerate(padded) if c is None]

    violations: Set[Tuple[int, int]] = set()
    for u, v in graph.edges():
        if padded[u] is not None and padded[u] == padded[v]:
            violations.add((min(u, v), max(u, v)))

    used = {c for c in padded if c is not None}
    valid = (
        len(assignment) == size
        and len(unassigned) == 0
        and len(violations) == 0
    )

    return ValidationResult(
        valid=valid,
        num_colors=len(used),
        num_nodes_covered=size - len(unassigned),
        num_nodes_expected=size,
        unassigned_nodes=unassigned,
        edge_violations=sorted(violations),
    )


def color_classes(assignment: Sequence[int]) -> List[FrozenSet[int]]:
    """Group nodes by color, ordered by color index."""
    classes: Dict[int, Set[int]] = {}
    for node, color in enumerate(assignment):
        classes.setdefault(color, set()).add(node)
    return [frozenset(classes[c]) for c in sorted(classes)]
