"""Constraint-satisfaction search for proper graph colorings."""

from .graph import Graph, AdjacencyGraph, NodeOutOfRangeError
from .validation import validate, validate_coloring, color_classes, ValidationResult
from .search import ColoringSearch, HeuristicColoring, NaiveColoring, SearchAborted, SearchStats
from .batch import color_graphs, make_search, SEARCHES
from .chromatic import chromatic_number
