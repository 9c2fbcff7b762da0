"""Complete k-coloring search implementations."""

from .base import ColoringSearch, SearchAborted, SearchStats
from .heuristic import HeuristicColoring
from .naive import NaiveColoring
