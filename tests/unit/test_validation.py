"""Tests for the solver-independent validators."""

from csp_coloring.graph import AdjacencyGraph
from csp_coloring.search import HeuristicColoring
from csp_coloring.validation import color_classes, validate, validate_coloring


class TestValidate:
    def test_valid(self, graph_5vertex):
        assert validate(graph_5vertex, [0, 1, 2, 0, 1])

    def test_invalid_adjacent(self, graph_5vertex):
        # 3 and 4 are adjacent
        assert not validate(graph_5vertex, [0, 1, 2, 0, 0])

    def test_short_assignment(self, graph_5vertex):
        assert not validate(graph_5vertex, [0, 1, 2, 0])

    def test_unassigned_node(self, graph_5vertex):
        assert not validate(graph_5vertex, [0, 1, 2, None, 1])

    def test_edgeless(self):
        assert validate(AdjacencyGraph(3), [0, 0, 0])

    def test_empty_graph(self):
        assert validate(AdjacencyGraph(0), [])

    def test_search_validate_delegates(self, graph_c5):
        algo = HeuristicColoring(graph_c5)
        assert algo.validate([0, 1, 0, 1, 2])
        assert not algo.validate([0, 1, 0, 1, 0])


class TestValidateColoring:
    def test_valid_coloring(self, graph_5vertex):
        vr = validate_coloring(graph_5vertex, [0, 1, 2, 0, 1])
        assert vr.valid
        assert vr.num_colors == 3
        assert vr.num_nodes_covered == 5
        assert vr.num_nodes_expected == 5
        assert vr.unassigned_nodes == []
        assert vr.edge_violations == []

    def test_edge_violation_reported_once(self, graph_5vertex):
        vr = validate_coloring(graph_5vertex, [0, 0, 1, 2, 2])
        assert not vr.valid
        assert vr.edge_violations == [(0, 1), (3, 4)]

    def test_unassigned_detected(self, graph_5vertex):
        vr = validate_coloring(graph_5vertex, [0, 1, None])
        assert not vr.valid
        assert vr.unassigned_nodes == [2, 3, 4]
        assert vr.num_nodes_covered == 2

    def test_unassigned_nodes_do_not_conflict(self, graph_triangle):
        vr = validate_coloring(graph_triangle, [None, None, 0])
        assert vr.edge_violations == []
        assert not vr.valid

    def test_agrees_with_validate(self, graph_petersen):
        res = HeuristicColoring(graph_petersen).color(3)
        assert validate(graph_petersen, res)
        assert validate_coloring(graph_petersen, res).valid


class TestColorClasses:
    def test_groups_by_color(self):
        assert color_classes([1, 0, 1, 2]) == [
            frozenset([1]), frozenset([0, 2]), frozenset([3]),
        ]

    def test_empty(self):
        assert color_classes([]) == []
