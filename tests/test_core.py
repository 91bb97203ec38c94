"""
Unit Tests for citegraph.core

Tests for:
    - graph_model.py: degree sequence, density, vertex removal, subgraphs
    - graph_loader.py: index assignment, sorting, error reporting
"""

import pytest
import networkx as nx

from citegraph.core import (
    DensityDenominator,
    Graph,
    InvalidGraphError,
    LoadError,
    VertexIndexError,
    load_edge_list,
    parse_edge_lines,
)
from conftest import make_graph, write_edges


# =============================================================================
# Graph Construction Tests
# =============================================================================

class TestGraphConstruct:
    """Tests for Graph.construct invariant checks."""

    def test_construct_copies_lists(self):
        adjacency = [[1], []]
        graph = Graph.construct(2, adjacency, [7, 8])
        adjacency[0].append(0)
        assert graph.adjacency == [[1], []]
        assert graph.id_map == [7, 8]

    def test_length_mismatch_rejected(self):
        with pytest.raises(InvalidGraphError):
            Graph.construct(3, [[1], []], [0, 1])

    def test_id_map_mismatch_rejected(self):
        with pytest.raises(InvalidGraphError):
            Graph.construct(2, [[1], []], [0])

    def test_edge_out_of_range_rejected(self):
        with pytest.raises(InvalidGraphError):
            Graph.construct(2, [[2], []], [0, 1])

    def test_invalid_graph_error_is_value_error(self):
        with pytest.raises(ValueError):
            Graph.construct(-1, [], [])

    def test_empty(self):
        graph = Graph.empty()
        assert graph.vertex_count == 0
        assert graph.adjacency == []
        assert graph.id_map == []


# =============================================================================
# Degree and Density Tests
# =============================================================================

class TestDegreeAndDensity:
    """Tests for out-degree and the two density denominators."""

    def test_degree_sequence(self, two_vertex_graph):
        assert two_vertex_graph.degree_sequence() == [(0, 1), (1, 0)]

    def test_active_density_two_vertices(self, two_vertex_graph):
        assert two_vertex_graph.density() == pytest.approx(1.0)

    def test_vertex_density_four_vertices(self, four_vertex_graph):
        assert four_vertex_graph.density(DensityDenominator.VERTICES) == pytest.approx(1.25)

    def test_active_density_four_vertices(self, four_vertex_graph):
        # 5 edges over the 3 vertices with out-edges
        assert four_vertex_graph.density() == pytest.approx(5 / 3)

    def test_denominator_accepts_string(self, four_vertex_graph):
        assert four_vertex_graph.density("vertices") == pytest.approx(1.25)

    def test_empty_graph_density_is_zero(self, empty_graph):
        assert empty_graph.density() == 0.0
        assert empty_graph.density(DensityDenominator.VERTICES) == 0.0

    def test_edgeless_graph_density_is_zero(self):
        graph = make_graph([[], [], []])
        assert graph.density() == 0.0
        assert graph.density(DensityDenominator.VERTICES) == 0.0

    def test_duplicate_edges_counted(self):
        graph = make_graph([[1, 1], []])
        assert graph.edge_count() == 2
        assert graph.density() == pytest.approx(2.0)

    def test_density_never_negative(self, random_graph):
        assert random_graph.density() >= 0.0
        assert random_graph.density(DensityDenominator.VERTICES) >= 0.0

    def test_out_degree_out_of_range(self, two_vertex_graph):
        with pytest.raises(VertexIndexError):
            two_vertex_graph.out_degree(2)


# =============================================================================
# Vertex Removal Tests
# =============================================================================

class TestRemoveVertex:
    """Tests for in-place vertex isolation."""

    def test_remove_strips_in_and_out_edges(self, four_vertex_graph):
        four_vertex_graph.remove_vertex(2)
        assert four_vertex_graph.adjacency == [[1], [0], [], []]
        assert four_vertex_graph.vertex_count == 4
        assert len(four_vertex_graph.id_map) == 4

    def test_remove_strips_duplicate_and_self_edges(self):
        graph = make_graph([[1, 1], [1, 0]])
        graph.remove_vertex(1)
        assert graph.adjacency == [[], []]

    def test_remove_out_of_range(self, four_vertex_graph):
        with pytest.raises(VertexIndexError):
            four_vertex_graph.remove_vertex(4)

    def test_remove_negative(self, four_vertex_graph):
        with pytest.raises(IndexError):
            four_vertex_graph.remove_vertex(-1)


# =============================================================================
# Subgraph Tests
# =============================================================================

class TestInducedSubgraph:
    """Tests for induced subgraph construction."""

    def test_edges_leaving_subset_dropped(self, four_vertex_graph):
        sub = four_vertex_graph.induced_subgraph([2, 3])
        assert sub.vertex_count == 2
        assert sub.adjacency == [[1], []]
        assert sub.id_map == [2, 3]

    def test_reindexed_by_selection_order(self, four_vertex_graph):
        sub = four_vertex_graph.induced_subgraph([2, 0, 1])
        # 0->1, 0->2, 1->0, 1->2 in parent space
        assert sub.adjacency == [[], [2, 0], [1, 0]]
        assert sub.id_map == [2, 0, 1]

    def test_empty_selection(self, four_vertex_graph):
        sub = four_vertex_graph.induced_subgraph([])
        assert sub.vertex_count == 0
        assert sub.density() == 0.0

    def test_out_of_range_member(self, four_vertex_graph):
        with pytest.raises(VertexIndexError):
            four_vertex_graph.induced_subgraph([0, 9])

    def test_repeated_member(self, four_vertex_graph):
        with pytest.raises(InvalidGraphError):
            four_vertex_graph.induced_subgraph([0, 0])

    def test_parent_unchanged(self, four_vertex_graph):
        four_vertex_graph.induced_subgraph([0, 1])
        assert four_vertex_graph.adjacency == [[1, 2], [0, 2], [3], []]


# =============================================================================
# Presentation and Conversion Tests
# =============================================================================

class TestPresentation:

    def test_describe_vertex_uses_node_ids(self):
        graph = Graph.construct(3, [[1, 2], [], []], [100, 200, 300])
        assert graph.describe_vertex(0) == "Vertex (NodeID) 100: Edges -> [200, 300]"

    def test_describe_missing_vertex(self, two_vertex_graph):
        with pytest.raises(VertexIndexError):
            two_vertex_graph.describe_vertex(5)

    def test_translate(self):
        graph = Graph.construct(3, [[], [], []], [100, 200, 300])
        assert graph.translate([2, 0]) == [300, 100]

    def test_to_networkx_keeps_duplicates(self):
        graph = Graph.construct(2, [[1, 1], []], [5, 6])
        G = graph.to_networkx()
        assert isinstance(G, nx.MultiDiGraph)
        assert G.number_of_nodes() == 2
        assert G.number_of_edges(0, 1) == 2
        assert G.nodes[1]["node_id"] == 6


# =============================================================================
# Loader Tests
# =============================================================================

class TestLoader:
    """Tests for edge-list parsing."""

    def test_indices_in_first_appearance_order(self):
        graph = parse_edge_lines(["30 10", "10 20", "20 30"])
        assert graph.id_map == [30, 10, 20]
        assert graph.adjacency == [[1], [2], [0]]

    def test_adjacency_sorted(self):
        graph = parse_edge_lines(["1 9", "1 5", "1 7"])
        # ids: 1->0, 9->1, 5->2, 7->3
        assert graph.adjacency[0] == [1, 2, 3]

    def test_duplicates_and_self_loops_kept(self):
        graph = parse_edge_lines(["1 2", "1 2", "3 3"])
        assert graph.adjacency == [[1, 1], [], [2]]

    def test_extra_tokens_and_whitespace(self):
        graph = parse_edge_lines(["  1\t2  extra\n"])
        assert graph.id_map == [1, 2]
        assert graph.adjacency == [[1], []]

    def test_empty_input(self):
        graph = parse_edge_lines([])
        assert graph.vertex_count == 0

    def test_single_token_line(self):
        with pytest.raises(LoadError) as exc_info:
            parse_edge_lines(["1 2", "3"])
        assert exc_info.value.line_number == 2

    def test_blank_line(self):
        with pytest.raises(LoadError):
            parse_edge_lines(["1 2", "", "3 4"])

    @pytest.mark.parametrize("line", ["a 2", "1 -2", "1 2.5", "1 +2"])
    def test_invalid_node_id(self, line):
        with pytest.raises(LoadError):
            parse_edge_lines([line])

    def test_load_file(self, citation_file):
        graph = load_edge_list(citation_file)
        assert graph.vertex_count == 7
        assert graph.edge_count() == 8
        assert graph.id_map[:3] == [9901, 9902, 9903]
        assert graph.adjacency[0] == [1, 2]

    def test_load_error_carries_path_and_line(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("1 2\n3 x\n")
        with pytest.raises(LoadError) as exc_info:
            load_edge_list(path)
        assert exc_info.value.path == str(path)
        assert exc_info.value.line_number == 2
        assert f"{path}:2" in str(exc_info.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError):
            load_edge_list(tmp_path / "missing.txt")

    def test_load_round_trip_through_writer(self, tmp_path):
        path = write_edges(tmp_path / "edges.txt", [(5, 6), (6, 5)])
        graph = load_edge_list(str(path))
        assert graph.id_map == [5, 6]
        assert graph.adjacency == [[1], [0]]
