"""
Tests for the symbol module.

Tests parsing of the two-section format, the name/index tables, the
initial vertex selection and the cost bookkeeping.
"""

import logging

import pytest

from costgraph.cycle import DirectedCycle
from costgraph.errors import GraphFormatError, UnknownVertexError, VertexOutOfRangeError
from costgraph.models import VertexCost
from costgraph.symbol import SymbolCostDigraph
from tests.fixtures import (
    BAD_EDGE_COUNT,
    BAD_VERTEX_COUNT,
    CYCLIC_PROJECT,
    DOMINANT_B,
    DUPLICATE_NAMES,
    NO_EDGES,
    REPEATED_FIRST_NAME,
    SAMPLE_PROJECT,
    UNKNOWN_VERTEX,
)


@pytest.fixture
def sample():
    return SymbolCostDigraph.from_text(SAMPLE_PROJECT)


class TestSampleProject:
    """Tests against the three-vertex sample project."""

    def test_counts(self, sample):
        """Test vertex and edge counts."""
        assert sample.vertex_count == 3
        assert sample.edge_count == 2

    def test_edge_weights(self, sample):
        """Test the edge weight table."""
        weights = sample.edge_weights()

        assert weights["A-B"] == 3
        assert weights["B-C"] == 4
        assert len(weights) == 2

    def test_vertex_base_costs(self, sample):
        """Test the base cost table."""
        assert dict(sample.vertex_base_costs()) == {"A": 10, "B": 5, "C": 7}

    def test_underlying_digraph(self, sample):
        """Test that the digraph has A->B and B->C only."""
        digraph = sample.digraph
        a, b, c = (sample.index_of(name) for name in "ABC")

        assert digraph.adj(a) == [b]
        assert digraph.adj(b) == [c]
        assert digraph.adj(c) == []
        assert not DirectedCycle(digraph).has_cycle()

    def test_out_occurrences(self, sample):
        """Test counting edge lines per source name."""
        assert dict(sample.out_occurrences()) == {"A": 1, "B": 1}

    def test_tables_are_read_only(self, sample):
        """Test that returned tables cannot be modified."""
        with pytest.raises(TypeError):
            sample.edge_weights()["A-C"] = 1
        with pytest.raises(TypeError):
            sample.vertex_base_costs()["A"] = 0


class TestNameIndex:
    """Tests for the name <-> index bijection."""

    def test_round_trip(self, sample):
        """Test that name_of(index_of(name)) == name for every name."""
        for name in sample.names():
            assert sample.name_of(sample.index_of(name)) == name

    def test_indices_are_dense(self, sample):
        """Test that indices cover exactly 0..V-1."""
        indices = sorted(sample.index_of(name) for name in sample)
        assert indices == list(range(sample.vertex_count))

    def test_contains(self, sample):
        """Test membership checks."""
        assert sample.contains("A")
        assert "C" in sample
        assert not sample.contains("Z")

    def test_unknown_name(self, sample):
        """Test that unknown names raise UnknownVertexError."""
        with pytest.raises(UnknownVertexError):
            sample.index_of("Z")
        with pytest.raises(KeyError):
            sample.outgoing_weight("Z")

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_name_of_out_of_range(self, sample, index):
        """Test that name_of rejects indices outside [0, V)."""
        with pytest.raises(VertexOutOfRangeError):
            sample.name_of(index)


class TestInitialVertex:
    """Tests for the most-frequent-source selection."""

    def test_first_name_wins_tie(self, sample):
        """Test that ties go to the first source in the edge section."""
        assert sample.initial_vertex == VertexCost("A", 10)

    def test_dominant_vertex_gets_index_zero(self):
        """Test that the most frequent source is stored first."""
        sg = SymbolCostDigraph.from_text(DOMINANT_B)

        assert sg.initial_vertex == VertexCost("B", 2)
        assert sg.index_of("B") == 0
        assert sg.names() == ["B", "A", "C", "D"]
        assert sg.vertex_base_costs()["B"] == 2
        assert sg.vertex_count == 4

    def test_no_edges(self):
        """Test that no initial vertex is chosen without edges."""
        sg = SymbolCostDigraph.from_text(NO_EDGES)

        assert sg.initial_vertex is None
        assert sg.names() == ["X", "Y"]
        assert sg.edge_count == 0

    def test_duplicate_names_share_one_index(self):
        """Test that a repeated name gets one index and its last cost."""
        sg = SymbolCostDigraph.from_text(DUPLICATE_NAMES)

        assert sg.initial_vertex == VertexCost("B", 2)
        assert sg.names() == ["B", "A"]
        assert dict(sg.vertex_base_costs()) == {"B": 2, "A": 9}
        assert sg.edge_weights()["B-A"] == 5

    def test_repeated_first_name_skipped(self):
        """Test that later lines repeating the first name are skipped."""
        sg = SymbolCostDigraph.from_text(REPEATED_FIRST_NAME)

        assert sg.names() == ["A"]
        assert sg.vertex_base_costs()["A"] == 1
        assert sg.vertex_count == 1

    def test_unreadable_source_is_not_fatal(self, tmp_path, caplog):
        """Test that a failing re-scan is logged and the build continues."""
        path = tmp_path / "project.txt"
        path.write_text(SAMPLE_PROJECT)
        calls = []

        def load():
            calls.append(1)
            if len(calls) == 2:
                raise OSError("disk went away")
            return path.read_text().splitlines()

        sg = SymbolCostDigraph.__new__(SymbolCostDigraph)
        with caplog.at_level(logging.WARNING, logger="costgraph.symbol.builder"):
            sg._build(load, str(path))

        assert sg.initial_vertex is None
        assert sg.names() == ["A", "B", "C"]
        assert "disk went away" in caplog.text


class TestFormatErrors:
    """Tests for malformed input."""

    def test_bad_vertex_count(self):
        """Test that a non-numeric vertex count aborts the build."""
        with pytest.raises(GraphFormatError) as excinfo:
            SymbolCostDigraph.from_text(BAD_VERTEX_COUNT)

        assert excinfo.value.line_number == 1

    def test_bad_edge_count(self):
        """Test that a non-numeric edge count aborts the build."""
        with pytest.raises(GraphFormatError) as excinfo:
            SymbolCostDigraph.from_text(BAD_EDGE_COUNT)

        assert excinfo.value.line_number == 3

    def test_missing_edge_count(self):
        """Test that a missing edge section header aborts the build."""
        with pytest.raises(GraphFormatError):
            SymbolCostDigraph.from_text("1\nA 1\n")

    def test_unknown_vertex(self):
        """Test that an edge to an undeclared vertex aborts the build."""
        with pytest.raises(UnknownVertexError):
            SymbolCostDigraph.from_text(UNKNOWN_VERTEX)

    def test_short_vertex_section(self):
        """Test that fewer vertex lines than declared aborts the build."""
        with pytest.raises(GraphFormatError):
            SymbolCostDigraph.from_text("3\nA 1\n")

    def test_bad_vertex_cost(self):
        """Test that a non-numeric vertex cost aborts the build."""
        with pytest.raises(GraphFormatError) as excinfo:
            SymbolCostDigraph.from_text("1\nA cheap\n0\n")

        assert excinfo.value.line_number == 2

    def test_vertex_line_without_cost(self):
        """Test that a vertex line missing its cost aborts the build."""
        with pytest.raises(GraphFormatError) as excinfo:
            SymbolCostDigraph.from_text("1\nA\n0\n")

        assert excinfo.value.line_number == 2

    def test_negative_edge_count(self):
        """Test that a negative edge count aborts the build."""
        with pytest.raises(GraphFormatError) as excinfo:
            SymbolCostDigraph.from_text("1\nA 1\n-3\n")

        assert excinfo.value.line_number == 3

    def test_invalid_utf8_file(self, tmp_path):
        """Test that undecodable bytes are a format error."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1\n\xff\xfe 1\n0\n")

        with pytest.raises(GraphFormatError):
            SymbolCostDigraph(path)

    def test_bad_weight(self):
        """Test that a non-numeric weight aborts the build."""
        with pytest.raises(GraphFormatError):
            SymbolCostDigraph.from_text("2\nA 1\nB 1\n1\nA B heavy\n")

    def test_edge_count_mismatch_is_logged(self, caplog):
        """Test that a wrong edge count only warns."""
        with caplog.at_level(logging.WARNING, logger="costgraph.symbol.builder"):
            sg = SymbolCostDigraph.from_text("2\nA 1\nB 1\n5\nA B 1\n")

        assert sg.edge_count == 1
        assert "declares 5 edges but lists 1" in caplog.text

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SymbolCostDigraph(tmp_path / "missing.txt")


class TestCosts:
    """Tests for cost aggregation."""

    def test_total_project_cost_accumulates(self, sample):
        """Test that added amounts accumulate."""
        assert sample.total_project_cost == 0

        sample.add_to_total_project_cost(3)
        sample.add_to_total_project_cost(4)

        assert sample.total_project_cost == 7

    def test_total_project_cost_is_unbounded(self, sample):
        """Test that large amounts do not overflow."""
        sample.add_to_total_project_cost(2**70)
        sample.add_to_total_project_cost(2**70)

        assert sample.total_project_cost == 2**71

    def test_total_project_cost_rejects_non_int(self, sample):
        """Test that non-int amounts are rejected."""
        with pytest.raises(TypeError):
            sample.add_to_total_project_cost(1.5)

    def test_outgoing_weight(self):
        """Test summing the weights of outgoing edges."""
        sg = SymbolCostDigraph.from_text(DOMINANT_B)

        assert sg.outgoing_weight("B") == 50
        assert sg.outgoing_weight("D") == 0

    def test_repeated_edge_line_weight_is_summed(self):
        """Test that a repeated edge line counts toward the outgoing weight."""
        sg = SymbolCostDigraph.from_text("2\nA 1\nB 1\n2\nA B 3\nA B 5\n")

        assert sg.edge_count == 2
        assert sg.out_occurrences()["A"] == 2
        assert sg.outgoing_weight("A") == 8
        assert sg.edge_weights()["A-B"] == 5

    def test_summary(self):
        """Test the per-vertex summary rows."""
        sg = SymbolCostDigraph.from_text(DOMINANT_B)
        rows = {row.name: row for row in sg.summary()}

        assert rows["B"].index == 0
        assert rows["B"].out_occurrences == 2
        assert rows["B"].total_cost == 52
        assert rows["D"].out_occurrences == 0


class TestFromFile:
    """Tests for building from a file."""

    def test_file_and_text_agree(self, tmp_path):
        """Test that file and text sources give the same result."""
        path = tmp_path / "project.txt"
        path.write_text(DOMINANT_B)

        from_file = SymbolCostDigraph(path)
        from_text = SymbolCostDigraph.from_text(DOMINANT_B)

        assert from_file.names() == from_text.names()
        assert dict(from_file.edge_weights()) == dict(from_text.edge_weights())

    def test_cyclic_project(self, tmp_path):
        """Test that a cyclic dependency is detected."""
        path = tmp_path / "cyclic.txt"
        path.write_text(CYCLIC_PROJECT)

        assert DirectedCycle(SymbolCostDigraph(path).digraph).has_cycle()

    def test_whitespace_is_trimmed(self):
        """Test that surrounding whitespace does not leak into names or keys."""
        sg = SymbolCostDigraph.from_text(" 2 \n  A   1 \nB\t2\n 1\n  A  B  7  \n")

        assert sg.names() == ["A", "B"]
        assert sg.edge_weights()["A-B"] == 7
