"""Tests for reading TSPLIB-like tour files."""

import numpy as np

from hcheck.diagnostics import DiagnosticCode
from hcheck.tour import ABSENT, format_path, from_sequence, parse_tour, read_tour


def codes(tour):
    return [d.code for d in tour.diagnostics]


class TestReadTour:
    def test_simple_tour(self, write_file, tour_text) -> None:
        tour = read_tour(write_file("t.tour", tour_text([1, 2, 3, 4])))
        assert tour.node_count == 4
        assert tour.sequence.tolist() == [1, 2, 3, 4]
        assert tour.found == 4
        assert tour.complete
        assert tour.diagnostics == ()

    def test_nodes_spread_over_lines(self, write_file, tour_text) -> None:
        nodes = list(range(1, 26))
        tour = read_tour(write_file("t.tour", tour_text(nodes, per_line=3)))
        assert tour.sequence.tolist() == nodes

    def test_missing_file(self, tmp_path) -> None:
        tour = read_tour(tmp_path / "missing.tour")
        assert tour.node_count == 0
        assert len(tour.sequence) == 0
        assert codes(tour) == [DiagnosticCode.RESOURCE_UNAVAILABLE]


class TestTourSection:
    def test_sentinel_on_data_line(self) -> None:
        tour = parse_tour(["DIMENSION : 3\n", "TOUR_SECTION\n", "3 1 2 -1 4 5\n", "6\n"])
        assert tour.sequence.tolist() == [3, 1, 2]
        assert tour.diagnostics == ()

    def test_out_of_range_nodes_skipped(self) -> None:
        tour = parse_tour(["DIMENSION : 3\n", "TOUR_SECTION\n", "1 7 2 0 3\n", "-1\n"])
        assert tour.sequence.tolist() == [1, 2, 3]
        assert codes(tour) == [DiagnosticCode.OUT_OF_RANGE_NODE] * 2
        assert tour.diagnostics[0].message == "Node 7 is out of range"
        assert tour.diagnostics[1].message == "Node 0 is out of range"

    def test_short_tour_padded_with_absent(self) -> None:
        tour = parse_tour(["DIMENSION : 4\n", "TOUR_SECTION\n", "1 2\n", "-1\n"])
        assert tour.node_count == 4
        assert tour.sequence.tolist() == [1, 2, ABSENT, ABSENT]
        assert tour.found == 2
        assert not tour.complete
        assert codes(tour) == [DiagnosticCode.NODE_COUNT_MISMATCH]
        assert "expected 4 found 2" in tour.diagnostics[0].message

    def test_long_tour_keeps_declared_length(self) -> None:
        tour = parse_tour(["DIMENSION : 2\n", "TOUR_SECTION\n", "1 2 1 2\n", "-1\n"])
        assert tour.sequence.tolist() == [1, 2]
        assert tour.found == 4
        assert codes(tour) == [DiagnosticCode.NODE_COUNT_MISMATCH]

    def test_non_numeric_token_reported(self) -> None:
        tour = parse_tour(["DIMENSION : 2\n", "TOUR_SECTION\n", "1 two 2\n", "-1\n"])
        assert tour.sequence.tolist() == [1, 2]
        assert codes(tour) == [DiagnosticCode.MALFORMED_DATA]
        assert tour.diagnostics[0].line == 3

    def test_missing_dimension(self) -> None:
        tour = parse_tour(["NAME : t\n", "TOUR_SECTION\n", "1 2\n", "-1\n"])
        assert tour.node_count == 0
        assert len(tour.sequence) == 0
        assert DiagnosticCode.MALFORMED_HEADER in codes(tour)
        assert DiagnosticCode.OUT_OF_RANGE_NODE in codes(tour)


class TestTourHelpers:
    def test_from_sequence(self) -> None:
        tour = from_sequence([2, 1, 3])
        assert tour.node_count == 3
        assert tour.sequence.dtype == np.int64
        assert tour.complete

    def test_format_path(self) -> None:
        assert format_path(np.array([1, 2, 3])) == "1, 2, 3"
        assert format_path([]) == ""
