import numpy as np
from enum import IntEnum
from numba import njit
from typing import NamedTuple, Optional, Tuple

from hcheck.graph import Graph
from hcheck.tour import Tour

"""
HAMILTONIAN CYCLE VALIDATION:

A tour is a Hamiltonian cycle for a graph if it has one entry per node, every
pair of consecutive nodes is joined by an edge, every node is visited, and the
last node connects back to the first. Checks run in that order and stop at the
first failure. The walk is a single O(N) pass compiled with numba.
"""

# Outcome codes returned by the walk kernel (numba freezes module globals)
WALK_OK = 0
WALK_MISSING_EDGE = 1
WALK_OUT_OF_RANGE = 2


class Reason(IntEnum):
    VALID = 0
    SIZE_MISMATCH = 1
    EMPTY_GRAPH = 2
    MISSING_EDGE = 3
    NODE_OUT_OF_RANGE = 4
    NOT_ALL_VISITED = 5
    NOT_CLOSED = 6


class ValidationResult(NamedTuple):
    valid: bool
    reason: Reason
    edge: Optional[Tuple[int, int]] = None
    visited: int = 0
    node_count: int = 0
    is_path: bool = False

    @property
    def message(self) -> str:
        if self.reason == Reason.VALID:
            return "Valid Hamiltonian Cycle"
        if self.reason == Reason.SIZE_MISMATCH:
            return "Tour and graph do not contain same number of nodes"
        if self.reason == Reason.EMPTY_GRAPH:
            return "Graph has no nodes"
        if self.reason == Reason.MISSING_EDGE:
            return f"No edge between {self.edge[0]} and {self.edge[1]}"
        if self.reason == Reason.NODE_OUT_OF_RANGE:
            return f"Node {self.edge[1]} at position {self.edge[0] + 1} is out of range"
        if self.reason == Reason.NOT_ALL_VISITED:
            return f"Not all nodes visited (visited {self.visited}, expected {self.node_count})"
        return "First node does not connect with last node of tour"


@njit(cache=True)
def walk(sequence, adjacency, node_count):
    """
    Walk the tour in order, checking consecutive edges and marking visits.

    Returns (code, a, b, visited_count) where (a, b) is the missing edge for
    WALK_MISSING_EDGE, or (position, node) for WALK_OUT_OF_RANGE.
    Absent slots (0) are never counted as visited.
    """
    visited = np.zeros(node_count + 1, dtype=np.bool_)
    visited_count = 0
    previous = -1

    for pos in range(sequence.shape[0]):
        current = sequence[pos]
        if current < 0 or current > node_count:
            return WALK_OUT_OF_RANGE, pos, current, visited_count

        if previous != -1 and not adjacency[previous, current]:
            return WALK_MISSING_EDGE, previous, current, visited_count

        # Repeats are not rejected here, they show up as missing coverage
        if current != 0 and not visited[current]:
            visited[current] = True
            visited_count += 1

        previous = current

    return WALK_OK, 0, 0, visited_count


def validate_tour(tour: Tour, graph: Graph) -> ValidationResult:
    """
    Check that a tour is a Hamiltonian cycle of a graph.

    Never prints and never raises for an invalid tour, the outcome and the
    reason for a failure are described by the returned ValidationResult.
    """
    n = graph.node_count
    sequence = np.asarray(tour.sequence, dtype=np.int64)

    if tour.node_count != n or sequence.shape[0] != n:
        return ValidationResult(False, Reason.SIZE_MISMATCH, node_count=n)

    if n == 0:
        return ValidationResult(False, Reason.EMPTY_GRAPH)

    code, a, b, visited = walk(sequence, graph.adjacency, n)
    a, b, visited = int(a), int(b), int(visited)

    if code == WALK_OUT_OF_RANGE:
        return ValidationResult(False, Reason.NODE_OUT_OF_RANGE, (a, b), visited, n)
    if code == WALK_MISSING_EDGE:
        return ValidationResult(False, Reason.MISSING_EDGE, (a, b), visited, n)

    if visited != n:
        return ValidationResult(False, Reason.NOT_ALL_VISITED, None, visited, n)

    first, last = int(sequence[0]), int(sequence[-1])
    if not graph.adjacency[first, last]:
        return ValidationResult(False, Reason.NOT_CLOSED, (last, first), visited, n, is_path=True)

    return ValidationResult(True, Reason.VALID, None, visited, n, is_path=True)


def hc_validate(tour: Tour, graph: Graph, verbose: bool = False, reporter=None) -> bool:
    """
    Return True if the tour is a valid Hamiltonian cycle for the graph.

    With verbose set, the verdict is printed through the given reporter (a
    default console Reporter if None). Printing never changes the result.
    """
    result = validate_tour(tour, graph)
    if verbose:
        if reporter is None:
            from hcheck.reporter import Reporter
            reporter = Reporter()
        reporter.verdict(result)
    return result.valid
