import numpy as np
from typing import NamedTuple, Tuple

from hcheck.diagnostics import AllocationError, Diagnostic, DiagnosticCode
from hcheck.formats import EDGE_DATA_SECTION, SENTINEL, parse_int, read_header, resource_unavailable

"""
GRAPH REPRESENTATION:

Graphs with N nodes are represented as boolean numpy arrays of shape (N + 1, N + 1).
Nodes are numbered 1..N as in the input files, so the adjacency matrix is indexed
directly with node ids and row/column 0 is unused filler that is always False.
adjacency[u, v] is True iff there is an undirected edge between u and v.
"""


class Graph(NamedTuple):
    node_count: int
    edge_count: int
    adjacency: np.ndarray
    diagnostics: Tuple[Diagnostic, ...] = ()

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if u and v are valid node ids joined by an edge."""
        if not (0 < u <= self.node_count and 0 < v <= self.node_count):
            return False
        return bool(self.adjacency[u, v])

    def degree(self, u: int) -> int:
        if not 0 < u <= self.node_count:
            return 0
        return int(np.count_nonzero(self.adjacency[u]))

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.adjacency, self.adjacency.T))


def allocate_adjacency(node_count: int) -> np.ndarray:
    """Allocate an all-False (N + 1, N + 1) adjacency matrix."""
    try:
        return np.zeros((node_count + 1, node_count + 1), dtype=np.bool_)
    except (MemoryError, ValueError) as e:
        raise AllocationError("adjacency matrix", node_count) from e


def empty_graph(diagnostics=()) -> Graph:
    """A graph with no nodes, used when the input cannot be read."""
    return Graph(0, 0, allocate_adjacency(0), tuple(diagnostics))


def from_edges(node_count: int, edges) -> Graph:
    """
    Build a graph from an iterable of (u, v) pairs.

    Edges are recorded with the same rules as read_graph: pairs with a
    non-positive id are ignored, duplicates and self loops are kept.
    """
    adjacency = allocate_adjacency(node_count)
    edge_count = 0
    for u, v in edges:
        if u > 0 and v > 0:
            adjacency[u, v] = True
            adjacency[v, u] = True
            edge_count += 1
    return Graph(node_count, edge_count, adjacency)


def read_graph(path) -> Graph:
    """
    Read an undirected graph from a TSPLIB-like .hcp file.

    Edge lines hold a pair `u v`. The edge section ends at a line whose first
    token is -1 or at the end of the file. A file that cannot be opened gives
    an empty graph with a RESOURCE_UNAVAILABLE diagnostic instead of raising.

    Raises AllocationError if the adjacency matrix does not fit in memory.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return parse_graph(f)
    except OSError as e:
        return empty_graph([resource_unavailable(path, e)])


def parse_graph(lines) -> Graph:
    """Parse graph text given as an iterable of lines."""
    lines = enumerate(lines, start=1)
    header = read_header(lines, EDGE_DATA_SECTION)
    node_count = header.dimension
    diagnostics = list(header.diagnostics)

    adjacency = allocate_adjacency(node_count)
    edge_count = 0

    for lineno, line in lines:
        tokens = line.split()
        if not tokens:
            continue

        try:
            u = parse_int(tokens[0])
            if u == SENTINEL:
                break
            # A line with a single token leaves v at 0, which is not recorded
            v = parse_int(tokens[1]) if len(tokens) > 1 else 0
        except ValueError as e:
            diagnostics.append(Diagnostic(
                DiagnosticCode.MALFORMED_DATA, f"Bad edge {line.strip()!r}: {e}", lineno
            ))
            continue

        if u > node_count or v > node_count:
            diagnostics.append(Diagnostic(
                DiagnosticCode.MALFORMED_DATA,
                f"Edge ({u}, {v}) refers to a node outside 1..{node_count}",
                lineno,
            ))
            continue

        if u > 0 and v > 0:
            adjacency[u, v] = True
            adjacency[v, u] = True
            edge_count += 1

    return Graph(node_count, edge_count, adjacency, tuple(diagnostics))
