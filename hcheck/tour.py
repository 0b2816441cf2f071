import numpy as np
from typing import NamedTuple, Tuple

from hcheck.diagnostics import AllocationError, Diagnostic, DiagnosticCode
from hcheck.formats import SENTINEL, TOUR_SECTION, parse_int, read_header, resource_unavailable

"""
TOUR REPRESENTATION:

Tours are 1D int64 arrays of node ids in visiting order, of length DIMENSION.
The edge from the last node back to the first is implied, not stored.
Slots that the file did not fill keep the value ABSENT (0), which is never a
node id and therefore fails every edge lookup during validation.
"""

ABSENT = 0


class Tour(NamedTuple):
    node_count: int
    sequence: np.ndarray
    found: int = 0
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def complete(self) -> bool:
        return self.found == self.node_count


def allocate_sequence(node_count: int) -> np.ndarray:
    try:
        return np.full(node_count, ABSENT, dtype=np.int64)
    except (MemoryError, ValueError) as e:
        raise AllocationError("tour", node_count) from e


def from_sequence(sequence) -> Tour:
    """Wrap an in-memory node sequence as a tour of the same length."""
    sequence = np.asarray(sequence, dtype=np.int64)
    return Tour(len(sequence), sequence, len(sequence))


def format_path(sequence) -> str:
    """Render a node sequence comma separated, e.g. `1, 2, 3`."""
    return ", ".join(str(node) for node in sequence)


def read_tour(path) -> Tour:
    """
    Read a tour from a TSPLIB-like .tour file.

    Node ids may be spread over any number of lines and are read until a -1
    token, which may share a line with data. Ids outside 1..DIMENSION are
    reported and skipped without taking a slot.

    Raises AllocationError if the sequence does not fit in memory.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return parse_tour(f)
    except OSError as e:
        return Tour(0, allocate_sequence(0), 0, (resource_unavailable(path, e),))


def parse_tour(lines) -> Tour:
    """Parse tour text given as an iterable of lines."""
    lines = enumerate(lines, start=1)
    header = read_header(lines, TOUR_SECTION)
    node_count = header.dimension
    diagnostics = list(header.diagnostics)

    sequence = allocate_sequence(node_count)
    found = 0

    for lineno, line in lines:
        done = False
        for token in line.split():
            try:
                node = parse_int(token)
            except ValueError as e:
                diagnostics.append(Diagnostic(DiagnosticCode.MALFORMED_DATA, str(e), lineno))
                continue

            if node == SENTINEL:
                done = True
                break

            if 0 < node <= node_count:
                # Extra nodes past DIMENSION are counted but have no slot
                if found < node_count:
                    sequence[found] = node
                found += 1
            else:
                diagnostics.append(Diagnostic(
                    DiagnosticCode.OUT_OF_RANGE_NODE, f"Node {node} is out of range", lineno
                ))
        if done:
            break

    if found != node_count:
        diagnostics.append(Diagnostic(
            DiagnosticCode.NODE_COUNT_MISMATCH,
            f"Not all nodes specified in tour solution expected {node_count} found {found}",
        ))

    return Tour(node_count, sequence, found, tuple(diagnostics))
