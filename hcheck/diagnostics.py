from enum import Enum
from typing import NamedTuple, Optional

"""
DIAGNOSTICS:

Parsing problems are never raised. Readers collect them as Diagnostic values
and hand them back next to the parsed data, the caller decides what to print.
The only fatal condition is running out of memory for the graph or tour.
"""


class DiagnosticCode(Enum):
    RESOURCE_UNAVAILABLE = "resource-unavailable"
    MALFORMED_HEADER = "malformed-header"
    MALFORMED_DATA = "malformed-data"
    OUT_OF_RANGE_NODE = "out-of-range-node"
    NODE_COUNT_MISMATCH = "node-count-mismatch"


class Diagnostic(NamedTuple):
    code: DiagnosticCode
    message: str
    line: Optional[int] = None

    def __str__(self):
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class HCheckError(Exception):
    """Base class for errors that abort a check."""


class AllocationError(HCheckError):
    """Raised when the adjacency matrix or tour buffer cannot be allocated."""

    def __init__(self, what: str, node_count: int):
        super().__init__(f"Could not allocate {what} for {node_count} nodes")
        self.what = what
        self.node_count = node_count
