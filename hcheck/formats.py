from typing import Iterator, List, NamedTuple, Tuple

from hcheck.diagnostics import Diagnostic, DiagnosticCode

"""
TSPLIB-LIKE TEXT FORMAT:

Both input files start with a header of `KEY : VALUE` lines and switch to a
data section at a marker line:

    NAME : example
    DIMENSION : 4
    EDGE_DATA_SECTION      (graphs) / TOUR_SECTION (tours)
    ...
    -1

Only DIMENSION is read from the header, everything else is ignored.
"""

EDGE_DATA_SECTION = "EDGE_DATA_SECTION"
TOUR_SECTION = "TOUR_SECTION"
SENTINEL = -1

NumberedLines = Iterator[Tuple[int, str]]


class Header(NamedTuple):
    dimension: int
    found_marker: bool
    diagnostics: Tuple[Diagnostic, ...]


def parse_int(token: str) -> int:
    """
    Parse a decimal integer token.

    Unlike atoi, text that is not a number raises ValueError instead of
    silently turning into 0.
    """
    token = token.strip()
    if not token or not token.lstrip("+-").isdigit():
        raise ValueError(f"{token!r} is not an integer")
    return int(token)


def split_header_line(line: str) -> List[str]:
    """Split a header line on whitespace and colons."""
    return line.replace(":", " ").split()


def read_header(lines: NumberedLines, marker: str) -> Header:
    """
    Consume header lines until one starts with `marker`.

    The iterator is left positioned on the first line of the data section.
    A missing, non-numeric or negative DIMENSION gives a dimension of 0.
    """
    dimension = None
    diagnostics = []

    for lineno, line in lines:
        if line.startswith(marker):
            break

        tokens = split_header_line(line)
        if not tokens or tokens[0] != "DIMENSION":
            continue

        if len(tokens) < 2:
            diagnostics.append(Diagnostic(
                DiagnosticCode.MALFORMED_HEADER, "DIMENSION has no value", lineno
            ))
            dimension = 0
            continue

        try:
            dimension = parse_int(tokens[1])
        except ValueError:
            diagnostics.append(Diagnostic(
                DiagnosticCode.MALFORMED_HEADER,
                f"DIMENSION value {tokens[1]!r} is not an integer",
                lineno,
            ))
            dimension = 0
            continue

        if dimension < 0:
            diagnostics.append(Diagnostic(
                DiagnosticCode.MALFORMED_HEADER,
                f"DIMENSION must not be negative, got {dimension}",
                lineno,
            ))
            dimension = 0
    else:
        diagnostics.append(Diagnostic(
            DiagnosticCode.MALFORMED_HEADER, f"{marker} marker not found"
        ))
        if dimension is None:
            diagnostics.append(Diagnostic(
                DiagnosticCode.MALFORMED_HEADER, "DIMENSION not found"
            ))
        return Header(dimension or 0, False, tuple(diagnostics))

    if dimension is None:
        diagnostics.append(Diagnostic(
            DiagnosticCode.MALFORMED_HEADER, "DIMENSION not found"
        ))
        dimension = 0

    return Header(dimension, True, tuple(diagnostics))


def resource_unavailable(path, error: OSError) -> Diagnostic:
    reason = error.strerror or str(error)
    return Diagnostic(
        DiagnosticCode.RESOURCE_UNAVAILABLE, f"Cannot open {path}: {reason}"
    )
