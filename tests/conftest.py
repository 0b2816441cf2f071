"""Pytest configuration for the hcheck test suite.

Hypothesis profiles:
- dev: local development (200 examples)
- ci: CI runs (50 examples, derandomized)

Profile selection: HYPOTHESIS_PROFILE env var, else "ci" when CI=true, else "dev".
"""

import os

import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "dev",
    max_examples=200,
    # the first call of each numba kernel compiles it
    deadline=None,
)

settings.register_profile(
    "ci",
    max_examples=50,
    derandomize=True,
    deadline=None,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit:
        return explicit
    if os.environ.get("CI", "").lower() == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


SQUARE_GRAPH = """NAME : square
COMMENT : 4-cycle 1-2-3-4-1
TYPE : HCP
DIMENSION : 4
EDGE_DATA_SECTION
1 2
2 3
3 4
4 1
-1
EOF
"""


def render_tour(nodes, dimension=None, per_line=10):
    """Render a TSPLIB-like tour file listing the given node ids."""
    if dimension is None:
        dimension = len(nodes)
    lines = ["NAME : test.tour", "TYPE : TOUR", f"DIMENSION : {dimension}", "TOUR_SECTION"]
    for i in range(0, len(nodes), per_line):
        lines.append(" ".join(str(n) for n in nodes[i:i + per_line]))
    lines.append("-1")
    lines.append("EOF")
    return "\n".join(lines) + "\n"


@pytest.fixture
def tour_text():
    return render_tour


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def square_graph_file(write_file):
    return write_file("square.hcp", SQUARE_GRAPH)
