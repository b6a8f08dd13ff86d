import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sccbench.core.graph import MATERIALIZED, SCAN, DirectedGraph  # noqa: E402


@pytest.fixture(params=[MATERIALIZED, SCAN])
def reverse(request) -> str:
    return request.param


@pytest.fixture
def make_graph(reverse):
    def _make(vertices, edges) -> DirectedGraph:
        graph = DirectedGraph(reverse=reverse)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    return _make
