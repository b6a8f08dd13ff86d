"""Timing comparison between the Kosaraju solver and the networkx reference."""

from __future__ import annotations

import logging
import platform
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Callable, Iterable, List, Sequence, Tuple, TypeVar

import networkx as nx
import numpy as np

from . import __version__ as SCCBENCH_VERSION
from .core.graph import DirectedGraph
from .core.invariants import as_partition
from .core.scc import ITERATIVE, Components, SCCSolver

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ComparisonResult:
    components: Components
    reference_components: List[set[int]]
    elapsed_seconds: float
    reference_elapsed_seconds: float
    traversal: str
    reverse_strategy: str
    repeat: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def agree(self) -> bool:
        return as_partition(self.components.values()) == as_partition(self.reference_components)

    @property
    def speedup(self) -> float:
        """Reference time divided by our time; above 1.0 means we were faster."""

        return self.reference_elapsed_seconds / max(self.elapsed_seconds, 1e-12)

    def to_dict(self) -> dict[str, Any]:
        return {
            "traversal": self.traversal,
            "reverse_strategy": self.reverse_strategy,
            "repeat": self.repeat,
            "elapsed_seconds": float(self.elapsed_seconds),
            "reference_elapsed_seconds": float(self.reference_elapsed_seconds),
            "component_count": len(self.components),
            "reference_component_count": len(self.reference_components),
            "largest_component": max((len(m) for m in self.components.values()), default=0),
            "agree": self.agree,
            **self.metadata,
        }


def build_reference_graph(vertices: Iterable[int], edges: Iterable[Tuple[int, int]]) -> nx.DiGraph:
    """Mirror a graph in networkx. Parallel edges collapse, which does not change SCCs."""

    reference = nx.DiGraph()
    reference.add_nodes_from(vertices)
    reference.add_edges_from(edges)
    return reference


def _best_of(fn: Callable[[], T], repeat: int) -> Tuple[T, float]:
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}.")
    best = float("inf")
    result: T
    for _ in range(repeat):
        start = perf_counter()
        result = fn()
        best = min(best, perf_counter() - start)
    return result, best


def run_comparison(
    graph: DirectedGraph,
    edges: Sequence[Tuple[int, int]],
    *,
    traversal: str = ITERATIVE,
    repeat: int = 1,
) -> ComparisonResult:
    """Time both implementations on the same vertices and edges."""

    reference_graph = build_reference_graph(graph.vertices(), edges)
    solver = SCCSolver(traversal=traversal)

    reference, reference_elapsed = _best_of(
        lambda: list(nx.kosaraju_strongly_connected_components(reference_graph)), repeat
    )
    components, elapsed = _best_of(lambda: solver.compute(graph), repeat)

    result = ComparisonResult(
        components=components,
        reference_components=reference,
        elapsed_seconds=elapsed,
        reference_elapsed_seconds=reference_elapsed,
        traversal=traversal,
        reverse_strategy=graph.reverse_strategy,
        repeat=repeat,
        metadata={"vertices": graph.vertex_count, "edges": graph.edge_count},
    )
    if not result.agree:
        LOGGER.warning(
            "Component mismatch: %s components vs %s from networkx",
            len(result.components),
            len(result.reference_components),
        )
    LOGGER.info(
        "run_comparison elapsed=%.6fs reference=%.6fs traversal=%s reverse=%s",
        elapsed,
        reference_elapsed,
        traversal,
        graph.reverse_strategy,
    )
    return result


def collect_benchmark_env() -> dict[str, Any]:
    return {
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "networkx_version": nx.__version__,
        "numpy_version": np.__version__,
        "sccbench_version": SCCBENCH_VERSION,
    }
