"""Random directed graph generation for benchmarks."""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .core.graph import MATERIALIZED, DirectedGraph

LOGGER = logging.getLogger(__name__)


def random_edges(vertex_count: int, edge_count: int, rng: np.random.Generator) -> List[Tuple[int, int]]:
    """
    Draw ``edge_count`` edges over ``0..vertex_count-1``.

    Both endpoints are redrawn together until they differ, so no self loops
    are produced. Duplicate edges are kept.
    """

    if vertex_count < 2:
        raise ValueError(f"vertex_count must be at least 2, got {vertex_count}.")
    if edge_count < 0:
        raise ValueError(f"edge_count must be non-negative, got {edge_count}.")
    edges: List[Tuple[int, int]] = []
    for _ in range(edge_count):
        u, v = rng.integers(0, vertex_count, size=2)
        while u == v:
            u, v = rng.integers(0, vertex_count, size=2)
        edges.append((int(u), int(v)))
    return edges


def random_graph(
    vertex_count: int,
    edge_count: int,
    *,
    seed: int | None = None,
    reverse: str = MATERIALIZED,
) -> Tuple[DirectedGraph, List[Tuple[int, int]]]:
    """Build a random graph and return it with the edge list used to build it."""

    rng = np.random.default_rng(seed)
    edges = random_edges(vertex_count, edge_count, rng)
    graph = DirectedGraph(reverse=reverse)
    for vertex in range(vertex_count):
        graph.add_vertex(vertex)
    for u, v in edges:
        graph.add_edge(u, v)
    LOGGER.debug(
        "random_graph vertices=%s edges=%s seed=%s reverse=%s", vertex_count, edge_count, seed, reverse
    )
    return graph, edges
