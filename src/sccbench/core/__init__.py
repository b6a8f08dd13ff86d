"""
Core graph and SCC utilities.

The core package includes the directed graph with its two reverse-adjacency
strategies, Kosaraju's SCC solver, and invariant helpers used to check the
resulting partitions.
"""

from . import graph, scc, invariants  # noqa: F401
from .graph import DirectedGraph, GraphError, UnknownVertexError, build_graph
from .scc import SCCSolver, component_index, strongly_connected_components

__all__ = [
    "graph",
    "scc",
    "invariants",
    "DirectedGraph",
    "GraphError",
    "UnknownVertexError",
    "build_graph",
    "SCCSolver",
    "component_index",
    "strongly_connected_components",
]
