"""Plain-text rendering of graphs, components, and timings."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Mapping, Sequence

from .benchmark import ComparisonResult
from .core.graph import DirectedGraph


def _format_neighbors(graph: DirectedGraph, arrow: str, incoming: bool) -> str:
    lines: List[str] = []
    for vertex in graph:
        neighbors = graph.in_neighbors(vertex) if incoming else graph.out_neighbors(vertex)
        lines.append(f"Vertex ({vertex}):")
        lines.append("\t" + "".join([str(vertex)] + [f"{arrow}{n}" for n in neighbors]))
    return "\n".join(lines)


def format_out_neighbors(graph: DirectedGraph) -> str:
    """Render ``u -> a -> b`` for every vertex."""

    return _format_neighbors(graph, " -> ", incoming=False)


def format_in_neighbors(graph: DirectedGraph) -> str:
    """Render ``v <- a <- b`` for every vertex."""

    return _format_neighbors(graph, " <- ", incoming=True)


def format_components(components: Mapping[int, Sequence[int]]) -> str:
    return "\n".join(f"[{root}] -> [{', '.join(str(v) for v in members)}]" for root, members in components.items())


def format_reference_components(components: Iterable[AbstractSet[int]]) -> str:
    return "\n".join(f"{{{', '.join(str(v) for v in sorted(group))}}}" for group in components)


def format_timings(result: ComparisonResult) -> str:
    lines = [
        f"Own implementation ({result.traversal}, {result.reverse_strategy}): {result.elapsed_seconds * 1000:.3f} ms",
        f"networkx reference: {result.reference_elapsed_seconds * 1000:.3f} ms",
    ]
    if result.repeat > 1:
        lines.append(f"(best of {result.repeat} runs)")
    lines.append("Partitions agree" if result.agree else "Partitions DIFFER")
    return "\n".join(lines)
