"""Directed graph with integer vertices used by the SCC solver."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

MATERIALIZED = "materialized"
SCAN = "scan"
REVERSE_STRATEGIES = (MATERIALIZED, SCAN)


class GraphError(Exception):
    """Base error for graph construction and lookups."""


class UnknownVertexError(GraphError, KeyError):
    """Raised when an edge or neighbor lookup names an unregistered vertex."""

    def __init__(self, vertex: int) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"vertex {self.vertex!r} is not registered in the graph"


class MaterializedReverse:
    """Reverse adjacency kept in sync on every edge insert."""

    name = MATERIALIZED

    def __init__(self) -> None:
        self.sources: Dict[int, List[int]] = {}

    def add_vertex(self, vertex: int) -> None:
        self.sources.setdefault(vertex, [])

    def add_edge(self, u: int, v: int) -> None:
        self.sources[v].append(u)

    def neighbors(self, graph: "DirectedGraph", v: int) -> Iterator[int]:
        return iter(self.sources[v])


class ScanningReverse:
    """
    Reverse adjacency derived on demand from the forward lists.

    Every lookup walks all forward edges, so a single call costs O(V + E) and
    a full Kosaraju run becomes O(V * (V + E)). Only useful for comparing
    against the materialized form.
    """

    name = SCAN

    def add_vertex(self, vertex: int) -> None:
        pass

    def add_edge(self, u: int, v: int) -> None:
        pass

    def neighbors(self, graph: "DirectedGraph", v: int) -> Iterator[int]:
        return (u for u, targets in graph.adjacency().items() for w in targets if w == v)


def make_reverse_index(strategy: str) -> MaterializedReverse | ScanningReverse:
    if strategy == MATERIALIZED:
        return MaterializedReverse()
    if strategy == SCAN:
        return ScanningReverse()
    raise ValueError(f"Unknown reverse strategy '{strategy}'. Expected one of: {', '.join(REVERSE_STRATEGIES)}.")


class DirectedGraph:
    """Vertex set plus forward edges; reverse lookups go through a pluggable index."""

    def __init__(self, reverse: str = MATERIALIZED) -> None:
        self._forward: Dict[int, List[int]] = {}
        self._reverse = make_reverse_index(reverse)
        self._edge_count = 0

    @property
    def reverse_strategy(self) -> str:
        return self._reverse.name

    def add_vertex(self, vertex: int) -> None:
        if vertex in self._forward:
            return
        self._forward[vertex] = []
        self._reverse.add_vertex(vertex)

    def add_edge(self, u: int, v: int) -> None:
        """Append the edge u -> v. Both endpoints must already be registered."""

        if u not in self._forward:
            raise UnknownVertexError(u)
        if v not in self._forward:
            raise UnknownVertexError(v)
        self._forward[u].append(v)
        self._reverse.add_edge(u, v)
        self._edge_count += 1

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._forward

    def out_neighbors(self, u: int) -> Iterator[int]:
        if u not in self._forward:
            raise UnknownVertexError(u)
        return iter(self._forward[u])

    def in_neighbors(self, v: int) -> Iterator[int]:
        if v not in self._forward:
            raise UnknownVertexError(v)
        return self._reverse.neighbors(self, v)

    def adjacency(self) -> Dict[int, List[int]]:
        return self._forward

    def vertices(self) -> List[int]:
        return list(self._forward)

    def edges(self) -> Iterator[Tuple[int, int]]:
        for u, targets in self._forward.items():
            for v in targets:
                yield u, v

    @property
    def vertex_count(self) -> int:
        return len(self._forward)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._forward

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return (
            f"DirectedGraph(vertices={self.vertex_count}, edges={self.edge_count}, "
            f"reverse={self.reverse_strategy!r})"
        )


def build_graph(
    vertices: Iterable[int],
    edges: Iterable[Tuple[int, int]],
    reverse: str = MATERIALIZED,
) -> DirectedGraph:
    """Convenience helper to build a graph from iterables."""

    graph = DirectedGraph(reverse=reverse)
    for vertex in vertices:
        graph.add_vertex(vertex)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph
