"""Strongly connected components via Kosaraju's two-pass DFS."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Set, Tuple

from .graph import DirectedGraph

ITERATIVE = "iterative"
RECURSIVE = "recursive"
TRAVERSALS = (ITERATIVE, RECURSIVE)

LOGGER = logging.getLogger(__name__)

Components = Dict[int, List[int]]


class SCCSolver:
    """
    Kosaraju's algorithm over a :class:`DirectedGraph`.

    Pass one walks forward edges from every vertex in registration order and
    records vertices in post-order. Pass two takes vertices in reverse finish
    order and collects everything reachable along reverse edges that is not
    yet assigned; the starting vertex becomes the component root.

    ``traversal="iterative"`` keeps an explicit stack of neighbor iterators
    and visits vertices in exactly the same order as ``"recursive"``, which is
    limited by the interpreter recursion depth.
    """

    def __init__(self, traversal: str = ITERATIVE) -> None:
        if traversal not in TRAVERSALS:
            raise ValueError(f"Unknown traversal '{traversal}'. Expected one of: {', '.join(TRAVERSALS)}.")
        self.traversal = traversal

    def compute(self, graph: DirectedGraph) -> Components:
        visited: Set[int] = set()
        finish_order: List[int] = []
        if self.traversal == ITERATIVE:
            visit: Callable[..., None] = _visit_iterative
            assign: Callable[..., None] = _assign_iterative
        else:
            visit = _visit_recursive
            assign = _assign_recursive

        for vertex in graph:
            if vertex not in visited:
                visit(graph, vertex, visited, finish_order)

        assigned: Set[int] = set()
        components: Components = {}
        while finish_order:
            root = finish_order.pop()
            if root in assigned:
                continue
            members: List[int] = []
            assign(graph, root, assigned, members)
            components[root] = members
            if LOGGER.isEnabledFor(logging.DEBUG) and len(components) % 10000 == 0:
                LOGGER.debug("kosaraju progress: %s components, %s/%s assigned", len(components), len(assigned), len(graph))

        LOGGER.debug(
            "kosaraju traversal=%s reverse=%s vertices=%s edges=%s components=%s",
            self.traversal,
            graph.reverse_strategy,
            graph.vertex_count,
            graph.edge_count,
            len(components),
        )
        return components


def _visit_recursive(graph: DirectedGraph, vertex: int, visited: Set[int], finish_order: List[int]) -> None:
    visited.add(vertex)
    for target in graph.out_neighbors(vertex):
        if target not in visited:
            _visit_recursive(graph, target, visited, finish_order)
    finish_order.append(vertex)


def _assign_recursive(graph: DirectedGraph, vertex: int, assigned: Set[int], members: List[int]) -> None:
    assigned.add(vertex)
    members.append(vertex)
    for source in graph.in_neighbors(vertex):
        if source not in assigned:
            _assign_recursive(graph, source, assigned, members)


def _visit_iterative(graph: DirectedGraph, start: int, visited: Set[int], finish_order: List[int]) -> None:
    visited.add(start)
    stack: List[Tuple[int, Iterator[int]]] = [(start, graph.out_neighbors(start))]
    while stack:
        vertex, targets = stack[-1]
        for target in targets:
            if target not in visited:
                visited.add(target)
                stack.append((target, graph.out_neighbors(target)))
                break
        else:
            stack.pop()
            finish_order.append(vertex)


def _assign_iterative(graph: DirectedGraph, root: int, assigned: Set[int], members: List[int]) -> None:
    assigned.add(root)
    members.append(root)
    stack: List[Iterator[int]] = [graph.in_neighbors(root)]
    while stack:
        for source in stack[-1]:
            if source not in assigned:
                assigned.add(source)
                members.append(source)
                stack.append(graph.in_neighbors(source))
                break
        else:
            stack.pop()


def strongly_connected_components(graph: DirectedGraph, traversal: str = ITERATIVE) -> Components:
    return SCCSolver(traversal=traversal).compute(graph)


def component_index(components: Components) -> Dict[int, int]:
    """Map every vertex to the root of its component."""

    return {vertex: root for root, members in components.items() for vertex in members}
