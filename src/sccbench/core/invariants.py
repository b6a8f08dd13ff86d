"""Invariant checks for SCC results."""

from __future__ import annotations

from typing import AbstractSet, Iterable, Mapping, Sequence

from .graph import DirectedGraph


class InvariantViolation(RuntimeError):
    """Base error for invariant violations."""


class PartitionViolation(InvariantViolation):
    """Raised when components do not partition the vertex set."""


class ReferenceMismatch(InvariantViolation):
    """Raised when two SCC results disagree on membership."""


def validate_partition(graph: DirectedGraph, components: Mapping[int, Sequence[int]]) -> None:
    """Ensure every registered vertex sits in exactly one component, rooted inside it."""

    seen: dict[int, int] = {}
    for root, members in components.items():
        if root not in members:
            raise PartitionViolation(f"Component root {root} is not a member of its own component")
        for vertex in members:
            if vertex not in graph:
                raise PartitionViolation(f"Component {root} contains unregistered vertex {vertex}")
            if vertex in seen:
                raise PartitionViolation(f"Vertex {vertex} appears in components {seen[vertex]} and {root}")
            seen[vertex] = root
    missing = [vertex for vertex in graph if vertex not in seen]
    if missing:
        raise PartitionViolation(f"Vertices missing from every component: {missing}")


def as_partition(groups: Iterable[Iterable[int]]) -> set[frozenset[int]]:
    return {frozenset(group) for group in groups}


def validate_against_reference(
    components: Mapping[int, Sequence[int]],
    reference: Iterable[AbstractSet[int]],
) -> None:
    """Check that two component listings describe the same partition."""

    ours = as_partition(components.values())
    theirs = as_partition(reference)
    if ours != theirs:
        only_ours = sorted(sorted(group) for group in ours - theirs)
        only_theirs = sorted(sorted(group) for group in theirs - ours)
        raise ReferenceMismatch(f"Partitions differ: ours-only={only_ours} reference-only={only_theirs}")
