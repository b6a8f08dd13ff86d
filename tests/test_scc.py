import sys

import networkx as nx
import pytest

from sccbench.core import scc
from sccbench.core.graph import MATERIALIZED, SCAN, build_graph
from sccbench.core.invariants import as_partition, validate_partition
from sccbench.generate import random_graph


def partition(components):
    return as_partition(components.values())


@pytest.fixture(params=scc.TRAVERSALS)
def solver(request) -> scc.SCCSolver:
    return scc.SCCSolver(traversal=request.param)


def test_three_cycle_is_one_component(make_graph, solver):
    graph = make_graph([0, 1, 2], [(0, 1), (1, 2), (2, 0)])
    components = solver.compute(graph)
    assert partition(components) == {frozenset({0, 1, 2})}
    assert components == {0: [0, 2, 1]}


def test_chain_without_back_edge_is_all_singletons(make_graph, solver):
    graph = make_graph([0, 1, 2], [(0, 1), (1, 2)])
    assert solver.compute(graph) == {0: [0], 1: [1], 2: [2]}


def test_two_disjoint_two_cycles(make_graph, solver):
    graph = make_graph([0, 1, 2, 3], [(0, 1), (1, 0), (2, 3), (3, 2)])
    components = solver.compute(graph)
    assert len(components) == 2
    assert partition(components) == {frozenset({0, 1}), frozenset({2, 3})}


def test_empty_graph_yields_no_components(make_graph, solver):
    assert solver.compute(make_graph([], [])) == {}


def test_single_vertex_is_singleton(make_graph, solver):
    assert solver.compute(make_graph([42], [])) == {42: [42]}


def test_isolated_vertex_is_rooted_at_itself(make_graph, solver):
    graph = make_graph([0, 1, 2, 3], [(0, 1), (1, 0), (1, 2)])
    components = solver.compute(graph)
    assert components[3] == [3]


def test_self_loops_do_not_change_partition(reverse, solver):
    graph, edges = random_graph(30, 45, seed=5, reverse=reverse)
    looped = build_graph(graph.vertices(), edges + [(v, v) for v in graph.vertices()], reverse=reverse)
    base = solver.compute(graph)
    with_loops = solver.compute(looped)
    assert partition(base) == partition(with_loops)
    assert len(base) == len(with_loops)


def test_parallel_edges_do_not_change_partition(make_graph, solver):
    single = make_graph([0, 1, 2], [(0, 1), (1, 0), (1, 2)])
    doubled = make_graph([0, 1, 2], [(0, 1), (0, 1), (1, 0), (1, 0), (1, 2), (1, 2)])
    assert solver.compute(single) == solver.compute(doubled)


def test_compute_is_deterministic(reverse, solver):
    graph, _ = random_graph(60, 150, seed=11, reverse=reverse)
    first = solver.compute(graph)
    second = solver.compute(graph)
    assert first == second
    assert list(first) == list(second)


def test_compute_does_not_mutate_graph(reverse, solver):
    graph, edges = random_graph(20, 40, seed=3, reverse=reverse)
    before = list(graph.edges())
    solver.compute(graph)
    assert list(graph.edges()) == before
    assert graph.edge_count == len(edges)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_components_match_mutual_reachability(reverse, seed):
    graph, edges = random_graph(25, 40, seed=seed, reverse=reverse)
    components = scc.strongly_connected_components(graph)
    validate_partition(graph, components)

    oracle = nx.DiGraph()
    oracle.add_nodes_from(graph.vertices())
    oracle.add_edges_from(edges)
    reach = {v: nx.descendants(oracle, v) | {v} for v in oracle}
    root_of = scc.component_index(components)
    for u in graph:
        for v in graph:
            mutual = v in reach[u] and u in reach[v]
            assert mutual == (root_of[u] == root_of[v]), (u, v)


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_reverse_strategies_agree(seed):
    materialized, _ = random_graph(40, 90, seed=seed, reverse=MATERIALIZED)
    scanned, _ = random_graph(40, 90, seed=seed, reverse=SCAN)
    ours = scc.strongly_connected_components(materialized)
    theirs = scc.strongly_connected_components(scanned)
    assert partition(ours) == partition(theirs)
    assert list(ours) == list(theirs)


@pytest.mark.parametrize("seed", [4, 5])
def test_traversals_agree_exactly(reverse, seed):
    graph, _ = random_graph(50, 120, seed=seed, reverse=reverse)
    iterative = scc.SCCSolver(traversal=scc.ITERATIVE).compute(graph)
    recursive = scc.SCCSolver(traversal=scc.RECURSIVE).compute(graph)
    assert iterative == recursive


def test_iterative_traversal_handles_chains_deeper_than_recursion_limit():
    n = sys.getrecursionlimit() * 2
    edges = [(i, i + 1) for i in range(n - 1)] + [(n - 1, 0)]
    graph = build_graph(range(n), edges)
    components = scc.SCCSolver(traversal=scc.ITERATIVE).compute(graph)
    assert len(components) == 1
    assert sorted(components[0]) == list(range(n))


def test_recursive_traversal_hits_recursion_limit_on_deep_chains():
    n = sys.getrecursionlimit() * 2
    graph = build_graph(range(n), [(i, i + 1) for i in range(n - 1)])
    with pytest.raises(RecursionError):
        scc.SCCSolver(traversal=scc.RECURSIVE).compute(graph)


def test_component_index_maps_members_to_root():
    assert scc.component_index({0: [0, 2], 1: [1]}) == {0: 0, 2: 0, 1: 1}


def test_unknown_traversal_is_rejected():
    with pytest.raises(ValueError, match="traversal"):
        scc.SCCSolver(traversal="bfs")
