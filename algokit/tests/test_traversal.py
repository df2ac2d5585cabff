"""Tests for depth-first and breadth-first traversal."""
from typing import Dict, List

import pytest

from algokit.exceptions import NodeNotFoundError
from algokit.graph.basic.bfs import BreadthFirstSearch, bfs
from algokit.graph.basic.dfs import DepthFirstSearch, IterativeDepthFirstSearch, dfs, dfs_iterative
from algokit.performance.benchmark_system import GraphDataGenerator
from algokit.utils import Graph


def _diamond() -> Dict[int, List[int]]:
    return {0: [1, 2], 1: [3], 2: [3], 3: []}


def _tree() -> Dict[int, List[int]]:
    return {
        10: [20, 30, 40],
        20: [50, 60],
        30: [],
        40: [70],
        50: [],
        60: [],
        70: [],
    }


def test_bfs_diamond_scenario() -> None:
    assert bfs(_diamond(), 0) == [0, 1, 2, 3]


def test_bfs_visits_layer_by_layer() -> None:
    assert BreadthFirstSearch().execute(_tree(), 10) == [10, 20, 30, 40, 50, 60, 70]


def test_dfs_preorder_follows_adjacency_order() -> None:
    assert dfs(_tree(), 10) == [10, 20, 50, 60, 30, 40, 70]
    assert dfs(_diamond(), 0) == [0, 1, 3, 2]


@pytest.mark.parametrize("graph_factory", [_diamond, _tree])
def test_iterative_dfs_matches_recursive(graph_factory) -> None:
    graph = graph_factory()
    start = next(iter(graph))
    assert dfs_iterative(graph, start) == dfs(graph, start)


def test_iterative_dfs_matches_recursive_on_random_graphs() -> None:
    generator = GraphDataGenerator(seed=7)
    for size in (5, 20, 60):
        graph = generator.random_dag(size, edge_probability=0.2)
        # add back edges so the graphs also contain cycles
        for node in range(1, size, 3):
            graph[node].append(0)
        assert IterativeDepthFirstSearch().execute(graph, 0) == DepthFirstSearch().execute(graph, 0)


@pytest.mark.parametrize("search", [bfs, dfs, dfs_iterative])
def test_cycles_visit_each_node_once(search) -> None:
    graph = {1: [2], 2: [3], 3: [1, 4], 4: [2]}
    order = search(graph, 1)
    assert sorted(order) == [1, 2, 3, 4]
    assert len(order) == len(set(order))


@pytest.mark.parametrize("search", [bfs, dfs, dfs_iterative])
def test_only_reachable_nodes_are_visited(search) -> None:
    graph = {0: [1], 1: [], 2: [0]}
    assert search(graph, 0) == [0, 1]


@pytest.mark.parametrize("search", [bfs, dfs, dfs_iterative])
def test_missing_start_raises(search) -> None:
    with pytest.raises(NodeNotFoundError):
        search(_diamond(), 99)


@pytest.mark.parametrize("search", [bfs, dfs, dfs_iterative])
def test_undeclared_neighbor_raises(search) -> None:
    graph = {0: [1, 5], 1: []}
    with pytest.raises(KeyError) as excinfo:
        search(graph, 0)
    assert excinfo.value.node == 5


def test_bfs_is_shortest_hop_order() -> None:
    # 0 -> 3 directly and through a long chain; 3 must be seen in layer one
    graph = {0: [1, 3], 1: [2], 2: [3], 3: [4], 4: []}
    assert bfs(graph, 0) == [0, 1, 3, 2, 4]


def test_iterative_dfs_handles_deep_chain() -> None:
    depth = 5000
    graph = {i: [i + 1] for i in range(depth)}
    graph[depth] = []
    order = dfs_iterative(graph, 0)
    assert order == list(range(depth + 1))


def test_traversal_does_not_mutate_graph() -> None:
    graph = _tree()
    snapshot = {k: list(v) for k, v in graph.items()}
    bfs(graph, 10)
    dfs(graph, 10)
    dfs_iterative(graph, 10)
    assert graph == snapshot


def test_traversal_accepts_graph_builder() -> None:
    graph = Graph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])
    assert bfs(graph, 0) == [0, 1, 2, 3]
    assert dfs(graph, 0) == [0, 1, 3, 2]
