"""Tests for the Dijkstra shortest path algorithm."""
from typing import Dict, List, Tuple
import math

import pytest

from algokit.exceptions import NegativeWeightError, NodeNotFoundError
from algokit.graph.advanced.dijkstra import Dijkstra, HeapDijkstra, reconstruct_path, shortest_paths
from algokit.performance.benchmark_system import GraphDataGenerator


def _build_graph() -> Dict[str, List[Tuple[str, float]]]:
    """Create a sample weighted undirected graph for testing."""
    return {
        "A": [("B", 1), ("C", 4)],
        "B": [("A", 1), ("C", 2), ("D", 5)],
        "C": [("A", 4), ("B", 2)],
        "D": [("B", 5)],
        "E": [],  # unreachable node
    }


@pytest.fixture(params=[Dijkstra, HeapDijkstra])
def algo(request):
    return request.param()


def test_dijkstra_shortest_paths(algo) -> None:
    distances = algo.execute(_build_graph(), "A")

    assert distances["A"] == 0
    assert distances["B"] == 1
    assert distances["C"] == 3  # via A -> B -> C
    assert distances["D"] == 6  # via A -> B -> D


def test_dijkstra_unreachable_node(algo) -> None:
    distances = algo.execute(_build_graph(), "A")

    assert math.isinf(distances["E"])
    assert set(distances) == set(_build_graph())


def test_dijkstra_integer_node_ids(algo) -> None:
    graph = {0: [(1, 4), (2, 1)], 1: [(3, 1)], 2: [(1, 2), (3, 5)], 3: []}
    assert algo.execute(graph, 0) == {0: 0, 1: 3, 2: 1, 3: 4}


def test_dijkstra_zero_weight_edges(algo) -> None:
    graph = {0: [(1, 0)], 1: [(2, 0)], 2: []}
    assert algo.execute(graph, 0) == {0: 0, 1: 0, 2: 0}


def test_dijkstra_rejects_negative_weight(algo) -> None:
    graph = {0: [(1, 2)], 1: [(2, -1)], 2: []}
    with pytest.raises(NegativeWeightError) as excinfo:
        algo.execute(graph, 0)
    assert (excinfo.value.source, excinfo.value.target) == (1, 2)
    assert isinstance(excinfo.value, ValueError)


def test_dijkstra_missing_start(algo) -> None:
    with pytest.raises(NodeNotFoundError):
        algo.execute(_build_graph(), "Z")


def test_dijkstra_edge_to_undeclared_node(algo) -> None:
    graph = {0: [(1, 1)], 1: [(7, 1)]}
    with pytest.raises(NodeNotFoundError):
        algo.execute(graph, 0)


def test_scan_and_heap_agree_and_satisfy_triangle_inequality() -> None:
    generator = GraphDataGenerator(seed=11)
    for size in (1, 8, 40):
        graph = generator.random_weighted_graph(size, edge_probability=0.25)
        scan = Dijkstra().execute(graph, 0)
        heap = HeapDijkstra().execute(graph, 0)

        assert scan.keys() == heap.keys()
        for node in scan:
            assert scan[node] == pytest.approx(heap[node])
        assert scan[0] == 0
        for u, edges in graph.items():
            for v, weight in edges:
                assert scan[v] <= scan[u] + weight + 1e-9
                assert scan[v] >= 0


def test_shortest_path_tree_and_reconstruction(algo) -> None:
    distances, predecessors = algo.shortest_path_tree(_build_graph(), "A")

    assert reconstruct_path(predecessors, "A", "D") == ["A", "B", "D"]
    assert reconstruct_path(predecessors, "A", "C") == ["A", "B", "C"]
    assert reconstruct_path(predecessors, "A", "A") == ["A"]
    assert reconstruct_path(predecessors, "A", "E") == []
    with pytest.raises(NodeNotFoundError):
        reconstruct_path(predecessors, "A", "Q")


def test_shortest_paths_strategy_selection() -> None:
    graph = _build_graph()
    assert shortest_paths(graph, "A", strategy="scan") == shortest_paths(graph, "A", strategy="heap")
    with pytest.raises(ValueError):
        shortest_paths(graph, "A", strategy="bellman-ford")


def test_dijkstra_does_not_mutate_graph(algo) -> None:
    graph = _build_graph()
    snapshot = {k: list(v) for k, v in graph.items()}
    algo.execute(graph, "A")
    assert graph == snapshot
