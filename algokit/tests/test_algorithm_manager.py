import logging

import pytest

from algokit.algorithm_manager import (
    AlgorithmCategory,
    AlgorithmManager,
    AlgorithmRegistry,
)
from algokit.base import Algorithm
from algokit.config import ToolkitConfig
from algokit.exceptions import NodeNotFoundError
from algokit.graph.advanced.dijkstra import Dijkstra, HeapDijkstra
from algokit.graph.basic.dfs import DepthFirstSearch, IterativeDepthFirstSearch


class _Double(Algorithm):
    def execute(self, value):
        return value * 2


def test_default_registry_contents():
    registry = AlgorithmRegistry()
    names = set(registry.list_algorithms())
    assert {
        "dfs", "dfs_recursive", "dfs_iterative", "bfs",
        "dijkstra", "dijkstra_scan", "dijkstra_heap",
        "topological_sort", "topological_sort_kahn",
        "kruskal_mst", "kmp", "rabin_karp",
    } <= names
    assert registry.list_algorithms(AlgorithmCategory.STRING_SEARCH) == ["kmp", "rabin_karp"]
    assert registry.get_category("bfs") is AlgorithmCategory.TRAVERSAL


def test_strategy_aliases_follow_config():
    default = AlgorithmRegistry()
    assert default.get_algorithm("dfs") is IterativeDepthFirstSearch
    assert default.get_algorithm("dijkstra") is Dijkstra

    custom = AlgorithmRegistry(ToolkitConfig(traversal_strategy="recursive", shortest_path_strategy="heap"))
    assert custom.get_algorithm("dfs") is DepthFirstSearch
    assert custom.get_algorithm("dijkstra") is HeapDijkstra


def test_register_and_unregister():
    registry = AlgorithmRegistry()
    registry.register("double", _Double, AlgorithmCategory.TRAVERSAL)
    assert "double" in registry
    registry.unregister("double")
    assert "double" not in registry
    with pytest.raises(KeyError):
        registry.get_algorithm("double")


def test_register_rejects_non_algorithm():
    registry = AlgorithmRegistry()
    with pytest.raises(ValueError):
        registry.register("bad", dict, AlgorithmCategory.TRAVERSAL)
    with pytest.raises(ValueError):
        registry.register("bad", lambda: None, AlgorithmCategory.TRAVERSAL)


def test_execute_algorithm_records_metrics(caplog):
    manager = AlgorithmManager()
    graph = {0: [1, 2], 1: [3], 2: [3], 3: []}

    with caplog.at_level(logging.INFO, logger="algokit.algorithm_manager"):
        assert manager.execute_algorithm("bfs", graph, 0) == [0, 1, 2, 3]
    assert "bfs" in caplog.text

    metrics = manager.get_metrics("bfs")
    assert len(metrics) == 1
    assert metrics[0].success
    assert metrics[0].input_size == 4

    summary = manager.get_performance_summary("bfs")
    assert summary["total_executions"] == 1
    assert summary["success_rate"] == 1.0


def test_execute_algorithm_reraises_and_records_failure():
    manager = AlgorithmManager()
    with pytest.raises(NodeNotFoundError):
        manager.execute_algorithm("dfs", {0: []}, 5)

    metrics = manager.get_metrics("dfs")
    assert len(metrics) == 1
    assert not metrics[0].success
    assert "5" in metrics[0].error_message
    assert manager.get_performance_summary("dfs") == {"total_executions": 1, "success_rate": 0.0}


def test_unknown_algorithm():
    with pytest.raises(KeyError):
        AlgorithmManager().execute_algorithm("bellman_ford", {}, 0)


def test_metrics_history_is_bounded():
    manager = AlgorithmManager(ToolkitConfig(max_metrics_history=3))
    for _ in range(5):
        manager.execute_algorithm("kmp", "abcabc", "ca")
    assert len(manager.get_metrics("kmp")) == 3


def test_metrics_can_be_disabled():
    manager = AlgorithmManager(ToolkitConfig(enable_metrics=False))
    manager.execute_algorithm("topological_sort", {0: [1], 1: []})
    assert manager.get_metrics("topological_sort") == []
    assert manager.get_performance_summary("topological_sort") == {}
