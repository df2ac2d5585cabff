"""Dijkstra single-source shortest path algorithm."""
from __future__ import annotations

import heapq
import logging
import math
from typing import Any, Dict, List, Optional, Set, Tuple

from ...base import Algorithm
from ...exceptions import NegativeWeightError, NodeNotFoundError
from ...utils import WeightedGraph

logger = logging.getLogger(__name__)

Distances = Dict[Any, float]
Predecessors = Dict[Any, Optional[Any]]


def validate_weighted_graph(graph: WeightedGraph, start: Any) -> None:
    """检查起点存在、所有边都指向已声明的节点且权重非负。

    异常:
        NodeNotFoundError: 起点或某条边的终点不是图的键
        NegativeWeightError: 存在负权边
    """
    if start not in graph:
        raise NodeNotFoundError(start)
    for node, edges in graph.items():
        for neighbor, weight in edges:
            if neighbor not in graph:
                raise NodeNotFoundError(neighbor)
            if weight < 0:
                raise NegativeWeightError(node, neighbor, weight)


class Dijkstra(Algorithm):
    """单源最短路径的 Dijkstra 算法实现（数组扫描版本）。

    每一轮线性扫描所有未访问节点，选出暂定距离最小的一个，
    标记为已访问并松弛它的所有出边。每次提取 O(V)，总复杂度 O(V^2 + E)，
    对于本工具包面向的规模足够。需要更好的渐近复杂度时使用
    :class:`HeapDijkstra`，两者结果相同。

    不可达节点的距离为 ``math.inf``，而不是从结果中缺失，
    这样调用方可以区分“不可达”和“不在图中”。
    """

    def execute(self, graph: WeightedGraph, start: Any) -> Distances:
        """计算源点到图中每个节点的最短距离。

        参数:
            graph: 邻接表，键为节点，值为 ``(neighbor, weight)`` 列表，权重必须非负
            start: 源点

        返回:
            Dict[Any, float]: 图中每个键到源点的最短距离

        异常:
            NodeNotFoundError: 源点不在图中，或边指向未声明的节点
            NegativeWeightError: 存在负权边
        """
        distances, _ = self.shortest_path_tree(graph, start)
        return distances

    def shortest_path_tree(self, graph: WeightedGraph, start: Any) -> Tuple[Distances, Predecessors]:
        """计算最短距离以及最短路径树中每个节点的前驱。

        返回:
            Tuple[Distances, Predecessors]: 距离映射和前驱映射；
            源点与不可达节点的前驱为 None
        """
        validate_weighted_graph(graph, start)

        distances: Distances = {node: math.inf for node in graph}
        predecessors: Predecessors = {node: None for node in graph}
        distances[start] = 0
        visited: Set[Any] = set()

        while len(visited) < len(distances):
            # 线性扫描选出暂定距离最小的未访问节点
            current: Any = None
            current_dist = math.inf
            for node, dist in distances.items():
                if node not in visited and dist < current_dist:
                    current, current_dist = node, dist

            if current_dist == math.inf:
                break   # 剩余节点都不可达

            visited.add(current)
            for neighbor, weight in graph[current]:
                if neighbor in visited:
                    continue
                new_dist = current_dist + weight
                if new_dist < distances[neighbor]:
                    distances[neighbor] = new_dist
                    predecessors[neighbor] = current

        unreachable = len(distances) - len(visited)
        if unreachable:
            logger.debug("%d node(s) unreachable from %r", unreachable, start)
        return distances, predecessors


class HeapDijkstra(Dijkstra):
    """使用优先队列（最小堆）的 Dijkstra 实现。

    与 :class:`Dijkstra` 的结果完全相同，提取最小值的代价降为 O(log V)。
    """

    def shortest_path_tree(self, graph: WeightedGraph, start: Any) -> Tuple[Distances, Predecessors]:
        validate_weighted_graph(graph, start)

        distances: Distances = {node: math.inf for node in graph}
        predecessors: Predecessors = {node: None for node in graph}
        distances[start] = 0

        # 堆中存放 (距离, 插入序号, 节点)，序号保证节点本身不参与比较
        counter = 0
        pq: List[Tuple[float, int, Any]] = [(0, counter, start)]

        while pq:
            current_dist, _, node = heapq.heappop(pq)
            if current_dist > distances[node]:
                continue

            for neighbor, weight in graph[node]:
                new_dist = current_dist + weight
                if new_dist < distances[neighbor]:
                    distances[neighbor] = new_dist
                    predecessors[neighbor] = node
                    counter += 1
                    heapq.heappush(pq, (new_dist, counter, neighbor))

        return distances, predecessors


def reconstruct_path(predecessors: Predecessors, start: Any, target: Any) -> List[Any]:
    """根据前驱映射还原从 ``start`` 到 ``target`` 的路径。

    ``target`` 不可达时返回空列表。

    异常:
        NodeNotFoundError: ``target`` 不在前驱映射中
    """
    if target not in predecessors:
        raise NodeNotFoundError(target)
    path: List[Any] = []
    node: Any = target
    while node is not None:
        path.append(node)
        if node == start:
            return path[::-1]
        node = predecessors[node]
    return []


def shortest_paths(graph: WeightedGraph, start: Any, strategy: str = "scan") -> Distances:
    """按 ``strategy`` (``"scan"`` 或 ``"heap"``) 选择实现计算最短距离。"""
    if strategy == "scan":
        return Dijkstra().execute(graph, start)
    if strategy == "heap":
        return HeapDijkstra().execute(graph, start)
    raise ValueError(f"Unknown shortest path strategy: {strategy!r}")
