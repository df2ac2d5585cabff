"""Topological ordering of directed acyclic graphs.

Two independent algorithms are provided. Both treat nodes that appear only as
neighbours as sinks, so they order the same node universe.

* :class:`DFSTopologicalSort` reverses a depth-first post-order. It requires
  acyclic input and does not check for cycles.
* :class:`KahnTopologicalSort` repeatedly removes zero in-degree nodes and
  reports cycles through :class:`TopologicalOrder`.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterator, List, Set, Tuple

from ...base import Algorithm
from ...exceptions import CycleDetectedError
from ...utils import AdjacencyGraph, node_universe

logger = logging.getLogger(__name__)


@dataclass
class TopologicalOrder:
    """Result of Kahn's algorithm.

    ``order`` holds every node that could be released. When the graph has a
    cycle it is shorter than ``node_count`` and ``remaining`` lists the nodes
    on or downstream of a cycle, in node-universe order.
    """

    order: List[Any]
    node_count: int
    remaining: List[Any] = field(default_factory=list)

    @property
    def cycle_detected(self) -> bool:
        return len(self.order) < self.node_count

    def unwrap(self) -> List[Any]:
        """Return the ordering, raising :class:`CycleDetectedError` on a cycle."""
        if self.cycle_detected:
            raise CycleDetectedError(self.order, self.remaining)
        return list(self.order)

    def __bool__(self) -> bool:
        return not self.cycle_detected

    def __iter__(self) -> Iterator[Any]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)


def _successors(graph: AdjacencyGraph, node: Any) -> Tuple[Any, ...]:
    return tuple(graph.get(node, ()))


class DFSTopologicalSort(Algorithm):
    """基于深度优先后序的拓扑排序。

    从每个尚未访问的节点（按映射顺序）出发做 DFS，节点的所有后代处理完后
    将其追加到结果中，最后整体反转。使用显式栈，因此与递归版本的后序相同，
    但不受递归深度限制。

    前置条件：输入必须是有向无环图。该方法不检测环；输入有环时返回的是
    包含所有节点但不满足拓扑性质的序列。需要检测环时使用
    :class:`KahnTopologicalSort`。
    """

    def execute(self, graph: AdjacencyGraph) -> List[Any]:
        """返回图的一个拓扑序。

        参数:
            graph: 邻接表；只作为邻居出现的节点视为没有出边

        返回:
            List[Any]: 每条边 ``(u, v)`` 中 ``u`` 都排在 ``v`` 之前的节点序列

        时间复杂度: O(V + E)
        """
        seen: Set[Any] = set()
        postorder: List[Any] = []

        for root in node_universe(graph):
            if root in seen:
                continue
            seen.add(root)
            stack: List[Tuple[Any, Iterator[Any]]] = [(root, iter(_successors(graph, root)))]

            while stack:
                node, children = stack[-1]
                for child in children:
                    if child not in seen:
                        seen.add(child)
                        stack.append((child, iter(_successors(graph, child))))
                        break
                else:
                    # 所有后代处理完毕
                    stack.pop()
                    postorder.append(node)

        postorder.reverse()
        return postorder


class KahnTopologicalSort(Algorithm):
    """Kahn 算法（基于入度和队列的拓扑排序），同时用作环检测器。

    一次扫描所有边得到每个节点的入度，把入度为 0 的节点放入队列；
    反复出队一个节点追加到结果，并把它的邻居入度减一，减到 0 的邻居入队。
    若结果长度小于节点总数（包括只作为邻居出现的节点），说明图中有环。
    """

    def execute(self, graph: AdjacencyGraph) -> TopologicalOrder:
        """计算拓扑序。

        参数:
            graph: 邻接表

        返回:
            TopologicalOrder: ``cycle_detected`` 为 False 时 ``order`` 是合法拓扑序；
            为 True 时 ``order`` 是能释放的前缀，``remaining`` 是卡在环上的节点。
            空图返回空序列且 ``cycle_detected`` 为 False。
        """
        universe = node_universe(graph)
        in_degree: Dict[Any, int] = dict.fromkeys(universe, 0)
        for edges in graph.values():
            for neighbor in edges:
                in_degree[neighbor] += 1

        queue: Deque[Any] = deque(node for node in universe if in_degree[node] == 0)
        order: List[Any] = []

        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in _successors(graph, node):
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        result = TopologicalOrder(order=order, node_count=len(universe))
        if result.cycle_detected:
            result.remaining = [node for node in universe if in_degree[node] > 0]
            logger.debug(
                "cycle detected: %d of %d node(s) ordered", len(order), len(universe)
            )
        return result


def topological_sort(graph: AdjacencyGraph) -> List[Any]:
    """``DFSTopologicalSort().execute`` 的函数形式；输入必须无环。"""
    return DFSTopologicalSort().execute(graph)


def topological_sort_kahn(graph: AdjacencyGraph) -> TopologicalOrder:
    """``KahnTopologicalSort().execute`` 的函数形式。"""
    return KahnTopologicalSort().execute(graph)
