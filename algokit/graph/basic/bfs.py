"""Breadth-first search algorithm."""
from collections import deque
from typing import Any, Deque, List, Set

from ...base import Algorithm
from ...utils import AdjacencyGraph, neighbors_of


class BreadthFirstSearch(Algorithm):
    """广度优先搜索算法实现。

    广度优先搜索（BFS）按层次顺序访问图中的节点：先访问起点，
    再访问所有距离为 1 的节点，然后是距离为 2 的节点，以此类推。

    算法特点：
        - 使用队列（FIFO）来实现
        - 按距离递增的顺序访问节点
        - 节点在第一次被发现时入队，之后不会再次入队
    """

    def execute(self, graph: AdjacencyGraph, start: Any) -> List[Any]:
        """从指定起始节点开始执行广度优先搜索。

        参数:
            graph: 邻接表，键为节点，值为有序的邻居序列
            start: 搜索的起始节点

        返回:
            List[Any]: 按 BFS 顺序访问的节点列表，每个可达节点恰好出现一次

        异常:
            NodeNotFoundError: 起点或任一被访问的节点没有邻接表项

        时间复杂度: O(V + E)
        空间复杂度: O(V)

        示例:
            >>> BreadthFirstSearch().execute({0: [1, 2], 1: [3], 2: [3], 3: []}, 0)
            [0, 1, 2, 3]
        """
        visited: List[Any] = []
        queue: Deque[Any] = deque([start])
        seen: Set[Any] = {start}

        while queue:
            node = queue.popleft()
            visited.append(node)

            for neighbor in neighbors_of(graph, node):
                if neighbor not in seen:
                    seen.add(neighbor)       # 发现即标记，避免重复入队
                    queue.append(neighbor)

        return visited


def bfs(graph: AdjacencyGraph, start: Any) -> List[Any]:
    """``BreadthFirstSearch().execute`` 的函数形式。"""
    return BreadthFirstSearch().execute(graph, start)
