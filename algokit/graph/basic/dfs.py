"""Depth-first search algorithm."""
from typing import Any, List, Set

from ...base import Algorithm
from ...utils import AdjacencyGraph, neighbors_of


class DepthFirstSearch(Algorithm):
    """深度优先搜索算法的递归实现。

    深度优先搜索（DFS）沿着一条路径一直走到底，然后回溯到上一个节点，
    继续探索其他未访问的路径。本实现输出先序访问顺序：
    节点的邻居按邻接序列中的顺序访问，先递归完一个邻居再处理下一个。

    递归深度等于最长的探索路径长度，深图请使用 :class:`IterativeDepthFirstSearch`。
    """

    def execute(self, graph: AdjacencyGraph, start: Any) -> List[Any]:
        """从指定起始节点开始执行深度优先搜索。

        参数:
            graph: 邻接表，键为节点，值为有序的邻居序列
            start: 搜索的起始节点

        返回:
            List[Any]: 按 DFS 先序访问的节点列表

        异常:
            NodeNotFoundError: 起点或任一被访问的节点没有邻接表项

        时间复杂度: O(V + E)
        空间复杂度: O(V) - 访问集合和递归调用栈

        示例:
            >>> DepthFirstSearch().execute({0: [1, 2], 1: [3], 2: [3], 3: []}, 0)
            [0, 1, 3, 2]
        """
        visited: List[Any] = []
        seen: Set[Any] = set()
        self._dfs(graph, start, visited, seen)
        return visited

    def _dfs(self, graph: AdjacencyGraph, node: Any, visited: List[Any], seen: Set[Any]) -> None:
        """递归访问 ``node`` 及其所有未访问的后代。

        ``visited`` 和 ``seen`` 由 :meth:`execute` 为每次调用单独创建，
        因此不同的遍历之间不共享状态。
        """
        neighbors = neighbors_of(graph, node)
        seen.add(node)
        visited.append(node)

        for neighbor in neighbors:
            if neighbor not in seen:
                self._dfs(graph, neighbor, visited, seen)


class IterativeDepthFirstSearch(Algorithm):
    """使用显式栈的深度优先搜索。

    约定：邻居按邻接序列的逆序压栈，节点在出栈时才标记为已访问。
    这样先出栈的总是邻接序列中靠前的邻居，输出顺序与
    :class:`DepthFirstSearch` 的递归先序完全一致，且不受递归深度限制。
    """

    def execute(self, graph: AdjacencyGraph, start: Any) -> List[Any]:
        """从指定起始节点开始执行深度优先搜索。

        参数:
            graph: 邻接表
            start: 搜索的起始节点

        返回:
            List[Any]: 按 DFS 先序访问的节点列表

        异常:
            NodeNotFoundError: 起点或任一被访问的节点没有邻接表项
        """
        visited: List[Any] = []
        seen: Set[Any] = set()
        stack: List[Any] = [start]

        while stack:
            node = stack.pop()
            if node in seen:
                continue
            seen.add(node)
            visited.append(node)

            for neighbor in reversed(neighbors_of(graph, node)):
                if neighbor not in seen:
                    stack.append(neighbor)

        return visited


def dfs(graph: AdjacencyGraph, start: Any) -> List[Any]:
    """``DepthFirstSearch().execute`` 的函数形式。"""
    return DepthFirstSearch().execute(graph, start)


def dfs_iterative(graph: AdjacencyGraph, start: Any) -> List[Any]:
    """``IterativeDepthFirstSearch().execute`` 的函数形式。"""
    return IterativeDepthFirstSearch().execute(graph, start)
