"""图算法共用的数据结构和辅助函数。

本模块定义了邻接表图的类型别名、一个可选的 ``Graph`` 构建器，
以及所有图算法共享的邻居查找和节点全集计算。
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterator, List, Optional, Sequence, Tuple, Union

from .exceptions import NodeNotFoundError

Node = Hashable
WeightedEdge = Tuple[Node, float]
AdjacencyGraph = Mapping[Node, Sequence[Node]]
WeightedGraph = Mapping[Node, Sequence[WeightedEdge]]


def neighbors_of(graph: Mapping[Node, Sequence[Any]], node: Node) -> Sequence[Any]:
    """返回节点的邻接序列，节点不存在时抛出 ``NodeNotFoundError``。

    图中引用了但没有邻接表项的节点视为错误，而不是空邻居。
    """
    try:
        return graph[node]
    except KeyError:
        raise NodeNotFoundError(node) from None


def node_universe(graph: Mapping[Node, Sequence[Any]], weighted: bool = False) -> List[Node]:
    """返回图中出现过的所有节点。

    顺序为：先按映射顺序列出所有键，再按首次出现顺序列出只作为邻居出现的节点。

    参数:
        graph: 邻接表
        weighted: 邻接序列是否为 ``(neighbor, weight)`` 对

    时间复杂度: O(V + E)
    """
    seen: Dict[Node, None] = dict.fromkeys(graph)
    for entries in graph.values():
        for entry in entries:
            neighbor = entry[0] if weighted else entry
            if neighbor not in seen:
                seen[neighbor] = None
    return list(seen)


class Graph(Mapping):
    """使用邻接表实现的图构建器。

    ``Graph`` 本身是一个只读 ``Mapping``，可以直接传给任何图算法。
    默认是有向图；``directed=False`` 时每条边会在两个端点的邻接表中都添加。
    加入边时会自动创建两个端点，因此构建出的图总是闭合的。

    属性:
        adjacency: 存储图的邻接表，键为节点，值为邻居（或邻居与权重）列表
        directed: 是否为有向图
    """

    def __init__(self, directed: bool = True) -> None:
        """初始化空图。"""
        self.directed = directed
        self.adjacency: Dict[Node, List[Any]] = {}

    def add_node(self, node: Node) -> None:
        """添加一个没有出边的节点；节点已存在时不做任何事。"""
        self.adjacency.setdefault(node, [])

    def add_edge(self, u: Node, v: Node, weight: Optional[float] = None) -> None:
        """添加一条边 ``u -> v``（无向图中同时添加 ``v -> u``）。

        参数:
            u: 起点
            v: 终点
            weight: 边的权重；为 None 时存储无权邻居，否则存储 ``(v, weight)``

        示例:
            >>> graph = Graph()
            >>> graph.add_edge(0, 1)
            >>> graph[0]
            [1]
        """
        self.add_node(u)
        self.add_node(v)
        self.adjacency[u].append(v if weight is None else (v, weight))
        if not self.directed:
            self.adjacency[v].append(u if weight is None else (u, weight))

    def neighbors(self, node: Node) -> List[Any]:
        """返回指定节点的邻居列表。

        异常:
            NodeNotFoundError: 节点不在图中
        """
        return list(neighbors_of(self.adjacency, node))

    def to_dict(self) -> Dict[Node, List[Any]]:
        """返回邻接表的深拷贝字典。"""
        return {node: list(entries) for node, entries in self.adjacency.items()}

    @classmethod
    def from_edges(
        cls,
        edges: Sequence[Union[Tuple[Node, Node], Tuple[Node, Node, float]]],
        directed: bool = True,
    ) -> "Graph":
        """由 ``(u, v)`` 或 ``(u, v, weight)`` 边列表构建图。"""
        graph = cls(directed=directed)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    def __getitem__(self, node: Node) -> List[Any]:
        return self.adjacency[node]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={len(self.adjacency)})"
