"""Minimum Spanning Tree algorithm using Kruskal's method."""
from __future__ import annotations

from typing import Any, Dict, List, Set, Tuple

from ...base import Algorithm
from ...data_structures.basic.union_find import UnionFind
from ...exceptions import GraphNotConnectedError, NodeNotFoundError
from ...utils import WeightedGraph

Edge = Tuple[Any, Any, float]


class KruskalMST(Algorithm):
    """基于 Kruskal 算法的最小生成树实现。

    接受无向带权图的邻接表（每条边在两个端点中各出现一次），
    按权重升序考察每条边，用 :class:`UnionFind` 的 ``union`` 返回值
    跳过会形成环的边。节点先被映射为 ``0 .. V-1`` 的下标。
    """

    def execute(self, graph: WeightedGraph) -> Tuple[List[Edge], float]:
        """计算图的最小生成树。

        参数:
            graph: 图的邻接表，键为节点，值为邻接节点与权重的列表。

        返回:
            Tuple[List[Edge], float]:
                - 生成树的边集合，每条边表示为 ``(u, v, weight)``。
                - 生成树的总权重。

        异常:
            NodeNotFoundError: 边指向未声明的节点。
            GraphNotConnectedError: 图不连通。
        """
        index: Dict[Any, int] = {node: i for i, node in enumerate(graph)}

        # 收集所有边，避免重复 (u,v) 与 (v,u)
        seen: Set[Tuple[Any, Any]] = set()
        edges: List[Edge] = []
        for u, neighbors in graph.items():
            for v, weight in neighbors:
                if v not in index:
                    raise NodeNotFoundError(v)
                if (u, v) in seen or (v, u) in seen:
                    continue
                seen.add((u, v))
                edges.append((u, v, weight))

        # 按权重排序（稳定排序，相同权重保持发现顺序）
        edges.sort(key=lambda e: e[2])

        forest = UnionFind(len(index))
        mst_edges: List[Edge] = []
        total_weight = 0.0
        for u, v, w in edges:
            if forest.union(index[u], index[v]):
                mst_edges.append((u, v, w))
                total_weight += w

        if index and forest.component_count != 1:
            raise GraphNotConnectedError(
                f"Graph is not connected: {forest.component_count} components"
            )

        return mst_edges, total_weight
