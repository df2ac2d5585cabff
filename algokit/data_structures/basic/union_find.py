from __future__ import annotations

from typing import Dict, List

from algokit.base import Algorithm
from algokit.exceptions import IndexOutOfRangeError


class UnionFind(Algorithm):
    """并查集（不相交集合森林），带路径压缩和按秩合并。

    维护 ``n`` 个元素 ``0 .. n-1`` 的等价类划分。每个元素有一个 ``parent``
    指针（指向自身表示根）和一个 ``rank``（子树高度的上界，只在根上有意义）。

    主要操作：
        - find: 返回元素所在集合的代表元，并把路径上的节点直接挂到根上
        - union: 合并两个集合，返回是否真的发生了合并
        - connected: 判断两个元素是否在同一集合

    时间复杂度: 每次操作均摊 O(α(n))，α 为反阿克曼函数
    空间复杂度: O(n)

    应用场景:
        - Kruskal 最小生成树（用 union 的返回值识别成环的边）
        - 动态连通性查询
        - 等价类划分

    示例:
        >>> uf = UnionFind(5)
        >>> uf.union(0, 1)
        True
        >>> uf.union(1, 2)
        True
        >>> uf.connected(0, 2), uf.connected(0, 3)
        (True, False)
    """

    def __init__(self, n: int) -> None:
        """创建 ``n`` 个单元素集合。

        异常:
            ValueError: ``n`` 为负数
        """
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self._size: List[int] = [1] * n
        self._components = n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int) -> None:
        # 负数下标在 Python 列表中是合法的，这里必须显式拒绝
        if not isinstance(x, int) or isinstance(x, bool) or not 0 <= x < len(self.parent):
            raise IndexOutOfRangeError(x, len(self.parent))

    def find(self, x: int) -> int:
        """返回 ``x`` 所在集合的根，并进行完全路径压缩。

        先沿 ``parent`` 找到根，再把路径上的每个节点直接指向根。
        使用循环而不是递归，长链不会耗尽调用栈。

        异常:
            IndexOutOfRangeError: ``x`` 不在 ``[0, n)`` 中
        """
        self._check(x)
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """合并 ``x`` 和 ``y`` 所在的集合。

        秩较小的根挂到秩较大的根下；秩相等时 ``y`` 的根挂到 ``x`` 的根下，
        并把 ``x`` 的根的秩加一。

        返回:
            bool: 发生合并返回 True；两者已在同一集合返回 False

        异常:
            IndexOutOfRangeError: 任一下标越界
        """
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        elif self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
        self.parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """判断 ``x`` 和 ``y`` 是否属于同一集合。"""
        return self.find(x) == self.find(y)

    @property
    def component_count(self) -> int:
        """当前不相交集合的个数，等于 ``n`` 减去成功合并的次数。"""
        return self._components

    def component_size(self, x: int) -> int:
        """返回 ``x`` 所在集合的元素个数。"""
        return self._size[self.find(x)]

    def groups(self) -> Dict[int, List[int]]:
        """按代表元分组返回所有集合，组内元素升序。"""
        result: Dict[int, List[int]] = {}
        for element in range(len(self.parent)):
            result.setdefault(self.find(element), []).append(element)
        return result

    def execute(self, *args, **kwargs) -> Dict[int, List[int]]:
        """返回当前划分的快照，等同于 :meth:`groups`。"""
        return self.groups()
