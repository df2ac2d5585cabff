from __future__ import annotations

from typing import List, Sequence, Union

from algokit.base import Algorithm
from algokit.exceptions import IndexOutOfRangeError, InvalidRangeError

Number = Union[int, float]


class SegmentTree(Algorithm):
    """区间求和线段树（静态）。

    由一个固定序列构建一次，之后只读。树以隐式二叉树的形式存储在长度为
    ``4n`` 的列表中：节点 ``i`` 的子节点是 ``2i+1`` 和 ``2i+2``，
    叶子保存一个原始元素，内部节点保存两个子树区间之和。

    时间复杂度:
        - 构建: O(n)
        - range_sum: O(log n)
    空间复杂度: O(n)

    递归深度为树高 O(log n)。

    示例:
        >>> SegmentTree([1, 3, 5, 7, 9]).range_sum(1, 3)
        15
    """

    def __init__(self, values: Sequence[Number]) -> None:
        self.n = len(values)
        self.tree: List[Number] = [0] * (4 * self.n)
        if self.n:
            self._build(values, 0, 0, self.n - 1)

    def _build(self, values: Sequence[Number], node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = values[start]
            return
        mid = (start + end) // 2
        self._build(values, 2 * node + 1, start, mid)
        self._build(values, 2 * node + 2, mid + 1, end)
        self.tree[node] = self.tree[2 * node + 1] + self.tree[2 * node + 2]

    def range_sum(self, left: int, right: int) -> Number:
        """返回闭区间 ``[left, right]`` 内元素之和（下标从 0 开始）。

        参数:
            left: 区间左端点
            right: 区间右端点（包含）

        异常:
            IndexOutOfRangeError: 端点不是 ``[0, n)`` 中的整数（空树上的任何查询）
            InvalidRangeError: ``left > right``
        """
        for bound in (left, right):
            if not isinstance(bound, int) or isinstance(bound, bool) or not 0 <= bound < self.n:
                raise IndexOutOfRangeError(bound, self.n)
        if left > right:
            raise InvalidRangeError(f"left bound {left} is greater than right bound {right}")
        return self._query(0, 0, self.n - 1, left, right)

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> Number:
        """把查询区间与节点覆盖区间比较后递归求和。

        - 不相交：贡献 0
        - 完全包含：直接返回预先计算好的节点值
        - 部分重叠：递归到两个子节点并相加
        """
        if right < start or end < left:
            return 0
        if left <= start and end <= right:
            return self.tree[node]
        mid = (start + end) // 2
        return (self._query(2 * node + 1, start, mid, left, right)
                + self._query(2 * node + 2, mid + 1, end, left, right))

    @property
    def total(self) -> Number:
        """所有元素之和，空树为 0。"""
        return self.tree[0] if self.n else 0

    def __len__(self) -> int:
        return self.n

    def execute(self, left: int, right: int) -> Number:
        """:meth:`range_sum` 的 Algorithm 接口形式。"""
        return self.range_sum(left, right)
