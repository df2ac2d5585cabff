"""Rabin-Karp string matching using a rolling hash."""
from __future__ import annotations

from typing import List

from ...base import Algorithm


class RabinKarpSearch(Algorithm):
    """Rabin-Karp 字符串匹配。

    用多项式哈希比较模式串和文本窗口，窗口右移时在 O(1) 内更新哈希值；
    哈希相等时再逐字符比较，排除冲突。

    参数:
        base: 多项式的底数，默认 256
        modulus: 取模用的素数，默认 101

    时间复杂度: 平均 O(n + m)，最坏 O(n * m)（大量哈希冲突时）
    空间复杂度: O(1)
    """

    def __init__(self, base: int = 256, modulus: int = 101) -> None:
        if base <= 0 or modulus <= 0:
            raise ValueError("base and modulus must be positive")
        self.base = base
        self.modulus = modulus

    def _hash(self, text: str) -> int:
        value = 0
        for char in text:
            value = (value * self.base + ord(char)) % self.modulus
        return value

    def execute(self, text: str, pattern: str) -> int:
        """返回 ``pattern`` 在 ``text`` 中第一次出现的下标，不存在时返回 -1。

        空模式串在下标 0 处匹配。

        示例:
            >>> RabinKarpSearch().execute("abracadabra", "cad")
            4
        """
        matches = self._scan(text, pattern, first_only=True)
        return matches[0] if matches else -1

    def find_all(self, text: str, pattern: str) -> List[int]:
        """返回所有（可重叠的）匹配起始下标。"""
        return self._scan(text, pattern, first_only=False)

    def _scan(self, text: str, pattern: str, first_only: bool) -> List[int]:
        m, n = len(pattern), len(text)
        if m == 0:
            return [0] if first_only else list(range(n + 1))
        if m > n:
            return []

        # 最高位的权重 base^(m-1) mod p，用于移出窗口最左边的字符
        high = pow(self.base, m - 1, self.modulus)
        target = self._hash(pattern)
        window = self._hash(text[:m])
        matches: List[int] = []

        for i in range(n - m + 1):
            if window == target and text[i:i + m] == pattern:
                matches.append(i)
                if first_only:
                    break
            if i + m < n:
                window = (window - ord(text[i]) * high) % self.modulus
                window = (window * self.base + ord(text[i + m])) % self.modulus
        return matches
