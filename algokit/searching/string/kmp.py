"""Knuth-Morris-Pratt 字符串匹配算法。"""
from typing import List

from ...base import Algorithm


def build_lps(pattern: str) -> List[int]:
    """构建 KMP 的失配表。

    ``lps[i]`` 是 ``pattern[:i + 1]`` 中既是真前缀又是后缀的最长子串长度。

    示例:
        >>> build_lps("ababaca")
        [0, 0, 1, 2, 3, 0, 1]
    """
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]    # 回退到更短的候选前缀，i 不前进
        else:
            lps[i] = 0
            i += 1
    return lps


class KMPSearch(Algorithm):
    """使用 KMP 算法在文本中查找模式串。

    预处理模式串得到失配表后，文本指针从不回退：失配时只把模式指针
    移到失配表给出的位置。

    时间复杂度: O(n + m) - n 为文本长度，m 为模式长度
    空间复杂度: O(m)
    """

    def execute(self, text: str, pattern: str) -> int:
        """返回 ``pattern`` 在 ``text`` 中第一次出现的下标，不存在时返回 -1。

        空模式串在下标 0 处匹配。

        示例:
            >>> KMPSearch().execute("hello world", "world")
            6
        """
        matches = self._scan(text, pattern, first_only=True)
        return matches[0] if matches else -1

    def find_all(self, text: str, pattern: str) -> List[int]:
        """返回所有（可重叠的）匹配起始下标。"""
        return self._scan(text, pattern, first_only=False)

    def _scan(self, text: str, pattern: str, first_only: bool) -> List[int]:
        if not pattern:
            return [0] if first_only else list(range(len(text) + 1))

        lps = build_lps(pattern)
        matches: List[int] = []
        j = 0
        for i, char in enumerate(text):
            while j and char != pattern[j]:
                j = lps[j - 1]
            if char == pattern[j]:
                j += 1
            if j == len(pattern):
                matches.append(i - j + 1)
                if first_only:
                    break
                j = lps[j - 1]
        return matches
