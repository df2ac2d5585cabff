from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from algokit.base import Algorithm


@dataclass
class TrieNode:
    """前缀树节点。

    属性:
        children: 从单个字符到子节点的映射，键唯一
        is_word: 从根到该节点的路径是否是一个完整插入过的单词
    """
    children: Dict[str, TrieNode] = field(default_factory=dict)
    is_word: bool = False


class Trie(Algorithm):
    """字符键前缀树。

    从根到任意节点的路径恰好拼出到达它所用的前缀，节点不会被两条路径共享。
    节点在插入时按需创建，从不删除。

    主要操作：
        - insert: 插入单词，重复插入没有额外效果
        - search: 只有完整插入过的单词才返回 True
        - starts_with: 只要有单词以该前缀开头就返回 True

    时间复杂度: 三个操作均为 O(L)，L 为输入长度
    空间复杂度: O(所有单词的字符总数)

    所有操作都用循环实现，调用栈深度与单词长度无关。

    示例:
        >>> trie = Trie()
        >>> trie.insert("apple")
        >>> trie.search("app"), trie.starts_with("app")
        (False, True)
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._word_count = 0

    def insert(self, word: str) -> None:
        """插入一个单词，沿途按需创建子节点并标记最后一个节点。

        参数:
            word: 要插入的单词，可以是空字符串
        """
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _walk(self, prefix: str) -> Optional[TrieNode]:
        """沿前缀向下走，路径不存在时返回 None。"""
        node = self.root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """判断 ``word`` 是否作为完整单词插入过。

        只是其他单词前缀的字符串返回 False。
        """
        node = self._walk(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """判断是否存在以 ``prefix`` 开头的已插入单词。空前缀总是返回 True。"""
        return self._walk(prefix) is not None

    def words_with_prefix(self, prefix: str = "") -> List[str]:
        """返回所有以 ``prefix`` 开头的完整单词。

        使用显式栈做先序遍历，子节点按插入顺序访问。
        """
        start = self._walk(prefix)
        if start is None:
            return []

        words: List[str] = []
        stack: List[Tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_word:
                words.append(path)
            for char, child in reversed(list(node.children.items())):
                stack.append((child, path + char))
        return words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._word_count

    def __iter__(self) -> Iterator[str]:
        return iter(self.words_with_prefix(""))

    def execute(self, *args, **kwargs) -> List[str]:
        """返回前缀树中所有单词的快照。"""
        return self.words_with_prefix("")
