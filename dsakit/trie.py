"""Prefix trees: a word trie, a wildcard word dictionary and trie-based searches."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from typing import Optional


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


def _insert(root: _TrieNode, word: str) -> None:
    node = root
    for ch in word:
        node = node.children.setdefault(ch, _TrieNode())
    node.is_end = True


def _words_below(node: _TrieNode, prefix: str) -> Iterator[str]:
    """Yield every word under ``node`` in lexicographic order."""
    if node.is_end:
        yield prefix
    for ch in sorted(node.children):
        yield from _words_below(node.children[ch], prefix + ch)


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.insert(word)

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __iter__(self) -> Iterator[str]:
        return _words_below(self._root, "")

    def _find(self, prefix: str) -> Optional[_TrieNode]:
        node = self._root
        for ch in prefix:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return True if some inserted word begins with ``prefix``."""
        return self._find(prefix) is not None

    def delete(self, word: str) -> bool:
        """Remove ``word``, pruning nodes no other word needs; return whether it was present."""
        path: list[tuple[_TrieNode, str]] = []
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child
        if not node.is_end:
            return False
        node.is_end = False
        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.children or child.is_end:
                break
            del parent.children[ch]
        return True

    def suggestions(self, prefix: str, limit: int = 3) -> list[str]:
        """Return up to ``limit`` words starting with ``prefix``, in lexicographic order."""
        node = self._find(prefix)
        if node is None:
            return []
        return list(islice(_words_below(node, prefix), limit))


class WordDictionary:
    """A word store whose searches may use ``.`` to match any one character."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def add_word(self, word: str) -> None:
        """Add ``word`` to the dictionary."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Return True if a stored word matches ``word``, ``.`` matching any character."""
        return self._match(self._root, word, 0)

    def _match(self, node: _TrieNode, word: str, position: int) -> bool:
        for index in range(position, len(word)):
            ch = word[index]
            if ch == ".":
                return any(
                    self._match(child, word, index + 1)
                    for child in node.children.values()
                )
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.is_end


def index_pairs(text: str, words: Iterable[str]) -> list[tuple[int, int]]:
    """Return every ``(i, j)`` such that ``text[i:j + 1]`` is one of ``words``.

    Pairs are ordered by ``i`` and then by ``j``.
    """
    root = _TrieNode()
    for word in words:
        _insert(root, word)
    result: list[tuple[int, int]] = []
    for start in range(len(text)):
        node = root
        for end, ch in enumerate(text[start:], start=start):
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            if node.is_end:
                result.append((start, end))
    return result


def suggested_products(products: Iterable[str], search_word: str) -> list[list[str]]:
    """For each prefix of ``search_word`` return up to three matching products.

    Suggestions are the lexicographically smallest distinct products sharing
    the prefix typed so far.
    """
    trie = Trie(products)
    return [
        trie.suggestions(search_word[: length])
        for length in range(1, len(search_word) + 1)
    ]