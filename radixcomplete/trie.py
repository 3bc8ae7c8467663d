"""Radix trie over a fixed word list, with prefix completion."""

from __future__ import annotations

from collections.abc import Iterable

from radixcomplete.builder import build_trie
from radixcomplete.completion import collect_leaves, complete, find_subtree, leaf_word, leaf_words
from radixcomplete.display import format_trie
from radixcomplete.node import TrieNode


class RadixTrie:
    """Compressed trie built once from an ordered word list.

    The word list is frozen into a tuple because edge labels refer to it
    by index.  There is no way to add words afterwards.
    """

    def __init__(self, words: Iterable[str] = ()):
        self.words: tuple[str, ...] = tuple(words)
        self.root: TrieNode = build_trie(self.words)

    def complete(self, prefix: str) -> list[TrieNode]:
        """Leaves of every word starting with *prefix* (unordered)."""
        return complete(self.root, self.words, prefix)

    def completions(self, prefix: str) -> list[str]:
        """Words starting with *prefix*, sorted."""
        return sorted(leaf_words(self.complete(prefix), self.words))

    def is_word(self, word: str) -> bool:
        if not word:
            return False
        node = find_subtree(self.root, self.words, word)
        return node is not None and node.is_leaf and leaf_word(node, self.words) == word

    def is_prefix(self, prefix: str) -> bool:
        if not prefix:
            return bool(self.root.first_child)
        return find_subtree(self.root, self.words, prefix) is not None

    def leaves(self) -> list[TrieNode]:
        if self.root.first_child is None:
            return []
        return collect_leaves(self.root)

    def format(self) -> str:
        return format_trie(self.root, self.words)

    def __len__(self) -> int:
        return len(self.leaves())

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __repr__(self) -> str:
        return f"RadixTrie({len(self)} words)"
