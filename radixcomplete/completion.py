"""Prefix completion over a built trie."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from radixcomplete.node import TrieNode
from radixcomplete.prefix import shared_prefix_end


def find_subtree(root: TrieNode, words: Sequence[str], prefix: str) -> TrieNode | None:
    """Node whose edge the prefix ends on, or None if no word starts with it.

    The prefix may stop part-way through the returned node's edge; every
    leaf below that node still starts with the prefix.
    """
    if not prefix:
        raise ValueError("prefix must be a non-empty string")

    rest = prefix
    node = root.first_child
    while node is not None:
        label = node.substr.label(words)
        shared = shared_prefix_end(label, rest)
        if shared == -1:
            node = node.sibling
            continue

        matched = shared + 1
        if matched == len(rest):
            return node
        if matched < len(label):
            # diverges mid-edge
            return None
        rest = rest[matched:]
        node = node.first_child
    return None


def collect_leaves(node: TrieNode) -> list[TrieNode]:
    """Every leaf in the subtree rooted at *node* (including *node* itself)."""
    leaves: list[TrieNode] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if current.is_leaf:
            leaves.append(current)
            continue
        stack.extend(reversed(list(current.children())))
    return leaves


def complete(root: TrieNode, words: Sequence[str], prefix: str) -> list[TrieNode]:
    """Leaves of all words that start with *prefix*.

    Order is unspecified.  An empty list means no stored word has the
    prefix.  An empty *prefix* raises ``ValueError``.
    """
    node = find_subtree(root, words, prefix)
    if node is None:
        return []
    return collect_leaves(node)


def leaf_word(leaf: TrieNode, words: Sequence[str]) -> str:
    """The full word a leaf stands for."""
    return words[leaf.substr.word_index]


def leaf_words(leaves: Iterable[TrieNode], words: Sequence[str]) -> list[str]:
    return [leaf_word(leaf, words) for leaf in leaves]
