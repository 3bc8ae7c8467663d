"""Incremental construction of the compressed trie.

Words are inserted one at a time, in the order given.  Each insertion
walks down from the root comparing the new word against edge labels and
either appends a new leaf to a child group or splits the edge where the
word diverges from it.  Order only affects the shape of the tree; the
set of words it holds does not depend on it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from radixcomplete.node import Indexes, TrieNode
from radixcomplete.prefix import shared_prefix_end

log = logging.getLogger("radixcomplete")


def build_trie(words: Sequence[str]) -> TrieNode:
    """Build a trie holding every word in *words* and return its root.

    *words* must not change afterwards: edge labels point into it.
    Words are expected to be non-empty and lowercase.  An empty word,
    or a word that is a strict prefix of another (in either insertion
    order), raises ``ValueError`` because it cannot end at a leaf.
    Repeated words are skipped.
    """
    root = TrieNode()
    if not words:
        return root

    _check_word(words, 0)
    root.first_child = TrieNode(Indexes(0, 0, len(words[0]) - 1))

    for i in range(1, len(words)):
        _check_word(words, i)
        _insert(root, words, i)

    log.debug("Built trie over %d words", len(words))
    return root


def _check_word(words: Sequence[str], i: int) -> None:
    if not words[i]:
        raise ValueError(f"word {i} is empty")


def _insert(root: TrieNode, words: Sequence[str], i: int) -> None:
    """Insert ``words[i]`` into the trie below *root*."""
    word = words[i]
    last = len(word) - 1

    ptr = root.first_child
    prev = ptr
    start = 0  # start_index shared by every edge in the current child group

    while ptr is not None:
        substr = ptr.substr
        shared = shared_prefix_end(substr.label(words), word[start:substr.end_index + 1])

        if shared == -1:
            prev = ptr
            ptr = ptr.sibling
            continue

        boundary = start + shared
        if boundary >= substr.end_index:
            # whole label matched
            if last == substr.end_index:
                if ptr.is_leaf:
                    log.debug("Skipping duplicate word %r (index %d)", word, i)
                    return
                raise ValueError(
                    f"{word!r} is a prefix of already inserted words "
                    f"and cannot be stored as a leaf"
                )
            if ptr.is_leaf:
                stored = words[substr.word_index]
                raise ValueError(f"{stored!r} is a prefix of {word!r}")
            start = substr.end_index + 1
            ptr = ptr.first_child
            continue

        if boundary == last:
            stored = words[substr.word_index]
            raise ValueError(f"{word!r} is a prefix of {stored!r}")
        _split(ptr, boundary, i, last)
        return

    # no edge in the child group shares a first character with the word
    prev.sibling = TrieNode(Indexes(i, start, last))


def _split(node: TrieNode, boundary: int, i: int, last: int) -> None:
    """Cut *node*'s edge after *boundary* and hang the new word beside the remainder."""
    substr = node.substr
    remainder = TrieNode(
        Indexes(substr.word_index, boundary + 1, substr.end_index),
        first_child=node.first_child,
    )
    substr.end_index = boundary
    remainder.sibling = TrieNode(Indexes(i, boundary + 1, last))
    node.first_child = remainder
