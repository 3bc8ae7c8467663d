"""Trie node and edge-reference types."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class Indexes:
    """Edge label as a reference into the word list.

    Identifies ``words[word_index][start_index:end_index + 1]``.  The
    word at ``word_index`` only supplies the characters; it need not be
    the word stored at a leaf below this edge.
    """

    __slots__ = ("word_index", "start_index", "end_index")

    def __init__(self, word_index: int, start_index: int, end_index: int):
        self.word_index = word_index
        self.start_index = start_index
        self.end_index = end_index  # inclusive

    def label(self, words: Sequence[str]) -> str:
        """The characters this reference addresses."""
        return words[self.word_index][self.start_index:self.end_index + 1]

    def __len__(self) -> int:
        return self.end_index - self.start_index + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Indexes):
            return NotImplemented
        return (
            self.word_index == other.word_index
            and self.start_index == other.start_index
            and self.end_index == other.end_index
        )

    def __repr__(self) -> str:
        return f"({self.word_index},{self.start_index},{self.end_index})"


class TrieNode:
    """Node of the compressed trie.

    ``substr`` is the label of the edge leading into this node (``None``
    for the root).  Children hang off ``first_child`` and are chained
    through ``sibling``.  A node without children is a leaf.
    """

    __slots__ = ("substr", "first_child", "sibling")

    def __init__(
        self,
        substr: Indexes | None = None,
        first_child: TrieNode | None = None,
        sibling: TrieNode | None = None,
    ):
        self.substr = substr
        self.first_child = first_child
        self.sibling = sibling

    @property
    def is_leaf(self) -> bool:
        return self.first_child is None

    @property
    def is_root(self) -> bool:
        return self.substr is None

    def children(self) -> Iterator[TrieNode]:
        """Iterate over the child group, first child first."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.sibling

    def __repr__(self) -> str:
        if self.substr is None:
            return "TrieNode(root)"
        kind = "leaf" if self.is_leaf else "inner"
        return f"TrieNode({kind} {self.substr!r})"
