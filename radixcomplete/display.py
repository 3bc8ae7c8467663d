"""Debug rendering of the trie structure."""

from __future__ import annotations

from collections.abc import Sequence

from radixcomplete.node import TrieNode

_INDENT = "    "


def format_trie(root: TrieNode, words: Sequence[str]) -> str:
    """Render the tree, one indentation step per level.

    Each node shows the word prefix spelled up to the end of its edge
    and its edge reference; the root shows as ``root``::

         ---root
             |
                  b
             ---(0,0,0)
                 |
                      be
                 ---(0,1,1)
    """
    lines: list[str] = []
    stack: list[tuple[TrieNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        pad = _INDENT * depth
        if depth:
            lines.append(_INDENT * (depth - 1) + "     |")
        if node.substr is None:
            lines.append(f"{pad} ---root")
        else:
            spelled = words[node.substr.word_index][:node.substr.end_index + 1]
            lines.append(f"{pad}      {spelled}")
            lines.append(f"{pad} ---{node.substr!r}")
        stack.extend((child, depth + 1) for child in reversed(list(node.children())))
    return "\n".join(lines)


def print_trie(root: TrieNode, words: Sequence[str]) -> None:
    print("\nTRIE\n")
    print(format_trie(root, words))
