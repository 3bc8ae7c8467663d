"""Radix trie prefix completion -- modular package."""

from radixcomplete.builder import build_trie
from radixcomplete.completion import collect_leaves, complete, find_subtree, leaf_word, leaf_words
from radixcomplete.display import format_trie, print_trie
from radixcomplete.node import Indexes, TrieNode
from radixcomplete.prefix import shared_prefix_end
from radixcomplete.trie import RadixTrie
from radixcomplete.wordlist import WordList, prune_prefixes

__all__ = [
    "Indexes",
    "RadixTrie",
    "TrieNode",
    "WordList",
    "build_trie",
    "collect_leaves",
    "complete",
    "find_subtree",
    "format_trie",
    "leaf_word",
    "leaf_words",
    "print_trie",
    "prune_prefixes",
    "shared_prefix_end",
]
