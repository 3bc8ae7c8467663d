"""Word list loading for the trie."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from radixcomplete.trie import RadixTrie

log = logging.getLogger("radixcomplete")

_DEFAULT_PATHS = (
    "words.txt",
    "wordlist.txt",
    "/usr/share/dict/words",
)

_MINIMAL_WORDS = (
    "bear", "bell", "bull", "stock", "stop", "star", "start", "tree",
    "trie", "trip", "trap", "cow", "cat", "car", "cart", "dog", "door",
    "done", "apple", "apply", "ape", "ball", "bat", "batch",
)


def is_valid_word(word: str) -> bool:
    """True for non-empty strings of lowercase ASCII letters."""
    return word.isascii() and word.isalpha() and word.islower()


def prune_prefixes(words: Iterable[str]) -> list[str]:
    """Drop every word that is a strict prefix of another word.

    Order of the surviving words is kept.  A word is a strict prefix of
    some other word exactly when it is a prefix of its successor in
    sorted order.
    """
    ordered = list(dict.fromkeys(words))
    ranked = sorted(ordered)
    prefixes = {
        w for w, nxt in zip(ranked, ranked[1:])
        if nxt.startswith(w)
    }
    return [w for w in ordered if w not in prefixes]


class WordList:
    """Ordered, de-duplicated word list read from a file."""

    def __init__(self, path: str | None = None):
        self.path: str | None = None
        self.words: tuple[str, ...] = ()
        self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)

        search_paths.extend(_DEFAULT_PATHS)

        for candidate in search_paths:
            if os.path.exists(candidate):
                with open(candidate, "r", encoding="utf-8") as f:
                    words = self._clean(line.strip() for line in f)
                if words:
                    self.words = words
                    self.path = candidate
                    log.info("Loaded %s words from %s", f"{len(words):,}", candidate)
                    return
                log.warning("No usable words in %s", candidate)
            elif candidate == path:
                log.warning("Word list %s not found", candidate)

        log.warning("No word list found -- using built-in minimal word list.")
        self.words = self._clean(_MINIMAL_WORDS)

    @staticmethod
    def _clean(lines: Iterable[str]) -> tuple[str, ...]:
        valid = [w for w in lines if is_valid_word(w)]
        unique = list(dict.fromkeys(valid))
        kept = prune_prefixes(unique)
        dropped = len(unique) - len(kept)
        if dropped:
            log.debug("Dropped %d words that prefix other words", dropped)
        return tuple(kept)

    def build(self) -> RadixTrie:
        return RadixTrie(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words
