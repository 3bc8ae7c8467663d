"""Substring comparison used by insertion and completion."""

from __future__ import annotations


def shared_prefix_end(a: str, b: str) -> int:
    """Index of the last leading character *a* and *b* have in common.

    Returns ``-1`` when not even the first character matches, so the
    shared-prefix length is always ``shared_prefix_end(a, b) + 1``.

    >>> shared_prefix_end("bear", "bell")
    1
    >>> shared_prefix_end("bull", "stock")
    -1
    """
    last = -1
    for i in range(min(len(a), len(b))):
        if a[i] != b[i]:
            break
        last = i
    return last
