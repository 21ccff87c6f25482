"""Naive substring search."""

from __future__ import annotations

from collections.abc import Sequence


def find_match(pattern: Sequence, text: Sequence) -> int:
    """Return the first position of *pattern* in *text*, or -1 if it is absent.

    Every starting position is tried in turn. An empty pattern matches at
    position 0.
    """
    width = len(pattern)
    for start in range(len(text) - width + 1):
        if text[start:start + width] == pattern:
            return start
    return -1