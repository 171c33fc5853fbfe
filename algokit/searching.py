"""Searching in sorted sequences and substring matching."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any

BASE = 256
PRIME = 101


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Index of ``key`` in the ascending sequence ``items``, or None if absent."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return None


def rabin_karp(text: str, pattern: str) -> list[int]:
    """Zero-based start positions of ``pattern`` in ``text`` using a rolling hash."""
    text_len, pattern_len = len(text), len(pattern)
    if pattern_len > text_len:
        return []

    power = pow(BASE, pattern_len - 1, PRIME) if pattern_len else 1
    pattern_hash = 0
    window_hash = 0
    for pattern_char, text_char in zip(pattern, text):
        pattern_hash = (BASE * pattern_hash + ord(pattern_char)) % PRIME
        window_hash = (BASE * window_hash + ord(text_char)) % PRIME

    matches: list[int] = []
    last = text_len - pattern_len
    for start in range(last + 1):
        if pattern_hash == window_hash and text[start:start + pattern_len] == pattern:
            matches.append(start)
        if start < last:
            window_hash = (
                BASE * (window_hash - ord(text[start]) * power)
                + ord(text[start + pattern_len])
            ) % PRIME
    return matches


def build_lps(pattern: str) -> list[int]:
    """Length of the longest proper prefix that is also a suffix, for each prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Zero-based start positions of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        return []
    lps = build_lps(pattern)
    matches: list[int] = []
    matched = 0
    for index, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = lps[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                matches.append(index - matched + 1)
                matched = lps[matched - 1]
    return matches